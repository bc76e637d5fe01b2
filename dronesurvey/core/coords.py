"""
Value types shared by the route engine.
Geographic points are (lat, lng) in decimal degrees; planar points are local tangent-plane meters.
"""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GeoPoint:
    """A location in decimal degrees. Reference system (regional grid vs. standard) is implied by context."""

    lat: float
    lng: float

    @classmethod
    def from_any(cls, value: Any) -> "GeoPoint":
        """
        Build from a GeoPoint, a dict with 'lat' and 'lng' (or 'lon'), or a (lat, lng, ...) sequence.
        Raises ValueError for anything else.
        """
        if isinstance(value, GeoPoint):
            return cls(value.lat, value.lng)
        if isinstance(value, dict):
            lng = value.get("lng", value.get("lon"))
            if "lat" not in value or lng is None:
                raise ValueError(f"point needs 'lat' and 'lng': {value!r}")
            return cls(float(value["lat"]), float(lng))
        try:
            return cls(float(value[0]), float(value[1]))
        except (TypeError, IndexError) as e:
            raise ValueError(f"cannot read point from {value!r}") from e

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lng": self.lng}


@dataclass(frozen=True)
class Waypoint(GeoPoint):
    """GeoPoint with flight height (m), speed (m/s) and 0-based position in the ordered path."""

    height: float = 50.0
    speed: float = 5.0
    index: int = 0

    def to_dict(self) -> dict:
        return {
            "lat": self.lat,
            "lng": self.lng,
            "height": self.height,
            "speed": self.speed,
            "index": self.index,
        }


@dataclass(frozen=True)
class PlanarPoint:
    """Local tangent-plane position in meters relative to a projection origin."""

    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y
