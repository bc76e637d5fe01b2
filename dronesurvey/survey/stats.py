"""
Route statistics: total distance, estimated flight time, photo count.
Distance uses the same short-range flat approximation as the planner (degree-space
Euclidean distance scaled by R * pi / 180), not a great-circle sum.
"""
import math
from dataclasses import dataclass
from typing import Sequence

from dronesurvey.core.coords import GeoPoint
from dronesurvey.core.transform import EARTH_RADIUS_M

FALLBACK_SPEED_MS = 5.0


@dataclass(frozen=True)
class RouteStats:
    total_distance: float = 0.0  # m
    flight_time: float = 0.0  # s, rounded up
    photo_count: int = 0

    def to_dict(self) -> dict:
        return {
            "totalDistance": self.total_distance,
            "flightTime": self.flight_time,
            "photoCount": self.photo_count,
        }


def compute_stats(waypoints: Sequence[GeoPoint]) -> RouteStats:
    """
    Stats for an ordered waypoint sequence. Fewer than 2 points gives zeroed stats.
    Flight time uses the first waypoint's speed (fallback 5 m/s when missing or zero).
    """
    if len(waypoints) < 2:
        return RouteStats()
    total = 0.0
    for p1, p2 in zip(waypoints, waypoints[1:]):
        total += math.hypot(p2.lng - p1.lng, p2.lat - p1.lat) * EARTH_RADIUS_M * math.pi / 180.0
    speed = getattr(waypoints[0], "speed", None) or FALLBACK_SPEED_MS
    return RouteStats(
        total_distance=round(total, 2),
        flight_time=float(math.ceil(total / speed)),
        photo_count=len(waypoints),
    )
