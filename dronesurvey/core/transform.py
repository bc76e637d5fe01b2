"""
Geodetic transform between the China regional obfuscated grid (GCJ-02) and the standard
satellite-positioning system (WGS-84).

Inside the supported region the regional grid is the standard position plus an empirical
offset; outside it both conversions are the identity. to_standard() subtracts the offset
evaluated at the regional point itself (one step, no fixed-point iteration), so a round trip
is accurate to a few meters rather than exactly.
"""
import math
from typing import Iterable, List, Tuple

from dronesurvey.core.coords import GeoPoint, Waypoint

EARTH_RADIUS_M = 6378137.0
ECCENTRICITY_SQ = 0.00669342162296594323

# Supported region (degrees)
REGION_MIN_LNG = 72.004
REGION_MAX_LNG = 137.8347
REGION_MIN_LAT = 0.8293
REGION_MAX_LAT = 55.8271


def in_region(lat: float, lng: float) -> bool:
    """True if (lat, lng) lies inside the bounding region where the regional offset applies."""
    return REGION_MIN_LNG <= lng <= REGION_MAX_LNG and REGION_MIN_LAT <= lat <= REGION_MAX_LAT


def _offset_lat(x: float, y: float) -> float:
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + 0.1 * x * y + 0.2 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * math.pi) + 40.0 * math.sin(y / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * math.pi) + 320.0 * math.sin(y * math.pi / 30.0)) * 2.0 / 3.0
    return ret


def _offset_lng(x: float, y: float) -> float:
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + 0.1 * x * y + 0.1 * math.sqrt(abs(x))
    ret += (20.0 * math.sin(6.0 * x * math.pi) + 20.0 * math.sin(2.0 * x * math.pi)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * math.pi) + 40.0 * math.sin(x / 3.0 * math.pi)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * math.pi) + 300.0 * math.sin(x / 30.0 * math.pi)) * 2.0 / 3.0
    return ret


def regional_offset(lat: float, lng: float) -> Tuple[float, float]:
    """
    Offset (dlat, dlng) in degrees that the regional grid adds at (lat, lng).
    Correction polynomials are evaluated at (lng - 105, lat - 35) and scaled by the local
    radii of curvature of the reference ellipsoid.
    """
    dlat = _offset_lat(lng - 105.0, lat - 35.0)
    dlng = _offset_lng(lng - 105.0, lat - 35.0)
    radlat = math.radians(lat)
    magic = 1.0 - ECCENTRICITY_SQ * math.sin(radlat) ** 2
    sqrt_magic = math.sqrt(magic)
    dlat = (dlat * 180.0) / ((EARTH_RADIUS_M * (1.0 - ECCENTRICITY_SQ)) / (magic * sqrt_magic) * math.pi)
    dlng = (dlng * 180.0) / (EARTH_RADIUS_M / sqrt_magic * math.cos(radlat) * math.pi)
    return dlat, dlng


def to_regional(point: GeoPoint) -> GeoPoint:
    """Standard -> regional grid. Identity outside the supported region."""
    if not in_region(point.lat, point.lng):
        return point
    dlat, dlng = regional_offset(point.lat, point.lng)
    return GeoPoint(point.lat + dlat, point.lng + dlng)


def to_standard(point: GeoPoint) -> GeoPoint:
    """Regional grid -> standard, single-step approximation. Identity outside the supported region."""
    if not in_region(point.lat, point.lng):
        return point
    dlat, dlng = regional_offset(point.lat, point.lng)
    return GeoPoint(point.lat - dlat, point.lng - dlng)


def _convert_route(waypoints: Iterable[Waypoint], convert) -> List[Waypoint]:
    out = []
    for wp in waypoints:
        p = convert(wp)
        out.append(Waypoint(p.lat, p.lng, height=wp.height, speed=wp.speed, index=wp.index))
    return out


def to_regional_route(waypoints: Iterable[Waypoint]) -> List[Waypoint]:
    """Convert every waypoint to the regional grid, keeping height, speed and index."""
    return _convert_route(waypoints, to_regional)


def to_standard_route(waypoints: Iterable[Waypoint]) -> List[Waypoint]:
    """Convert every waypoint back to the standard system, keeping height, speed and index."""
    return _convert_route(waypoints, to_standard)
