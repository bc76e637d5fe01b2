"""
Planar geometry kernel for short-range survey areas (a few km).
Flat-earth projection around an origin; all polygon operations work in local meters.
"""
import math
from typing import List, Sequence

from dronesurvey.core.coords import BoundingBox, GeoPoint, PlanarPoint
from dronesurvey.core.transform import EARTH_RADIUS_M

# Lower bound of the shrink scale factor so a large margin never collapses the polygon to a point
MIN_SHRINK_SCALE = 0.1


def project(point: GeoPoint, origin: GeoPoint) -> PlanarPoint:
    """
    Equirectangular projection to meters around origin:
    x = dlng * R * cos(origin.lat), y = dlat * R (angles in radians).
    """
    dlat = math.radians(point.lat - origin.lat)
    dlng = math.radians(point.lng - origin.lng)
    x = dlng * EARTH_RADIUS_M * math.cos(math.radians(origin.lat))
    y = dlat * EARTH_RADIUS_M
    return PlanarPoint(x, y)


def unproject(point: PlanarPoint, origin: GeoPoint) -> GeoPoint:
    """Inverse of project()."""
    lat = origin.lat + math.degrees(point.y / EARTH_RADIUS_M)
    lng = origin.lng + math.degrees(point.x / (EARTH_RADIUS_M * math.cos(math.radians(origin.lat))))
    return GeoPoint(lat, lng)


def rotate(point: PlanarPoint, angle_rad: float, center: PlanarPoint = PlanarPoint(0.0, 0.0)) -> PlanarPoint:
    """Rotate point counter-clockwise by angle_rad about center."""
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)
    dx = point.x - center.x
    dy = point.y - center.y
    return PlanarPoint(center.x + dx * cos_a - dy * sin_a, center.y + dx * sin_a + dy * cos_a)


def bounding_box(polygon: Sequence[PlanarPoint]) -> BoundingBox:
    """Axis-aligned extent of the polygon. Empty polygon gives an inverted (inf) box."""
    min_x = min_y = math.inf
    max_x = max_y = -math.inf
    for p in polygon:
        min_x = min(min_x, p.x)
        min_y = min(min_y, p.y)
        max_x = max(max_x, p.x)
        max_y = max(max_y, p.y)
    return BoundingBox(min_x, min_y, max_x, max_y)


def centroid(polygon: Sequence[PlanarPoint]) -> PlanarPoint:
    """Arithmetic mean of the vertices (not the area-weighted centroid)."""
    n = len(polygon)
    if n == 0:
        return PlanarPoint(0.0, 0.0)
    return PlanarPoint(sum(p.x for p in polygon) / n, sum(p.y for p in polygon) / n)


def shrink(polygon: Sequence[PlanarPoint], margin_m: float) -> List[PlanarPoint]:
    """
    Pull every vertex toward the centroid by one uniform scale factor
    max(0.1, (avg_radius - margin) / avg_radius), avg_radius being the mean centroid-vertex distance.

    This approximates an inward offset; it is not a true polygon inset and may self-intersect
    for strongly non-convex or elongated shapes.
    """
    if not polygon:
        return []
    center = centroid(polygon)
    avg_radius = sum(math.hypot(p.x - center.x, p.y - center.y) for p in polygon) / len(polygon)
    if avg_radius <= 0.0:
        # all vertices coincide; nothing to scale
        return list(polygon)
    scale = max(MIN_SHRINK_SCALE, (avg_radius - margin_m) / avg_radius)
    return [
        PlanarPoint(center.x + (p.x - center.x) * scale, center.y + (p.y - center.y) * scale)
        for p in polygon
    ]
