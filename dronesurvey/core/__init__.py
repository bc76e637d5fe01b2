from .coords import BoundingBox, GeoPoint, PlanarPoint, Waypoint
from .transform import in_region, to_regional, to_regional_route, to_standard, to_standard_route
from .geometry import bounding_box, centroid, project, rotate, shrink, unproject

__all__ = [
    "BoundingBox",
    "GeoPoint",
    "PlanarPoint",
    "Waypoint",
    "in_region",
    "to_regional",
    "to_regional_route",
    "to_standard",
    "to_standard_route",
    "bounding_box",
    "centroid",
    "project",
    "rotate",
    "shrink",
    "unproject",
]
