"""
Coverage route planner: turns a survey boundary into a boustrophedon (S-pattern) scan path.
Project to local meters, shrink by margin, rotate so scan lines are horizontal, intersect
lines with the polygon, optionally drop collinear points, rotate back, unproject.
An empty waypoint list is the only failure signal of generate_route().
"""
import logging
import math
from typing import Any, List, Optional, Sequence, Tuple

from dronesurvey.core.coords import GeoPoint, PlanarPoint, Waypoint
from dronesurvey.core.geometry import bounding_box, centroid, project, rotate, shrink, unproject
from dronesurvey.survey.camera import LATERAL, camera_spacing
from dronesurvey.survey.config import RouteConfig
from dronesurvey.survey.optimizer import optimize_path
from dronesurvey.survey.stats import compute_stats

logger = logging.getLogger(__name__)

REASON_OK = "ok"
REASON_INSUFFICIENT_BOUNDARY = "insufficient_boundary"
REASON_DEGENERATE_AFTER_MARGIN = "degenerate_after_margin"
REASON_NO_SCAN_LINES = "no_scan_lines"

# Optimizer only runs on scans with more raw points than this
MIN_POINTS_TO_OPTIMIZE = 4
# Output lat/lng decimals (~1 cm)
COORD_DECIMALS = 7
# Two boundary points closer than this in both lat and lng (degrees) count as duplicates
DUPLICATE_TOLERANCE_DEG = 1e-6
# Upper bound on scan lines per route
MAX_SCAN_LINES = 100000


def effective_spacing(config: RouteConfig) -> float:
    """Scan-line spacing: camera-derived when use_camera and a camera are set, else the manual spacing."""
    if config.use_camera and config.camera is not None:
        return camera_spacing(config.height, config.camera, config.overlap_rate, LATERAL)
    return config.spacing


def is_polygon_valid(boundary: Sequence[Any]) -> bool:
    """Minimal check: at least 3 points and no duplicate vertices. Self-intersection is not tested."""
    points = [GeoPoint.from_any(p) for p in boundary]
    if len(points) < 3:
        return False
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            if (
                abs(points[i].lng - points[j].lng) < DUPLICATE_TOLERANCE_DEG
                and abs(points[i].lat - points[j].lat) < DUPLICATE_TOLERANCE_DEG
            ):
                return False
    return True


def _line_intersections(polygon: Sequence[PlanarPoint], y: float) -> List[float]:
    """Sorted x of edge crossings with the horizontal line at y (lower endpoint inclusive, upper exclusive)."""
    xs = []
    n = len(polygon)
    for i in range(n):
        p1 = polygon[i]
        p2 = polygon[(i + 1) % n]
        if (p1.y <= y < p2.y) or (p2.y <= y < p1.y):
            t = (y - p1.y) / (p2.y - p1.y)
            xs.append(p1.x + t * (p2.x - p1.x))
    xs.sort()
    return xs


def _pair_segments(xs: Sequence[float]) -> List[Tuple[float, float]]:
    """Consecutive crossings as (enter, exit) pairs; an unpaired trailing crossing is dropped."""
    return [(xs[k], xs[k + 1]) for k in range(0, len(xs) - 1, 2)]


def scan_line_count(height: float, spacing: float) -> int:
    """Number of scan lines at min_y + spacing * (i + 0.5) that fit within a bbox of this height."""
    if not spacing > 0 or not math.isfinite(spacing) or height < spacing / 2.0:
        return 0
    return int(math.floor((height - spacing / 2.0) / spacing)) + 1


def scan_polygon(polygon: Sequence[PlanarPoint], spacing: float) -> List[PlanarPoint]:
    """
    Sweep horizontal lines from min_y + spacing/2 up to max_y, spacing apart, and emit the
    endpoints of each inside segment. Direction alternates between lines (S-pattern).
    An unpaired trailing crossing on a line is discarded. More than MAX_SCAN_LINES lines
    gives an empty scan.
    """
    if len(polygon) < 3:
        return []
    bbox = bounding_box(polygon)
    n_lines = scan_line_count(bbox.height, spacing)
    if n_lines > MAX_SCAN_LINES:
        logger.warning("Spacing %g m needs %d scan lines (max %d)", spacing, n_lines, MAX_SCAN_LINES)
        return []
    points: List[PlanarPoint] = []
    for line_index in range(n_lines):
        y = bbox.min_y + spacing * (line_index + 0.5)
        if y > bbox.max_y:
            break
        left_to_right = line_index % 2 == 0
        for x0, x1 in _pair_segments(_line_intersections(polygon, y)):
            if left_to_right:
                points.append(PlanarPoint(x0, y))
                points.append(PlanarPoint(x1, y))
            else:
                points.append(PlanarPoint(x1, y))
                points.append(PlanarPoint(x0, y))
    return points


def _generate(boundary: Sequence[Any], config: RouteConfig) -> Tuple[List[Waypoint], str]:
    points = [GeoPoint.from_any(p) for p in boundary]
    if len(points) < 3:
        logger.warning("At least 3 boundary points required, got %d", len(points))
        return [], REASON_INSUFFICIENT_BOUNDARY

    origin = points[0]
    polygon = [project(p, origin) for p in points]
    logger.debug("Projected %d boundary points around origin %s", len(polygon), origin)

    if config.margin > 0:
        polygon = shrink(polygon, config.margin)
        if len(polygon) < 3:
            logger.warning("Polygon too small after applying %.1f m margin", config.margin)
            return [], REASON_DEGENERATE_AFTER_MARGIN
        logger.debug("Margin applied: %.1f m", config.margin)

    center = centroid(polygon)
    spacing = effective_spacing(config)
    if config.use_camera and config.camera is not None:
        logger.debug("Camera spacing (%s): %.2f m", config.camera.name, spacing)

    # angle 0: scan lines of constant latitude swept south to north; 90: lines of constant longitude
    angle_rad = -math.radians(config.angle)
    rotated = [rotate(p, angle_rad, center) for p in polygon]
    bbox = bounding_box(rotated)
    logger.debug("Rotated %.1f deg; bbox %.2f x %.2f m", config.angle, bbox.width, bbox.height)

    raw = scan_polygon(rotated, spacing)
    logger.debug("Raw scan points: %d", len(raw))
    if not raw:
        logger.warning("No scan line intersects the polygon (spacing %.2f m)", spacing)
        return [], REASON_NO_SCAN_LINES

    scanned = raw
    if config.optimize_path and len(raw) > MIN_POINTS_TO_OPTIMIZE:
        scanned = optimize_path(raw)
        logger.debug("Path optimized: %d -> %d points", len(raw), len(scanned))

    waypoints = []
    for index, p in enumerate(scanned):
        geo = unproject(rotate(p, -angle_rad, center), origin)
        waypoints.append(
            Waypoint(
                round(geo.lat, COORD_DECIMALS),
                round(geo.lng, COORD_DECIMALS),
                height=config.height,
                speed=config.speed,
                index=index,
            )
        )
    logger.info("Survey route generated: %d waypoints", len(waypoints))
    return waypoints, REASON_OK


def generate_route(boundary: Sequence[Any], config: Optional[RouteConfig] = None) -> List[Waypoint]:
    """
    Coverage route over the boundary polygon (standard lat/lng, at least 3 points).
    Returns ordered waypoints carrying config height/speed and a 0-based index, or [] when no
    route can be generated (too few points, degenerate after margin, no scan line inside).
    Does not validate config; see RouteConfig.validate().
    """
    waypoints, _ = _generate(boundary, config or RouteConfig())
    return waypoints


def plan_survey_mission(boundary: Sequence[Any], config: Optional[RouteConfig] = None) -> dict:
    """
    Generate the route and its statistics in one call.
    Returns dict with 'waypoints', 'stats', 'spacing_m', 'polygon_valid' and 'reason'
    ('ok', 'insufficient_boundary', 'degenerate_after_margin' or 'no_scan_lines').
    """
    config = config or RouteConfig()
    waypoints, reason = _generate(boundary, config)
    return {
        "waypoints": waypoints,
        "stats": compute_stats(waypoints),
        "spacing_m": effective_spacing(config),
        "polygon_valid": is_polygon_valid(boundary),
        "reason": reason,
    }
