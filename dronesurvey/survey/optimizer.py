"""
Path optimizer: drop interior points that lie on the straight line through their neighbours.
"""
from typing import List, Sequence

from dronesurvey.core.coords import PlanarPoint

# |cross product| at or below this (m^2) counts as collinear
COLLINEAR_TOLERANCE = 0.01


def optimize_path(points: Sequence[PlanarPoint], tolerance: float = COLLINEAR_TOLERANCE) -> List[PlanarPoint]:
    """
    Remove collinear interior points. First and last points are always kept; order is preserved
    and nothing is inserted. Each point is tested against its original neighbours.
    """
    if len(points) <= 2:
        return list(points)
    out = [points[0]]
    for i in range(1, len(points) - 1):
        prev, curr, nxt = points[i - 1], points[i], points[i + 1]
        dx1, dy1 = curr.x - prev.x, curr.y - prev.y
        dx2, dy2 = nxt.x - curr.x, nxt.y - curr.y
        if abs(dx1 * dy2 - dy1 * dx2) > tolerance:
            out.append(curr)
    out.append(points[-1])
    return out
