# skyscan/geometry/hull.py
"""
2-D convex hull using Andrew's monotone chain.
"""
from typing import List, Sequence

from .data_models import Point2D


def cross(o: Point2D, a: Point2D, b: Point2D) -> float:
    """Z component of (a - o) x (b - o). Positive for a counter-clockwise turn."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def convex_hull(points: Sequence[Sequence[float]]) -> List[Point2D]:
    """
    Returns the hull vertices in counter-clockwise order, starting from the
    lexicographically smallest point. Duplicates and collinear boundary points
    are dropped. Fewer than 3 input points are returned unchanged.
    """
    if len(points) < 3:
        return [(float(p[0]), float(p[1])) for p in points]

    pts = sorted(set((float(p[0]), float(p[1])) for p in points))
    if len(pts) < 3:
        return pts

    lower: List[Point2D] = []
    for p in pts:
        while len(lower) >= 2 and cross(lower[-2], lower[-1], p) <= 0:
            lower.pop()
        lower.append(p)

    upper: List[Point2D] = []
    for p in reversed(pts):
        while len(upper) >= 2 and cross(upper[-2], upper[-1], p) <= 0:
            upper.pop()
        upper.append(p)

    # Last point of each chain is the first point of the other
    return lower[:-1] + upper[:-1]
