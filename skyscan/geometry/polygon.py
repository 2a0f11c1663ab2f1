# skyscan/geometry/polygon.py
"""
Polygon utilities for coverage planning: horizontal projection, containment,
boundary distance and centroid. Logging is omitted here as these are
high-frequency, low-level functions called once per grid candidate.
"""
import math
from typing import List, Sequence, Tuple

import numpy as np

from .constants import GeometryConstants
from .data_models import Point2D


def project_to_horizontal(vertices: Sequence[Sequence[float]]) -> List[Point2D]:
    """Drops the vertical component of each vertex (world XY projection)."""
    return [(float(v[0]), float(v[1])) for v in vertices]


def polygon_area(polygon: Sequence[Point2D]) -> float:
    """Unsigned shoelace area."""
    n = len(polygon)
    if n < 3:
        return 0.0
    twice_area = 0.0
    for i in range(n):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % n]
        twice_area += x1 * y2 - x2 * y1
    return abs(twice_area) / 2.0


def polygon_centroid(polygon: Sequence[Point2D]) -> Point2D:
    """Area centroid, or the vertex mean when the polygon has no area."""
    if not polygon:
        return (0.0, 0.0)
    n = len(polygon)
    signed_twice_area = 0.0
    cx = cy = 0.0
    for i in range(n):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % n]
        f = x1 * y2 - x2 * y1
        signed_twice_area += f
        cx += (x1 + x2) * f
        cy += (y1 + y2) * f
    if abs(signed_twice_area) <= GeometryConstants.EPSILON:
        xs, ys = zip(*polygon)
        return (sum(xs) / n, sum(ys) / n)
    return (cx / (3.0 * signed_twice_area), cy / (3.0 * signed_twice_area))


def is_point_in_polygon(x: float, y: float, polygon: Sequence[Point2D]) -> bool:
    """Determines if a point is inside a given polygon using the Ray Casting algorithm."""
    n = len(polygon)
    if n == 0:
        return False
    inside = False
    p1_x, p1_y = polygon[0]
    for i in range(n + 1):
        p2_x, p2_y = polygon[i % n]
        if min(p1_y, p2_y) < y <= max(p1_y, p2_y):
            if x <= max(p1_x, p2_x):
                x_intersection = (y - p1_y) * (p2_x - p1_x) / (p2_y - p1_y) + p1_x
                if p1_x == p2_x or x <= x_intersection:
                    inside = not inside
        p1_x, p1_y = p2_x, p2_y
    return inside


def closest_point_on_segment(p: Point2D, a: Point2D, b: Point2D) -> Tuple[float, float]:
    """
    Returns (t, distance) where t is the unclamped projection parameter of p on
    the line a->b and distance is measured to the closest point of the segment.
    A zero-length segment yields t = 0.
    """
    ab_x, ab_y = b[0] - a[0], b[1] - a[1]
    ap_x, ap_y = p[0] - a[0], p[1] - a[1]
    length_sq = ab_x * ab_x + ab_y * ab_y
    if length_sq <= GeometryConstants.EPSILON:
        return 0.0, math.hypot(ap_x, ap_y)
    t = (ap_x * ab_x + ap_y * ab_y) / length_sq
    t_clamped = min(1.0, max(0.0, t))
    cx, cy = a[0] + t_clamped * ab_x, a[1] + t_clamped * ab_y
    return t, math.hypot(p[0] - cx, p[1] - cy)


def distance_to_boundary(x: float, y: float, polygon: Sequence[Point2D]) -> float:
    """Shortest distance from a point to any polygon edge."""
    if not polygon:
        return math.inf
    verts = np.asarray(polygon, dtype=float)
    if len(verts) == 1:
        return float(np.hypot(x - verts[0, 0], y - verts[0, 1]))

    starts = verts
    ends = np.roll(verts, -1, axis=0)
    edges = ends - starts
    rel = np.array([x, y]) - starts
    length_sq = np.einsum('ij,ij->i', edges, edges)
    safe_len = np.where(length_sq > GeometryConstants.EPSILON, length_sq, 1.0)
    t = np.clip(np.einsum('ij,ij->i', rel, edges) / safe_len, 0.0, 1.0)
    t = np.where(length_sq > GeometryConstants.EPSILON, t, 0.0)
    closest = starts + edges * t[:, None]
    return float(np.min(np.hypot(closest[:, 0] - x, closest[:, 1] - y)))
