# skyscan/geometry/bounding_box.py
"""
Minimal-area oriented bounding box via rotating calipers over the convex hull.

Degenerate inputs (fewer than three hull vertices, or no hull edge producing a
rectangle with positive area) fall back to the axis-aligned box of the raw
points. The fallback is flagged on the result so callers can report it.
"""
import logging
import math
from typing import Sequence

import numpy as np

from .constants import GeometryConstants
from .data_models import OBBResult
from .exceptions import DegenerateGeometryError
from .hull import convex_hull

logger = logging.getLogger(__name__)


def axis_aligned_box(points: Sequence[Sequence[float]]) -> OBBResult:
    """Axis-aligned bounding box, expressed as an OBBResult with is_fallback=True."""
    if len(points) == 0:
        raise DegenerateGeometryError("Cannot bound an empty point set", 0)

    arr = np.asarray([(p[0], p[1]) for p in points], dtype=float)
    min_xy = arr.min(axis=0)
    max_xy = arr.max(axis=0)
    span_x, span_y = float(max_xy[0] - min_xy[0]), float(max_xy[1] - min_xy[1])
    center = (float((min_xy[0] + max_xy[0]) / 2.0), float((min_xy[1] + max_xy[1]) / 2.0))
    floor = GeometryConstants.MIN_BOX_DIMENSION

    if span_y > span_x:
        return OBBResult(center=center, axis1=(0.0, 1.0), axis2=(-1.0, 0.0),
                         length=max(floor, span_y), width=max(floor, span_x), is_fallback=True)
    return OBBResult(center=center, axis1=(1.0, 0.0), axis2=(0.0, 1.0),
                     length=max(floor, span_x), width=max(floor, span_y), is_fallback=True)


def minimum_area_rectangle(points: Sequence[Sequence[float]]) -> OBBResult:
    """
    Finds the minimum-area rectangle enclosing the points.

    Args:
        points: (x, y) pairs. Extra coordinates are ignored.

    Returns:
        OBBResult with axis1 along the longer side and a positive
        axis1 x axis2 orientation.
    """
    if len(points) == 0:
        raise DegenerateGeometryError("Cannot bound an empty point set", 0)

    hull = convex_hull([(p[0], p[1]) for p in points])
    if len(hull) < 3:
        logger.warning(f"Convex hull has {len(hull)} vertices; using axis-aligned bounding box.")
        return axis_aligned_box(points)

    hull_arr = np.asarray(hull, dtype=float)
    n = len(hull_arr)
    best = None

    for i in range(n):
        edge = hull_arr[(i + 1) % n] - hull_arr[i]
        length_sq = float(edge @ edge)
        if length_sq < GeometryConstants.MIN_EDGE_LENGTH_SQ:
            continue

        u = edge / math.sqrt(length_sq)
        v = np.array([-u[1], u[0]])
        proj_u = hull_arr @ u
        proj_v = hull_arr @ v
        min_u, max_u = float(proj_u.min()), float(proj_u.max())
        min_v, max_v = float(proj_v.min()), float(proj_v.max())
        area = (max_u - min_u) * (max_v - min_v)

        if area <= GeometryConstants.EPSILON:
            continue
        if best is None or area < best[0]:
            best = (area, u, v, min_u, max_u, min_v, max_v)

    if best is None:
        logger.warning("No hull edge produced a positive-area rectangle; using axis-aligned bounding box.")
        return axis_aligned_box(points)

    _, u, v, min_u, max_u, min_v, max_v = best
    return _finalise_box(u, v, min_u, max_u, min_v, max_v)


def _finalise_box(u: np.ndarray, v: np.ndarray,
                  min_u: float, max_u: float, min_v: float, max_v: float) -> OBBResult:
    """Normalises the winning caliper frame and orders the axes by extent."""
    u = u / np.linalg.norm(u)
    v = v / np.linalg.norm(v)

    dot = float(u @ v)
    if abs(dot) > GeometryConstants.ORTHOGONALITY_TOLERANCE:
        v = v - dot * u
        v = v / np.linalg.norm(v)

    if u[0] * v[1] - u[1] * v[0] < 0:
        v = -v
        min_v, max_v = -max_v, -min_v

    center = u * (min_u + max_u) / 2.0 + v * (min_v + max_v) / 2.0
    length = max_u - min_u
    width = max_v - min_v

    axis1, axis2 = u, v
    if width > length:
        # Keep a right-handed frame after promoting v to the long axis
        axis1, axis2 = v, -u
        length, width = width, length

    floor = GeometryConstants.MIN_BOX_DIMENSION
    return OBBResult(
        center=(float(center[0]), float(center[1])),
        axis1=(float(axis1[0]), float(axis1[1])),
        axis2=(float(axis2[0]), float(axis2[1])),
        length=max(floor, float(length)),
        width=max(floor, float(width)),
    )
