# skyscan/path_planner/simplifier.py
"""
Waypoint reduction and display helpers for long paths.

douglas_peucker works on plain 3-D points; the segment helpers wrap it and
produce new PathSegment objects. Chunks and previews are derived views for
rendering; they hold copies of the waypoints and never alter the
authoritative segment.
"""
import copy
import logging
import math
from typing import List, Sequence, Tuple

import numpy as np

from .constants import PlannerConstants
from .data_models import PathSegment
from .exceptions import InvalidParameterError
from .stitcher import assign_path_order

logger = logging.getLogger(__name__)

Point3D = Tuple[float, float, float]


def _perpendicular_distances(points: np.ndarray, start: np.ndarray, end: np.ndarray) -> np.ndarray:
    chord = end - start
    chord_len = np.linalg.norm(chord)
    rel = points - start
    if chord_len < 1e-12:
        return np.linalg.norm(rel, axis=1)
    return np.linalg.norm(np.cross(rel, chord), axis=1) / chord_len


def simplify_indices(points: Sequence[Sequence[float]], tolerance: float) -> List[int]:
    """Indices of the points Douglas-Peucker keeps, in path order."""
    n = len(points)
    if n <= 2 or tolerance <= 0:
        return list(range(n))

    coords = np.asarray(points, dtype=float)
    if coords.shape[1] == 2:
        coords = np.hstack([coords, np.zeros((n, 1))])
    keep = np.zeros(n, dtype=bool)
    keep[0] = keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        first, last = stack.pop()
        if last - first < 2:
            continue
        distances = _perpendicular_distances(coords[first + 1:last], coords[first], coords[last])
        offset = int(np.argmax(distances))
        if distances[offset] > tolerance:
            split = first + 1 + offset
            keep[split] = True
            stack.append((first, split))
            stack.append((split, last))
    return [int(i) for i in np.flatnonzero(keep)]


def douglas_peucker(points: Sequence[Sequence[float]], tolerance: float) -> List[Point3D]:
    """
    Iterative Douglas-Peucker over 3-D points. Endpoints are always kept; a
    non-positive tolerance or fewer than three points return the input as-is.
    """
    if len(points) <= 2 or tolerance <= 0:
        return [tuple(p) for p in points]
    return [tuple(points[i]) for i in simplify_indices(points, tolerance)]


def simplify_segment(segment: PathSegment, tolerance: float) -> PathSegment:
    """New segment holding the waypoints Douglas-Peucker keeps; path order is reassigned."""
    indices = simplify_indices(segment.local_points, tolerance)
    waypoints = [copy.deepcopy(segment.waypoints[i]) for i in indices]
    assign_path_order(waypoints)
    metadata = dict(segment.metadata)
    metadata.update({'simplified_from': segment.id, 'simplification_tolerance': tolerance,
                     'original_length': len(segment.waypoints)})
    logger.info(f"Simplified segment {segment.id}: {len(segment.waypoints)} -> {len(waypoints)} waypoints "
                f"(tolerance {tolerance} m)")
    return PathSegment(type=segment.type, waypoints=waypoints, speed=segment.speed,
                       display_options=dict(segment.display_options), metadata=metadata)


def chunk_segment(segment: PathSegment, chunk_size: int = PlannerConstants.CHUNK_SIZE) -> List[PathSegment]:
    """Splits a segment into consecutive display chunks of at most chunk_size waypoints."""
    if chunk_size <= 0:
        raise InvalidParameterError("chunk_size", chunk_size)
    total = max(1, math.ceil(len(segment.waypoints) / chunk_size))
    chunks = []
    for index in range(total):
        part = segment.waypoints[index * chunk_size:(index + 1) * chunk_size]
        metadata = dict(segment.metadata)
        metadata.update({'original_segment_id': segment.id, 'chunk_index': index, 'total_chunks': total})
        chunks.append(PathSegment(type=segment.type, waypoints=copy.deepcopy(part), speed=segment.speed,
                                  display_options=dict(segment.display_options), metadata=metadata))
    if total > 1:
        logger.debug(f"Segment {segment.id} split into {total} chunks of <= {chunk_size}")
    return chunks


def preview_segment(segment: PathSegment, limit: int = PlannerConstants.PREVIEW_POINT_LIMIT) -> PathSegment:
    """Every ceil(n / limit)-th waypoint plus the last one, tagged as a preview."""
    if limit <= 0:
        raise InvalidParameterError("limit", limit)
    n = len(segment.waypoints)
    step = max(1, math.ceil(n / limit))
    indices = list(range(0, n, step))
    if n and indices[-1] != n - 1:
        indices.append(n - 1)
    sampled = [copy.deepcopy(segment.waypoints[i]) for i in indices]
    metadata = dict(segment.metadata)
    metadata.update({'is_preview': True, 'original_length': n, 'original_segment_id': segment.id})
    return PathSegment(type=segment.type, waypoints=sampled, speed=segment.speed,
                       display_options=dict(segment.display_options), metadata=metadata)
