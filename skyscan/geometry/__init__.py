# skyscan/geometry/__init__.py
"""
Planar geometry used by the coverage planner: convex hull, oriented bounding
box and polygon helpers.
"""
from .bounding_box import axis_aligned_box, minimum_area_rectangle
from .data_models import OBBResult, Point2D
from .exceptions import DegenerateGeometryError, GeometryError
from .hull import convex_hull
from .polygon import (closest_point_on_segment, distance_to_boundary, is_point_in_polygon,
                      polygon_area, polygon_centroid, project_to_horizontal)

__all__ = [
    "OBBResult",
    "Point2D",
    "GeometryError",
    "DegenerateGeometryError",
    "convex_hull",
    "minimum_area_rectangle",
    "axis_aligned_box",
    "project_to_horizontal",
    "polygon_area",
    "polygon_centroid",
    "is_point_in_polygon",
    "closest_point_on_segment",
    "distance_to_boundary",
]
