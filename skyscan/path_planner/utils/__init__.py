from .coordinates import lat_lng_to_local, local_to_lat_lng
from .validation import (is_finite_number, require_finite_coord, require_non_negative, require_open_fraction,
                         require_positive)
from .waypoints import build_ground_projections, heading_between, make_waypoint

__all__ = [
    "lat_lng_to_local",
    "local_to_lat_lng",
    "is_finite_number",
    "require_finite_coord",
    "require_non_negative",
    "require_open_fraction",
    "require_positive",
    "build_ground_projections",
    "heading_between",
    "make_waypoint",
]
