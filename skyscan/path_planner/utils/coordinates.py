# skyscan/path_planner/utils/coordinates.py
"""
Conversions between the local ENU mission frame and geodetic coordinates.

The local frame is a flat tangent plane at the origin: y metres north map to
latitude through the Earth radius, x metres east through the radius of the
origin's parallel. Over the few kilometres a survey spans the error stays
well below GPS accuracy, and the two functions are exact inverses.
"""
import math
from typing import Tuple

from ..constants import PlannerConstants
from ..data_models import LatLng, LocalCoord


def _parallel_radius_m(latitude: float) -> float:
    return PlannerConstants.EARTH_RADIUS_M * math.cos(math.radians(latitude))


def local_to_lat_lng(local: LocalCoord, origin: LatLng) -> Tuple[float, float]:
    """Geodetic (lat, lng) of a local ENU point relative to origin."""
    lat = origin.latitude + math.degrees(local.y / PlannerConstants.EARTH_RADIUS_M)
    lng = origin.longitude + math.degrees(local.x / _parallel_radius_m(origin.latitude))
    return lat, lng


def lat_lng_to_local(lat: float, lng: float, origin: LatLng, altitude: float = 0.0) -> LocalCoord:
    """Local ENU coordinate of a geodetic point relative to origin."""
    y = math.radians(lat - origin.latitude) * PlannerConstants.EARTH_RADIUS_M
    x = math.radians(lng - origin.longitude) * _parallel_radius_m(origin.latitude)
    return LocalCoord(x, y, altitude)
