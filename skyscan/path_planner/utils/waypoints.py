# skyscan/path_planner/utils/waypoints.py
"""
Waypoint construction helpers. make_waypoint is the single place where a
waypoint's altitude is derived from its local z, so the two never disagree.
"""
import copy
import math
from typing import Iterable, List, Optional

from ..data_models import (AltitudeReference, CameraPose, LatLng, LocalCoord, MissionAction,
                           Waypoint)
from .coordinates import local_to_lat_lng


def make_waypoint(local: LocalCoord, camera: CameraPose,
                  alt_reference: AltitudeReference = AltitudeReference.RELATIVE,
                  reference_elevation: float = 0.0,
                  speed: Optional[float] = None,
                  actions: Optional[Iterable[MissionAction]] = None,
                  origin: Optional[LatLng] = None,
                  hold_time: Optional[float] = None) -> Waypoint:
    """
    Args:
        local: Position in the mission frame.
        camera: Pose for this waypoint; copied so callers can reuse a template.
        alt_reference: RELATIVE/TERRAIN subtract reference_elevation, ABSOLUTE does not.
        origin: Geodetic origin of the local frame; when given lat/lng are filled in.
    """
    base = 0.0 if alt_reference == AltitudeReference.ABSOLUTE else reference_elevation
    lat = lng = None
    if origin is not None:
        lat, lng = local_to_lat_lng(local, origin)
    return Waypoint(
        local=local,
        altitude=local.z - base,
        alt_reference=alt_reference,
        camera=copy.copy(camera),
        lat=lat,
        lng=lng,
        actions=list(actions) if actions else [],
        speed=speed,
        hold_time=hold_time,
    )


def heading_between(a: LocalCoord, b: LocalCoord, default: float = 0.0) -> float:
    """Compass heading (0 = north, 90 = east) from a to b in the horizontal plane."""
    dx, dy = b.x - a.x, b.y - a.y
    if dx == 0 and dy == 0:
        return default
    return (math.degrees(math.atan2(dx, dy)) + 360.0) % 360.0


def build_ground_projections(waypoints: List[Waypoint], ground_z: float,
                             reference_elevation: float = 0.0,
                             origin: Optional[LatLng] = None) -> List[Waypoint]:
    """Shadow waypoints on the ground plane, for display only. Never part of the flight path."""
    projections = []
    for wp in waypoints:
        shadow = make_waypoint(
            wp.local.with_z(ground_z), wp.camera,
            alt_reference=wp.alt_reference,
            reference_elevation=reference_elevation,
            origin=origin,
        )
        shadow.path_order = wp.path_order
        shadow.display_options = {'is_ground_projection': True, 'projection_of': wp.id}
        projections.append(shadow)
    return projections
