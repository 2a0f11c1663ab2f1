# skyscan/path_planner/stitcher.py
"""
Turns ordered coverage waypoints into a flyable mission: takeoff, climb,
transit, coverage, climb-out and the configured end action.

Obstacle handling is a single-detour heuristic, not a motion planner. Each
transit leg is tested against the circular footprint of every obstacle and,
when anything intersects, one waypoint is inserted above the leg midpoint.
"""
import copy
import logging
from typing import Iterable, List, Optional, Sequence

from ..geometry.polygon import closest_point_on_segment
from .config import PlannerConfig
from .data_models import (CameraPose, LocalCoord, MissionContext, MissionEndAction, ObstacleFootprint,
                          StitchResult, Waypoint)
from .exceptions import EmptyCoverageError, InvalidParameterError, MissingInputError
from .utils.validation import is_finite_number, require_finite_coord, require_non_negative
from .utils.waypoints import heading_between, make_waypoint

logger = logging.getLogger(__name__)


def filter_obstacles(objects: Iterable[ObstacleFootprint]) -> List[ObstacleFootprint]:
    """Keeps only scene objects classified as obstacles."""
    return [obj for obj in objects or [] if obj.object_class == "obstacle"]


def deduplicate_waypoints(waypoints: List[Waypoint], epsilon: float) -> List[Waypoint]:
    """
    Merges consecutive waypoints closer than epsilon on every axis. The first
    of a pair survives and takes over the actions of the dropped one; a merged
    survivor is a copy, so the input waypoints are left untouched.
    """
    result: List[Waypoint] = []
    for wp in waypoints:
        if result:
            last = result[-1]
            if (abs(last.local.x - wp.local.x) < epsilon and abs(last.local.y - wp.local.y) < epsilon
                    and abs(last.local.z - wp.local.z) < epsilon):
                extra = [a for a in wp.actions if not last.has_action(a.type)]
                if extra:
                    merged = copy.copy(last)
                    merged.actions = last.actions + extra
                    result[-1] = merged
                continue
        result.append(wp)
    removed = len(waypoints) - len(result)
    if removed:
        logger.debug(f"Removed {removed} duplicate waypoints")
    return result


def assign_path_order(waypoints: List[Waypoint]) -> List[Waypoint]:
    for index, wp in enumerate(waypoints):
        wp.path_order = index
    return waypoints


class PathStitcher:
    """Builds the complete waypoint sequence around a block of coverage waypoints."""

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()

    def compute_safe_altitude(self, takeoff: LocalCoord, safety_climb: float,
                              coverage_altitude: float,
                              obstacles: Sequence[ObstacleFootprint] = ()) -> float:
        """Cruise altitude for climb, transit and return legs (local z)."""
        candidates = [takeoff.z + safety_climb, coverage_altitude]
        if obstacles:
            candidates.append(max(o.top for o in obstacles) + safety_climb)
        return max(candidates) + self.config.safe_altitude_buffer_m

    @staticmethod
    def blocking_obstacles(start: LocalCoord, end: LocalCoord,
                           obstacles: Sequence[ObstacleFootprint]) -> List[ObstacleFootprint]:
        """Obstacles whose circle is crossed by the horizontal projection of start -> end."""
        blocking = []
        for obstacle in obstacles:
            t, distance = closest_point_on_segment(
                (obstacle.center_x, obstacle.center_y), (start.x, start.y), (end.x, end.y))
            if 0.0 <= t <= 1.0 and distance < obstacle.radius:
                blocking.append(obstacle)
        return blocking

    def route_transit(self, start: LocalCoord, end: LocalCoord, safe_altitude: float,
                      obstacles: Sequence[ObstacleFootprint] = ()) -> List[LocalCoord]:
        """
        Returns the points to insert between start and end: nothing for a clear
        leg, otherwise one point above the leg midpoint.
        """
        blocking = self.blocking_obstacles(start, end, obstacles)
        if not blocking:
            return []
        detour_z = max(safe_altitude, max(o.top for o in blocking)) + self.config.detour_clearance_m
        midpoint = LocalCoord((start.x + end.x) / 2.0, (start.y + end.y) / 2.0, detour_z)
        names = ", ".join(o.name or o.object_class for o in blocking)
        logger.info(f"Transit leg blocked by {len(blocking)} obstacle(s) ({names}); "
                    f"detour at z={detour_z:.1f} m")
        return [midpoint]

    def stitch(self, coverage: List[Waypoint], mission: MissionContext, coverage_altitude: float,
               obstacles: Sequence[ObstacleFootprint] = (),
               camera_pose: Optional[CameraPose] = None) -> StitchResult:
        """
        Args:
            coverage: Ordered coverage waypoints; copied, never modified.
            mission: Takeoff point, safety climb and end action.
            coverage_altitude: Local z the coverage block is flown at.
            obstacles: Already filtered obstacle footprints.
            camera_pose: Template pose for transit waypoints.

        Returns:
            StitchResult with deduplicated, path-ordered waypoints.
        """
        if mission is None or mission.takeoff is None:
            raise MissingInputError("takeoff point")
        require_non_negative("safety_climb", mission.safety_climb)
        require_finite_coord("takeoff", mission.takeoff)
        if not is_finite_number(coverage_altitude):
            raise InvalidParameterError("coverage_altitude", coverage_altitude)
        if not coverage:
            raise EmptyCoverageError("stitch", "No coverage waypoints to stitch")

        obstacles = list(obstacles or [])
        takeoff = mission.takeoff
        safe_altitude = self.compute_safe_altitude(takeoff, mission.safety_climb, coverage_altitude, obstacles)
        pose = camera_pose or self.config.default_camera_pose()
        warnings: List[str] = []
        detours = 0

        def transit(local: LocalCoord, heading: float = 0.0) -> Waypoint:
            camera = CameraPose(pose.fov, pose.aspect_ratio, pose.near, pose.far, heading, pose.pitch, pose.roll)
            return make_waypoint(local, camera, alt_reference=mission.alt_reference,
                                 reference_elevation=mission.reference_elevation,
                                 origin=mission.local_origin)

        def leg(start: LocalCoord, end: LocalCoord) -> List[Waypoint]:
            nonlocal detours
            points = self.route_transit(start, end, safe_altitude, obstacles)
            if points:
                detours += 1
            points.append(end)
            legs, previous = [], start
            for point in points:
                legs.append(transit(point, heading_between(previous, point)))
                previous = point
            return legs

        first, last = coverage[0].local, coverage[-1].local
        climb = takeoff.with_z(safe_altitude)
        above_first = first.with_z(safe_altitude)
        climb_out = last.with_z(safe_altitude)

        waypoints = [transit(takeoff), transit(climb)]
        waypoints.extend(leg(climb, above_first))
        waypoints.extend(copy.deepcopy(wp) for wp in coverage)
        waypoints.append(transit(climb_out))

        if mission.end_action == MissionEndAction.RTL:
            waypoints.extend(leg(climb_out, climb))
            waypoints.append(transit(takeoff))
        elif mission.end_action == MissionEndAction.LAND:
            waypoints.append(transit(LocalCoord(last.x, last.y, takeoff.z)))
        # HOLD ends hovering at the climb-out point

        if detours:
            warnings.append(f"Inserted {detours} obstacle detour(s); obstacle avoidance is a "
                            f"single-detour heuristic, verify clearance before flight")

        waypoints = assign_path_order(deduplicate_waypoints(waypoints, self.config.dedupe_epsilon_m))
        logger.info(f"Stitched mission: {len(waypoints)} waypoints, safe altitude {safe_altitude:.1f} m, "
                    f"end action {mission.end_action.value}")
        return StitchResult(waypoints=waypoints, safe_altitude=safe_altitude,
                            detour_count=detours, warnings=warnings)
