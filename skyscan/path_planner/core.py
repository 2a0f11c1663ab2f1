# skyscan/path_planner/core.py
import logging
from typing import List, Optional, Sequence

from ..camera.data_models import CameraSpecs, Footprint
from ..camera.exceptions import CameraModelError
from ..camera.footprint import CameraFootprintModel
from ..geometry.bounding_box import minimum_area_rectangle
from ..geometry.exceptions import GeometryError
from ..geometry.polygon import project_to_horizontal
from .config import PlannerConfig, VehicleProfile
from .constants import PlannerConstants
from .coverage import CoverageGridGenerator
from .data_models import (ActionType, CameraPose, CoverageStrategy, GenerationResult, LocalCoord,
                          MissionAction, MissionContext, MissionStatistics, MissionType, ObstacleFootprint,
                          PathSegment, PathType, RasterParams, ScanDirection, TargetSurface, Waypoint)
from .exceptions import InvalidParameterError, MissingInputError, PathPlanningError
from .raster import RasterPatternGenerator
from .statistics import MissionStatisticsEstimator
from .stitcher import PathStitcher, filter_obstacles
from .utils.validation import (is_finite_number, require_finite_coord, require_non_negative, require_open_fraction,
                               require_positive)
from .utils.waypoints import build_ground_projections, heading_between, make_waypoint

logger = logging.getLogger(__name__)

PLANNING_ERRORS = (PathPlanningError, GeometryError, CameraModelError)


def coverage_actions(index: int, count: int, mission_type: MissionType) -> List[MissionAction]:
    """Photogrammetry shoots at every coverage point; lidar records from first to last."""
    if mission_type == MissionType.PHOTOGRAMMETRY:
        return [MissionAction(ActionType.TAKE_PHOTO)]
    actions = []
    if index == 0:
        actions.append(MissionAction(ActionType.START_RECORDING))
    if index == count - 1:
        actions.append(MissionAction(ActionType.STOP_RECORDING))
    return actions


class SurveyPlanner:
    """
    Orchestrates footprint, coverage, stitching and statistics into one
    PathSegment. Public methods never raise for bad input: failures come back
    as GenerationResult.error with no segment.
    """

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()
        self.coverage = CoverageGridGenerator(self.config.turnaround_buffer_m)
        self.raster = RasterPatternGenerator(self.config)
        self.stitcher = PathStitcher(self.config)

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logger.info("SurveyPlanner initialized.")

    def generate_face_mission(self, target: TargetSurface, camera: CameraSpecs, mission: MissionContext,
                              overlap: float, altitude_agl: float,
                              strategy: Optional[CoverageStrategy] = None,
                              obstacles: Sequence[ObstacleFootprint] = (),
                              mission_type: Optional[MissionType] = None,
                              scan_direction: Optional[ScanDirection] = None) -> GenerationResult:
        """
        Plans a survey of a planar target face.

        Args:
            target: Target polygon (local frame, >= 3 vertices).
            camera: Sensor/lens description used for the ground footprint.
            mission: Takeoff, safety climb and end action.
            overlap: Image overlap fraction, strictly between 0 and 1.
            altitude_agl: Flight height above the highest target vertex (m).
            strategy: Coverage strategy; defaults to the configured one.
            obstacles: Scene objects; only those classed as obstacles are used.
            mission_type: Photogrammetry or lidar action layout.
            scan_direction: Row or column sweep for image-centre coverage.
        """
        strategy = strategy or self.config.default_strategy
        scan_direction = scan_direction or self.config.default_scan_direction
        mission_type = mission_type or self.config.default_mission_type
        warnings: List[str] = []
        try:
            self._validate_face_inputs(target, camera, mission, overlap, altitude_agl)
            logger.info(f"Planning {mission_type.value} face mission '{target.name or 'target'}' "
                        f"({len(target.vertices)} vertices, {strategy.value}, overlap {overlap:.0%}, "
                        f"{altitude_agl} m AGL)")

            polygon = project_to_horizontal(target.vertices)
            warnings.extend(self._steep_face_warnings(target))

            footprint = CameraFootprintModel(camera, self.config.zoom_position).footprint(altitude_agl)
            obb = minimum_area_rectangle(polygon)
            if obb.is_fallback:
                message = "Target outline is degenerate; coverage uses its axis-aligned bounding box"
                logger.warning(message)
                warnings.append(message)

            coverage_altitude = target.max_z + altitude_agl
            grid = self.coverage.generate(strategy, polygon, footprint, overlap, coverage_altitude, obb,
                                          scan_direction)
            warnings.extend(grid.warnings)

            pose = self._camera_pose(footprint, camera)
            coverage_points = [LocalCoord(x, y, coverage_altitude) for x, y in grid.points]
            coverage = self._coverage_waypoints(coverage_points, pose, mission, mission_type)

            segment = self._assemble(coverage, mission, coverage_altitude, obstacles, pose,
                                     PathType.POLYGON, mission.cruise_speed, warnings)
            segment.metadata.update({
                'is_photogrammetry': mission_type == MissionType.PHOTOGRAMMETRY,
                'is_lidar_mission': mission_type == MissionType.LIDAR,
                'strategy': strategy.value,
                'scan_direction': scan_direction.value,
                'coverage_point_count': len(grid.points),
                'line_spacing_m': grid.line_spacing,
                'row_spacing_m': grid.row_spacing,
                'footprint_m': (footprint.width, footprint.height),
                'target_name': target.name,
            })
        except PLANNING_ERRORS as e:
            logger.warning(f"Face mission generation failed: {e}")
            return GenerationResult(error=str(e), warnings=warnings)

        return self._result(segment, warnings)

    def generate_raster_mission(self, params: RasterParams, mission: MissionContext,
                                obstacles: Sequence[ObstacleFootprint] = (),
                                mission_type: Optional[MissionType] = None) -> GenerationResult:
        """Stitches a manual lawnmower pattern into a full mission."""
        mission_type = mission_type or self.config.default_mission_type
        warnings: List[str] = []
        try:
            if mission is None or mission.takeoff is None:
                raise MissingInputError("takeoff point")
            pattern = self.raster.generate(params, alt_reference=mission.alt_reference,
                                           reference_elevation=mission.reference_elevation,
                                           origin=mission.local_origin)
            for index, wp in enumerate(pattern):
                wp.actions.extend(coverage_actions(index, len(pattern), mission_type))

            coverage_altitude = params.start.z + params.altitude_agl
            pose = params.camera_pose or self.config.default_camera_pose()
            segment = self._assemble(pattern, mission, coverage_altitude, obstacles, pose,
                                     PathType.GRID, params.speed or mission.cruise_speed, warnings)
            segment.metadata.update({
                'is_photogrammetry': mission_type == MissionType.PHOTOGRAMMETRY,
                'is_lidar_mission': mission_type == MissionType.LIDAR,
                'passes': params.passes,
                'orientation': params.orientation.value,
                'snake': params.snake,
            })
        except PLANNING_ERRORS as e:
            logger.warning(f"Raster mission generation failed: {e}")
            return GenerationResult(error=str(e), warnings=warnings)

        return self._result(segment, warnings)

    def estimate_statistics(self, segment: PathSegment,
                            profile: Optional[VehicleProfile] = None) -> MissionStatistics:
        return MissionStatisticsEstimator(profile).estimate(segment.waypoints, segment.speed)

    # --- internals ---

    @staticmethod
    def _validate_face_inputs(target, camera, mission, overlap, altitude_agl) -> None:
        if target is None or target.vertices is None:
            raise MissingInputError("target surface")
        if len(target.vertices) < 3:
            raise InvalidParameterError("vertices", len(target.vertices), "Target needs at least 3 vertices")
        if camera is None:
            raise MissingInputError("camera specs")
        if mission is None or mission.takeoff is None:
            raise MissingInputError("takeoff point")
        require_open_fraction("overlap", overlap)
        require_positive("altitude_agl", altitude_agl)
        require_positive("cruise_speed", mission.cruise_speed)
        require_non_negative("safety_climb", mission.safety_climb)
        require_finite_coord("takeoff", mission.takeoff)
        for index, vertex in enumerate(target.vertices):
            if not all(is_finite_number(c) for c in vertex):
                raise InvalidParameterError(f"vertices[{index}]", tuple(vertex), "Expected finite coordinates")

    @staticmethod
    def _steep_face_warnings(target: TargetSurface) -> List[str]:
        if target.normal is None:
            return []
        if abs(target.normal[2]) < PlannerConstants.STEEP_FACE_NORMAL_Z:
            message = (f"Target normal {tuple(target.normal)} is steep; the face is surveyed "
                       f"through its horizontal projection")
            logger.warning(message)
            return [message]
        return []

    def _camera_pose(self, footprint: Footprint, camera: CameraSpecs) -> CameraPose:
        pose = self.config.default_camera_pose()
        pose.fov = footprint.horizontal_fov_deg
        pose.aspect_ratio = camera.aspect_ratio or pose.aspect_ratio
        return pose

    @staticmethod
    def _coverage_waypoints(points: List[LocalCoord], pose: CameraPose, mission: MissionContext,
                            mission_type: MissionType) -> List[Waypoint]:
        waypoints = []
        heading = 0.0
        for index, local in enumerate(points):
            if index + 1 < len(points):
                heading = heading_between(local, points[index + 1], default=heading)
            pose.heading = heading
            waypoints.append(make_waypoint(
                local, pose,
                alt_reference=mission.alt_reference,
                reference_elevation=mission.reference_elevation,
                actions=coverage_actions(index, len(points), mission_type),
                origin=mission.local_origin,
            ))
        return waypoints

    def _assemble(self, coverage: List[Waypoint], mission: MissionContext, coverage_altitude: float,
                  obstacles: Sequence[ObstacleFootprint], pose: CameraPose, path_type: PathType,
                  speed: float, warnings: List[str]) -> PathSegment:
        stitched = self.stitcher.stitch(coverage, mission, coverage_altitude,
                                        filter_obstacles(obstacles), camera_pose=pose)
        warnings.extend(stitched.warnings)

        segment = PathSegment(type=path_type, waypoints=stitched.waypoints, speed=speed)
        segment.metadata.update({
            'safe_altitude': stitched.safe_altitude,
            'detour_count': stitched.detour_count,
            'end_action': mission.end_action.value,
            'alt_reference': mission.alt_reference.value,
        })
        if self.config.include_ground_projections:
            segment.ground_projections = build_ground_projections(
                segment.waypoints, mission.takeoff.z, mission.reference_elevation, mission.local_origin)
        if len(segment.waypoints) > PlannerConstants.LARGE_PATH_THRESHOLD:
            logger.info(f"Large path ({len(segment.waypoints)} waypoints); "
                        f"use chunk_segment/preview_segment for display")
        return segment

    def _result(self, segment: PathSegment, warnings: List[str]) -> GenerationResult:
        statistics = None
        if self.config.compute_statistics:
            statistics = self.estimate_statistics(segment)
            logger.info(f"Mission ready: {statistics.waypoint_count} waypoints, "
                        f"{statistics.total_distance_m:.0f} m, ~{statistics.estimated_time_min:.1f} min, "
                        f"battery {statistics.battery_percent:.0f}%")
        return GenerationResult(segment=segment, warnings=warnings, statistics=statistics)
