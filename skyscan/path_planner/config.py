# skyscan/path_planner/config.py
"""
Per-call configuration objects. Nothing here is shared between calls: each
planner owns its PlannerConfig and every default camera pose is a new object.
"""
from dataclasses import dataclass

from .constants import PlannerConstants
from .data_models import CameraPose, CoverageStrategy, MissionType, ScanDirection


@dataclass
class PlannerConfig:
    """Tunable parameters for path synthesis."""
    turnaround_buffer_m: float = 5.0
    safe_altitude_buffer_m: float = 5.0
    detour_clearance_m: float = 10.0
    dedupe_epsilon_m: float = PlannerConstants.DEDUPE_EPSILON_M
    zoom_position: float = 0.5
    default_strategy: CoverageStrategy = CoverageStrategy.IMAGE_CENTERS
    default_mission_type: MissionType = MissionType.PHOTOGRAMMETRY
    default_scan_direction: ScanDirection = ScanDirection.HORIZONTAL
    include_ground_projections: bool = False
    compute_statistics: bool = True

    # Default camera pose values (nadir)
    camera_fov_deg: float = 60.0
    camera_aspect_ratio: float = 16 / 9
    camera_near_m: float = 0.1
    camera_far_m: float = 1000.0
    camera_pitch_deg: float = -90.0

    def default_camera_pose(self, heading: float = 0.0) -> CameraPose:
        return CameraPose(
            fov=self.camera_fov_deg,
            aspect_ratio=self.camera_aspect_ratio,
            near=self.camera_near_m,
            far=self.camera_far_m,
            heading=heading,
            pitch=self.camera_pitch_deg,
            roll=0.0,
        )


@dataclass
class VehicleProfile:
    """Battery and capture timing model of a multirotor."""
    name: str = "generic_quadcopter"
    battery_drain_per_minute: float = 3.0
    battery_drain_per_photo: float = 0.02
    photo_dwell_s: float = 1.0
