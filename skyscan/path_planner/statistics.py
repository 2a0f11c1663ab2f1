# skyscan/path_planner/statistics.py
import logging
from typing import List, Optional

import numpy as np

from .config import VehicleProfile
from .constants import PlannerConstants
from .data_models import ActionType, MissionStatistics, Waypoint

logger = logging.getLogger(__name__)


class MissionStatisticsEstimator:
    """Distance, duration and battery estimates for a waypoint sequence."""

    def __init__(self, profile: Optional[VehicleProfile] = None):
        self.profile = profile or VehicleProfile()

    @staticmethod
    def path_length(waypoints: List[Waypoint]) -> float:
        if len(waypoints) < 2:
            return 0.0
        coords = np.array([wp.local.as_tuple() for wp in waypoints], dtype=float)
        return float(np.sum(np.linalg.norm(np.diff(coords, axis=0), axis=1)))

    def estimate(self, waypoints: List[Waypoint], cruise_speed: float) -> MissionStatistics:
        photo_count = sum(1 for wp in waypoints if wp.has_action(ActionType.TAKE_PHOTO))
        distance = self.path_length(waypoints)
        travel_s = distance / cruise_speed if cruise_speed > 0 else 0.0
        time_s = travel_s + photo_count * self.profile.photo_dwell_s

        battery = ((time_s / 60.0) * self.profile.battery_drain_per_minute
                   + photo_count * self.profile.battery_drain_per_photo) * PlannerConstants.BATTERY_SAFETY_MARGIN
        battery = min(PlannerConstants.BATTERY_MAX_PERCENT, battery)
        if battery >= PlannerConstants.BATTERY_MAX_PERCENT:
            logger.warning(f"Estimated battery use reaches {PlannerConstants.BATTERY_MAX_PERCENT:.0f}% "
                           f"for profile '{self.profile.name}'")

        return MissionStatistics(
            waypoint_count=len(waypoints),
            photo_count=photo_count,
            total_distance_m=distance,
            estimated_time_s=time_s,
            battery_percent=battery,
        )
