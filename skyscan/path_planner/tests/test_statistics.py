# skyscan/path_planner/tests/test_statistics.py
import unittest

from skyscan.path_planner.config import PlannerConfig, VehicleProfile
from skyscan.path_planner.data_models import ActionType, LocalCoord, MissionAction
from skyscan.path_planner.statistics import MissionStatisticsEstimator
from skyscan.path_planner.utils.waypoints import make_waypoint

POSE = PlannerConfig().default_camera_pose()


class TestMissionStatisticsEstimator(unittest.TestCase):
    def setUp(self):
        self.estimator = MissionStatisticsEstimator(VehicleProfile(battery_drain_per_minute=3.0,
                                                                   battery_drain_per_photo=0.02,
                                                                   photo_dwell_s=1.0))
        self.waypoints = [
            make_waypoint(LocalCoord(0.0, 0.0, 0.0), POSE),
            make_waypoint(LocalCoord(0.0, 0.0, 30.0), POSE),
            make_waypoint(LocalCoord(40.0, 0.0, 60.0), POSE, actions=[MissionAction(ActionType.TAKE_PHOTO)]),
        ]

    def test_distance_time_and_battery(self):
        stats = self.estimator.estimate(self.waypoints, cruise_speed=10.0)
        self.assertEqual(stats.waypoint_count, 3)
        self.assertEqual(stats.photo_count, 1)
        self.assertAlmostEqual(stats.total_distance_m, 80.0)
        self.assertAlmostEqual(stats.estimated_time_s, 9.0)
        self.assertAlmostEqual(stats.battery_percent, (9.0 / 60.0 * 3.0 + 0.02) * 1.15)
        self.assertAlmostEqual(stats.estimated_time_min, 0.15)

    def test_zero_speed_skips_travel_time(self):
        stats = self.estimator.estimate(self.waypoints, cruise_speed=0.0)
        self.assertEqual(stats.estimated_time_s, 1.0)

    def test_battery_capped(self):
        far = [make_waypoint(LocalCoord(0.0, 0.0, 0.0), POSE), make_waypoint(LocalCoord(200000.0, 0.0, 0.0), POSE)]
        self.assertEqual(self.estimator.estimate(far, cruise_speed=5.0).battery_percent, 100.0)

    def test_empty_path(self):
        stats = MissionStatisticsEstimator().estimate([], cruise_speed=5.0)
        self.assertEqual((stats.waypoint_count, stats.total_distance_m, stats.battery_percent), (0, 0.0, 0.0))


if __name__ == '__main__':
    unittest.main()
