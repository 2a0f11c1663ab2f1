# skyscan/path_planner/tests/test_planner_core.py
import math
import unittest

from skyscan.camera.data_models import CameraSpecs
from skyscan.path_planner.config import PlannerConfig
from skyscan.path_planner.core import SurveyPlanner, coverage_actions
from skyscan.path_planner.data_models import (ActionType, CoverageStrategy, LatLng, LocalCoord, MissionContext,
                                              MissionEndAction, MissionType, ObstacleFootprint, PathType,
                                              RasterParams, ScanDirection, TargetSurface)

CAMERA = CameraSpecs(focal_length=8.8, sensor_width=13.2, sensor_height=8.8,
                     image_width=5472, image_height=3648, sensor_type='1-inch')
ROOF = TargetSurface(vertices=[(0, 0, 10), (60, 0, 10), (60, 40, 10), (0, 40, 10)], normal=(0, 0, 1), name='roof')


class TestSurveyPlannerFaceMission(unittest.TestCase):
    def setUp(self):
        self.planner = SurveyPlanner(PlannerConfig(include_ground_projections=True))
        self.mission = MissionContext(takeoff=LocalCoord(-20.0, -20.0, 0.0), safety_climb=30.0)

    def test_photogrammetry_mission(self):
        result = self.planner.generate_face_mission(ROOF, CAMERA, self.mission, overlap=0.7, altitude_agl=20.0)
        self.assertTrue(result.success, result.error)
        segment = result.segment
        self.assertEqual(segment.type, PathType.POLYGON)
        self.assertTrue(segment.metadata['is_photogrammetry'])
        self.assertFalse(segment.metadata['is_lidar_mission'])
        self.assertEqual(segment.metadata['strategy'], CoverageStrategy.IMAGE_CENTERS.value)

        coverage = [wp for wp in segment.waypoints if wp.has_action(ActionType.TAKE_PHOTO)]
        self.assertEqual(len(coverage), segment.metadata['coverage_point_count'])
        for wp in coverage:
            self.assertEqual(wp.local.z, 30.0)
            self.assertEqual(wp.altitude, 30.0)
        self.assertEqual([wp.path_order for wp in segment.waypoints], list(range(len(segment.waypoints))))
        self.assertEqual(segment.waypoints[0].local, self.mission.takeoff)
        self.assertEqual(segment.waypoints[-1].local, self.mission.takeoff)
        self.assertGreater(segment.metadata['safe_altitude'], 30.0)

        self.assertEqual(len(segment.ground_projections), len(segment.waypoints))
        self.assertTrue(segment.ground_projections[0].display_options['is_ground_projection'])
        self.assertEqual(result.statistics.photo_count, len(coverage))

    def test_lidar_raster_lines_mission(self):
        result = self.planner.generate_face_mission(ROOF, CAMERA, self.mission, overlap=0.5, altitude_agl=20.0,
                                                    strategy=CoverageStrategy.RASTER_LINES,
                                                    mission_type=MissionType.LIDAR)
        self.assertTrue(result.success, result.error)
        waypoints = result.segment.waypoints
        starts = [wp for wp in waypoints if wp.has_action(ActionType.START_RECORDING)]
        stops = [wp for wp in waypoints if wp.has_action(ActionType.STOP_RECORDING)]
        self.assertEqual(len(starts), 1)
        self.assertEqual(len(stops), 1)
        self.assertLess(starts[0].path_order, stops[0].path_order)
        self.assertFalse(any(wp.has_action(ActionType.TAKE_PHOTO) for wp in waypoints))
        self.assertTrue(result.segment.metadata['is_lidar_mission'])

    def test_geodetic_tags_with_origin(self):
        mission = MissionContext(takeoff=LocalCoord(0.0, 0.0, 0.0), local_origin=LatLng(27.7, 85.3))
        result = self.planner.generate_face_mission(ROOF, CAMERA, mission, overlap=0.6, altitude_agl=25.0)
        self.assertTrue(result.success, result.error)
        first = result.segment.waypoints[0]
        self.assertAlmostEqual(first.lat, 27.7)
        self.assertAlmostEqual(first.lng, 85.3)
        self.assertTrue(all(wp.lat is not None for wp in result.segment.waypoints))

    def test_steep_face_is_reported(self):
        wall = TargetSurface(vertices=[(0, 0, 0), (30, 0, 0), (30, 2, 20), (0, 2, 20)], normal=(0, -0.99, 0.1))
        result = self.planner.generate_face_mission(wall, CAMERA, self.mission, overlap=0.6, altitude_agl=15.0)
        self.assertTrue(result.success, result.error)
        self.assertTrue(any('steep' in w for w in result.warnings))

    def test_obstacle_detour_recorded(self):
        obstacles = [ObstacleFootprint(-10.0, -10.0, 20.0, 20.0, height=25.0),
                     ObstacleFootprint(-10.0, -10.0, 8.0, 8.0, height=2.0, object_class="person")]
        result = self.planner.generate_face_mission(ROOF, CAMERA, self.mission, overlap=0.6, altitude_agl=20.0,
                                                    obstacles=obstacles)
        self.assertTrue(result.success, result.error)
        self.assertGreaterEqual(result.segment.metadata['detour_count'], 1)
        self.assertEqual(result.segment.metadata['safe_altitude'], 60.0)

    def test_invalid_inputs_return_errors(self):
        cases = [
            dict(target=ROOF, camera=CAMERA, mission=self.mission, overlap=0.0, altitude_agl=20.0),
            dict(target=ROOF, camera=CAMERA, mission=self.mission, overlap=1.0, altitude_agl=20.0),
            dict(target=ROOF, camera=CAMERA, mission=self.mission, overlap=0.5, altitude_agl=0.0),
            dict(target=ROOF, camera=None, mission=self.mission, overlap=0.5, altitude_agl=20.0),
            dict(target=ROOF, camera=CAMERA, mission=MissionContext(takeoff=None), overlap=0.5, altitude_agl=20.0),
            dict(target=TargetSurface(vertices=[(0, 0, 0), (1, 1, 0)]), camera=CAMERA, mission=self.mission,
                 overlap=0.5, altitude_agl=20.0),
            dict(target=ROOF, camera=CameraSpecs(focal_length=0, sensor_width=13.2, sensor_height=8.8),
                 mission=self.mission, overlap=0.5, altitude_agl=20.0),
            dict(target=ROOF, camera=CameraSpecs(focal_length=8.8, sensor_width=None, sensor_height=8.8),
                 mission=self.mission, overlap=0.5, altitude_agl=20.0),
            dict(target=ROOF, camera=CAMERA, mission=self.mission, overlap=0.5, altitude_agl=math.inf),
            dict(target=ROOF, camera=CAMERA, mission=self.mission, overlap=0.5, altitude_agl=float('nan')),
            dict(target=ROOF, camera=CAMERA, mission=self.mission, overlap=float('nan'), altitude_agl=20.0),
            dict(target=ROOF, camera=CAMERA, mission=MissionContext(takeoff=LocalCoord(0.0, 0.0, 0.0),
                                                                     safety_climb=float('nan')),
                 overlap=0.5, altitude_agl=20.0),
            dict(target=ROOF, camera=CAMERA, mission=MissionContext(takeoff=LocalCoord(0.0, 0.0, 0.0),
                                                                     cruise_speed=math.inf),
                 overlap=0.5, altitude_agl=20.0),
            dict(target=TargetSurface(vertices=[(0, 0, 0), (10, 0, float('nan')), (10, 10, 0)]), camera=CAMERA,
                 mission=self.mission, overlap=0.5, altitude_agl=20.0),
        ]
        for kwargs in cases:
            with self.subTest(kwargs=kwargs):
                result = self.planner.generate_face_mission(**kwargs)
                self.assertFalse(result.success)
                self.assertIsNone(result.segment)
                self.assertTrue(result.error)

    def test_oversized_coverage_grid_is_an_error(self):
        field = TargetSurface(vertices=[(0, 0, 0), (300, 0, 0), (300, 300, 0), (0, 300, 0)])
        result = self.planner.generate_face_mission(field, CAMERA, self.mission, overlap=0.9, altitude_agl=2.0)
        self.assertFalse(result.success)
        self.assertIsNone(result.segment)
        self.assertIn("coverage grid", result.error)

    def test_scan_direction_reorders_coverage(self):
        rows = self.planner.generate_face_mission(ROOF, CAMERA, self.mission, overlap=0.7, altitude_agl=20.0)
        columns = self.planner.generate_face_mission(ROOF, CAMERA, self.mission, overlap=0.7, altitude_agl=20.0,
                                                     scan_direction=ScanDirection.VERTICAL)
        self.assertTrue(columns.success, columns.error)
        self.assertEqual(rows.segment.metadata['scan_direction'], ScanDirection.HORIZONTAL.value)
        self.assertEqual(columns.segment.metadata['scan_direction'], ScanDirection.VERTICAL.value)

        def photo_points(result):
            return [wp.local for wp in result.segment.waypoints if wp.has_action(ActionType.TAKE_PHOTO)]

        by_row, by_column = photo_points(rows), photo_points(columns)
        self.assertEqual(sorted(by_row, key=lambda p: (p.x, p.y)), sorted(by_column, key=lambda p: (p.x, p.y)))
        self.assertNotEqual(by_row, by_column)


class TestSurveyPlannerRasterMission(unittest.TestCase):
    def setUp(self):
        self.planner = SurveyPlanner()

    def test_raster_mission(self):
        params = RasterParams(start=LocalCoord(10.0, 10.0, 0.0), length=40.0, spacing=10.0, passes=3,
                              altitude_agl=25.0)
        mission = MissionContext(takeoff=LocalCoord(0.0, 0.0, 0.0), end_action=MissionEndAction.LAND)
        result = self.planner.generate_raster_mission(params, mission)
        self.assertTrue(result.success, result.error)
        self.assertEqual(result.segment.type, PathType.GRID)
        photos = [wp for wp in result.segment.waypoints if wp.has_action(ActionType.TAKE_PHOTO)]
        self.assertEqual(len(photos), 6)
        self.assertEqual(result.segment.waypoints[-1].local.z, 0.0)
        self.assertEqual(result.statistics.photo_count, 6)

    def test_raster_failures(self):
        mission = MissionContext(takeoff=LocalCoord(0.0, 0.0, 0.0))
        bad = RasterParams(start=LocalCoord(0.0, 0.0, 0.0), length=40.0, spacing=10.0, passes=0, altitude_agl=25.0)
        self.assertIsNotNone(self.planner.generate_raster_mission(bad, mission).error)
        good = RasterParams(start=LocalCoord(0.0, 0.0, 0.0), length=40.0, spacing=10.0, passes=2, altitude_agl=25.0)
        self.assertIsNotNone(self.planner.generate_raster_mission(good, MissionContext(takeoff=None)).error)

    def test_estimate_statistics(self):
        params = RasterParams(start=LocalCoord(0.0, 0.0, 0.0), length=40.0, spacing=10.0, passes=2,
                              altitude_agl=25.0)
        result = self.planner.generate_raster_mission(params, MissionContext(takeoff=LocalCoord(0.0, 0.0, 0.0)))
        stats = self.planner.estimate_statistics(result.segment)
        self.assertEqual(stats.waypoint_count, len(result.segment.waypoints))
        self.assertGreater(stats.total_distance_m, 0.0)


class TestCoverageActions(unittest.TestCase):
    def test_lidar_single_point_starts_and_stops(self):
        actions = [a.type for a in coverage_actions(0, 1, MissionType.LIDAR)]
        self.assertEqual(actions, [ActionType.START_RECORDING, ActionType.STOP_RECORDING])
        self.assertEqual(coverage_actions(3, 10, MissionType.LIDAR), [])


if __name__ == '__main__':
    unittest.main()
