# skyscan/path_planner/tests/test_raster.py
import math
import unittest

from skyscan.path_planner.data_models import AltitudeReference, LocalCoord, RasterOrientation, RasterParams
from skyscan.path_planner.exceptions import InvalidParameterError, MissingInputError
from skyscan.path_planner.raster import RasterPatternGenerator


def _params(**overrides):
    values = dict(start=LocalCoord(10.0, 20.0, 5.0), length=50.0, spacing=8.0, passes=4, altitude_agl=30.0)
    values.update(overrides)
    return RasterParams(**values)


class TestRasterPatternGenerator(unittest.TestCase):
    def setUp(self):
        self.generator = RasterPatternGenerator()

    def test_snake_waypoint_count(self):
        for passes in (1, 2, 5):
            self.assertEqual(len(self.generator.generate(_params(passes=passes))), 2 * passes)

    def test_non_snake_waypoint_count(self):
        for passes in (1, 2, 5):
            waypoints = self.generator.generate(_params(passes=passes, snake=False))
            self.assertEqual(len(waypoints), 2 * passes + (passes - 1))

    def test_snake_geometry_and_headings(self):
        waypoints = self.generator.generate(_params(passes=2))
        coords = [(wp.local.x, wp.local.y) for wp in waypoints]
        self.assertEqual(coords, [(10.0, 20.0), (60.0, 20.0), (60.0, 28.0), (10.0, 28.0)])
        self.assertEqual([wp.camera.heading for wp in waypoints], [90.0, 90.0, -90.0, -90.0])

    def test_non_snake_returns_to_pass_start(self):
        waypoints = self.generator.generate(_params(passes=2, snake=False))
        coords = [(wp.local.x, wp.local.y) for wp in waypoints]
        self.assertEqual(coords, [(10.0, 20.0), (60.0, 20.0), (10.0, 20.0), (10.0, 28.0), (60.0, 28.0)])

    def test_vertical_orientation(self):
        waypoints = self.generator.generate(_params(passes=2, orientation=RasterOrientation.VERTICAL))
        coords = [(wp.local.x, wp.local.y) for wp in waypoints]
        self.assertEqual(coords, [(10.0, 20.0), (10.0, 70.0), (18.0, 70.0), (18.0, 20.0)])
        self.assertEqual([wp.camera.heading for wp in waypoints], [0.0, 0.0, 180.0, 180.0])

    def test_altitude_is_start_plus_agl(self):
        waypoints = self.generator.generate(_params())
        for wp in waypoints:
            self.assertEqual(wp.local.z, 35.0)
            self.assertEqual(wp.altitude, 30.0)
        absolute = self.generator.generate(_params(), alt_reference=AltitudeReference.ABSOLUTE)
        self.assertEqual(absolute[0].altitude, 35.0)

    def test_camera_poses_are_independent(self):
        waypoints = self.generator.generate(_params(passes=2))
        waypoints[0].camera.heading = 12.0
        self.assertEqual(waypoints[1].camera.heading, 90.0)

    def test_invalid_parameters(self):
        cases = ({'passes': 0}, {'passes': 2.5}, {'passes': 5000}, {'length': 0}, {'spacing': -1},
                 {'altitude_agl': 0}, {'length': None}, {'spacing': None}, {'length': float('nan')},
                 {'spacing': math.inf}, {'altitude_agl': float('nan')}, {'speed': math.inf},
                 {'start': LocalCoord(0.0, float('nan'), 0.0)})
        for overrides in cases:
            with self.subTest(overrides=overrides):
                with self.assertRaises(InvalidParameterError):
                    self.generator.generate(_params(**overrides))
        with self.assertRaises(MissingInputError):
            self.generator.generate(_params(start=None))


if __name__ == '__main__':
    unittest.main()
