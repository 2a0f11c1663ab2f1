# skyscan/geometry/tests/test_hull.py
import random
import unittest

import numpy as np
from scipy.spatial import ConvexHull

from skyscan.geometry.hull import convex_hull, cross
from skyscan.geometry.polygon import is_point_in_polygon, polygon_area


class TestConvexHull(unittest.TestCase):
    def test_square_with_interior_points(self):
        """Interior points are dropped and the hull is counter-clockwise"""
        points = [(0, 0), (10, 0), (10, 10), (0, 10), (5, 5), (2, 7)]
        hull = convex_hull(points)
        self.assertEqual(len(hull), 4)
        self.assertEqual(set(hull), {(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)})
        for i in range(len(hull)):
            self.assertGreater(cross(hull[i], hull[(i + 1) % 4], hull[(i + 2) % 4]), 0)

    def test_collinear_and_duplicate_points_removed(self):
        points = [(0, 0), (5, 0), (10, 0), (10, 10), (0, 10), (0, 10), (10, 0)]
        hull = convex_hull(points)
        self.assertEqual(len(hull), 4)
        self.assertNotIn((5.0, 0.0), hull)

    def test_fewer_than_three_points_returned_unchanged(self):
        self.assertEqual(convex_hull([(1, 2), (3, 4)]), [(1.0, 2.0), (3.0, 4.0)])
        self.assertEqual(convex_hull([]), [])

    def test_all_identical_points(self):
        """Deduplication leaves a single point"""
        self.assertEqual(convex_hull([(2, 2), (2, 2), (2, 2)]), [(2.0, 2.0)])

    def test_matches_scipy_on_random_clouds(self):
        """Hull vertices agree with scipy.spatial.ConvexHull"""
        rng = random.Random(42)
        for _ in range(10):
            points = [(rng.uniform(-50, 50), rng.uniform(-50, 50)) for _ in range(60)]
            hull = convex_hull(points)
            reference = ConvexHull(np.array(points))
            expected = {tuple(points[i]) for i in reference.vertices}
            self.assertEqual(set(hull), expected)
            self.assertAlmostEqual(polygon_area(hull), reference.volume, places=6)

    def test_every_input_point_inside_or_on_hull(self):
        rng = random.Random(7)
        points = [(rng.uniform(0, 20), rng.uniform(0, 20)) for _ in range(40)]
        hull = convex_hull(points)
        hull_set = set(hull)
        for x, y in points:
            if (x, y) in hull_set:
                continue
            self.assertTrue(is_point_in_polygon(x, y, hull))


if __name__ == '__main__':
    unittest.main()
