"""Unit tests for geometry value objects and utility functions.

Tests the domain objects in unistroke_lib.domain.geometry and the pure
functions in unistroke_lib.utils.geometry:
    - Point arithmetic and distance
    - BBox construction and extents
    - centroid, bounding_box, path_length, path_distance
    - rotate_by, scale_to, translate_to
"""

import math
import unittest

from unistroke_lib.domain.geometry import BBox, Point
from unistroke_lib.utils.geometry import (
    bounding_box,
    centroid,
    path_distance,
    path_length,
    rotate_by,
    scale_to,
    translate_to,
)


class TestPoint(unittest.TestCase):
    """Tests for the Point value object."""

    def test_distance_345(self):
        """Distance along a 3-4-5 triangle."""
        self.assertEqual(Point(0, 0).distance_to(Point(3, 4)), 5.0)

    def test_arithmetic(self):
        """Vector operators return new points."""
        p = Point(1, 2)
        q = Point(3, 5)
        self.assertEqual(p + q, Point(4, 7))
        self.assertEqual(q - p, Point(2, 3))

    def test_immutable(self):
        """Points cannot be modified in place."""
        p = Point(1, 2)
        with self.assertRaises(AttributeError):
            p.x = 5

    def test_from_tuple_accepts_lists(self):
        """Both tuples and lists convert to floats."""
        self.assertEqual(Point.from_tuple((1, 2)), Point(1.0, 2.0))
        self.assertEqual(Point.from_tuple([3, 4]), Point(3.0, 4.0))


class TestBBox(unittest.TestCase):
    """Tests for the BBox value object."""

    def test_from_points(self):
        """Bounding box spans min and max of both axes."""
        bbox = BBox.from_points([Point(3, 7), Point(-1, 2), Point(5, 4)])
        self.assertEqual(bbox, BBox(-1, 2, 5, 7))
        self.assertEqual(bbox.width, 6)
        self.assertEqual(bbox.height, 5)

    def test_from_no_points_raises(self):
        """An empty sequence has no bounding box."""
        with self.assertRaises(ValueError):
            BBox.from_points([])


class TestCentroid(unittest.TestCase):
    """Tests for centroid."""

    def test_square_corners(self):
        pts = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
        self.assertEqual(centroid(pts), Point(1, 1))

    def test_single_point(self):
        self.assertEqual(centroid([Point(5, -3)]), Point(5, -3))

    def test_empty_raises(self):
        with self.assertRaises(ValueError):
            centroid([])


class TestBoundingBox(unittest.TestCase):
    """Tests for bounding_box."""

    def test_extents(self):
        pts = [Point(10, 20), Point(40, 25), Point(15, 60)]
        bbox = bounding_box(pts)
        self.assertEqual(bbox, BBox(10, 20, 40, 60))
        self.assertEqual((bbox.width, bbox.height), (30, 40))

    def test_empty_raises(self):
        with self.assertRaises(ValueError):
            bounding_box([])


class TestPathLength(unittest.TestCase):
    """Tests for path_length."""

    def test_single_point_is_zero(self):
        self.assertEqual(path_length([Point(1, 1)]), 0.0)

    def test_two_segments(self):
        pts = [Point(0, 0), Point(3, 4), Point(6, 8)]
        self.assertEqual(path_length(pts), 10.0)

    def test_backtracking_counts_twice(self):
        pts = [Point(0, 0), Point(10, 0), Point(0, 0)]
        self.assertEqual(path_length(pts), 20.0)


class TestPathDistance(unittest.TestCase):
    """Tests for path_distance."""

    def test_identical_is_zero(self):
        pts = [Point(1, 2), Point(3, 4)]
        self.assertEqual(path_distance(pts, list(pts)), 0.0)

    def test_is_raw_sum(self):
        """Per-index distances are summed, not averaged."""
        a = [Point(0, 0), Point(10, 10), Point(20, 0)]
        b = [p + Point(3, 4) for p in a]
        self.assertAlmostEqual(path_distance(a, b), 15.0)

    def test_length_mismatch_raises(self):
        with self.assertRaises(ValueError):
            path_distance([Point(0, 0)], [Point(0, 0), Point(1, 1)])


class TestTransforms(unittest.TestCase):
    """Tests for rotate_by, scale_to and translate_to."""

    def test_rotate_quarter_turn_about_centroid(self):
        pts = rotate_by([Point(0, 0), Point(2, 0)], math.pi / 2)
        self.assertAlmostEqual(pts[0].x, 1.0)
        self.assertAlmostEqual(pts[0].y, -1.0)
        self.assertAlmostEqual(pts[1].x, 1.0)
        self.assertAlmostEqual(pts[1].y, 1.0)

    def test_rotate_keeps_centroid(self):
        pts = [Point(1, 1), Point(4, 2), Point(3, 7)]
        c0 = centroid(pts)
        c1 = centroid(rotate_by(pts, 0.7))
        self.assertAlmostEqual(c0.x, c1.x)
        self.assertAlmostEqual(c0.y, c1.y)

    def test_scale_is_anisotropic(self):
        pts = scale_to([Point(0, 0), Point(10, 5)], 250)
        self.assertEqual(pts[1], Point(250, 250))
        self.assertEqual(bounding_box(pts), BBox(0, 0, 250, 250))

    def test_scale_multiplies_without_shifting(self):
        """Coordinates are multiplied, not moved to the box corner."""
        pts = scale_to([Point(10, 10), Point(20, 30)], 100)
        self.assertEqual(pts[0], Point(100, 50))
        self.assertEqual(pts[1], Point(200, 150))

    def test_scale_skips_zero_height(self):
        """A horizontal stroke keeps its y coordinates."""
        pts = scale_to([Point(0, 7), Point(10, 7)], 250)
        self.assertEqual(pts, [Point(0, 7), Point(250, 7)])

    def test_scale_skips_zero_width(self):
        pts = scale_to([Point(3, 0), Point(3, 50)], 250)
        self.assertEqual(pts, [Point(3, 0), Point(3, 250)])

    def test_translate_moves_centroid(self):
        pts = translate_to([Point(0, 0), Point(4, 2)], Point(10, 10))
        self.assertEqual(centroid(pts), Point(10, 10))
        self.assertEqual(pts[0], Point(8, 9))


if __name__ == '__main__':
    unittest.main()
