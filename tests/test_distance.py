"""
Tests for distance, heading and move_to.
"""

import math
import unittest

from geolocation_utils import EARTH_RADIUS
from geolocation_utils.geo import (
    HeadingDistance,
    distance_to,
    get_latitude,
    get_longitude,
    heading_distance_to,
    heading_to,
    is_equal,
    move_to,
)
from geolocation_utils.unit import Degree, Kilometer, Knot

ONE_DEGREE = float(EARTH_RADIUS) * math.pi / 180


class TestDistance(unittest.TestCase):
    """Test great-circle distances."""

    def test_one_degree_at_equator(self):
        """Test one degree of longitude on the equator."""
        distance = distance_to({"lat": 0, "lon": 0}, {"lat": 0, "lon": 1})
        self.assertAlmostEqual(distance, 111195, delta=50)

    def test_same_location_is_zero(self):
        """Test distance to the same location is zero."""
        location = {"lat": 52.3, "lon": 4.9}
        self.assertEqual(distance_to(location, location), 0.0)

    def test_distance_symmetry(self):
        """Test that distance is symmetric."""
        pairs = [
            ({"lat": 51.9225, "lon": 4.4792}, {"lat": 52.3676, "lon": 4.9041}),
            ((-73.98, 40.75), (151.21, -33.87)),
            ({"lat": -89.0, "lon": 0.0}, {"lat": 89.0, "lon": 179.0}),
        ]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertAlmostEqual(distance_to(a, b), distance_to(b, a), delta=1e-6)

    def test_antipodal(self):
        """Test that antipodal points give half the circumference, not NaN."""
        half = math.pi * float(EARTH_RADIUS)
        self.assertAlmostEqual(distance_to((0, 0), (180, 0)), half, delta=1)
        self.assertAlmostEqual(distance_to((20, 10), (-160, -10)), half, delta=1)

    def test_shapes_can_be_mixed(self):
        """Test measuring between locations of different shapes."""
        self.assertAlmostEqual(
            distance_to({"latitude": 0, "longitude": 0}, (1, 0)), ONE_DEGREE, delta=1e-6
        )


class TestHeading(unittest.TestCase):
    """Test initial headings."""

    def test_cardinal_directions(self):
        """Test headings to the north, east, south and west."""
        origin = {"lat": 0, "lon": 0}
        self.assertAlmostEqual(heading_to(origin, {"lat": 1, "lon": 0}), 0)
        self.assertAlmostEqual(heading_to(origin, {"lat": 0, "lon": 1}), 90)
        self.assertAlmostEqual(heading_to(origin, {"lat": -1, "lon": 0}), 180)
        self.assertAlmostEqual(heading_to(origin, {"lat": 0, "lon": -1}), 270)

    def test_same_location_heading_is_zero(self):
        """Test that identical locations have heading 0 and do not raise."""
        location = {"lat": 52.3, "lon": 4.9}
        self.assertEqual(heading_to(location, location), 0.0)
        self.assertEqual(heading_distance_to(location, location), (0.0, 0.0))

    def test_reciprocal_headings(self):
        """Test that the way back differs by 180 degrees."""
        pairs = [
            ({"lat": 10, "lon": 5}, {"lat": 20, "lon": 5}),
            ({"lat": 0, "lon": 10}, {"lat": 0, "lon": 20}),
            ({"lat": 52.0, "lon": 4.0}, {"lat": 52.01, "lon": 4.01}),
        ]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                difference = (heading_to(b, a) - heading_to(a, b)) % 360
                self.assertAlmostEqual(difference, 180, delta=0.02)

    def test_heading_in_range(self):
        """Test that headings are normalized into [0, 360)."""
        heading = heading_to({"lat": 10, "lon": 10}, {"lat": 9, "lon": 9})
        self.assertGreaterEqual(heading, 0)
        self.assertLess(heading, 360)
        self.assertAlmostEqual(heading, 225, delta=1)


class TestHeadingDistance(unittest.TestCase):
    """Test the combined heading and distance."""

    def test_consistent_with_separate_functions(self):
        """Test that the combined result equals heading_to and distance_to."""
        a = {"lat": 51.9225, "lon": 4.4792}
        b = (4.9041, 52.3676)
        result = heading_distance_to(a, b)
        self.assertIsInstance(result, HeadingDistance)
        self.assertEqual(result.heading, heading_to(a, b))
        self.assertEqual(result.distance, distance_to(a, b))


class TestMoveTo(unittest.TestCase):
    """Test moving along a heading over a distance."""

    def test_move_east_on_equator(self):
        """Test moving one degree east along the equator."""
        moved = move_to({"lat": 0, "lon": 0}, HeadingDistance(90, ONE_DEGREE))
        self.assertAlmostEqual(get_latitude(moved), 0, delta=1e-9)
        self.assertAlmostEqual(get_longitude(moved), 1, delta=1e-9)

    def test_keeps_shape(self):
        """Test that the result has the shape of the origin."""
        moved = move_to((4.9, 52.3), HeadingDistance(0, 1000))
        self.assertIsInstance(moved, tuple)
        self.assertAlmostEqual(moved[0], 4.9, delta=1e-9)
        self.assertGreater(moved[1], 52.3)

    def test_crossing_antimeridian_is_normalized(self):
        """Test that the longitude wraps after crossing 180 degrees."""
        moved = move_to({"lat": 0, "lon": 179.5}, HeadingDistance(90, ONE_DEGREE))
        self.assertAlmostEqual(get_longitude(moved), -179.5, delta=1e-6)

    def test_crossing_pole_is_normalized(self):
        """Test that moving over a pole reflects the latitude."""
        moved = move_to({"lat": 89.5, "lon": 10}, HeadingDistance(0, ONE_DEGREE))
        self.assertAlmostEqual(get_latitude(moved), 89.5, delta=1e-6)
        self.assertAlmostEqual(get_longitude(moved), -170, delta=1e-6)

    def test_round_trip(self):
        """Test that moving by heading_distance_to lands close to the target."""
        a = {"lat": 52.0, "lon": 4.0}
        b = {"lat": 52.05, "lon": 4.1}
        moved = move_to(a, heading_distance_to(a, b))
        self.assertTrue(is_equal(moved, b, 1e-3))

    def test_accepts_units(self):
        """Test heading and distance given as typed units."""
        origin = {"lat": 30, "lon": 30}
        typed = move_to(origin, HeadingDistance(Degree(45), Kilometer(1)))
        plain = move_to(origin, HeadingDistance(45, 1000))
        self.assertTrue(is_equal(typed, plain, 1e-9))

    def test_rejects_wrong_units(self):
        """Test that a speed is not accepted as a distance."""
        with self.assertRaises(TypeError):
            move_to({"lat": 0, "lon": 0}, HeadingDistance(90, Knot(3)))


if __name__ == "__main__":
    unittest.main()
