"""
Tests for the closest point of approach of two tracks.
"""

import unittest

from geolocation_utils.geo import (
    HeadingDistance,
    LocationHeadingSpeed,
    TimeDistance,
    cpa,
    move_to,
)
from geolocation_utils.unit import (
    Degree,
    KilometersPerHour,
    Knot,
    Meter,
    MeterPerSecond,
    knots_to_meter_per_second,
)

ORIGIN = {"lat": 0.0, "lon": 0.0}


def offset(location, heading, distance):
    return move_to(location, HeadingDistance(heading, distance))


class TestCpa(unittest.TestCase):
    """Test CPA time and distance."""

    def test_parallel_tracks(self):
        """Test equal heading and speed 1000 m apart: CPA is now."""
        track1 = LocationHeadingSpeed(ORIGIN, heading=0, speed=10)
        track2 = LocationHeadingSpeed(offset(ORIGIN, 90, 1000), heading=0, speed=10)

        result = cpa(track1, track2)
        self.assertIsInstance(result, TimeDistance)
        self.assertEqual(result.time, 0.0)
        self.assertAlmostEqual(result.distance, 1000, delta=1e-6)

    def test_both_stationary(self):
        """Test two stationary tracks keep their current separation."""
        track1 = LocationHeadingSpeed(ORIGIN, heading=45, speed=0)
        track2 = LocationHeadingSpeed(offset(ORIGIN, 0, 500), heading=270, speed=0)

        time, distance = cpa(track1, track2)
        self.assertEqual(time, 0.0)
        self.assertAlmostEqual(distance, 500, delta=1e-6)

    def test_head_on(self):
        """Test two tracks closing on each other along the equator."""
        track1 = LocationHeadingSpeed(ORIGIN, heading=90, speed=10)
        track2 = LocationHeadingSpeed(offset(ORIGIN, 90, 2000), heading=270, speed=10)

        time, distance = cpa(track1, track2)
        self.assertAlmostEqual(time, 100, delta=1e-6)
        self.assertAlmostEqual(distance, 0, delta=1e-6)

    def test_cpa_in_the_past(self):
        """Test that diverging tracks give a negative time."""
        track1 = LocationHeadingSpeed(ORIGIN, heading=270, speed=10)
        track2 = LocationHeadingSpeed(offset(ORIGIN, 90, 2000), heading=90, speed=10)

        time, distance = cpa(track1, track2)
        self.assertAlmostEqual(time, -100, delta=1e-6)
        self.assertAlmostEqual(distance, 0, delta=1e-6)

    def test_crossing_tracks(self):
        """Test a track heading east meeting a track heading south."""
        meeting_point = offset(ORIGIN, 90, 1000)
        track1 = LocationHeadingSpeed(ORIGIN, heading=90, speed=10)
        track2 = LocationHeadingSpeed(offset(meeting_point, 0, 1000), heading=180, speed=10)

        time, distance = cpa(track1, track2)
        self.assertAlmostEqual(time, 100, delta=0.01)
        self.assertAlmostEqual(distance, 0, delta=0.1)

    def test_miss_distance(self):
        """Test an overtaking track passing at a lateral offset."""
        track1 = LocationHeadingSpeed(ORIGIN, heading=0, speed=5)
        start = offset(offset(ORIGIN, 180, 1000), 90, 300)
        track2 = LocationHeadingSpeed(start, heading=0, speed=15)

        time, distance = cpa(track1, track2)
        self.assertAlmostEqual(time, 100, delta=0.01)
        self.assertAlmostEqual(distance, 300, delta=0.1)

    def test_symmetric(self):
        """Test that swapping the tracks gives the same CPA."""
        track1 = LocationHeadingSpeed({"lat": 51.95, "lon": 4.05}, heading=80, speed=6)
        track2 = LocationHeadingSpeed({"lat": 51.97, "lon": 4.10}, heading=200, speed=8)

        forward = cpa(track1, track2)
        backward = cpa(track2, track1)
        self.assertAlmostEqual(forward.time, backward.time, delta=1)
        self.assertAlmostEqual(forward.distance, backward.distance, delta=5)

    def test_typed_units_on_track(self):
        """Test tracks built directly with typed heading and speed."""
        plain1 = LocationHeadingSpeed(ORIGIN, heading=90, speed=10)
        plain2 = LocationHeadingSpeed(offset(ORIGIN, 90, 2000), heading=270, speed=10)
        typed1 = LocationHeadingSpeed(ORIGIN, heading=Degree(90), speed=10)
        typed2 = LocationHeadingSpeed(
            offset(ORIGIN, 90, 2000), heading=Degree(270), speed=MeterPerSecond(10)
        )

        expected = cpa(plain1, plain2)
        result = cpa(typed1, typed2)
        self.assertAlmostEqual(result.time, expected.time, delta=1e-9)
        self.assertAlmostEqual(result.distance, expected.distance, delta=1e-9)

    def test_speed_in_knots_on_track(self):
        """Test that a speed in knots is converted to m/s."""
        knots = LocationHeadingSpeed(ORIGIN, heading=0, speed=Knot(20))
        plain = LocationHeadingSpeed(
            ORIGIN, heading=0, speed=knots_to_meter_per_second(20)
        )
        other = LocationHeadingSpeed(offset(ORIGIN, 0, 5000), heading=180, speed=5)

        self.assertAlmostEqual(
            cpa(knots, other).time, cpa(plain, other).time, delta=1e-9
        )

    def test_wrong_units_on_track(self):
        """Test that a unit of the wrong family raises TypeError."""
        other = LocationHeadingSpeed(ORIGIN, heading=0, speed=1)
        with self.assertRaises(TypeError):
            cpa(LocationHeadingSpeed(ORIGIN, heading=Meter(5), speed=1), other)
        with self.assertRaises(TypeError):
            cpa(other, LocationHeadingSpeed(ORIGIN, heading=0, speed=Degree(1)))


class TestLocationHeadingSpeed(unittest.TestCase):
    """Test building tracks from typed units."""

    def test_from_units(self):
        """Test converting knots and km/h into m/s."""
        track = LocationHeadingSpeed.from_units(ORIGIN, Degree(90), Knot(10))
        self.assertAlmostEqual(track.heading, 90)
        self.assertAlmostEqual(track.speed, 5.144444, places=6)

        track = LocationHeadingSpeed.from_units(ORIGIN, Degree(0), KilometersPerHour(36))
        self.assertAlmostEqual(track.speed, 10)

    def test_from_units_plain_numbers(self):
        """Test that plain numbers are taken as degrees and m/s."""
        track = LocationHeadingSpeed.from_units(ORIGIN, 90, Knot(10))
        self.assertEqual(track.heading, 90.0)
        track = LocationHeadingSpeed.from_units(ORIGIN, Degree(45), 7)
        self.assertEqual(track.speed, 7.0)

    def test_from_units_rejects_wrong_units(self):
        """Test that units of the wrong family are rejected."""
        with self.assertRaises(TypeError):
            LocationHeadingSpeed.from_units(ORIGIN, Knot(1), 5)
        with self.assertRaises(TypeError):
            LocationHeadingSpeed.from_units(ORIGIN, Degree(90), Meter(5))

    def test_immutable(self):
        """Test that a track cannot be modified."""
        track = LocationHeadingSpeed(ORIGIN, heading=0, speed=1)
        with self.assertRaises(AttributeError):
            track.speed = 2


if __name__ == "__main__":
    unittest.main()
