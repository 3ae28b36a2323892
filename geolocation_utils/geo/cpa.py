"""Closest point of approach (CPA) of two moving tracks.

Both tracks are assumed to keep their heading and speed. Positions are
projected onto a flat east/north plane centred on the first track, which
makes this a cheap linear approximation: fine for tracks a few tens of
kilometres apart over minutes to hours, not a spherical solver.

Units are SI throughout: positions in degrees, speed in m/s, heading in
degrees, returned time in seconds and distance in meters.

Source:
    http://geomalgorithms.com/a07-_distance.html
"""

from __future__ import annotations

import logging
from math import cos, sin

import numpy as np

from ..config import VELOCITY_EPSILON
from ..unit import Degree, MeterPerSecond, deg_to_rad, magnitude_in
from .distance import heading_distance_to
from .types import LocationHeadingSpeed, TimeDistance

logger = logging.getLogger(__name__)


def _east_north(heading: float, magnitude: float) -> np.ndarray:
    """Split a vector given as heading (degrees) and length into (east, north)."""
    angle = deg_to_rad(heading)
    return magnitude * np.array([sin(angle), cos(angle)])


def _heading_speed(track: LocationHeadingSpeed) -> tuple[float, float]:
    """Heading in degrees and speed in m/s of a track, typed units converted."""
    heading = magnitude_in(track.heading, Degree)
    speed = magnitude_in(track.speed, MeterPerSecond)
    return heading, speed


def cpa(track1: LocationHeadingSpeed, track2: LocationHeadingSpeed) -> TimeDistance:
    """Calculate the closest point of approach of two tracks.

    Solves ``t = -(dp . dv) / (dv . dv)`` for the relative position ``dp`` and
    relative velocity ``dv`` of track2 with respect to track1. When both
    tracks move with the same velocity (including both stationary) their
    separation never changes and the CPA is now: time 0, current distance.

    Args:
        track1: First track, speed in m/s and heading in degrees. Typed
            ``Angle`` / ``Velocity`` values are accepted as well.
        track2: Second track.

    Returns:
        TimeDistance: Time in seconds until the CPA and the distance in meters
        between the tracks at that time. A negative time means the tracks
        were closest in the past.

    Raises:
        TypeError: If a heading is not an angle or a speed not a velocity.
    """
    offset = heading_distance_to(track1.location, track2.location)
    position = _east_north(offset.heading, offset.distance)
    velocity1 = _east_north(*_heading_speed(track1))
    velocity2 = _east_north(*_heading_speed(track2))
    velocity = velocity2 - velocity1

    speed_squared = float(np.dot(velocity, velocity))
    if speed_squared < VELOCITY_EPSILON:
        logger.debug("Tracks move with equal velocity, CPA is the current position")
        time = 0.0
    else:
        time = -float(np.dot(position, velocity)) / speed_squared

    distance = float(np.linalg.norm(position + time * velocity))
    return TimeDistance(time=time, distance=distance)
