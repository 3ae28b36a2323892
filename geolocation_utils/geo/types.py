"""Value types exchanged by the geometry functions.

All of them are immutable. Plain numbers are in SI / degrees:

    - headings in degrees clockwise from true north
    - distances in meters
    - speeds in meters per second
    - times in seconds
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from ..unit import Angle, Degree, MeterPerSecond, Velocity, magnitude_in
from .location import Location


class BoundingBox(NamedTuple):
    """Rectangle described by two opposite corners.

    Boxes produced by :func:`~geolocation_utils.geo.region.get_bounding_box`
    have ``top_left`` at (max latitude, min longitude) and ``bottom_right`` at
    (min latitude, max longitude). Containment tests accept either diagonal.
    """

    top_left: Location
    bottom_right: Location


class HeadingDistance(NamedTuple):
    """Heading in degrees and distance in meters."""

    heading: float
    distance: float


class TimeDistance(NamedTuple):
    """Time in seconds and distance in meters.

    A negative time means the event lies in the past.
    """

    time: float
    distance: float


@dataclass(frozen=True)
class LocationHeadingSpeed:
    """A track: a location moving on a constant heading at a constant speed.

    Attributes:
        location (Location): Current position.
        heading (float): Course over ground in degrees, or an ``Angle``.
        speed (float): Speed in meters per second, or a ``Velocity``.

    Example:
        >>> from geolocation_utils.unit import Degree, Knot
        >>> track = LocationHeadingSpeed.from_units(
        ...     {"lat": 51.9, "lon": 4.1}, Degree(270), Knot(12)
        ... )
        >>> round(track.speed, 3)
        6.173
    """

    location: Location
    heading: float | Angle
    speed: float | Velocity

    @classmethod
    def from_units(
        cls, location: Location, heading: float | Angle, speed: float | Velocity
    ) -> LocationHeadingSpeed:
        """Create a track with heading in degrees and speed in m/s.

        Typed values are converted; plain numbers are taken as degrees and m/s.

        Args:
            location: Current position.
            heading: Course as any angle unit, or degrees.
            speed: Speed as any velocity unit, e.g. ``Knot(12)``, or m/s.

        Returns:
            LocationHeadingSpeed: Track with heading in degrees and speed in m/s.

        Raises:
            TypeError: If ``heading`` is not an angle or ``speed`` not a velocity.
        """
        return cls(
            location,
            magnitude_in(heading, Degree),
            magnitude_in(speed, MeterPerSecond),
        )
