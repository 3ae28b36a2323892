"""Distance and heading between locations on a spherical earth.

The earth is modelled as a sphere of radius
:data:`~geolocation_utils.config.EARTH_RADIUS`. Distances are great-circle
distances (haversine formula) and headings are initial bearings (forward
azimuth). This is accurate to a few tenths of a percent, good enough for
navigation but not for surveying.

Sources:
    http://www.movable-type.co.uk/scripts/latlong.html
    http://mathforum.org/library/drmath/view/55417.html
"""

from __future__ import annotations

import logging
from math import atan2, cos, sin, sqrt

from ..config import EARTH_RADIUS
from ..unit import Degree, Meter, deg_to_rad, magnitude_in, rad_to_deg
from .location import (
    Location,
    create_location,
    get_latitude,
    get_location_type,
    get_longitude,
)
from .normalize import normalize_heading, normalize_location
from .types import HeadingDistance

logger = logging.getLogger(__name__)


def _central_angle(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Angle in radians between two points given in radians."""
    a = (
        sin((lat2 - lat1) / 2) ** 2
        + cos(lat1) * cos(lat2) * sin((lon2 - lon1) / 2) ** 2
    )
    # rounding can push a slightly outside [0, 1] near antipodes
    a = min(max(a, 0.0), 1.0)
    return 2 * atan2(sqrt(a), sqrt(1 - a))


def _initial_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Forward azimuth in degrees [0, 360) between two points given in radians."""
    if lat1 == lat2 and lon1 == lon2:
        logger.debug("Heading between identical locations, returning 0")
        return 0.0

    d_lon = lon2 - lon1
    y = sin(d_lon) * cos(lat2)
    x = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(d_lon)
    return normalize_heading(rad_to_deg(atan2(y, x)))


def _radians(location: Location) -> tuple[float, float]:
    return deg_to_rad(get_latitude(location)), deg_to_rad(get_longitude(location))


def heading_distance_to(origin: Location, target: Location) -> HeadingDistance:
    """Calculate the heading and distance from one location to another.

    The result is exactly ``(heading_to(origin, target), distance_to(origin,
    target))``; both are derived from the same radian coordinates.

    Args:
        origin: Start location.
        target: End location.

    Returns:
        HeadingDistance: Heading in degrees [0, 360) and distance in meters.
    """
    lat1, lon1 = _radians(origin)
    lat2, lon2 = _radians(target)
    return HeadingDistance(
        heading=_initial_bearing(lat1, lon1, lat2, lon2),
        distance=float(EARTH_RADIUS) * _central_angle(lat1, lon1, lat2, lon2),
    )


def distance_to(origin: Location, target: Location) -> float:
    """Calculate the great-circle distance between two locations.

    Args:
        origin: First location.
        target: Second location.

    Returns:
        float: Distance in meters, 0.0 for identical locations.
    """
    lat1, lon1 = _radians(origin)
    lat2, lon2 = _radians(target)
    return float(EARTH_RADIUS) * _central_angle(lat1, lon1, lat2, lon2)


def heading_to(origin: Location, target: Location) -> float:
    """Calculate the initial heading from one location to another.

    Args:
        origin: Start location.
        target: End location.

    Returns:
        float: Heading in degrees [0, 360). Identical locations have no
        defined heading; 0.0 is returned for them.
    """
    lat1, lon1 = _radians(origin)
    lat2, lon2 = _radians(target)
    return _initial_bearing(lat1, lon1, lat2, lon2)


def move_to(origin: Location, heading_distance: HeadingDistance) -> Location:
    """Move from a start location along a heading over a distance.

    This is a rough estimation: the offset is computed on a flat
    (equirectangular) patch around ``origin``, with the east-west component
    scaled by the cosine of the start latitude. The error grows with the
    distance and towards the poles.

    Source:
        http://gis.stackexchange.com/questions/2951/algorithm-for-offsetting-a-latitude-longitude-by-some-amount-of-meters

    Args:
        origin: Start location.
        heading_distance: Heading in degrees and distance in meters. Typed
            ``Angle`` / ``Length`` values are accepted as well.

    Returns:
        Location: Normalized destination in the shape of ``origin``.
    """
    latitude = get_latitude(origin)
    longitude = get_longitude(origin)
    heading = deg_to_rad(magnitude_in(heading_distance.heading, Degree))
    distance = magnitude_in(heading_distance.distance, Meter)

    radius = float(EARTH_RADIUS)
    d_lat = distance * cos(heading) / radius
    d_lon = distance * sin(heading) / (radius * cos(deg_to_rad(latitude)))

    moved = create_location(
        latitude + rad_to_deg(d_lat),
        longitude + rad_to_deg(d_lon),
        get_location_type(origin),
    )
    return normalize_location(moved)

