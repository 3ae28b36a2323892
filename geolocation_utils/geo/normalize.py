"""Reduce angles and coordinates to their canonical ranges.

    ==========  ===============  =======================================
    Quantity    Range            Behaviour at the bounds
    ==========  ===============  =======================================
    heading     [0, 360)         360 becomes 0
    latitude    [-90, 90]        both poles kept, values beyond reflect
    longitude   (-180, 180]      -180 becomes 180
    ==========  ===============  =======================================
"""

from __future__ import annotations

from .location import (
    Location,
    create_location,
    get_latitude,
    get_location_type,
    get_longitude,
)


def normalize_heading(heading: float) -> float:
    """Normalize a heading into the range [0, 360).

    Args:
        heading: Heading in degrees, any real value.

    Returns:
        float: Equivalent heading in [0, 360).
    """
    if 0 <= heading < 360:
        return heading

    normalized = heading % 360
    # a tiny negative input rounds up to exactly 360
    return 0.0 if normalized == 360 else normalized


def _reduce_latitude(latitude: float) -> tuple[float, bool]:
    """Fold a latitude into [-90, 90] and tell whether it crossed a pole."""
    if -90 <= latitude <= 90:
        return latitude, False

    wrapped = latitude % 360
    if wrapped > 180:
        wrapped -= 360
    if wrapped > 90:
        return 180 - wrapped, True
    if wrapped < -90:
        return -180 - wrapped, True
    return wrapped, False


def normalize_latitude(latitude: float) -> float:
    """Normalize a latitude into the range [-90, 90], bounds included.

    The value is first reduced modulo 360 and then reflected over the poles,
    so 100 becomes 80, -100 becomes -80 and 450 becomes 90.

    Args:
        latitude: Latitude in degrees, any real value.

    Returns:
        float: Normalized latitude.
    """
    return _reduce_latitude(latitude)[0]


def normalize_longitude(longitude: float) -> float:
    """Normalize a longitude into the range (-180, 180].

    The lower bound is excluded and the upper bound included: 180 stays 180,
    -180 becomes 180.

    Args:
        longitude: Longitude in degrees, any real value.

    Returns:
        float: Normalized longitude.
    """
    if -180 < longitude <= 180:
        return longitude

    normalized = longitude % 360
    if normalized > 180:
        normalized -= 360
    return normalized


def normalize_location(location: Location) -> Location:
    """Normalize the latitude and longitude of a location.

    Crossing a pole lands on the opposite meridian, so when the latitude is
    reflected the longitude is turned by 180° before it is normalized.

    Args:
        location: Location in any supported shape.

    Returns:
        Location: New location of the same shape, latitude in [-90, 90] and
        longitude in (-180, 180].
    """
    latitude, crossed_pole = _reduce_latitude(get_latitude(location))
    longitude = get_longitude(location)
    if crossed_pole:
        longitude += 180

    return create_location(
        latitude, normalize_longitude(longitude), get_location_type(location)
    )
