"""Aggregates over lists of locations."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ..errors import InvalidInputError
from .location import (
    Location,
    create_location,
    get_latitude,
    get_location_type,
    get_longitude,
)


def average(locations: Sequence[Location]) -> Location:
    """Calculate the average of a list of locations.

    Latitude and longitude are averaged independently. Longitudes are not
    unwrapped, so averaging -179° and 179° gives 0°, not 180°.

    Args:
        locations: Locations in any supported shape.

    Returns:
        Location: The mean location, in the shape of the first input.

    Raises:
        InvalidInputError: If ``locations`` is empty.
    """
    points = list(locations)
    if not points:
        msg = "Cannot average an empty list of locations"
        raise InvalidInputError(msg)

    coordinates = np.array(
        [(get_latitude(point), get_longitude(point)) for point in points], dtype=float
    )
    latitude, longitude = coordinates.mean(axis=0)
    location_type = get_location_type(points[0])
    return create_location(float(latitude), float(longitude), location_type)
