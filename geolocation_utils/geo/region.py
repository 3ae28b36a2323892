"""Bounding boxes and containment tests.

Bounding box and polygon tests treat longitude and latitude as plain planar
coordinates. Regions that cross the antimeridian are not supported: a box or
polygon spanning ±180° longitude gives wrong answers, it is not unwrapped.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import cos

import numpy as np

from ..config import EARTH_RADIUS, EDGE_TOLERANCE
from ..errors import InvalidInputError
from ..unit import Length, Meter, deg_to_rad, magnitude_in, rad_to_deg
from .distance import distance_to
from .location import (
    Location,
    create_location,
    get_latitude,
    get_location_type,
    get_longitude,
)
from .types import BoundingBox


def _coordinates(locations: Iterable[Location]) -> np.ndarray:
    """Stack locations into an ``(n, 2)`` array of ``(lon, lat)`` rows."""
    return np.array(
        [(get_longitude(location), get_latitude(location)) for location in locations],
        dtype=float,
    ).reshape(-1, 2)


def get_bounding_box(
    locations: Sequence[Location], margin: float | Length = 0
) -> BoundingBox:
    """Get the bounding box of a list of locations.

    Args:
        locations: Locations in any supported shape; the corners take the
            shape of the first one.
        margin: Optional margin in meters added on all four sides. It is
            converted to degrees at the latitude farthest from the equator,
            so every side moves out by at least ``margin``. Latitudes are
            clamped to [-90, 90] and longitudes to [-180, 180]; corners are
            never wrapped, so the inputs always stay inside the box.

    Returns:
        BoundingBox: ``top_left`` at (max latitude, min longitude) and
        ``bottom_right`` at (min latitude, max longitude).

    Raises:
        InvalidInputError: If ``locations`` is empty.
    """
    points = list(locations)
    if not points:
        msg = "Cannot compute a bounding box of an empty list of locations"
        raise InvalidInputError(msg)

    coordinates = _coordinates(points)
    min_lon, min_lat = (float(value) for value in coordinates.min(axis=0))
    max_lon, max_lat = (float(value) for value in coordinates.max(axis=0))

    margin = magnitude_in(margin, Meter)
    if margin:
        d_lat = rad_to_deg(margin / float(EARTH_RADIUS))
        widest = deg_to_rad(max(abs(min_lat), abs(max_lat)))
        # cos() of +-90 degrees is a tiny positive number, never zero
        d_lon = min(d_lat / cos(widest), 360.0)

        min_lat = max(min_lat - d_lat, -90.0)
        max_lat = min(max_lat + d_lat, 90.0)
        min_lon = max(min_lon - d_lon, -180.0)
        max_lon = min(max_lon + d_lon, 180.0)

    location_type = get_location_type(points[0])
    return BoundingBox(
        top_left=create_location(max_lat, min_lon, location_type),
        bottom_right=create_location(min_lat, max_lon, location_type),
    )


def inside_bounding_box(location: Location, bounding_box: BoundingBox) -> bool:
    """Test whether a location lies inside a bounding box.

    Args:
        location: Location to test.
        bounding_box: Two opposite corners, in either order.

    Returns:
        bool: True when the location is inside the box or on its edge.
    """
    corner1, corner2 = bounding_box
    lat1, lat2 = get_latitude(corner1), get_latitude(corner2)
    lon1, lon2 = get_longitude(corner1), get_longitude(corner2)

    latitude = get_latitude(location)
    longitude = get_longitude(location)
    return (
        min(lat1, lat2) <= latitude <= max(lat1, lat2)
        and min(lon1, lon2) <= longitude <= max(lon1, lon2)
    )


def inside_circle(location: Location, center: Location, radius: float | Length) -> bool:
    """Test whether a location lies inside a circle.

    Args:
        location: Location to test.
        center: Center of the circle.
        radius: Radius in meters.

    Returns:
        bool: True when the location is inside the circle or on its edge.
    """
    return distance_to(location, center) <= magnitude_in(radius, Meter)


def inside_polygon(location: Location, polygon: Sequence[Location]) -> bool:
    """Test whether a location lies inside a polygon.

    Uses the even-odd ray casting rule on longitude/latitude. The polygon is
    closed implicitly, repeating the first vertex at the end is optional.

    Args:
        location: Location to test.
        polygon: Vertices in order, at least three distinct ones.

    Returns:
        bool: True when the location is inside the polygon, on one of its
        edges or on a vertex.

    Raises:
        InvalidInputError: If the polygon has fewer than three distinct vertices.
    """
    vertices = _coordinates(polygon)
    if len(np.unique(vertices, axis=0)) < 3:
        msg = f"A polygon needs at least 3 distinct vertices, got {len(vertices)}"
        raise InvalidInputError(msg)

    x = get_longitude(location)
    y = get_latitude(location)
    x1, y1 = vertices[:, 0], vertices[:, 1]
    x2, y2 = np.roll(x1, 1), np.roll(y1, 1)

    # |cross| / edge length is the distance to the edge line, compared
    # against a tolerance that grows with the coordinate magnitude
    cross = (x2 - x1) * (y - y1) - (y2 - y1) * (x - x1)
    scale = max(1.0, float(np.abs(vertices).max()), abs(x), abs(y))
    tolerance = EDGE_TOLERANCE * scale * np.hypot(x2 - x1, y2 - y1)
    on_edge = (
        (np.abs(cross) <= tolerance)
        & (np.minimum(x1, x2) <= x)
        & (x <= np.maximum(x1, x2))
        & (np.minimum(y1, y2) <= y)
        & (y <= np.maximum(y1, y2))
    )
    if on_edge.any():
        return True

    straddles = (y1 > y) != (y2 > y)
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = (x2 - x1) * (y - y1) / (y2 - y1) + x1
    crossings = straddles & (x < x_cross)
    return bool(np.count_nonzero(crossings) % 2)
