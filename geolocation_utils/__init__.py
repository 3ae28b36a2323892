"""Geometry utilities for longitude/latitude locations, regions and tracks.

geolocation_utils computes distances, headings, bounding boxes, containment,
closest point of approach and normalized coordinates on a spherical earth.
Every function is pure: it takes plain values and returns new ones.

Package Components:
    Geometry (geolocation_utils.geo):
        • Four interchangeable location shapes: ``(lon, lat)`` tuples and
          ``lat/lon``, ``lat/lng`` or ``latitude/longitude`` mappings
        • Great-circle distance and heading, moving along a heading
        • Bounding boxes, box / circle / polygon containment
        • Closest point of approach of two constant-velocity tracks
        • Normalization of headings, latitudes and longitudes

    Units (geolocation_utils.unit):
        • Type-safe angle, length and velocity units
        • Degree/radian and knots/km/h/m/s conversions

    Configuration (geolocation_utils.config):
        • Earth radius and numeric tolerances

Example:
    >>> import geolocation_utils as geo
    >>> track1 = geo.LocationHeadingSpeed({"lat": 51.95, "lon": 4.05}, 90, 5.0)
    >>> track2 = geo.LocationHeadingSpeed.from_units(
    ...     {"lat": 51.97, "lon": 4.10}, geo.unit.Degree(180), geo.unit.Knot(10)
    ... )
    >>> time, distance = geo.cpa(track1, track2)
"""

import logging

from . import geo, unit
from .config import EARTH_RADIUS
from .errors import GeolocationError, InvalidInputError, LocationTypeError
from .geo import (
    BoundingBox,
    HeadingDistance,
    Location,
    LocationHeadingSpeed,
    LocationType,
    TimeDistance,
    average,
    cpa,
    create_location,
    distance_to,
    get_bounding_box,
    get_latitude,
    get_location_type,
    get_longitude,
    heading_distance_to,
    heading_to,
    inside_bounding_box,
    inside_circle,
    inside_polygon,
    is_equal,
    is_lat_lng,
    is_lat_lon,
    is_latitude_longitude,
    is_lon_lat_tuple,
    move_to,
    normalize_heading,
    normalize_latitude,
    normalize_location,
    normalize_longitude,
    to_lat_lng,
    to_lat_lon,
    to_latitude_longitude,
    to_lon_lat_tuple,
)
from .unit import (
    deg_to_rad,
    km_per_hour_to_knots,
    knots_to_km_per_hour,
    knots_to_meter_per_second,
    meter_per_second_to_knots,
    rad_to_deg,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    *geo.__all__,
    "EARTH_RADIUS",
    "GeolocationError",
    "InvalidInputError",
    "LocationTypeError",
    "deg_to_rad",
    "rad_to_deg",
    "knots_to_km_per_hour",
    "km_per_hour_to_knots",
    "knots_to_meter_per_second",
    "meter_per_second_to_knots",
    "unit",
]
