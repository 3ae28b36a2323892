"""Geometry on longitude/latitude locations.

Components:
    location: the four location shapes and their accessors
    normalize: canonical ranges for headings, latitudes and longitudes
    distance: great-circle distance, heading, and moving along a heading
    region: bounding boxes and box, circle and polygon containment
    cpa: closest point of approach of two constant-velocity tracks
    aggregate: mean location

Typical Usage:
    >>> from geolocation_utils.geo import distance_to, heading_distance_to, move_to
    >>> rotterdam = {"lat": 51.9225, "lon": 4.4792}
    >>> amsterdam = {"lat": 52.3676, "lon": 4.9041}
    >>> meters = distance_to(rotterdam, amsterdam)
    >>> offset = heading_distance_to(rotterdam, amsterdam)
    >>> arrival = move_to(rotterdam, offset)  # close to amsterdam
"""

from .aggregate import average
from .cpa import cpa
from .distance import distance_to, heading_distance_to, heading_to, move_to
from .location import (
    Location,
    LocationType,
    create_location,
    get_latitude,
    get_location_type,
    get_longitude,
    is_equal,
    is_lat_lng,
    is_lat_lon,
    is_latitude_longitude,
    is_lon_lat_tuple,
    to_lat_lng,
    to_lat_lon,
    to_latitude_longitude,
    to_lon_lat_tuple,
)
from .normalize import (
    normalize_heading,
    normalize_latitude,
    normalize_location,
    normalize_longitude,
)
from .region import get_bounding_box, inside_bounding_box, inside_circle, inside_polygon
from .types import BoundingBox, HeadingDistance, LocationHeadingSpeed, TimeDistance

__all__ = [
    # Types
    "Location",
    "LocationType",
    "BoundingBox",
    "HeadingDistance",
    "LocationHeadingSpeed",
    "TimeDistance",
    # Location shapes
    "create_location",
    "get_latitude",
    "get_longitude",
    "get_location_type",
    "is_equal",
    "is_lat_lng",
    "is_lat_lon",
    "is_latitude_longitude",
    "is_lon_lat_tuple",
    "to_lat_lng",
    "to_lat_lon",
    "to_latitude_longitude",
    "to_lon_lat_tuple",
    # Normalization
    "normalize_heading",
    "normalize_latitude",
    "normalize_longitude",
    "normalize_location",
    # Distance and heading
    "distance_to",
    "heading_to",
    "heading_distance_to",
    "move_to",
    # Regions
    "get_bounding_box",
    "inside_bounding_box",
    "inside_circle",
    "inside_polygon",
    # Tracks and aggregates
    "cpa",
    "average",
]
