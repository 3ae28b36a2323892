"""Location shapes and the accessors the geometry functions rely on.

A location can be passed in any of four interchangeable shapes:

    ====================  ==================================  ====================
    LocationType          Example                             Notes
    ====================  ==================================  ====================
    LON_LAT_TUPLE         ``(4.9, 52.3)``                     longitude first, as
                                                              in GeoJSON
    LAT_LON               ``{"lat": 52.3, "lon": 4.9}``
    LAT_LNG               ``{"lat": 52.3, "lng": 4.9}``       Leaflet, Google Maps
    LATITUDE_LONGITUDE    ``{"latitude": 52.3,
                          "longitude": 4.9}``
    ====================  ==================================  ====================

Each shape is served by a small adapter that knows how to recognise it, read
its two coordinates and build a new value. The geometry modules only call
:func:`get_latitude`, :func:`get_longitude` and :func:`create_location`, so
they never inspect the shape themselves. Results are returned in the shape of
the input they were derived from.

Note:
    A two-element sequence is always read as ``(longitude, latitude)``. A
    ``(lat, lon)`` pair cannot be told apart from it and will be misread.

    Lists are accepted as input, but every location built by this package
    is a ``tuple``: ``normalize_location([10, 100])`` returns ``(-170, 80)``.
    Mappings are always returned as new ``dict`` objects.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from numbers import Real
from typing import Any

from ..errors import LocationTypeError

Location = Mapping[str, float] | tuple[float, float] | list[float]


class LocationType(Enum):
    """Supported location shapes, valued by their conventional names."""

    LON_LAT_TUPLE = "LonLatTuple"
    LAT_LON = "LatLon"
    LAT_LNG = "LatLng"
    LATITUDE_LONGITUDE = "LatitudeLongitude"


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


class _MappingShape:
    """Adapter for a mapping holding a latitude and a longitude field."""

    def __init__(self, lat_key: str, lon_key: str):
        self.lat_key = lat_key
        self.lon_key = lon_key

    def matches(self, value: Any) -> bool:
        return (
            isinstance(value, Mapping)
            and _is_number(value.get(self.lat_key))
            and _is_number(value.get(self.lon_key))
        )

    def latitude(self, value: Mapping[str, float]) -> float:
        return float(value[self.lat_key])

    def longitude(self, value: Mapping[str, float]) -> float:
        return float(value[self.lon_key])

    def create(self, latitude: float, longitude: float) -> dict[str, float]:
        return {self.lat_key: latitude, self.lon_key: longitude}


class _LonLatTupleShape:
    """Adapter for a ``(longitude, latitude)`` pair."""

    def matches(self, value: Any) -> bool:
        return (
            isinstance(value, (tuple, list))
            and len(value) == 2
            and _is_number(value[0])
            and _is_number(value[1])
        )

    def latitude(self, value: tuple[float, float]) -> float:
        return float(value[1])

    def longitude(self, value: tuple[float, float]) -> float:
        return float(value[0])

    def create(self, latitude: float, longitude: float) -> tuple[float, float]:
        return (longitude, latitude)


# Detection order matters for mappings carrying several key sets.
_SHAPES = {
    LocationType.LAT_LON: _MappingShape("lat", "lon"),
    LocationType.LAT_LNG: _MappingShape("lat", "lng"),
    LocationType.LATITUDE_LONGITUDE: _MappingShape("latitude", "longitude"),
    LocationType.LON_LAT_TUPLE: _LonLatTupleShape(),
}


def is_lat_lon(value: Any) -> bool:
    """Test whether ``value`` is a mapping with numeric ``lat`` and ``lon``."""
    return _SHAPES[LocationType.LAT_LON].matches(value)


def is_lat_lng(value: Any) -> bool:
    """Test whether ``value`` is a mapping with numeric ``lat`` and ``lng``."""
    return _SHAPES[LocationType.LAT_LNG].matches(value)


def is_latitude_longitude(value: Any) -> bool:
    """Test whether ``value`` is a mapping with numeric ``latitude`` and ``longitude``."""
    return _SHAPES[LocationType.LATITUDE_LONGITUDE].matches(value)


def is_lon_lat_tuple(value: Any) -> bool:
    """Test whether ``value`` is a sequence of two numbers, longitude first."""
    return _SHAPES[LocationType.LON_LAT_TUPLE].matches(value)


def get_location_type(location: Any) -> LocationType:
    """Recognise the shape of a location.

    Args:
        location: Value in any supported shape.

    Returns:
        LocationType: The first shape that matches.

    Raises:
        LocationTypeError: If no supported shape matches.
    """
    for location_type, shape in _SHAPES.items():
        if shape.matches(location):
            return location_type

    msg = f"Unknown location type: {location!r}"
    raise LocationTypeError(msg)


def get_latitude(location: Location) -> float:
    """Get the latitude of a location, in degrees."""
    return _SHAPES[get_location_type(location)].latitude(location)


def get_longitude(location: Location) -> float:
    """Get the longitude of a location, in degrees."""
    return _SHAPES[get_location_type(location)].longitude(location)


def create_location(
    latitude: float, longitude: float, location_type: LocationType | str
) -> Location:
    """Create a location of a specific shape.

    Args:
        latitude: Latitude in degrees.
        longitude: Longitude in degrees.
        location_type: A :class:`LocationType` or its name, e.g. ``"LatLng"``.

    Returns:
        Location: A new dict, or a ``(lon, lat)`` tuple for ``LON_LAT_TUPLE``.

    Raises:
        LocationTypeError: If ``location_type`` is not a supported shape.
    """
    try:
        resolved = LocationType(location_type)
    except ValueError:
        msg = f"Unknown location type: {location_type!r}"
        raise LocationTypeError(msg) from None

    return _SHAPES[resolved].create(latitude, longitude)


def _convert(location: Location, location_type: LocationType) -> Location:
    return create_location(
        get_latitude(location), get_longitude(location), location_type
    )


def to_lat_lon(location: Location) -> dict[str, float]:
    """Convert a location into ``{"lat": ..., "lon": ...}``."""
    return _convert(location, LocationType.LAT_LON)


def to_lat_lng(location: Location) -> dict[str, float]:
    """Convert a location into ``{"lat": ..., "lng": ...}``."""
    return _convert(location, LocationType.LAT_LNG)


def to_latitude_longitude(location: Location) -> dict[str, float]:
    """Convert a location into ``{"latitude": ..., "longitude": ...}``."""
    return _convert(location, LocationType.LATITUDE_LONGITUDE)


def to_lon_lat_tuple(location: Location) -> tuple[float, float]:
    """Convert a location into a ``(longitude, latitude)`` tuple.

    This is the GeoJSON order. Leaflet and many other libraries use
    ``[latitude, longitude]`` instead.
    """
    return _convert(location, LocationType.LON_LAT_TUPLE)


def is_equal(location1: Location, location2: Location, epsilon: float = 0) -> bool:
    """Test whether two locations are equal or approximately equal.

    The locations may have different shapes.

    Args:
        location1: First location.
        location2: Second location.
        epsilon: Maximum absolute difference allowed between the latitudes and
            between the longitudes, inclusive. Use e.g. ``1e-12`` to ignore
            round-off errors.

    Returns:
        bool: True when both coordinates are within ``epsilon``.
    """
    return (
        abs(get_latitude(location1) - get_latitude(location2)) <= epsilon
        and abs(get_longitude(location1) - get_longitude(location2)) <= epsilon
    )
