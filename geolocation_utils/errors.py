"""Exceptions raised by geolocation_utils.

Only malformed input is an error. Numerically degenerate but well defined
cases, such as the heading between two identical locations or the closest
approach of two tracks with equal velocity, return a documented fallback
value instead.
"""


class GeolocationError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInputError(GeolocationError, ValueError):
    """A collection argument cannot produce a meaningful result.

    Raised for an empty list passed to bounding box or average calculations,
    and for a polygon with fewer than three distinct vertices.
    """


class LocationTypeError(GeolocationError, TypeError):
    """A value is not one of the supported location shapes."""
