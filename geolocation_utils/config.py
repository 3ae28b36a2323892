"""Constants shared by the geometry modules.

All spherical calculations use a single mean earth radius. The tolerances
below decide when a computation falls back to its documented degenerate
result instead of dividing by (almost) zero.

Constants:
    EARTH_RADIUS: Mean earth radius used by every spherical formula.
    VELOCITY_EPSILON: Squared relative speed, in (m/s)², below which two
        tracks are treated as moving with the same velocity.
    EDGE_TOLERANCE: Distance from a polygon edge, relative to the largest
        coordinate involved (at least 1 degree), below which a point counts
        as lying on that edge.

Example:
    >>> from geolocation_utils.config import EARTH_RADIUS
    >>> from geolocation_utils.unit import Kilometer
    >>> EARTH_RADIUS.to(Kilometer)
    6371.0
"""

from .unit import Meter

EARTH_RADIUS = Meter(6_371_000)

VELOCITY_EPSILON = 1e-10

EDGE_TOLERANCE = 1e-12
