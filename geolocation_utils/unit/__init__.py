"""Type-safe units for the quantities handled by the geometry functions.

Every value is a ``float`` stored in the SI unit of its family. Reading a
value in a unit of another family (a :class:`Knot` as a :class:`Degree`)
raises ``TypeError``.

Unit Families:
    - Angle: Radian (root), Degree
    - Length: Meter (root), Kilometer, NauticalMile
    - Velocity: MeterPerSecond (root), KilometersPerHour, Knot

Example:
    >>> from geolocation_utils.unit import Degree, Knot, MeterPerSecond
    >>> speed = Knot(12)
    >>> round(speed.to(MeterPerSecond), 3)
    6.173
    >>> speed.to(Degree)
    Traceback (most recent call last):
    ...
    TypeError: Incompatible units: MeterPerSecond and Radian
"""

from .conversion import (
    deg_to_rad,
    km_per_hour_to_knots,
    knots_to_km_per_hour,
    knots_to_meter_per_second,
    magnitude_in,
    meter_per_second_to_knots,
    rad_to_deg,
)
from .unit_angle import Angle, Degree, Radian
from .unit_base import Unit
from .unit_distance import Kilometer, Length, Meter, NauticalMile
from .unit_float import UnitFloat
from .unit_velocity import KilometersPerHour, Knot, MeterPerSecond, Velocity

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Radian",
    "Degree",
    "Angle",
    # Distance units
    "Meter",
    "Kilometer",
    "NauticalMile",
    "Length",
    # Velocity units
    "MeterPerSecond",
    "KilometersPerHour",
    "Knot",
    "Velocity",
    # Conversions
    "deg_to_rad",
    "rad_to_deg",
    "knots_to_km_per_hour",
    "km_per_hour_to_knots",
    "knots_to_meter_per_second",
    "meter_per_second_to_knots",
    "magnitude_in",
]
