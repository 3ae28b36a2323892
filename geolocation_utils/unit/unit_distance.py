"""Length units.

Lengths are stored in meters, the unit every distance, radius and margin of
the geometry functions is expressed in.

Example:
    >>> NauticalMile(1).to(Meter)
    1852.0
    >>> str(Kilometer(2.5))
    '2.5 km'
"""

from __future__ import annotations

from .unit_float import UnitFloat


class Meter(UnitFloat):
    """Length unit: meter (SI root of the length family)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m"


class Kilometer(Meter):
    """Length unit: kilometer (1000 m)."""

    SCALE_TO_SI = 1000.0
    SYMBOL = "km"


class NauticalMile(Meter):
    """Length unit: international nautical mile (1852 m).

    One nautical mile per hour is one knot, see
    :class:`~geolocation_utils.unit.unit_velocity.Knot`.
    """

    SCALE_TO_SI = 1852.0
    SYMBOL = "NM"


Length = Meter | Kilometer | NauticalMile
