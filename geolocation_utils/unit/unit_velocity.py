"""Velocity units.

Speeds are stored in meters per second. Tracks are commonly reported in knots
(marine and aviation) or kilometers per hour; wrapping them in the matching
class makes the conversion to m/s explicit.

Example:
    >>> Knot(10).to(MeterPerSecond)
    5.144444444444445
    >>> round(KilometersPerHour(1.852).to(Knot), 9)
    1.0
"""

from __future__ import annotations

from .unit_float import UnitFloat


class MeterPerSecond(UnitFloat):
    """Velocity unit: meters per second (SI root of the velocity family)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "m/s"


class KilometersPerHour(MeterPerSecond):
    """Velocity unit: kilometers per hour."""

    SCALE_TO_SI = 1000.0 / 3600.0
    SYMBOL = "km/h"


class Knot(MeterPerSecond):
    """Velocity unit: knot, one nautical mile (1852 m) per hour.

    1 kn = 1.852 km/h ≈ 0.514444 m/s.
    """

    SCALE_TO_SI = 1852.0 / 3600.0
    SYMBOL = "kn"


Velocity = MeterPerSecond | KilometersPerHour | Knot
