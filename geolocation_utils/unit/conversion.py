"""Plain-number conversion helpers built on the unit classes.

These functions take and return ``float`` so they can be used directly in
trigonometry; the unit classes do the scaling.
"""

from __future__ import annotations

from .unit_angle import Degree, Radian
from .unit_base import Unit
from .unit_float import UnitFloat
from .unit_velocity import KilometersPerHour, Knot, MeterPerSecond


def magnitude_in(value: float | UnitFloat, unit_type: type[UnitFloat]) -> float:
    """Read a value as a plain number in the scale of ``unit_type``.

    Plain numbers are taken to be in that scale already. Unit values are
    converted, and a unit of another family raises ``TypeError``.

    Example:
        >>> magnitude_in(Kilometer(2), Meter)
        2000.0
        >>> magnitude_in(250, Meter)
        250.0
    """
    if isinstance(value, Unit):
        return value.to(unit_type)
    return float(value)


def deg_to_rad(angle: float) -> float:
    """Convert an angle in degrees into radians."""
    return float(Degree(angle))


def rad_to_deg(angle: float) -> float:
    """Convert an angle in radians into degrees."""
    return Radian(angle).to(Degree)


def knots_to_km_per_hour(knots: float) -> float:
    """Convert a speed in knots into km/h (1 kn = 1.852 km/h)."""
    return Knot(knots).to(KilometersPerHour)


def km_per_hour_to_knots(km_per_hour: float) -> float:
    """Convert a speed in km/h into knots."""
    return KilometersPerHour(km_per_hour).to(Knot)


def knots_to_meter_per_second(knots: float) -> float:
    """Convert a speed in knots into m/s (1 kn ≈ 0.514444 m/s)."""
    return Knot(knots).to(MeterPerSecond)


def meter_per_second_to_knots(meter_per_second: float) -> float:
    """Convert a speed in m/s into knots."""
    return MeterPerSecond(meter_per_second).to(Knot)
