"""Angular units.

Angles are stored in radians. Headings, bearings and coordinates are given in
degrees at the public API and converted through :class:`Degree` before any
trigonometry.

Example:
    >>> bearing = Degree(180)
    >>> float(bearing)
    3.141592653589793
    >>> Radian(pi / 2).to(Degree)
    90.0
"""

from __future__ import annotations

from math import pi

from .unit_float import UnitFloat


class Radian(UnitFloat):
    """Angular unit: radian (SI root of the angle family)."""

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = 1.0
    SYMBOL = "rad"


class Degree(Radian):
    """Angular unit: degree, 1/360 of a full turn.

    Used for latitude, longitude and heading values.
    """

    SCALE_TO_SI = pi / 180
    SYMBOL = "°"


Angle = Radian | Degree
