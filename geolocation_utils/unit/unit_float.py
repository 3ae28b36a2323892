"""Float-backed units stored in SI.

:class:`UnitFloat` is a ``float`` whose value is always kept in the SI unit of
its family (radians, meters, meters per second). The constructor takes the
value in the unit's own scale and multiplies it by ``SCALE_TO_SI``.

Example:
    >>> heading = Degree(90)
    >>> float(heading)          # stored in radians
    1.5707963267948966
    >>> heading.to(Degree)      # read back in degrees
    90.0
"""

from __future__ import annotations

from typing import ClassVar

from .unit_base import Unit

Number = int | float


class UnitFloat(float, Unit):
    """Float with automatic SI conversion.

    Values are read back through :meth:`to`, which only accepts a unit of the
    same family.

    Attributes:
        SCALE_TO_SI (ClassVar[float]): Factor from the unit's scale to SI.
    """

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a value from a number given in this unit's scale.

        Args:
            value: Numeric value in the unit's native scale.
        """
        return float.__new__(cls, float(value) * cls.SCALE_TO_SI)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Read the value in the scale of another unit of the same family.

        Args:
            unit_type: Target unit type.

        Returns:
            float: Plain number expressed in ``unit_type``.

        Raises:
            TypeError: If ``unit_type`` belongs to another family.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def __str__(self) -> str:
        """Value and symbol in the unit's own scale, e.g. ``"12.0 kn"``."""
        return f"{self.to(type(self))} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Value in the unit's scale followed by its SI equivalent."""
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} SI)"
