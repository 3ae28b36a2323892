"""Unit family bookkeeping shared by every measurement type.

A unit family groups the classes that describe one physical quantity
(angle, length, velocity). The first class of a family sets
``IS_FAMILY_ROOT = True``; every subclass inherits that class as its
``ROOT``. A value can only be read in a unit with the same ROOT, which is
what keeps a speed in knots from being read as a heading in degrees.

Example:
    >>> class Length(Unit):
    ...     IS_FAMILY_ROOT = True
    >>> class NauticalMile(Length):
    ...     pass
    >>> NauticalMile.ROOT is Length
    True
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class carrying the family metadata of a unit type.

    Concrete units derive from :class:`~geolocation_utils.unit.UnitFloat`,
    not from this class directly.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class of the unit family.
        SYMBOL (ClassVar[str]): Symbol used when printing a value.
        IS_FAMILY_ROOT (ClassVar[bool]): Marks the root of a family.
    """

    __slots__ = ()

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Resolve ROOT from the nearest ancestor flagged as family root."""
        super().__init_subclass__(**kwargs)
        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type) -> None:
        """Reject operations between different physical quantities.

        Args:
            unit_type: Type of the other operand.

        Raises:
            TypeError: If ``unit_type`` is not a unit or belongs to another family.
        """
        other_root = getattr(unit_type, "ROOT", None)
        if cls.ROOT is not other_root:
            other_name = other_root.__name__ if other_root else unit_type.__name__
            msg = f"Incompatible units: {cls.ROOT.__name__} and {other_name}"
            raise TypeError(msg)
