"""Fixed-point angle for geodetic computations.

This module provides the Angle measure, a signed angle with a resolution of
one microarcsecond. Used as a latitude or longitude this is roughly 0.03
millimetres at the equator. Angles are stored as an exact integer count of
microarcseconds, so sums and differences never accumulate floating-point
drift; rounding happens once, when an angle is built from a float.

Angles can be built from decimal degrees, radians, or a degrees, minutes and
seconds (DMS) triple, and decomposed back into DMS fields on demand. An
Angle is a signed linear quantity: it is never normalized or wrapped.

Classes:
    Angle: Signed angle stored as whole microarcseconds.
    DmsError: Base of the errors raised by Angle.from_dms.
    InvalidArcMinutes: Arcminutes outside [0, 59].
    InvalidArcSeconds: Arcseconds outside [0, 60).
    NonFiniteAngleError: NaN or infinite floating-point input.

Example:
    >>> heading = Angle.from_dms(-154, 3, 42.5)
    >>> heading.whole_degrees(), heading.arcminutes(), heading.arcseconds()
    (-154, 3, 42)
    >>> Angle.from_decimal_degrees(1.0).microarcseconds()
    3600000000
"""

from __future__ import annotations

import logging
from math import isfinite, pi
from operator import index

from jord.config import (
    MICROARCSECONDS_PER_ARCMILLISECOND,
    MICROARCSECONDS_PER_ARCMINUTE,
    MICROARCSECONDS_PER_ARCSECOND,
    MICROARCSECONDS_PER_DEGREE,
    Integer,
    Number,
)

from .unit_base import Measure

logger = logging.getLogger(__name__)

DG_TO_UAS = float(MICROARCSECONDS_PER_DEGREE)


class DmsError(ValueError):
    """Invalid degrees, minutes and seconds input.

    Attributes:
        value: The offending minutes or seconds value.
    """

    def __init__(self, message: str, value: Number):
        self.value = value
        super().__init__(message)


class InvalidArcMinutes(DmsError):
    """Arcminutes are outside [0, 59]."""


class InvalidArcSeconds(DmsError):
    """Arcseconds are outside [0, 60)."""


class NonFiniteAngleError(ValueError):
    """An angle was requested from a NaN or infinite floating-point value."""


class Angle(Measure):
    """Signed angle with a resolution of one microarcsecond.

    The only state is the integer number of whole microarcseconds, which
    defines equality, ordering and hashing. The decimal degree is the
    default unit and the microarcsecond is the resolution unit of the
    Measure contract.

    Attributes:
        IS_FAMILY_ROOT (bool): True, Angle is the root of the angle family.

    Example:
        >>> Angle.from_dms(10, 30, 45.0) == Angle.from_decimal_degrees(10.5125)
        True
        >>> a = Angle.from_decimal_degrees(30.0)
        >>> (a + a - a) == a
        True
    """

    __slots__ = ("_microarcseconds",)

    IS_FAMILY_ROOT = True

    def __init__(self, microarcseconds: Integer = 0):
        """Create an angle from an exact number of microarcseconds.

        Args:
            microarcseconds: Whole microarcseconds, within the int64 range.

        Raises:
            TypeError: If microarcseconds is not an integer.
            OverflowError: If microarcseconds does not fit in 64 bits.
        """
        value = self._checked_resolution(index(microarcseconds))
        object.__setattr__(self, "_microarcseconds", value)

    @classmethod
    def zero(cls) -> Angle:
        """Equivalent to ``Angle.from_decimal_degrees(0.0)``."""
        return cls(0)

    @classmethod
    def from_decimal_degrees(cls, dec: Number) -> Angle:
        """Create an angle from a number of decimal degrees.

        The degrees are scaled to microarcseconds and rounded to the nearest
        whole microarcsecond, ties away from zero. Angles beyond the 64-bit
        range saturate to the largest or smallest representable count.

        Args:
            dec: Decimal degrees.

        Returns:
            Angle: Nearest representable angle.

        Raises:
            NonFiniteAngleError: If dec is NaN or infinite.
        """
        dec = float(dec)
        if not isfinite(dec):
            logger.debug("Rejected non-finite decimal degrees: %r", dec)
            raise NonFiniteAngleError(f"cannot build an angle from {dec!r} degrees")
        return cls(cls._saturated_resolution(dec * DG_TO_UAS))

    @classmethod
    def from_radians(cls, rads: Number) -> Angle:
        """Create an angle from a number of radians."""
        return cls.from_decimal_degrees(float(rads) / pi * 180.0)

    @classmethod
    def from_dms(cls, degs: Integer, mins: Integer, secs: Number) -> Angle:
        """Create an angle from whole degrees, arcminutes and decimal arcseconds.

        Only the degrees carry the sign; minutes and seconds are magnitudes.
        A negative angle smaller than one degree therefore cannot be given
        in this form, since ``-0`` degrees is not negative.

        Args:
            degs: Whole degrees, signed.
            mins: Arcminutes in [0, 59].
            secs: Decimal arcseconds in [0, 60).

        Returns:
            Angle: Nearest representable angle.

        Raises:
            InvalidArcMinutes: If mins is outside [0, 59].
            InvalidArcSeconds: If secs is outside [0, 60).

        Example:
            >>> Angle.from_dms(-154, 45, 42.5).arcminutes()
            45
        """
        degs = index(degs)
        mins = index(mins)
        secs = float(secs)
        if not 0 <= mins <= 59:
            logger.debug("Rejected DMS input %d %d %r: arcminutes", degs, mins, secs)
            raise InvalidArcMinutes(f"arcminutes {mins} outside [0, 59]", mins)
        if not 0.0 <= secs < 60.0:
            logger.debug("Rejected DMS input %d %d %r: arcseconds", degs, mins, secs)
            raise InvalidArcSeconds(f"arcseconds {secs!r} outside [0, 60)", secs)
        dec = abs(degs) + mins / 60.0 + secs / 3600.0
        if degs < 0:
            return cls.from_decimal_degrees(-dec)
        return cls.from_decimal_degrees(dec)

    def microarcseconds(self) -> int:
        """Return the number of microarcseconds of this angle.

        Example:
            >>> Angle.from_decimal_degrees(1.0).microarcseconds()
            3600000000
        """
        return self._microarcseconds

    def as_decimal_degrees(self) -> float:
        """Convert this angle to a number of decimal degrees.

        Returns:
            float: Decimal degrees, exact count divided by 3.6e9.
        """
        return self._microarcseconds / DG_TO_UAS

    def as_radians(self) -> float:
        """Convert this angle to a number of radians.

        Returns:
            float: Radians, derived from the decimal degrees.
        """
        return self.as_decimal_degrees() * pi / 180.0

    def whole_degrees(self) -> int:
        """Return the degree component, truncated toward zero and signed.

        Example:
            >>> Angle.from_dms(-154, 3, 42.5).whole_degrees()
            -154
        """
        d = self._field(MICROARCSECONDS_PER_DEGREE)
        return -d if self._microarcseconds < 0 else d

    def arcminutes(self) -> int:
        """Return the arcminutes component, in [0, 59] whatever the sign."""
        return self._field(MICROARCSECONDS_PER_ARCMINUTE, 60)

    def arcseconds(self) -> int:
        """Return the whole arcseconds component, in [0, 59] whatever the sign."""
        return self._field(MICROARCSECONDS_PER_ARCSECOND, 60)

    def arcmilliseconds(self) -> int:
        """Return the arcmilliseconds component, in [0, 999] whatever the sign.

        Example:
            >>> Angle.from_dms(-154, 45, 42.5).arcmilliseconds()
            500
        """
        return self._field(MICROARCSECONDS_PER_ARCMILLISECOND, 1000)

    def _field(self, divisor: int, modulus: int | None = None) -> int:
        # magnitude only, callers reapply the sign where it belongs
        units = abs(self._microarcseconds) // divisor
        return units if modulus is None else units % modulus

    # ------------------------------ Measure Primitives ------------------------------
    @classmethod
    def from_default_unit(cls, amount: Number) -> Angle:
        """Create an angle from decimal degrees, the default unit.

        Args:
            amount: Decimal degrees.

        Returns:
            Angle: Same as ``Angle.from_decimal_degrees(amount)``.
        """
        return cls.from_decimal_degrees(amount)

    @classmethod
    def from_resolution_unit(cls, amount: Integer) -> Angle:
        """Create an angle from microarcseconds, the resolution unit.

        Args:
            amount: Whole microarcseconds.

        Returns:
            Angle: Angle holding exactly that count.
        """
        return cls(amount)

    def as_default_unit(self) -> float:
        """Return this angle in decimal degrees.

        Returns:
            float: Same as ``as_decimal_degrees()``.
        """
        return self.as_decimal_degrees()

    def as_resolution_unit(self) -> int:
        """Return this angle in microarcseconds.

        Returns:
            int: Same as ``microarcseconds()``.
        """
        return self._microarcseconds

    def __repr__(self) -> str:
        """Return a debug representation that evaluates back to an equal angle.

        Returns:
            str: e.g. ``Angle(microarcseconds=42)``.
        """
        return f"Angle(microarcseconds={self._microarcseconds})"
