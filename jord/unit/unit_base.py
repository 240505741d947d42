"""Measure contract: shared exact arithmetic for physical quantity types.

This module provides the abstract Measure class that serves as the base for
every quantity type in jord. A quantity type supplies four conversion
primitives and inherits a complete, identical set of arithmetic and
comparison operators built on top of them.

The measure system is organized around "quantity families", where each
family represents one physical quantity (angle, length, duration, ...).
Values within the same family can be added, subtracted and compared, while
operations between different families are rejected at runtime.

Conversion primitives:
    - from_default_unit: construct from the conventional floating-point unit
      (e.g. decimal degrees for angles).
    - from_resolution_unit: construct from an exact integer count of the
      smallest representable increment (e.g. microarcseconds).
    - as_default_unit: read back in the default floating-point unit.
    - as_resolution_unit: read back the exact integer count.

Derived behaviour:
    - Addition and subtraction operate on resolution-unit integers, so they
      are exact and never drift.
    - Scaling by a plain number happens in the default unit and is
      re-quantized once through from_default_unit.
    - Negation, equality, ordering and hashing use the integer alone.

Key Concepts:
- ROOT Class: Each quantity family has a root class that defines the family
- IS_FAMILY_ROOT: Boolean flag marking the root class of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO
- Type Safety: Operations are restricted to a single quantity family

Classes:
    Measure: Abstract base class for all quantity types.

Functions:
    round_half_away_from_zero: Rounding policy shared by every quantity type.

Example:
    >>> class Length(Measure):
    ...     IS_FAMILY_ROOT = True  # This becomes the ROOT for lengths
    ...     # four primitives over an integer count of millimetres
    >>> # Length values can be added together and compared,
    >>> # but never mixed with Angle values (different ROOT)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from math import floor
from typing import ClassVar

from jord.config import RESOLUTION_MAX, RESOLUTION_MIN, Number

logger = logging.getLogger(__name__)


def round_half_away_from_zero(value: float) -> int:
    """Round a finite float to the nearest integer, ties away from zero.

    Python's built-in ``round`` rounds ties to even, which would make
    ``2.5`` and ``1.5`` collapse differently depending on parity.

    Args:
        value: Finite floating-point value.

    Returns:
        int: Nearest integer, with exact halves rounded away from zero.

    Example:
        >>> round_half_away_from_zero(2.5), round_half_away_from_zero(-2.5)
        (3, -3)
    """
    magnitude = abs(value)
    whole = floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return -whole if value < 0 else whole


class Measure(ABC):
    """Base class for all quantity types.

    Subclasses store one exact integer count of their resolution unit and
    implement the four conversion primitives. Every operator below is
    expressed only in terms of those primitives, so each quantity family
    shares the same arithmetic semantics.

    Attributes:
        ROOT (ClassVar[type[Measure]]): Root class defining the quantity family.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a family root.
    """

    __slots__ = ()
    __array_priority__ = 1000

    ROOT: ClassVar[type[Measure]]
    IS_FAMILY_ROOT: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        The ROOT class is the first ancestor with IS_FAMILY_ROOT=True, or the
        class itself if it declares IS_FAMILY_ROOT or none is found.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, measure_type: type[Measure]):
        """Check that another measure type belongs to the same quantity family.

        Args:
            measure_type: The other measure type to check compatibility with.

        Raises:
            TypeError: If the measures belong to different quantity families.
        """
        if cls.ROOT is not measure_type.ROOT:
            msg = (
                f"incompatible quantities: {cls.ROOT.__name__} "
                f"and {measure_type.ROOT.__name__}"
            )
            raise TypeError(msg)

    @classmethod
    def _checked_resolution(cls, amount: int) -> int:
        """Validate that a resolution-unit count fits the signed 64-bit range.

        Args:
            amount: Exact resolution-unit count.

        Returns:
            int: The same count.

        Raises:
            OverflowError: If the count is outside [RESOLUTION_MIN, RESOLUTION_MAX].
        """
        if not RESOLUTION_MIN <= amount <= RESOLUTION_MAX:
            logger.debug("%s count %d outside int64 range", cls.__name__, amount)
            msg = f"{cls.__name__} resolution count {amount} does not fit in 64 bits"
            raise OverflowError(msg)
        return amount

    @classmethod
    def _saturated_resolution(cls, amount: float) -> int:
        """Quantize a scaled float to a resolution-unit count, saturating at 64 bits.

        Counts beyond the signed 64-bit range, including those whose scaled
        value overflowed to infinity, are clamped to the nearest bound.

        Args:
            amount: Non-NaN amount already scaled to the resolution unit.

        Returns:
            int: Nearest count, ties away from zero, within
                [RESOLUTION_MIN, RESOLUTION_MAX].
        """
        if amount >= RESOLUTION_MAX:
            logger.debug("%s amount %r saturated to int64 max", cls.__name__, amount)
            return RESOLUTION_MAX
        if amount <= RESOLUTION_MIN:
            logger.debug("%s amount %r saturated to int64 min", cls.__name__, amount)
            return RESOLUTION_MIN
        return round_half_away_from_zero(amount)

    # ------------------------------ Conversion Primitives ------------------------------
    @classmethod
    @abstractmethod
    def from_default_unit(cls, amount: float) -> Measure:
        """Create an instance from an amount of the default floating-point unit."""

    @classmethod
    @abstractmethod
    def from_resolution_unit(cls, amount: int) -> Measure:
        """Create an instance from an exact count of the resolution unit."""

    @abstractmethod
    def as_default_unit(self) -> float:
        """Return this value in the default floating-point unit."""

    @abstractmethod
    def as_resolution_unit(self) -> int:
        """Return the exact count of resolution units."""

    # ------------------------------ Immutability ------------------------------
    def __setattr__(self, name, value):
        """Reject attribute assignment, measures are immutable values.

        Raises:
            AttributeError: Always.
        """
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        """Reject attribute deletion, measures are immutable values.

        Raises:
            AttributeError: Always.
        """
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        """Rebuild through from_resolution_unit when copied or pickled.

        Returns:
            tuple: Constructor and its single resolution-unit argument.
        """
        return (type(self).from_resolution_unit, (self.as_resolution_unit(),))

    # ------------------------------ Arithmetic Operations ------------------------------
    def __add__(self, other: Measure) -> Measure:
        """Add two measures of the same family.

        Args:
            other: Measure value to add to this one.

        Returns:
            Measure: Exact sum, of this measure's type.

        Raises:
            TypeError: If the measures are not from the same family.
        """
        if not isinstance(other, Measure):
            return NotImplemented
        self._check_same_root(type(other))
        return type(self).from_resolution_unit(
            self.as_resolution_unit() + other.as_resolution_unit()
        )

    def __sub__(self, other: Measure) -> Measure:
        """Subtract a measure of the same family from this one.

        Args:
            other: Measure value to subtract.

        Returns:
            Measure: Exact difference, of this measure's type.

        Raises:
            TypeError: If the measures are not from the same family.
        """
        if not isinstance(other, Measure):
            return NotImplemented
        self._check_same_root(type(other))
        return type(self).from_resolution_unit(
            self.as_resolution_unit() - other.as_resolution_unit()
        )

    def __mul__(self, k: Number) -> Measure:
        """Scale this measure by a plain number.

        The product is computed in the default unit and re-quantized once.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            Measure: Scaled measure of this measure's type.
        """
        if isinstance(k, Number):
            return type(self).from_default_unit(self.as_default_unit() * float(k))
        return NotImplemented

    def __rmul__(self, k: Number) -> Measure:
        """Right-side multiplication by a plain number.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            Measure: Scaled measure of this measure's type.
        """
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> Measure:
        """Divide this measure by a plain number.

        Args:
            k: Numeric scalar to divide by.

        Returns:
            Measure: Divided measure of this measure's type.

        Raises:
            ZeroDivisionError: If k is zero.
        """
        if isinstance(k, Number):
            return type(self).from_default_unit(self.as_default_unit() / float(k))
        return NotImplemented

    def __neg__(self) -> Measure:
        """Negate this measure exactly.

        Returns:
            Measure: Measure of this type holding the negated count.

        Raises:
            OverflowError: If the negated count does not fit in 64 bits.
        """
        return type(self).from_resolution_unit(-self.as_resolution_unit())

    def __pos__(self) -> Measure:
        """Unary plus, returning this measure unchanged.

        Returns:
            Measure: This same immutable value.
        """
        return self

    # ------------------------------ Comparison Operations ------------------------------
    def __eq__(self, other: object) -> bool:
        """Equality on resolution-unit counts within one family.

        Values of another family, or non-measures, never compare equal.

        Args:
            other: Object to compare against.

        Returns:
            bool: True if both counts are equal.
        """
        if not isinstance(other, Measure) or self.ROOT is not other.ROOT:
            return NotImplemented
        return self.as_resolution_unit() == other.as_resolution_unit()

    def __hash__(self) -> int:
        """Hash consistent with equality.

        Returns:
            int: Hash of the family root and the resolution-unit count.
        """
        return hash((self.ROOT, self.as_resolution_unit()))

    def __lt__(self, other: Measure) -> bool:
        """Less-than comparison between two measures of the same family.

        Args:
            other: Measure value to compare against.

        Returns:
            bool: True if this count is less than the other.

        Raises:
            TypeError: If the measures are not from the same family.
        """
        if not isinstance(other, Measure):
            return NotImplemented
        self._check_same_root(type(other))
        return self.as_resolution_unit() < other.as_resolution_unit()

    def __le__(self, other: Measure) -> bool:
        """Less-than-or-equal comparison between two measures of the same family.

        Args:
            other: Measure value to compare against.

        Returns:
            bool: True if this count is less than or equal to the other.

        Raises:
            TypeError: If the measures are not from the same family.
        """
        if not isinstance(other, Measure):
            return NotImplemented
        self._check_same_root(type(other))
        return self.as_resolution_unit() <= other.as_resolution_unit()

    def __gt__(self, other: Measure) -> bool:
        """Greater-than comparison between two measures of the same family.

        Args:
            other: Measure value to compare against.

        Returns:
            bool: True if this count is greater than the other.

        Raises:
            TypeError: If the measures are not from the same family.
        """
        if not isinstance(other, Measure):
            return NotImplemented
        self._check_same_root(type(other))
        return self.as_resolution_unit() > other.as_resolution_unit()

    def __ge__(self, other: Measure) -> bool:
        """Greater-than-or-equal comparison between two measures of the same family.

        Args:
            other: Measure value to compare against.

        Returns:
            bool: True if this count is greater than or equal to the other.

        Raises:
            TypeError: If the measures are not from the same family.
        """
        if not isinstance(other, Measure):
            return NotImplemented
        self._check_same_root(type(other))
        return self.as_resolution_unit() >= other.as_resolution_unit()

    def __repr__(self) -> str:
        """Return a debug representation with the raw resolution-unit count.

        Returns:
            str: e.g. ``Length(resolution=7)``.
        """
        return f"{type(self).__name__}(resolution={self.as_resolution_unit()})"
