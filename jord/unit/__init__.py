"""Exact, type-safe physical quantities.

This package provides the Measure contract shared by every quantity type and
the Angle measure built on it. Quantities are stored as an exact integer
count of their resolution unit, so addition, subtraction, negation and
comparison are exact, while floating-point values only enter at the
conversion boundary.

Architecture:
    The measure system is organized into specialized modules:

    - unit_base: Measure contract, family management and derived operators
    - unit_angle: Angle measure (microarcsecond resolution) and DMS errors

Key Features:
    - Exactness: Sums and differences are integer arithmetic, no drift
    - Type Safety: Prevents mixing incompatible quantities (e.g., angle + length)
    - One Rounding Policy: Floats are rounded half away from zero, once
    - Extensible: New quantity types supply four conversion primitives only

Example:
    >>> from jord.unit import Angle
    >>>
    >>> lat = Angle.from_dms(47, 22, 30.0)
    >>> step = Angle.from_decimal_degrees(0.5)
    >>> (lat + step - step) == lat
    True
    >>> lat.whole_degrees(), lat.arcminutes(), lat.arcseconds()
    (47, 22, 30)
"""

from .unit_angle import (
    Angle,
    DmsError,
    InvalidArcMinutes,
    InvalidArcSeconds,
    NonFiniteAngleError,
)
from .unit_base import Measure, round_half_away_from_zero

__all__ = [
    # Base classes
    "Measure",
    "round_half_away_from_zero",
    # Angular measure
    "Angle",
    # Errors
    "DmsError",
    "InvalidArcMinutes",
    "InvalidArcSeconds",
    "NonFiniteAngleError",
]
