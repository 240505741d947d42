"""jord: exact fixed-point quantities for geodetic computations.

Floating-point angles drift when they go through many geodetic operations.
jord stores angles as a whole number of microarcseconds and derives all of
its arithmetic from a small generic Measure contract that other quantity
types can implement as well.

Components:
    Angle: Signed angle with microarcsecond resolution
    Measure: Abstract contract giving exact arithmetic to any quantity type
    DmsError: Errors raised for invalid degrees, minutes and seconds input

Typical Usage:
    >>> from jord import Angle
    >>> a = Angle.from_decimal_degrees(154.91503)
    >>> a.whole_degrees(), a.arcminutes(), a.arcseconds(), a.arcmilliseconds()
    (154, 54, 54, 108)
"""

from jord.unit import (
    Angle,
    DmsError,
    InvalidArcMinutes,
    InvalidArcSeconds,
    Measure,
    NonFiniteAngleError,
)

__all__ = [
    "Angle",
    "DmsError",
    "InvalidArcMinutes",
    "InvalidArcSeconds",
    "Measure",
    "NonFiniteAngleError",
]
