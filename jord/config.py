"""Global numeric configuration for the jord measure system.

This module centralizes the numeric type aliases and fixed-point constants
shared by every quantity type. Keeping them in one place guarantees that all
measures agree on which scalars they accept and on the bounds of their
resolution-unit counts.

Type Definitions:
    Number: Scalars accepted wherever a plain number is expected (scaling
            factors, default-unit amounts). Python native ``int``/``float``
            and NumPy scalar types are all accepted.
    Integer: Scalars accepted for exact resolution-unit counts and the
             integral fields of DMS input.

Constants:
    RESOLUTION_MIN / RESOLUTION_MAX: Signed 64-bit bounds of every
        resolution-unit count.
    MICROARCSECONDS_PER_*: Fixed-point scale of the Angle type.

Example:
    >>> from jord.config import Number
    >>> import numpy as np
    >>> isinstance(np.float32(1.5), Number)
    True
"""

from numpy import floating, integer

Number = int | float | integer | floating
Integer = int | integer

RESOLUTION_MIN = -(2**63)
RESOLUTION_MAX = 2**63 - 1

MICROARCSECONDS_PER_DEGREE = 3_600_000_000
MICROARCSECONDS_PER_ARCMINUTE = 60_000_000
MICROARCSECONDS_PER_ARCSECOND = 1_000_000
MICROARCSECONDS_PER_ARCMILLISECOND = 1_000
