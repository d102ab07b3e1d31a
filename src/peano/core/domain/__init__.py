"""
Domain models and value objects.

Contains the Peano numeral type and the division result.
"""

from peano.core.domain.division import (
    DivisionByZeroError,
    DivisionResult,
    PeanoErrorKind,
)
from peano.core.domain.numeral import (
    ONE,
    ZERO,
    Ordering,
    PeanoNumeral,
    Successor,
    Zero,
    from_int,
)

__all__ = [
    # Numeral model
    "PeanoNumeral",
    "Zero",
    "Successor",
    "Ordering",
    "from_int",
    "ZERO",
    "ONE",
    # Division
    "DivisionResult",
    "DivisionByZeroError",
    "PeanoErrorKind",
]
