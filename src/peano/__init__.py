"""
peano: унарная (Peano) арифметика натуральных чисел.

Публичный API:
    - Типы: PeanoNumeral, Zero, Successor, Ordering
    - Построение: from_int, ZERO, ONE
    - Деление: DivisionResult, DivisionByZeroError, PeanoErrorKind
"""

__version__ = "0.1.0"

from peano.core.domain import (
    ONE,
    ZERO,
    DivisionByZeroError,
    DivisionResult,
    Ordering,
    PeanoErrorKind,
    PeanoNumeral,
    Successor,
    Zero,
    from_int,
)

__all__ = [
    "__version__",
    # Types
    "PeanoNumeral",
    "Zero",
    "Successor",
    "Ordering",
    # Construction
    "from_int",
    "ZERO",
    "ONE",
    # Division
    "DivisionResult",
    "DivisionByZeroError",
    "PeanoErrorKind",
]
