"""
PeanoNumeral — унарное представление натуральных чисел

Immutable Pydantic модели:
- Zero          — значение 0 (лист)
- Successor(n)  — значение 1 + value(n), n принадлежит только этому узлу

Операции: from_int / to_int, add, sub (с отсечением в Zero), mul,
is_even / is_odd, compare, div (только quotient, через повторное вычитание).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Глубина вложенности numeral равна его целочисленному значению
2. Равенство numerals совпадает с равенством их значений
3. Numerals не изменяются после построения; операции строят новые значения
   (или возвращают неизменённый вход, что неотличимо от копии)
4. Ни одна операция не использует рекурсию Python: обход цепочки Successor
   идёт явным циклом, поэтому глубина ограничена только памятью
"""

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from peano.core.domain.division import DivisionByZeroError, DivisionResult
from peano.core.math.safeguards import clamp_to_natural

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(int, Enum):
    """Результат compare"""

    LESS = -1
    EQUAL = 0
    GREATER = 1


# =============================================================================
# NUMERAL MODELS
# =============================================================================


class PeanoNumeral(BaseModel):
    """
    Базовый класс Peano numeral.

    Конкретные значения — Zero или Successor. Все операции определены
    здесь и различают варианты через isinstance при обходе цепочки.
    """

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    def __new__(cls, *args, **kwargs):
        if cls is PeanoNumeral:
            raise TypeError("PeanoNumeral cannot be instantiated; use Zero, Successor or from_int")
        return super().__new__(cls)

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, n: int) -> "PeanoNumeral":
        """
        Построение numeral из целого числа.

        n <= 0 → Zero, иначе Successor(from_int(n - 1)). Тотальна.

        Raises:
            TypeError: Если n не int (bool не принимается)

        Examples:
            >>> PeanoNumeral.from_int(3)
            Peano(3)
            >>> PeanoNumeral.from_int(-2)
            Peano(0)
        """
        result: PeanoNumeral = Zero()
        for _ in range(clamp_to_natural(n)):
            result = Successor(predecessor=result)
        return result

    def to_int(self) -> int:
        """Zero ↦ 0; Successor(n) ↦ 1 + to_int(n)."""
        count = 0
        node: PeanoNumeral = self
        while isinstance(node, Successor):
            count += 1
            node = node.predecessor
        return count

    def to_payload(self) -> dict:
        """Сериализация в numeral контракт: {"value": n}."""
        return {"value": self.to_int()}

    # -------------------------------------------------------------------------
    # Структура
    # -------------------------------------------------------------------------

    def is_zero(self) -> bool:
        return not isinstance(self, Successor)

    def succ(self) -> "Successor":
        return Successor(predecessor=self)

    def pred(self) -> Optional["PeanoNumeral"]:
        """Предшественник; None для Zero."""
        if isinstance(self, Successor):
            return self.predecessor
        return None

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "PeanoNumeral") -> "PeanoNumeral":
        """
        Сложение, рекурсия по self.

        Zero.add(o) = o; Successor(n).add(o) = Successor(n.add(o)).
        Каждый слой self оборачивает other в ещё один Successor.
        """
        _require_numeral(other, "other")
        result = other
        for _ in range(self.to_int()):
            result = Successor(predecessor=result)
        return result

    def sub(self, other: "PeanoNumeral") -> "PeanoNumeral":
        """
        Вычитание с отсечением снизу в Zero.

        Zero.sub(_) = Zero; Successor.sub(Zero) = self;
        Successor(a).sub(Successor(b)) = a.sub(b).

        Examples:
            >>> from_int(5).sub(from_int(2))
            Peano(3)
            >>> from_int(2).sub(from_int(5))
            Peano(0)
        """
        _require_numeral(other, "other")
        left: PeanoNumeral = self
        right: PeanoNumeral = other
        while isinstance(left, Successor) and isinstance(right, Successor):
            left = left.predecessor
            right = right.predecessor
        # left is Zero (floor) or the untouched remainder of self
        return left

    def mul(self, other: "PeanoNumeral") -> "PeanoNumeral":
        """
        Умножение: other, сложенный value(self) раз.

        Zero.mul(_) = Zero; Successor(n).mul(o) = n.mul(o).add(o).
        Накопитель добавляется к other (o.add(acc)), поэтому стоимость
        O(value(self) * value(other)).
        """
        _require_numeral(other, "other")
        result: PeanoNumeral = Zero()
        node: PeanoNumeral = self
        while isinstance(node, Successor):
            result = other.add(result)
            node = node.predecessor
        return result

    def div(self, other: "PeanoNumeral") -> DivisionResult:
        """
        Целочисленное деление через повторное вычитание.

        Порядок проверок:
        1. self is Zero → Ok(Zero), даже если other тоже Zero
        2. other is Zero → Err(DivisionByZeroError)
        3. Пока remainder >= other: remainder -= other, count += 1

        Ошибка возвращается как значение, исключение не поднимается.
        Остаток не возвращается.

        Returns:
            DivisionResult с quotient = floor(value(self) / value(other))
        """
        _require_numeral(other, "other")

        if self.is_zero():
            return DivisionResult.Ok(Zero())

        if other.is_zero():
            logger.debug("Division of %r by Zero rejected", self)
            return DivisionResult.Err(DivisionByZeroError())

        count: PeanoNumeral = Zero()
        remainder: PeanoNumeral = self
        while remainder.compare(other) is not Ordering.LESS:
            remainder = remainder.sub(other)
            count = Successor(predecessor=count)

        return DivisionResult.Ok(count)

    # -------------------------------------------------------------------------
    # Чётность
    # -------------------------------------------------------------------------

    def is_even(self) -> bool:
        """Zero ↦ True; Successor(n) ↦ not n.is_even()."""
        even = True
        node: PeanoNumeral = self
        while isinstance(node, Successor):
            even = not even
            node = node.predecessor
        return even

    def is_odd(self) -> bool:
        """Zero ↦ False; Successor(n) ↦ n.is_even()."""
        odd = False
        node: PeanoNumeral = self
        while isinstance(node, Successor):
            odd = not odd
            node = node.predecessor
        return odd

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: "PeanoNumeral") -> Ordering:
        """
        Сравнение: оба numerals уменьшаются синхронно, пока один не станет Zero.

        Examples:
            >>> from_int(5).compare(from_int(3))
            <Ordering.GREATER: 1>
        """
        _require_numeral(other, "other")
        left: PeanoNumeral = self
        right: PeanoNumeral = other
        while isinstance(left, Successor) and isinstance(right, Successor):
            left = left.predecessor
            right = right.predecessor

        if left.is_zero() and right.is_zero():
            return Ordering.EQUAL
        if left.is_zero():
            return Ordering.LESS
        return Ordering.GREATER

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeanoNumeral):
            return NotImplemented
        return self.compare(other) is Ordering.EQUAL

    def __hash__(self) -> int:
        return hash(("PeanoNumeral", self.to_int()))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PeanoNumeral):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, PeanoNumeral):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, PeanoNumeral):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, PeanoNumeral):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    def __add__(self, other: object) -> "PeanoNumeral":
        if not isinstance(other, PeanoNumeral):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "PeanoNumeral":
        if not isinstance(other, PeanoNumeral):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> "PeanoNumeral":
        if not isinstance(other, PeanoNumeral):
            return NotImplemented
        return self.mul(other)

    def __floordiv__(self, other: object) -> "PeanoNumeral":
        """
        Raises:
            DivisionByZeroError: Если self ненулевой, а other is Zero
        """
        if not isinstance(other, PeanoNumeral):
            return NotImplemented
        return self.div(other).unwrap()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __int__(self) -> int:
        return self.to_int()

    def __index__(self) -> int:
        return self.to_int()

    # Immutable: copies share the chain
    def __copy__(self) -> "PeanoNumeral":
        return self

    def __deepcopy__(self, memo: Optional[dict] = None) -> "PeanoNumeral":
        return self

    def __repr__(self) -> str:
        return f"Peano({self.to_int()})"

    def __str__(self) -> str:
        return str(self.to_int())


class Zero(PeanoNumeral):
    """Значение 0."""


class Successor(PeanoNumeral):
    """Значение 1 + value(predecessor)."""

    predecessor: PeanoNumeral


# =============================================================================
# HELPERS
# =============================================================================


def _require_numeral(value: object, name: str) -> None:
    if not isinstance(value, PeanoNumeral):
        raise TypeError(f"{name} must be a PeanoNumeral, got {type(value).__name__}")


from_int = PeanoNumeral.from_int

ZERO: PeanoNumeral = Zero()
ONE: PeanoNumeral = Successor(predecessor=ZERO)
