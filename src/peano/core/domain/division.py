"""
Division — результат деления Peano numerals

Деление возвращает ошибку как явную альтернативу результата, а не через
исключение. Исключение DivisionByZeroError поднимается только при явном
unwrap() (и оператором //).

Особый случай: Zero / Zero → ok(Zero). Делимое Zero проверяется раньше
делителя, поэтому ошибка возникает только для ненулевого делимого.
"""

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from peano.core.domain.numeral import PeanoNumeral


# =============================================================================
# ERRORS
# =============================================================================


class PeanoErrorKind(str, Enum):
    """Вид ошибки Peano арифметики"""

    DIVISION_BY_ZERO = "division_by_zero"


class DivisionByZeroError(ZeroDivisionError):
    """
    Деление ненулевого numeral на Zero.

    Не несёт данных кроме вида ошибки; все экземпляры равны между собой.
    """

    kind: PeanoErrorKind = PeanoErrorKind.DIVISION_BY_ZERO

    def __init__(self, message: str = "division of a non-zero numeral by Zero"):
        super().__init__(message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivisionByZeroError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return "DivisionByZeroError()"


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class DivisionResult:
    """
    Результат div: либо quotient, либо error.

    Ровно одно из полей заполнено.
    """

    quotient: Optional["PeanoNumeral"] = None
    error: Optional[DivisionByZeroError] = None

    def __post_init__(self) -> None:
        if (self.quotient is None) == (self.error is None):
            raise ValueError("DivisionResult requires exactly one of quotient or error")

    @classmethod
    def Ok(cls, quotient: "PeanoNumeral") -> "DivisionResult":
        return cls(quotient=quotient)

    @classmethod
    def Err(cls, error: DivisionByZeroError) -> "DivisionResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> "PeanoNumeral":
        """
        Quotient или исключение.

        Raises:
            DivisionByZeroError: Если результат содержит ошибку
        """
        if self.error is not None:
            raise self.error
        return self.quotient  # type: ignore[return-value]

    def unwrap_or(self, default: "PeanoNumeral") -> "PeanoNumeral":
        if self.error is not None:
            return default
        return self.quotient  # type: ignore[return-value]

    def to_payload(self, dividend: "PeanoNumeral", divisor: "PeanoNumeral") -> Dict[str, Any]:
        """
        Сериализация в division_result контракт.

        Args:
            dividend: Делимое, для которого получен результат
            divisor: Делитель

        Returns:
            dict, соответствующий схеме division_result.json
        """
        return {
            "dividend": dividend.to_int(),
            "divisor": divisor.to_int(),
            "ok": self.ok,
            "quotient": None if self.quotient is None else self.quotient.to_int(),
            "error": None if self.error is None else self.error.kind.value,
        }

    def __repr__(self) -> str:
        if self.error is not None:
            return f"Err({self.error!r})"
        return f"Ok({self.quotient!r})"
