"""
Safeguards — Integer Input Guards

Модуль защищает границу между машинными целыми числами и Peano numerals:
- Clamp произвольного int в натуральный диапазон (отрицательные → 0)
- Валидация типов (bool и float не принимаются как int)
- Валидация диапазона для значений из внешних источников

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. clamp_to_natural тотальна: любой int даёт результат >= NATURAL_FLOOR
2. bool никогда не трактуется как целое число
3. Все проверки детерминированы, без побочных эффектов
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Нижняя граница натуральных чисел (значение Zero)
NATURAL_FLOOR: Final[int] = 0


# =============================================================================
# ПРОВЕРКИ ТИПОВ
# =============================================================================


def is_machine_int(value: object) -> bool:
    """
    Проверка, является ли значение целым числом (не bool).

    Examples:
        >>> is_machine_int(3)
        True
        >>> is_machine_int(True)
        False
        >>> is_machine_int(3.0)
        False
    """
    return isinstance(value, int) and not isinstance(value, bool)


def require_int(value: object, name: str) -> int:
    """
    Требование целого числа.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int или является bool
    """
    if not is_machine_int(value):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value  # type: ignore[return-value]


# =============================================================================
# CLAMP
# =============================================================================


def clamp_to_natural(value: int) -> int:
    """
    Ограничение целого числа снизу натуральным диапазоном.

    Отрицательные значения становятся NATURAL_FLOOR, как и при построении
    numeral из отрицательного int.

    Args:
        value: Исходное целое число

    Returns:
        max(value, NATURAL_FLOOR)

    Raises:
        TypeError: Если value не int

    Examples:
        >>> clamp_to_natural(5)
        5
        >>> clamp_to_natural(-3)
        0
    """
    require_int(value, "value")
    return max(value, NATURAL_FLOOR)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: object,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Валидация, что целое значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        TypeError: Если value не int
        ValueError: Если value вне диапазона
    """
    require_int(value, name)

    if min_value is not None and value < min_value:  # type: ignore[operator]
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:  # type: ignore[operator]
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
