"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость конверсий:
- NaN/Inf проверки
- Округление до фиксированного числа знаков (подавление шума float)
- Epsilon-сравнения float с учётом машинной точности
- Валидация входных значений конвертеров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют в результат конверсии
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from src.core.domain.errors import InvalidInputError

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Знаков после запятой для линейных доменов (подавление шума представления float)
LINEAR_DECIMALS: Final[int] = 10

# Знаков после запятой для температуры (шумовой порог грубее)
TEMPERATURE_DECIMALS: Final[int] = 4

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-9


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: object) -> bool:
    """
    Проверка, является ли значение валидным числом (не NaN, не Inf).

    bool не считается числом: True/False на входе конвертера — ошибка
    вызывающего кода, а не 1/0.

    Args:
        value: Проверяемое значение

    Returns:
        True если значение — конечное int/float
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int вне диапазона float
        return False


def validate_finite(value: object, name: str) -> float:
    """
    Валидация, что значение — конечное число.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        InvalidInputError: Если value не число или NaN/Inf
    """
    if not is_valid_float(value):
        raise InvalidInputError(f"{name} must be a finite number (not NaN/Inf), got {value!r}")
    return float(value)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_to_decimals(value: float, decimals: int) -> float:
    """
    Округление до `decimals` знаков после запятой.

    Используется после арифметики конверсии, чтобы убрать хвосты
    вида 1.6093440000000001. Отрицательный ноль нормализуется к 0.0.

    Args:
        value: Значение для округления
        decimals: Число знаков (>= 0)

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если decimals < 0

    Examples:
        >>> round_to_decimals(1.6093440000000001, 10)
        1.609344
        >>> round_to_decimals(-0.00001, 4)
        0.0
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    result = round(value, decimals)
    if result == 0.0:
        return 0.0
    return result


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
