"""Sanitation — Политика разбора ввода фасада

Повторяет поведение поля ввода `parseFloat(text) || 0`:
- у строки берётся ведущий числовой префикс ("12.5kg" → 12.5)
- None, пустая строка, мусор, NaN и ±Inf → значение недоступно
- bool не считается числом

Числовой 0 — легитимный ввод, а не «пусто»: он проходит как 0.0
и не помечается как санитизированный.
"""

import math
import re
from typing import Final, Optional

from src.core.math.numerical_safeguards import is_valid_float

# Ведущий числовой префикс: знак, цифры с необязательной дробной частью, экспонента
_NUMERIC_PREFIX: Final[re.Pattern[str]] = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)


def parse_input(raw: object) -> Optional[float]:
    """
    Разбор сырого ввода в конечное число.

    Args:
        raw: Число, текст поля ввода или None

    Returns:
        Конечный float или None, если ввод не содержит числа

    Examples:
        >>> parse_input(" 12.5 kg")
        12.5
        >>> parse_input("abc") is None
        True
        >>> parse_input(0)
        0.0
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        return float(raw) if is_valid_float(raw) else None

    if isinstance(raw, str):
        match = _NUMERIC_PREFIX.match(raw.strip())
        if match is None:
            return None
        value = float(match.group(0))
        # "1e999" → inf
        return value if math.isfinite(value) else None

    return None
