"""
Formatting — Политика отображения результата конверсии

Правила:
- 0 → "0"
- |v| < 0.0001 или |v| > 1 000 000 → экспоненциальная запись,
  6 знаков мантиссы, экспонента со знаком и без ведущих нулей ("1.234500e-5")
- иначе → фиксированная запись с группировкой тысяч, не более 6 знаков
  после запятой, без хвостовых нулей ("1,234.5")

Форматирование не влияет на численный результат конвертера.
"""

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация форматирования.

    Значения по умолчанию соответствуют en-US конвенции.
    """

    # Ниже этого модуля — экспоненциальная запись
    small_threshold: float = 0.0001

    # Выше этого модуля — экспоненциальная запись
    large_threshold: float = 1_000_000.0

    # Знаков мантиссы в экспоненциальной записи
    exponent_digits: int = 6

    # Максимум знаков после запятой в фиксированной записи
    max_fraction_digits: int = 6

    thousands_separator: str = ","
    decimal_separator: str = "."

    def __post_init__(self):
        if self.small_threshold < 0 or self.large_threshold <= self.small_threshold:
            raise ValueError(
                f"thresholds must satisfy 0 <= small < large, got "
                f"{self.small_threshold} / {self.large_threshold}"
            )
        if self.exponent_digits < 0 or self.max_fraction_digits < 0:
            raise ValueError("digit counts must be non-negative")
        if self.thousands_separator == self.decimal_separator:
            raise ValueError("thousands and decimal separators must differ")


DEFAULT_FORMAT_CONFIG = FormatConfig()


# =============================================================================
# FORMATTERS
# =============================================================================


def _format_non_finite(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def format_exponential(value: float, digits: int = 6) -> str:
    """
    Экспоненциальная запись в стиле Number.toExponential.

    Мантисса округляется по точному двоичному значению float,
    точная середина — от нуля (1234568.5 → 1.234569e+6).

    Examples:
        >>> format_exponential(0.00005)
        '5.000000e-5'
        >>> format_exponential(12345678.0)
        '1.234568e+7'
    """
    if not math.isfinite(value):
        return _format_non_finite(value)

    # -0.0 без знака
    exact = Decimal(value) if value != 0 else Decimal(0)
    exponent = exact.adjusted()

    rounded = exact.quantize(Decimal(1).scaleb(exponent - digits), rounding=ROUND_HALF_UP)
    if rounded.adjusted() > exponent:
        # 9.9999995e+0 → 1.000000e+1
        exponent += 1
        rounded = exact.quantize(Decimal(1).scaleb(exponent - digits), rounding=ROUND_HALF_UP)

    return f"{rounded.scaleb(-exponent)}e{exponent:+d}"


def format_fixed(
    value: float,
    max_fraction_digits: int = 6,
    thousands_separator: str = ",",
    decimal_separator: str = ".",
) -> str:
    """
    Фиксированная запись с группировкой тысяч и без хвостовых нулей.

    Examples:
        >>> format_fixed(1234.5)
        '1,234.5'
        >>> format_fixed(0.1234567)
        '0.123457'
    """
    if not math.isfinite(value):
        return _format_non_finite(value)

    text = f"{value:,.{max_fraction_digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")

    if text in ("-0", ""):
        return "0"

    # Двухшаговая замена: разделители могут совпадать с исходными символами
    return (
        text.replace(",", "\x00")
        .replace(".", decimal_separator)
        .replace("\x00", thousands_separator)
    )


def format_number(value: float, config: FormatConfig | None = None) -> str:
    """
    Форматирование числа для отображения.

    Args:
        value: Результат конверсии
        config: Конфигурация (default: FormatConfig())

    Returns:
        Строка для отображения
    """
    config = config or DEFAULT_FORMAT_CONFIG

    if value == 0:
        return "0"

    magnitude = abs(value)
    if magnitude < config.small_threshold or magnitude > config.large_threshold:
        return format_exponential(value, config.exponent_digits)

    return format_fixed(
        value,
        max_fraction_digits=config.max_fraction_digits,
        thousands_separator=config.thousands_separator,
        decimal_separator=config.decimal_separator,
    )
