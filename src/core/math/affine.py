"""
Affine — Конверсия температуры через опорную единицу (Celsius)

Двухшаговый конвейер: source → celsius → target.

ФОРМУЛЫ:
    to celsius:   F → (v - 32) * 5/9        K → v - 273.15
    from celsius: F → v * 9/5 + 32          K → v + 273.15

Результат округляется до 4 знаков. Значения ниже абсолютного нуля
конвертируются без ошибки (физическая валидация не входит в конвертер).
"""

from src.core.domain.temperature import ABSOLUTE_ZERO_C, TemperatureUnit
from src.core.math.numerical_safeguards import (
    TEMPERATURE_DECIMALS,
    is_close,
    round_to_decimals,
    validate_finite,
)


def to_celsius(value: float, unit: TemperatureUnit | str) -> float:
    """
    Конверсия в градусы Цельсия (без округления).

    Raises:
        UnknownUnitError: Если unit не температурная единица
        InvalidInputError: Если value не конечно
    """
    unit = TemperatureUnit.parse(unit)
    value = validate_finite(value, "value")

    if unit is TemperatureUnit.FAHRENHEIT:
        return (value - 32.0) * (5.0 / 9.0)
    if unit is TemperatureUnit.KELVIN:
        return value + ABSOLUTE_ZERO_C
    return value


def from_celsius(value: float, unit: TemperatureUnit | str) -> float:
    """
    Конверсия из градусов Цельсия (без округления).

    Raises:
        UnknownUnitError: Если unit не температурная единица
        InvalidInputError: Если value не конечно
    """
    unit = TemperatureUnit.parse(unit)
    value = validate_finite(value, "value")

    if unit is TemperatureUnit.FAHRENHEIT:
        return value * (9.0 / 5.0) + 32.0
    if unit is TemperatureUnit.KELVIN:
        return value - ABSOLUTE_ZERO_C
    return value


def convert_temperature(
    value: float,
    from_unit: TemperatureUnit | str,
    to_unit: TemperatureUnit | str,
    decimals: int = TEMPERATURE_DECIMALS,
) -> float:
    """
    Конверсия температуры между celsius / fahrenheit / kelvin.

    Обе единицы разбираются до арифметики: неизвестный символ никогда
    не трактуется как Celsius.

    Args:
        value: Конечное значение в from_unit
        from_unit: Исходная единица
        to_unit: Целевая единица
        decimals: Знаков после запятой в результате (default: 4)

    Returns:
        Значение в to_unit

    Raises:
        UnknownUnitError: Если единица не распознана
        InvalidInputError: Если value не конечно

    Examples:
        >>> convert_temperature(100, "celsius", "fahrenheit")
        212.0
        >>> convert_temperature(0, "celsius", "kelvin")
        273.15
    """
    source = TemperatureUnit.parse(from_unit)
    target = TemperatureUnit.parse(to_unit)

    celsius = to_celsius(value, source)
    return round_to_decimals(from_celsius(celsius, target), decimals)


def is_below_absolute_zero(value: float, unit: TemperatureUnit | str) -> bool:
    """True если значение физически недостижимо (ниже 0 K с учётом шума float)."""
    celsius = to_celsius(value, unit)
    return celsius < ABSOLUTE_ZERO_C and not is_close(celsius, ABSOLUTE_ZERO_C)
