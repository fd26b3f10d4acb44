"""
Linear — Мультипликативная конверсия через базовую единицу

Одна формула для всех шести масштабных доменов
(length, weight, volume, speed, area, pressure):

    base   = value * factor[from_unit]
    result = base / factor[to_unit]

Таблица скорости уже нормализована реестром (см. UnitRegistry), поэтому
отдельной ветки для скорости здесь нет.

Конвертер не санитизирует вход: NaN/Inf → InvalidInputError.
Санитизация — ответственность фасада.
"""

from src.core.domain.units import UNIT_REGISTRY, Domain, UnitRegistry
from src.core.math.numerical_safeguards import (
    LINEAR_DECIMALS,
    round_to_decimals,
    validate_finite,
)


def to_base(
    value: float,
    unit: str,
    domain: Domain,
    registry: UnitRegistry = UNIT_REGISTRY,
) -> float:
    """
    Конверсия в базовую единицу домена (без округления).

    Raises:
        UnknownUnitError: Если unit нет в таблице домена
        InvalidInputError: Если value не конечно
    """
    value = validate_finite(value, "value")
    return value * registry.factor(domain, unit)


def from_base(
    value: float,
    unit: str,
    domain: Domain,
    registry: UnitRegistry = UNIT_REGISTRY,
) -> float:
    """
    Конверсия из базовой единицы домена (без округления).

    Raises:
        UnknownUnitError: Если unit нет в таблице домена
        InvalidInputError: Если value не конечно
    """
    value = validate_finite(value, "value")
    return value / registry.factor(domain, unit)


def convert_linear(
    value: float,
    from_unit: str,
    to_unit: str,
    domain: Domain,
    registry: UnitRegistry = UNIT_REGISTRY,
    decimals: int = LINEAR_DECIMALS,
) -> float:
    """
    Конверсия значения между единицами линейного домена.

    Обе единицы проверяются до арифметики, поэтому ошибка всегда
    называет первую неизвестную единицу.

    Args:
        value: Конечное значение в from_unit
        from_unit: Символ исходной единицы
        to_unit: Символ целевой единицы
        domain: Линейный домен
        registry: Реестр коэффициентов (default: UNIT_REGISTRY)
        decimals: Знаков после запятой в результате (default: 10)

    Returns:
        Значение в to_unit, округлённое до `decimals` знаков

    Raises:
        UnknownUnitError: Если from_unit или to_unit нет в таблице домена
        NonLinearDomainError: Для температуры
        InvalidInputError: Если value не конечно

    Examples:
        >>> convert_linear(1, "mile", "km", Domain.LENGTH)
        1.609344
        >>> convert_linear(100, "kmh", "mph", Domain.SPEED)
        62.1372222222
    """
    value = validate_finite(value, "value")
    from_factor = registry.factor(domain, from_unit)
    to_factor = registry.factor(domain, to_unit)

    base = value * from_factor
    result = base / to_factor

    return round_to_decimals(result, decimals)
