"""
UnitRegistry — Централизованная таблица единиц измерения

Единственный источник масштабных коэффициентов для линейных доменов:
- length   (база: метр, 'm')
- weight   (база: килограмм, 'kg')
- volume   (база: литр, 'liter')
- speed    (база: метр в секунду, 'ms')
- area     (база: квадратный метр, 'm2')
- pressure (база: паскаль, 'pa')

Температура — аффинный домен: символы единиц перечислены здесь, но
коэффициентов у неё нет (см. src.core.math.affine).

Все коэффициенты нормализованы к одной конвенции:
    value_in_base = value * factor[unit]

Опубликованная таблица скорости хранит обратную величину (единиц на 1 м/с),
поэтому она инвертируется один раз при построении реестра.

ИНВАРИАНТЫ:
1. В каждом линейном домене есть базовая единица с factor == 1
2. Все коэффициенты конечны и строго положительны
3. Реестр строится один раз при импорте и никогда не изменяется
"""

import math
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping

from src.core.domain.errors import (
    NonLinearDomainError,
    RegistryError,
    UnknownDomainError,
    UnknownUnitError,
)


# =============================================================================
# ДОМЕНЫ
# =============================================================================


class Domain(str, Enum):
    """Домен измерения (фиксированный список)"""

    LENGTH = "length"
    WEIGHT = "weight"
    VOLUME = "volume"
    SPEED = "speed"
    AREA = "area"
    PRESSURE = "pressure"
    TEMPERATURE = "temperature"

    @property
    def is_linear(self) -> bool:
        """True для доменов с чисто мультипликативной конверсией."""
        return self is not Domain.TEMPERATURE

    @classmethod
    def parse(cls, value: "Domain | str") -> "Domain":
        """
        Приведение строки к Domain.

        Args:
            value: Domain или имя домена (регистр не важен)

        Returns:
            Domain

        Raises:
            UnknownDomainError: Если имя не входит в список доменов
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownDomainError(value)


# =============================================================================
# ОПУБЛИКОВАННЫЕ ТАБЛИЦЫ
# =============================================================================

# Метров в одной единице
LENGTH_FACTORS: Final[dict[str, float]] = {
    "mm": 0.001,
    "cm": 0.01,
    "m": 1.0,
    "km": 1000.0,
    "inch": 0.0254,
    "foot": 0.3048,
    "yard": 0.9144,
    "mile": 1609.344,
}

# Килограммов в одной единице
WEIGHT_FACTORS: Final[dict[str, float]] = {
    "mg": 0.000001,
    "g": 0.001,
    "kg": 1.0,
    "oz": 0.0283495,
    "lb": 0.453592,
    "ton": 1000.0,
}

# Литров в одной единице
VOLUME_FACTORS: Final[dict[str, float]] = {
    "ml": 0.001,
    "liter": 1.0,
    "gallon": 3.78541,
    "quart": 0.946353,
    "pint": 0.473176,
    "cup": 0.236588,
    "fl_oz": 0.0295735,
    "tbsp": 0.0147868,
    "tsp": 0.00492892,
}

# Единиц в 1 м/с (обратная конвенция относительно остальных таблиц)
SPEED_UNITS_PER_MPS: Final[dict[str, float]] = {
    "ms": 1.0,
    "kmh": 3.6,
    "mph": 2.23694,
    "knots": 1.94384,
}

# Квадратных метров в одной единице
AREA_FACTORS: Final[dict[str, float]] = {
    "mm2": 0.000001,
    "cm2": 0.0001,
    "m2": 1.0,
    "km2": 1000000.0,
    "acre": 4046.86,
    "hectare": 10000.0,
}

# Паскалей в одной единице
PRESSURE_FACTORS: Final[dict[str, float]] = {
    "pa": 1.0,
    "bar": 100000.0,
    "atm": 101325.0,
    "psi": 6894.76,
}

# Символы температурных единиц (порядок для списков выбора)
TEMPERATURE_SYMBOLS: Final[tuple[str, ...]] = ("celsius", "fahrenheit", "kelvin")

BASE_UNITS: Final[dict[Domain, str]] = {
    Domain.LENGTH: "m",
    Domain.WEIGHT: "kg",
    Domain.VOLUME: "liter",
    Domain.SPEED: "ms",
    Domain.AREA: "m2",
    Domain.PRESSURE: "pa",
    Domain.TEMPERATURE: "celsius",
}


# =============================================================================
# РЕЕСТР
# =============================================================================


class UnitRegistry:
    """
    Неизменяемый реестр: Domain → (символ → коэффициент к базе).

    Экземпляр безопасен для совместного чтения из нескольких потоков:
    после построения внутреннее состояние не меняется.
    """

    __slots__ = ("_factors", "_base_units")

    def __init__(
        self,
        factors: Mapping[Domain, Mapping[str, float]],
        base_units: Mapping[Domain, str],
    ):
        """
        Построение реестра с проверкой инвариантов.

        Args:
            factors: Таблицы линейных доменов (value_in_base = value * factor)
            base_units: Базовая единица для каждого домена

        Raises:
            RegistryError: Если нарушен инвариант базовой единицы или
                коэффициент не конечен / не положителен
        """
        frozen: dict[Domain, Mapping[str, float]] = {}

        for domain, table in factors.items():
            if not domain.is_linear:
                raise RegistryError(f"Domain '{domain.value}' has no scale factors")

            base = base_units.get(domain)
            if base is None or table.get(base) != 1.0:
                raise RegistryError(
                    f"Domain '{domain.value}' must define base unit {base!r} with factor 1"
                )

            for unit, factor in table.items():
                if not math.isfinite(factor) or factor <= 0:
                    raise RegistryError(
                        f"Factor for '{domain.value}.{unit}' must be finite and > 0, got {factor}"
                    )

            frozen[domain] = MappingProxyType(dict(table))

        self._factors = MappingProxyType(frozen)
        self._base_units = MappingProxyType(dict(base_units))

    def domains(self) -> tuple[Domain, ...]:
        """Все домены, известные реестру (линейные + температура)."""
        return tuple(d for d in Domain if d in self._factors or d in self._base_units)

    def units(self, domain: Domain) -> tuple[str, ...]:
        """
        Символы единиц домена в порядке опубликованной таблицы.

        Raises:
            UnknownDomainError: Если домен неизвестен
        """
        domain = Domain.parse(domain)
        if domain is Domain.TEMPERATURE:
            return TEMPERATURE_SYMBOLS
        table = self._factors.get(domain)
        if table is None:
            raise UnknownDomainError(domain)
        return tuple(table)

    def has_unit(self, domain: Domain, unit: str) -> bool:
        """Проверка наличия символа в домене без exception."""
        try:
            return unit in self.units(domain)
        except UnknownDomainError:
            return False

    def base_unit(self, domain: Domain) -> str:
        """Базовая единица домена (factor == 1)."""
        domain = Domain.parse(domain)
        try:
            return self._base_units[domain]
        except KeyError:
            raise UnknownDomainError(domain) from None

    def factor(self, domain: Domain, unit: str) -> float:
        """
        Коэффициент единицы: сколько базовых единиц в одной единице `unit`.

        Args:
            domain: Линейный домен
            unit: Символ единицы

        Returns:
            Положительный конечный коэффициент

        Raises:
            NonLinearDomainError: Для температуры
            UnknownUnitError: Если символа нет в таблице домена
        """
        domain = Domain.parse(domain)
        if not domain.is_linear:
            raise NonLinearDomainError(
                f"Domain '{domain.value}' is affine and has no scale factors"
            )

        table = self._factors.get(domain)
        if table is None:
            raise UnknownDomainError(domain)

        try:
            return table[unit]
        except (KeyError, TypeError):
            raise UnknownUnitError(domain.value, unit) from None


def _invert(table: Mapping[str, float]) -> dict[str, float]:
    # 1 / (единиц на базу) = баз на единицу; базовая единица остаётся ровно 1.0
    return {unit: 1.0 / value for unit, value in table.items()}


def build_default_registry() -> UnitRegistry:
    """Построение реестра из опубликованных таблиц."""
    return UnitRegistry(
        factors={
            Domain.LENGTH: LENGTH_FACTORS,
            Domain.WEIGHT: WEIGHT_FACTORS,
            Domain.VOLUME: VOLUME_FACTORS,
            Domain.SPEED: _invert(SPEED_UNITS_PER_MPS),
            Domain.AREA: AREA_FACTORS,
            Domain.PRESSURE: PRESSURE_FACTORS,
        },
        base_units=BASE_UNITS,
    )


# Глобальный экземпляр реестра
UNIT_REGISTRY: Final[UnitRegistry] = build_default_registry()
