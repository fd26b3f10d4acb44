"""Conversion Facade — точки входа конвертера для UI-слоя.

Каждая точка входа:
1. Разбирает домен и единицы (неизвестные → исключение, до арифметики)
2. Санитизирует ввод (пусто/мусор/NaN → 0 или InvalidInputError в strict)
3. Делегирует линейному или аффинному конвертеру
4. Форматирует численный результат

Фасад не хранит изменяемого состояния: один экземпляр можно вызывать
из нескольких потоков без синхронизации.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from src.core.contracts import validate_conversion_request, validate_conversion_result
from src.core.domain.conversion import ConversionRequest, ConversionResult
from src.core.domain.errors import InvalidInputError, UnknownUnitError
from src.core.domain.temperature import TemperatureUnit
from src.core.domain.units import UNIT_REGISTRY, Domain, UnitRegistry
from src.core.math import affine
from src.core.math.formatting import FormatConfig, format_number
from src.core.math.linear import convert_linear
from src.core.math.numerical_safeguards import LINEAR_DECIMALS, TEMPERATURE_DECIMALS
from src.converter.sanitation import parse_input

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ConverterConfig:
    """Конфигурация фасада.

    strict_input=False — невалидный ввод заменяется на 0 (с warning в лог),
    strict_input=True — невалидный ввод → InvalidInputError.
    """

    strict_input: bool = False
    linear_decimals: int = LINEAR_DECIMALS
    temperature_decimals: int = TEMPERATURE_DECIMALS
    format_config: FormatConfig = field(default_factory=FormatConfig)


# =============================================================================
# FACADE
# =============================================================================


class UnitConverter:
    """Фасад конвертера: реестр + конвертеры + санитизация + форматирование."""

    def __init__(
        self,
        config: ConverterConfig | None = None,
        registry: UnitRegistry = UNIT_REGISTRY,
    ):
        """
        Args:
            config: конфигурация фасада (опционально, используется default)
            registry: реестр единиц (default: UNIT_REGISTRY)
        """
        self.config = config or ConverterConfig()
        self.registry = registry

    # -------------------------------------------------------------------------
    # Каталог
    # -------------------------------------------------------------------------

    def list_domains(self) -> list[str]:
        """Имена доменов в фиксированном порядке."""
        return [d.value for d in self.registry.domains()]

    def list_units(self, domain: Domain | str) -> list[str]:
        """Символы единиц домена для списков выбора."""
        return list(self.registry.units(Domain.parse(domain)))

    # -------------------------------------------------------------------------
    # Санитизация
    # -------------------------------------------------------------------------

    def sanitize(self, raw: object) -> tuple[float, bool]:
        """
        Приведение сырого ввода к числу.

        Returns:
            (значение, sanitized) — sanitized=True если ввод заменён на 0

        Raises:
            InvalidInputError: В strict режиме, если ввод не число
        """
        value = parse_input(raw)
        if value is not None:
            return value, False

        if self.config.strict_input:
            raise InvalidInputError(f"Input {raw!r} is not a finite number")

        logger.warning("Invalid conversion input %r replaced with 0", raw)
        return 0.0, True

    # -------------------------------------------------------------------------
    # Конверсия
    # -------------------------------------------------------------------------

    def _resolve_units(self, domain: Domain, from_unit: Any, to_unit: Any) -> tuple[str, str]:
        """Проверка единиц до санитизации: UnknownUnitError имеет приоритет."""
        if isinstance(from_unit, str):
            from_unit = from_unit.strip()
        if isinstance(to_unit, str):
            to_unit = to_unit.strip()

        if domain is Domain.TEMPERATURE:
            return TemperatureUnit.parse(from_unit).value, TemperatureUnit.parse(to_unit).value

        for unit in (from_unit, to_unit):
            if not self.registry.has_unit(domain, unit):
                raise UnknownUnitError(domain.value, unit)
        return from_unit, to_unit

    def _convert(
        self, domain: Domain, raw: object, from_unit: Any, to_unit: Any
    ) -> tuple[float, float, bool, str, str]:
        source, target = self._resolve_units(domain, from_unit, to_unit)
        value, sanitized = self.sanitize(raw)

        if domain is Domain.TEMPERATURE:
            if affine.is_below_absolute_zero(value, source):
                logger.warning(
                    "Temperature %s %s is below absolute zero", value, source
                )
            result = affine.convert_temperature(
                value, source, target, decimals=self.config.temperature_decimals
            )
        else:
            result = convert_linear(
                value,
                source,
                target,
                domain,
                registry=self.registry,
                decimals=self.config.linear_decimals,
            )

        logger.debug(
            "Converted %s %s -> %s %s (%s)", value, source, result, target, domain.value
        )
        return value, result, sanitized, source, target

    def convert(
        self,
        domain: Domain | str,
        value: object,
        from_unit: str,
        to_unit: str,
    ) -> float:
        """
        Конверсия значения, численный результат.

        Args:
            domain: Домен (Domain или имя)
            value: Число, текст поля ввода или None
            from_unit: Символ исходной единицы
            to_unit: Символ целевой единицы

        Returns:
            Значение в to_unit (0-ввод для невалидного значения в lenient режиме)

        Raises:
            UnknownDomainError: Если домен неизвестен
            UnknownUnitError: Если единица отсутствует в домене
            InvalidInputError: В strict режиме для невалидного ввода
        """
        _, result, _, _, _ = self._convert(Domain.parse(domain), value, from_unit, to_unit)
        return result

    def format(self, value: float) -> str:
        """Форматирование численного результата для отображения."""
        return format_number(value, self.config.format_config)

    def convert_and_format(
        self,
        domain: Domain | str,
        value: object,
        from_unit: str,
        to_unit: str,
    ) -> str:
        """Конверсия + форматирование (то, что отображает поле результата)."""
        return self.format(self.convert(domain, value, from_unit, to_unit))

    def convert_request(self, request: ConversionRequest) -> ConversionResult:
        """Конверсия по модели запроса."""
        value, result, sanitized, source, target = self._convert(
            request.domain, request.value, request.from_unit, request.to_unit
        )
        return ConversionResult(
            domain=request.domain,
            from_unit=source,
            to_unit=target,
            input_value=value,
            value=result,
            formatted=self.format(result),
            sanitized=sanitized,
        )

    def convert_payload(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Конверсия JSON payload с валидацией обоих контрактов.

        Raises:
            jsonschema.ValidationError: Если payload не соответствует
                conversion_request контракту
            UnknownUnitError / InvalidInputError: см. convert()
        """
        validate_conversion_request(payload)
        request = ConversionRequest.model_validate(payload)

        data = self.convert_request(request).model_dump(mode="json")
        validate_conversion_result(data)
        return data

    # -------------------------------------------------------------------------
    # Точки входа по доменам
    # -------------------------------------------------------------------------

    def convert_length(self, value: object, from_unit: str, to_unit: str) -> str:
        return self.convert_and_format(Domain.LENGTH, value, from_unit, to_unit)

    def convert_weight(self, value: object, from_unit: str, to_unit: str) -> str:
        return self.convert_and_format(Domain.WEIGHT, value, from_unit, to_unit)

    def convert_volume(self, value: object, from_unit: str, to_unit: str) -> str:
        return self.convert_and_format(Domain.VOLUME, value, from_unit, to_unit)

    def convert_speed(self, value: object, from_unit: str, to_unit: str) -> str:
        return self.convert_and_format(Domain.SPEED, value, from_unit, to_unit)

    def convert_area(self, value: object, from_unit: str, to_unit: str) -> str:
        return self.convert_and_format(Domain.AREA, value, from_unit, to_unit)

    def convert_pressure(self, value: object, from_unit: str, to_unit: str) -> str:
        return self.convert_and_format(Domain.PRESSURE, value, from_unit, to_unit)

    def convert_temperature(self, value: object, from_unit: str, to_unit: str) -> str:
        return self.convert_and_format(Domain.TEMPERATURE, value, from_unit, to_unit)


# =============================================================================
# MODULE-LEVEL API
# =============================================================================

# Глобальный экземпляр фасада с конфигурацией по умолчанию
_DEFAULT_CONVERTER = UnitConverter()


def convert(domain: Domain | str, value: object, from_unit: str, to_unit: str) -> float:
    """Конверсия значения (фасад по умолчанию)."""
    return _DEFAULT_CONVERTER.convert(domain, value, from_unit, to_unit)


def format_result(value: float, config: Optional[FormatConfig] = None) -> str:
    """Форматирование результата для отображения."""
    return format_number(value, config)


def list_domains() -> list[str]:
    return _DEFAULT_CONVERTER.list_domains()


def list_units(domain: Domain | str) -> list[str]:
    return _DEFAULT_CONVERTER.list_units(domain)


def convert_length(value: object, from_unit: str, to_unit: str) -> str:
    return _DEFAULT_CONVERTER.convert_length(value, from_unit, to_unit)


def convert_weight(value: object, from_unit: str, to_unit: str) -> str:
    return _DEFAULT_CONVERTER.convert_weight(value, from_unit, to_unit)


def convert_volume(value: object, from_unit: str, to_unit: str) -> str:
    return _DEFAULT_CONVERTER.convert_volume(value, from_unit, to_unit)


def convert_speed(value: object, from_unit: str, to_unit: str) -> str:
    return _DEFAULT_CONVERTER.convert_speed(value, from_unit, to_unit)


def convert_area(value: object, from_unit: str, to_unit: str) -> str:
    return _DEFAULT_CONVERTER.convert_area(value, from_unit, to_unit)


def convert_pressure(value: object, from_unit: str, to_unit: str) -> str:
    return _DEFAULT_CONVERTER.convert_pressure(value, from_unit, to_unit)


def convert_temperature(value: object, from_unit: str, to_unit: str) -> str:
    return _DEFAULT_CONVERTER.convert_temperature(value, from_unit, to_unit)
