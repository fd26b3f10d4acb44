"""
Тесты для аффинного конвертера температуры

Проверяет:
1. Опорные точки (0/100 °C, 32 °F, 0 K)
2. Разбор единиц и алиасов, отказ от неизвестных символов
3. Округление до 4 знаков
4. Значения ниже абсолютного нуля
"""

import pytest

from src.core.domain.errors import InvalidInputError, UnknownUnitError
from src.core.domain.temperature import TemperatureUnit
from src.core.math.affine import (
    convert_temperature,
    from_celsius,
    is_below_absolute_zero,
    to_celsius,
)

ALL_UNITS = list(TemperatureUnit)


class TestFixedPoints:
    """Опорные точки шкал"""

    def test_freezing_celsius_to_fahrenheit(self) -> None:
        assert convert_temperature(0, "celsius", "fahrenheit") == 32.0

    def test_boiling_celsius_to_fahrenheit(self) -> None:
        assert convert_temperature(100, "celsius", "fahrenheit") == 212.0

    def test_freezing_celsius_to_kelvin(self) -> None:
        assert convert_temperature(0, "celsius", "kelvin") == 273.15

    def test_freezing_fahrenheit_to_celsius(self) -> None:
        assert convert_temperature(32, "fahrenheit", "celsius") == 0.0

    def test_minus_forty_coincides(self) -> None:
        """-40 °C == -40 °F"""
        assert convert_temperature(-40, "celsius", "fahrenheit") == -40.0
        assert convert_temperature(-40, "fahrenheit", "celsius") == -40.0

    def test_fahrenheit_to_kelvin(self) -> None:
        assert convert_temperature(212, "fahrenheit", "kelvin") == pytest.approx(373.15, abs=1e-9)

    def test_kelvin_to_fahrenheit(self) -> None:
        assert convert_temperature(300, "kelvin", "fahrenheit") == pytest.approx(80.33, abs=1e-9)


class TestInvariants:
    """Инварианты конверсии"""

    @pytest.mark.parametrize("unit", ALL_UNITS)
    def test_identity(self, unit: TemperatureUnit) -> None:
        assert convert_temperature(21.5, unit, unit) == pytest.approx(21.5, abs=1e-9)

    @pytest.mark.parametrize("source", ALL_UNITS)
    @pytest.mark.parametrize("target", ALL_UNITS)
    def test_roundtrip(self, source: TemperatureUnit, target: TemperatureUnit) -> None:
        """A → B → A в пределах точности 4 знаков"""
        forward = convert_temperature(36.6, source, target)
        back = convert_temperature(forward, target, source)
        assert back == pytest.approx(36.6, abs=1e-3)

    def test_pivot_helpers(self) -> None:
        """to_celsius / from_celsius обратны друг другу"""
        assert from_celsius(to_celsius(451, "fahrenheit"), "fahrenheit") == pytest.approx(451, abs=1e-9)
        assert to_celsius(0, TemperatureUnit.KELVIN) == -273.15


class TestRounding:
    """Округление до 4 знаков"""

    def test_four_decimals(self) -> None:
        """1 °F = -17.2222... °C"""
        assert convert_temperature(1, "fahrenheit", "celsius") == -17.2222

    def test_custom_decimals(self) -> None:
        assert convert_temperature(1, "fahrenheit", "celsius", decimals=1) == -17.2


class TestUnitParsing:
    """Разбор символов единиц"""

    @pytest.mark.parametrize(
        "symbol,expected",
        [
            ("celsius", TemperatureUnit.CELSIUS),
            ("C", TemperatureUnit.CELSIUS),
            ("°C", TemperatureUnit.CELSIUS),
            (" Fahrenheit ", TemperatureUnit.FAHRENHEIT),
            ("f", TemperatureUnit.FAHRENHEIT),
            ("K", TemperatureUnit.KELVIN),
        ],
    )
    def test_aliases(self, symbol: str, expected: TemperatureUnit) -> None:
        assert TemperatureUnit.parse(symbol) is expected

    def test_alias_conversion(self) -> None:
        assert convert_temperature(100, "C", "°F") == 212.0

    def test_unknown_source_rejected(self) -> None:
        """Неизвестный символ не трактуется как Celsius"""
        with pytest.raises(UnknownUnitError, match="rankine"):
            convert_temperature(1, "rankine", "celsius")

    def test_unknown_target_rejected(self) -> None:
        with pytest.raises(UnknownUnitError) as exc_info:
            convert_temperature(1, "celsius", "reaumur")
        assert exc_info.value.domain == "temperature"

    def test_non_string_rejected(self) -> None:
        with pytest.raises(UnknownUnitError):
            TemperatureUnit.parse(0)  # type: ignore[arg-type]


class TestInputValidation:
    """Валидация значения"""

    @pytest.mark.parametrize("value", [float("nan"), float("inf")])
    def test_non_finite_rejected(self, value: float) -> None:
        with pytest.raises(InvalidInputError):
            convert_temperature(value, "celsius", "kelvin")


class TestAbsoluteZero:
    """Значения ниже абсолютного нуля"""

    def test_converted_without_error(self) -> None:
        assert convert_temperature(-300, "celsius", "kelvin") == pytest.approx(-26.85, abs=1e-9)

    def test_below_absolute_zero_detected(self) -> None:
        assert is_below_absolute_zero(-300, "celsius")
        assert is_below_absolute_zero(-1, "kelvin")

    def test_absolute_zero_itself_allowed(self) -> None:
        assert not is_below_absolute_zero(0, "kelvin")
        assert not is_below_absolute_zero(-273.15, "celsius")
        assert not is_below_absolute_zero(-459.67, "fahrenheit")

    def test_float_noise_at_absolute_zero_ignored(self) -> None:
        """Шум float на границе 0 K не считается выходом за неё"""
        assert not is_below_absolute_zero(-273.15 - 1e-12, "celsius")
        assert is_below_absolute_zero(-273.15 - 1e-6, "celsius")
