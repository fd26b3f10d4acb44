"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Проверку NaN/Inf
2. Валидацию конечности
3. Округление до фиксированного числа знаков
4. Epsilon-сравнения float
"""

import pytest

from src.core.domain.errors import InvalidInputError
from src.core.math.numerical_safeguards import (
    LINEAR_DECIMALS,
    TEMPERATURE_DECIMALS,
    is_close,
    is_valid_float,
    round_to_decimals,
    validate_finite,
)

# =============================================================================
# ТЕСТЫ NaN/Inf ПРОВЕРОК
# =============================================================================


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite_values_valid(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1.5)
        assert is_valid_float(10)

    def test_nan_inf_invalid(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))

    def test_non_numbers_invalid(self) -> None:
        """Строки, None и bool не являются числами"""
        assert not is_valid_float("1.0")
        assert not is_valid_float(None)
        assert not is_valid_float(True)

    def test_huge_int_invalid(self) -> None:
        """int вне диапазона float не валиден"""
        assert not is_valid_float(10**400)


class TestValidateFinite:
    """Тесты для validate_finite"""

    def test_returns_float(self) -> None:
        result = validate_finite(7, "value")
        assert result == 7.0
        assert isinstance(result, float)

    def test_nan_rejected(self) -> None:
        with pytest.raises(InvalidInputError, match="value must be a finite number"):
            validate_finite(float("nan"), "value")

    def test_string_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            validate_finite("12", "value")


# =============================================================================
# ТЕСТЫ ОКРУГЛЕНИЯ
# =============================================================================


class TestRoundToDecimals:
    """Тесты для round_to_decimals"""

    def test_default_precision_constants(self) -> None:
        assert LINEAR_DECIMALS == 10
        assert TEMPERATURE_DECIMALS == 4

    def test_removes_representation_noise(self) -> None:
        """Хвосты float убираются"""
        assert round_to_decimals(0.1 + 0.2, 10) == 0.3
        assert round_to_decimals(0.0254 / 0.01, 10) == 2.54

    def test_coarse_rounding(self) -> None:
        assert round_to_decimals(-17.777777, 4) == -17.7778

    def test_negative_zero_normalized(self) -> None:
        """-0.0 после округления нормализуется к 0.0"""
        result = round_to_decimals(-0.00001, 4)
        assert result == 0.0
        assert str(result) == "0.0"

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            round_to_decimals(1.0, -1)


# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestIsClose:
    """Тесты для is_close"""

    def test_within_tolerance(self) -> None:
        assert is_close(1.0, 1.0 + 1e-10)

    def test_outside_tolerance(self) -> None:
        assert not is_close(1.0, 1.1)
