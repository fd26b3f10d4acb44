"""
Core math modules

Числовые примитивы, конвертеры и политика форматирования.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    LINEAR_DECIMALS,
    TEMPERATURE_DECIMALS,
    is_close,
    is_valid_float,
    round_to_decimals,
    validate_finite,
)

# Linear converter
from src.core.math.linear import convert_linear, from_base, to_base

# Affine (temperature) converter
from src.core.math.affine import (
    convert_temperature,
    from_celsius,
    is_below_absolute_zero,
    to_celsius,
)

# Formatting
from src.core.math.formatting import (
    DEFAULT_FORMAT_CONFIG,
    FormatConfig,
    format_exponential,
    format_fixed,
    format_number,
)

__all__ = [
    # Numerical Safeguards — Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "LINEAR_DECIMALS",
    "TEMPERATURE_DECIMALS",
    # Numerical Safeguards — Functions
    "is_close",
    "is_valid_float",
    "round_to_decimals",
    "validate_finite",
    # Linear
    "convert_linear",
    "from_base",
    "to_base",
    # Affine
    "convert_temperature",
    "from_celsius",
    "is_below_absolute_zero",
    "to_celsius",
    # Formatting
    "DEFAULT_FORMAT_CONFIG",
    "FormatConfig",
    "format_exponential",
    "format_fixed",
    "format_number",
]
