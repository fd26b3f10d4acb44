"""
Domain models and value objects.

Contains the unit registry, temperature units, conversion request/result
models and the exception hierarchy.
"""

from src.core.domain.conversion import ConversionRequest, ConversionResult
from src.core.domain.errors import (
    ConversionError,
    InvalidInputError,
    NonLinearDomainError,
    RegistryError,
    UnknownDomainError,
    UnknownUnitError,
)
from src.core.domain.temperature import ABSOLUTE_ZERO_C, TemperatureUnit
from src.core.domain.units import (
    AREA_FACTORS,
    BASE_UNITS,
    LENGTH_FACTORS,
    PRESSURE_FACTORS,
    SPEED_UNITS_PER_MPS,
    TEMPERATURE_SYMBOLS,
    UNIT_REGISTRY,
    VOLUME_FACTORS,
    WEIGHT_FACTORS,
    Domain,
    UnitRegistry,
    build_default_registry,
)

__all__ = [
    # Units module
    "Domain",
    "UnitRegistry",
    "UNIT_REGISTRY",
    "build_default_registry",
    "BASE_UNITS",
    "LENGTH_FACTORS",
    "WEIGHT_FACTORS",
    "VOLUME_FACTORS",
    "SPEED_UNITS_PER_MPS",
    "AREA_FACTORS",
    "PRESSURE_FACTORS",
    "TEMPERATURE_SYMBOLS",
    # Temperature
    "TemperatureUnit",
    "ABSOLUTE_ZERO_C",
    # Conversion models
    "ConversionRequest",
    "ConversionResult",
    # Errors
    "ConversionError",
    "UnknownUnitError",
    "UnknownDomainError",
    "InvalidInputError",
    "NonLinearDomainError",
    "RegistryError",
]
