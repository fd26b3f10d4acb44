"""Converter — фасад конвертера единиц.

Точки входа для UI-слоя:
- convert(domain, value, from_unit, to_unit) -> float
- format_result(value) -> str
- convert_<domain>(value, from_unit, to_unit) -> str для каждого домена
- UnitConverter — фасад с явной конфигурацией
"""

from .facade import (
    ConverterConfig,
    UnitConverter,
    convert,
    convert_area,
    convert_length,
    convert_pressure,
    convert_speed,
    convert_temperature,
    convert_volume,
    convert_weight,
    format_result,
    list_domains,
    list_units,
)
from .sanitation import parse_input

__all__ = [
    "ConverterConfig",
    "UnitConverter",
    "convert",
    "format_result",
    "list_domains",
    "list_units",
    "parse_input",
    "convert_length",
    "convert_weight",
    "convert_volume",
    "convert_speed",
    "convert_area",
    "convert_pressure",
    "convert_temperature",
]
