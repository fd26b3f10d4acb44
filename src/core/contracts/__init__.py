"""
Contract Validation Module

Модуль для валидации JSON контрактов конвертера.
"""

from .validators import (
    ContractValidator,
    ConversionRequestValidator,
    ConversionResultValidator,
    SchemaLoader,
    validate_conversion_request,
    validate_conversion_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ConversionRequestValidator",
    "ConversionResultValidator",
    # Functions
    "validate_conversion_request",
    "validate_conversion_result",
]
