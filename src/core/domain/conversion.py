"""
Conversion — Модели запроса и результата конверсии

Immutable Pydantic модели, которыми фасад обменивается с UI-слоем.
Полная совместимость с JSON Schema:
- contracts/schema/conversion_request.json
- contracts/schema/conversion_result.json
"""

from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

from src.core.domain.units import Domain


# =============================================================================
# REQUEST
# =============================================================================


class ConversionRequest(BaseModel):
    """
    Запрос на конверсию одного значения.

    value хранится «как пришло» из поля ввода (число, строка или None);
    санитизация выполняется фасадом, а не моделью.
    """

    domain: Domain = Field(..., description="Домен измерения")
    value: Optional[Union[float, str]] = Field(
        None, description="Исходное значение (число или текст поля ввода)"
    )
    from_unit: str = Field(..., min_length=1, description="Символ исходной единицы")
    to_unit: str = Field(..., min_length=1, description="Символ целевой единицы")

    model_config = {"frozen": True}

    @field_validator("domain", mode="before")
    @classmethod
    def parse_domain(cls, v):
        """Домен принимается без учёта регистра"""
        if isinstance(v, str) and not isinstance(v, Domain):
            return v.strip().lower()
        return v

    @field_validator("from_unit", "to_unit")
    @classmethod
    def strip_unit(cls, v: str) -> str:
        """Символ единицы без окружающих пробелов"""
        v = v.strip()
        if not v:
            raise ValueError("unit symbol must not be blank")
        return v


# =============================================================================
# RESULT
# =============================================================================


class ConversionResult(BaseModel):
    """
    Результат конверсии.

    - input_value: значение после санитизации (то, что реально конвертировалось)
    - value: результат в целевой единице (округлён конвертером)
    - formatted: строка для отображения
    - sanitized: True, если исходный ввод был заменён на 0
    """

    domain: Domain = Field(..., description="Домен измерения")
    from_unit: str = Field(..., min_length=1)
    to_unit: str = Field(..., min_length=1)
    input_value: float = Field(..., description="Санитизированное входное значение")
    value: float = Field(..., description="Результат в целевой единице")
    formatted: str = Field(..., min_length=1, description="Отформатированный результат")
    sanitized: bool = Field(False, description="Ввод был заменён на 0")

    model_config = {"frozen": True}
