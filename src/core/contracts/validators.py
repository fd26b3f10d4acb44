"""
Contract Validators — JSON Schema контракты фасада

UI-слой обменивается с фасадом словарями запроса и результата.
Перед конверсией запрос сверяется с conversion_request.json,
готовый результат — с conversion_result.json (Draft 2020-12).
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

# contracts/schema/ в корне репозитория
DEFAULT_SCHEMA_DIR: Path = Path(__file__).resolve().parents[3] / "contracts" / "schema"

REQUEST_SCHEMA = "conversion_request"
RESULT_SCHEMA = "conversion_result"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Чтение и мета-проверка схем из каталога, с кэшем по имени."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or DEFAULT_SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени файла без .json.

        Raises:
            FileNotFoundError: Файла нет в каталоге
            ValueError: Файл не проходит мета-схему Draft 2020-12
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.exists():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор словаря против одной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """Raises: jsonschema.ValidationError на первом нарушении."""
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self.validator.iter_errors(data)


class ConversionRequestValidator(ContractValidator):
    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(REQUEST_SCHEMA, loader)


class ConversionResultValidator(ContractValidator):
    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(RESULT_SCHEMA, loader)


@lru_cache(maxsize=None)
def _shared_validator(schema_name: str) -> ContractValidator:
    # Draft202012Validator не хранит состояния между вызовами validate
    return ContractValidator(schema_name)


def validate_conversion_request(data: Dict[str, Any]) -> None:
    """Проверка payload запроса (jsonschema.ValidationError при нарушении)."""
    _shared_validator(REQUEST_SCHEMA).validate(data)


def validate_conversion_result(data: Dict[str, Any]) -> None:
    """Проверка payload результата (jsonschema.ValidationError при нарушении)."""
    _shared_validator(RESULT_SCHEMA).validate(data)
