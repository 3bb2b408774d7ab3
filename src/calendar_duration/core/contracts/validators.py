"""
JSON Schema Contract Validators

Валидация JSON представления CalendarDuration библиотекой jsonschema.

Схемы поставляются внутри пакета (package data, каталог schema/) и читаются
через importlib.resources, поэтому работают и из wheel, и из editable установки.
"""

import json
from importlib.resources import files
from importlib.resources.abc import Traversable
from typing import Any, Dict, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

SCHEMA_PACKAGE: Final[str] = "calendar_duration.core.contracts"
SCHEMA_SUBDIR: Final[str] = "schema"

CALENDAR_DURATION_SCHEMA: Final[str] = "calendar_duration"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema из ресурсов пакета.

    Каждая схема читается один раз и проходит meta-валидацию Draft 2020-12.
    """

    def __init__(self, root: Traversable | None = None):
        """
        Args:
            root: Каталог со схемами (default: schema/ внутри пакета контрактов)
        """
        self._root = root if root is not None else files(SCHEMA_PACKAGE) / SCHEMA_SUBDIR
        if not self._root.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._root}")

        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени (без расширения .json).

        Raises:
            FileNotFoundError: Если ресурса нет
            ValueError: Если ресурс не является валидной JSON Schema
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        resource = self._root / f"{schema_name}.json"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {resource}")

        schema = json.loads(resource.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной именованной схемы"""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class CalendarDurationValidator(ContractValidator):
    """
    Валидатор calendar_duration контракта.

    Помимо типов и диапазонов схема проверяет, что order="same" допускается
    только для нулевой длительности.
    """

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(CALENDAR_DURATION_SCHEMA, loader)


def validate_calendar_duration(data: Dict[str, Any]) -> None:
    """
    Валидация payload, полученного из CalendarDuration.to_contract().

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CalendarDurationValidator().validate(data)
