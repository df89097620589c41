"""
JSON Schema Contract Validators

Проверка сериализованных результатов (MaxProductResult.to_contract())
против JSON Schema контрактов библиотекой jsonschema.

Схемы поставляются внутри пакета (src/core/contracts/schema/*.json)
и читаются через importlib.resources, поэтому работают и из checkout,
и из установленного wheel. Загрузчик по умолчанию создаётся при первом
обращении, а не при импорте модуля.

Схемы:
- max_product_result.json
"""

import json
from functools import lru_cache
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_SUFFIX = ".json"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


def packaged_schema_dir() -> Traversable:
    """Каталог schema/, поставляемый вместе с пакетом src.core.contracts."""
    return resources.files(__package__) / "schema"


class SchemaLoader:
    """
    Загрузчик JSON Schema с кэшем схем и скомпилированных валидаторов.

    Каждая схема при первой загрузке проходит meta-validation
    (Draft 2020-12); невалидная схема в кэш не попадает.
    """

    def __init__(self, schema_dir: Path | Traversable | None = None):
        self.schema_dir = schema_dir if schema_dir is not None else packaged_schema_dir()
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}
        self._validators: Dict[str, Draft202012Validator] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'max_product_result')

        Returns:
            Схема как dict (один и тот же объект при повторных вызовах)

        Raises:
            FileNotFoundError: Если файла схемы нет
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        resource = self.schema_dir / f"{schema_name}{SCHEMA_SUFFIX}"
        if not resource.is_file():
            raise FileNotFoundError(f"Schema not found: {resource}")

        schema = json.loads(resource.read_text(encoding="utf-8"))

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}{SCHEMA_SUFFIX}: {e}") from e

        self._schemas[schema_name] = schema
        return schema

    def validator_for(self, schema_name: str) -> Draft202012Validator:
        """Скомпилированный валидатор схемы (кэшируется вместе со схемой)."""
        validator = self._validators.get(schema_name)
        if validator is None:
            validator = Draft202012Validator(self.load_schema(schema_name))
            self._validators[schema_name] = validator
        return validator


@lru_cache(maxsize=1)
def get_default_loader() -> SchemaLoader:
    """Загрузчик пакетных схем; создаётся при первом вызове."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидация данных против одной именованной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        """
        Args:
            schema_name: Имя схемы
            loader: Загрузчик схем (default: get_default_loader())
        """
        self.schema_name = schema_name
        self.validator = (loader or get_default_loader()).validator_for(schema_name)

    @property
    def schema(self) -> Dict[str, Any]:
        return self.validator.schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """Все нарушения схемы, а не только первое."""
        return self.validator.iter_errors(data)


class MaxProductResultValidator(ContractValidator):
    """Валидатор для max_product_result контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("max_product_result", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_max_product_result(data: Dict[str, Any]) -> None:
    """
    Валидация max_product_result данных.

    Args:
        data: Данные для валидации (обычно MaxProductResult.to_contract())

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MaxProductResultValidator().validate(data)
