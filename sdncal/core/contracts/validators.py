"""
JSON Schema Contract Validators

Модуль для валидации JSON данных, которыми front end обменивается с
библиотекой, согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (sdncal/core/contracts/schema/):
- gregorian_date.json
- french_date.json
- conversion_result.json

Контракты дат не строже проверок gregorian_to_sdn / french_to_sdn: 31 апреля
проходит схему так же, как проходит арифметику. Французский контракт
совпадает с ядром; григорианский дополнительно пропускает дни -4714 года до
25 ноября, которые ядро отклоняет как даты до эпохи.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from sdncal.core.domain.dates import FrenchDate, GregorianDate


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются как package data рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'gregorian_date')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class GregorianDateValidator(ContractValidator):
    """Валидатор для gregorian_date контракта."""

    def __init__(self):
        super().__init__("gregorian_date")


class FrenchDateValidator(ContractValidator):
    """Валидатор для french_date контракта."""

    def __init__(self):
        super().__init__("french_date")


class ConversionResultValidator(ContractValidator):
    """Валидатор для conversion_result контракта."""

    def __init__(self):
        super().__init__("conversion_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_gregorian_date(data: Dict[str, Any]) -> None:
    """
    Валидация gregorian_date данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GregorianDateValidator().validate(data)


def validate_french_date(data: Dict[str, Any]) -> None:
    """
    Валидация french_date данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FrenchDateValidator().validate(data)


def validate_conversion_result(data: Dict[str, Any]) -> None:
    """
    Валидация conversion_result данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ConversionResultValidator().validate(data)


def gregorian_date_from_payload(data: Dict[str, Any]) -> GregorianDate:
    """
    Построение GregorianDate из JSON payload после проверки контракта.

    Args:
        data: dict вида {"year": ..., "month": ..., "day": ...}

    Returns:
        GregorianDate

    Raises:
        ValidationError: Если payload не соответствует gregorian_date.json
    """
    validate_gregorian_date(data)
    return GregorianDate.model_validate(data)


def french_date_from_payload(data: Dict[str, Any]) -> FrenchDate:
    """
    Построение FrenchDate из JSON payload после проверки контракта.

    Raises:
        ValidationError: Если payload не соответствует french_date.json
    """
    validate_french_date(data)
    return FrenchDate.model_validate(data)
