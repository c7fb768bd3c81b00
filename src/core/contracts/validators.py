"""
JSON Schema Contract Validators

Модуль для валидации JSON-payload'ов, которыми внешние вызывающие стороны
обмениваются с расчётным ядром. Использует библиотеку jsonschema для проверки
соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- geo_coordinate.json
- distance_request.json
- currency_conversion.json
- mail_message.json

Ядро само по себе диапазоны координат не проверяет: это делает контракт
на границе системы.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    По умолчанию ищет схемы в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Optional[Path] = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'geo_coordinate')

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


_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик схем (создаётся при первом обращении)."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or get_schema_loader()).load_schema(schema_name)
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

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class GeoCoordinateValidator(ContractValidator):
    """Валидатор для geo_coordinate контракта."""

    def __init__(self):
        super().__init__("geo_coordinate")


class DistanceRequestValidator(ContractValidator):
    """Валидатор для distance_request контракта."""

    def __init__(self):
        super().__init__("distance_request")


class CurrencyConversionValidator(ContractValidator):
    """Валидатор для currency_conversion контракта."""

    def __init__(self):
        super().__init__("currency_conversion")


class MailMessageValidator(ContractValidator):
    """Валидатор для mail_message контракта."""

    def __init__(self):
        super().__init__("mail_message")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_geo_coordinate(data: Dict[str, Any]) -> None:
    """
    Валидация geo_coordinate данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    GeoCoordinateValidator().validate(data)


def validate_distance_request(data: Dict[str, Any]) -> None:
    """
    Валидация distance_request данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DistanceRequestValidator().validate(data)


def validate_currency_conversion(data: Dict[str, Any]) -> None:
    """
    Валидация currency_conversion данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    CurrencyConversionValidator().validate(data)


def validate_mail_message(data: Dict[str, Any]) -> None:
    """
    Валидация mail_message данных.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    MailMessageValidator().validate(data)
