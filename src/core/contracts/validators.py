"""
JSON Schema Contract Validators

Модуль для валидации JSON-представлений результатов ядра согласно
формальным JSON Schema контрактам (Draft 2020-12).

Схемы поставляются вместе с пакетом (src/core/contracts/schema/):
- scan_report.json: отчёт FeedScanner (build_scan_report)
- validation_outcome.json: решение PriceGate (Accepted / Rejected)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

# Каталог схем рядом с модулем (package data)
SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Кэширующий загрузчик схем из одного каталога."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка и проверка схемы по имени без расширения.

        Raises:
            FileNotFoundError: файла схемы нет
            ValueError: файл не является валидной Draft 2020-12 схемой
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_default_loader: SchemaLoader | None = None


def default_loader() -> SchemaLoader:
    """Общий загрузчик пакетных схем, создаётся при первом обращении."""
    global _default_loader
    if _default_loader is None:
        _default_loader = SchemaLoader()
    return _default_loader


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной именованной схемы."""

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)


class ScanReportValidator(ContractValidator):
    """scan_report.json"""

    def __init__(self):
        super().__init__("scan_report")


class ValidationOutcomeValidator(ContractValidator):
    """validation_outcome.json"""

    def __init__(self):
        super().__init__("validation_outcome")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_scan_report(data: Dict[str, Any]) -> None:
    """Валидация отчёта сканирования (ValidationError при несоответствии)."""
    ScanReportValidator().validate(data)


def validate_validation_outcome(data: Dict[str, Any]) -> None:
    """Валидация сериализованного Accepted / Rejected (ValidationError при несоответствии)."""
    ValidationOutcomeValidator().validate(data)
