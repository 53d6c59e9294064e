"""
Report contract — JSON Schema валидация отчёта верификатора

Отчёт (VerificationReport.to_dict()) перед записью на диск сверяется со
схемой schema/verification_report.json (Draft 2020-12). Схема поставляется
как package data и проверяется на корректность при первой загрузке.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# Каталог схем внутри пакета
SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик (и кэш) JSON Schema файлов из каталога схем."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени без расширения ('verification_report').

        Raises:
            FileNotFoundError: файла схемы нет
            ValueError: схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e.message}") from e

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# REPORT VALIDATOR
# =============================================================================


class VerificationReportValidator:
    """Сверка dict-представления отчёта с контрактом verification_report."""

    SCHEMA_NAME = "verification_report"

    def __init__(self, loader: SchemaLoader | None = None):
        schema = (loader or SchemaLoader()).load_schema(self.SCHEMA_NAME)
        self._validator = Draft202012Validator(schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: первое (наиболее релевантное) нарушение
        """
        self._validator.validate(data)

    def violations(self, data: Dict[str, Any]) -> list[str]:
        """Все нарушения в виде "path: message", упорядоченные по пути.

        Корень отчёта обозначается как "$".
        """
        found = []
        for error in self._validator.iter_errors(data):
            path = "/".join(str(p) for p in error.absolute_path) or "$"
            found.append(f"{path}: {error.message}")
        return sorted(found)


@lru_cache(maxsize=1)
def report_validator() -> VerificationReportValidator:
    """Общий экземпляр валидатора (схема читается один раз)."""
    return VerificationReportValidator()


def validate_verification_report(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: отчёт не соответствует контракту
    """
    report_validator().validate(data)
