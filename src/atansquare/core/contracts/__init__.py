"""
Contract Validation Module

Модуль для валидации JSON контрактов верификатора.
"""

from .validators import (
    SchemaLoader,
    VerificationReportValidator,
    report_validator,
    validate_verification_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "VerificationReportValidator",
    # Functions
    "report_validator",
    "validate_verification_report",
]
