"""
Contract Validation Module

Валидация JSON-представлений результатов ядра (scan report, validation outcome).
"""

from .validators import (
    ContractValidator,
    ScanReportValidator,
    SCHEMA_DIR,
    SchemaLoader,
    ValidationOutcomeValidator,
    default_loader,
    validate_scan_report,
    validate_validation_outcome,
)

__all__ = [
    # Classes
    "SCHEMA_DIR",
    "SchemaLoader",
    "ContractValidator",
    "ScanReportValidator",
    "ValidationOutcomeValidator",
    # Functions
    "default_loader",
    "validate_scan_report",
    "validate_validation_outcome",
]
