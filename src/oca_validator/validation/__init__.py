"""Data validation module."""

from oca_validator.validation.checks import check_entry_codes, check_type
from oca_validator.validation.classifier import ABSENT, ValueKind, classify_value
from oca_validator.validation.core import (
    DataValidator,
    ValidationStatus,
    validate_data,
    validate_text,
)
from oca_validator.validation.errors import (
    DataParseError,
    ErrorKind,
    NotAnObjectError,
    ValidationError,
    ValidationSetupError,
)
from oca_validator.validation.reporter import ConsoleReporter

__all__ = [
    "ABSENT",
    "ConsoleReporter",
    "DataParseError",
    "DataValidator",
    "ErrorKind",
    "NotAnObjectError",
    "ValidationError",
    "ValidationSetupError",
    "ValidationStatus",
    "ValueKind",
    "check_entry_codes",
    "check_type",
    "classify_value",
    "validate_data",
    "validate_text",
]
