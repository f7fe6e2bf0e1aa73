"""
OCA data validator.

Validates JSON data records against the resolved attribute table of a
schema bundle: conformance, attribute types and entry codes.
"""

from importlib.metadata import version

from oca_validator.schemas import Attribute, AttributeTable, load_attribute_table
from oca_validator.validation import (
    DataValidator,
    ValidationError,
    ValidationSetupError,
    ValidationStatus,
    validate_data,
    validate_text,
)

__version__ = version("oca-data-validator")

__all__ = [
    "Attribute",
    "AttributeTable",
    "DataValidator",
    "ValidationError",
    "ValidationSetupError",
    "ValidationStatus",
    "__version__",
    "load_attribute_table",
    "validate_data",
    "validate_text",
]
