"""
Validation error types.

Two tiers: per-attribute ValidationError records, accumulated into a
status, and setup exceptions that abort a call before any attribute is
checked.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from oca_validator.validation.classifier import ABSENT, render_value


class ErrorKind(Enum):
    """Rule violated by an attribute value."""

    MISSING_REQUIRED_VALUE = "is mandatory"
    NOT_A_STRING = "is not a string"
    NOT_A_NUMBER = "is not a number"
    NOT_A_BOOLEAN = "is not a boolean"
    NOT_AN_ARRAY = "is not an array"
    NOT_AN_OBJECT = "is not an object"
    NOT_IN_ENTRY_CODES = "is not in entry codes"
    NOT_COMPARABLE_TO_ENTRY_CODES = "is not comparable to entry codes"

    @property
    def rule(self) -> str:
        """Short rule label, e.g. ``not_a_string``."""
        return self.name.lower()


@dataclass(frozen=True)
class ValidationError:
    """
    A single attribute-level violation.

    Attributes:
        attribute: Attribute name; element and field paths use
            ``name[0]`` and ``name.field``.
        kind: Violated rule.
        value: Offending JSON value, ABSENT for missing values.
    """

    attribute: str
    kind: ErrorKind
    value: Any = ABSENT

    @property
    def message(self) -> str:
        """Human-readable description."""
        if self.value is ABSENT:
            return f'Attribute "{self.attribute}" value {self.kind.value}'
        return (
            f'Attribute "{self.attribute}" value ({render_value(self.value)}) '
            f"{self.kind.value}"
        )

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serializable representation."""
        result: dict[str, Any] = {
            "attribute": self.attribute,
            "rule": self.kind.rule,
            "message": self.message,
        }
        if self.value is not ABSENT:
            result["value"] = self.value
        return result


class ValidationSetupError(ValueError):
    """Data cannot be validated at all."""


class DataParseError(ValidationSetupError):
    """Data text is not valid JSON."""


class NotAnObjectError(ValidationSetupError):
    """Data is valid JSON but not an object."""
