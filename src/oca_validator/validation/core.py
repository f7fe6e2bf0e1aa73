"""
Core validation logic for data records.

Validates a JSON object against a resolved attribute table and
collects every attribute-level violation.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from oca_validator.config.settings import ErrorOrder, ValidationConfig
from oca_validator.schemas.attribute import (
    ArrayType,
    Attribute,
    EntryCodeSpec,
    NestedType,
    TypeSpec,
)
from oca_validator.schemas.table import AttributeTable
from oca_validator.utils.logging import get_logger
from oca_validator.validation.checks import check_entry_codes, check_type
from oca_validator.validation.classifier import ABSENT, ValueKind, classify_value
from oca_validator.validation.errors import (
    DataParseError,
    ErrorKind,
    NotAnObjectError,
    ValidationError,
)

log = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    msg = f"Invalid JSON constant: {name}"
    raise ValueError(msg)


@dataclass(frozen=True)
class ValidationStatus:
    """
    Outcome of validating one record.

    Valid when no errors were collected.
    """

    errors: tuple[ValidationError, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if no attribute violated a rule."""
        return not self.errors

    @property
    def messages(self) -> list[str]:
        """Error messages in report order."""
        return [error.message for error in self.errors]

    def to_dict(self) -> dict[str, Any]:
        """Serializable representation."""
        return {
            "valid": self.is_valid,
            "errors": [error.to_dict() for error in self.errors],
        }


class DataValidator:
    """
    Validates JSON records against attribute tables.

    Holds configuration only; every call builds its own error list, so
    one instance may be shared freely.
    """

    def __init__(self, config: ValidationConfig | None = None) -> None:
        """
        Initialize validator.

        Args:
            config: Validation options. Defaults reproduce the bypass of
                array and object values.
        """
        self.config = config or ValidationConfig()

    def validate(
        self, attributes: Mapping[str, Attribute], data: Any
    ) -> ValidationStatus:
        """
        Validate a parsed JSON document.

        Args:
            attributes: Attribute table, name to descriptor.
            data: Parsed JSON document.

        Returns:
            ValidationStatus with all collected errors.

        Raises:
            NotAnObjectError: If data is not a JSON object.
        """
        if classify_value(data) != ValueKind.OBJECT:
            msg = "Data is not an object"
            raise NotAnObjectError(msg)

        errors = self._validate_object(attributes, data, prefix="")

        log.debug(
            "Validated record",
            attributes=len(attributes),
            errors=len(errors),
            strict_nested=self.config.strict_nested,
        )
        return ValidationStatus(tuple(errors))

    def validate_text(
        self, attributes: Mapping[str, Attribute], text: str | bytes
    ) -> ValidationStatus:
        """
        Parse JSON text and validate the result.

        Args:
            attributes: Attribute table, name to descriptor.
            text: Raw JSON text.

        Returns:
            ValidationStatus with all collected errors.

        Raises:
            DataParseError: If the text is not valid JSON.
            NotAnObjectError: If the parsed document is not an object.
        """
        try:
            data = json.loads(text, parse_constant=_reject_constant)
        except ValueError as e:
            msg = f"Failed to parse data: {e}"
            raise DataParseError(msg) from e
        return self.validate(attributes, data)

    def _ordered(self, attributes: Mapping[str, Attribute]) -> tuple[Attribute, ...]:
        """Attributes in the configured report order."""
        order = self.config.error_order
        if isinstance(attributes, AttributeTable):
            return attributes.ordered(order)
        if order == ErrorOrder.NAME:
            return tuple(sorted(attributes.values(), key=lambda a: a.name))
        return tuple(attributes.values())

    def _validate_object(
        self,
        attributes: Mapping[str, Attribute],
        record: dict[str, Any],
        prefix: str,
    ) -> list[ValidationError]:
        """Validate every attribute of a table against one object."""
        errors: list[ValidationError] = []
        for attribute in self._ordered(attributes):
            value = record.get(attribute.name, ABSENT)
            errors.extend(
                self._validate_attribute(attribute, value, f"{prefix}{attribute.name}")
            )
        return errors

    def _validate_attribute(
        self, attribute: Attribute, value: Any, label: str
    ) -> list[ValidationError]:
        """Apply conformance, type and entry-code rules to one value."""
        if value is ABSENT:
            if attribute.is_mandatory:
                return [ValidationError(label, ErrorKind.MISSING_REQUIRED_VALUE)]
            return []

        return self._validate_value(
            label, attribute.attribute_type, attribute.entry_codes, value
        )

    def _validate_value(
        self,
        label: str,
        type_spec: TypeSpec | None,
        entry_codes: EntryCodeSpec | None,
        value: Any,
    ) -> list[ValidationError]:
        """Check a present value; containers are skipped unless strict."""
        kind = classify_value(value)
        if kind.is_container:
            if not self.config.strict_nested:
                return []
            return self._validate_container(label, type_spec, entry_codes, value, kind)

        errors = [
            check_type(label, type_spec, value),
            check_entry_codes(label, entry_codes, value),
        ]
        return [error for error in errors if error is not None]

    def _validate_container(
        self,
        label: str,
        type_spec: TypeSpec | None,
        entry_codes: EntryCodeSpec | None,
        value: Any,
        kind: ValueKind,
    ) -> list[ValidationError]:
        """
        Strict checks for arrays and objects.

        Array elements are checked against the element type and the
        attribute's entry codes; objects against the nested table. A
        container in any other position gets the scalar checks.
        """
        if kind == ValueKind.ARRAY:
            if isinstance(type_spec, ArrayType):
                errors: list[ValidationError] = []
                for index, item in enumerate(value):
                    errors.extend(
                        self._validate_value(
                            f"{label}[{index}]", type_spec.item, entry_codes, item
                        )
                    )
                return errors
            if isinstance(type_spec, NestedType):
                return [ValidationError(label, ErrorKind.NOT_AN_OBJECT, value)]
        elif isinstance(type_spec, NestedType):
            if type_spec.attributes is None:
                return []
            return self._validate_object(type_spec.attributes, value, prefix=f"{label}.")

        results = [
            check_type(label, type_spec, value),
            check_entry_codes(label, entry_codes, value),
        ]
        return [error for error in results if error is not None]


def validate_data(
    attributes: Mapping[str, Attribute],
    data: Any,
    config: ValidationConfig | None = None,
) -> ValidationStatus:
    """
    Validate a parsed JSON document against an attribute table.

    Args:
        attributes: Attribute table, name to descriptor.
        data: Parsed JSON document.
        config: Optional validation options.

    Returns:
        ValidationStatus with all collected errors.
    """
    return DataValidator(config).validate(attributes, data)


def validate_text(
    attributes: Mapping[str, Attribute],
    text: str | bytes,
    config: ValidationConfig | None = None,
) -> ValidationStatus:
    """
    Parse JSON text and validate it against an attribute table.

    Args:
        attributes: Attribute table, name to descriptor.
        text: Raw JSON text.
        config: Optional validation options.

    Returns:
        ValidationStatus with all collected errors.
    """
    return DataValidator(config).validate_text(attributes, text)
