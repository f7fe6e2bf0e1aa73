"""
Scalar value checks.

Each check inspects one value against one constraint and returns a
ValidationError on failure, None on success.
"""

from typing import Any

from oca_validator.schemas.attribute import (
    ArrayType,
    EntryCodeSpec,
    FlatEntryCodes,
    GroupedEntryCodes,
    NestedType,
    NullType,
    ScalarKind,
    ScalarType,
    TypeSpec,
)
from oca_validator.utils.logging import get_logger
from oca_validator.validation.classifier import ValueKind, classify_value
from oca_validator.validation.errors import ErrorKind, ValidationError

log = get_logger(__name__)

# Expected value kind and the error reported when a scalar type is not met
SCALAR_EXPECTATIONS: dict[ScalarKind, tuple[ValueKind, ErrorKind]] = {
    ScalarKind.TEXT: (ValueKind.STRING, ErrorKind.NOT_A_STRING),
    ScalarKind.NUMERIC: (ValueKind.NUMBER, ErrorKind.NOT_A_NUMBER),
    ScalarKind.DATE_TIME: (ValueKind.STRING, ErrorKind.NOT_A_STRING),
    ScalarKind.BOOLEAN: (ValueKind.BOOLEAN, ErrorKind.NOT_A_BOOLEAN),
    ScalarKind.BINARY: (ValueKind.STRING, ErrorKind.NOT_A_STRING),
}


def check_type(
    name: str, type_spec: TypeSpec | None, value: Any
) -> ValidationError | None:
    """
    Check a value against a declared attribute type.

    Nested and Null types, and a missing type, impose no constraint.

    Args:
        name: Attribute name used in the error.
        type_spec: Declared type.
        value: Present JSON value.

    Returns:
        ValidationError if the value has the wrong kind, else None.
    """
    if type_spec is None:
        return None

    kind = classify_value(value)

    if isinstance(type_spec, ScalarType):
        expected, error = SCALAR_EXPECTATIONS[type_spec.scalar]
        if kind != expected:
            return ValidationError(name, error, value)
        return None

    if isinstance(type_spec, ArrayType):
        if kind != ValueKind.ARRAY:
            return ValidationError(name, ErrorKind.NOT_AN_ARRAY, value)
        return None

    if isinstance(type_spec, (NestedType, NullType)):
        return None

    msg = f"Unsupported attribute type: {type_spec!r}"
    raise TypeError(msg)


def check_entry_codes(
    name: str, entry_codes: EntryCodeSpec | None, value: Any
) -> ValidationError | None:
    """
    Check a value against an entry-code constraint.

    Grouped codes accept a value found in any group. References to
    external code lists are not resolved and always pass. Only strings
    can be compared to codes; any other value yields a
    NOT_COMPARABLE_TO_ENTRY_CODES error instead of aborting.

    Args:
        name: Attribute name used in the error.
        entry_codes: Declared constraint.
        value: Present JSON value.

    Returns:
        ValidationError if the value is not permitted, else None.
    """
    if not isinstance(entry_codes, (FlatEntryCodes, GroupedEntryCodes)):
        return None

    if classify_value(value) != ValueKind.STRING:
        log.warning(
            "Value cannot be compared to entry codes",
            attribute=name,
            value_kind=classify_value(value).value,
        )
        return ValidationError(name, ErrorKind.NOT_COMPARABLE_TO_ENTRY_CODES, value)

    if not entry_codes.contains(value):
        return ValidationError(name, ErrorKind.NOT_IN_ENTRY_CODES, value)
    return None
