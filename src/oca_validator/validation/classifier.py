"""Shape classification of JSON values."""

import json
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Shape of a JSON value looked up in a data record."""

    ABSENT = "absent"
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    @property
    def is_container(self) -> bool:
        """Arrays and objects."""
        return self in (ValueKind.ARRAY, ValueKind.OBJECT)


class _Absent:
    """Marker for a key missing from a record."""

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = _Absent()


def classify_value(value: Any) -> ValueKind:
    """
    Classify a parsed JSON value.

    ``bool`` is checked before numbers since it subclasses ``int``.

    Args:
        value: Parsed JSON value, or ABSENT.

    Returns:
        The value's kind.

    Raises:
        TypeError: If the value is not a JSON type.
    """
    if value is ABSENT:
        return ValueKind.ABSENT
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    msg = f"Not a JSON value: {type(value).__name__}"
    raise TypeError(msg)


def render_value(value: Any) -> str:
    """Render a value as compact JSON for error messages."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
