"""
Attribute descriptors for resolved schema bundles.

An attribute couples a name with an optional type, a conformance marker
and an optional entry-code constraint. Types and entry codes accept
either model instances or the compact bundle notation:

    Text, Numeric, DateTime, Boolean, Binary, Null
    Array[Text], Array[Array[Numeric]]
    refs:<digest>, refn:<name>

    entry codes: [a, b] | {group: [a, b]} | refs:<digest>
"""

from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

MANDATORY = "M"

_ARRAY_PREFIX = "Array["
_REFERENCE_PREFIXES = ("refs:", "refn:")
_ENTRY_CODE_PAYLOADS = {"flat": "codes", "grouped": "groups", "reference": "reference"}


class ScalarKind(str, Enum):
    """Scalar attribute types."""

    TEXT = "Text"
    NUMERIC = "Numeric"
    DATE_TIME = "DateTime"
    BOOLEAN = "Boolean"
    BINARY = "Binary"


class ScalarType(BaseModel):
    """A single scalar value."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["scalar"] = "scalar"
    scalar: ScalarKind

    def __str__(self) -> str:
        return self.scalar.value


class ArrayType(BaseModel):
    """An array whose elements share one type."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["array"] = "array"
    item: "TypeSpec"

    @field_validator("item", mode="before")
    @classmethod
    def parse_item(cls, v: Any) -> Any:
        """Accept the compact notation for the element type."""
        return coerce_type(v)

    def __str__(self) -> str:
        return f"{_ARRAY_PREFIX}{self.item}]"


class NestedType(BaseModel):
    """
    An object-shaped value described by another schema.

    ``attributes`` holds the resolved nested attribute table when the
    loader expanded the reference; it stays None otherwise.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["nested"] = "nested"
    reference: str | None = None
    attributes: dict[str, "Attribute"] | None = None

    @field_validator("attributes", mode="before")
    @classmethod
    def name_attributes(cls, v: Any) -> Any:
        """Fill in descriptor names from the mapping keys."""
        if v is None:
            return None
        return named_descriptors(v)

    def __str__(self) -> str:
        return self.reference or "Nested"


class NullType(BaseModel):
    """No type constraint."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["null"] = "null"

    def __str__(self) -> str:
        return "Null"


TypeSpec = Annotated[
    ScalarType | ArrayType | NestedType | NullType,
    Field(discriminator="kind"),
]


class FlatEntryCodes(BaseModel):
    """A closed list of permitted values."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["flat"] = "flat"
    codes: tuple[str, ...]

    def contains(self, code: str) -> bool:
        """Check membership of a code."""
        return code in self.codes

    def __str__(self) -> str:
        return ", ".join(self.codes)


class GroupedEntryCodes(BaseModel):
    """Permitted values organised in named groups."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["grouped"] = "grouped"
    groups: dict[str, tuple[str, ...]]

    def contains(self, code: str) -> bool:
        """Check membership of a code in any group."""
        return any(code in codes for codes in self.groups.values())

    def __str__(self) -> str:
        return "; ".join(
            f"{group}: {', '.join(codes)}" for group, codes in self.groups.items()
        )


class ReferenceEntryCodes(BaseModel):
    """Reference to an external code list. Not resolved."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["reference"] = "reference"
    reference: str

    def __str__(self) -> str:
        return self.reference


EntryCodeSpec = Annotated[
    FlatEntryCodes | GroupedEntryCodes | ReferenceEntryCodes,
    Field(discriminator="kind"),
]


class Attribute(BaseModel):
    """A named, typed schema attribute."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    attribute_type: TypeSpec | None = Field(
        default=None,
        validation_alias=AliasChoices("attribute_type", "type"),
    )
    conformance: str | None = None
    entry_codes: EntryCodeSpec | None = None

    @field_validator("attribute_type", mode="before")
    @classmethod
    def parse_attribute_type(cls, v: Any) -> Any:
        """Accept the compact type notation."""
        return coerce_type(v)

    @field_validator("entry_codes", mode="before")
    @classmethod
    def parse_entry_codes(cls, v: Any) -> Any:
        """Accept lists, group mappings and references."""
        return coerce_entry_codes(v)

    @property
    def is_mandatory(self) -> bool:
        """Whether a value must be present for this attribute."""
        return self.conformance == MANDATORY


def parse_type(text: str) -> ScalarType | ArrayType | NestedType | NullType:
    """
    Parse the compact type notation.

    Args:
        text: Type notation, e.g. ``Text`` or ``Array[Numeric]``.

    Returns:
        The matching type model.

    Raises:
        ValueError: If the notation is not recognised.
    """
    notation = text.strip()

    if notation.startswith(_ARRAY_PREFIX) and notation.endswith("]"):
        inner = notation[len(_ARRAY_PREFIX) : -1]
        return ArrayType(item=parse_type(inner))

    if notation.startswith(_REFERENCE_PREFIXES):
        return NestedType(reference=notation)

    if notation == "Null":
        return NullType()

    try:
        return ScalarType(scalar=ScalarKind(notation))
    except ValueError:
        msg = f"Unknown attribute type notation: {text!r}"
        raise ValueError(msg) from None


def coerce_type(value: Any) -> Any:
    """Turn type notation strings into models; pass anything else through."""
    if isinstance(value, str):
        return parse_type(value)
    return value


def _is_tagged_entry_codes(value: dict[str, Any]) -> bool:
    # A group may itself be named "kind"; its value is then a code list
    kind = value.get("kind")
    if not isinstance(kind, str):
        return False
    payload = _ENTRY_CODE_PAYLOADS.get(kind)
    return payload is not None and payload in value


def coerce_entry_codes(value: Any) -> Any:
    """Turn raw entry-code declarations into tagged mappings."""
    if value is None or isinstance(value, BaseModel):
        return value
    if isinstance(value, str):
        if value.startswith("refs:"):
            return {"kind": "reference", "reference": value}
        msg = f"Entry codes must be a list, a mapping or a refs: reference, got {value!r}"
        raise ValueError(msg)
    if isinstance(value, (list, tuple, set, frozenset)):
        return {"kind": "flat", "codes": list(value)}
    if isinstance(value, dict) and not _is_tagged_entry_codes(value):
        return {"kind": "grouped", "groups": value}
    return value


def named_descriptors(raw: Any) -> Any:
    """
    Fill descriptor names from mapping keys.

    Raw descriptors may omit ``name``; when present it must match the key.

    Raises:
        ValueError: If a descriptor name disagrees with its key.
    """
    if not isinstance(raw, dict):
        return raw

    named: dict[str, Any] = {}
    for key, descriptor in raw.items():
        if isinstance(descriptor, Attribute):
            if descriptor.name != key:
                msg = f"Attribute key {key!r} does not match descriptor name {descriptor.name!r}"
                raise ValueError(msg)
            named[key] = descriptor
        elif isinstance(descriptor, dict):
            if descriptor.get("name", key) != key:
                msg = (
                    f"Attribute key {key!r} does not match descriptor name "
                    f"{descriptor['name']!r}"
                )
                raise ValueError(msg)
            named[key] = {**descriptor, "name": key}
        elif descriptor is None:
            named[key] = {"name": key}
        else:
            msg = f"Attribute {key!r} must be described by a mapping, got {descriptor!r}"
            raise ValueError(msg)
    return named


ArrayType.model_rebuild()
NestedType.model_rebuild()
Attribute.model_rebuild()
