"""
Schema attribute descriptors.

Typed, immutable models for the resolved attribute table that data is
validated against.
"""

from oca_validator.schemas.attribute import (
    MANDATORY,
    ArrayType,
    Attribute,
    EntryCodeSpec,
    FlatEntryCodes,
    GroupedEntryCodes,
    NestedType,
    NullType,
    ReferenceEntryCodes,
    ScalarKind,
    ScalarType,
    TypeSpec,
    parse_type,
)
from oca_validator.schemas.loader import load_attribute_table, parse_attribute_table
from oca_validator.schemas.table import AttributeTable

__all__ = [
    "MANDATORY",
    "ArrayType",
    "Attribute",
    "AttributeTable",
    "EntryCodeSpec",
    "FlatEntryCodes",
    "GroupedEntryCodes",
    "NestedType",
    "NullType",
    "ReferenceEntryCodes",
    "ScalarKind",
    "ScalarType",
    "TypeSpec",
    "load_attribute_table",
    "parse_attribute_table",
    "parse_type",
]
