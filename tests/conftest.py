"""Pytest configuration and shared fixtures."""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml

from oca_validator.schemas import AttributeTable


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Undo logging configuration done by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def person_table_document() -> dict[str, Any]:
    """Create a raw attribute table document covering every attribute shape."""
    return {
        "attributes": {
            "name": {"type": "Text", "conformance": "M"},
            "age": {"type": "Numeric", "conformance": "M"},
            "active": {"type": "Boolean"},
            "born": {"type": "DateTime", "conformance": "O"},
            "photo": {"type": "Binary"},
            "color": {"type": "Text", "entry_codes": ["red", "green"]},
            "category": {"entry_codes": {"g1": ["a", "b"], "g2": ["c"]}},
            "country": {"type": "Text", "entry_codes": "refs:EBcountries"},
            "tags": {"type": "Array[Text]"},
            "address": {
                "type": {
                    "kind": "nested",
                    "reference": "refs:EBaddress",
                    "attributes": {
                        "city": {"type": "Text", "conformance": "M"},
                        "zip": {"type": "Numeric"},
                    },
                },
            },
        }
    }


@pytest.fixture
def person_table(person_table_document: dict[str, Any]) -> AttributeTable:
    """Create the person attribute table."""
    return AttributeTable.from_mapping(person_table_document["attributes"])


@pytest.fixture
def valid_person_record() -> dict[str, Any]:
    """Create a record that satisfies the person table."""
    return {
        "name": "Jane Doe",
        "age": 42,
        "active": True,
        "born": "1982-04-01T00:00:00Z",
        "photo": "iVBORw0KGgo=",
        "color": "red",
        "category": "c",
        "country": "anything",
        "tags": ["a", "b"],
        "address": {"city": "Geneva", "zip": 1201},
    }


@pytest.fixture
def schema_yaml_file(tmp_path: Path, person_table_document: dict[str, Any]) -> Path:
    """Write the person table as YAML."""
    path = tmp_path / "person.yaml"
    path.write_text(yaml.safe_dump(person_table_document, sort_keys=False), encoding="utf-8")
    return path


@pytest.fixture
def schema_json_file(tmp_path: Path, person_table_document: dict[str, Any]) -> Path:
    """Write the person table as JSON."""
    path = tmp_path / "person.json"
    path.write_text(json.dumps(person_table_document), encoding="utf-8")
    return path
