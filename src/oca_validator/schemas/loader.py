"""
Attribute table loading.

Reads an already-resolved attribute table document. The document is a
JSON or YAML mapping with a top-level ``attributes`` key:

    attributes:
      name: {type: Text, conformance: M}
      color: {type: Text, entry_codes: [red, green]}
      address:
        type:
          kind: nested
          reference: refs:EBAxx
          attributes:
            city: {type: Text}
"""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from oca_validator.schemas.table import AttributeTable
from oca_validator.utils.logging import get_logger

log = get_logger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def parse_attribute_table(document: Any) -> AttributeTable:
    """
    Build an attribute table from a parsed document.

    Args:
        document: Parsed JSON/YAML content.

    Returns:
        AttributeTable in document order.

    Raises:
        ValueError: If the document is not a valid attribute table.
    """
    if not isinstance(document, dict) or "attributes" not in document:
        msg = "Attribute table document must be a mapping with an 'attributes' key"
        raise ValueError(msg)

    raw = document["attributes"]
    if not isinstance(raw, dict):
        msg = f"'attributes' must be a mapping, got {type(raw).__name__}"
        raise ValueError(msg)

    try:
        return AttributeTable.from_mapping(raw)
    except ValidationError as e:
        msg = f"Invalid attribute descriptor: {e}"
        raise ValueError(msg) from e


def load_attribute_table(path: Path) -> AttributeTable:
    """
    Load an attribute table from a JSON or YAML file.

    Args:
        path: Path to the document.

    Returns:
        AttributeTable in document order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file cannot be parsed or is not a valid table.
    """
    if not path.exists():
        msg = f"Attribute table not found: {path}"
        raise FileNotFoundError(msg)

    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in _YAML_SUFFIXES:
            document = yaml.safe_load(text)
        else:
            document = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Failed to parse attribute table {path}: {e}"
        raise ValueError(msg) from e

    table = parse_attribute_table(document)
    log.debug("Loaded attribute table", path=str(path), attributes=len(table))
    return table
