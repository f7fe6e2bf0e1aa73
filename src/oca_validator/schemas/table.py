"""
Resolved attribute table of a schema bundle.

The table is the read-only view the validator consumes: attribute name
to descriptor, in declaration order.
"""

from collections.abc import Iterator, Mapping
from functools import cached_property
from typing import Any

from oca_validator.config.settings import ErrorOrder
from oca_validator.schemas.attribute import Attribute, named_descriptors


class AttributeTable(Mapping[str, Attribute]):
    """
    Immutable mapping of attribute names to descriptors.

    Iteration follows declaration order. ``ordered`` provides the
    name-sorted view, computed once per table.
    """

    def __init__(self, attributes: list[Attribute] | tuple[Attribute, ...] = ()) -> None:
        """
        Initialize table.

        Args:
            attributes: Descriptors in declaration order.

        Raises:
            ValueError: If two descriptors share a name.
        """
        table: dict[str, Attribute] = {}
        for attribute in attributes:
            if attribute.name in table:
                msg = f"Duplicate attribute name: {attribute.name!r}"
                raise ValueError(msg)
            table[attribute.name] = attribute
        self._attributes = table

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "AttributeTable":
        """
        Build a table from a ``name -> descriptor`` mapping.

        Descriptors may be Attribute instances or raw mappings; a raw
        descriptor may omit its name.

        Args:
            raw: Mapping of attribute names to descriptors.

        Returns:
            AttributeTable in the mapping's order.
        """
        named = named_descriptors(dict(raw))
        return cls(
            [
                value if isinstance(value, Attribute) else Attribute.model_validate(value)
                for value in named.values()
            ]
        )

    def __getitem__(self, name: str) -> Attribute:
        return self._attributes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._attributes)

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"AttributeTable({list(self._attributes)!r})"

    def attributes(self) -> Iterator[Attribute]:
        """Iterate over descriptors in declaration order."""
        return iter(self._attributes.values())

    def attribute(self, name: str) -> Attribute | None:
        """Look up a descriptor by name."""
        return self._attributes.get(name)

    @cached_property
    def _sorted(self) -> tuple[Attribute, ...]:
        return tuple(sorted(self._attributes.values(), key=lambda a: a.name))

    def ordered(self, order: ErrorOrder = ErrorOrder.DECLARATION) -> tuple[Attribute, ...]:
        """
        Descriptors in the requested order.

        Args:
            order: Declaration order or sorted by name.

        Returns:
            Tuple of descriptors.
        """
        if order == ErrorOrder.NAME:
            return self._sorted
        return tuple(self._attributes.values())
