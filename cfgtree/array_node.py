"""Configuration node holding an ordered list of nodes."""

from __future__ import annotations

from .constants import (
    ARRAY_CLOSING_DELIMITER,
    ARRAY_ELEMENT_SEPARATOR,
    ARRAY_OPENING_DELIMITER,
)
from .node import Node
from .node_types import NodeType


class ArrayNode(Node, list):
    """A list of nodes; elements compare by value."""

    @property
    def node_type(self) -> NodeType:
        return NodeType.ARRAY

    def create_new(self) -> ArrayNode:
        """Return a new empty array node."""
        return ArrayNode()

    def clone(self) -> ArrayNode:
        """Return a deep copy whose elements are clones of these elements."""
        return ArrayNode(element.clone() for element in self)

    def serialize(self, indent_level: int = 0) -> str:
        """Return the elements serialized between brackets, comma separated."""
        body = ARRAY_ELEMENT_SEPARATOR.join(element.serialize() for element in self)
        return ARRAY_OPENING_DELIMITER + body + ARRAY_CLOSING_DELIMITER

    def to_list(self) -> list[Node]:
        """Return a plain list holding clones of the elements."""
        return [element.clone() for element in self]

    def __repr__(self) -> str:
        return f"ArrayNode({list.__repr__(self)})"

    def __str__(self) -> str:
        return self.serialize()