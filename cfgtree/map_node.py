"""Configuration node holding named child nodes."""

from __future__ import annotations

from typing import Any

from .constants import (
    INDENT,
    KEY_VALUE_ASSIGN,
    KEY_VALUE_TERMINATE,
    MAP_CLOSING_DELIMITER,
    MAP_OPENING_DELIMITER,
    NEWLINE,
)
from .node import Node
from .node_types import NodeType


class MapNode(Node, dict):
    """A mapping of names to nodes; values compare by value.

    The root map of a file is written without surrounding braces.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.is_root_map = False

    @property
    def node_type(self) -> NodeType:
        return NodeType.MAP

    def create_new(self) -> MapNode:
        """Return a new empty, non-root map node."""
        return MapNode()

    def clone(self) -> MapNode:
        """Return a deep copy whose values are clones of these values."""
        result = MapNode((key, value.clone()) for key, value in self.items())
        result.is_root_map = self.is_root_map
        return result

    def serialize(self, indent_level: int = 0) -> str:
        """Return one ``key=value;`` line per entry, braced unless this is the root map."""
        parts = []
        if not self.is_root_map:
            parts.append(MAP_OPENING_DELIMITER + NEWLINE)
        prefix = INDENT * indent_level
        for key, value in self.items():
            parts.append(
                prefix
                + key
                + KEY_VALUE_ASSIGN
                + value.serialize(indent_level + 1)
                + KEY_VALUE_TERMINATE
                + NEWLINE
            )
        if not self.is_root_map:
            parts.append(MAP_CLOSING_DELIMITER)
        return "".join(parts)

    def to_dict(self) -> dict[str, Node]:
        """Return a plain dict holding clones of the values."""
        return {key: value.clone() for key, value in self.items()}

    def __repr__(self) -> str:
        return f"MapNode({dict.__repr__(self)})"

    def __str__(self) -> str:
        return self.serialize()