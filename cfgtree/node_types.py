"""Kinds of nodes that make up a configuration tree."""

from __future__ import annotations

from enum import Enum


class NodeType(Enum):
    """The kind of value a node holds."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    ARRAY = "array"
    MAP = "map"
    NULL = "null"


def node_type_to_str(node_type: NodeType) -> str:
    """Return the lower-case name of a node type, or ``"null"`` for anything unknown."""
    if isinstance(node_type, NodeType):
        return node_type.value
    return NodeType.NULL.value