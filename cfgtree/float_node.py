"""Configuration node holding a floating-point value."""

from __future__ import annotations

from dataclasses import dataclass

from .node import Node
from .node_types import NodeType


@dataclass
class FloatNode(Node):
    """A node whose value is a double-precision float."""

    value: float = 0.0

    def __post_init__(self) -> None:
        self.value = float(self.value)

    @property
    def node_type(self) -> NodeType:
        return NodeType.FLOAT

    def create_new(self) -> FloatNode:
        """Return a new float node holding zero."""
        return FloatNode()

    def clone(self) -> FloatNode:
        """Return a copy of this node."""
        return FloatNode(self.value)

    def serialize(self, indent_level: int = 0) -> str:
        """Return the value in fixed notation with six decimal places."""
        return f"{self.value:f}"

    def __float__(self) -> float:
        return self.value

    def __str__(self) -> str:
        return self.serialize()