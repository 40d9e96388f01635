"""Abstract base for every node in a configuration tree."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TextIO, TypeVar

from .node_types import NodeType

_N = TypeVar("_N", bound="Node")


class Node(ABC):
    """A value in a configuration tree that can be cloned and serialized."""

    @property
    @abstractmethod
    def node_type(self) -> NodeType:
        """The kind of value this node holds."""

    def create_new(self: _N) -> _N:
        """Return a new, default-valued node of the same type."""
        return type(self)()

    def clone(self: _N) -> _N:
        """Return an independent deep copy of this node."""
        return copy.deepcopy(self)

    @abstractmethod
    def serialize(self, indent_level: int = 0) -> str:
        """Return the configuration-file text for this node."""

    def write(self, out: TextIO, indent_level: int = 0) -> TextIO:
        """Write the serialized node to ``out`` and return ``out``."""
        out.write(self.serialize(indent_level))
        return out

    def __str__(self) -> str:
        return self.serialize()