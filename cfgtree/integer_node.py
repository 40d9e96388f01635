"""Configuration node holding a 64-bit signed integer."""

from __future__ import annotations

from .constants import NUM_SYS_PREFIX_LEADER
from .node import Node
from .node_types import NodeType
from .numeral_system import BINARY, DECIMAL, HEXADECIMAL, OCTAL, NumeralSystem

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_FORMAT_CODES = {
    BINARY.base: "b",
    OCTAL.base: "o",
    HEXADECIMAL.base: "x",
}


class IntegerNode(Node):
    """A node whose value is a signed 64-bit integer written in a numeral system."""

    __slots__ = ("_value", "num_sys")

    def __init__(self, value: int = 0, num_sys: NumeralSystem = DECIMAL) -> None:
        self.value = value
        self.num_sys = num_sys

    @property
    def value(self) -> int:
        """The integer value, limited to the signed 64-bit range."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"integer value expected, got {type(value).__name__}")
        if not INT64_MIN <= value <= INT64_MAX:
            raise OverflowError(f"integer value {value} is outside the 64-bit range")
        self._value = value

    @property
    def node_type(self) -> NodeType:
        return NodeType.INTEGER

    def create_new(self) -> IntegerNode:
        """Return a new decimal integer node holding zero."""
        return IntegerNode()

    def clone(self) -> IntegerNode:
        """Return a copy of this node."""
        return IntegerNode(self.value, self.num_sys)

    def serialize(self, indent_level: int = 0) -> str:
        """Return the value written in its numeral system, with prefix if any."""
        if self.num_sys.base == DECIMAL.base:
            return str(self.value)
        code = _FORMAT_CODES.get(self.num_sys.base)
        if code is None:
            return ""
        return NUM_SYS_PREFIX_LEADER + self.num_sys.prefix + format(self.value, code)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntegerNode):
            return NotImplemented
        return self.value == other.value and self.num_sys == other.num_sys

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"IntegerNode({self.value!r}, num_sys={self.num_sys!r})"

    def __str__(self) -> str:
        return self.serialize()