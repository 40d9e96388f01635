"""Numeral systems used for integer literals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NumeralSystem:
    """A positional numeral system with its literal prefix and digit set."""

    base: int
    prefix: str
    prefix_alt: str
    digits: str

    def is_digit(self, ch: str) -> bool:
        """Return True if ``ch`` is a single valid digit of this system."""
        return len(ch) == 1 and ch in self.digits


DECIMAL = NumeralSystem(10, "", "", "0123456789")
BINARY = NumeralSystem(2, "b", "B", "01")
OCTAL = NumeralSystem(8, "o", "O", "01234567")
HEXADECIMAL = NumeralSystem(16, "x", "X", "0123456789abcdefABCDEF")