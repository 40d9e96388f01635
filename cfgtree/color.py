"""RGB and RGBA colours with hexadecimal text conversion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import TypeVar, Union

CHANNEL_MAX = 0xFF

_HEX_DIGITS = "0123456789abcdefABCDEF"
_WHITESPACE = " \t"
_PREFIX = "#"
_CHANNEL_LEN = 2
_CHANNEL_COUNT = 3


def _check_channel(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"channel {name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= CHANNEL_MAX:
        raise ValueError(f"channel {name} value {value} is outside 0..{CHANNEL_MAX}")


def add_channels(channel_1: int, channel_2: int) -> int:
    """Add two channel values, saturating at the channel maximum."""
    return min(channel_1 + channel_2, CHANNEL_MAX)


@dataclass(frozen=True)
class Rgb:
    """A colour with red, green and blue channels of 0..255."""

    r: int = 0x00
    g: int = 0x00
    b: int = 0x00

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_channel(name, getattr(self, name))

    def __add__(self, other: object) -> Rgb:
        if type(other) is not Rgb:
            return NotImplemented
        return Rgb(
            add_channels(self.r, other.r),
            add_channels(self.g, other.g),
            add_channels(self.b, other.b),
        )


@dataclass(frozen=True)
class Rgba(Rgb):
    """A colour with an alpha channel, fully opaque by default."""

    a: int = 0xFF

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_channel("a", self.a)

    def __add__(self, other: object) -> Rgba:
        if type(other) is not Rgba:
            return NotImplemented
        return Rgba(
            add_channels(self.r, other.r),
            add_channels(self.g, other.g),
            add_channels(self.b, other.b),
            add_channels(self.a, other.a),
        )


Color = Union[Rgb, Rgba]
_C = TypeVar("_C", Rgb, Rgba)


class FromStringFlags(IntFlag):
    """Options for reading a colour from text."""

    NONE = 0b000
    NO_PREFIX = 0b001
    LEADING_WHITESPACE = 0b010
    TRAILING_CHARS = 0b100


class ToStringFlags(IntFlag):
    """Options for writing a colour as text."""

    NONE = 0b000
    NO_PREFIX = 0b001
    CAP_DIGITS = 0b010


def _check_color_type(color_type: type) -> None:
    if color_type not in (Rgb, Rgba):
        raise TypeError(f"colour type must be Rgb or Rgba, not {color_type!r}")


def convert(color: Color, target: type[_C]) -> _C:
    """Return ``color`` as an instance of ``target``; a new alpha is opaque."""
    _check_color_type(target)
    if type(color) is target:
        return color
    if target is Rgb:
        return Rgb(color.r, color.g, color.b)
    return Rgba(color.r, color.g, color.b)


def from_string(
    text: str,
    color_type: type[_C] = Rgb,
    flags: FromStringFlags = FromStringFlags.NONE,
) -> _C | None:
    """Read a hexadecimal colour such as ``#rrggbb``; return None if malformed.

    The ``#`` prefix is optional unless NO_PREFIX forbids it.
    """
    _check_color_type(color_type)
    pos = 0
    end = len(text)

    if flags & FromStringFlags.LEADING_WHITESPACE:
        while pos < end and text[pos] in _WHITESPACE:
            pos += 1
    if not flags & FromStringFlags.NO_PREFIX and pos < end and text[pos] == _PREFIX:
        pos += 1

    channel_count = _CHANNEL_COUNT + (1 if color_type is Rgba else 0)
    channels = []
    for _ in range(channel_count):
        chunk = text[pos : pos + _CHANNEL_LEN]
        if len(chunk) != _CHANNEL_LEN or any(ch not in _HEX_DIGITS for ch in chunk):
            return None
        channels.append(int(chunk, 16))
        pos += _CHANNEL_LEN

    if pos != end and not flags & FromStringFlags.TRAILING_CHARS:
        return None
    return color_type(*channels)


def to_string_length(
    color_type: type, flags: ToStringFlags = ToStringFlags.NONE
) -> int:
    """Return the length of the text ``to_string`` produces for this type and flags."""
    _check_color_type(color_type)
    length = _CHANNEL_LEN * _CHANNEL_COUNT
    if not flags & ToStringFlags.NO_PREFIX:
        length += len(_PREFIX)
    if color_type is Rgba:
        length += _CHANNEL_LEN
    return length


def to_string(color: Color, flags: ToStringFlags = ToStringFlags.NONE) -> str:
    """Write ``color`` as hexadecimal text such as ``#rrggbb`` or ``#rrggbbaa``."""
    _check_color_type(type(color))
    code = "02X" if flags & ToStringFlags.CAP_DIGITS else "02x"
    channels = [color.r, color.g, color.b]
    if isinstance(color, Rgba):
        channels.append(color.a)
    prefix = "" if flags & ToStringFlags.NO_PREFIX else _PREFIX
    return prefix + "".join(format(channel, code) for channel in channels)