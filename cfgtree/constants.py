"""Characters and strings that define the configuration file syntax."""

from __future__ import annotations

import math

VERSION = "0"

NEWLINE = "\n"
SPACE = " "
TAB = "\t"
WHITESPACE_CHARS = SPACE + TAB

INDENT = SPACE * 2

COMMENT_SCRIPT = "#"
COMMENT_CPP = "//"
COMMENT_C_START = "/*"
COMMENT_C_END = "*/"

KEY_VALUE_ASSIGN = "="
KEY_VALUE_TERMINATE = ";"
VALID_NAME_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_-"

DIRECTIVE_LEADER = "@"
VERSION_DIRECTIVE_NAME = "version"
INCLUDE_DIRECTIVE_NAME = "include"
MAX_DIRECTIVE_NAME_LENGTH = max(len(VERSION_DIRECTIVE_NAME), len(INCLUDE_DIRECTIVE_NAME))

MAP_OPENING_DELIMITER = "{"
MAP_CLOSING_DELIMITER = "}"

ARRAY_OPENING_DELIMITER = "["
ARRAY_CLOSING_DELIMITER = "]"
ARRAY_ELEMENT_SEPARATOR = ","

STRING_DELIMITER = '"'

ESCAPE_LEADER = "\\"
BASIC_ESCAPE_CHARS = {
    '"': "\x22",
    "\\": "\x5c",
    "/": "\x2f",
    "b": "\x08",
    "f": "\x0c",
    "n": "\x0a",
    "r": "\x0d",
    "t": "\x09",
}
HEX_ESCAPE_CHAR = "x"
ASCII_START = 0x00
ASCII_END = 0x7F

CONTROL_CHARS = "".join(chr(code) for code in range(0x20))
_NAMED_CONTROL_CODES = {"\x08": "b", "\x09": "t", "\x0a": "n", "\x0c": "f", "\x0d": "r"}
CONTROL_CHARS_CODES = {
    ch: _NAMED_CONTROL_CODES.get(ch, f"x{ord(ch):02x}") for ch in CONTROL_CHARS
}

NUM_DIGIT_SEPARATOR = "_"
NUM_POSITIVE_SIGN = "+"
NUM_NEGATIVE_SIGN = "-"

NUM_SYS_PREFIX_LEADER = "0"

FLOAT_DECIMAL_POINT = "."
FLOAT_EXPONENT_SIGN_LOWER = "e"
FLOAT_EXPONENT_SIGN_UPPER = "E"
FLOAT_INFINITY = (math.inf, "inf")
FLOAT_NOT_A_NUMBER = (math.nan, "nan")