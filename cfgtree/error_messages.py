"""Categorised error messages reported while reading configuration text.

Codes are ``ERR_MSG_<kind>_<area>_<n>``: kind 1 is syntax, 2 semantic; area 1
comment, 2 key-value, 3 string, 4 integer, 5 float, 6 array, 7 map,
8 directive, 9 miscellaneous.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorMessage:
    """An error category path together with its human-readable message."""

    category: str
    message: str


_COMMENT = "/error/syntax/comment"
_KEY_VALUE = "/error/syntax/key-value"
_STRING = "/error/syntax/string"
_INTEGER = "/error/syntax/integer"
_FLOAT = "/error/syntax/float"
_ARRAY = "/error/syntax/array"
_MAP = "/error/syntax/map"
_DIRECTIVE = "/error/syntax/directive"
_MISC = "/error/syntax/misc"

ERR_MSG_1_1_1 = ErrorMessage(_COMMENT, "C-style comment is unterminated")

ERR_MSG_1_2_1 = ErrorMessage(_KEY_VALUE, "key-value key contains invalid character(s)")
ERR_MSG_1_2_2 = ErrorMessage(_KEY_VALUE, "key-value key is split by comment(s)")
ERR_MSG_1_2_3 = ErrorMessage(_KEY_VALUE, "key-value key is split by newline(s)")
ERR_MSG_1_2_4 = ErrorMessage(_KEY_VALUE, "key is missing")
ERR_MSG_1_2_5 = ErrorMessage(_KEY_VALUE, "value is missing")
ERR_MSG_1_2_6 = ErrorMessage(_KEY_VALUE, "value is unterminated")
ERR_MSG_1_2_7 = ErrorMessage(_KEY_VALUE, "key-value is missing")

ERR_MSG_1_3_1 = ErrorMessage(_STRING, "non-whitespace character appears outside of string")
ERR_MSG_1_3_2 = ErrorMessage(_STRING, "string is split by newline(s)")
ERR_MSG_1_3_3 = ErrorMessage(_STRING, "string is unterminated")

ERR_MSG_1_4_1 = ErrorMessage(_INTEGER, "integer contains invalid character(s)")
ERR_MSG_1_4_2 = ErrorMessage(
    _INTEGER,
    "integer digit separator is not surrounded by at least one digit on either side",
)
ERR_MSG_1_4_3 = ErrorMessage(_INTEGER, "integer is split by comment(s)")
ERR_MSG_1_4_4 = ErrorMessage(_INTEGER, "integer is split by newline(s)")
ERR_MSG_1_4_5 = ErrorMessage(_INTEGER, "integer value is too large")
ERR_MSG_1_4_6 = ErrorMessage(_INTEGER, "negative sign does not appear at start of integer")
ERR_MSG_1_4_7 = ErrorMessage(
    _INTEGER, "numeral system prefix does not appear before integer digits"
)
ERR_MSG_1_4_8 = ErrorMessage(_INTEGER, "positive sign does not appear at start of integer")
ERR_MSG_1_4_9 = ErrorMessage(_INTEGER, "extraneous character(s) appear(s) after integer")

ERR_MSG_1_5_1 = ErrorMessage(_FLOAT, "float contains invalid character(s)")
ERR_MSG_1_5_2 = ErrorMessage(_FLOAT, "float contains more than one decimal point")
ERR_MSG_1_5_3 = ErrorMessage(_FLOAT, "float contains more than one exponent sign")
ERR_MSG_1_5_4 = ErrorMessage(_FLOAT, "float decimal point appears after exponent sign")
ERR_MSG_1_5_5 = ErrorMessage(
    _FLOAT, "float decimal point is not surrounded by at least one digit on either side"
)
ERR_MSG_1_5_6 = ErrorMessage(
    _FLOAT, "float digit separator is not surrounded by at least one digit on either side"
)
ERR_MSG_1_5_7 = ErrorMessage(
    _FLOAT, "float exponent sign is not surrounded by at least one digit on either side"
)
ERR_MSG_1_5_8 = ErrorMessage(_FLOAT, "float is split by comment(s)")
ERR_MSG_1_5_9 = ErrorMessage(_FLOAT, "float is split by newline(s)")
ERR_MSG_1_5_10 = ErrorMessage(_FLOAT, "float value in too large")
ERR_MSG_1_5_11 = ErrorMessage(
    _FLOAT,
    "negative sign does not appear at start of integer or exponent part of float",
)
ERR_MSG_1_5_12 = ErrorMessage(
    _FLOAT,
    "positive sign does not appear at start of integer or exponent part of float",
)
ERR_MSG_1_5_13 = ErrorMessage(_FLOAT, "extraneous character(s) appear(s) after float")

ERR_MSG_1_6_1 = ErrorMessage(_ARRAY, "array opening delimiter is missing")
ERR_MSG_1_6_2 = ErrorMessage(_ARRAY, "array closing delimiter is missing")
ERR_MSG_1_6_3 = ErrorMessage(_ARRAY, "extraneous character(s) appear(s) after array")

ERR_MSG_1_7_1 = ErrorMessage(_MAP, "map opening delimiter is missing")
ERR_MSG_1_7_2 = ErrorMessage(_MAP, "map closing delimiter is missing")
ERR_MSG_1_7_3 = ErrorMessage(_MAP, "extraneous character(s) appear(s) after map")

ERR_MSG_1_8_1 = ErrorMessage(_DIRECTIVE, "directive is invalid")
ERR_MSG_1_8_2 = ErrorMessage(_DIRECTIVE, "directive is split by newline(s)")
ERR_MSG_1_8_3 = ErrorMessage(_DIRECTIVE, "directive name is missing")
ERR_MSG_1_8_4 = ErrorMessage(_DIRECTIVE, "directive name is split by comment(s)")
ERR_MSG_1_8_5 = ErrorMessage(
    _DIRECTIVE, "escape sequence in include directive file path argument is invalid"
)
ERR_MSG_1_8_6 = ErrorMessage(_DIRECTIVE, "include directive file path argument is empty")
ERR_MSG_1_8_7 = ErrorMessage(_DIRECTIVE, "include directive file path argument is missing")
ERR_MSG_1_8_8 = ErrorMessage(
    _DIRECTIVE, "include directive file path argument is unterminated"
)
ERR_MSG_1_8_9 = ErrorMessage(_DIRECTIVE, "include directive given excess arguments")
ERR_MSG_1_8_10 = ErrorMessage(
    _DIRECTIVE, "parser and configuration file version are incompatible"
)
ERR_MSG_1_8_11 = ErrorMessage(_DIRECTIVE, "version directive given excess arguments")
ERR_MSG_1_8_12 = ErrorMessage(_DIRECTIVE, "version directive version argument is empty")
ERR_MSG_1_8_13 = ErrorMessage(_DIRECTIVE, "version directive version argument is missing")
ERR_MSG_1_8_14 = ErrorMessage(
    _DIRECTIVE, "version directive version argument is unterminated"
)
ERR_MSG_1_8_15 = ErrorMessage(_DIRECTIVE, "directive does not appear directly in root map")
ERR_MSG_1_8_16 = ErrorMessage(_DIRECTIVE, "directive does not appear on a line by itself")

ERR_MSG_1_9_1 = ErrorMessage(_MISC, "escape sequence is incomplete")
ERR_MSG_1_9_2 = ErrorMessage(_MISC, "escape sequence is invalid")
ERR_MSG_1_9_3 = ErrorMessage(_MISC, "escape sequence leader is missing")
ERR_MSG_1_9_4 = ErrorMessage(_MISC, "hexadecimal escape sequence contains invalid digit")
ERR_MSG_1_9_5 = ErrorMessage(_MISC, "duplicate name in scope")