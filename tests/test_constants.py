import math

from cfgtree import constants
from cfgtree.numeral_system import DECIMAL, HEXADECIMAL


def test_version_is_decimal():
    assert constants.VERSION == "0"
    assert all(DECIMAL.is_digit(ch) for ch in constants.VERSION)


def test_indent_and_whitespace_hold_no_digits():
    assert constants.INDENT == constants.SPACE * 2
    assert not any(DECIMAL.is_digit(ch) for ch in constants.WHITESPACE_CHARS)


def test_directive_names():
    names = (constants.VERSION_DIRECTIVE_NAME, constants.INCLUDE_DIRECTIVE_NAME)
    assert constants.MAX_DIRECTIVE_NAME_LENGTH == len("include")
    assert constants.MAX_DIRECTIVE_NAME_LENGTH == max(len(name) for name in names)
    assert not any(DECIMAL.is_digit(ch) for name in names for ch in name)


def test_control_chars_cover_range():
    assert len(constants.CONTROL_CHARS) == 0x20
    assert all(ord(ch) < 0x20 for ch in constants.CONTROL_CHARS)
    assert set(constants.CONTROL_CHARS_CODES) == set(constants.CONTROL_CHARS)
    assert not any(HEXADECIMAL.is_digit(ch) for ch in constants.CONTROL_CHARS)


def test_control_char_codes_pinned():
    codes = constants.CONTROL_CHARS_CODES
    assert codes["\n"] == "n"
    assert codes["\x00"] == "x00"
    assert codes["\x1f"] == "x1f"
    assert codes["\x0b"] == "x0b"
    assert all(HEXADECIMAL.is_digit(ch) for ch in codes["\x1f"][1:])


def test_named_control_codes_invert_basic_escapes():
    for code, ch in constants.BASIC_ESCAPE_CHARS.items():
        assert not HEXADECIMAL.is_digit(code) or code in "bf"
        if ch in constants.CONTROL_CHARS_CODES:
            assert constants.CONTROL_CHARS_CODES[ch] == code


def test_hex_control_codes_decode_back():
    for ch, code in constants.CONTROL_CHARS_CODES.items():
        if code.startswith(constants.HEX_ESCAPE_CHAR):
            digits = code[1:]
            assert len(digits) == 2
            assert all(HEXADECIMAL.is_digit(d) for d in digits)
            assert chr(int(digits, 16)) == ch


def test_float_specials():
    assert constants.FLOAT_INFINITY[0] == math.inf
    assert constants.FLOAT_INFINITY[1] == "inf"
    assert math.isnan(constants.FLOAT_NOT_A_NUMBER[0])
    assert constants.FLOAT_NOT_A_NUMBER[1] == "nan"
    words = constants.FLOAT_INFINITY[1] + constants.FLOAT_NOT_A_NUMBER[1]
    assert not any(DECIMAL.is_digit(ch) for ch in words)


def test_valid_name_chars():
    syntax = (
        constants.KEY_VALUE_ASSIGN
        + constants.KEY_VALUE_TERMINATE
        + constants.MAP_OPENING_DELIMITER
        + constants.ARRAY_OPENING_DELIMITER
        + constants.DIRECTIVE_LEADER
        + constants.WHITESPACE_CHARS
    )
    assert not set(syntax) & set(constants.VALID_NAME_CHARS)
    digits = [ch for ch in constants.VALID_NAME_CHARS if DECIMAL.is_digit(ch)]
    assert digits == list("0123456789")


def test_num_sys_prefix_leader_is_zero_digit():
    assert constants.NUM_SYS_PREFIX_LEADER == "0"
    assert DECIMAL.is_digit(constants.NUM_SYS_PREFIX_LEADER)