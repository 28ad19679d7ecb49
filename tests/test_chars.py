import string

import pytest

from sigtalk.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII_CODES = range(128)


def test_is_alpha_matches_ascii_letters():
    for code in range(256):
        assert is_alpha(code) == (chr(code) in string.ascii_letters)


def test_is_digit_matches_ascii_digits():
    for code in range(256):
        assert is_digit(code) == (chr(code) in string.digits)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_bounds():
    assert all(is_ascii(code) for code in ASCII_CODES)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_matches_printable_without_controls():
    printable = set(string.printable) - set("\t\n\r\x0b\x0c")
    for code in range(256):
        assert is_print(code) == (chr(code) in printable)


def test_accepts_characters_as_well_as_codes():
    for ch in string.ascii_letters + string.digits + "!~ \x7f":
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


def test_to_upper_and_to_lower_match_str_methods_on_letters():
    for ch in string.ascii_lowercase:
        assert to_upper(ch) == ch.upper()
    for ch in string.ascii_uppercase:
        assert to_lower(ch) == ch.lower()


def test_case_conversion_keeps_code_type():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")


def test_case_conversion_leaves_non_letters_alone():
    for code in range(256):
        if chr(code) not in string.ascii_letters:
            assert to_upper(code) == code
            assert to_lower(code) == code


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert to_upper("é") == "é"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)