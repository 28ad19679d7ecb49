import pytest

from sigtalk.fmt import FormatError, format_message, printf


def test_plain_text_unchanged():
    assert format_message("hello") == "hello"


def test_string_conversion():
    assert format_message("[%s]", "abc") == "[abc]"


def test_null_string():
    assert format_message("%s", None) == "(null)"


def test_char_from_string_and_code():
    assert format_message("%c", "A") == "A"
    assert format_message("%c", ord("Z")) == "Z"


def test_percent_literal():
    assert format_message("100%%") == "100%"


def test_null_pointer():
    assert format_message("%p", 0) == "(nil)"


def test_pointer_round_trip():
    out = format_message("%p", 4096)
    assert out.startswith("0x")
    assert int(out, 16) == 4096


@pytest.mark.parametrize("n", [0, 5, -17, 2147483647])
def test_decimal_round_trip(n):
    assert int(format_message("%d", n)) == n
    assert int(format_message("%i", n)) == n


def test_decimal_int_min_and_wrap():
    assert format_message("%d", -2147483648) == "-2147483648"
    assert format_message("%d", 2**31) == "-2147483648"


def test_unsigned_of_negative_wraps():
    assert int(format_message("%u", -1)) == 2**32 - 1


def test_hex_round_trip_and_case():
    lower = format_message("%x", 48879)
    upper = format_message("%X", 48879)
    assert int(lower, 16) == 48879
    assert upper == lower.upper()
    assert lower == lower.lower()


def test_server_banner():
    assert format_message("Server PID: %d\n", 42) == "Server PID: 42\n"


def test_unknown_conversion_raises():
    with pytest.raises(FormatError):
        format_message("%q", 1)


def test_trailing_percent_raises():
    with pytest.raises(FormatError):
        format_message("abc%")


def test_missing_argument_raises():
    with pytest.raises(FormatError):
        format_message("%d %d", 1)


def test_none_format_raises():
    with pytest.raises(FormatError):
        format_message(None)


def test_printf_writes_and_counts(capsys):
    count = printf("%s=%d\n", "x", 3)
    out = capsys.readouterr().out
    assert out == "x=3\n"
    assert count == len(out)