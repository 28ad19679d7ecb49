import os

import pytest

from sigtalk.output import put_char, put_endl, put_nbr, put_str


def _capture(action):
    read_end, write_end = os.pipe()
    try:
        action(write_end)
    finally:
        os.close(write_end)
    chunks = []
    try:
        while True:
            chunk = os.read(read_end, 4096)
            if not chunk:
                break
            chunks.append(chunk)
    finally:
        os.close(read_end)
    return b"".join(chunks)


def test_put_char_string():
    assert _capture(lambda fd: put_char("a", fd)) == b"a"


def test_put_char_code():
    assert _capture(lambda fd: put_char(ord("Q"), fd)) == b"Q"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", 1)


def test_put_str():
    assert _capture(lambda fd: put_str("hello world", fd)) == b"hello world"


def test_put_str_empty():
    assert _capture(lambda fd: put_str("", fd)) == b""


def test_put_endl_appends_newline():
    out = _capture(lambda fd: put_endl("line", fd))
    assert out == b"line\n"


@pytest.mark.parametrize("n", [0, 7, 42, -5, 2147483647, 123456])
def test_put_nbr_round_trip(n):
    assert int(_capture(lambda fd: put_nbr(n, fd))) == n


def test_put_nbr_int_min():
    assert _capture(lambda fd: put_nbr(-2147483648, fd)) == b"-2147483648"


def test_put_nbr_out_of_range():
    with pytest.raises(OverflowError):
        put_nbr(2**31, 1)