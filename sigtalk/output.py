"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import operator
import os

from sigtalk.numbers import itoa

__all__ = ["put_char", "put_str", "put_endl", "put_nbr"]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(c: int | str, fd: int = 1) -> None:
    """Write one character (a one-character string or a byte value) to *fd*."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([operator.index(c) & 0xFF])
    _write_all(fd, data)


def put_str(s: str, fd: int = 1) -> None:
    """Write *s* to *fd*."""
    _write_all(fd, s.encode("utf-8"))


def put_endl(s: str, fd: int = 1) -> None:
    """Write *s* followed by a newline to *fd*."""
    _write_all(fd, (s + "\n").encode("utf-8"))


def put_nbr(n: int, fd: int = 1) -> None:
    """Write the decimal text of the 32-bit signed integer *n* to *fd*."""
    _write_all(fd, itoa(n).encode("ascii"))