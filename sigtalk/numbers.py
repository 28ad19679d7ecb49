"""Conversions between decimal text and 32-bit signed integers."""

from __future__ import annotations

import operator
import re

__all__ = ["atoi", "itoa", "INT_MIN", "INT_MAX"]

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_LEADING_SPACE = " \t\n\r\v\f"
_NUMBER = re.compile(r"([+-]?)([0-9]*)")


def _wrap_int32(value: int) -> int:
    """Reduce *value* to the 32-bit two's-complement range."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    match = _NUMBER.match(text.lstrip(_LEADING_SPACE))
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    return _wrap_int32(value)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)