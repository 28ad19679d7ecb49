"""A small printf with the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator

__all__ = ["FormatError", "format_message", "printf"]

_UINT32 = 0xFFFFFFFF
_ULONG = 0xFFFFFFFFFFFFFFFF


class FormatError(ValueError):
    """Raised for a bad format string or a missing argument."""


def _int32(value: Any) -> int:
    value = operator.index(value) & _UINT32
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + format(operator.index(value) & _ULONG, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX" or not spec:
        raise FormatError(f"unknown conversion %{spec}")
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_int32(value))
    unsigned = operator.index(value) & _UINT32
    if spec == "u":
        return str(unsigned)
    return format(unsigned, spec)


def format_message(fmt: str, *args: Any) -> str:
    """Return *fmt* with each conversion replaced by the next argument.

    Extra arguments are ignored.
    """
    if fmt is None:
        raise FormatError("format must not be None")
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if not spec:
            raise FormatError("format ends with a lone '%'")
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted message to standard output; return its length."""
    message = format_message(fmt, *args)
    sys.stdout.write(message)
    sys.stdout.flush()
    return len(message)