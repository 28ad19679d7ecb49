"""ASCII character classification and case conversion.

Every function accepts either an integer character code or a one-character
string. The classifiers only recognise the 7-bit ASCII ranges.
"""

from __future__ import annotations

import operator

__all__ = [
    "is_alnum",
    "is_alpha",
    "is_ascii",
    "is_digit",
    "is_print",
    "to_lower",
    "to_upper",
]

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_PRINTABLE = range(0x20, 0x7F)
_ASCII = range(0, 0x80)
_CASE_SHIFT = ord("a") - ord("A")


def _code(c: int | str) -> int:
    """Return the integer code of *c*, a code or a single character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return _code(c) in _DIGITS


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """True for codes 0 to 127."""
    return _code(c) in _ASCII


def is_print(c: int | str) -> bool:
    """True for printable ASCII, space through tilde."""
    return _code(c) in _PRINTABLE


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII capital; anything else is returned unchanged.

    The result has the same kind (code or character) as the argument.
    """
    code = _code(c)
    if code in _UPPER:
        code += _CASE_SHIFT
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII small letter; anything else is returned unchanged.

    The result has the same kind (code or character) as the argument.
    """
    code = _code(c)
    if code in _LOWER:
        code -= _CASE_SHIFT
    return chr(code) if isinstance(c, str) else code