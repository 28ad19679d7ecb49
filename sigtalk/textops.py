"""String helpers in the style of the classic C string routines.

Positions are returned as indices, or ``None`` when nothing is found. The
bounded-copy helpers return the resulting text together with the length
the caller would have needed.
"""

from __future__ import annotations

import operator
from itertools import zip_longest
from typing import Callable, MutableSequence, NamedTuple

__all__ = [
    "Copied",
    "strlen",
    "strchr",
    "strrchr",
    "strdup",
    "strjoin",
    "strlcpy",
    "strlcat",
    "strncmp",
    "strnstr",
    "strtrim",
    "substr",
    "split",
    "strmapi",
    "striteri",
]

_NUL = "\0"


class Copied(NamedTuple):
    """Result of a bounded copy: the text produced and the full length wanted."""

    text: str
    length: int


def _char(c: int | str) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c))


def _size(n: int, what: str = "size") -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")
    return n


def strlen(s: str) -> int:
    """Return the number of characters in *s*."""
    return len(s)


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first *c* in *s*.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL and _NUL not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last *c* in *s*.

    Searching for the NUL character finds the end of the string.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of *s*."""
    return str(s)


def strjoin(a: str, b: str) -> str:
    """Return *a* followed by *b*."""
    return a + b


def strlcpy(src: str, size: int) -> Copied:
    """Copy *src* into a buffer of *size* characters, terminator included.

    At most ``size - 1`` characters are kept; the length is that of *src*.
    """
    size = _size(size)
    return Copied(src[: max(size - 1, 0)], len(src))


def strlcat(dst: str, src: str, size: int) -> Copied:
    """Append *src* to *dst* inside a buffer of *size* characters.

    If *dst* already fills the buffer it is left unchanged and the length
    is ``size + len(src)``; otherwise it is ``len(dst) + len(src)``.
    """
    size = _size(size)
    if size <= len(dst):
        return Copied(dst, size + len(src))
    room = size - len(dst) - 1
    return Copied(dst + src[:room], len(dst) + len(src))


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most *n* characters of *a* and *b*.

    Returns the code difference of the first mismatch, or 0.
    """
    n = _size(n, "count")
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strnstr(big: str, little: str, n: int) -> int | None:
    """Return where *little* first occurs wholly within the first *n* characters of *big*.

    An empty *little* is found at index 0.
    """
    n = _size(n, "count")
    if not little:
        return 0
    index = big[:n].find(little)
    return None if index < 0 else index


def strtrim(s: str, chars: str) -> str:
    """Remove every leading and trailing character that appears in *chars*."""
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """Return up to *length* characters of *s* starting at *start*.

    A start past the end gives an empty string.
    """
    start = _size(start, "start")
    length = _size(length, "length")
    if start > len(s):
        return ""
    return s[start : start + length]


def split(s: str, sep: int | str) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    return [word for word in s.split(_char(sep)) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return the string made of ``f(index, char)`` for each character of *s*."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, MutableSequence], None]) -> None:
    """Call ``f(index, s)`` for each position of the mutable sequence *s*.

    The callback may rewrite ``s[index]``. Iteration stops at a NUL
    character or a zero element.
    """
    for index, item in enumerate(s):
        if item == _NUL or item == 0:
            break
        f(index, s)