"""Byte-buffer helpers working on the first *n* bytes of a buffer.

Writing functions take a mutable buffer (such as ``bytearray``), change it
in place and return it. Every function raises ``ValueError`` when *n*
reaches past the end of a buffer, rather than reading or writing outside it.
"""

from __future__ import annotations

import operator

__all__ = ["zero", "calloc", "memchr", "memcmp", "memcpy", "memmove", "memset"]


def _count(n: int) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    return n


def _require(buf, n: int, start: int = 0, what: str = "buffer") -> None:
    if start < 0 or start + n > len(buf):
        raise ValueError(
            f"{n} bytes at offset {start} exceed the {len(buf)}-byte {what}"
        )


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buf* with the low byte of *c*."""
    n = _count(n)
    _require(buf, n)
    buf[:n] = bytes([operator.index(c) & 0xFF]) * n
    return buf


def zero(buf: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *nmemb* elements of *size* bytes."""
    return bytearray(_count(nmemb) * _count(size))


def memchr(data, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to the low byte of *c*.

    Only the first *n* bytes are searched; ``None`` means not found.
    """
    n = _count(n)
    _require(data, n)
    index = bytes(data[:n]).find(operator.index(c) & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first *n* bytes of *a* and *b*.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    n = _count(n)
    _require(a, n, what="first buffer")
    _require(b, n, what="second buffer")
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* to the start of *dest*."""
    n = _count(n)
    _require(dest, n, what="destination")
    _require(src, n, what="source")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Move *n* bytes inside *buf* from offset *src* to offset *dest*.

    Overlapping regions are handled as if copied through a temporary.
    """
    n = _count(n)
    dest = operator.index(dest)
    src = operator.index(src)
    _require(buf, n, dest, "buffer")
    _require(buf, n, src, "buffer")
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf