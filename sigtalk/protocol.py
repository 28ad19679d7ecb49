"""Bit-level wire protocol for sending text with two user signals.

Each byte of a message goes most significant bit first: a one bit is
``SIGUSR1`` and a zero bit is ``SIGUSR2``. A NUL byte ends the message.
The receiver acknowledges every bit with ``SIGUSR2``. The bit that
completes the terminating NUL is acknowledged with ``SIGUSR1`` instead.
"""

from __future__ import annotations

import signal
from typing import Iterator

__all__ = [
    "BIT_ONE",
    "BIT_ZERO",
    "ACK_BIT",
    "ACK_MESSAGE",
    "message_bits",
    "Decoder",
]

BIT_ONE = signal.SIGUSR1
BIT_ZERO = signal.SIGUSR2
ACK_BIT = signal.SIGUSR2
ACK_MESSAGE = signal.SIGUSR1

_TERMINATOR = b"\0"


def message_bits(text: str | bytes) -> Iterator[int]:
    """Yield the bits of *text* followed by a NUL terminator, MSB first.

    A string is encoded as UTF-8. Text that holds a NUL byte is rejected,
    because NUL marks the end of a message.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if _TERMINATOR in data:
        raise ValueError("message must not contain a NUL byte")
    for byte in data + _TERMINATOR:
        for shift in range(7, -1, -1):
            yield (byte >> shift) & 1


class Decoder:
    """Assembles bits into bytes, eight at a time, MSB first."""

    def __init__(self) -> None:
        self.value = 0
        self.count = 0

    def feed(self, bit: int) -> int | None:
        """Add one bit; return the finished byte after every eighth bit.

        A finished byte of 0 is the end of a message.
        """
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self.value = ((self.value << 1) | int(bit)) & 0xFF
        self.count += 1
        if self.count < 8:
            return None
        byte = self.value
        self.reset()
        return byte

    def reset(self) -> None:
        """Forget any partly received byte."""
        self.value = 0
        self.count = 0