"""Sending side: transmits a message to a server process as signals."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from typing import Iterator, Sequence

from sigtalk.fmt import printf
from sigtalk.numbers import atoi
from sigtalk.protocol import ACK_MESSAGE, BIT_ONE, BIT_ZERO, message_bits

__all__ = ["send_message", "main"]

_SIGNALS = {BIT_ONE, BIT_ZERO}
_CONFIRM_FLAGS = ("-c", "--confirm")


@contextlib.contextmanager
def _blocked(signals: set[int]) -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


def send_message(pid: int, text: str | bytes, confirm: bool = False) -> None:
    """Send *text* to the server *pid*, waiting for an acknowledgement per bit.

    With *confirm*, a notice is printed when the server acknowledges the
    whole message.
    """
    if pid <= 0:
        raise ValueError(f"invalid server pid {pid}")
    bits = list(message_bits(text))
    with _blocked(_SIGNALS):
        for bit in bits:
            os.kill(pid, BIT_ONE if bit else BIT_ZERO)
            ack = signal.sigwait(_SIGNALS)
            if confirm and ack == ACK_MESSAGE:
                printf("Message received!\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Command line: ``[--confirm] PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    confirm = bool(args) and args[0] in _CONFIRM_FLAGS
    if confirm:
        args = args[1:]
    if len(args) < 2:
        printf("Too few arguments\n")
        return 0
    if len(args) > 2:
        printf("Too many arguments\n")
        return 0
    try:
        send_message(atoi(args[0]), args[1], confirm)
    except (ValueError, OSError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())