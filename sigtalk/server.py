"""Receiving side: prints messages that arrive bit by bit as signals."""

from __future__ import annotations

import contextlib
import os
import signal
import sys
from typing import BinaryIO, Iterator, Sequence

from sigtalk.fmt import printf
from sigtalk.protocol import ACK_BIT, ACK_MESSAGE, BIT_ONE, BIT_ZERO, Decoder

__all__ = ["Server", "main"]

_SIGNALS = {BIT_ONE, BIT_ZERO}


@contextlib.contextmanager
def _blocked(signals: set[int]) -> Iterator[None]:
    previous = signal.pthread_sigmask(signal.SIG_BLOCK, signals)
    try:
        yield
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)


class Server:
    """Decodes incoming bits, writes each byte to *out* and acknowledges."""

    def __init__(self, out: BinaryIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout.buffer
        self.decoder = Decoder()

    def _write(self, data: bytes) -> None:
        self.out.write(data)
        self.out.flush()

    def handle(self, signum: int, sender_pid: int) -> int:
        """Take one bit signal from *sender_pid*; return the acknowledgement sent.

        A finished byte is written out; the end of a message is written as
        a newline and acknowledged with the message acknowledgement.
        """
        if signum == BIT_ONE:
            byte = self.decoder.feed(1)
        elif signum == BIT_ZERO:
            byte = self.decoder.feed(0)
        else:
            raise ValueError(f"unexpected signal {signum}")
        ack = ACK_BIT
        if byte == 0:
            self._write(b"\n")
            ack = ACK_MESSAGE
        elif byte is not None:
            self._write(bytes([byte]))
        with contextlib.suppress(ProcessLookupError):
            os.kill(sender_pid, ack)
        return ack

    def serve_forever(self) -> None:
        """Wait for bit signals and handle them until interrupted."""
        with _blocked(_SIGNALS):
            while True:
                info = signal.sigwaitinfo(_SIGNALS)
                self.handle(info.si_signo, info.si_pid)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the process id, then serve messages until interrupted."""
    printf("Server PID: %d\n", os.getpid())
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())