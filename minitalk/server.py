"""Receive messages sent as SIGUSR1/SIGUSR2 signals and write them out."""

from __future__ import annotations

import os
import signal
import sys
from types import FrameType
from typing import BinaryIO, Optional, Sequence

from minitalk.printf import format_printf
from minitalk.protocol import BitDecoder

__all__ = ["Server", "main"]


class Server:
    """Decodes incoming signals into bytes written to ``output``."""

    def __init__(self, output: Optional[BinaryIO] = None) -> None:
        self.output = sys.stdout.buffer if output is None else output
        self.decoder = BitDecoder()

    def handle_signal(self, signum: int, frame: Optional[FrameType]) -> None:
        """Take one signal as one bit; write the byte when it is complete."""
        byte = self.decoder.feed_signal(signum)
        if byte is not None:
            self.output.write(bytes([byte]))
            self.output.flush()

    def install(self) -> None:
        """Route SIGUSR1 and SIGUSR2 to :meth:`handle_signal`."""
        signal.signal(signal.SIGUSR1, self.handle_signal)
        signal.signal(signal.SIGUSR2, self.handle_signal)

    def serve_forever(self) -> None:
        """Announce the process id, then wait for signals indefinitely."""
        banner = format_printf("Server PID: %u\n", os.getpid())
        self.output.write(banner.encode("ascii"))
        self.output.flush()
        self.install()
        while True:
            signal.pause()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: ``server``; runs until interrupted."""
    try:
        Server().serve_forever()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())