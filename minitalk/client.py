"""Send a message to a server process as a stream of SIGUSR1/SIGUSR2 signals."""

from __future__ import annotations

import os
import sys
import time
from typing import Callable, Optional, Sequence

from minitalk.printf import printf
from minitalk.protocol import Message, encode_bits, iter_signals
from minitalk.strings import atoi

__all__ = ["DEFAULT_DELAY", "send_message", "main"]

DEFAULT_DELAY = 80e-6

KillFunc = Callable[[int, int], None]


def send_message(
    pid: int,
    message: Message,
    delay: float = DEFAULT_DELAY,
    kill: Optional[KillFunc] = None,
) -> int:
    """Signal ``message`` to process ``pid`` bit by bit, pausing ``delay`` seconds
    after each signal. Returns the number of signals sent.
    """
    send = os.kill if kill is None else kill
    sent = 0
    for signum in iter_signals(encode_bits(message)):
        send(pid, signum)
        sent += 1
        if delay > 0:
            time.sleep(delay)
    return sent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command line: ``client PID MESSAGE``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        printf("Error\nWrong number of arguments\n")
        return 0
    pid = atoi(args[0])
    try:
        send_message(pid, args[1])
    except OSError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())