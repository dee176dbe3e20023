"""Writing characters, strings and numbers to a stream or file descriptor."""

from __future__ import annotations

import os
from typing import Optional, TextIO, Union

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]

Stream = Union[int, TextIO]


def _write(stream: Stream, text: str) -> None:
    if isinstance(stream, int):
        os.write(stream, text.encode("utf-8"))
    else:
        stream.write(text)


def putchar_fd(char: str, stream: Stream) -> None:
    """Write a single character."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _write(stream, char)


def putstr_fd(text: Optional[str], stream: Stream) -> None:
    """Write ``text``; ``None`` writes nothing."""
    if text is None:
        return
    _write(stream, text)


def putendl_fd(text: Optional[str], stream: Stream) -> None:
    """Write ``text`` followed by a newline; ``None`` writes nothing."""
    if text is None:
        return
    _write(stream, text + "\n")


def putnbr_fd(number: int, stream: Stream) -> None:
    """Write the decimal representation of ``number``."""
    _write(stream, str(int(number)))