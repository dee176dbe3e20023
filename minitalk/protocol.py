"""Bit-level wire format: each byte travels as eight signals, most significant bit first."""

from __future__ import annotations

import signal
from typing import Iterable, Iterator, Optional, Union

__all__ = ["BITS_PER_BYTE", "encode_bits", "iter_signals", "BitDecoder"]

BITS_PER_BYTE = 8

Message = Union[str, bytes, bytearray]


def encode_bits(message: Message) -> str:
    """Return ``message`` as a string of ``'0'``/``'1'``, eight per byte, MSB first.

    Text is encoded as UTF-8. The message ends at its first NUL, if any.
    """
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    end = data.find(b"\0")
    if end >= 0:
        data = data[:end]
    return "".join(f"{byte:08b}" for byte in data)


def iter_signals(bits: Iterable[str]) -> Iterator[int]:
    """Yield SIGUSR1 for each ``'1'`` and SIGUSR2 for anything else."""
    for bit in bits:
        yield signal.SIGUSR1 if bit == "1" else signal.SIGUSR2


class BitDecoder:
    """Collect bits and hand back each completed byte."""

    def __init__(self) -> None:
        self._value = 0
        self._count = 0

    @staticmethod
    def _bit_value(bit: Union[str, int]) -> int:
        if isinstance(bit, str) and bit in ("0", "1"):
            return int(bit)
        if isinstance(bit, int) and bit in (0, 1):
            return int(bit)
        raise ValueError(f"a bit must be 0 or 1, got {bit!r}")

    def feed(self, bit: Union[str, int]) -> Optional[int]:
        """Add one bit; return the byte value once eight bits are in, else ``None``."""
        self._value = (self._value << 1) | self._bit_value(bit)
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None
        byte = self._value
        self._value = 0
        self._count = 0
        return byte

    def feed_signal(self, signum: int) -> Optional[int]:
        """Add the bit a signal stands for: SIGUSR2 is 0, any other is 1."""
        return self.feed(0 if signum == signal.SIGUSR2 else 1)