"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator, Optional, TextIO

__all__ = ["format_printf", "printf"]

_CONVERSION = re.compile(r"%([cspdiuxX%])")
_NULL = "(null)"


def _as_int(value: Any, conversion: str) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{conversion} expects an int, got {type(value).__name__}")
    return value


def _int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_as_int(value, "c") & 0xFF)


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = value
    else:
        address = id(value)
    return f"0x{address & 0xFFFFFFFFFFFFFFFF:x}"


def _convert(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "s":
        return _NULL if value is None else str(value)
    if conversion == "c":
        return _char(value)
    if conversion == "p":
        return _pointer(value)
    number = _as_int(value, conversion)
    if conversion in "di":
        return str(_int32(number))
    unsigned = number & 0xFFFFFFFF
    if conversion == "u":
        return str(unsigned)
    if conversion == "x":
        return f"{unsigned:x}"
    return f"{unsigned:X}"


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the text.

    A ``%`` not followed by a supported conversion is kept literally.
    Integers are taken as 32-bit values; extra arguments are ignored.
    """
    remaining = iter(args)
    return _CONVERSION.sub(lambda match: _convert(match.group(1), remaining), fmt)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the expansion of ``fmt`` to ``file`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)