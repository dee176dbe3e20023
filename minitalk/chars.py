"""Character classification, case mapping and basic string/byte helpers."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Union

__all__ = [
    "isalnum",
    "isalpha",
    "isascii",
    "isdigit",
    "isprint",
    "toupper",
    "tolower",
    "memchr",
    "strdup",
    "strlen",
    "striteri",
]

Code = Union[int, str]
Text = Union[str, bytes, bytearray]


def _code_point(code: Code) -> int:
    if isinstance(code, str):
        if len(code) != 1:
            raise ValueError(f"expected a single character, got {code!r}")
        return ord(code)
    if isinstance(code, bool) or not isinstance(code, int):
        raise TypeError(f"expected an int or a single character, got {type(code).__name__}")
    return code


def isalpha(code: Code) -> bool:
    """True for the ASCII letters A-Z and a-z."""
    c = _code_point(code)
    return ord("A") <= c <= ord("Z") or ord("a") <= c <= ord("z")


def isdigit(code: Code) -> bool:
    """True for the ASCII digits 0-9."""
    c = _code_point(code)
    return ord("0") <= c <= ord("9")


def isalnum(code: Code) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(code) or isdigit(code)


def isascii(code: Code) -> bool:
    """True for values 0 through 127."""
    return 0 <= _code_point(code) <= 127


def isprint(code: Code) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code_point(code) <= 126


def _same_kind(original: Code, value: int) -> Code:
    return chr(value) if isinstance(original, str) else value


def toupper(code: Code) -> Code:
    """Map a-z to A-Z; anything else is returned unchanged.

    A character argument gives a character back, an int gives an int.
    """
    c = _code_point(code)
    if ord("a") <= c <= ord("z"):
        c -= 32
    return _same_kind(code, c)


def tolower(code: Code) -> Code:
    """Map A-Z to a-z; anything else is returned unchanged.

    A character argument gives a character back, an int gives an int.
    """
    c = _code_point(code)
    if ord("A") <= c <= ord("Z"):
        c += 32
    return _same_kind(code, c)


def memchr(data: Union[bytes, bytearray, memoryview], byte: int, n: int) -> Optional[int]:
    """Index of the first ``byte`` (taken modulo 256) in the first ``n`` bytes.

    Returns ``None`` when it does not occur there.
    """
    buffer = bytes(data)
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(buffer):
        raise ValueError("n exceeds the length of the data")
    index = buffer.find(bytes([byte & 0xFF]), 0, n)
    return index if index >= 0 else None


def strlen(text: Text) -> int:
    """Length of ``text`` up to, not including, its first NUL."""
    if isinstance(text, str):
        end = text.find("\0")
    else:
        end = text.find(b"\0")
    return len(text) if end < 0 else end


def strdup(text: Text) -> Text:
    """Return a fresh copy of ``text`` up to its first NUL."""
    head = text[:strlen(text)]
    if isinstance(text, bytearray):
        return bytearray(head)
    return head


def striteri(
    chars: Optional[MutableSequence],
    func: Optional[Callable[[int, object], object]],
) -> None:
    """Apply ``func(index, char)`` to each element of ``chars`` in place.

    Iteration stops at the first NUL. When ``func`` returns something other
    than ``None`` the element is replaced by it. Nothing happens when either
    argument is ``None``.
    """
    if chars is None or func is None:
        return
    for index, ch in enumerate(list(chars)):
        if ch in ("\0", 0):
            break
        result = func(index, ch)
        if result is not None:
            chars[index] = result