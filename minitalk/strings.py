"""String and byte-string helpers with C-library semantics."""

from __future__ import annotations

from typing import Callable, Optional, Union

__all__ = [
    "atoi",
    "itoa",
    "split",
    "strtrim",
    "substr",
    "strnstr",
    "strncmp",
    "memcmp",
    "strlcpy",
    "strlcat",
    "strchr",
    "strrchr",
    "strjoin",
    "strmapi",
]

_SPACES = "\t\r\n \v\f"

BytesLike = Union[bytes, bytearray, memoryview]


def _single_char(value: str, name: str) -> str:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"{name} must be a single character, got {value!r}")
    return value


def _as_bytes(value: Union[str, BytesLike]) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit; no digits yields 0.
    """
    rest = text.lstrip(_SPACES)
    sign = 1
    if rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    elif rest[:1] == "+":
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal representation of an integer."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty pieces."""
    _single_char(sep, "sep")
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip characters in ``charset`` from both ends of ``text``.

    ``None`` text gives ``None``; a ``None`` charset gives an unchanged copy.
    """
    if text is None:
        return None
    if charset is None or charset == "":
        return text
    return text.strip(charset)


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end of the text gives an empty string.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the index of the match or ``None``. An empty needle matches at 0.
    """
    if needle == "":
        return 0
    if haystack == "" or length <= 0:
        return None
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def _signed(byte: int) -> int:
    return byte - 256 if byte >= 128 else byte


def strncmp(first: Union[str, BytesLike], second: Union[str, BytesLike], n: int) -> int:
    """Compare at most ``n`` characters; text ends at a NUL or its length.

    Returns 0 when equal, otherwise a value whose sign orders the first
    differing bytes as unsigned values.
    """
    a = _as_bytes(first)
    b = _as_bytes(second)
    limit = max(len(a), len(b))
    for i in range(min(n, limit)):
        x = _signed(a[i]) if i < len(a) else 0
        y = _signed(b[i]) if i < len(b) else 0
        if x == 0 and y == 0:
            break
        if x < 0 and y < 0:
            if x != y:
                return x - y
            continue
        if x < 0 or y < 0:
            return -(x - y)
        if x != y:
            return x - y
    return 0


def memcmp(first: BytesLike, second: BytesLike, n: int) -> int:
    """Compare the first ``n`` bytes as unsigned values."""
    a = bytes(first)
    b = bytes(second)
    if n < 0:
        raise ValueError("n must not be negative")
    if n > len(a) or n > len(b):
        raise ValueError("n exceeds the length of the data")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters (NUL included).

    Returns the copied text and the full length of ``src``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have.
    When ``size`` does not exceed ``len(dst)``, ``dst`` is left unchanged and
    ``len(src) + size`` is returned.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strchr(text: str, char: str) -> Optional[int]:
    """Index of the first ``char`` in ``text``; a NUL matches the end."""
    _single_char(char, "char")
    if char == "\0":
        index = text.find(char)
        return index if index >= 0 else len(text)
    index = text.find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Index of the last ``char`` in ``text``; a NUL matches the end."""
    _single_char(char, "char")
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one yields the other."""
    if first is None:
        return second
    if second is None:
        return first
    return first + second


def strmapi(text: Optional[str], func: Optional[Callable[[int, str], str]]) -> Optional[str]:
    """Build a new string by applying ``func(index, char)`` to each character."""
    if text is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(text))