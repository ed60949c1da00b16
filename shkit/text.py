"""String helpers: splitting, trimming, bounded comparison and searching."""

from __future__ import annotations

from typing import Callable

from shkit.chars import is_space, to_lower

_NUL = "\0"


def _single_char(c: str, what: str) -> str:
    if len(c) != 1:
        raise ValueError(f"{what} must be a single character, got {c!r}")
    return c


def _char_at(text: str, index: int) -> str:
    """Character at index, or NUL past the end (a C-string terminator)."""
    return text[index] if index < len(text) else _NUL


def split(text: str, sep: str) -> list[str]:
    """Split text on a separator character, dropping empty pieces."""
    _single_char(sep, "separator")
    return [piece for piece in text.split(sep) if piece]


def split_ws(text: str) -> list[str]:
    """Split text on any run of ASCII whitespace."""
    normalised = "".join(" " if is_space(ch) else ch for ch in text)
    return split(normalised, " ")


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start.

    A start past the end of text yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def _compare(a: str, b: str, n: int, fold: Callable[[str], str]) -> int:
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        ca = fold(_char_at(a, i))
        cb = fold(_char_at(b, i))
        if ca != cb:
            return ord(ca) - ord(cb)
        if ca == _NUL:
            break
    return 0


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters; negative, zero or positive like strcmp."""
    return _compare(a, b, n, lambda ch: ch)


def strncasecmp(a: str, b: str, n: int) -> int:
    """Compare at most n characters ignoring ASCII letter case."""
    return _compare(a, b, n, to_lower)


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of needle in the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strchr(text: str, c: str) -> int | None:
    """Index of the first occurrence of c in text, or None.

    Searching for NUL finds the terminator at len(text).
    """
    _single_char(c, "character")
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> int | None:
    """Index of the last occurrence of c in text, or None.

    Searching for NUL finds the terminator at len(text).
    """
    _single_char(c, "character")
    if c == _NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) applied to each character."""
    return "".join(func(i, ch) for i, ch in enumerate(text))