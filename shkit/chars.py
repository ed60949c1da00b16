"""Character classification, integer conversion and small output helpers."""

from __future__ import annotations

import sys
from typing import TextIO

_SPACE_CHARS = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or an int unchanged."""
    if isinstance(c, int):
        return c
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return ord(c)


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code point in the range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character (space through tilde)."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """True for space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return 0 <= code <= 127 and chr(code) in _SPACE_CHARS


def to_lower(c: str) -> str:
    """Lower-case an ASCII upper-case letter; leave anything else alone."""
    return chr(_code(c) + 32) if "A" <= c <= "Z" else c


def to_upper(c: str) -> str:
    """Upper-case an ASCII lower-case letter; leave anything else alone."""
    return chr(_code(c) - 32) if "a" <= c <= "z" else c


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Anything that does not start a number yields 0; parsing stops at the
    first character after the digits.
    """
    rest = text.lstrip("".join(_SPACE_CHARS))
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits.append(ch)
    if not digits:
        return 0
    return sign * int("".join(digits))


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(n)


def imin(a: int, b: int) -> int:
    """Return the smaller of two integers."""
    return a if a < b else b


def imax(a: int, b: int) -> int:
    """Return the larger of two integers."""
    return a if a > b else b


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal to a stream (standard output by default)."""
    (stream or sys.stdout).write(itoa(n))


def put_endl(text: str, stream: TextIO | None = None) -> None:
    """Write text followed by a newline to a stream (standard output by default)."""
    (stream or sys.stdout).write(text + "\n")