"""Character classification, integer/text conversion and simple stream output."""

from __future__ import annotations

import sys
from typing import TextIO, Union

CharLike = Union[str, int]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = "0123456789"


def _code(c: CharLike) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return c


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 0x7F


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space to tilde."""
    return 32 <= _code(c) <= 126


def is_only(s: str, charset: str) -> bool:
    """True when every character of ``s`` occurs in ``charset``."""
    allowed = set(charset)
    return all(ch in allowed for ch in s)


def _convert_case(c: CharLike, low: str, high: str, shift: int) -> CharLike:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "a", "z", -32)


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged."""
    return _convert_case(c, "A", "Z", 32)


def atoi(s: str) -> int:
    """Parse a leading decimal integer, after optional whitespace and one sign.

    Parsing stops at the first non-digit; a string with no digits gives 0.
    """
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(s) and s[pos] in "+-":
        negative = s[pos] == "-"
        pos += 1
    value = 0
    while pos < len(s) and s[pos] in _DIGITS:
        value = value * 10 + _DIGITS.index(s[pos])
        pos += 1
    return -value if negative else value


def itoa(n: int) -> str:
    """Decimal text of an integer, with a leading minus when negative."""
    return str(int(n))


def count_digits(n: int) -> int:
    """Number of characters in the decimal text of ``n``, minus sign included."""
    return len(itoa(n))


def count_digits_unsigned(n: int) -> int:
    """Number of decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError("count_digits_unsigned needs a non-negative integer")
    return len(str(n))


def count_hex_digits(n: int) -> int:
    """Number of hexadecimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError("count_hex_digits needs a non-negative integer")
    return len(format(n, "x"))


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: CharLike, stream: TextIO | None = None) -> int:
    """Write one character; returns the number of characters written."""
    text = c if isinstance(c, str) else chr(_code(c) & 0xFF)
    if len(text) != 1:
        raise ValueError(f"expected a single character, got {text!r}")
    _stream(stream).write(text)
    return 1


def put_str(s: str, stream: TextIO | None = None) -> int:
    """Write a string; returns the number of characters written."""
    _stream(stream).write(s)
    return len(s)


def put_endl(s: str, stream: TextIO | None = None) -> int:
    """Write a string followed by a newline; returns characters written."""
    return put_str(s + "\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> int:
    """Write the decimal text of an integer; returns characters written."""
    return put_str(itoa(n), stream)