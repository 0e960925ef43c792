"""String searching, slicing, joining, splitting and bounded copying."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional

_NUL = "\0"


def _single(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def find_char(s: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single(c) == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def find_last_char(s: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    if _single(c) == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def compare(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns zero when equal, otherwise the difference of the character codes
    at the first mismatch; the end of a string counts as code 0.
    """
    for index in range(max(n, 0)):
        a = ord(s1[index]) if index < len(s1) else 0
        b = ord(s2[index]) if index < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def find_bounded(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0. Returns None when absent.
    """
    if not needle:
        return 0
    index = haystack[: max(length, 0)].find(needle)
    return None if index < 0 else index


def substring(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must be non-negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("join needs two strings")
    return s1 + s2


def trim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(s, str) or not isinstance(charset, str):
        raise TypeError("trim needs two strings")
    return s.strip(charset) if charset else s


def split(s: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    _single(sep)
    return [word for word in s.split(sep) if word]


def map_indexed(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def iter_indexed(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each element, in place.

    A non-None return value replaces the element.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, so truncation shows as a length of at least ``size``.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the result would have had
    without truncation: ``min(len(dest), size) + len(src)``.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    length = min(len(dest), size)
    total = length + len(src)
    if length >= size:
        return dest, total
    room = size - 1 - length
    return dest + src[:room], total