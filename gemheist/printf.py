"""A small printf: %d %i %u %x %X %p %s %c and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from gemheist.chars import put_str

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF
_CONVERSIONS = frozenset("diuxXpsc%")


def _int32(value: Any) -> int:
    number = int(value) & _UINT32
    return number - (1 << 32) if number >= 1 << 31 else number


def _uint32(value: Any) -> int:
    return int(value) & _UINT32


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = value if isinstance(value, int) and not isinstance(value, bool) else id(value)
    address &= _UINT64
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _text(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a string, got {type(value).__name__}")
    return value


def _render(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion in "di":
        return str(_int32(value))
    if conversion == "u":
        return str(_uint32(value))
    if conversion == "x":
        return format(_uint32(value), "x")
    if conversion == "X":
        return format(_uint32(value), "X")
    if conversion == "p":
        return _pointer(value)
    if conversion == "s":
        return _text(value)
    return _char(value)


def format_string(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    An unknown conversion is written out unchanged, percent sign included.
    Arguments left over are ignored; too few raise TypeError.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format ends with an incomplete conversion")
        if conversion in _CONVERSIONS:
            pieces.append(_render(conversion, remaining))
        else:
            pieces.append("%" + conversion)
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    return put_str(format_string(fmt, *args), sys.stdout if stream is None else stream)