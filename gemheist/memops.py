"""Operations on mutable byte buffers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional, Union

ByteSource = Union[bytes, bytearray, memoryview]


def _check_count(n: int, *buffers: ByteSource) -> None:
    if n < 0:
        raise ValueError("byte count must be non-negative")
    for buf in buffers:
        if n > len(buf):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buf)}")


def fill(buf: bytearray, value: int, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to ``value`` (taken modulo 256)."""
    _check_count(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def zero(buf: bytearray, n: int) -> bytearray:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    return fill(buf, 0, n)


def copy(dest: bytearray, src: ByteSource, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def move(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled as if the source were first copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must be non-negative")
    if n < 0:
        raise ValueError("byte count must be non-negative")
    if max(dest, src) + n > len(buf):
        raise IndexError("move runs past the end of the buffer")
    if n and dest != src:
        buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf


def find_byte(buf: ByteSource, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (modulo 256) among the first ``n``."""
    _check_count(n, buf)
    index = bytes(buf[:n]).find(value & 0xFF)
    return None if index < 0 else index


def compare_bytes(a: ByteSource, b: ByteSource, n: int) -> int:
    """Compare the first ``n`` bytes.

    Returns zero when equal, otherwise the difference of the first
    mismatching bytes as unsigned values.
    """
    _check_count(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def zeroed(count: int, size: int) -> bytearray:
    """A new zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must be non-negative")
    return bytearray(count * size)