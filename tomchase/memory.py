"""Byte-buffer helpers with C library semantics, on bytes and bytearrays."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_span(name: str, data: bytes | bytearray | memoryview, start: int, n: int) -> None:
    if n < 0 or start < 0:
        raise ValueError("offsets and lengths must not be negative")
    if start + n > len(data):
        raise ValueError(f"{name} holds {len(data)} bytes, {start + n} needed")


def memset(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with ``value`` (taken mod 256)."""
    _check_span("buffer", buffer, 0, length)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buffer`` to zero."""
    return memset(buffer, 0, length)


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``."""
    _check_span("src", src, 0, n)
    _check_span("dst", dst, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the bytes were copied
    through a temporary buffer.
    """
    _check_span("buffer", buffer, src, n)
    _check_span("buffer", buffer, dst, n)
    buffer[dst : dst + n] = bytes(buffer[src : src + n])
    return buffer


def memchr(data: bytes | bytearray, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_span("data", data, 0, n)
    pos = bytes(data[:n]).find(bytes([value & 0xFF]))
    return None if pos == -1 else pos


def memcmp(first: bytes | bytearray, second: bytes | bytearray, n: int) -> int:
    """Difference of the first differing byte among the first ``n``, or 0."""
    _check_span("first", first, 0, n)
    _check_span("second", second, 0, n)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count >= SIZE_MAX or size >= SIZE_MAX:
        raise MemoryError("allocation size is too large")
    return bytearray(count * size)