"""Byte-buffer helpers: search, compare, fill, copy and allocate."""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")


def _check_span(length: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"negative length {n}")
    if n > length:
        raise ValueError(f"{what} holds {length} bytes, {n} requested")


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Index of the first byte equal to c (mod 256) within the first n bytes."""
    _check_span(len(data), n, "data")
    index = bytes(data[:n]).find(bytes([c & 0xFF]))
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Difference of the first differing bytes among the first n, or 0."""
    _check_span(len(a), n, "first buffer")
    _check_span(len(b), n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with c (mod 256) and return it."""
    _check_span(len(buffer), n, "buffer")
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def memcpy(dst: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first n bytes of src to the start of dst and return dst."""
    _check_span(len(dst), n, "destination")
    _check_span(len(src), n, "source")
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buffer from offset src to offset dst; overlap is safe."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_span(len(buffer) - dst, n, "destination range")
    _check_span(len(buffer) - src, n, "source range")
    buffer[dst:dst + n] = bytes(buffer[src:src + n])
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first n bytes of buffer to zero."""
    memset(buffer, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of count * size bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def swap(a: T, b: T) -> tuple[T, T]:
    """Return the two values in exchanged order."""
    return b, a