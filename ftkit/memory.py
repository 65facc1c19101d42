"""Byte-buffer operations: fill, copy, move, search and compare."""

from __future__ import annotations

import operator

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *buffers) -> int:
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buffer)}")
    return n


def memset(buffer, value: int, n: int):
    """Fill the first n bytes of buffer with the low byte of value; return buffer."""
    n = _check_count(n, buffer)
    buffer[:n] = bytes([operator.index(value) & 0xFF]) * n
    return buffer


def bzero(buffer, n: int) -> None:
    """Zero the first n bytes of buffer."""
    memset(buffer, 0, n)


def memcpy(dest, src, n: int):
    """Copy the first n bytes of src into dest; return dest."""
    n = _check_count(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer, dest_offset: int, src_offset: int, n: int):
    """Copy n bytes within buffer from src_offset to dest_offset, overlap allowed."""
    n = _check_count(n)
    for offset in (dest_offset, src_offset):
        if offset < 0 or offset + n > len(buffer):
            raise ValueError(
                f"range at {offset} of {n} bytes exceeds buffer length {len(buffer)}"
            )
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data, value: int, n: int) -> int | None:
    """Index of the first byte equal to the low byte of value among the first n, or None."""
    n = _check_count(n, data)
    index = bytes(data[:n]).find(operator.index(value) & 0xFF)
    return index if index >= 0 else None


def memcmp(first, second, n: int) -> int:
    """Difference of the first unequal bytes among the first n, or 0 if all match."""
    n = _check_count(n, first, second)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of count elements of size bytes each."""
    count = operator.index(count)
    size = operator.index(size)
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(total)