"""Raw byte-buffer helpers: zeroing, filling, searching, comparing and copying.

Buffers are ``bytearray`` objects (or other writable bytes-like objects) that
are changed in place. Byte values are reduced to an unsigned char, as a C
routine would reduce them. Positions are indices rather than pointers. Asking
for more bytes than a buffer holds raises ``IndexError``.
"""

from __future__ import annotations

from typing import Optional, Union

SIZE_MAX = (1 << 64) - 1

BytesLike = Union[bytes, bytearray, memoryview]
WritableBytes = Union[bytearray, memoryview]


def _check_count(count: int, available: int, what: str = "buffer") -> int:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    if count > available:
        raise IndexError(f"count {count} exceeds {what} length {available}")
    return count


def _byte(value: int) -> int:
    return value & 0xFF


def memset(buffer: WritableBytes, value: int, count: int) -> WritableBytes:
    """Set the first ``count`` bytes of ``buffer`` to ``value`` and return it."""
    _check_count(count, len(buffer))
    buffer[:count] = bytes([_byte(value)]) * count
    return buffer


def bzero(buffer: WritableBytes, count: int) -> None:
    """Set the first ``count`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, count)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count`` elements of ``size`` bytes each.

    A request for zero elements or zero-sized elements gives a one-byte
    buffer. A total that does not fit in a 64-bit size raises OverflowError.
    """
    if count < 0 or size < 0:
        raise ValueError(f"count and size must not be negative, got {count} and {size}")
    if count == 0 or size == 0:
        count = size = 1
    if count > SIZE_MAX // size:
        raise OverflowError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(count * size)


def memchr(data: BytesLike, value: int, count: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within ``data[:count]``, or None."""
    _check_count(count, len(data))
    index = bytes(data[:count]).find(_byte(value))
    return index if index >= 0 else None


def memcmp(first: BytesLike, second: BytesLike, count: int) -> int:
    """Compare the first ``count`` bytes; return the difference at the first mismatch, else 0."""
    _check_count(count, len(first), "first buffer")
    _check_count(count, len(second), "second buffer")
    for left, right in zip(bytes(first[:count]), bytes(second[:count])):
        if left != right:
            return left - right
    return 0


def memcpy(dst: WritableBytes, src: BytesLike, count: int) -> WritableBytes:
    """Copy the first ``count`` bytes of ``src`` to the start of ``dst`` and return ``dst``."""
    _check_count(count, len(dst), "destination")
    _check_count(count, len(src), "source")
    dst[:count] = bytes(src[:count])
    return dst


def memmove(buffer: WritableBytes, dest: int, src: int, count: int) -> WritableBytes:
    """Copy ``count`` bytes at offset ``src`` to offset ``dest`` within ``buffer``.

    The regions may overlap; the result is as if the source were copied
    out first. Returns ``buffer``.
    """
    if dest < 0 or src < 0:
        raise ValueError(f"offsets must not be negative, got {dest} and {src}")
    _check_count(count, len(buffer) - dest, "destination region")
    _check_count(count, len(buffer) - src, "source region")
    buffer[dest : dest + count] = bytes(buffer[src : src + count])
    return buffer