"""Byte-buffer helpers: fill, zero, search, compare and copy."""

from __future__ import annotations

from typing import Union

Buffer = Union[bytearray, memoryview]
ReadableBuffer = Union[bytes, bytearray, memoryview]

_CALLOC_LIMIT = 4295032592


def _require(count: int, *buffers: ReadableBuffer) -> None:
    if count < 0:
        raise ValueError(f"count must not be negative, got {count}")
    for buffer in buffers:
        if count > len(buffer):
            raise ValueError(
                f"count {count} exceeds buffer length {len(buffer)}"
            )


def memset(buffer: Buffer, value: int, count: int) -> Buffer:
    """Fill the first ``count`` bytes of ``buffer`` with ``value`` (low byte)."""
    _require(count, buffer)
    buffer[:count] = bytes([value & 0xFF]) * count
    return buffer


def bzero(buffer: Buffer, count: int) -> None:
    """Zero the first ``count`` bytes of ``buffer``."""
    if count == 0:
        return
    memset(buffer, 0, count)


def calloc(nmemb: int, size: int) -> bytearray:
    """Allocate a zeroed buffer of ``nmemb * size`` bytes.

    Raises MemoryError when the request exceeds the allocation limit.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("nmemb and size must not be negative")
    if nmemb and size > _CALLOC_LIMIT // nmemb:
        raise MemoryError(f"cannot allocate {nmemb} x {size} bytes")
    return bytearray(nmemb * size)


def memchr(data: ReadableBuffer, value: int, count: int) -> int | None:
    """Index of the first byte equal to ``value`` within ``count`` bytes, or None."""
    _require(count, data)
    index = bytes(data[:count]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(first: ReadableBuffer, second: ReadableBuffer, count: int) -> int:
    """Difference of the first differing bytes within ``count`` bytes, else 0."""
    _require(count, first, second)
    for left, right in zip(first[:count], second[:count]):
        if left != right:
            return left - right
    return 0


def memcpy(dest: Buffer, src: ReadableBuffer, count: int) -> Buffer:
    """Copy ``count`` bytes of ``src`` to the start of ``dest``."""
    _require(count, dest, src)
    if count:
        dest[:count] = bytes(src[:count])
    return dest


def memmove(dest: Buffer, src: ReadableBuffer, count: int) -> Buffer:
    """Copy ``count`` bytes from ``src`` to ``dest``; the regions may overlap."""
    _require(count, dest, src)
    snapshot = bytes(src[:count])
    dest[:count] = snapshot
    return dest