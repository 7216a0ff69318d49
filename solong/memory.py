"""Byte-buffer operations over bytearray and bytes-like objects."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]


def _check_span(length: int, start: int, n: int, what: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if start < 0 or start + n > length:
        raise IndexError(f"{what}: {n} bytes at offset {start} exceed a buffer of {length}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first n bytes of buf with the low byte of value."""
    _check_span(len(buf), 0, n, "memset")
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> bytearray:
    """Zero the first n bytes of buf."""
    return memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of nmemb elements of size bytes each."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    return bytearray(nmemb * size)


def memchr(data: Buffer, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to c within the first n bytes, or None."""
    _check_span(len(data), 0, n, "memchr")
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare n bytes; return the difference of the first unequal pair, or 0."""
    _check_span(len(a), 0, n, "memcmp")
    _check_span(len(b), 0, n, "memcmp")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: Buffer, n: int) -> bytearray:
    """Copy the first n bytes of src into the start of dest."""
    _check_span(len(src), 0, n, "memcpy source")
    _check_span(len(dest), 0, n, "memcpy destination")
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy n bytes inside buf from offset src to offset dest; regions may overlap."""
    _check_span(len(buf), src, n, "memmove source")
    _check_span(len(buf), dest, n, "memmove destination")
    buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf