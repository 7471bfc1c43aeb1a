"""Byte-buffer helpers working on bytearray and other bytes-like objects."""

from __future__ import annotations


def _check_length(n: int, *buffers: bytes | bytearray | memoryview) -> None:
    if n < 0:
        raise ValueError("length must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError("length exceeds buffer size")


def bzero(buf: bytearray | memoryview, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_length(n, buf)
    buf[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(data: bytes | bytearray | memoryview, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(
    a: bytes | bytearray | memoryview, b: bytes | bytearray | memoryview, n: int
) -> int:
    """Compare the first ``n`` bytes; return the difference at the first mismatch."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def memcpy(
    dest: bytearray | memoryview, src: bytes | bytearray | memoryview, n: int
) -> bytearray | memoryview:
    """Copy the first ``n`` bytes of ``src`` into ``dest`` and return ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(
    dest: bytearray | memoryview, dest_offset: int, src_offset: int, n: int
) -> bytearray | memoryview:
    """Move ``n`` bytes inside ``dest`` from ``src_offset`` to ``dest_offset``.

    Overlapping regions are handled correctly. Returns ``dest``.
    """
    if n < 0 or dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets and length must not be negative")
    if dest_offset + n > len(dest) or src_offset + n > len(dest):
        raise ValueError("region exceeds buffer size")
    if dest_offset != src_offset:
        dest[dest_offset : dest_offset + n] = bytes(dest[src_offset : src_offset + n])
    return dest


def memset(buf: bytearray | memoryview, value: int, n: int) -> bytearray | memoryview:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` and return ``buf``."""
    _check_length(n, buf)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf