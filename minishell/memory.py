"""Byte-buffer helpers: search, compare, copy, move and fill."""

from __future__ import annotations

from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]
MutableBuffer = Union[bytearray, memoryview]


def _byte(c: int | bytes | str) -> int:
    """Return ``c`` as a byte value; ints are truncated like an unsigned char."""
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, (bytes, bytearray)):
        if len(c) != 1:
            raise ValueError(f"expected a single byte, got {c!r}")
        return c[0]
    if isinstance(c, str):
        if len(c) != 1 or ord(c) > 0xFF:
            raise ValueError(f"expected a single byte-sized character, got {c!r}")
        return ord(c)
    raise TypeError(f"expected a byte value, got {type(c).__name__}")


def _check_count(n: int, *buffers: Buffer) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buf)}")


def memchr(data: Buffer, c: int | bytes | str, n: int) -> Optional[int]:
    """Return the index of the first byte ``c`` among the first ``n`` bytes, or None."""
    _check_count(n, data)
    index = bytes(data[:n]).find(_byte(c))
    return index if index >= 0 else None


def memcmp(a: Buffer, b: Buffer, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first mismatching pair, else 0."""
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dst: MutableBuffer, src: Buffer, n: int) -> MutableBuffer:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst``; return ``dst``."""
    _check_count(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(dst: MutableBuffer, dst_offset: int, src_offset: int, n: int) -> MutableBuffer:
    """Move ``n`` bytes within ``dst`` from ``src_offset`` to ``dst_offset``; overlap is safe."""
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if max(dst_offset, src_offset) + n > len(dst):
        raise ValueError("move runs past the end of the buffer")
    dst[dst_offset:dst_offset + n] = bytes(dst[src_offset:src_offset + n])
    return dst


def memset(buffer: MutableBuffer, c: int | bytes | str, n: int) -> MutableBuffer:
    """Set the first ``n`` bytes of ``buffer`` to ``c``; return ``buffer``."""
    _check_count(n, buffer)
    buffer[:n] = bytes([_byte(c)]) * n
    return buffer


def bzero(buffer: MutableBuffer, n: int) -> None:
    """Zero the first ``n`` bytes of ``buffer``."""
    memset(buffer, 0, n)