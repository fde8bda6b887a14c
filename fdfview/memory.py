"""Byte-buffer helpers: zeroing, filling, copying, searching and comparing.

Buffers that are written to must be mutable (``bytearray`` or a writable
``memoryview``). Buffers that are only read may be any bytes-like object.
Byte values given as integers are reduced to a single byte, so ``-1`` means
``0xFF``.
"""

from __future__ import annotations

from typing import Optional, Union

Readable = Union[bytes, bytearray, memoryview]
Writable = Union[bytearray, memoryview]

_INT_MAX = 2**31 - 1


def _check_length(n: int, *buffers: Readable) -> None:
    """Raise ValueError unless ``n`` bytes fit in every buffer."""
    if n < 0:
        raise ValueError("byte count must not be negative")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buf)}")


def zero(buf: Writable, n: int) -> Writable:
    """Set the first ``n`` bytes of ``buf`` to zero and return ``buf``."""
    return fill(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    A zero count or size yields an empty buffer. A total that would not fit
    in a signed 32-bit integer raises OverflowError.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if not count or not size:
        return bytearray()
    if _INT_MAX // count < size:
        raise OverflowError(f"allocation of {count} x {size} bytes is too large")
    return bytearray(count * size)


def fill(buf: Writable, c: int, n: int) -> Writable:
    """Set the first ``n`` bytes of ``buf`` to the byte ``c`` and return ``buf``."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def copy(dest: Writable, src: Readable, n: int) -> Writable:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def move(buf: Writable, dest: int, src: int, n: int) -> Writable:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    The regions may overlap; the result is as if the source bytes were
    first copied aside.
    """
    if dest < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if n < 0:
        raise ValueError("byte count must not be negative")
    if max(dest, src) + n > len(buf):
        raise ValueError("region runs past the end of the buffer")
    if dest != src:
        buf[dest:dest + n] = bytes(buf[src:src + n])
    return buf


def copy_until(dest: Writable, src: Readable, c: int, n: int) -> Optional[int]:
    """Copy bytes from ``src`` to ``dest`` up to and including the byte ``c``.

    At most ``n`` bytes are copied. Returns the offset in ``dest`` just past
    the copied ``c``, or None when ``c`` is not among the first ``n`` bytes
    (in which case all ``n`` bytes are copied).
    """
    _check_length(n, src)
    found = find_byte(src, c, n)
    count = n if found is None else found + 1
    _check_length(count, dest)
    dest[:count] = bytes(src[:count])
    return None if found is None else count


def find_byte(buf: Readable, c: int, n: int) -> Optional[int]:
    """Return the offset of the first byte ``c`` in the first ``n`` bytes, or None."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return index if index >= 0 else None


def compare(a: Readable, b: Readable, n: int) -> int:
    """Compare the first ``n`` bytes of two buffers.

    Returns the difference of the first pair of unequal bytes, or 0 when
    they all match.
    """
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0