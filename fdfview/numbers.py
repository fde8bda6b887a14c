"""Integer parsing and formatting helpers."""

from __future__ import annotations

from typing import Tuple, TypeVar

from fdfview.chars import is_space

T = TypeVar("T")

_UINT_MODULUS = 1 << 32


def absolute(n: int) -> int:
    """Return the absolute value of ``n``."""
    return -n if n < 0 else n


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is read, then digits up
    to the first non-digit. Text without digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return -value if negative else value


def _base_size(base: str) -> int:
    """Return the radix of ``base``, or 0 when it is unusable."""
    if len(base) == 1:
        return 0
    if any(ch in "+-" or is_space(ch) for ch in base):
        return 0
    if len(set(base)) != len(base):
        return 0
    return len(base)


def atoi_base(text: str, base: str) -> int:
    """Parse a leading integer written in the digit alphabet ``base``.

    Leading whitespace is skipped, then any run of signs is read, each '-'
    flipping the sign. Digits are read until a character outside ``base``.
    An invalid base (empty, one character, repeated characters, signs or
    whitespace) yields 0.
    """
    radix = _base_size(base)
    if not radix:
        return 0
    digits = {ch: index for index, ch in enumerate(base)}
    pos = 0
    length = len(text)
    while pos < length and is_space(text[pos]):
        pos += 1
    sign = 1
    while pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -sign
        pos += 1
    value = 0
    for ch in text[pos:]:
        digit = digits.get(ch)
        if digit is None:
            break
        value = value * radix + digit
    return value * sign


def itoa(n: int) -> str:
    """Format ``n`` in decimal."""
    return str(n)


def uitoa(n: int) -> str:
    """Format ``n`` in decimal as a 32-bit unsigned integer."""
    return str(n % _UINT_MODULUS)


def clamp(d: float, low: float, high: float) -> float:
    """Limit ``d`` to the range from ``low`` to ``high``."""
    if d < low:
        return low
    if d > high:
        return high
    return d


def swap(a: T, b: T) -> Tuple[T, T]:
    """Return the two values in exchanged order."""
    return b, a