"""String helpers: splitting, searching, slicing, trimming and bounded copies."""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, Optional, Tuple, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string, truncating integer codes to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return chr(c % 256)


def split_words(text: str, sep: CharLike) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    return [word for word in text.split(_char(sep)) if word]


def find_char(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    ch = _char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    return len(text) if ch == "\0" else None


def rfind_char(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    ch = _char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def find_bounded(big: str, little: str, length: int) -> Optional[int]:
    """Find ``little`` inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0. Returns None when absent.
    """
    if not little:
        return 0
    if length < 0:
        raise ValueError("length must not be negative")
    index = big.find(little, 0, length)
    return index if index >= 0 else None


def compare_n(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping where both strings end.

    Returns the code difference of the first differing characters, a
    missing character counting as 0, or 0 when no difference is found.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    for a, b in islice(zip_longest(s1, s2, fillvalue="\0"), n):
        if a == "\0" and b == "\0":
            break
        if a != b:
            return ord(a) - ord(b)
    return 0


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def join(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def trim(text: str, charset: Optional[str]) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``.

    A ``charset`` of None leaves the text unchanged.
    """
    if charset is None:
        return text
    return text.strip(charset)


def bounded_copy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``. A size of 0
    copies nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def bounded_concat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had, with ``dst`` counted as at most ``size`` characters.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    dst_len = min(len(dst), size)
    if dst_len >= size:
        return dst, dst_len + len(src)
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + len(src)


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character.

    ``func`` is called from the last character back to the first.
    """
    mapped = [func(index, ch) for index, ch in reversed(list(enumerate(text)))]
    return "".join(reversed(mapped))


def iter_indexed(text: str, func: Callable[[int, str], Optional[str]]) -> str:
    """Call ``func(index, char)`` for every character, first to last.

    A string returned by ``func`` replaces the character; None keeps it.
    """
    result = []
    for index, ch in enumerate(text):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)