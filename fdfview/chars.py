"""ASCII character classification and case conversion.

Every function accepts either a one-character string or an integer code.
Only the ASCII ranges count: anything outside them is never a letter,
digit or space.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[str, int]


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {c!r}")
    return c


def is_lower(c: CharLike) -> bool:
    """True for 'a' through 'z'."""
    return ord("a") <= _code(c) <= ord("z")


def is_upper(c: CharLike) -> bool:
    """True for 'A' through 'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    return is_lower(c) or is_upper(c)


def is_digit(c: CharLike) -> bool:
    """True for '0' through '9'."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space included."""
    return 31 < _code(c) < 127


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) < 128


def is_space(c: CharLike) -> bool:
    """True for space, tab, newline, vertical tab, form feed and carriage return."""
    code = _code(c)
    return code == 32 or 8 < code < 14


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII capital; anything else comes back unchanged."""
    code = _code(c)
    if is_upper(code):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII small letter; anything else comes back unchanged."""
    code = _code(c)
    if is_lower(code):
        return _same_kind(c, code - 32)
    return c