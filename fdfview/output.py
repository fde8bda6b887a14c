"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> int:
    """Write one character; return the number of characters written."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)
    return 1


def put_str(text: str, stream: Optional[TextIO] = None) -> int:
    """Write ``text``; return the number of characters written."""
    _target(stream).write(text)
    return len(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> int:
    """Write ``text`` followed by a newline; return the characters written."""
    return put_str(text, stream) + put_char("\n", stream)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` in decimal; return the number of characters written."""
    return put_str(str(n), stream)