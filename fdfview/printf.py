"""Formatted output with a small printf-style directive language.

A directive has the form ``%[flags][width][.precision]specifier``.

Flags are ``-`` (left align), ``0`` (zero pad), ``#`` (alternate form),
a space (blank before non-negative numbers) and ``+`` (sign before
non-negative numbers). The specifiers are ``%``, ``c``, ``d``, ``i``,
``u``, ``x``, ``X``, ``s`` and ``p``.

A directive with an unknown specifier produces no output, and the
character that stood where the specifier belongs is dropped.
"""

from __future__ import annotations

import operator
import sys
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, TextIO, Tuple

SPECIFIERS = "%cdiuxXsp"
FLAGS = "-0# +"

_INT_RANGE = 1 << 32
_INT_HALF = 1 << 31
_PTR_RANGE = 1 << 64
_MISSING = object()


@dataclass(frozen=True)
class FormatSpec:
    """One parsed directive."""

    specifier: str
    flags: frozenset = frozenset()
    width: int = 0
    precision: int = -1

    @property
    def left_align(self) -> bool:
        return "-" in self.flags

    @property
    def zero_pad(self) -> bool:
        return "0" in self.flags

    @property
    def alternate(self) -> bool:
        return "#" in self.flags

    @property
    def blank(self) -> bool:
        return " " in self.flags

    @property
    def plus_sign(self) -> bool:
        return "+" in self.flags


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_spec(fmt: str, pos: int) -> Tuple[Optional[FormatSpec], int]:
    """Parse the directive starting at ``pos``, just after its ``%``.

    Returns the directive, or None when it has no valid specifier, and the
    position where literal text resumes.
    """
    end = len(fmt)
    if pos >= end:
        return None, end
    flags = set()
    while pos < end and fmt[pos] in FLAGS:
        flags.add(fmt[pos])
        pos += 1
    width = 0
    while pos < end and _is_digit(fmt[pos]):
        width = width * 10 + ord(fmt[pos]) - ord("0")
        pos += 1
    precision = -1
    if pos < end and fmt[pos] == ".":
        if pos + 1 < end and fmt[pos + 1] == "-":
            pos += 1
        else:
            precision = 0
            pos += 1
            while pos < end and _is_digit(fmt[pos]):
                precision = precision * 10 + ord(fmt[pos]) - ord("0")
                pos += 1
    if pos < end and fmt[pos] in SPECIFIERS:
        return FormatSpec(fmt[pos], frozenset(flags), width, precision), pos + 1
    return None, min(pos + 1, end)


def _int32(arg: Any) -> int:
    return (operator.index(arg) + _INT_HALF) % _INT_RANGE - _INT_HALF


def _uint32(arg: Any) -> int:
    return operator.index(arg) % _INT_RANGE


def _zero_pad(text: str, count: int) -> str:
    """Insert ``count`` zeros after a leading minus sign, or at the front."""
    pad = "0" * count
    if text.startswith("-"):
        return "-" + pad + text[1:]
    return pad + text


def _convert_char(spec: FormatSpec, arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise TypeError(f"%c expects a single character, got {arg!r}")
        code = ord(arg)
    else:
        code = operator.index(arg)
    return chr(code & 0xFF)


def _convert_int(spec: FormatSpec, arg: Any) -> str:
    value = _int32(arg)
    out = str(value)
    if spec.precision == 0 and out == "0":
        out = ""
    missing = spec.precision - len(out) + (1 if out.startswith("-") else 0)
    if missing > 0:
        out = _zero_pad(out, missing)
    if value < 0:
        return out
    if spec.plus_sign:
        return "+" + out
    if spec.blank:
        return " " + out
    return out


def _convert_uint(spec: FormatSpec, arg: Any) -> str:
    out = str(_uint32(arg))
    if spec.precision == 0 and out == "0":
        out = ""
    if spec.precision > len(out):
        out = "0" * (spec.precision - len(out)) + out
    return out


def _convert_hex(spec: FormatSpec, arg: Any, upper: bool) -> str:
    value = _uint32(arg)
    out = format(value, "X" if upper else "x")
    if spec.precision == 0 and out == "0":
        out = ""
    missing = spec.precision - len(out)
    if missing > 0:
        out = _zero_pad(out, missing)
    if spec.alternate and value:
        out = ("0X" if upper else "0x") + out
    return out


def _convert_str(spec: FormatSpec, arg: Any) -> str:
    if arg is None:
        return "(null)" if spec.precision else ""
    if not isinstance(arg, str):
        raise TypeError(f"%s expects a string or None, got {arg!r}")
    if spec.precision != -1 and spec.precision < len(arg):
        return arg[:spec.precision]
    return arg


def _convert_ptr(spec: FormatSpec, arg: Any) -> str:
    if arg is None:
        return "(nil)"
    address = operator.index(arg) % _PTR_RANGE
    if not address:
        return "(nil)"
    return "0x" + format(address, "x")


_CONVERTERS: Dict[str, Callable[[FormatSpec, Any], str]] = {
    "c": _convert_char,
    "d": _convert_int,
    "i": _convert_int,
    "u": _convert_uint,
    "x": lambda spec, arg: _convert_hex(spec, arg, upper=False),
    "X": lambda spec, arg: _convert_hex(spec, arg, upper=True),
    "s": _convert_str,
    "p": _convert_ptr,
}


def _pad_char(spec: FormatSpec, body: str) -> str:
    if spec.width < 2:
        return body
    pad = " " * (spec.width - 1)
    return body + pad if spec.left_align else pad + body


def _pad(spec: FormatSpec, body: str) -> str:
    if spec.width <= len(body):
        return body
    count = spec.width - len(body)
    if spec.left_align:
        return body + " " * count
    if spec.zero_pad and spec.precision < 0 and spec.specifier not in "sp":
        return _zero_pad(body, count)
    return " " * count + body


def _render(spec: FormatSpec, args: Iterator[Any]) -> str:
    if spec.specifier == "%":
        return "%"
    arg = next(args, _MISSING)
    if arg is _MISSING:
        raise TypeError(f"not enough arguments for %{spec.specifier}")
    body = _CONVERTERS[spec.specifier](spec, arg)
    if spec.specifier == "c":
        return _pad_char(spec, body)
    return _pad(spec, body)


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    pos = 0
    while True:
        pct = fmt.find("%", pos)
        if pct < 0:
            yield fmt[pos:]
            return
        yield fmt[pos:pct]
        spec, pos = parse_spec(fmt, pct + 1)
        if spec is not None:
            yield _render(spec, args)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with every directive replaced by its formatted argument."""
    return "".join(_pieces(fmt, iter(args)))


def dprintf(stream: TextIO, fmt: str, *args: Any) -> int:
    """Write the formatted text to ``stream``; return the characters written."""
    text = format_string(fmt, *args)
    stream.write(text)
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return the characters written."""
    return dprintf(sys.stdout, fmt, *args)