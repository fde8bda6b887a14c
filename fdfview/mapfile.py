"""Loading height maps: rows of space-separated heights with optional colours.

Each token is a decimal height, optionally followed by ``,0x`` and a colour
written in upper-case hexadecimal, e.g. ``10,0xFF0000``. Points without a
colour are white.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterable, List, Tuple, Union

from fdfview.linereader import LineReader
from fdfview.numbers import atoi, atoi_base
from fdfview.strings import split_words

DEFAULT_COLOR = 0xFFFFFF
_HEX_DIGITS = "0123456789ABCDEF"
_COLOR_MARK = ",0x"


class MapError(Exception):
    """A map file could not be read or is malformed."""


@dataclass
class HeightMap:
    """A rectangular grid of heights and the colour of every point."""

    z: List[List[int]]
    colors: List[List[int]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.colors:
            self.colors = [[DEFAULT_COLOR] * len(row) for row in self.z]
        if len(self.colors) != len(self.z):
            raise MapError("height and colour grids differ in size")
        widths = {len(row) for row in self.z} | {len(row) for row in self.colors}
        if len(widths) > 1:
            raise MapError("map rows differ in width")

    @property
    def width(self) -> int:
        return len(self.z[0]) if self.z else 0

    @property
    def height(self) -> int:
        return len(self.z)


def parse_color(token: str) -> int:
    """Return the colour given after ``,0x`` in ``token``, or white."""
    mark = token.find(_COLOR_MARK)
    if mark < 0:
        return DEFAULT_COLOR
    return atoi_base(token[mark + len(_COLOR_MARK):], _HEX_DIGITS)


def _tokens(line: str) -> List[str]:
    return split_words(line, " ")


def map_dimensions(lines: Iterable[str]) -> Tuple[int, int]:
    """Return the width and height of the map in ``lines``.

    Raises MapError when rows hold different numbers of tokens. No lines
    give a width and height of 0.
    """
    width = -1
    height = 0
    for line in lines:
        count = len(_tokens(line))
        if width == -1:
            width = count
        elif count != width:
            raise MapError("inconsistent map width")
        height += 1
    return max(width, 0), height


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a HeightMap from the lines of a map file."""
    rows = list(lines)
    _, height = map_dimensions(rows)
    if not height:
        raise MapError("empty map")
    z = []
    colors = []
    for line in rows:
        tokens = _tokens(line)
        z.append([atoi(token) for token in tokens])
        colors.append([parse_color(token) for token in tokens])
    return HeightMap(z, colors)


def load_map(path: Union[str, PathLike]) -> HeightMap:
    """Read and parse the map file at ``path``."""
    try:
        with open(path, encoding="utf-8") as stream:
            lines = list(LineReader(stream))
    except OSError as exc:
        raise MapError(f"cannot open {path}: {exc.strerror or exc}") from exc
    return parse_map(lines)