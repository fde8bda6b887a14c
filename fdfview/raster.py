"""Drawing the projected wireframe into a pixel canvas."""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from fdfview.mapfile import HeightMap
from fdfview.projection import Point2D, View, image_bounds

_COLOR_MASK = 0xFFFFFFFF


class Canvas:
    """A grid of 32-bit colour values, all starting at ``background``."""

    def __init__(self, width: int, height: int, background: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("canvas dimensions must not be negative")
        self.width = width
        self.height = height
        self._pixels = [background & _COLOR_MASK] * (width * height)

    def __repr__(self) -> str:
        return f"Canvas({self.width}x{self.height})"

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points outside the canvas are ignored."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & _COLOR_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of one pixel; IndexError outside the canvas."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y * self.width + x]

    def rows(self) -> Iterator[List[int]]:
        """Yield each row of colours, top to bottom."""
        for y in range(self.height):
            yield self._pixels[y * self.width:(y + 1) * self.width]

    def draw_line(self, start: Sequence[int], end: Sequence[int], color: int) -> None:
        """Draw a straight line between two points, both ends included."""
        for x, y in line_points(start, end):
            self.put_pixel(x, y, color)


def line_points(start: Sequence[int], end: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Yield the pixels of the line from ``start`` to ``end`` (Bresenham)."""
    x, y = start
    x_end, y_end = end
    dx = abs(x_end - x)
    dy = -abs(y_end - y)
    sx = 1 if x < x_end else -1
    sy = 1 if y < y_end else -1
    error = dx + dy
    while True:
        yield x, y
        if x == x_end and y == y_end:
            return
        doubled = 2 * error
        if doubled >= dy:
            error += dy
            x += sx
        if doubled <= dx:
            error += dx
            y += sy


def _offset(point: Point2D, offset: Point2D) -> Point2D:
    return Point2D(point.x - offset.x, point.y - offset.y)


def draw_map(canvas: Canvas, heightmap: HeightMap, view: View, offset: Point2D) -> None:
    """Draw the wireframe, each point joined to its right and lower neighbours.

    Every segment takes the colour of the point it starts from.
    """
    last_row = heightmap.height - 1
    for y, row in enumerate(heightmap.z):
        last_col = len(row) - 1
        for x, height in enumerate(row):
            color = heightmap.colors[y][x]
            start = _offset(view.project(x, y, height), offset)
            if x < last_col:
                end = view.project(x + 1, y, row[x + 1])
                canvas.draw_line(start, _offset(end, offset), color)
            if y < last_row:
                end = view.project(x, y + 1, heightmap.z[y + 1][x])
                canvas.draw_line(start, _offset(end, offset), color)


def render(heightmap: HeightMap, view: View) -> Canvas:
    """Draw the map into a canvas just large enough to hold it.

    The canvas is two pixels wider and taller than the projected bounds.
    """
    size, offset = image_bounds(heightmap, view)
    canvas = Canvas(size.x + 2, size.y + 2)
    draw_map(canvas, heightmap, view, offset)
    return canvas