"""Isometric projection of height-map points and the view that drives it."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterator, NamedTuple, Tuple

from fdfview.mapfile import HeightMap

KEY_ESC = 65307
KEY_PLUS = 43
KEY_MINUS = 45
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_UP = 65362
KEY_DOWN = 65364
KEY_Q = 113
KEY_E = 101
KEY_A = 97
KEY_D = 100

MOUSE_SCROLL_UP = 4
MOUSE_SCROLL_DOWN = 5

_KEY_ACTIONS: Dict[int, Tuple[str, float]] = {
    KEY_PLUS: ("zoom", 1),
    KEY_MINUS: ("zoom", -1),
    KEY_LEFT: ("shift_x", -10),
    KEY_RIGHT: ("shift_x", 10),
    KEY_UP: ("shift_y", -10),
    KEY_DOWN: ("shift_y", 10),
    KEY_Q: ("angle", -0.05),
    KEY_E: ("angle", 0.05),
    KEY_A: ("z_scale", 0.1),
    KEY_D: ("z_scale", -0.1),
}

_MOUSE_ACTIONS: Dict[int, Tuple[str, float]] = {
    MOUSE_SCROLL_UP: ("zoom", 1),
    MOUSE_SCROLL_DOWN: ("zoom", -1),
}


class Point2D(NamedTuple):
    """A point on screen, in whole pixels."""

    x: int
    y: int


@dataclass
class View:
    """Zoom, rotation, height scale and shift of the projected map."""

    zoom: float = 20.0
    angle: float = 0.8
    z_scale: float = 1.0
    shift_x: int = 0
    shift_y: int = 0

    def project(self, x: float, y: float, z: float) -> Point2D:
        """Project a map point to the screen; coordinates truncate toward zero."""
        if self.z_scale == 0:
            raise ZeroDivisionError("z_scale must not be zero")
        sx = x * self.zoom
        sy = y * self.zoom
        sz = z * self.zoom / self.z_scale
        px = (sx - sy) * math.cos(self.angle) + self.shift_x
        py = (sx + sy) * math.sin(self.angle) - sz + self.shift_y
        return Point2D(int(px), int(py))

    def _apply(self, action: Tuple[str, float]) -> None:
        name, delta = action
        setattr(self, name, getattr(self, name) + delta)

    def apply_key(self, keycode: int) -> bool:
        """Adjust the view for a key press.

        Returns True when the key asks to close the viewer; unknown keys
        leave the view unchanged.
        """
        if keycode == KEY_ESC:
            return True
        action = _KEY_ACTIONS.get(keycode)
        if action is not None:
            self._apply(action)
        return False

    def apply_mouse(self, button: int) -> None:
        """Zoom in or out for the scroll-wheel buttons."""
        action = _MOUSE_ACTIONS.get(button)
        if action is not None:
            self._apply(action)


def _projected_points(heightmap: HeightMap, view: View) -> Iterator[Point2D]:
    for y, row in enumerate(heightmap.z):
        for x, height in enumerate(row):
            yield view.project(x, y, height)


def image_bounds(heightmap: HeightMap, view: View) -> Tuple[Point2D, Point2D]:
    """Return the size of the projected map and its top-left offset.

    The offset is the smallest projected coordinate; subtracting it from
    any projected point gives a position inside the image. The largest
    coordinate counted is never below 0.
    """
    points = list(_projected_points(heightmap, view))
    if not points:
        raise ValueError("the height map holds no points")
    min_x = min(p.x for p in points)
    min_y = min(p.y for p in points)
    max_x = max(0, max(p.x for p in points))
    max_y = max(0, max(p.y for p in points))
    size = Point2D(abs(max_x - min_x), abs(max_y - min_y))
    return size, Point2D(min_x, min_y)


def _half(n: int) -> int:
    """Halve ``n``, rounding toward zero."""
    return -(-n // 2) if n < 0 else n // 2


def center_offset(big: Point2D, little: Point2D) -> Point2D:
    """Return where ``little`` goes to sit centred inside ``big``."""
    return Point2D(_half(big[0]) - _half(little[0]), _half(big[1]) - _half(little[1]))