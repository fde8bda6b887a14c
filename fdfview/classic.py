"""A simpler fixed-size viewer with height-graded colours and a command panel."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from fdfview.app import _DisplayError, _keycode, _open_window, _to_surface
from fdfview.mapfile import HeightMap, MapError, load_map
from fdfview.raster import Canvas

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 800
BACKGROUND = 0x181C26
ANGLE = 0.8

KEY_ESC = 65307
KEY_A = 97
KEY_D = 100
KEY_W = 119
KEY_S = 115
KEY_R = 114
KEY_F = 102

_KEY_ACTIONS = {
    KEY_A: ("h_move", 20),
    KEY_D: ("h_move", -20),
    KEY_W: ("v_move", 20),
    KEY_S: ("v_move", -20),
    KEY_R: ("h_view", 0.01),
    KEY_F: ("h_view", -0.01),
}

_PANEL = (
    (10, "<< COMMANDS >>"),
    (30, "W - Move up"),
    (50, "S - Move down"),
    (70, "A - Move left"),
    (90, "D - Move right"),
    (110, "R - Increase depth"),
    (130, "F - Decrease depth"),
)

_FADE = (
    (100, 0xFFDF8D),
    (75, 0xFFDE7A),
    (50, 0xFFC568),
    (25, 0xFD996B),
    (15, 0xF7856C),
    (10, 0xF06E6C),
    (5, 0xD9576B),
    (0, 0xA44369),
    (-10, 0x833F68),
    (-20, 0x833F68),
    (-50, 0x5E3C65),
)
_FADE_LOWEST = 0x3F3A63


def fade(height: int) -> int:
    """Return the colour for a height: warm for peaks, dark for valleys."""
    for threshold, color in _FADE:
        if height > threshold:
            return color
    return _FADE_LOWEST


@dataclass
class ClassicView:
    """Zoom, depth factor and screen shift of the classic viewer."""

    zoom: float = 2.0
    h_view: float = 0.01
    h_move: int = 500
    v_move: int = 50

    def project(self, heightmap: HeightMap, x: int, y: int) -> Tuple[float, float, int]:
        """Project the map point at column ``x``, row ``y``.

        The height is truncated to an integer after each scaling step, and
        the vertical coordinate is computed from the already rotated
        horizontal one.
        """
        z = int(heightmap.z[y][x] * self.zoom)
        z = int(z * self.h_view)
        fy = y * self.zoom
        fx = x * self.zoom
        fx = (fx - fy) * math.cos(ANGLE)
        fy = (fx + fy) * math.sin(ANGLE) - z
        return fx, fy, z

    def apply_key(self, keycode: int) -> bool:
        """Adjust the view for a key press; True when the key closes the viewer."""
        if keycode == KEY_ESC:
            return True
        action = _KEY_ACTIONS.get(keycode)
        if action is not None:
            name, delta = action
            setattr(self, name, getattr(self, name) + delta)
        return False


def trace_line(
    canvas: Canvas,
    heightmap: HeightMap,
    view: ClassicView,
    start: Tuple[int, int],
    end: Tuple[int, int],
) -> None:
    """Draw the segment between two map points, coloured by the higher end.

    The end pixel itself is not drawn, and only points strictly inside the
    screen area are plotted.
    """
    x0, y0, z0 = view.project(heightmap, *start)
    x1, y1, z1 = view.project(heightmap, *end)
    x0 += view.h_move
    y0 += view.v_move
    x1 += view.h_move
    y1 += view.v_move
    x_step = x1 - x0
    y_step = y1 - y0
    steps = max(abs(int(x_step)), abs(int(y_step)))
    if not steps:
        return
    x_step /= steps
    y_step /= steps
    color = fade(max(z0, z1))
    for _ in range(steps + 1):
        if not (int(x0 - x1) or int(y0 - y1)):
            break
        if 0 < x0 < SCREEN_WIDTH and 0 < y0 < SCREEN_HEIGHT:
            canvas.put_pixel(int(x0), int(y0), color)
        x0 += x_step
        y0 += y_step


def render_classic(heightmap: HeightMap, view: ClassicView) -> Canvas:
    """Draw the background and the wireframe into a screen-sized canvas.

    The background leaves the top row and the left column black.
    """
    canvas = Canvas(SCREEN_WIDTH, SCREEN_HEIGHT)
    for y in range(1, SCREEN_HEIGHT):
        for x in range(1, SCREEN_WIDTH):
            canvas.put_pixel(x, y, BACKGROUND)
    last_row = heightmap.height - 1
    last_col = heightmap.width - 1
    for i in range(heightmap.height):
        for j in range(heightmap.width):
            if j < last_col:
                trace_line(canvas, heightmap, view, (j, i), (j + 1, i))
            if i < last_row:
                trace_line(canvas, heightmap, view, (j, i), (j, i + 1))
    return canvas


def _draw(pygame, screen, heightmap: HeightMap, view: ClassicView) -> None:
    screen.blit(_to_surface(render_classic(heightmap, view)), (0, 0))
    try:
        font = pygame.font.Font(None, 20)
    except (pygame.error, NotImplementedError):
        font = None
    if font is not None:
        for top, text in _PANEL:
            screen.blit(font.render(text, True, (255, 255, 255)), (20, top))
    pygame.display.flip()


def _run(heightmap: HeightMap, view: ClassicView, title: str) -> None:
    import pygame

    screen = _open_window(pygame, (SCREEN_WIDTH, SCREEN_HEIGHT), title)
    try:
        pygame.key.set_repeat(300, 30)
        _draw(pygame, screen, heightmap, view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type != pygame.KEYDOWN:
                continue
            if view.apply_key(_keycode(pygame, event)):
                return
            _draw(pygame, screen, heightmap, view)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """View the map named on the command line in the classic viewer."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    try:
        heightmap = load_map(args[0])
    except MapError:
        return 1
    view = ClassicView(zoom=max(SCREEN_WIDTH // heightmap.width, 2))
    try:
        _run(heightmap, view, args[0])
    except _DisplayError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())