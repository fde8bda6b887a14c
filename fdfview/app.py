"""The interactive wireframe viewer window."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from fdfview.mapfile import HeightMap, MapError, load_map
from fdfview.output import put_str
from fdfview.projection import (
    KEY_DOWN,
    KEY_ESC,
    KEY_LEFT,
    KEY_MINUS,
    KEY_PLUS,
    KEY_RIGHT,
    KEY_UP,
    Point2D,
    View,
    center_offset,
    image_bounds,
)
from fdfview.raster import Canvas, render

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

WINDOW_WIDTH = 1800
WINDOW_HEIGHT = 1000
TITLE = "Wireframe Map"


class _DisplayError(RuntimeError):
    """The display could not be opened."""


def _to_surface(canvas: Canvas):
    """Turn a canvas into a pygame surface."""
    import pygame

    data = bytearray()
    for row in canvas.rows():
        for color in row:
            data.extend(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    surface = pygame.image.frombuffer(bytes(data), (canvas.width, canvas.height), "RGB")
    return surface.copy()


def _keycode(pygame, event) -> int:
    """Translate a pygame key event into the viewer's key codes."""
    special = {
        pygame.K_ESCAPE: KEY_ESC,
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_RIGHT: KEY_RIGHT,
        pygame.K_UP: KEY_UP,
        pygame.K_DOWN: KEY_DOWN,
        pygame.K_KP_PLUS: KEY_PLUS,
        pygame.K_KP_MINUS: KEY_MINUS,
    }
    if event.key in special:
        return special[event.key]
    text = getattr(event, "unicode", "")
    if len(text) == 1 and ord(text) < 128:
        return ord(text)
    return event.key


def _open_window(pygame, size, title):
    try:
        pygame.init()
        screen = pygame.display.set_mode(size)
    except pygame.error as exc:
        pygame.quit()
        raise _DisplayError(str(exc)) from exc
    pygame.display.set_caption(title)
    return screen


def _draw(pygame, screen, heightmap: HeightMap, view: View) -> None:
    screen.fill((0, 0, 0))
    size, _ = image_bounds(heightmap, view)
    canvas = render(heightmap, view)
    pos = center_offset(Point2D(WINDOW_WIDTH, WINDOW_HEIGHT), size)
    screen.blit(_to_surface(canvas), (pos.x + view.shift_x, pos.y + view.shift_y))
    pygame.display.flip()


def run(heightmap: HeightMap) -> None:
    """Show ``heightmap`` in a window until it is closed or Escape is pressed."""
    import pygame

    screen = _open_window(pygame, (WINDOW_WIDTH, WINDOW_HEIGHT), TITLE)
    try:
        view = View()
        _draw(pygame, screen, heightmap, view)
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type == pygame.KEYDOWN:
                if view.apply_key(_keycode(pygame, event)):
                    return
            elif event.type == pygame.MOUSEBUTTONDOWN:
                view.apply_mouse(event.button)
            else:
                continue
            _draw(pygame, screen, heightmap, view)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the map named on the command line and view it."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        put_str("Usage: ./fdf <map_file>\n")
        return 1
    try:
        heightmap = load_map(args[0])
    except MapError:
        put_str("Error loading map\n")
        return 1
    try:
        run(heightmap)
    except _DisplayError:
        put_str("Error initializing display\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())