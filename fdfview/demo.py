"""A small window that draws a square outline, for trying out line drawing."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, Sequence, Tuple

from fdfview.app import _DisplayError, _keycode, _open_window, _to_surface
from fdfview.printf import printf
from fdfview.raster import Canvas

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 2080
IMAGE_WIDTH = 640
IMAGE_HEIGHT = 360
TITLE = "Line demo"
KEY_ESC = 65307
SQUARE = ((100, 100), (200, 100), (200, 200), (100, 200))
SQUARE_COLOR = 0x00FF0000


def stepped_line(start: Sequence[int], end: Sequence[int]) -> Iterator[Tuple[int, int]]:
    """Yield the pixels from ``start`` to ``end``, both included."""
    x, y = start
    x_end, y_end = end
    dx = abs(x_end - x)
    dy = abs(y_end - y)
    sx = 1 if x < x_end else -1
    sy = 1 if y < y_end else -1
    error = dx - dy
    while x != x_end or y != y_end:
        yield x, y
        doubled = error * 2
        if doubled > -dy:
            error -= dy
            x += sx
        if doubled < dx:
            error += dx
            y += sy
    yield x, y


def draw_square(canvas: Canvas, corners: Sequence[Sequence[int]], color: int) -> None:
    """Join each corner to the next, and the last back to the first."""
    corners = list(corners)
    for a, b in zip(corners, corners[1:] + corners[:1]):
        for x, y in stepped_line(a, b):
            canvas.put_pixel(x, y, color)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the demo window; Escape or closing the window ends it."""
    import pygame

    canvas = Canvas(IMAGE_WIDTH, IMAGE_HEIGHT)
    draw_square(canvas, SQUARE, SQUARE_COLOR)
    try:
        screen = _open_window(pygame, (WINDOW_WIDTH, WINDOW_HEIGHT), TITLE)
    except _DisplayError:
        return 1
    try:
        screen.blit(_to_surface(canvas), (0, 0))
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN and _keycode(pygame, event) == KEY_ESC:
                return 0
            if event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                if event.button == 1:
                    printf("Hello from left_mouse_hook at %d %d!\n", x, y)
                elif event.button == 3:
                    printf("Hello from right_mouse_hook at %d %d!\n", x, y)
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())