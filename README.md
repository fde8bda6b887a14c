# fdfview

A viewer for FdF height-map files. It reads a grid of heights, projects it
isometrically and draws it as a wireframe in a pygame window.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Map files

A map is a plain UTF-8 text file. Each line is one row of the grid, each
space-separated token one point. A token is an integer height, optionally
followed by a colour written as `,0x` and upper-case hexadecimal digits:

    0 0 0 0
    0 10,0xFF0000 10 0
    0 0 0 0

Points with no colour are drawn white. Colour digits are read up to the first
character that is not `0`–`9` or `A`–`F`, so lower-case digits end the colour.
Every row must have the same number of points; a file with rows of different
widths, an empty file or a file that cannot be opened is rejected with
`fdfview.mapfile.MapError`.

## Viewing a map

    fdfview path/to/map.fdf

The map opens centred in an 1800×1000 window titled "Wireframe Map".
Controls:

| Input                | Effect                     |
|----------------------|----------------------------|
| `+` / `-`            | zoom in / out              |
| mouse wheel          | zoom in / out              |
| arrow keys           | move the image by 10 px    |
| `q` / `e`            | rotate left / right        |
| `a` / `d`            | flatten / raise the relief |
| `Esc`, window close  | quit                       |

Every segment takes the colour of the point it starts from. Without exactly
one argument the command prints `Usage: ./fdf <map_file>` and exits with
status 1; a map that cannot be loaded prints `Error loading map`, and a
display that cannot be opened prints `Error initializing display`, both
with status 1.

## Classic renderer

    fdfview-classic path/to/map.fdf

An alternate 1000×800 view on a dark background, with lines coloured by
height (`fdfview.classic.fade`) and a panel listing the commands. The window
is titled with the map path. `w`/`s` and `a`/`d` move the image by 20 px,
`r`/`f` increase or decrease the depth, `Esc` quits. Held keys repeat.

## Demo

    fdfview-demo

Opens a 1000×2080 window and draws a red square outline, to check that line
drawing works. Left and right mouse clicks print their position; `Esc` or
closing the window quits.

## As a library

The map loader, projection and rasteriser work without a window:

```python
from fdfview.mapfile import load_map
from fdfview.projection import View
from fdfview.raster import render

heightmap = load_map("map.fdf")
canvas = render(heightmap, View())
print(canvas.width, canvas.height, canvas.get_pixel(0, 0))
```

- `fdfview.mapfile`: `HeightMap`, `MapError`, `parse_color`,
  `map_dimensions`, `parse_map`, `load_map`.
- `fdfview.projection`: `View` (with `project`, `apply_key`,
  `apply_mouse`), `Point2D`, `image_bounds`, `center_offset`.
- `fdfview.raster`: `Canvas` (with `put_pixel`, `get_pixel`, `draw_line`,
  `rows`), `line_points`, `draw_map`, `render`.
- `fdfview.classic`: `ClassicView`, `fade`, `trace_line`, `render_classic`.
- `fdfview.demo`: `stepped_line`, `draw_square`.

The package also carries small helpers the viewer builds on: character
classes (`fdfview.chars`), integer parsing and formatting (`fdfview.numbers`),
string operations (`fdfview.strings`), writing to text streams
(`fdfview.output`), byte-buffer operations (`fdfview.memory`), a singly
linked list (`fdfview.linkedlist`), a `printf`-style formatter
(`fdfview.printf`) and a buffered line reader (`fdfview.linereader`).

## What it does not do

The viewer only shows maps on screen: it cannot save the rendered image to a
file, and it offers only the isometric projection. A `Canvas` holds colour
values in memory; turning it into an image file is left to the caller.