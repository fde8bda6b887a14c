"""Isometric wireframe viewer for FdF height-map files, with its map loader,
projection, rasteriser and small text and buffer helpers."""

__version__ = "0.1.0"