"""
Raster rendering of identicon grids with Pillow.
"""

from typing import Tuple

from PIL import Image, ImageDraw

from .colors import RGBA
from .grid import Grid
from .styles import Options


def tile_origin(row: int, col: int, options: Options) -> Tuple[int, int]:
    """Top-left pixel (x, y) of the tile at ``row``, ``col``."""
    offset = options.tile_padding + options.image_padding
    return (
        col * options.tile_width + offset,
        row * options.tile_width + offset,
    )


def render(grid: Grid, options: Options, background: RGBA, foreground: RGBA) -> Image.Image:
    """
    Paint a grid onto a new RGBA canvas.

    The canvas is filled with ``background`` and every set cell becomes a
    ``tile_size`` square of ``foreground``. Tiles overwrite what is under
    them (no alpha blending), so negative padding produces overlapping
    tiles rather than darker seams.
    """
    size = options.canvas_size
    image = Image.new("RGBA", (size, size), tuple(background))
    draw = ImageDraw.Draw(image)

    for row, cells in enumerate(grid):
        for col, cell in enumerate(cells):
            if cell:
                x0, y0 = tile_origin(row, col, options)
                x1 = x0 + options.tile_size - 1
                y1 = y0 + options.tile_size - 1
                draw.rectangle((x0, y0, x1, y1), fill=tuple(foreground))

    return image
