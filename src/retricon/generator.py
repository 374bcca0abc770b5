"""
Identicon Generation

Ties the pipeline together:

    options -> id_hash (fixed_length_hash) -> fill_pixels -> parse_color -> render

``generate`` returns the grid and colors without touching pixels; ``new``
and ``new_with_options`` also render a Pillow image. All functions are pure
and safe to call concurrently.
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from PIL import Image

from .colors import RGBA, TRANSPARENT, PaletteIndex, as_color_spec, parse_color
from .config import DEFAULT_MAX_FILL, DEFAULT_MIN_FILL, get_logger, log
from .errors import InvalidPadding, InvalidTileCount, InvalidTileSize, RetriconError
from .grid import Grid, SymmetryMode, fill_pixels, grid_to_text, required_bits, symmetry_mode
from .render import render
from .search import id_hash
from .styles import Options, Style, apply_style

_logger = get_logger("generator")


@dataclass(frozen=True)
class Identicon:
    """Generated grid plus the resolved colors and the options used."""

    key: str
    grid: Grid
    background: RGBA
    foreground: RGBA
    mode: SymmetryMode
    options: Options
    palette: Tuple[RGBA, ...] = ()

    @property
    def dimension(self) -> int:
        return len(self.grid)

    @property
    def canvas_size(self) -> int:
        return self.options.canvas_size

    def render(self) -> Image.Image:
        return render(self.grid, self.options, self.background, self.foreground)

    def to_text(self, on: str = "█", off: str = "·") -> str:
        return grid_to_text(self.grid, on, off)


def generate(key: str, options: Optional[Options] = None) -> Identicon:
    """
    Derive an identicon grid and its colors from ``key``.

    Args:
        key: Any text, including the empty string
        options: Generation options (base defaults when omitted)

    Returns:
        Identicon with a ``tile_count`` x ``tile_count`` grid

    Raises:
        InvalidTileCount: tile_count < 1 (checked before hashing)
        InvalidTileSize: tile_size < 1 (checked before hashing)
        InvalidPadding: Paddings shrink the canvas below 1px (checked before hashing)
        Unhashable: No seed byte gave an acceptable fill ratio
        LengthExceeded: The grid needs more bits than the digest provides
        ColorIndexOutOfRange, InvalidHexColor, InvalidColorBytes,
        UnsupportedColorSpec: A color option could not be resolved
    """
    options = options or Options()
    if options.tile_count < 1:
        raise InvalidTileCount("tiles must be greater than 0")
    if options.tile_size < 1:
        raise InvalidTileSize("tile size must be greater than 0")
    if options.canvas_size < 1:
        raise InvalidPadding(
            f"padding leaves a canvas of {options.canvas_size}px, it must be at least 1px"
        )

    # Non-positive fill bounds fall back to the defaults
    options = replace(
        options,
        min_fill=options.min_fill if options.min_fill > 0 else DEFAULT_MIN_FILL,
        max_fill=options.max_fill if options.max_fill > 0 else DEFAULT_MAX_FILL,
    )

    tile_spec = as_color_spec(options.tile_color)
    background_spec = as_color_spec(options.background_color)
    use_colors = isinstance(tile_spec, PaletteIndex) or isinstance(
        background_spec, PaletteIndex
    )

    dimension = options.tile_count
    mode = symmetry_mode(options.vertical_symmetry, options.horizontal_symmetry)
    length = required_bits(dimension, mode)
    log(_logger, "debug", "generating", mode=mode.value, bits=length, colors=use_colors)

    raw = id_hash(key, length, options.min_fill, options.max_fill, use_colors)
    grid = fill_pixels(raw.pixels, dimension, mode)

    palette = raw.colors or None
    background = TRANSPARENT if background_spec is None else parse_color(background_spec, palette)
    foreground = TRANSPARENT if tile_spec is None else parse_color(tile_spec, palette)

    return Identicon(
        key=key,
        grid=grid,
        background=background,
        foreground=foreground,
        mode=mode,
        options=options,
        palette=raw.colors,
    )


def new_with_options(key: str, options: Options) -> Image.Image:
    """Generate and render an identicon with explicit options."""
    return generate(key, options).render()


def new(key: str, style: Union[str, Style] = Style.DEFAULT) -> Image.Image:
    """Generate and render an identicon using a style preset."""
    return new_with_options(key, apply_style(style))


def must_new(key: str, style: Union[str, Style] = Style.DEFAULT) -> Image.Image:
    """Like ``new`` but aborts with RuntimeError on any generation error."""
    try:
        return new(key, style)
    except RetriconError as e:
        raise RuntimeError(f"identicon generation failed: {e}") from e


def must_new_with_options(key: str, options: Options) -> Image.Image:
    """Like ``new_with_options`` but aborts with RuntimeError on any error."""
    try:
        return new_with_options(key, options)
    except RetriconError as e:
        raise RuntimeError(f"identicon generation failed: {e}") from e
