"""
Retricon - deterministic identicons from text keys

This library derives a small square glyph from an arbitrary string: the
same key always gives a pixel-identical image, different keys give
visually distinct images with high probability. It is meant for default
avatars and identity glyphs that need no stored state.

Pipeline:
- fixed_length_hash: fold a SHA-512 digest to the number of bytes needed
- id_hash: search seed bytes 0..255 until the bit density is acceptable
- fill_pixels: mirror the raw bits into a square grid
- parse_color: resolve palette indices, hex strings and raw components
- render: paint the grid with Pillow

Example Usage:
    from retricon import generate, new, Options

    image = new("alice@example.com", "github")
    image.save("alice.png")

    icon = generate("alice", Options(tile_count=7, horizontal_symmetry=True))
    print(icon.to_text())
"""

from .colors import (
    RGBA,
    TRANSPARENT,
    ColorBytes,
    ColorSpec,
    HexColor,
    PaletteIndex,
    as_color_spec,
    parse_color,
)
from .digest import fixed_length_hash
from .errors import (
    ColorIndexOutOfRange,
    InvalidColorBytes,
    InvalidHexColor,
    InvalidPadding,
    InvalidStyle,
    InvalidTileCount,
    InvalidTileSize,
    LengthExceeded,
    RetriconError,
    Unhashable,
    UnsupportedColorSpec,
)
from .generator import (
    Identicon,
    generate,
    must_new,
    must_new_with_options,
    new,
    new_with_options,
)
from .grid import Grid, SymmetryMode, fill_pixels, grid_to_text, required_bits, symmetry_mode
from .search import RawSample, brightness, id_hash
from .styles import (
    STYLE_PRESETS,
    Options,
    Style,
    apply_style,
    get_available_styles,
    get_style_info,
)

# Public API
__all__ = [
    # Generation
    "generate",
    "new",
    "new_with_options",
    "must_new",
    "must_new_with_options",
    "Identicon",
    # Options and presets
    "Options",
    "Style",
    "STYLE_PRESETS",
    "apply_style",
    "get_style_info",
    "get_available_styles",
    # Core algorithms
    "fixed_length_hash",
    "id_hash",
    "brightness",
    "RawSample",
    "fill_pixels",
    "required_bits",
    "symmetry_mode",
    "grid_to_text",
    "SymmetryMode",
    "Grid",
    # Colors
    "RGBA",
    "TRANSPARENT",
    "ColorSpec",
    "PaletteIndex",
    "HexColor",
    "ColorBytes",
    "as_color_spec",
    "parse_color",
    # Errors
    "RetriconError",
    "InvalidStyle",
    "InvalidTileCount",
    "InvalidTileSize",
    "LengthExceeded",
    "Unhashable",
    "ColorIndexOutOfRange",
    "InvalidHexColor",
    "InvalidPadding",
    "InvalidColorBytes",
    "UnsupportedColorSpec",
]

__version__ = "0.1.0"
__author__ = "retricon team"
__description__ = "Deterministic symmetric identicons derived from text keys"
