"""
Options and Style Presets

``Options`` holds every parameter of a generation run. Style presets are
named sets of overrides applied on top of the base defaults:

- default: 5 tiles of 1px, vertical symmetry, palette color on transparent
- github: 5 large tiles on light gray, slightly overlapping
- gravatar: 8 tiles on the lighter palette color
- mono: 6 black tiles on light gray
- mosaic: 16px tiles with 1px gaps on light gray
- mini: 3x3 unmirrored, light tiles on the dark palette color
- window: white tiles on the dark palette color
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Dict, Optional, Union

from .colors import RGBA, ColorSpec, HexColor, PaletteIndex
from .config import DEFAULT_MAX_FILL, DEFAULT_MIN_FILL
from .errors import InvalidStyle


class Style(str, Enum):
    DEFAULT = "default"
    GITHUB = "github"
    GRAVATAR = "gravatar"
    MONO = "mono"
    MOSAIC = "mosaic"
    MINI = "mini"
    WINDOW = "window"


@dataclass(frozen=True)
class Options:
    """Configuration for a single identicon."""

    tile_count: int = 5
    tile_size: int = 1
    tile_color: Optional[ColorSpec] = PaletteIndex(0)
    background_color: Optional[ColorSpec] = None
    tile_padding: int = 0
    image_padding: int = 0
    min_fill: float = DEFAULT_MIN_FILL
    max_fill: float = DEFAULT_MAX_FILL
    vertical_symmetry: bool = True
    horizontal_symmetry: bool = False

    @property
    def tile_width(self) -> int:
        """Tile size plus padding on both sides."""
        return self.tile_size + self.tile_padding * 2

    @property
    def canvas_size(self) -> int:
        """Side length of the rendered square image."""
        return self.tile_width * self.tile_count + self.image_padding * 2


@dataclass(frozen=True)
class StyleDefinition:
    """Named preset: the option overrides plus a short description."""

    style: Style
    description: str
    overrides: Dict[str, Any] = field(default_factory=dict)


LIGHT_GRAY = HexColor("F0F0F0")

# Preset definitions - single source of truth
STYLE_PRESETS: Dict[Style, StyleDefinition] = {
    Style.DEFAULT: StyleDefinition(Style.DEFAULT, "Base defaults, 5x5 with 1px tiles"),
    Style.GITHUB: StyleDefinition(
        Style.GITHUB,
        "GitHub-like 5x5 on light gray",
        {
            "tile_size": 70,
            "background_color": LIGHT_GRAY,
            "tile_padding": -1,
            "image_padding": 35,
            "tile_count": 5,
            "vertical_symmetry": True,
            "horizontal_symmetry": False,
        },
    ),
    Style.GRAVATAR: StyleDefinition(
        Style.GRAVATAR,
        "Gravatar-like 8x8 on the light palette color",
        {
            "background_color": PaletteIndex(1),
            "tile_count": 8,
            "vertical_symmetry": True,
            "horizontal_symmetry": False,
        },
    ),
    Style.MONO: StyleDefinition(
        Style.MONO,
        "Black 6x6 tiles on light gray",
        {
            "background_color": LIGHT_GRAY,
            "tile_color": HexColor("000000"),
            "tile_count": 6,
            "tile_size": 12,
            "tile_padding": -1,
            "image_padding": 6,
            "vertical_symmetry": True,
            "horizontal_symmetry": False,
        },
    ),
    Style.MOSAIC: StyleDefinition(
        Style.MOSAIC,
        "Separated 16px tiles on light gray",
        {
            "image_padding": 2,
            "tile_padding": 1,
            "tile_size": 16,
            "background_color": LIGHT_GRAY,
            "vertical_symmetry": True,
            "horizontal_symmetry": False,
        },
    ),
    Style.MINI: StyleDefinition(
        Style.MINI,
        "Unmirrored 3x3, light palette color on dark",
        {
            "tile_size": 10,
            "tile_padding": 1,
            "tile_count": 3,
            "background_color": PaletteIndex(0),
            "tile_color": PaletteIndex(1),
            "vertical_symmetry": False,
            "horizontal_symmetry": False,
        },
    ),
    Style.WINDOW: StyleDefinition(
        Style.WINDOW,
        "White tiles on the dark palette color",
        {
            "tile_color": RGBA(255, 255, 255, 255),
            "background_color": PaletteIndex(0),
            "image_padding": 2,
            "tile_padding": 1,
            "tile_size": 16,
            "vertical_symmetry": True,
            "horizontal_symmetry": False,
        },
    ),
}


def resolve_style(style: Union[str, Style]) -> Style:
    """
    Resolve a style name to a Style.

    Raises:
        InvalidStyle: If the name is not a known preset
    """
    try:
        return Style(style)
    except ValueError:
        raise InvalidStyle(
            f"Unknown style '{style}'. Valid styles: {[s.value for s in Style]}"
        )


def apply_style(style: Union[str, Style], options: Optional[Options] = None) -> Options:
    """
    Return ``options`` (or the base defaults) with a preset's overrides applied.

    Raises:
        InvalidStyle: If the name is not a known preset
    """
    definition = STYLE_PRESETS[resolve_style(style)]
    return replace(options or Options(), **definition.overrides)


def get_style_info(style: Union[str, Style]) -> Dict[str, Any]:
    """
    Get information about a style preset.

    Args:
        style: Style name or Style

    Returns:
        Dictionary with the preset's resolved options and canvas size
    """
    definition = STYLE_PRESETS[resolve_style(style)]
    options = apply_style(definition.style)

    return {
        "style": definition.style.value,
        "description": definition.description,
        "options": {f.name: getattr(options, f.name) for f in fields(options)},
        "overrides": sorted(definition.overrides),
        "canvas_size": options.canvas_size,
    }


def get_available_styles() -> Dict[str, Dict[str, Any]]:
    """
    Get information about all style presets.

    Returns:
        Dictionary mapping style names to style information
    """
    return {style.value: get_style_info(style) for style in Style}
