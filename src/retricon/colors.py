"""
Color Resolution

A color specification is one of four variants:

- PaletteIndex(0|1): pick from the two colors derived from the key hash
- HexColor("RRGGBB"): opaque color from the first six hex digits
- RGBA(r, g, b, a): an explicit color, used unchanged
- ColorBytes((r, g, b[, a])): raw components, alpha defaults to opaque

``as_color_spec`` turns loose user values (ints, strings, tuples, bytes)
into one of the variants; ``parse_color`` resolves a variant to RGBA.
"""

import string
from dataclasses import dataclass
from typing import Any, NamedTuple, Optional, Sequence, Tuple, Union

from .errors import (
    ColorIndexOutOfRange,
    InvalidColorBytes,
    InvalidHexColor,
    UnsupportedColorSpec,
)

_HEX_DIGITS = frozenset(string.hexdigits)


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255

    def hex(self) -> str:
        return f"{self.r:02X}{self.g:02X}{self.b:02X}"


TRANSPARENT = RGBA(0, 0, 0, 0)


@dataclass(frozen=True)
class PaletteIndex:
    index: int


@dataclass(frozen=True)
class HexColor:
    value: str


@dataclass(frozen=True)
class ColorBytes:
    components: Tuple[int, ...]


ColorSpec = Union[PaletteIndex, HexColor, RGBA, ColorBytes]


def as_color_spec(value: Any) -> Optional[ColorSpec]:
    """
    Interpret a loose value as a color specification.

    ``None`` passes through (meaning "not set"). Integers select from the
    palette, strings are hex colors, RGBA is kept, and other byte-like
    sequences are raw components.

    Raises:
        UnsupportedColorSpec: For any other type
    """
    if value is None or isinstance(value, (PaletteIndex, HexColor, RGBA, ColorBytes)):
        return value
    if isinstance(value, bool):
        raise UnsupportedColorSpec("booleans are not color specifications")
    if isinstance(value, int):
        return PaletteIndex(value)
    if isinstance(value, str):
        return HexColor(value)
    if isinstance(value, (bytes, bytearray, list, tuple)):
        return ColorBytes(tuple(value))
    raise UnsupportedColorSpec(
        f"cannot use {type(value).__name__} as a color specification"
    )


def parse_color(spec: Any, palette: Optional[Sequence[RGBA]] = None) -> RGBA:
    """
    Resolve a color specification to a concrete RGBA value.

    Args:
        spec: A ColorSpec variant or a loose value accepted by as_color_spec
        palette: The two hash-derived colors, darker first, if available

    Returns:
        The resolved color

    Raises:
        ColorIndexOutOfRange: Palette index not 0/1, or no palette available
        InvalidHexColor: Fewer than 6 characters or non-hex digits
        InvalidColorBytes: Fewer than 3 components or a component outside 0..255
            (also raised for an RGBA with an out-of-range channel)
        UnsupportedColorSpec: Value of an unknown type (including None)
    """
    spec = as_color_spec(spec)

    if isinstance(spec, PaletteIndex):
        if not palette or not 0 <= spec.index < len(palette):
            raise ColorIndexOutOfRange(f"color index {spec.index} out of range")
        return palette[spec.index]

    if isinstance(spec, HexColor):
        value = spec.value
        if len(value) < 6:
            raise InvalidHexColor("hex color string must be at least 6 characters")
        if not all(c in _HEX_DIGITS for c in value[:6]):
            raise InvalidHexColor(f"invalid hex color {value!r}")
        return RGBA(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16), 255)

    if isinstance(spec, RGBA):
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in spec):
            raise InvalidColorBytes(f"RGBA components must be in 0..255, got {tuple(spec)}")
        return spec

    if isinstance(spec, ColorBytes):
        components = spec.components
        if len(components) < 3:
            raise InvalidColorBytes("color bytes must have at least 3 elements")
        try:
            channels = bytes(components[:4])
        except (TypeError, ValueError) as e:
            raise InvalidColorBytes(f"invalid color bytes {components!r}: {e}")
        alpha = channels[3] if len(channels) >= 4 else 255
        return RGBA(channels[0], channels[1], channels[2], alpha)

    raise UnsupportedColorSpec("no color specification given")
