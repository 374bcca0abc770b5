"""
Exceptions raised by the retricon pipeline.

Every failure is reported before any image is produced; callers either
handle ``RetriconError`` or use the ``must_*`` wrappers in
``retricon.generator`` to abort.
"""


class RetriconError(Exception):
    """Base exception for identicon generation errors"""

    pass


class InvalidStyle(RetriconError, ValueError):
    """Unknown style preset name"""

    pass


class InvalidTileCount(RetriconError, ValueError):
    """Tile count must be at least 1"""

    pass


class InvalidTileSize(RetriconError, ValueError):
    """Tile size must be at least 1"""

    pass


class LengthExceeded(RetriconError, ValueError):
    """Requested fold length is larger than the SHA-512 digest"""

    pass


class Unhashable(RetriconError):
    """No seed byte produced a sample inside the fill window"""

    pass


class ColorIndexOutOfRange(RetriconError, IndexError):
    """Palette index outside the two derived colors, or no palette"""

    pass


class InvalidHexColor(RetriconError, ValueError):
    """Hex color string is too short or not hexadecimal"""

    pass


class InvalidColorBytes(RetriconError, ValueError):
    """Byte color sequence has fewer than three components"""

    pass


class InvalidPadding(RetriconError, ValueError):
    """Paddings leave no room for a canvas"""

    pass


class UnsupportedColorSpec(RetriconError, TypeError):
    """Value cannot be interpreted as a color specification"""

    pass
