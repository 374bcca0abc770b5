"""Unit tests for color specification parsing and resolution."""

import pytest

from retricon.colors import (
    RGBA,
    TRANSPARENT,
    ColorBytes,
    HexColor,
    PaletteIndex,
    as_color_spec,
    parse_color,
)
from retricon.errors import (
    ColorIndexOutOfRange,
    InvalidColorBytes,
    InvalidHexColor,
    UnsupportedColorSpec,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, None),
        (0, PaletteIndex(0)),
        (1, PaletteIndex(1)),
        ("FF0000", HexColor("FF0000")),
        (RGBA(1, 2, 3, 4), RGBA(1, 2, 3, 4)),
        (b"\x01\x02\x03", ColorBytes((1, 2, 3))),
        ([1, 2, 3, 4], ColorBytes((1, 2, 3, 4))),
        ((9, 8, 7), ColorBytes((9, 8, 7))),
        (HexColor("abcdef"), HexColor("abcdef")),
    ],
)
def test_as_color_spec(value, expected):
    """Test that loose values map to the matching color variant."""
    assert as_color_spec(value) == expected


@pytest.mark.parametrize("value", [1.5, True, object(), {"r": 1}])
def test_as_color_spec_rejects_unknown_types(value):
    """Test that values of other types are refused."""
    with pytest.raises(UnsupportedColorSpec):
        as_color_spec(value)


def test_palette_index(palette):
    """Test selecting both palette entries by index."""
    assert parse_color(PaletteIndex(0), palette) == palette[0]
    assert parse_color(1, palette) == palette[1]


def test_palette_index_out_of_range(palette):
    """Test that indices other than 0 and 1 are rejected."""
    with pytest.raises(ColorIndexOutOfRange):
        parse_color(2, palette)
    with pytest.raises(ColorIndexOutOfRange):
        parse_color(-1, palette)


def test_palette_index_without_palette():
    """Test that a palette index needs a palette."""
    with pytest.raises(ColorIndexOutOfRange):
        parse_color(0, None)
    with pytest.raises(ColorIndexOutOfRange):
        parse_color(0, ())


def test_hex_color():
    """Test decoding upper and lower case hex colors as opaque RGBA."""
    assert parse_color("FF0000") == RGBA(255, 0, 0, 255)
    assert parse_color("00ff7f") == RGBA(0, 255, 127, 255)


def test_hex_color_ignores_extra_characters():
    """Test that characters after the sixth are ignored."""
    assert parse_color("F0F0F0zz") == RGBA(240, 240, 240, 255)
    assert parse_color("12345678") == RGBA(0x12, 0x34, 0x56, 255)


@pytest.mark.parametrize("value", ["FF00", "", "12345"])
def test_hex_color_too_short(value):
    """Test that hex strings under six characters are rejected."""
    with pytest.raises(InvalidHexColor):
        parse_color(value)


@pytest.mark.parametrize("value", ["GG0000", "#FF000", "FF 000", "+F0000"])
def test_hex_color_not_hex(value):
    """Test that non-hex characters in the color are rejected."""
    with pytest.raises(InvalidHexColor):
        parse_color(value)


def test_rgba_unchanged():
    """Test that an explicit RGBA is returned as is."""
    color = RGBA(1, 2, 3, 4)
    assert parse_color(color) is color


def test_color_bytes():
    """Test raw components with and without alpha."""
    assert parse_color(b"\xff\x00\x00") == RGBA(255, 0, 0, 255)
    assert parse_color(bytes([0, 255, 0, 128])) == RGBA(0, 255, 0, 128)
    assert parse_color([1, 2, 3, 4, 5]) == RGBA(1, 2, 3, 4)


def test_color_bytes_too_short():
    """Test that fewer than three components are rejected."""
    with pytest.raises(InvalidColorBytes):
        parse_color(b"\x01\x02")
    with pytest.raises(InvalidColorBytes):
        parse_color(ColorBytes(()))


def test_color_bytes_out_of_range():
    """Test that components above 255 are rejected."""
    with pytest.raises(InvalidColorBytes):
        parse_color([256, 0, 0])


def test_unknown_type_is_an_error():
    """Test that parse_color refuses unknown types instead of going transparent."""
    with pytest.raises(UnsupportedColorSpec):
        parse_color(3.0)


def test_hex_of_rgba():
    """Test RGBA hex formatting and the transparent constant."""
    assert RGBA(255, 16, 1).hex() == "FF1001"
    assert TRANSPARENT == RGBA(0, 0, 0, 0)


@pytest.mark.parametrize("color", [RGBA(300, 0, 0), RGBA(0, -1, 0), RGBA(0, 0, 0, 256)])
def test_rgba_out_of_range(color):
    """Test that explicit RGBA channels outside 0..255 are rejected."""
    with pytest.raises(InvalidColorBytes):
        parse_color(color)
