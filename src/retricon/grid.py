"""
Grid Mapping

Expands a raw bit sequence into a square boolean grid under one of four
mirror-symmetry policies:

- NONE: every cell has its own bit (D*D bits)
- VERTICAL: the left half is mirrored onto the right half (D*mid bits)
- HORIZONTAL: the top half is mirrored onto the bottom half (D*mid bits)
- BOTH: one quadrant is mirrored both ways (mid*mid bits)

where ``mid = ceil(D / 2)``. For odd dimensions the center row/column is
not mirrored; even dimensions have no unmirrored center.
"""

import math
from enum import Enum
from typing import Sequence, Tuple

Grid = Tuple[Tuple[bool, ...], ...]


class SymmetryMode(str, Enum):
    NONE = "none"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    BOTH = "both"


def symmetry_mode(vertical: bool, horizontal: bool) -> SymmetryMode:
    """Map the pair of symmetry flags to a SymmetryMode."""
    if vertical and horizontal:
        return SymmetryMode.BOTH
    if vertical:
        return SymmetryMode.VERTICAL
    if horizontal:
        return SymmetryMode.HORIZONTAL
    return SymmetryMode.NONE


def required_bits(dimension: int, mode: SymmetryMode) -> int:
    """Number of raw bits needed to fill a ``dimension`` grid in ``mode``."""
    mid = math.ceil(dimension / 2)
    if mode is SymmetryMode.BOTH:
        return mid * mid
    if mode in (SymmetryMode.VERTICAL, SymmetryMode.HORIZONTAL):
        return dimension * mid
    return dimension * dimension


def _mirror_distance(col: int, mid: int, odd: bool) -> int:
    dist = mid - col
    if odd:
        dist -= 1
    return abs(dist)


def _source_index(row: int, col: int, dimension: int, mode: SymmetryMode) -> int:
    mid = math.ceil(dimension / 2)
    odd = dimension % 2 != 0

    if mode is SymmetryMode.NONE:
        return row * dimension + col

    if mode is SymmetryMode.HORIZONTAL:
        if row < mid:
            return row * dimension + col
        return (dimension - 1 - row) * dimension + col

    if col < mid:
        src_col = col
    else:
        src_col = mid - 1 - _mirror_distance(col, mid, odd)

    if mode is SymmetryMode.VERTICAL:
        return row * mid + src_col

    src_row = row if row < mid else dimension - 1 - row
    return src_row * mid + src_col


def fill_pixels(bits: Sequence[bool], dimension: int, mode: SymmetryMode) -> Grid:
    """
    Arrange raw bits into a ``dimension`` x ``dimension`` grid.

    Args:
        bits: Raw pixel bits, at least ``required_bits(dimension, mode)`` long
        dimension: Number of tiles per side
        mode: Mirror policy applied while expanding

    Returns:
        Tuple of rows, each a tuple of booleans

    Raises:
        ValueError: If dimension is not positive or too few bits are given
    """
    if dimension < 1:
        raise ValueError("Grid dimension must be positive")
    needed = required_bits(dimension, mode)
    if len(bits) < needed:
        raise ValueError(
            f"{mode.value} symmetry needs {needed} bits for a {dimension}x{dimension} grid, got {len(bits)}"
        )

    return tuple(
        tuple(
            bool(bits[_source_index(row, col, dimension, mode)])
            for col in range(dimension)
        )
        for row in range(dimension)
    )


def grid_to_text(grid: Grid, on: str = "█", off: str = "·") -> str:
    """Render a grid as lines of text, one line per row."""
    return "\n".join("".join(on if cell else off for cell in row) for row in grid)
