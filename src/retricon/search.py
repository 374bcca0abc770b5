"""
Candidate Search

Finds a hash sample whose bit density is inside the requested fill window.
The key is hashed together with a trailing seed byte; whenever the fill
ratio of the extracted bits falls outside ``(min_fill, max_fill)`` the seed
byte is incremented and the digest recomputed, for at most 256 attempts.

When colors are requested the first six folded bytes become two opaque
RGB colors, ordered darker first by perceived brightness, and the pixel
bits are read from the bytes after them.
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

from .colors import RGBA
from .config import COLOR_BYTES, SEED_SEARCH_SPACE, get_logger, log
from .digest import fixed_length_hash
from .errors import Unhashable

_logger = get_logger("search")


@dataclass(frozen=True)
class RawSample:
    """Accepted hash sample: pixel bits plus an optional two-color palette."""

    pixels: Tuple[bool, ...]
    colors: Tuple[RGBA, ...] = ()

    @property
    def set_pixels(self) -> int:
        return sum(self.pixels)

    @property
    def fill_ratio(self) -> float:
        return self.set_pixels / len(self.pixels)


def brightness(r: int, g: int, b: int) -> float:
    """Perceived brightness of an RGB color (HSP weighting)."""
    return math.sqrt(0.241 * r * r + 0.691 * g * g + 0.068 * b * b)


def bits_from_bytes(data: bytes, num_bits: int) -> List[bool]:
    """Read ``num_bits`` bits from ``data``, most significant bit first."""
    bits = []
    for byte in data:
        for offset in range(7, -1, -1):
            if len(bits) == num_bits:
                return bits
            bits.append(bool((byte >> offset) & 1))
    return bits


def seeded_input(key: str, seed: int) -> bytes:
    """Digest input for ``key`` at a given seed byte: key, space, seed."""
    return key.encode("utf-8") + b" " + bytes([seed])


def id_hash(
    key: str,
    length: int,
    min_fill: float,
    max_fill: float,
    use_colors: bool = False,
) -> RawSample:
    """
    Search the single-byte seed space for a sample within the fill window.

    Args:
        key: Text the identicon is derived from (may be empty)
        length: Number of pixel bits required
        min_fill: Exclusive lower bound on the fraction of set bits
        max_fill: Exclusive upper bound on the fraction of set bits
        use_colors: Also derive a two-color palette from the hash

    Returns:
        The first accepted RawSample

    Raises:
        Unhashable: If none of the 256 seed bytes yields an accepted sample
        LengthExceeded: If the bit length needs more than 64 folded bytes
    """
    if length < 1:
        raise ValueError("Bit length must be positive")

    needed_bytes = math.ceil(length / 8)
    if use_colors:
        needed_bytes += COLOR_BYTES

    for seed in range(SEED_SEARCH_SPACE):
        fp = fixed_length_hash(seeded_input(key, seed), needed_bytes)

        colors: Tuple[RGBA, ...] = ()
        if use_colors:
            dark = RGBA(fp[0], fp[1], fp[2], 255)
            light = RGBA(fp[3], fp[4], fp[5], 255)

            # Sort colors by brightness
            if brightness(dark.r, dark.g, dark.b) > brightness(
                light.r, light.g, light.b
            ):
                dark, light = light, dark

            colors = (dark, light)
            fp = fp[COLOR_BYTES:]

        pixels = bits_from_bytes(fp, length)
        fill_ratio = sum(pixels) / length

        if min_fill < fill_ratio < max_fill:
            log(_logger, "debug", "sample accepted", seed=seed, fill=f"{fill_ratio:.3f}")
            return RawSample(pixels=tuple(pixels), colors=colors)

        log(_logger, "debug", "sample rejected", seed=seed, fill=f"{fill_ratio:.3f}")

    log(_logger, "warning", "seed space exhausted", length=length)
    raise Unhashable("string unhashable in single-byte search space")
