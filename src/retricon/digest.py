"""
Fixed-length Digest Folding

Stretches or compresses a SHA-512 digest to an arbitrary byte length by
XOR-folding equal-sized segments of its hex encoding.

Algorithm Overview:
1. Hash the input with SHA-512 and hex encode it (128 characters)
2. Right-pad the hex string with '0' up to a multiple of ``length * 2``
3. Split it into ``length * 2`` character segments
4. XOR every segment into the first one, byte by byte

This is a distribution primitive for picking pixels and colors, not a
cryptographic construction.
"""

import hashlib

from .config import DIGEST_SIZE
from .errors import LengthExceeded


def fixed_length_hash(buf: bytes, length: int) -> bytes:
    """
    Fold the SHA-512 digest of ``buf`` down to ``length`` bytes.

    Args:
        buf: Data to hash
        length: Number of bytes to return (1..64)

    Returns:
        ``length`` bytes derived from the digest

    Raises:
        LengthExceeded: If more bytes are requested than SHA-512 provides
        ValueError: If length is not positive

    Examples:
        >>> len(fixed_length_hash(b"test \\x00", 8))
        8
    """
    if length > DIGEST_SIZE:
        raise LengthExceeded(f"sha512 can only generate {DIGEST_SIZE}B of data")
    if length < 1:
        raise ValueError("Fold length must be positive")

    hex_str = hashlib.sha512(buf).hexdigest()

    hex_length = length * 2
    if len(hex_str) % hex_length != 0:
        hex_str += "0" * (hex_length - len(hex_str) % hex_length)

    result = bytearray.fromhex(hex_str[:hex_length])
    for i in range(hex_length, len(hex_str), hex_length):
        segment = bytes.fromhex(hex_str[i : i + hex_length])
        for j in range(min(length, len(segment))):
            result[j] ^= segment[j]

    return bytes(result)
