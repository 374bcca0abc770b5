"""Unit tests for SHA-512 digest folding."""

import hashlib

import pytest

from retricon.digest import fixed_length_hash
from retricon.errors import LengthExceeded, RetriconError


def reference_fold(buf: bytes, length: int) -> bytes:
    """Zero-pad the digest to a multiple of length and XOR the chunks."""
    digest = hashlib.sha512(buf).digest()
    if len(digest) % length:
        digest += b"\x00" * (length - len(digest) % length)
    result = bytearray(length)
    for i in range(0, len(digest), length):
        for j, b in enumerate(digest[i : i + length]):
            result[j] ^= b
    return bytes(result)


def test_full_length_returns_raw_digest():
    """Folding to 64 bytes is the digest itself."""
    assert fixed_length_hash(b"test", 64) == hashlib.sha512(b"test").digest()


def test_fold_is_deterministic():
    """The same input and length always fold to the same bytes."""
    buf = b"test " + bytes([0])
    first = fixed_length_hash(buf, 8)
    for _ in range(5):
        assert fixed_length_hash(buf, 8) == first


def test_fold_halves_xor():
    """Folding to 32 bytes XORs the two halves of the digest."""
    digest = hashlib.sha512(b"halves").digest()
    expected = bytes(a ^ b for a, b in zip(digest[:32], digest[32:]))
    assert fixed_length_hash(b"halves", 32) == expected


@pytest.mark.parametrize("length", [1, 2, 3, 5, 6, 7, 8, 9, 13, 21, 33, 50, 63, 64])
def test_fold_matches_reference(length):
    """Lengths that do not divide 64 behave like zero-padded chunks."""
    buf = b"retricon"
    result = fixed_length_hash(buf, length)
    assert len(result) == length
    assert result == reference_fold(buf, length)


def test_different_inputs_fold_differently():
    """Test that distinct inputs give distinct folds."""
    assert fixed_length_hash(b"test1", 16) != fixed_length_hash(b"test2", 16)


def test_length_exceeded():
    """Test that more than 64 bytes cannot be requested."""
    with pytest.raises(LengthExceeded):
        fixed_length_hash(b"test", 65)


def test_length_exceeded_is_retricon_error():
    """Test that the length error is catchable as RetriconError."""
    with pytest.raises(RetriconError):
        fixed_length_hash(b"test", 100)


def test_zero_length_rejected():
    """Test that a zero-length fold is rejected."""
    with pytest.raises(ValueError):
        fixed_length_hash(b"test", 0)
