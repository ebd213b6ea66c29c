"""Parity embedding on the first byte of each sample.

Flipping only the lowest bit changes a 16-bit sample by at most one unit.
Only the first byte of a sample is ever touched, so each sample carries
exactly one bit whatever byte order the carrier uses.
"""

from __future__ import annotations

import numpy as np
from bitarray import bitarray

from .bits import BitsLike, as_bits


def is_even(byte: int) -> bool:
    return (byte & 1) == 0


def force_even(byte: int) -> int:
    """Clear the lowest bit; embeds a 0."""
    return byte & 0xFE


def force_odd(byte: int) -> int:
    """Set the lowest bit; embeds a 1."""
    return byte | 1


def parity_bit(byte: int) -> int:
    return byte & 1


def embed_bits(first_bytes: np.ndarray, bits: BitsLike) -> np.ndarray:
    """Return a copy of *first_bytes* with each parity forced to the matching bit."""

    first_bytes = np.asarray(first_bytes, dtype=np.uint8)
    bits = as_bits(bits)
    if first_bytes.shape != (len(bits),):
        raise ValueError(
            f"expected {len(bits)} sample bytes for {len(bits)} bits, got shape {first_bytes.shape}"
        )
    if not len(bits):
        return first_bytes.copy()
    bit_values = np.frombuffer(bits.unpack(), dtype=np.uint8)
    return (first_bytes & np.uint8(0xFE)) | bit_values


def extract_bits(first_bytes: np.ndarray) -> bitarray:
    """Read one bit per sample byte: 1 when the byte is odd."""

    first_bytes = np.asarray(first_bytes, dtype=np.uint8)
    bits = bitarray(endian="little")
    bits.pack((first_bytes & np.uint8(1)).tobytes())
    return bits


__all__ = ["embed_bits", "extract_bits", "force_even", "force_odd", "is_even", "parity_bit"]
