"""Conversions between bytes, integers and LSB-first bit sequences.

Bit ``i`` of an integer ``n`` is ``(n >> i) & 1``; e.g. ``[0, 1, 1, 1]``
reads as ``0b1110 == 14``. Every sequence returned here is a little-endian
:class:`bitarray.bitarray`, so index ``i`` is always bit ``i``.
"""

from __future__ import annotations

from typing import Iterable, Union

from bitarray import bitarray
from bitarray.util import ba2int, int2ba

from ..config import BITS_IN_BYTE

BitsLike = Union[bitarray, Iterable[int], Iterable[bool]]


def as_bits(bits: BitsLike) -> bitarray:
    out = bitarray(endian="little")
    out.extend(bits)
    return out


def bits_of(value: int, width: int = BITS_IN_BYTE) -> bitarray:
    """Return the ``width`` lowest bits of *value*, least significant first.

    Raises:
        ValueError: If *width* is not positive, or *value* is negative or
            needs more than *width* bits.
    """

    if width <= 0:
        raise ValueError("width must be positive")
    if value < 0:
        raise ValueError("value must be non-negative")
    if value >> width:
        raise ValueError(f"{value} does not fit in {width} bits")
    return int2ba(value, length=width, endian="little")


def bytes_to_bits(data: bytes) -> bitarray:
    """Concatenate the LSB-first bits of every byte of *data* in order."""

    bits = bitarray(endian="little")
    bits.frombytes(bytes(data))
    return bits


def bits_to_value(bits: BitsLike) -> int:
    """Inverse of :func:`bits_of`: sum of ``bit[i] << i``. Empty input is 0."""

    bits = as_bits(bits)
    if not len(bits):
        return 0
    return ba2int(bits)


def bits_to_bytes(bits: BitsLike) -> bytes:
    """Regroup *bits* into bytes, eight LSB-first bits per byte."""

    bits = as_bits(bits)
    if len(bits) % BITS_IN_BYTE:
        raise ValueError("bit stream is not byte aligned")
    return bits.tobytes()


__all__ = ["BitsLike", "as_bits", "bits_of", "bits_to_bytes", "bits_to_value", "bytes_to_bits"]
