"""Bit-level codec for hiding payloads in 16-bit PCM samples."""

from .bits import bits_of, bits_to_bytes, bits_to_value, bytes_to_bits
from .carrier import Carrier, WaveHeaderInfo, inspect_header
from .decoder import decode, read_length_prefix
from .encoder import build_frame, encode, required_carrier_size
from .sample import embed_bits, extract_bits, force_even, force_odd, is_even

__all__ = [
    "Carrier",
    "WaveHeaderInfo",
    "bits_of",
    "bits_to_bytes",
    "bits_to_value",
    "build_frame",
    "bytes_to_bits",
    "decode",
    "embed_bits",
    "encode",
    "extract_bits",
    "force_even",
    "force_odd",
    "inspect_header",
    "is_even",
    "read_length_prefix",
    "required_carrier_size",
]
