"""Hide binary payloads in the least significant bits of 16-bit PCM WAV files."""

from .codec import decode, encode
from .config import DEFAULT_CFG, WaveCfg
from .exceptions import (
    CarrierError,
    CarrierTooSmallError,
    ConfigurationError,
    InvalidCarrierError,
    PayloadTooLargeError,
    TruncatedMessageError,
    WaveStegoError,
)

__all__ = [
    "CarrierError",
    "CarrierTooSmallError",
    "ConfigurationError",
    "DEFAULT_CFG",
    "InvalidCarrierError",
    "PayloadTooLargeError",
    "TruncatedMessageError",
    "WaveCfg",
    "WaveStegoError",
    "decode",
    "encode",
]
