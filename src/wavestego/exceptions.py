"""Custom exception hierarchy for the WAV steganography toolkit."""
from __future__ import annotations

from dataclasses import dataclass


class WaveStegoError(Exception):
    """Base class for all wavestego errors."""


class ConfigurationError(WaveStegoError):
    """Raised when codec configuration is invalid."""


class CarrierError(WaveStegoError):
    """Base class for problems with the carrier wave buffer."""


class InvalidCarrierError(CarrierError):
    """Raised when the carrier cannot be interpreted as a wave buffer."""


@dataclass
class CarrierTooSmallError(CarrierError):
    """Raised when the carrier body cannot hold the message frame."""

    required: int
    available: int

    def __str__(self) -> str:
        return (
            f"carrier body holds {self.available} bytes but the message frame "
            f"needs {self.required}"
        )


@dataclass
class TruncatedMessageError(CarrierError):
    """Raised when the embedded length prefix cannot be satisfied by the carrier."""

    declared_bits: int
    available_bits: int
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return self.reason
        return (
            f"carrier declares a {self.declared_bits}-bit message but only "
            f"{self.available_bits} bits can be read"
        )


@dataclass
class PayloadTooLargeError(WaveStegoError):
    """Raised when the payload bit count does not fit the length prefix."""

    payload_bits: int
    max_bits: int

    def __str__(self) -> str:
        return f"payload of {self.payload_bits} bits exceeds the {self.max_bits}-bit limit"


__all__ = [
    "CarrierError",
    "CarrierTooSmallError",
    "ConfigurationError",
    "InvalidCarrierError",
    "PayloadTooLargeError",
    "TruncatedMessageError",
    "WaveStegoError",
]
