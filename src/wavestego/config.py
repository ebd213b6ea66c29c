"""Carrier layout configuration."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

from .exceptions import ConfigurationError

WAVE_HEADER_SIZE = 44
"""Number of bytes in a canonical WAV file before the sample data begins."""

BIT_COUNT_PREFIX_SIZE = 32
"""Number of bits reserved for the message length."""

BITS_IN_BYTE = 8

WAVE_BIT_DEPTH = 16
"""Bits per wave sample; must be a multiple of eight."""

BYTES_PER_SAMPLE = WAVE_BIT_DEPTH // BITS_IN_BYTE

_MAX_PREFIX_BITS = 63


@dataclass(frozen=True)
class WaveCfg:
    """Fixed layout assumptions for carrier buffers.

    The sample width is never read from the carrier header; ``strict`` only
    controls whether a header that disagrees with these assumptions is
    rejected or merely logged.
    """

    header_size: int = WAVE_HEADER_SIZE
    bit_depth: int = WAVE_BIT_DEPTH
    prefix_bits: int = BIT_COUNT_PREFIX_SIZE
    strict: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.header_size, int) or self.header_size < 0:
            raise ConfigurationError("'header_size' must be a non-negative integer")
        if (
            not isinstance(self.bit_depth, int)
            or self.bit_depth <= 0
            or self.bit_depth % BITS_IN_BYTE
        ):
            raise ConfigurationError("'bit_depth' must be a positive multiple of 8")
        if not isinstance(self.prefix_bits, int) or not 1 <= self.prefix_bits <= _MAX_PREFIX_BITS:
            raise ConfigurationError(f"'prefix_bits' must be between 1 and {_MAX_PREFIX_BITS}")

    @property
    def bytes_per_sample(self) -> int:
        return self.bit_depth // BITS_IN_BYTE

    @property
    def prefix_region(self) -> int:
        """Number of body bytes occupied by the length prefix."""
        return self.prefix_bits * self.bytes_per_sample

    @property
    def max_payload_bits(self) -> int:
        return (1 << self.prefix_bits) - 1

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "WaveCfg":
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigurationError("wave configuration must be a mapping")
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**dict(data))


DEFAULT_CFG = WaveCfg()


def resolve_cfg(cfg: Optional[WaveCfg]) -> WaveCfg:
    if cfg is None:
        return DEFAULT_CFG
    if not isinstance(cfg, WaveCfg):
        raise ConfigurationError("cfg must be a WaveCfg instance")
    return cfg


__all__ = [
    "BITS_IN_BYTE",
    "BIT_COUNT_PREFIX_SIZE",
    "BYTES_PER_SAMPLE",
    "DEFAULT_CFG",
    "WAVE_BIT_DEPTH",
    "WAVE_HEADER_SIZE",
    "WaveCfg",
    "resolve_cfg",
]
