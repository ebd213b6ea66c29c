"""Carrier buffers: header/body split, sample views and header inspection."""

from __future__ import annotations

import logging
import struct
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from ..config import BITS_IN_BYTE, WaveCfg, resolve_cfg
from ..exceptions import InvalidCarrierError

logger = logging.getLogger(__name__)

_CANONICAL_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")
PCM_FORMAT = 1


@dataclass(frozen=True)
class WaveHeaderInfo:
    """Fields of a canonical 44-byte RIFF/WAVE header."""

    audio_format: int
    channels: int
    sample_rate: int
    bits_per_sample: int
    data_size: int


def inspect_header(header: bytes) -> Optional[WaveHeaderInfo]:
    """Decode *header* as a canonical RIFF/WAVE header.

    Returns ``None`` when the bytes do not follow the canonical layout
    (``RIFF``/``WAVE`` magic, a ``fmt `` chunk followed directly by ``data``).
    """

    if len(header) != _CANONICAL_HEADER.size:
        return None
    (
        riff,
        _riff_size,
        wave,
        fmt_id,
        _fmt_size,
        audio_format,
        channels,
        sample_rate,
        _byte_rate,
        _block_align,
        bits_per_sample,
        data_id,
        data_size,
    ) = _CANONICAL_HEADER.unpack(header)
    if riff != b"RIFF" or wave != b"WAVE" or fmt_id != b"fmt " or data_id != b"data":
        return None
    return WaveHeaderInfo(
        audio_format=audio_format,
        channels=channels,
        sample_rate=sample_rate,
        bits_per_sample=bits_per_sample,
        data_size=data_size,
    )


@dataclass(frozen=True)
class Carrier:
    """An immutable wave buffer split into an opaque header and a sample body."""

    header: bytes
    body: bytes
    cfg: WaveCfg = field(default_factory=WaveCfg)

    @classmethod
    def from_bytes(cls, data: bytes, cfg: Optional[WaveCfg] = None) -> "Carrier":
        cfg = resolve_cfg(cfg)
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidCarrierError("carrier must be a bytes-like object")
        data = bytes(data)
        if len(data) < cfg.header_size:
            raise InvalidCarrierError(
                f"carrier is {len(data)} bytes, shorter than the {cfg.header_size}-byte header"
            )
        return cls(header=data[: cfg.header_size], body=data[cfg.header_size :], cfg=cfg)

    @property
    def sample_count(self) -> int:
        """Number of complete samples in the body."""
        return len(self.body) // self.cfg.bytes_per_sample

    @property
    def capacity_bits(self) -> int:
        return max(self.sample_count - self.cfg.prefix_bits, 0)

    @property
    def capacity_bytes(self) -> int:
        """Largest payload, in bytes, this carrier can hold."""
        capacity = self.capacity_bits // BITS_IN_BYTE
        return min(capacity, self.cfg.max_payload_bits // BITS_IN_BYTE)

    def samples(self, start: int, count: int) -> np.ndarray:
        """Return a read-only ``(count, bytes_per_sample)`` view of the body."""

        if start < 0 or count < 0 or start + count > self.sample_count:
            raise ValueError(
                f"samples [{start}, {start + count}) outside the {self.sample_count} available"
            )
        width = self.cfg.bytes_per_sample
        if count == 0:
            return np.empty((0, width), dtype=np.uint8)
        region = np.frombuffer(self.body, dtype=np.uint8, count=count * width, offset=start * width)
        return region.reshape(count, width)

    def check_consistency(self) -> List[str]:
        """Compare the header against the configured layout.

        Problems are logged as warnings and returned. With ``cfg.strict`` a
        header that disagrees with the configured layout raises
        :class:`InvalidCarrierError` instead.
        """

        problems: List[str] = []
        info = inspect_header(self.header) if self.cfg.header_size == _CANONICAL_HEADER.size else None
        if info is None:
            problems.append("header is not a canonical RIFF/WAVE header")
        else:
            if info.audio_format != PCM_FORMAT:
                problems.append(f"header declares audio format {info.audio_format}, expected PCM")
            if info.bits_per_sample != self.cfg.bit_depth:
                problems.append(
                    f"header declares {info.bits_per_sample}-bit samples, "
                    f"codec assumes {self.cfg.bit_depth}-bit"
                )
            if info.data_size != len(self.body):
                problems.append(
                    f"header declares {info.data_size} data bytes, body has {len(self.body)}"
                )

        if self.cfg.strict and problems:
            raise InvalidCarrierError("; ".join(problems))

        if len(self.body) % self.cfg.bytes_per_sample:
            problems.append("body ends with a partial sample, which is left untouched")

        for problem in problems:
            logger.warning("carrier: %s", problem)
        return problems


__all__ = ["Carrier", "PCM_FORMAT", "WaveHeaderInfo", "inspect_header"]
