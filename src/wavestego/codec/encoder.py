"""Embed a length-prefixed payload into the samples of a carrier."""

from __future__ import annotations

import logging
from typing import Optional

from bitarray import bitarray

from ..config import BITS_IN_BYTE, WaveCfg, resolve_cfg
from ..exceptions import CarrierTooSmallError, PayloadTooLargeError
from .bits import bits_of, bytes_to_bits
from .carrier import Carrier
from .sample import embed_bits

logger = logging.getLogger(__name__)


def _payload_bits(payload: bytes, cfg: WaveCfg) -> int:
    bit_count = len(payload) * BITS_IN_BYTE
    if bit_count > cfg.max_payload_bits:
        raise PayloadTooLargeError(payload_bits=bit_count, max_bits=cfg.max_payload_bits)
    return bit_count


def build_frame(payload: bytes, cfg: Optional[WaveCfg] = None) -> bitarray:
    """Return the prefix bits (payload bit count) followed by the payload bits."""

    cfg = resolve_cfg(cfg)
    payload = bytes(payload)
    frame = bits_of(_payload_bits(payload, cfg), cfg.prefix_bits)
    frame.extend(bytes_to_bits(payload))
    return frame


def required_carrier_size(payload_len: int, cfg: Optional[WaveCfg] = None) -> int:
    """Smallest carrier, header included, able to hold *payload_len* bytes."""

    cfg = resolve_cfg(cfg)
    if payload_len < 0:
        raise ValueError("payload_len must be non-negative")
    frame_bits = cfg.prefix_bits + payload_len * BITS_IN_BYTE
    return cfg.header_size + frame_bits * cfg.bytes_per_sample


def encode(carrier: bytes, payload: bytes, *, cfg: Optional[WaveCfg] = None) -> bytes:
    """Hide *payload* in *carrier* and return the encoded wave bytes.

    The output has the carrier's length: the header is copied verbatim, one
    frame bit goes into the first byte of each leading sample and everything
    after the frame is passed through unchanged.

    Raises:
        InvalidCarrierError: If the carrier is shorter than the header.
        PayloadTooLargeError: If the payload bit count overflows the prefix.
        CarrierTooSmallError: If the body has too few samples for the frame.
    """

    cfg = resolve_cfg(cfg)
    wave = Carrier.from_bytes(carrier, cfg)
    wave.check_consistency()

    frame = build_frame(payload, cfg)
    region = len(frame) * cfg.bytes_per_sample
    if region > len(wave.body):
        raise CarrierTooSmallError(required=region, available=len(wave.body))

    logger.debug(
        "embedding %d frame bits into %d of %d samples", len(frame), len(frame), wave.sample_count
    )

    samples = wave.samples(0, len(frame)).copy()
    samples[:, 0] = embed_bits(samples[:, 0], frame)
    return wave.header + samples.tobytes() + wave.body[region:]


__all__ = ["build_frame", "encode", "required_carrier_size"]
