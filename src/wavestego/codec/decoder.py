"""Recover a length-prefixed payload from an encoded carrier."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import BITS_IN_BYTE, WaveCfg, resolve_cfg
from ..exceptions import TruncatedMessageError
from .bits import bits_to_bytes, bits_to_value
from .carrier import Carrier
from .sample import extract_bits

logger = logging.getLogger(__name__)


def read_length_prefix(wave: Carrier) -> int:
    """Return the payload bit count stored in the leading samples of *wave*."""

    cfg = wave.cfg
    if wave.sample_count < cfg.prefix_bits:
        raise TruncatedMessageError(
            declared_bits=cfg.prefix_bits,
            available_bits=wave.sample_count,
            reason=(
                f"carrier has {wave.sample_count} samples, too few for the "
                f"{cfg.prefix_bits}-bit length prefix"
            ),
        )
    return bits_to_value(extract_bits(wave.samples(0, cfg.prefix_bits)[:, 0]))


def decode(encoded: bytes, *, cfg: Optional[WaveCfg] = None) -> bytes:
    """Extract the payload hidden in *encoded* by :func:`~wavestego.codec.encoder.encode`.

    Raises:
        InvalidCarrierError: If the buffer is shorter than the header.
        TruncatedMessageError: If the prefix cannot be read, is not a whole
            number of bytes, or claims more bits than the body holds.
    """

    cfg = resolve_cfg(cfg)
    wave = Carrier.from_bytes(encoded, cfg)
    wave.check_consistency()

    message_bits = read_length_prefix(wave)
    available = wave.sample_count - cfg.prefix_bits
    if message_bits % BITS_IN_BYTE:
        raise TruncatedMessageError(
            declared_bits=message_bits,
            available_bits=available,
            reason=f"declared message length of {message_bits} bits is not byte aligned",
        )
    if message_bits > available:
        raise TruncatedMessageError(declared_bits=message_bits, available_bits=available)

    logger.debug("extracting %d message bits after the length prefix", message_bits)

    bits = extract_bits(wave.samples(cfg.prefix_bits, message_bits)[:, 0])
    return bits_to_bytes(bits)


__all__ = ["decode", "read_length_prefix"]
