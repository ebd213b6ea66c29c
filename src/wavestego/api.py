"""File level helpers wrapping the in-memory codec.

Paths are read whole, handed to the codec and the result written only once
the codec has succeeded, so a failed call never leaves a partial output
file behind. ``"-"`` stands for standard input or output.
"""

from __future__ import annotations

import logging
import sys
from os import PathLike
from pathlib import Path
from typing import Optional, Union

from .codec import Carrier, decode, encode
from .config import WaveCfg, resolve_cfg

logger = logging.getLogger(__name__)

PathArg = Union[str, "PathLike[str]"]

STREAM = "-"


def _read_bytes(path: PathArg) -> bytes:
    if str(path) == STREAM:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_bytes(path: PathArg, data: bytes) -> None:
    if str(path) == STREAM:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    Path(path).write_bytes(data)


def encode_file(
    carrier_path: PathArg,
    payload_path: PathArg,
    output_path: PathArg,
    *,
    cfg: Optional[WaveCfg] = None,
) -> Path:
    """Hide the contents of *payload_path* in the wave at *carrier_path*."""

    carrier = Path(carrier_path).read_bytes()
    payload = _read_bytes(payload_path)
    logger.info("encoding %d payload bytes into %s", len(payload), carrier_path)
    encoded = encode(carrier, payload, cfg=cfg)
    _write_bytes(output_path, encoded)
    return Path(output_path)


def decode_file(
    carrier_path: PathArg,
    output_path: PathArg,
    *,
    cfg: Optional[WaveCfg] = None,
) -> Path:
    """Recover the payload hidden in *carrier_path* and write it to *output_path*."""

    payload = decode(Path(carrier_path).read_bytes(), cfg=cfg)
    logger.info("decoded %d payload bytes from %s", len(payload), carrier_path)
    _write_bytes(output_path, payload)
    return Path(output_path)


def carrier_capacity(carrier_path: PathArg, *, cfg: Optional[WaveCfg] = None) -> int:
    """Return how many payload bytes the wave at *carrier_path* can hold."""

    wave = Carrier.from_bytes(Path(carrier_path).read_bytes(), resolve_cfg(cfg))
    wave.check_consistency()
    return wave.capacity_bytes


__all__ = ["carrier_capacity", "decode_file", "encode_file"]
