import logging
import struct

import numpy as np
import pytest

from wavestego.codec.carrier import Carrier, inspect_header
from wavestego.config import WaveCfg
from wavestego.exceptions import InvalidCarrierError


def _header(data_size: int, *, bits: int = 16, channels: int = 2, rate: int = 44100) -> bytes:
    block_align = channels * bits // 8
    return struct.pack(
        "<4sI4s4sIHHIIHH4sI",
        b"RIFF",
        36 + data_size,
        b"WAVE",
        b"fmt ",
        16,
        1,
        channels,
        rate,
        rate * block_align,
        block_align,
        bits,
        b"data",
        data_size,
    )


def test_from_bytes_splits_header_and_body():
    body = bytes(range(10))
    carrier = Carrier.from_bytes(_header(len(body)) + body)
    assert carrier.header == _header(len(body))
    assert carrier.body == body
    assert carrier.sample_count == 5


def test_from_bytes_rejects_short_buffers():
    with pytest.raises(InvalidCarrierError):
        Carrier.from_bytes(b"\x00" * 43)
    with pytest.raises(InvalidCarrierError):
        Carrier.from_bytes("not bytes")  # type: ignore[arg-type]


def test_partial_trailing_sample_is_not_counted():
    carrier = Carrier.from_bytes(b"\x00" * 44 + b"\x01\x02\x03")
    assert carrier.sample_count == 1


def test_samples_view_shape_and_bounds():
    carrier = Carrier.from_bytes(b"\x00" * 44 + bytes(range(8)))
    view = carrier.samples(1, 2)
    assert view.shape == (2, 2)
    np.testing.assert_array_equal(view, np.array([[2, 3], [4, 5]], dtype=np.uint8))
    assert carrier.samples(4, 0).shape == (0, 2)
    with pytest.raises(ValueError):
        carrier.samples(3, 2)


def test_capacity_accounts_for_prefix():
    carrier = Carrier.from_bytes(b"\x00" * 44 + b"\x00" * 80)
    assert carrier.capacity_bits == 8
    assert carrier.capacity_bytes == 1

    small = Carrier.from_bytes(b"\x00" * 44 + b"\x00" * 10)
    assert small.capacity_bits == 0
    assert small.capacity_bytes == 0


def test_inspect_header_reads_canonical_fields():
    info = inspect_header(_header(1000, bits=16, channels=2, rate=48000))
    assert info is not None
    assert info.audio_format == 1
    assert info.channels == 2
    assert info.sample_rate == 48000
    assert info.bits_per_sample == 16
    assert info.data_size == 1000

    assert inspect_header(b"\x00" * 44) is None
    assert inspect_header(b"RIFF") is None


def test_consistent_header_reports_nothing(caplog):
    body = b"\x00" * 16
    carrier = Carrier.from_bytes(_header(len(body)) + body)
    with caplog.at_level(logging.WARNING):
        assert carrier.check_consistency() == []
    assert not caplog.records


def test_bit_depth_mismatch_is_logged(caplog):
    body = b"\x00" * 16
    carrier = Carrier.from_bytes(_header(len(body), bits=8) + body)
    with caplog.at_level(logging.WARNING):
        problems = carrier.check_consistency()
    assert any("8-bit" in problem for problem in problems)
    assert any("8-bit" in record.getMessage() for record in caplog.records)


def test_strict_mode_rejects_mismatched_header():
    body = b"\x00" * 16
    cfg = WaveCfg(strict=True)
    with pytest.raises(InvalidCarrierError):
        Carrier.from_bytes(_header(len(body), bits=24) + body, cfg).check_consistency()
    with pytest.raises(InvalidCarrierError):
        Carrier.from_bytes(_header(len(body) + 2) + body, cfg).check_consistency()
    with pytest.raises(InvalidCarrierError):
        Carrier.from_bytes(b"\x00" * 44 + body, cfg).check_consistency()


def test_partial_sample_is_only_a_warning_in_strict_mode():
    body = b"\x00" * 17
    carrier = Carrier.from_bytes(_header(len(body)) + body, WaveCfg(strict=True))
    problems = carrier.check_consistency()
    assert problems == ["body ends with a partial sample, which is left untouched"]
