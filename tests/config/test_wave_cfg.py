import pytest

from wavestego.config import BYTES_PER_SAMPLE, DEFAULT_CFG, WaveCfg, resolve_cfg
from wavestego.exceptions import ConfigurationError


def test_defaults_match_canonical_layout():
    assert DEFAULT_CFG.header_size == 44
    assert DEFAULT_CFG.bit_depth == 16
    assert DEFAULT_CFG.prefix_bits == 32
    assert DEFAULT_CFG.bytes_per_sample == BYTES_PER_SAMPLE == 2
    assert DEFAULT_CFG.prefix_region == 64
    assert DEFAULT_CFG.max_payload_bits == 2**32 - 1


def test_derived_values_follow_fields():
    cfg = WaveCfg(bit_depth=24, prefix_bits=16)
    assert cfg.bytes_per_sample == 3
    assert cfg.prefix_region == 48
    assert cfg.max_payload_bits == 65535


@pytest.mark.parametrize(
    "kwargs",
    [
        {"bit_depth": 12},
        {"bit_depth": 0},
        {"prefix_bits": 0},
        {"prefix_bits": 64},
        {"header_size": -1},
    ],
)
def test_invalid_configuration_is_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        WaveCfg(**kwargs)


def test_dict_roundtrip():
    cfg = WaveCfg(bit_depth=32, strict=True)
    assert WaveCfg.from_dict(cfg.to_dict()) == cfg
    assert WaveCfg.from_dict(None) == DEFAULT_CFG


def test_from_dict_validation():
    with pytest.raises(ConfigurationError):
        WaveCfg.from_dict({"bit_depth": 16, "channels": 2})
    with pytest.raises(ConfigurationError):
        WaveCfg.from_dict(["bit_depth"])  # type: ignore[arg-type]


def test_resolve_cfg():
    assert resolve_cfg(None) is DEFAULT_CFG
    cfg = WaveCfg(strict=True)
    assert resolve_cfg(cfg) is cfg
    with pytest.raises(ConfigurationError):
        resolve_cfg({"strict": True})  # type: ignore[arg-type]
