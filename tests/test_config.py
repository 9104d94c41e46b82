import numpy as np
import pytest

from stridewin.config import WindowConfig


def test_defaults_are_plain_chunks():
    cfg = WindowConfig()
    assert cfg.read_size == cfg.chunk_size == 32
    assert len(cfg.windows(np.arange(256))) == 8


def test_from_ms_converts_to_samples():
    cfg = WindowConfig.from_ms(window_ms=200, step_ms=100, sample_rate_hz=1000)
    assert cfg.chunk_size == 100
    assert cfg.read_ahead == 100
    assert cfg.read_size == 200


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        WindowConfig(chunk_size=0)
    with pytest.raises(ValueError):
        WindowConfig.from_ms(window_ms=200, step_ms=0.5, sample_rate_hz=1000)
