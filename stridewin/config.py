"""Configuration dataclass for windowed traversal.

Keeps the window parameters in one place so scripts and tests share a
consistent setup, and converts durations to item counts for sampled signals.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from stridewin.windowing import StridedWindows, validate_sizes


@dataclass
class WindowConfig:
    """Window parameters.

    Attributes:
        chunk_size: Stride between window starts, in items.
        read_ahead: Items read past ``chunk_size`` (overlap when positive,
            gap when negative).
    """

    chunk_size: int = 32
    read_ahead: int = 0

    def __post_init__(self):
        validate_sizes(self.chunk_size, self.read_ahead)

    @property
    def read_size(self) -> int:
        return self.chunk_size + self.read_ahead

    @classmethod
    def from_ms(cls, window_ms: float, step_ms: float, sample_rate_hz: float) -> "WindowConfig":
        """Build from window/step durations (ms) at a given sampling rate (Hz)."""
        win = int(window_ms * sample_rate_hz / 1000)
        step = int(step_ms * sample_rate_hz / 1000)
        return cls(chunk_size=step, read_ahead=win - step)

    def windows(self, sequence: Any) -> StridedWindows:
        """Start a traversal of ``sequence`` with these parameters."""
        return StridedWindows(sequence, self.chunk_size, self.read_ahead)
