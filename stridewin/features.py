"""Summary statistics for a single window.

- RMS: Root Mean Square
- MAV: Mean Absolute Value
- Peak-to-peak: max minus min
"""
from __future__ import annotations
import numpy as np


def _as_array(x) -> np.ndarray:
    x = np.asarray(x, dtype=float)
    if x.size == 0:
        raise ValueError("window is empty")
    return x


def rms(x) -> float:
    """Root mean square of a window."""
    x = _as_array(x)
    return float(np.sqrt(np.mean(x * x)))


def mav(x) -> float:
    """Mean absolute value of a window."""
    x = _as_array(x)
    return float(np.mean(np.abs(x)))


def peak_to_peak(x) -> float:
    x = _as_array(x)
    return float(np.ptp(x))


def window_summary(x) -> dict:
    """Length, mean, min, max, RMS and MAV of a window as a flat dict."""
    x = _as_array(x)
    return {
        "length": int(len(x)),
        "mean": float(np.mean(x)),
        "min": float(np.min(x)),
        "max": float(np.max(x)),
        "rms": rms(x),
        "mav": mav(x),
    }
