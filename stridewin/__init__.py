"""Lazy strided and overlapping windows over fixed-length sequences.

Modules:
- views: read-only, non-copying views over lists, buffers and arrays
- windowing: the StridedWindows iterator and helpers
- config: window parameter dataclass
- features: per-window summary statistics
"""
from .config import WindowConfig
from .views import SequenceView, readonly_view
from .windowing import StridedWindows, sliding_windows, validate_sizes, window_count

__all__ = [
    "SequenceView",
    "StridedWindows",
    "WindowConfig",
    "readonly_view",
    "sliding_windows",
    "validate_sizes",
    "window_count",
]
