"""Strided, optionally overlapping windows over a fixed-length sequence.

Each window holds ``read_size`` elements and consecutive windows start
``chunk_size`` elements apart, with ``read_size = chunk_size + read_ahead``:

- ``read_ahead > 0``: windows overlap by ``read_ahead`` elements.
- ``read_ahead == 0``: plain back-to-back chunks.
- ``read_ahead < 0``: ``-read_ahead`` elements are skipped between windows.

When fewer than ``read_size`` elements remain, they are emitted together as
one final short window. Windows are views into the source (see
:mod:`stridewin.views`); no element is ever copied.

Example (256 items, chunk_size=32, read_ahead=4)::

    [0, 36) [32, 68) [64, 100) ... [192, 228) [224, 256)
"""
from __future__ import annotations
import logging
import operator
from typing import Any, Iterator, Tuple

from stridewin.views import readonly_view

LOGGER = logging.getLogger(__name__)


def _as_int(value, name: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None


def validate_sizes(chunk_size: int, read_ahead: int = 0) -> Tuple[int, int]:
    """Check window parameters and return ``(chunk_size, read_size)``.

    Raises:
        TypeError: if either argument is not an integer.
        ValueError: if ``chunk_size < 1`` or ``chunk_size + read_ahead < 1``.
    """
    chunk_size = _as_int(chunk_size, "chunk_size")
    read_ahead = _as_int(read_ahead, "read_ahead")
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be >= 1, got {chunk_size}")
    read_size = chunk_size + read_ahead
    if read_size < 1:
        raise ValueError(
            f"chunk_size + read_ahead must be >= 1, got {chunk_size} + {read_ahead}"
        )
    return chunk_size, read_size


def _windows_left(n: int, chunk_size: int, read_size: int) -> int:
    if n <= 0:
        return 0
    if n < read_size:
        return 1
    full = (n - read_size) // chunk_size + 1
    return full + (1 if n - full * chunk_size > 0 else 0)


def window_count(n_items: int, chunk_size: int, read_ahead: int = 0) -> int:
    """Number of windows a fresh traversal over ``n_items`` elements yields."""
    chunk_size, read_size = validate_sizes(chunk_size, read_ahead)
    return _windows_left(_as_int(n_items, "n_items"), chunk_size, read_size)


class StridedWindows:
    """Lazy, single-pass iterator of windows over a borrowed sequence.

    Args:
        sequence: list, tuple, str, range, bytes-like object or numpy array.
            Arrays are windowed along axis 0.
        chunk_size: Stride between the starts of consecutive windows (>= 1).
        read_ahead: Extra elements read past ``chunk_size``; may be negative
            to leave gaps, as long as ``chunk_size + read_ahead >= 1``.

    The iterator is fused: once exhausted it stays exhausted. ``len()``
    reports the exact number of windows still to come.
    """

    def __init__(self, sequence: Any, chunk_size: int, read_ahead: int = 0):
        self._chunk_size, self._read_size = validate_sizes(chunk_size, read_ahead)
        self._data = readonly_view(sequence)
        self._pos = 0
        self._end = len(self._data)
        LOGGER.debug(
            "windowing %d items: chunk_size=%d read_size=%d",
            self._end, self._chunk_size, self._read_size,
        )

    @classmethod
    def from_window(cls, sequence: Any, window: int, step: int) -> "StridedWindows":
        """Build from a window length and a step instead of a read-ahead."""
        window = _as_int(window, "window")
        step = _as_int(step, "step")
        return cls(sequence, step, window - step)

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def read_size(self) -> int:
        return self._read_size

    @property
    def read_ahead(self) -> int:
        return self._read_size - self._chunk_size

    @property
    def offset(self) -> int:
        """Index in the original sequence where the unread suffix starts."""
        return self._pos

    @property
    def remaining(self):
        """View of the elements not yet consumed."""
        return self._data[self._pos:self._end]

    def __iter__(self) -> "StridedWindows":
        return self

    def __next__(self):
        left = self._end - self._pos
        if left <= 0:
            raise StopIteration
        start = self._pos
        if left < self._read_size:
            self._pos = self._end
            return self._data[start:self._end]
        self._pos = min(self._end, start + self._chunk_size)
        return self._data[start:start + self._read_size]

    def next_window(self):
        """Return the next window, or ``None`` once exhausted."""
        return next(self, None)

    def remaining_count(self) -> int:
        """Exact number of windows left, computed without producing them."""
        return _windows_left(self._end - self._pos, self._chunk_size, self._read_size)

    def __len__(self) -> int:
        return self.remaining_count()

    def __length_hint__(self) -> int:
        return self.remaining_count()

    def count(self) -> int:
        """Consume the iterator and return how many windows it produced."""
        n = self.remaining_count()
        self._pos = self._end
        return n

    def nth(self, n: int):
        """Skip ``n`` windows and return the one after, or ``None``.

        The skip advances by ``n * read_size`` elements, not by
        ``n * chunk_size``: skipped windows are treated as non-overlapping.
        When ``read_ahead != 0`` this lands on a different window than
        ``n + 1`` calls to :meth:`next_window`; use :meth:`skip` for a
        skip that matches sequential iteration. ``nth(0)`` is exactly
        ``next_window()``.

        The returned window is produced by the ordinary rule, so iteration
        resumes ``chunk_size`` past its start rather than at its end: with
        ``chunk_size=32, read_ahead=4``, ``nth(1)`` returns ``[36, 72)`` and
        the following window starts at 68, not 72.
        """
        n = _as_int(n, "n")
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        start = self._pos + n * self._read_size
        if start >= self._end:
            LOGGER.debug("nth(%d) runs past the end; exhausting", n)
            self._pos = self._end
            return None
        self._pos = start
        return next(self)

    def skip(self, n: int) -> int:
        """Discard up to ``n`` windows using the ``chunk_size`` stride.

        Leaves the iterator exactly where ``n`` calls to :meth:`next_window`
        would, in constant time. Returns the number of windows discarded.
        """
        n = _as_int(n, "n")
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        left = self._end - self._pos
        full = (left - self._read_size) // self._chunk_size + 1 if left >= self._read_size else 0
        if n <= full:
            self._pos = min(self._end, self._pos + n * self._chunk_size)
            return n
        skipped = self.remaining_count()
        self._pos = self._end
        return skipped

    def with_offsets(self) -> Iterator[Tuple[int, Any]]:
        """Yield ``(start_index, window)`` pairs, consuming this iterator."""
        while self._pos < self._end:
            start = self._pos
            yield start, next(self)

    def copy(self) -> "StridedWindows":
        """Independent iterator at the same position over the same data."""
        dup = object.__new__(type(self))
        dup._data = self._data
        dup._chunk_size = self._chunk_size
        dup._read_size = self._read_size
        dup._pos = self._pos
        dup._end = self._end
        return dup

    __copy__ = copy

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(offset={self._pos}, length={self._end}, "
            f"chunk_size={self._chunk_size}, read_size={self._read_size})"
        )


def sliding_windows(x: Any, window: int, step: int) -> Iterator[Tuple[int, Any]]:
    """Yield ``(start_idx, window)`` for windows of ``window`` items every ``step``.

    Unlike a strict sliding window, the trailing items that do not fill a
    whole window are still yielded as one short final window.

    Args:
        x: Input sequence or array.
        window: Window length in items.
        step: Hop size in items.
    Yields:
        (start_idx, window_view) for each window.
    """
    return StridedWindows.from_window(x, window, step).with_offsets()
