"""Read-only, non-copying views over sequences.

A traversal never owns its data. It keeps a reference to the caller's
container and hands out slices that alias it:

- numpy arrays become a non-writeable ``ndarray`` view (basic slicing of an
  ndarray never copies).
- bytes-like objects become a read-only ``memoryview``.
- any other ``Sequence`` is wrapped in :class:`SequenceView`, which stores the
  base container plus a ``[start, stop)`` range.

The caller must not mutate the container while a view borrows it.
"""
from __future__ import annotations
from collections.abc import Sequence
from typing import Any, Iterator

import numpy as np


class SequenceView(Sequence):
    """Read-only window ``base[start:stop]`` that does not copy elements.

    Slicing returns another view over the same base, so views never nest.
    Only contiguous (step 1) slices are supported.
    """
    __slots__ = ("_base", "_start", "_stop")

    def __init__(self, base: Sequence, start: int = 0, stop: int | None = None):
        if isinstance(base, SequenceView):
            offset = base._start
            limit = base._stop
            base = base._base
        else:
            offset = 0
            limit = len(base)
        start, stop, _ = slice(start, stop).indices(limit - offset)
        self._base = base
        self._start = offset + start
        self._stop = offset + max(start, stop)

    def __len__(self) -> int:
        return self._stop - self._start

    def __getitem__(self, key):
        if isinstance(key, slice):
            start, stop, step = key.indices(len(self))
            if step != 1:
                raise ValueError("SequenceView only supports contiguous slices")
            return SequenceView(self, start, max(start, stop))
        n = len(self)
        i = key + n if key < 0 else key
        if not 0 <= i < n:
            raise IndexError("SequenceView index out of range")
        return self._base[self._start + i]

    def __iter__(self) -> Iterator[Any]:
        base = self._base
        for i in range(self._start, self._stop):
            yield base[i]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes)):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None

    def __repr__(self) -> str:
        return f"SequenceView({self.tolist()!r})"

    @property
    def bounds(self) -> tuple[int, int]:
        """``(start, stop)`` of this view within its base container."""
        return self._start, self._stop

    def tolist(self) -> list:
        """Copy the viewed elements into a new list."""
        return list(self)


def readonly_view(seq):
    """Return a read-only view of ``seq`` whose slices are also views.

    Raises:
        TypeError: if ``seq`` is not a sized, indexable sequence (iterators,
            generators, sets and mappings have no fixed layout to borrow).
        ValueError: for 0-d arrays or multi-dimensional buffers.
    """
    if isinstance(seq, np.ndarray):
        if seq.ndim == 0:
            raise ValueError("cannot window a 0-d array")
        view = seq.view()
        view.flags.writeable = False
        return view
    if isinstance(seq, SequenceView):
        return seq
    if isinstance(seq, (bytes, bytearray, memoryview)) or _is_buffer(seq):
        mv = memoryview(seq).toreadonly()
        if mv.ndim != 1:
            raise ValueError(f"only 1-D buffers can be windowed, got ndim={mv.ndim}")
        return mv
    if isinstance(seq, Sequence):
        return SequenceView(seq)
    raise TypeError(f"expected a sequence with a known length, got {type(seq).__name__}")


def _is_buffer(obj) -> bool:
    # array.array and friends: exportable buffers that are not Sequences
    # in the str/list sense. Lists and tuples are not buffers.
    try:
        memoryview(obj)
    except TypeError:
        return False
    return True
