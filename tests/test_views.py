import array

import numpy as np
import pytest

from stridewin.views import SequenceView, readonly_view


def test_sequence_view_slices_share_base():
    base = list(range(10))
    v = SequenceView(base)[2:8]
    inner = v[1:3]
    assert isinstance(inner, SequenceView)
    assert inner.bounds == (3, 5)
    assert inner.tolist() == [3, 4]


def test_sequence_view_indexing():
    v = SequenceView("abcdef", 1, 4)
    assert len(v) == 3
    assert v[0] == "b"
    assert v[-1] == "d"
    with pytest.raises(IndexError):
        v[3]
    with pytest.raises(IndexError):
        v[-4]


def test_sequence_view_rejects_strided_slice():
    with pytest.raises(ValueError):
        SequenceView([1, 2, 3, 4])[::2]


def test_sequence_view_clamps_out_of_range_slices():
    v = SequenceView([1, 2, 3])
    assert v[5:10].tolist() == []
    assert v[2:1].tolist() == []
    assert v[-2:].tolist() == [2, 3]


def test_sequence_view_equality():
    v = SequenceView((1, 2, 3))
    assert v == [1, 2, 3]
    assert v == (1, 2, 3)
    assert v != [1, 2]
    assert v != "123"
    with pytest.raises(TypeError):
        hash(v)


def test_readonly_view_numpy_is_not_writeable():
    x = np.zeros(5)
    v = readonly_view(x)
    assert np.shares_memory(v, x)
    with pytest.raises(ValueError):
        v[0] = 1.0
    # the caller's array keeps its own flags
    assert x.flags.writeable


def test_readonly_view_buffers():
    assert readonly_view(bytearray(b"abc")).readonly
    assert readonly_view(array.array("i", [1, 2, 3])).tolist() == [1, 2, 3]


def test_readonly_view_rejects_bad_inputs():
    with pytest.raises(ValueError):
        readonly_view(np.array(1.0))
    with pytest.raises(ValueError):
        readonly_view(memoryview(bytes(6)).cast("B", (2, 3)))
    with pytest.raises(TypeError):
        readonly_view({1, 2, 3})
    with pytest.raises(TypeError):
        readonly_view(iter([1, 2, 3]))


def test_sequence_view_negative_bounds():
    assert SequenceView([1, 2, 3], -2).tolist() == [2, 3]
    assert SequenceView([1, 2, 3], 0, -1).tolist() == [1, 2]
    assert SequenceView([1, 2, 3], -10, 10).tolist() == [1, 2, 3]
    assert SequenceView([1, 2, 3], -1, -2).tolist() == []


def test_sequence_view_negative_bounds_on_nested_view():
    inner = SequenceView(list(range(10)), 2, 8)
    v = SequenceView(inner, -3, -1)
    assert v.tolist() == [5, 6]
    assert v.bounds == (5, 7)
