"""
Tests for the fixed-capacity sliding window.
"""

from __future__ import annotations

import pytest

from text_analysis.errors import IndexOutOfRangeError, OutOfRangeError, UnsupportedOperationError
from text_analysis.window import SlidingWindow


def test_new_window_is_empty():
    window = SlidingWindow(3)

    assert len(window) == 0
    assert list(window) == []
    assert window.capacity == 3


def test_fewer_than_capacity_items_are_all_kept():
    window = SlidingWindow(3)
    window.extend([1, 2])

    assert len(window) == 2
    assert list(window) == [1, 2]
    assert window[0] == 1
    assert window[1] == 2


def test_exact_multiple_of_capacity_keeps_latest_items():
    window = SlidingWindow(3)
    window.extend([1, 2, 3, 4, 5, 6])

    assert len(window) == 3
    assert list(window) == [4, 5, 6]
    assert [window.index_of(i) for i in range(1, 8)] == [-1, -1, -1, 0, 1, 2, -1]
    assert (window[0], window[1], window[2]) == (4, 5, 6)


def test_partial_wrap_offsets_are_calculated():
    window = SlidingWindow(3)
    window.extend([1, 2, 3, 4])

    assert len(window) == 3
    assert list(window) == [2, 3, 4]
    assert window.index_of(1) == -1
    assert window.index_of(2) == 0
    assert window.index_of(4) == 2
    assert (window[0], window[1], window[2]) == (2, 3, 4)


def test_enumeration_order_after_overflow():
    window = SlidingWindow(4)
    window.extend([1, 2, 3, 4, 5, 6])

    assert list(window) == [3, 4, 5, 6]


@pytest.mark.parametrize("capacity", [1, 2, 3, 5])
@pytest.mark.parametrize("appends", range(0, 13))
def test_oldest_element_after_n_appends(capacity: int, appends: int):
    window = SlidingWindow(capacity)
    window.extend(range(appends))

    if appends < capacity:
        assert len(window) == appends
    else:
        assert len(window) == capacity
        assert window[0] == appends - capacity
        assert window[capacity - 1] == appends - 1
    assert list(window) == [window[i] for i in range(len(window))]


@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_is_rejected(capacity: int):
    with pytest.raises(OutOfRangeError):
        SlidingWindow(capacity)


def test_set_item_by_logical_index():
    window = SlidingWindow(3)
    window.extend([1, 2, 3, 4])
    window[0] = 20

    assert list(window) == [20, 3, 4]


@pytest.mark.parametrize("index", [-1, 1, 2])
def test_out_of_range_index_is_rejected(index: int):
    window = SlidingWindow(2)
    window.append(1)

    with pytest.raises(IndexOutOfRangeError):
        window[index] = 2
    with pytest.raises(IndexError):
        window[index]


def test_removal_and_insertion_are_unsupported():
    window = SlidingWindow(2)
    window.append(1)

    with pytest.raises(UnsupportedOperationError):
        window.remove(1)
    with pytest.raises(UnsupportedOperationError):
        del window[0]
    with pytest.raises(UnsupportedOperationError):
        window.insert(0, 2)
    with pytest.raises(UnsupportedOperationError):
        window.pop()
    assert list(window) == [1]


def test_contains():
    window = SlidingWindow(2)
    window.append(1)

    assert 1 in window
    assert 2 not in window


def test_index_raises_value_error_when_missing():
    window = SlidingWindow(2)
    window.extend([1, 2, 3])

    assert window.index(3) == 1
    with pytest.raises(ValueError):
        window.index(1)


def test_clear_resets_and_window_is_reusable():
    window = SlidingWindow(3)
    window.extend([1, 2, 3, 4, 5])
    window.clear()

    assert len(window) == 0
    assert list(window) == []

    window.extend(["a", "b"])
    assert list(window) == ["a", "b"]


def test_clear_releases_stored_items():
    window = SlidingWindow(3)
    window.extend([object() for _ in range(4)])
    window.clear()

    assert window._items == [None, None, None]
    assert window.capacity == 3
