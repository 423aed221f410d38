"""
Tests for the NGram value type.
"""

from __future__ import annotations

import pytest

from text_analysis.errors import EmptyNGramError, InvalidArgumentError, OutOfRangeError
from text_analysis.ngram import NGram
from text_analysis.window import SlidingWindow


def test_same_elements_are_equal_and_hash_equal():
    a = NGram("the", "cat", "sat")
    b = NGram("the", "cat", "sat")

    assert a == b
    assert not (a != b)
    assert hash(a) == hash(b)
    assert a.count == 3
    assert len(a) == 3


def test_reordered_elements_are_not_equal():
    assert NGram(1, 2) != NGram(2, 1)
    assert NGram(1, 2, 3) != NGram(3, 2, 1)


def test_different_arity_is_not_equal():
    assert NGram(1) != NGram(1, 1)
    assert NGram(1, 2) != NGram(1, 2, 3)


def test_hash_is_polynomial_fold_over_element_hashes():
    assert hash(NGram(1, 2)) == 31 * 1 + 2
    assert hash(NGram(1, 2, 3)) == (31 * 1 + 2) * 31 + 3


def test_not_equal_to_plain_tuple():
    assert NGram(1, 2) != (1, 2)


def test_usable_as_dict_key():
    counts = {NGram("a", "b"): 1}
    counts[NGram("a", "b")] += 1

    assert counts == {NGram("a", "b"): 2}


def test_indexed_access_and_str():
    gram = NGram("cat", "sat", "mat")

    assert gram[0] == "cat"
    assert gram[2] == "mat"
    assert list(gram) == ["cat", "sat", "mat"]
    assert str(gram) == "cat sat mat"


def test_zero_elements_are_rejected():
    with pytest.raises(EmptyNGramError):
        NGram()
    with pytest.raises(InvalidArgumentError):
        NGram()
    with pytest.raises(OutOfRangeError):
        NGram()


def test_create_copies_range():
    source = [1, 2, 3, 4]
    gram = NGram.create(source, 1, 2)
    source[1] = 99

    assert gram == NGram(2, 3)


def test_create_defaults_to_rest_of_source():
    assert NGram.create([1, 2, 3]) == NGram(1, 2, 3)
    assert NGram.create([1, 2, 3], 1) == NGram(2, 3)
    assert NGram.create([1, 2, 3], 1, -1) == NGram(2, 3)


def test_create_from_sliding_window():
    window = SlidingWindow(3)
    window.extend(["a", "b", "c", "d"])

    assert NGram.create(window, 1, 2) == NGram("c", "d")


def test_create_rejects_none_source():
    with pytest.raises(InvalidArgumentError):
        NGram.create(None)


def test_create_rejects_empty_source():
    with pytest.raises(InvalidArgumentError):
        NGram.create([])


@pytest.mark.parametrize("start,count", [(0, 3), (1, 2), (2, 5), (-1, 1), (3, 0)])
def test_create_rejects_range_past_source(start: int, count: int):
    with pytest.raises(OutOfRangeError):
        NGram.create([1, 2], start, count)
