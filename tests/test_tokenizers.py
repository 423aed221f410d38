"""
Tests for the character tokenizers.
"""

from __future__ import annotations

import io
import re

import pytest

from text_analysis.errors import ConfigError, InvalidArgumentError, OutOfRangeError
from text_analysis.tokenizers import (
    BasicTokenizer,
    CharacterTokenizer,
    PredicateTokenizer,
    get_tokenizer,
    register_tokenizer,
    tokenize_text,
)


class CountingReader(io.StringIO):
    """StringIO that records how many read() calls were made."""

    def __init__(self, text: str):
        super().__init__(text)
        self.reads = 0

    def read(self, size: int = -1) -> str:
        self.reads += 1
        return super().read(size)


def test_splits_on_whitespace():
    tokens = list(tokenize_text(BasicTokenizer(), "The cat sat on the mat"))

    assert tokens == ["The", "cat", "sat", "on", "the", "mat"]


def test_splits_on_punctuation():
    tokens = list(tokenize_text(BasicTokenizer(), "The,cat.sat/on-the(mat."))

    assert tokens == ["The", "cat", "sat", "on", "the", "mat"]


def test_all_separator_input_yields_no_tokens():
    assert list(tokenize_text(BasicTokenizer(), "  ,.;\t\n!? ")) == []
    assert list(tokenize_text(BasicTokenizer(), "")) == []


def test_tokens_span_read_buffer_boundaries():
    text = "alpha beta  gamma,delta"
    tokens = list(BasicTokenizer(buffer_size=3).tokenize(io.StringIO(text)))

    assert tokens == ["alpha", "beta", "gamma", "delta"]


@pytest.mark.parametrize("buffer_size", [1, 2, 7, 1024])
@pytest.mark.parametrize(
    "text",
    [
        "Hello, world! How are you?",
        "...leading and trailing...",
        "one",
        "tabs\tand\nnew lines\r\nmixed  ",
        "naïve café — déjà vu",
    ],
)
def test_tokens_reconstruct_runs_of_token_characters(text: str, buffer_size: int):
    tokenizer = BasicTokenizer(buffer_size=buffer_size)
    tokens = list(tokenizer.tokenize(io.StringIO(text)))

    assert "".join(tokens) == "".join(ch for ch in text if tokenizer.is_token_char(ch))
    for token in tokens:
        assert token
        assert all(tokenizer.is_token_char(ch) for ch in token)


def test_symbols_that_are_not_punctuation_stay_in_tokens():
    tokens = list(tokenize_text(BasicTokenizer(), "1+1=2 $5"))

    assert tokens == ["1+1=2", "$5"]


def test_tokenize_is_lazy():
    reader = CountingReader("a b c d e f")
    tokens = BasicTokenizer(buffer_size=2).tokenize(reader)

    assert reader.reads == 0
    assert next(tokens) == "a"
    assert reader.reads == 1


def test_tokenize_is_single_pass():
    reader = io.StringIO("a b")
    tokenizer = BasicTokenizer()

    assert list(tokenizer.tokenize(reader)) == ["a", "b"]
    assert list(tokenizer.tokenize(reader)) == []


@pytest.mark.parametrize("buffer_size", [0, -1])
def test_non_positive_buffer_size_is_rejected(buffer_size: int):
    with pytest.raises(OutOfRangeError):
        BasicTokenizer(buffer_size)


def test_none_reader_is_rejected():
    with pytest.raises(InvalidArgumentError):
        BasicTokenizer().tokenize(None)


def test_none_text_is_rejected():
    with pytest.raises(InvalidArgumentError):
        tokenize_text(BasicTokenizer(), None)
    with pytest.raises(InvalidArgumentError):
        tokenize_text(None, "text")


def test_predicate_tokenizer():
    tokenizer = PredicateTokenizer(str.isdigit)

    assert list(tokenize_text(tokenizer, "tel 555-0100 ext 42")) == ["555", "0100", "42"]


def test_predicate_tokenizer_rejects_none():
    with pytest.raises(InvalidArgumentError):
        PredicateTokenizer(None)


def test_custom_subclass():
    class VowelTokenizer(CharacterTokenizer):
        name = "vowels"

        def is_token_char(self, ch: str) -> bool:
            return ch in "aeiou"

    assert list(tokenize_text(VowelTokenizer(), "education")) == ["e", "u", "a", "io"]


def test_registry():
    assert isinstance(get_tokenizer("basic", buffer_size=8), BasicTokenizer)

    register_tokenizer("words_only", lambda buffer_size=1024: PredicateTokenizer(
        lambda ch: re.match(r"\w", ch) is not None, buffer_size=buffer_size))
    tokenizer = get_tokenizer("words_only")
    assert list(tokenize_text(tokenizer, "a+b")) == ["a", "b"]

    with pytest.raises(ConfigError):
        get_tokenizer("nope")
