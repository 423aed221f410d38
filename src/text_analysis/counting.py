"""Frequency counting and top-K selection."""

from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterable, List, Mapping, Optional, TypeVar

from .errors import InvalidArgumentError, OutOfRangeError

TWord = TypeVar("TWord", bound=Hashable)


@dataclass(frozen=True)
class WordCount(Generic[TWord]):
    word: TWord
    count: int


class WordCounter(Generic[TWord]):
    """Counts words (or any hashable items, e.g. n-grams) in a finite stream."""

    def count(self, words: Optional[Iterable[TWord]]) -> Dict[TWord, int]:
        """Consume `words` fully and return occurrences per distinct word."""
        if words is None:
            raise InvalidArgumentError("words must not be None")
        return Counter(words)

    def top_count(self, words: Optional[Iterable[TWord]], max_words: int) -> List[WordCount[TWord]]:
        """Return the `max_words` most frequent words, highest count first.

        Words with equal counts keep the order in which they were first seen.
        """
        self._check_max_words(max_words)
        return self.top(self.count(words), max_words)

    def top(self, counts: Mapping[TWord, int], max_words: int) -> List[WordCount[TWord]]:
        """Top-K selection over an existing word -> count mapping."""
        self._check_max_words(max_words)
        if counts is None:
            raise InvalidArgumentError("counts must not be None")
        # sorted() is stable, so ties stay in insertion (first-seen) order
        ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
        return [WordCount(word, n) for word, n in ranked[:max_words]]

    @staticmethod
    def _check_max_words(max_words: int) -> None:
        if max_words <= 0:
            raise OutOfRangeError(f"max_words must be greater than 0 (got {max_words})")
