"""Built-in token filters.

These implement:
- lowercase (1:1)
- minimum length (drops short tokens)
- stop words (drops excluded tokens, case-sensitive or not)
"""

from __future__ import annotations
import logging
from typing import Iterable, Iterator, Optional

from ..errors import InvalidArgumentError, OutOfRangeError
from .base import Filter

log = logging.getLogger("text_analysis.filters")


class LowercaseFilter(Filter[str, str]):
    name = "lowercase"

    def _filter(self, stream: Iterable[str]) -> Iterator[str]:
        for token in stream:
            yield token.lower()


class MinLengthFilter(Filter[str, str]):
    name = "min_length"

    def __init__(self, min_length: int):
        if min_length < 1:
            raise OutOfRangeError(f"min_length must be 1 or more (got {min_length})")
        self.min_length = int(min_length)

    def _filter(self, stream: Iterable[str]) -> Iterator[str]:
        for token in stream:
            if len(token) >= self.min_length:
                yield token

    def __repr__(self) -> str:
        return f"MinLengthFilter({self.min_length})"


class StopWordFilter(Filter[str, str]):
    name = "stopwords"

    def __init__(self, stopwords: Optional[Iterable[str]], ignore_case: bool = False):
        if stopwords is None:
            raise InvalidArgumentError("stopwords must not be None")
        self.ignore_case = bool(ignore_case)
        self.stopwords = frozenset(self._key(w) for w in stopwords)
        log.debug("stopwords: %d words ignore_case=%s", len(self.stopwords), self.ignore_case)

    def _key(self, token: str) -> str:
        return token.lower() if self.ignore_case else token

    def _filter(self, stream: Iterable[str]) -> Iterator[str]:
        for token in stream:
            if self._key(token) not in self.stopwords:
                yield token

    def __repr__(self) -> str:
        return f"StopWordFilter({len(self.stopwords)} words, ignore_case={self.ignore_case})"
