"""N-gram expansion filter.

For every incoming token the filter appends it to a sliding window sized to
the largest requested n, then emits the trailing n-gram for each configured
size the window can already serve, smallest size first.

Example, sizes {1, 2, 3} over cat sat mat:
    [cat] [sat] [cat sat] [mat] [sat mat] [cat sat mat]
"""

from __future__ import annotations
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from ..errors import InvalidArgumentError, OutOfRangeError
from ..ngram import NGram
from ..window import SlidingWindow
from .base import Filter

log = logging.getLogger("text_analysis.filters.ngram")

T = TypeVar("T")


class NGramFilter(Filter[T, NGram[T]], Generic[T]):
    name = "ngrams"

    def __init__(self, sizes: Optional[Iterable[int]]):
        if sizes is None:
            raise InvalidArgumentError("n-gram sizes must not be None")
        # copied; duplicates collapse to one emission per size
        self.sizes: List[int] = sorted(set(sizes))
        if not self.sizes:
            raise InvalidArgumentError("at least one n-gram size is required")
        if self.sizes[0] < 1:
            raise OutOfRangeError(f"n-gram sizes must be 1 or more (got {self.sizes[0]})")
        log.debug("ngrams: sizes=%s window=%d", self.sizes, self.sizes[-1])

    def _filter(self, stream: Iterable[T]) -> Iterator[NGram[T]]:
        # each run owns its window, so concurrent runs stay independent
        window: SlidingWindow[T] = SlidingWindow(self.sizes[-1])
        for token in stream:
            window.append(token)
            filled = len(window)
            for size in self.sizes:
                if filled < size:
                    break
                yield NGram.create(window, filled - size, size)

    def __repr__(self) -> str:
        return f"NGramFilter({self.sizes})"
