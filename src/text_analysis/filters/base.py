"""Filter interface.

Filters must:
- accept an iterable stream of input items
- return a lazy iterator of output items
- pull from the input only as far as needed for the next output item

A filter may change the element type (tokens -> n-grams) and may drop,
keep or expand elements. Two filters compose with `chain()`.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from ..errors import InvalidArgumentError

TIn = TypeVar("TIn")
TMid = TypeVar("TMid")
TOut = TypeVar("TOut")
TNext = TypeVar("TNext")


class Filter(ABC, Generic[TIn, TOut]):
    name: str = "filter"

    def apply(self, stream: Optional[Iterable[TIn]]) -> Iterator[TOut]:
        if stream is None:
            raise InvalidArgumentError(f"{self.name}: input stream must not be None")
        return self._filter(stream)

    @abstractmethod
    def _filter(self, stream: Iterable[TIn]) -> Iterator[TOut]:
        ...

    def chain(self, sink: "Filter[TOut, TNext]") -> "FilterChain[TIn, TOut, TNext]":
        """Return a filter that feeds this filter's output into `sink`."""
        return FilterChain(self, sink)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FilterChain(Filter[TIn, TOut], Generic[TIn, TMid, TOut]):
    """Sequential composition: `sink.apply(source.apply(stream))`."""

    def __init__(self, source: Filter[TIn, TMid], sink: Filter[TMid, TOut]):
        if source is None:
            raise InvalidArgumentError("source filter must not be None")
        if sink is None:
            raise InvalidArgumentError("sink filter must not be None")
        self.source = source
        self.sink = sink
        self.name = f"{source.name}>{sink.name}"

    def _filter(self, stream: Iterable[TIn]) -> Iterator[TOut]:
        return self.sink.apply(self.source.apply(stream))

    def __repr__(self) -> str:
        return f"FilterChain({self.source!r}, {self.sink!r})"
