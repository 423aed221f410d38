"""N-gram value type.

An NGram is an immutable, non-empty, order-sensitive tuple. Two n-grams are
equal iff they have the same arity and equal elements in the same order, so
they can be used directly as dict keys (e.g. by WordCounter).
"""

from __future__ import annotations
from typing import Any, Generic, Iterator, Optional, Sequence, Tuple, TypeVar

from .errors import EmptyNGramError, InvalidArgumentError, OutOfRangeError

T = TypeVar("T")

_COMBINING_PRIME = 31


class NGram(Generic[T]):
    __slots__ = ("_grams",)

    def __init__(self, *grams: T):
        if not grams:
            raise EmptyNGramError("an n-gram needs at least one element")
        self._grams: Tuple[T, ...] = tuple(grams)

    @classmethod
    def create(cls, source: Optional[Sequence[T]], start_index: int = 0, count: int = 0) -> "NGram[T]":
        """Copy `source[start_index:start_index + count]` into a new n-gram.

        A non-positive `count` takes the rest of the source. The range must
        lie entirely inside the source.
        """
        if source is None:
            raise InvalidArgumentError("source must not be None")
        size = len(source)
        if size == 0:
            raise EmptyNGramError("source must not be empty")
        if start_index < 0:
            raise OutOfRangeError(f"start_index must be 0 or more (got {start_index})")
        if count <= 0:
            count = size - start_index
        if count <= 0 or start_index + count > size:
            raise OutOfRangeError(
                f"range [{start_index}, {start_index + count}) exceeds source of length {size}"
            )
        return cls(*(source[start_index + i] for i in range(count)))

    @property
    def count(self) -> int:
        return len(self._grams)

    def __len__(self) -> int:
        return len(self._grams)

    def __getitem__(self, index: int) -> T:
        return self._grams[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._grams)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, NGram) or type(other) is not type(self):
            return NotImplemented
        return self._grams == other._grams

    def __ne__(self, other: Any) -> bool:
        eq = self.__eq__(other)
        return eq if eq is NotImplemented else not eq

    def __hash__(self) -> int:
        h = 0
        for gram in self._grams:
            h = _COMBINING_PRIME * h + hash(gram)
        return h

    def __str__(self) -> str:
        return " ".join(str(g) for g in self._grams)

    def __repr__(self) -> str:
        return f"NGram({', '.join(repr(g) for g in self._grams)})"
