"""Fixed-capacity sliding window (circular buffer).

The window keeps the most recent `capacity` appended items. Logical index 0
is always the oldest retained item and `len(window) - 1` the newest.

Only two mutations exist:
- append (evicts the oldest item once the window is full)
- clear

Storage is a list allocated once at construction plus three cursors:
`_first` (physical slot of the oldest item once the window has wrapped),
`_next` (physical slot of the next write) and `_count` (logical size).
"""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Any, Generic, Iterable, Iterator, List, Optional, TypeVar

from .errors import IndexOutOfRangeError, OutOfRangeError, UnsupportedOperationError

T = TypeVar("T")


class SlidingWindow(MutableSequence, Generic[T]):
    def __init__(self, capacity: int):
        if capacity < 1:
            raise OutOfRangeError(f"capacity must be 1 or more (got {capacity})")
        self._items: List[Optional[T]] = [None] * capacity
        self._first = 0
        self._next = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, index: int) -> T:
        return self._items[self._wrap_index(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[self._wrap_index(index)] = value

    def __iter__(self) -> Iterator[T]:
        # [first..count) then [0..first) if anything has been overwritten
        for i in range(self._first, self._count):
            yield self._items[i]
        for i in range(0, self._first):
            yield self._items[i]

    def __contains__(self, item: Any) -> bool:
        return self.index_of(item) != -1

    def __repr__(self) -> str:
        return f"SlidingWindow(capacity={self.capacity}, items={list(self)!r})"

    def append(self, item: T) -> None:
        self._items[self._next] = item
        self._next += 1
        if self._count < len(self._items):
            self._count += 1
            if self._count == len(self._items):
                self._next = 0
        else:
            # full: size is pinned, the oldest slot moves forward
            self._first += 1
            if self._first == self._count:
                self._first = 0
            if self._next == self._count:
                self._next = 0

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.append(item)

    def clear(self) -> None:
        self._items[:] = [None] * len(self._items)
        self._first = 0
        self._next = 0
        self._count = 0

    def index_of(self, item: Any) -> int:
        """Logical index of the first matching item, or -1."""
        for i, value in enumerate(self):
            if value == item:
                return i
        return -1

    def index(self, item: Any, start: int = 0, stop: Optional[int] = None) -> int:
        stop = self._count if stop is None else stop
        for i, value in enumerate(self):
            if start <= i < stop and value == item:
                return i
        raise ValueError(f"{item!r} is not in window")

    def insert(self, index: int, item: T) -> None:
        raise UnsupportedOperationError("SlidingWindow does not support insertion of items")

    def __delitem__(self, index: int) -> None:
        raise UnsupportedOperationError("SlidingWindow does not support explicit removal of items")

    def remove(self, item: T) -> None:
        raise UnsupportedOperationError("SlidingWindow does not support explicit removal of items")

    def pop(self, index: int = -1) -> T:
        raise UnsupportedOperationError("SlidingWindow does not support explicit removal of items")

    def _wrap_index(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError(f"window indices must be integers, not {type(index).__name__}")
        if index < 0 or index >= self._count:
            raise IndexOutOfRangeError(f"index (value = {index}) must be between 0 and {self._count - 1}")
        return index if self._first == 0 else (self._first + index) % self._count
