"""MinHeap - binary min-heap with insertion-order tie-break."""
from __future__ import annotations

import heapq
from typing import Any, Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


def _identity(item: Any) -> Any:
    return item


class MinHeap(Generic[T]):
    """Binary min-heap ordered by ``key(item)``.

    Items with equal keys come out in insertion order, so repeated runs over
    the same input pop the same sequence.
    """

    def __init__(self, key: Callable[[T], Any] = _identity) -> None:
        self._key = key
        self._entries: list[tuple[Any, int, T]] = []
        self._counter = 0

    def push(self, item: T) -> None:
        heapq.heappush(self._entries, (self._key(item), self._counter, item))
        self._counter += 1

    def pop(self) -> T:
        if not self._entries:
            raise IndexError("pop from empty heap")
        return heapq.heappop(self._entries)[2]

    def peek(self) -> T:
        if not self._entries:
            raise IndexError("peek at empty heap")
        return self._entries[0][2]

    def is_empty(self) -> bool:
        return not self._entries

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[T]:
        """Iterate over queued items in heap (not sorted) order."""
        return iter([item for _, _, item in self._entries])
