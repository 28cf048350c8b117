"""A sorted container of bounded capacity keeping the highest-priority items."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class LimitedPriorityQueue(Generic[T]):
    """Priority queue with a fixed capacity.

    ``compare(a, b)`` must return True when ``a`` has priority over ``b``.
    Items are kept sorted from highest priority (``top``) to lowest
    (``bottom``). When the queue is full, a pushed item with a lower
    priority than every stored item is discarded; otherwise the lowest
    priority item is dropped to make room.
    """

    def __init__(
        self,
        capacity: int = 0,
        items: Iterable[T] = (),
        compare: Callable[[Any, Any], bool] | None = None,
    ) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._slots: list[Any] = [None] * capacity
        self._compare = compare if compare is not None else operator.lt
        self._size = 0
        for item in items:
            self.push(item)

    def __iter__(self) -> Iterator[T]:
        return iter(self._slots[: self._size])

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity()}, items={list(self)!r})"

    def top(self) -> T:
        """Highest priority item."""
        if self.empty():
            raise IndexError("top of an empty queue")
        return self._slots[0]

    def bottom(self) -> T:
        """Lowest priority item."""
        if self.empty():
            raise IndexError("bottom of an empty queue")
        return self._slots[self._size - 1]

    def empty(self) -> bool:
        return self._size == 0

    def full(self) -> bool:
        return self._size == self.capacity()

    def capacity(self) -> int:
        return len(self._slots)

    def _upper_bound(self, value: T) -> int:
        lo, hi = 0, self._size
        while lo < hi:
            mid = (lo + hi) // 2
            if self._compare(value, self._slots[mid]):
                hi = mid
            else:
                lo = mid + 1
        return lo

    def push(self, value: T) -> bool:
        """Insert ``value``; return whether it was stored."""
        if self.empty():
            if self.capacity() > 0:
                self._slots[0] = value
                self._size = 1
                return True
            return False

        pos = self._upper_bound(value)
        if pos == self._size:
            if self.full():
                return False
            self._slots[pos] = value
            self._size += 1
            return True

        if self.full():
            self._slots[pos + 1 : self._size] = self._slots[pos : self._size - 1]
        else:
            self._slots[pos + 1 : self._size + 1] = self._slots[pos : self._size]
            self._size += 1
        self._slots[pos] = value
        return True

    def pop(self) -> None:
        """Remove the lowest priority item."""
        if self.empty():
            raise IndexError("pop from an empty queue")
        self._size -= 1

    def reserve(self, capacity: int) -> None:
        """Change the capacity, dropping the lowest priority items if needed."""
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self._size = min(self._size, capacity)
        if capacity < len(self._slots):
            del self._slots[capacity:]
        else:
            self._slots.extend([None] * (capacity - len(self._slots)))

    def clear(self) -> None:
        self._size = 0

    def container(self) -> tuple[Any, ...]:
        """All storage slots, including those beyond the current size."""
        return tuple(self._slots)