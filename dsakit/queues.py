"""Queues backed by a fixed-capacity buffer and by linked nodes."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class QueueFullError(Exception):
    """Raised when enqueueing onto a queue that is already full."""


class QueueEmptyError(IndexError):
    """Raised when reading from or dequeueing an empty queue."""


class BoundedQueue(Generic[T]):
    """A first-in, first-out queue that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._items: deque[T] = deque()

    @property
    def capacity(self) -> int:
        """The largest number of items the queue can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the rear."""
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue(capacity={self._capacity}, items={list(self._items)!r})"

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def front(self) -> T:
        """Return the item at the front without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def rear(self) -> T:
        """Return the item at the rear without removing it."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the queue holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the queue has reached its capacity."""
        return len(self._items) >= self._capacity


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    next: _Node[T] | None = None


class LinkedQueue(Generic[T]):
    """An unbounded first-in, first-out queue built from linked nodes."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._front: _Node[T] | None = None
        self._rear: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the front of the queue to the rear."""
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self)!r})"

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear of the queue."""
        node = _Node(value)
        if self._rear is None:
            self._front = self._rear = node
        else:
            self._rear.next = node
            self._rear = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the item at the front."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.value

    def front(self) -> T:
        """Return the item at the front without removing it."""
        if self._front is None:
            raise QueueEmptyError("queue is empty")
        return self._front.value

    def rear(self) -> T:
        """Return the item at the rear without removing it."""
        if self._rear is None:
            raise QueueEmptyError("queue is empty")
        return self._rear.value

    def is_empty(self) -> bool:
        """Tell whether the queue holds no items."""
        return self._front is None