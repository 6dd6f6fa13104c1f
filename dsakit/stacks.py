"""Stacks backed by a fixed-capacity array and by linked nodes, plus stock span."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that is already full."""


class StackUnderflowError(IndexError):
    """Raised when reading from or popping an empty stack."""


class BoundedStack(Generic[T]):
    """A last-in, first-out stack that holds at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The largest number of items the stack can hold."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self._capacity}, items={self._items!r})"

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackOverflowError("stack overflow")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return not self._items

    def is_full(self) -> bool:
        """Tell whether the stack has reached its capacity."""
        return len(self._items) >= self._capacity


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    next: _Node[T] | None = None


class LinkedStack(Generic[T]):
    """An unbounded last-in, first-out stack built from linked nodes."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.push(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Iterate from the top of the stack to the bottom."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedStack(top_first={list(self)!r})"

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top item."""
        if self._head is None:
            raise StackUnderflowError("stack is empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> T:
        """Return the top item without removing it."""
        if self._head is None:
            raise StackUnderflowError("stack is empty")
        return self._head.value

    def is_empty(self) -> bool:
        """Tell whether the stack holds no items."""
        return self._head is None


def stock_span(prices: Iterable[float]) -> list[int]:
    """Return, for each day, how many consecutive days up to it had a price no higher."""
    spans: list[int] = []
    higher: list[tuple[int, float]] = []
    for day, price in enumerate(prices):
        while higher and higher[-1][1] <= price:
            higher.pop()
        spans.append(day - higher[-1][0] if higher else day + 1)
        higher.append((day, price))
    return spans