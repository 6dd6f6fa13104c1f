"""Singly, doubly and circular linked lists with positional edits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class InvalidPositionError(IndexError):
    """Raised for a 1-based position that lies outside the list."""


def render(values: Iterable[object]) -> str:
    """Render values as a chain of ``value-->`` links."""
    return "".join(f"{value}-->" for value in values)


def _check_position(position: int, upper: int) -> None:
    if not 1 <= position <= upper:
        raise InvalidPositionError(f"position {position} is outside 1..{upper}")


@dataclass(slots=True)
class _Link(Generic[T]):
    value: T
    next: _Link[T] | None = None


@dataclass(slots=True)
class _DoubleLink(Generic[T]):
    value: T
    prev: _DoubleLink[T] | None = None
    next: _DoubleLink[T] | None = None


class SinglyLinkedList(Generic[T]):
    """A list of nodes each pointing to the next one."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Link[T] | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"

    def __str__(self) -> str:
        return render(self)

    def _node_at(self, position: int) -> _Link[T]:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        self._head = _Link(value, self._head)
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` after the last element."""
        if self._head is None:
            self._head = _Link(value)
        else:
            self._node_at(self._size).next = _Link(value)
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        if self._size == 1:
            return self.pop_front()
        before = self._node_at(self._size - 1)
        last = before.next
        assert last is not None
        before.next = None
        self._size -= 1
        return last.value

    def insert_at(self, position: int, value: T) -> None:
        """Insert ``value`` so that it lands at 1-based ``position``."""
        _check_position(position, self._size + 1)
        if position == 1:
            self.push_front(value)
            return
        before = self._node_at(position - 1)
        before.next = _Link(value, before.next)
        self._size += 1

    def delete_at(self, position: int) -> T:
        """Remove and return the element at 1-based ``position``."""
        _check_position(position, self._size)
        if position == 1:
            return self.pop_front()
        before = self._node_at(position - 1)
        target = before.next
        assert target is not None
        before.next = target.next
        self._size -= 1
        return target.value

    def index_of(self, value: T) -> int | None:
        """Return the 1-based position of the first ``value``, or ``None``."""
        for position, item in enumerate(self, start=1):
            if item == value:
                return position
        return None

    def insert_sorted(self, value: T) -> None:
        """Insert ``value`` into an ascending list, keeping it ascending."""
        if self._head is None or value < self._head.value:  # type: ignore[operator]
            self.push_front(value)
            return
        current = self._head
        while current.next is not None and current.next.value < value:  # type: ignore[operator]
            current = current.next
        current.next = _Link(value, current.next)
        self._size += 1


class DoublyLinkedList(Generic[T]):
    """A list of nodes linked both forwards and backwards."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _DoubleLink[T] | None = None
        self._tail: _DoubleLink[T] | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"

    def __str__(self) -> str:
        return render(self)

    def _node_at(self, position: int) -> _DoubleLink[T]:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        node = _DoubleLink(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` after the last element."""
        node = _DoubleLink(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def insert_at(self, position: int, value: T) -> None:
        """Insert ``value`` so that it lands at 1-based ``position``."""
        _check_position(position, self._size + 1)
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.push_back(value)
        else:
            before = self._node_at(position - 1)
            after = before.next
            assert after is not None
            node = _DoubleLink(value, before, after)
            before.next = node
            after.prev = node
            self._size += 1

    def delete_at(self, position: int) -> T:
        """Remove and return the element at 1-based ``position``."""
        _check_position(position, self._size)
        if position == 1:
            return self.pop_front()
        if position == self._size:
            return self.pop_back()
        target = self._node_at(position)
        assert target.prev is not None and target.next is not None
        target.prev.next = target.next
        target.next.prev = target.prev
        self._size -= 1
        return target.value

    def reversed_values(self) -> list[T]:
        """Return the values from last to first, following the back links."""
        values: list[T] = []
        node = self._tail
        while node is not None:
            values.append(node.value)
            node = node.prev
        return values


class CircularLinkedList(Generic[T]):
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._tail: _Link[T] | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def __str__(self) -> str:
        return render(self)

    def _node_at(self, position: int) -> _Link[T]:
        assert self._tail is not None
        node = self._tail.next
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        node: _Link[T] = _Link(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` after the last element."""
        self.push_front(value)
        assert self._tail is not None
        self._tail = self._tail.next

    def pop_front(self) -> T:
        """Remove and return the first element."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        head = self._tail.next
        assert head is not None
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.value

    def pop_back(self) -> T:
        """Remove and return the last element."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        if self._size == 1:
            return self.pop_front()
        before = self._node_at(self._size - 1)
        last = self._tail
        before.next = last.next
        self._tail = before
        self._size -= 1
        return last.value

    def insert_at(self, position: int, value: T) -> None:
        """Insert ``value`` so that it lands at 1-based ``position``."""
        _check_position(position, self._size + 1)
        if position == 1:
            self.push_front(value)
        elif position == self._size + 1:
            self.push_back(value)
        else:
            before = self._node_at(position - 1)
            before.next = _Link(value, before.next)
            self._size += 1

    def delete_at(self, position: int) -> T:
        """Remove and return the element at 1-based ``position``."""
        _check_position(position, self._size)
        if position == 1:
            return self.pop_front()
        before = self._node_at(position - 1)
        target = before.next
        assert target is not None
        before.next = target.next
        if target is self._tail:
            self._tail = before
        self._size -= 1
        return target.value