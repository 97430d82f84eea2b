"""A minimal singly linked chain of nodes usable as a stack or a queue."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class Node:
    """One link of a chain: a value and the node after it."""

    data: int
    next: Optional["Node"] = None


class Chain:
    """Linked nodes with head and tail access.

    ``push``/``pop`` work at the head (stack order); ``enqueue`` adds at the
    tail so that ``pop`` then yields values in queue order.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.enqueue(value)

    def push(self, data: int) -> None:
        """Insert ``data`` at the head."""
        node = Node(data, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def pop(self) -> int:
        """Remove and return the head value."""
        if self._head is None:
            raise IndexError("pop from empty chain")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def peek(self) -> int:
        """Return the head value without removing it."""
        if self._head is None:
            raise IndexError("peek at empty chain")
        return self._head.data

    def enqueue(self, data: int) -> None:
        """Append ``data`` at the tail."""
        node = Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def is_empty(self) -> bool:
        return self._head is None

    def search(self, data: int) -> bool:
        """Return whether ``data`` occurs in the chain."""
        return any(value == data for value in self)

    def delete(self, data: int) -> bool:
        """Unlink the first node holding ``data``; return whether one was found."""
        previous: Optional[Node] = None
        current = self._head
        while current is not None and current.data != data:
            previous, current = current, current.next
        if current is None:
            return False
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        if current is self._tail:
            self._tail = previous
        self._size -= 1
        return True

    def __contains__(self, data: object) -> bool:
        return any(value == data for value in self)

    def __iter__(self) -> Iterator[int]:
        current = self._head
        while current is not None:
            yield current.data
            current = current.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"Chain({list(self)!r})"