"""A singly linked list of integers with head and tail access."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from listkit.chain import Node


class UnderflowError(IndexError):
    """Raised when a value is taken from or looked up in an empty list."""


class SinglyLinkedList:
    """Singly linked list that keeps its head, tail and size."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.push_tail(value)

    def push_head(self, data: int) -> None:
        """Insert ``data`` before the current head."""
        node = Node(data, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_tail(self, data: int) -> None:
        """Append ``data`` after the current tail."""
        node = Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop(self) -> int:
        """Remove and return the head value."""
        if self._head is None:
            raise UnderflowError("pop from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.data

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def search(self, data: int) -> bool:
        """Return whether ``data`` occurs in the list."""
        return any(value == data for value in self)

    def modify(self, old_value: int, new_value: int) -> bool:
        """Replace the first ``old_value`` with ``new_value``; return whether one was found."""
        for node in self._nodes():
            if node.data == old_value:
                node.data = new_value
                return True
        return False

    def peek_head(self) -> int:
        """Return the head value without removing it."""
        if self._head is None:
            raise UnderflowError("peek at head of empty list")
        return self._head.data

    def peek_tail(self) -> int:
        """Return the tail value without removing it."""
        if self._tail is None:
            raise UnderflowError("peek at tail of empty list")
        return self._tail.data

    def _nodes(self) -> Iterator[Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __contains__(self, data: object) -> bool:
        return any(value == data for value in self)

    def __str__(self) -> str:
        if self.is_empty():
            return "All elements: \n HEAD -> NULL"
        body = "".join(f"{value} -> " for value in self)
        return f"All elements: \n HEAD -> {body}NULL\n Size: {self._size}"

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"