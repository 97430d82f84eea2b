"""A last-in, first-out stack built on the singly linked list."""

from __future__ import annotations

from listkit.singly_linked_list import SinglyLinkedList


class Stack:
    """Stack whose top is the head of a singly linked list."""

    def __init__(self) -> None:
        self._list = SinglyLinkedList()

    def push(self, data: int) -> None:
        """Place ``data`` on top."""
        self._list.push_head(data)

    def pop(self) -> int:
        """Remove and return the top value."""
        return self._list.pop()

    def peek(self) -> int:
        """Return the top value without removing it."""
        return self._list.peek_head()

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def clear(self) -> None:
        """Remove every value."""
        self._list.clear()

    def __len__(self) -> int:
        return len(self._list)

    def __repr__(self) -> str:
        return f"Stack({list(self._list)!r})"