"""A growable array of integers with explicit capacity management."""

from __future__ import annotations

from collections.abc import Iterator

_DEFAULT_CAPACITY = 4
_MIN_SHRINK_CAPACITY = 4


class ArrayList:
    """Array list that doubles its capacity when full and halves it when sparse."""

    def __init__(self, initial_capacity: int = _DEFAULT_CAPACITY) -> None:
        if initial_capacity <= 0:
            initial_capacity = _DEFAULT_CAPACITY
        self._items: list[int] = []
        self._capacity = initial_capacity

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def _grow_if_full(self) -> None:
        if len(self._items) >= self._capacity:
            self._capacity *= 2

    def _shrink_if_sparse(self) -> None:
        if (
            self._capacity > _MIN_SHRINK_CAPACITY
            and len(self._items) < self._capacity // 4
        ):
            self._capacity //= 2

    def append(self, value: int) -> None:
        """Add ``value`` at the end."""
        self._grow_if_full()
        self._items.append(value)

    def insert(self, index: int, value: int) -> None:
        """Insert ``value`` before position ``index`` (0 to len inclusive)."""
        if index < 0 or index > len(self._items):
            raise IndexError(
                f"index {index} out of bounds for insert (size {len(self._items)})"
            )
        self._grow_if_full()
        self._items.insert(index, value)

    def index_of(self, value: int) -> int:
        """Return the position of the first ``value``, or -1 if absent."""
        try:
            return self._items.index(value)
        except ValueError:
            return -1

    def delete_at(self, index: int) -> int:
        """Remove and return the element at ``index``."""
        if index < 0 or index >= len(self._items):
            raise IndexError(
                f"index {index} out of bounds for deletion (size {len(self._items)})"
            )
        value = self._items.pop(index)
        self._shrink_if_sparse()
        return value

    def remove_last(self) -> int:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("array list is empty, nothing to remove from last")
        value = self._items.pop()
        self._shrink_if_sparse()
        return value

    def clear(self) -> None:
        """Drop all elements while keeping the current capacity."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        return self._items[index]

    def __str__(self) -> str:
        body = ", ".join(str(value) for value in self._items)
        return f"ArrayList (size: {len(self._items)}, capacity: {self._capacity}): [{body}]"

    def __repr__(self) -> str:
        return f"ArrayList({self._items!r}, capacity={self._capacity})"