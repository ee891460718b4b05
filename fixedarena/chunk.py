"""Fixed-capacity storage blocks linked into a singly linked list."""

from __future__ import annotations

from typing import Any, Optional

_EMPTY = object()


class Chunk:
    """A block of ``capacity`` item slots, optionally linked to a next chunk."""

    __slots__ = ("capacity", "next", "_items")

    def __init__(self, capacity: int, prev: Optional["Chunk"] = None) -> None:
        if capacity <= 0:
            raise ValueError("chunk capacity must be positive")
        self.capacity = capacity
        self.next: Optional[Chunk] = None
        self._items: list[Any] = [_EMPTY] * capacity
        if prev is not None:
            prev.next = self

    def _check(self, index: int) -> None:
        if not 0 <= index < self.capacity:
            raise IndexError(f"slot {index} is out of range")

    def get(self, index: int) -> Any:
        """Return the item stored at ``index``."""
        self._check(index)
        value = self._items[index]
        if value is _EMPTY:
            raise LookupError(f"slot {index} is empty")
        return value

    def set(self, index: int, value: Any) -> None:
        """Store ``value`` at ``index``."""
        self._check(index)
        self._items[index] = value

    def take(self, index: int) -> Any:
        """Remove the item at ``index`` and return it."""
        value = self.get(index)
        self._items[index] = _EMPTY
        return value

    def drop_item(self, index: int) -> None:
        """Release the item at ``index``, leaving the slot empty."""
        self.take(index)

    def drop_all(self) -> None:
        """Release every item; all slots must be filled."""
        for index in range(self.capacity):
            self.drop_item(index)