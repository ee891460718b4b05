"""Iterators over the items of an arena, and saved iterator positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from .chunk import Chunk

End = Optional[tuple[Chunk, int]]


@dataclass(frozen=True)
class Position:
    """A saved place in an arena, produced by an iterator's ``as_position``."""

    chunk: Optional[Chunk]
    index: int
    token: Optional[object]


class Cursor:
    """Walks the slots of a chunk list, yielding ``(chunk, index)`` pairs.

    Iteration stops at ``end``, a ``(chunk, index)`` pair marking the
    exclusive end of the filled slots. An owning cursor unlinks each chunk
    once it has moved past it.
    """

    __slots__ = ("chunk", "index", "end", "token", "owning")

    def __init__(
        self,
        chunk: Optional[Chunk],
        index: int = 0,
        end: End = None,
        token: Optional[object] = None,
        owning: bool = False,
    ) -> None:
        self.chunk = chunk
        self.index = index
        self.end = end
        self.token = token
        self.owning = owning

    def __iter__(self) -> "Cursor":
        return self

    def _at_end(self, chunk: Chunk) -> bool:
        return (
            self.end is not None
            and self.end[0] is chunk
            and self.end[1] == self.index
        )

    def __next__(self) -> tuple[Chunk, int]:
        chunk = self.chunk
        if chunk is None:
            raise StopIteration
        current = chunk
        at_end = self._at_end(chunk)
        if at_end or self.index >= chunk.capacity:
            following = None if at_end else chunk.next
            if self.owning or following is not None:
                self.index = 0
                self.chunk = following
            if self.owning:
                chunk.next = None
            if following is None:
                raise StopIteration
            current = following
        slot = (current, self.index)
        self.index += 1
        return slot

    def as_position(self) -> Position:
        """Return the position this cursor will continue from."""
        return Position(self.chunk, self.index, self.token)

    def copy(self) -> "Cursor":
        """Return an independent cursor in the same state."""
        return Cursor(self.chunk, self.index, self.end, self.token, self.owning)


def _position_of(cursor: Cursor, supports_positions: bool) -> Position:
    if not supports_positions:
        raise TypeError("this arena does not support positions")
    return cursor.as_position()


class Iter:
    """Iterator over the items of an arena, in allocation order."""

    def __init__(self, cursor: Cursor, supports_positions: bool = False) -> None:
        self._cursor = cursor
        self._supports_positions = supports_positions

    def __iter__(self) -> "Iter":
        return self

    def __next__(self) -> Any:
        chunk, index = next(self._cursor)
        return chunk.get(index)

    def as_position(self) -> Position:
        """Return the current position; requires positions to be enabled."""
        return _position_of(self._cursor, self._supports_positions)

    def __copy__(self) -> "Iter":
        return Iter(self._cursor.copy(), self._supports_positions)


class IterMut:
    """Iterator handing out the items of a mutable arena for in-place changes."""

    def __init__(self, cursor: Cursor, supports_positions: bool = False) -> None:
        self._cursor = cursor
        self._supports_positions = supports_positions

    def __iter__(self) -> "IterMut":
        return self

    def __next__(self) -> Any:
        chunk, index = next(self._cursor)
        return chunk.get(index)

    def as_position(self) -> Position:
        """Return the current position; requires positions to be enabled."""
        return _position_of(self._cursor, self._supports_positions)


class IntoIter:
    """Iterator that moves the items out of an arena."""

    def __init__(self, cursor: Cursor) -> None:
        self._cursor = cursor

    def __iter__(self) -> "IntoIter":
        return self

    def __next__(self) -> Any:
        chunk, index = next(self._cursor)
        return chunk.take(index)