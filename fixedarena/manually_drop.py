"""An arena whose items stay stored until it is explicitly dropped."""

from __future__ import annotations

from typing import Any, Optional

from .chunk import Chunk
from .iterators import Cursor, IntoIter, Iter, IterMut, Position
from .options import DEFAULT_CHUNK_SIZE, ArenaOptions


def _valid_token_update(old: Optional[object], new: Optional[object]) -> bool:
    """Return whether a position's token may be used with an arena's token.

    A position without a token carries no chunk of its own arena, so it is
    accepted anywhere; otherwise both tokens must be the same object.
    """
    if old is None:
        return True
    return new is not None and old is new


class ManuallyDropArena:
    """An arena that allocates items in fixed-size chunks.

    Items are kept until :meth:`drop` is called; the arena never releases
    them on its own.
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        supports_positions: bool = False,
        mutable: bool = True,
    ) -> None:
        self.options = ArenaOptions(chunk_size, supports_positions, mutable)
        self._token: Optional[object] = None
        self._head: Optional[Chunk] = None
        self._tail: Optional[Chunk] = None
        self._tail_len = self.options.chunk_size
        self._len = 0

    @property
    def chunk_size(self) -> int:
        """Number of items each chunk holds."""
        return self.options.chunk_size

    def _reset(self) -> None:
        self._token = None
        self._head = None
        self._tail = None
        self._tail_len = self.chunk_size
        self._len = 0

    def _ensure_free_space(self) -> None:
        if self.chunk_size <= 0:
            raise ValueError("cannot allocate items when chunk size is 0")
        if self._tail_len < self.chunk_size:
            return
        chunk = Chunk(self.chunk_size, self._tail)
        if self._head is None:
            self._head = chunk
        self._tail = chunk
        self._tail_len = 0

    def _store(self, value: Any) -> Any:
        self._ensure_free_space()
        if self.options.supports_positions and self._token is None:
            self._token = object()
        assert self._tail is not None
        self._tail.set(self._tail_len, value)
        self._tail_len += 1
        self._len += 1
        return value

    def _require_mutable(self) -> None:
        if not self.options.mutable:
            raise TypeError("this arena does not hand out mutable items")

    def _require_immutable(self) -> None:
        if self.options.mutable:
            raise TypeError(
                "checked iteration requires an arena that is not mutable"
            )

    def _require_positions(self) -> None:
        if not self.options.supports_positions:
            raise TypeError("this arena does not support positions")

    def drop(self) -> None:
        """Release every item and chunk, leaving the arena empty and reusable."""
        head = self._head
        if head is None:
            return
        tail_len = self._tail_len
        self._reset()

        while head.next is not None:
            following = head.next
            head.drop_all()
            head.next = None
            head = following

        for index in range(tail_len):
            head.drop_item(index)

    def manually_drop(self) -> None:
        """Alias of :meth:`drop`."""
        self.drop()

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        """Return whether no items have been allocated."""
        return self._len == 0

    def alloc(self, value: Any) -> Any:
        """Store ``value`` and return it; the arena must be mutable."""
        self._require_mutable()
        return self._store(value)

    def try_alloc(self, value: Any) -> Optional[Any]:
        """Like :meth:`alloc`, but return ``None`` if memory runs out."""
        self._require_mutable()
        try:
            return self._store(value)
        except MemoryError:
            return None

    def alloc_shared(self, value: Any) -> Any:
        """Store ``value`` and return it for shared, read-only use."""
        return self._store(value)

    def try_alloc_shared(self, value: Any) -> Optional[Any]:
        """Like :meth:`alloc_shared`, but return ``None`` if memory runs out."""
        try:
            return self._store(value)
        except MemoryError:
            return None

    def _end(self) -> Optional[tuple[Chunk, int]]:
        if self._tail is None:
            return None
        return (self._tail, self._tail_len)

    def _cursor(self, owning: bool = False) -> Cursor:
        return Cursor(self._head, 0, self._end(), self._token, owning)

    def _cursor_at(self, position: Position) -> Cursor:
        if not _valid_token_update(position.token, self._token):
            raise ValueError("`position` is not part of this arena")
        chunk = position.chunk if position.chunk is not None else self._head
        return Cursor(chunk, position.index, self._end(), self._token)

    def iter(self) -> Iter:
        """Return an iterator over the items; the arena must not be mutable."""
        self._require_immutable()
        return self.iter_unchecked()

    def iter_unchecked(self) -> Iter:
        """Return an iterator over the items regardless of mutability."""
        return Iter(self._cursor(), self.options.supports_positions)

    def iter_mut_unchecked(self) -> IterMut:
        """Return an iterator handing out the items for mutation."""
        return IterMut(self._cursor(), self.options.supports_positions)

    def into_iter_unchecked(self) -> IntoIter:
        """Move every item out into an iterator, leaving the arena empty."""
        cursor = self._cursor(owning=True)
        self._reset()
        return IntoIter(cursor)

    def iter_at(self, position: Position) -> Iter:
        """Return an iterator starting at ``position``."""
        self._require_positions()
        self._require_immutable()
        return self.iter_at_unchecked(position)

    def iter_at_unchecked(self, position: Position) -> Iter:
        """Like :meth:`iter_at`, regardless of mutability."""
        self._require_positions()
        return Iter(self._cursor_at(position), True)

    def iter_mut_at_unchecked(self, position: Position) -> IterMut:
        """Return a mutable iterator starting at ``position``."""
        self._require_positions()
        return IterMut(self._cursor_at(position), True)

    def __iter__(self) -> Iter:
        return self.iter()