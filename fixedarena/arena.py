"""An arena that allocates items in fixed-size chunks and releases them itself."""

from __future__ import annotations

from types import TracebackType
from typing import Any, Optional, Union

from .iterators import IntoIter, Iter, IterMut, Position
from .manually_drop import ManuallyDropArena
from .options import DEFAULT_CHUNK_SIZE, ArenaOptions


class Arena:
    """An arena that stores items in fixed-size chunks.

    Each allocation takes constant time: a new chunk of ``chunk_size`` slots
    is added only when the current one is full, and existing chunks are never
    grown or moved. The arena releases its items when :meth:`drop` is called
    or when it is used as a context manager and the block exits.
    """

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        supports_positions: bool = False,
        mutable: bool = True,
    ) -> None:
        self._inner = ManuallyDropArena(chunk_size, supports_positions, mutable)

    @property
    def options(self) -> ArenaOptions:
        """The options this arena was created with."""
        return self._inner.options

    def __len__(self) -> int:
        return len(self._inner)

    def is_empty(self) -> bool:
        """Return whether no items have been allocated."""
        return self._inner.is_empty()

    def alloc(self, value: Any) -> Any:
        """Store ``value`` and return it; the arena must be mutable."""
        return self._inner.alloc(value)

    def try_alloc(self, value: Any) -> Optional[Any]:
        """Like :meth:`alloc`, but return ``None`` if memory runs out."""
        return self._inner.try_alloc(value)

    def alloc_shared(self, value: Any) -> Any:
        """Store ``value`` and return it for shared, read-only use."""
        return self._inner.alloc_shared(value)

    def try_alloc_shared(self, value: Any) -> Optional[Any]:
        """Like :meth:`alloc_shared`, but return ``None`` if memory runs out."""
        return self._inner.try_alloc_shared(value)

    def iter(self) -> Iter:
        """Return an iterator over the items; the arena must not be mutable."""
        return self._inner.iter()

    def iter_unchecked(self) -> Iter:
        """Return an iterator over the items regardless of mutability."""
        return self._inner.iter_unchecked()

    def iter_mut(self) -> IterMut:
        """Return an iterator handing out the items for mutation."""
        return self._inner.iter_mut_unchecked()

    def iter_at(self, position: Position) -> Iter:
        """Return an iterator starting at ``position``.

        Raises ``ValueError`` if ``position`` does not belong to this arena.
        """
        return self._inner.iter_at(position)

    def iter_at_unchecked(self, position: Position) -> Iter:
        """Like :meth:`iter_at`, regardless of mutability."""
        return self._inner.iter_at_unchecked(position)

    def iter_mut_at(self, position: Position) -> IterMut:
        """Return a mutable iterator starting at ``position``.

        Raises ``ValueError`` if ``position`` does not belong to this arena.
        """
        return self._inner.iter_mut_at_unchecked(position)

    def into_iter(self) -> IntoIter:
        """Move every item out into an iterator, leaving the arena empty."""
        return self._inner.into_iter_unchecked()

    def drop(self) -> None:
        """Release every item, leaving the arena empty and reusable."""
        self._inner.drop()

    def __iter__(self) -> Union[Iter, IterMut]:
        if self.options.mutable:
            return self.iter_mut()
        return self.iter()

    def __enter__(self) -> "Arena":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.drop()