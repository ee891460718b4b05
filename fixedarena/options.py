"""Configuration shared by the arena types."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CHUNK_SIZE = 16


@dataclass(frozen=True)
class ArenaOptions:
    """Options that control how an arena stores and hands out items.

    ``chunk_size`` is the number of items each fixed-size chunk holds.
    ``supports_positions`` enables saving and restoring iterator positions.
    ``mutable`` allows the arena to hand out items for mutation.
    """

    chunk_size: int = DEFAULT_CHUNK_SIZE
    supports_positions: bool = False
    mutable: bool = True

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        supports_positions: bool = False,
        mutable: bool = True,
    ) -> None:
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int):
            raise TypeError("chunk_size must be an integer")
        if chunk_size < 0:
            raise ValueError("chunk_size must not be negative")
        object.__setattr__(self, "chunk_size", chunk_size)
        object.__setattr__(self, "supports_positions", bool(supports_positions))
        object.__setattr__(self, "mutable", bool(mutable))