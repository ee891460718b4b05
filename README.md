# fixedarena

An arena that stores items in chunks of a fixed, configurable size. A new
chunk is added only when the current one is full. Existing chunks are never
grown or moved, so each allocation takes constant time. Items keep their
allocation order and can be iterated at any time.

## Installation

```
pip install fixedarena
```

## Quick start

```python
from fixedarena.arena import Arena

with Arena(chunk_size=128) as arena:
    first = arena.alloc([1])
    second = arena.alloc([2])
    first[0] += second[0]
    assert first == [3]
    assert len(arena) == 2
```

`alloc` returns the very object that was stored. Changing that object
changes the item in the arena.

## Options

Both arena types take the same three options. They are collected in the
frozen dataclass `fixedarena.options.ArenaOptions`, which is available as
`arena.options`.

| Option               | Default | Meaning                                                        |
| -------------------- | ------- | -------------------------------------------------------------- |
| `chunk_size`         | 16      | Number of items each chunk holds                               |
| `supports_positions` | False   | Enables `as_position()` on iterators and the `*_at` methods    |
| `mutable`            | True    | Whether `alloc` and `try_alloc` may be used                    |

A `chunk_size` that is not an integer raises `TypeError`. A negative
`chunk_size` raises `ValueError`. With a `chunk_size` of 0 the arena can be
created, but any allocation raises `ValueError`.

## Arena

`fixedarena.arena.Arena` releases its items when `drop()` is called or when
a `with` block around it exits. After `drop()` the arena is empty and can
be used again. The arena does not release its items when it is garbage
collected.

- `alloc(value)` and `try_alloc(value)` store an item and return it. They
  raise `TypeError` if the arena was created with `mutable=False`.
  `try_alloc` returns `None` instead of raising `MemoryError`.
- `alloc_shared(value)` and `try_alloc_shared(value)` store an item in any
  arena.
- `iter()` iterates over the items. It raises `TypeError` unless the arena
  was created with `mutable=False`.
- `iter_unchecked()` and `iter_mut()` iterate over the items of any arena.
- `iter(arena)` uses `iter_mut()` for a mutable arena and `iter()`
  otherwise.
- `into_iter()` yields the items in order and leaves the arena empty.
- `len(arena)` gives the number of items stored, and `is_empty()` tells
  whether that number is zero.

## Positions

With `supports_positions=True`, an iterator's `as_position()` records where
it stands as a `fixedarena.iterators.Position`. Iteration can later resume
from that point, even after more items have been allocated:

```python
from fixedarena.arena import Arena

arena = Arena(chunk_size=4, supports_positions=True)
for i in range(32):
    arena.alloc(i)

it = arena.iter_mut()
for _ in range(8):
    next(it)
pos = it.as_position()

for i in range(32, 48):
    arena.alloc(i)

assert list(arena.iter_mut_at(pos)) == list(range(8, 48))
```

`iter_at(position)` requires `mutable=False`. `iter_at_unchecked` and
`iter_mut_at` work on any arena that supports positions. Calling
`as_position()` or a `*_at` method without `supports_positions=True` raises
`TypeError`. Resuming from a position that belongs to another arena raises
`ValueError`. The same holds for a position taken before the arena was
dropped and reused.

## ManuallyDropArena

`fixedarena.manually_drop.ManuallyDropArena` keeps its items until
`drop()` (or its alias `manually_drop()`) is called. After that it is empty
and can be used again. It offers the same allocation methods as `Arena`.
Its iteration methods are `iter()`, `iter_unchecked()`,
`iter_mut_unchecked()`, `into_iter_unchecked()`, `iter_at()`,
`iter_at_unchecked()` and `iter_mut_at_unchecked()`. Iterating it directly
uses `iter()`, so it needs `mutable=False`. It is not a context manager.

## Lower-level pieces

- `fixedarena.chunk.Chunk` is a block of fixed capacity with slot access
  (`get`, `set`, `take`, `drop_item`, `drop_all`) and a `next` link.
- `fixedarena.iterators.Cursor` walks a list of chunks. The iterators
  `Iter`, `IterMut` and `IntoIter` are built on top of it.

## What it does not do

Python manages memory itself. This package therefore does not control where
items live or how memory is allocated. It only keeps items in fixed-size
chunks and gives the iteration and position behaviour described above. It
has no command-line interface.

## Running the tests

```
pip install -e ".[test]"
pytest
```