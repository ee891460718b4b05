import copy

import pytest

from fixedarena.chunk import Chunk
from fixedarena.iterators import Cursor, IntoIter, Iter, IterMut, Position


def build(values, capacity):
    head = tail = None
    tail_len = capacity
    for value in values:
        if tail_len == capacity:
            tail = Chunk(capacity, tail)
            if head is None:
                head = tail
            tail_len = 0
        tail.set(tail_len, value)
        tail_len += 1
    end = (tail, tail_len) if tail is not None else None
    return head, end


def make_iter(values, capacity, positions=False):
    head, end = build(values, capacity)
    token = object() if positions else None
    return Iter(Cursor(head, 0, end, token, False), positions)


def _first_slot_is_gone(chunk):
    try:
        chunk.get(0)
    except LookupError:
        return True
    return False


@pytest.mark.parametrize("count,capacity", [(32, 5), (20, 6), (15, 3), (20, 4), (1, 1)])
def test_iter_yields_all_in_order(count, capacity):
    assert list(make_iter(range(count), capacity)) == list(range(count))


def test_empty_cursor_yields_nothing():
    assert list(Iter(Cursor(None))) == []


def test_iterator_is_fused():
    it = make_iter(range(3), 2)
    assert list(it) == [0, 1, 2]
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        next(it)


def test_end_limits_iteration_even_with_later_items():
    head, end = build(range(6), 3)
    # Stop after the first full chunk although a second one follows.
    cursor = Cursor(head, 0, (head, 3))
    assert list(Iter(cursor)) == [0, 1, 2]
    assert list(Iter(Cursor(head, 0, end))) == list(range(6))


def test_cursor_yields_slots():
    head, end = build("abc", 2)
    slots = list(Cursor(head, 0, end))
    assert [chunk.get(i) for chunk, i in slots] == ["a", "b", "c"]
    assert slots[0][0] is head and slots[2][0] is head.next


def test_position_round_trip():
    it = make_iter(range(32), 4, positions=True)
    for _ in range(8):
        next(it)
    pos = it.as_position()
    assert isinstance(pos, Position)
    head_cursor = Cursor(pos.chunk, pos.index, it._cursor.end, pos.token)
    assert list(Iter(head_cursor)) == list(range(8, 32))


def test_position_carries_token():
    it = make_iter(range(4), 2, positions=True)
    pos = it.as_position()
    assert pos.token is it._cursor.token
    assert pos.index == 0


def test_as_position_without_support_raises():
    it = make_iter(range(4), 2)
    with pytest.raises(TypeError):
        it.as_position()
    mut = IterMut(Cursor(None), False)
    with pytest.raises(TypeError):
        mut.as_position()


def test_copy_is_independent():
    it = make_iter(range(10), 3)
    next(it)
    twin = copy.copy(it)
    assert list(it) == list(range(1, 10))
    assert list(twin) == list(range(1, 10))


def test_cursor_copy_is_independent():
    head, end = build(range(5), 2)
    cursor = Cursor(head, 0, end)
    next(cursor)
    other = cursor.copy()
    next(cursor)
    assert other.index == 1
    assert cursor.index == 2


def test_iter_mut_allows_in_place_changes():
    head, end = build([[i] for i in range(7)], 3)
    for item in IterMut(Cursor(head, 0, end)):
        item.append(item[0] * 2)
    assert list(Iter(Cursor(head, 0, end))) == [[i, i * 2] for i in range(7)]


def test_into_iter_moves_items_out():
    head, end = build(range(25, 50), 5)
    chunks = []
    chunk = head
    while chunk is not None:
        chunks.append(chunk)
        chunk = chunk.next
    assert len(chunks) == 5
    assert list(IntoIter(Cursor(head, 0, end, None, True))) == list(range(25, 50))
    assert [c.next for c in chunks] == [None] * 5
    assert [_first_slot_is_gone(c) for c in chunks] == [True] * 5


def test_into_iter_partial_tail():
    head, end = build(range(7), 3)
    into = IntoIter(Cursor(head, 0, end, None, True))
    assert list(into) == list(range(7))
    with pytest.raises(StopIteration):
        next(into)