import dataclasses

import pytest

from fixedarena.options import DEFAULT_CHUNK_SIZE, ArenaOptions


def test_defaults_match_documented_values():
    options = ArenaOptions()
    assert options.chunk_size == 16
    assert options.supports_positions is False
    assert options.mutable is True
    assert DEFAULT_CHUNK_SIZE == options.chunk_size


def test_explicit_values_are_kept():
    options = ArenaOptions(5, True, False)
    assert (options.chunk_size, options.supports_positions, options.mutable) == (
        5,
        True,
        False,
    )


def test_zero_chunk_size_is_accepted():
    assert ArenaOptions(chunk_size=0).chunk_size == 0


def test_negative_chunk_size_rejected():
    with pytest.raises(ValueError):
        ArenaOptions(chunk_size=-1)


@pytest.mark.parametrize("bad", [1.5, "4", None, True])
def test_non_integer_chunk_size_rejected(bad):
    with pytest.raises(TypeError):
        ArenaOptions(chunk_size=bad)


def test_options_are_frozen():
    options = ArenaOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.chunk_size = 4
    assert options.chunk_size == 16


def test_equality_by_value():
    assert ArenaOptions(4, True, False) == ArenaOptions(4, True, False)
    assert ArenaOptions(4) != ArenaOptions(5)