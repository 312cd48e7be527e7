import pytest

from kick_core.coordset import CoordSet
from kick_core.grid import Coord, Dims, DEFAULT_DIMS


def all_coords(dims: Dims):
    return [Coord(x, y) for y in range(dims.height) for x in range(dims.width)]


def test_insert_contains_remove_every_cell():
    for c in all_coords(DEFAULT_DIMS):
        s = CoordSet()
        assert not s.contains(c)
        s.insert(c)
        assert s.contains(c)
        assert len(s) == 1
        s.remove(c)
        assert not s.contains(c)
        assert not s


def test_disjoint_cells_do_not_interact():
    a, b = Coord(3, 1), Coord(3, 5)
    s = CoordSet.from_coords([a, b])
    s.remove(a)
    assert s.contains(b) and not s.contains(a)
    s.insert(a)
    s.remove(b)
    assert s.contains(a) and not s.contains(b)


def test_insert_and_remove_are_idempotent():
    c = Coord(7, 2)
    s = CoordSet()
    s.remove(c)
    assert s == CoordSet()
    s.insert(c)
    s.insert(c)
    assert len(s) == 1
    s.remove(c)
    s.remove(c)
    assert s == CoordSet()


def test_bit_layout_row_major_in_words():
    # 16x8 with 64-bit words: cell (0, 4) is the first bit of the second word
    s = CoordSet.from_coords([Coord(0, 1), Coord(0, 4)])
    assert s.words == (1 << 16, 1)
    assert list(s) == [Coord(0, 1), Coord(0, 4)]


def test_word_count_rounds_up():
    dims = Dims(width=5, height=3, word_bits=8)
    assert dims.n_words == 2
    s = CoordSet.from_coords([Coord(4, 2)], dims)
    assert s.words == (0, 1 << 6)


def test_equality_and_hash_follow_bits():
    a = CoordSet.from_coords([Coord(1, 1), Coord(2, 2)])
    b = CoordSet.from_coords([Coord(2, 2), Coord(1, 1)])
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    c = b.copy()
    c.remove(Coord(1, 1))
    assert c != a
    assert b == a  # copy is independent


def test_out_of_range_coordinate_rejected():
    s = CoordSet(Dims(width=4, height=4))
    with pytest.raises(ValueError):
        s.insert(Coord(4, 0))
    with pytest.raises(ValueError):
        s.contains(Coord(0, 4))
