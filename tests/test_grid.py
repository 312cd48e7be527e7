import pytest

from kick_core.grid import ALL_DIRECTIONS, Coord, Dims, DEFAULT_DIMS, Direction


def test_default_dims():
    assert DEFAULT_DIMS.width == 16 and DEFAULT_DIMS.height == 8
    assert DEFAULT_DIMS.cells == 128
    assert DEFAULT_DIMS.n_words == 2


def test_coord_bounds_checked():
    assert DEFAULT_DIMS.coord(15, 7) == Coord(15, 7)
    with pytest.raises(ValueError):
        DEFAULT_DIMS.coord(16, 0)
    with pytest.raises(ValueError):
        DEFAULT_DIMS.coord(0, 8)
    with pytest.raises(ValueError):
        Coord(-1, 0)


def test_take_step_stays_on_grid():
    dims = Dims(width=3, height=2)
    corner = Coord(0, 0)
    assert corner.take_step(Direction.LEFT, dims) is None
    assert corner.take_step(Direction.UP, dims) is None
    assert corner.take_step(Direction.RIGHT, dims) == Coord(1, 0)
    assert corner.take_step(Direction.DOWN, dims) == Coord(0, 1)
    far = Coord(2, 1)
    assert far.take_step(Direction.RIGHT, dims) is None
    assert far.take_step(Direction.DOWN, dims) is None


def test_direction_order_and_names():
    assert ALL_DIRECTIONS == (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
    assert str(Direction.RIGHT) == "Right"
