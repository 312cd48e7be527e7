from kick_core.grid import Direction
from kick_core.moves import resulting_state
from kick_core.parser import parse_level_str
from search.path import Edge, path_states, reconstruct


def test_reconstruct_walks_back_to_root():
    board, root = parse_level_str("#@  G#")
    a = resulting_state(board, root, Direction.RIGHT)
    b = resulting_state(board, a, Direction.RIGHT)
    c = resulting_state(board, b, Direction.RIGHT)
    parent = {
        root: None,
        a: Edge(root, Direction.RIGHT),
        b: Edge(a, Direction.RIGHT),
        c: Edge(b, Direction.RIGHT),
    }
    start, steps = reconstruct(parent, c)
    assert start == root
    assert steps == [(Direction.RIGHT, a), (Direction.RIGHT, b), (Direction.RIGHT, c)]
    assert path_states(start, steps) == [root, a, b, c]


def test_reconstruct_root_only():
    board, root = parse_level_str("#@G#")
    start, steps = reconstruct({root: None}, root)
    assert start == root
    assert steps == []
