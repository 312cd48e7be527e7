from pathlib import Path

import pytest

from kick_core.levels.io import iterate_level_strings, load_level_by_id, parse_level_id

LEVELS_DIR = Path(__file__).resolve().parents[1] / "kick_core" / "levels"


def test_examples_iterate():
    pairs = list(iterate_level_strings(str(LEVELS_DIR), ["examples"]))
    # classic + small (3) + extended (2)
    assert len(pairs) == 6
    ids = [ref.level_id for ref, _ in pairs]
    assert ids[0].endswith("classic.txt#0")
    for _, s in pairs:
        assert "@" in s and "G" in s


def test_parse_level_id():
    assert parse_level_id("a/b.txt#3") == ("a/b.txt", 3)
    assert parse_level_id("a/b.txt") == ("a/b.txt", 0)


def test_load_level_by_id():
    board, s = load_level_by_id(str(LEVELS_DIR / "examples" / "small.txt") + "#2")
    assert board.lock is not None and board.key is None
    with pytest.raises(IndexError):
        load_level_by_id(str(LEVELS_DIR / "examples" / "small.txt") + "#9")
