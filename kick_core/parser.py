from typing import Dict, List, Optional, Tuple

from .board import Board, State
from .coordset import CoordSet
from .grid import Coord, Dims, DEFAULT_DIMS

TOK_WALL = "#"
TOK_FLOOR = " "
TOK_PLAYER = "@"
TOK_GOAL = "G"
TOK_OBSTACLE = "O"
TOK_KEY = "K"
TOK_LOCK = "L"
TOK_FRAGILE = "F"
TOK_HAZARD_ODD = "1"
TOK_HAZARD_EVEN = "0"
TOK_ROW_END = "|"

_SINGLE = (TOK_PLAYER, TOK_GOAL, TOK_KEY, TOK_LOCK)
_MARKERS = frozenset(_SINGLE + (TOK_WALL, TOK_OBSTACLE, TOK_FRAGILE, TOK_HAZARD_ODD, TOK_HAZARD_EVEN))


def _rows(level_str: str) -> List[str]:
    rows = []
    for line in level_str.splitlines():
        if line == "":
            continue
        if line.endswith(TOK_ROW_END):
            line = line[:-1]
        rows.extend(line.split(TOK_ROW_END))
    return rows


def parse_level_str(level_str: str, dims: Dims = DEFAULT_DIMS) -> Tuple[Board, State]:
    """Parses a map literal into (Board, initial State).

    Supported characters:
      '#': wall
      '@': player start
      'G': goal
      'O': obstacle (kickable)
      'K': key
      'L': lock (passable once the key is taken)
      'F': fragile obstacle (destroyed when kicked against something)
      '1': hazard after an odd number of moves
      '0': hazard after an even number of moves
      ' ' (space): floor
    Rows end with a newline or '|'. Other characters are treated as floor.
    Raises ValueError on markers outside the grid, missing player/goal, or
    duplicated player/goal/key/lock.
    """
    rows = _rows(level_str)
    if not rows:
        raise ValueError("Empty level")

    walls = CoordSet(dims)
    obstacles = CoordSet(dims)
    fragile: Optional[CoordSet] = None
    hazard_odd: Optional[CoordSet] = None
    hazard_even: Optional[CoordSet] = None
    singles: Dict[str, Coord] = {}

    for y, row in enumerate(rows):
        for x, ch in enumerate(row):
            if ch not in _MARKERS:
                continue
            if not dims.contains(x, y):
                raise ValueError(f"'{ch}' at ({x}, {y}) is outside the {dims.width}x{dims.height} grid")
            c = Coord(x, y)

            if ch == TOK_WALL:
                walls.insert(c)
            elif ch == TOK_OBSTACLE:
                obstacles.insert(c)
            elif ch == TOK_FRAGILE:
                if fragile is None:
                    fragile = CoordSet(dims)
                fragile.insert(c)
            elif ch == TOK_HAZARD_ODD:
                if hazard_odd is None:
                    hazard_odd = CoordSet(dims)
                hazard_odd.insert(c)
            elif ch == TOK_HAZARD_EVEN:
                if hazard_even is None:
                    hazard_even = CoordSet(dims)
                hazard_even.insert(c)
            elif ch in _SINGLE:
                if ch in singles:
                    raise ValueError(f"More than one '{ch}' in level")
                singles[ch] = c

    if TOK_PLAYER not in singles:
        raise ValueError("No player '@' found in level")
    if TOK_GOAL not in singles:
        raise ValueError("No goal 'G' found in level")

    # parity hazards come in pairs; a level using only one kind gets an empty other set
    if hazard_odd is not None or hazard_even is not None:
        hazard_odd = hazard_odd if hazard_odd is not None else CoordSet(dims)
        hazard_even = hazard_even if hazard_even is not None else CoordSet(dims)

    board = Board(
        dims=dims,
        walls=walls,
        goal=singles[TOK_GOAL],
        key=singles.get(TOK_KEY),
        lock=singles.get(TOK_LOCK),
        hazard_odd=hazard_odd,
        hazard_even=hazard_even,
    )
    state = State(obstacles=obstacles, player=singles[TOK_PLAYER], fragile=fragile)
    return board, state


def parse_level_file(path: str, dims: Dims = DEFAULT_DIMS) -> Tuple[Board, State]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_level_str(f.read(), dims)
