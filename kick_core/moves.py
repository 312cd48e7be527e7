from dataclasses import replace
from typing import List, Optional, Tuple

from .board import Board, State
from .grid import ALL_DIRECTIONS, Coord, Direction


def is_obstructed(board: Board, state: State, c: Coord) -> bool:
    """Wall, obstacle (plain or fragile), or the lock while the key is missing.

    A lock on a board without a key is plain floor.
    """
    if board.is_wall(c) or state.has_obstacle(c) or state.has_fragile(c):
        return True
    return board.lock == c and board.key is not None and not state.has_key


def resulting_state(board: Board, state: State, direction: Direction) -> Optional[State]:
    """State after one input in `direction`, or None if the input is illegal.

    Rules:
      1) free cell ahead → the player walks there (and picks up the key on it),
      2) plain obstacle ahead with a free cell behind it → the obstacle is kicked
         one cell; the player stays where it is,
      3) fragile obstacle ahead → kicked like a plain one, or destroyed when the
         cell behind it is blocked or off the grid; the player stays as well.
    Every accepted input flips move_parity.
    """
    dims = board.dims
    step1 = state.player.take_step(direction, dims)
    if step1 is None:
        return None

    if not is_obstructed(board, state, step1):
        return replace(
            state,
            player=step1,
            has_key=state.has_key or step1 == board.key,
            move_parity=not state.move_parity,
        )

    step2 = step1.take_step(direction, dims)
    free_behind = step2 is not None and not is_obstructed(board, state, step2)

    if state.has_obstacle(step1):
        if not free_behind:
            return None
        obstacles = state.obstacles.copy()
        obstacles.remove(step1)
        obstacles.insert(step2)
        return replace(state, obstacles=obstacles, move_parity=not state.move_parity)

    if state.has_fragile(step1):
        fragile = state.fragile.copy()
        fragile.remove(step1)
        if free_behind:
            fragile.insert(step2)
        return replace(state, fragile=fragile, move_parity=not state.move_parity)

    # wall or closed lock
    return None


def successors(board: Board, state: State) -> List[Tuple[Direction, State]]:
    """All legal (direction, new state) pairs, in search expansion order."""
    succs: List[Tuple[Direction, State]] = []
    for d in ALL_DIRECTIONS:
        ns = resulting_state(board, state, d)
        if ns is not None:
            succs.append((d, ns))
    return succs
