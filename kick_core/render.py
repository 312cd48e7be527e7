from typing import List, Tuple

from .board import Board, State
from .grid import Coord, Direction


def render_ascii(board: Board, state: State) -> str:
    """ASCII visualization of the state, using the parser's characters."""
    out_lines = []
    for y in range(board.dims.height):
        row_chars = []
        for x in range(board.dims.width):
            c = Coord(x, y)
            if state.player == c:
                row_chars.append('@')
            elif board.is_wall(c):
                row_chars.append('#')
            elif state.has_obstacle(c):
                row_chars.append('O')
            elif state.has_fragile(c):
                row_chars.append('F')
            elif board.lock == c:
                row_chars.append('L')
            elif not state.has_key and board.key == c:
                row_chars.append('K')
            elif board.goal == c:
                row_chars.append('G')
            elif board.hazard_odd is not None and board.hazard_odd.contains(c):
                row_chars.append('1')
            elif board.hazard_even is not None and board.hazard_even.contains(c):
                row_chars.append('0')
            else:
                row_chars.append(' ')
        out_lines.append(''.join(row_chars))
    return "\n".join(out_lines)


def render_solution(board: Board, root: State, steps: List[Tuple[Direction, State]]) -> str:
    """Root snapshot followed by one snapshot per move."""
    parts = [render_ascii(board, root)]
    for step_num, (direction, s) in enumerate(steps, start=1):
        parts.append(f"\nstep: {step_num}, input: {direction}\n{render_ascii(board, s)}")
    return "\n".join(parts)
