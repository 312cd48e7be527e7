from __future__ import annotations
from typing import Dict, List, Optional

from kick_core.board import Board, State
from kick_core.moves import successors
from .path import Edge, Parents, path_states, reconstruct

Result = Dict[str, object]

DEFAULT_BUDGET = 33


def budgeted(board: Board, root: State, budget: int = DEFAULT_BUDGET) -> Result:
    """Best path to the goal within `budget` moves (label-correcting search).

    left[s] is the largest number of moves still available on arrival at s.
    A state is re-expanded whenever a route leaving strictly more moves is
    found; the stack drains once no label can be improved. Among the goal
    states found, the one with the most moves left wins.
    """
    parent: Parents = {root: None}
    left: Dict[State, int] = {root: budget}
    stack: List[State] = [root]
    expanded = 0

    best: Optional[State] = None
    if root.player == board.goal:
        best = root

    while stack:
        s = stack.pop()
        ls = left[s]
        if ls <= 0:
            continue
        expanded += 1
        nl = ls - 1
        for d, ns in successors(board, s):
            old = left.get(ns)
            if old is not None and old >= nl:
                continue
            parent[ns] = Edge(s, d)
            left[ns] = nl
            if nl > 0:
                stack.append(ns)
            if ns.player == board.goal and (best is None or nl > left[best]):
                best = ns

    result: Result = {
        "success": best is not None,
        "nodes": expanded,
        "visited": len(parent),
        "budget": budget,
    }
    if best is None:
        return result
    root_state, steps = reconstruct(parent, best)
    result.update({
        "steps_left": left[best],
        "solution_len": len(steps),
        "path": path_states(root_state, steps),
        "moves": [d for d, _ in steps],
    })
    return result
