from __future__ import annotations
from typing import Dict, List

from kick_core.board import Board, State
from kick_core.moves import successors
from .path import Edge, Parents, path_states, reconstruct

Result = Dict[str, object]

# frontier buffers: [current, next round, round after next]
_N_BUFFERS = 3


def _solved(parent: Parents, goal: State, result: Result) -> Result:
    root, steps = reconstruct(parent, goal)
    result.update({
        "success": True,
        "solution_len": len(steps),
        "path": path_states(root, steps),
        "moves": [d for d, _ in steps],
    })
    return result


def bfs(board: Board, root: State) -> Result:
    """Round-synchronous breadth-first search for the goal tile.

    Every round expands one frontier; a new state is only enqueued the first
    time it is seen. The search stops as soon as a state with the player on
    the goal is inserted, so on plain boards the path has the minimum number
    of moves.

    On boards with hazard cells a new state whose player stands on a cell that
    is hazardous at its parity is deferred one extra round (it goes into the
    buffer two rounds ahead instead of the next one).
    """
    parent: Parents = {root: None}
    buffers: List[List[State]] = [[root], [], []]
    expanded = 0
    rounds = 0

    result: Result = {"success": False, "nodes": 0, "rounds": 0, "visited": 1}
    if root.player == board.goal:
        return _solved(parent, root, result)

    while any(buffers):
        current = buffers[0]
        for s in current:
            expanded += 1
            for d, ns in successors(board, s):
                if ns in parent:
                    continue
                parent[ns] = Edge(s, d)
                if ns.player == board.goal:
                    result.update({"nodes": expanded, "rounds": rounds, "visited": len(parent)})
                    return _solved(parent, ns, result)
                if board.hazard_at(ns.player, ns.move_parity):
                    buffers[2].append(ns)
                else:
                    buffers[1].append(ns)
        current.clear()
        # rotate: next round becomes current, the emptied buffer goes to the back
        buffers = buffers[1:] + buffers[:1]
        rounds += 1

    result.update({"nodes": expanded, "rounds": rounds, "visited": len(parent)})
    return result
