from __future__ import annotations
from typing import Dict, List, NamedTuple, Optional, Tuple

from kick_core.board import State
from kick_core.grid import Direction


class Edge(NamedTuple):
    """How a visited state was (first or best) reached."""
    predecessor: State
    direction: Direction


Parents = Dict[State, Optional[Edge]]


def reconstruct(parent: Parents, end: State) -> Tuple[State, List[Tuple[Direction, State]]]:
    """Walk predecessor edges back from `end` to the root.

    Returns the root and the chronological list of (direction, resulting state).
    """
    stack: List[Tuple[Direction, State]] = []
    cur = end
    edge = parent[cur]
    while edge is not None:
        stack.append((edge.direction, cur))
        cur = edge.predecessor
        edge = parent[cur]
    stack.reverse()
    return cur, stack


def path_states(root: State, steps: List[Tuple[Direction, State]]) -> List[State]:
    return [root] + [s for _, s in steps]
