from __future__ import annotations
from typing import Callable, Dict

from kick_core.board import Board, State
from .bfs import bfs
from .budgeted import DEFAULT_BUDGET, budgeted

MODES = ("bfs", "budget")

SearchFn = Callable[[Board, State], Dict[str, object]]


def get_search(mode: str, budget: int = DEFAULT_BUDGET) -> SearchFn:
    mode = mode.lower()
    if mode == "bfs":
        return bfs
    if mode == "budget":
        if budget < 0:
            raise ValueError(f"budget must be >= 0, got {budget}")
        return lambda board, root: budgeted(board, root, budget)
    raise ValueError(f"unknown search mode: {mode}")
