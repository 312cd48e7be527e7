from __future__ import annotations
import argparse
import time

from kick_core.grid import Dims
from kick_core.parser import parse_level_str
from kick_core.levels.io import load_level_by_id
from kick_core.render import render_solution
from search.budgeted import DEFAULT_BUDGET
from search.selector import MODES, get_search

LVL = """
###########|
#### G ####|
####OLO####|
##O#O  # ##|
#O  OOO  K#|
# OOO  OO #|
##@ O  O ##|
###########
"""

def main():
    p = argparse.ArgumentParser(description="Solve one level and print the move sequence.")
    p.add_argument("--level", type=str, default="inline", help="path to .txt level (optionally 'file.txt#idx') or 'inline'")
    p.add_argument("--mode", type=str, default="bfs", choices=MODES, help="shortest path or budgeted best path")
    p.add_argument("--budget", type=int, default=DEFAULT_BUDGET, help="move budget for --mode budget")
    p.add_argument("--width", type=int, default=16)
    p.add_argument("--height", type=int, default=8)
    args = p.parse_args()

    dims = Dims(width=args.width, height=args.height)
    if args.level == "inline":
        board, root = parse_level_str(LVL, dims)
    else:
        board, root = load_level_by_id(args.level, dims)

    search = get_search(args.mode, args.budget)
    t0 = time.time()
    res = search(board, root)
    print(f"Took {time.time() - t0:.3f}s")
    print("Result:", {k: v for k, v in res.items() if k not in ("path", "moves")})
    if not res.get("success"):
        print("No solutions")
        return
    path = res["path"]  # type: ignore
    moves = res["moves"]  # type: ignore
    print(render_solution(board, path[0], list(zip(moves, path[1:]))))

if __name__ == "__main__":
    main()
