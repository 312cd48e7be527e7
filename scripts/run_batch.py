from __future__ import annotations
import argparse, csv, os, time
from typing import Dict, List
from multiprocessing import Pool, cpu_count

import yaml
from tqdm import tqdm

from kick_core.grid import Dims
from kick_core.levels.io import iterate_level_strings, load_level_by_id
from search.selector import MODES, get_search

"""
Solve every level found under the configured sources and write one CSV row per level.

Usage:
  python -m scripts.run_batch --config configs/batch.yaml --mode budget --budget 40
"""

FIELDS = ["level_id", "mode", "success", "nodes", "rounds", "solution_len", "steps_left", "runtime"]


def _run_one(args_tuple) -> Dict[str, object]:
    level_id, mode, budget, width, height = args_tuple
    try:
        board, root = load_level_by_id(level_id, Dims(width=width, height=height))
        search = get_search(mode, budget)
        t0 = time.time()
        res = search(board, root)
        runtime = time.time() - t0
        return {
            "level_id": level_id,
            "mode": mode,
            "success": bool(res.get("success", False)),
            "nodes": int(res.get("nodes", 0)),
            "rounds": int(res.get("rounds", -1)),
            "solution_len": int(res.get("solution_len", -1)),
            "steps_left": int(res.get("steps_left", -1)),
            "runtime": runtime,
        }
    except (OSError, ValueError, IndexError) as e:
        tqdm.write(f"{level_id}: {e}")
        return {"level_id": level_id, "mode": mode, "success": False, "nodes": 0, "rounds": -1,
                "solution_len": -1, "steps_left": -1, "runtime": 0.0}


def main():
    p = argparse.ArgumentParser(description="Batch solver runs → CSV (config + flags, parallel)")
    p.add_argument("--config", type=str, default="configs/batch.yaml")
    p.add_argument("--mode", choices=MODES, default=None, help="overrides search.mode")
    p.add_argument("--budget", type=int, default=None, help="overrides search.budget")
    p.add_argument("--out", default=None, help="overrides out")
    p.add_argument("--jobs", type=int, default=None, help="processes (0→cpu_count)")
    args = p.parse_args()

    with open(args.config, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)

    root = cfg["levels"]["root_dir"]
    rels = cfg["levels"]["sources"]
    grid = cfg.get("grid", {})
    srch = cfg.get("search", {})
    mode = args.mode or srch.get("mode", "bfs")
    budget = args.budget if args.budget is not None else srch.get("budget", 33)
    out = args.out or cfg.get("out", "results/batch.csv")
    jobs = args.jobs if args.jobs is not None else cfg.get("jobs", 0)
    jobs = jobs or cpu_count()

    level_ids: List[str] = [ref.level_id for ref, _ in iterate_level_strings(root, rels)]
    payload = [(lid, mode, budget, grid.get("width", 16), grid.get("height", 8)) for lid in level_ids]

    started = time.time()
    if jobs == 1:
        rows = [_run_one(t) for t in tqdm(payload, desc=f"Running {mode}", unit="level")]
    else:
        with Pool(processes=jobs) as pool:
            rows = list(tqdm(pool.imap_unordered(_run_one, payload), total=len(payload), desc=f"Running {mode}", unit="level"))

    os.makedirs(os.path.dirname(out) or ".", exist_ok=True)
    with open(out, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=FIELDS)
        w.writeheader()
        for r in rows:
            w.writerow(r)

    solved = sum(1 for r in rows if r["success"])
    print(f"done: {solved}/{len(rows)} solved → {out}; total_time={time.time()-started:.2f}s; jobs={jobs}")


if __name__ == "__main__":
    main()
