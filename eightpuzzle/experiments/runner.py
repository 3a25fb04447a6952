#!/usr/bin/env python3
from __future__ import annotations
import argparse, csv, logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

from eightpuzzle.domains.puzzle8 import (
    GOAL, format_state, make_unsolvable_variant, scramble,
)
from eightpuzzle.heuristics import HEURISTICS, get_heuristic
from eightpuzzle.search.a_star import AStar, UNLIMITED

HEADER = [
    "algorithm","heuristic","depth","seed","initial",
    "expanded","generated","duplicates","g","time_sec",
    "peak_open","peak_closed","max_level","termination","solvable",
]

@dataclass
class Instance:
    seed: int
    depth: int
    state: int
    solvable: bool = True

def make_instances(depths: List[int], per_depth: int, start_seed: int = 0,
                   goal: int = GOAL, include_unsolvable: bool = False) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        for _ in range(per_depth):
            s = scramble(d, seed, goal)
            out.append(Instance(seed=seed, depth=d, state=s))
            if include_unsolvable:
                out.append(Instance(seed=seed, depth=d, state=make_unsolvable_variant(s), solvable=False))
            seed += 1
    return out

def run_instance(inst: Instance, heuristic: str, goal: int = GOAL,
                 max_level: int = UNLIMITED) -> Dict[str, Any]:
    solver = AStar(inst.state, goal, get_heuristic(heuristic), max_level)
    solver.solve()
    res = solver.stats()
    res.update(depth=inst.depth, seed=inst.seed, initial=format_state(inst.state),
               max_level=max_level, solvable=int(inst.solvable))
    return res

def write_results(rows: Iterable[Dict[str, Any]], out: Path) -> int:
    out.parent.mkdir(parents=True, exist_ok=True)
    n = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for res in rows:
            w.writerow([
                res["algorithm"], res["heuristic"], res["depth"], res["seed"], res["initial"],
                res["expanded"], res["generated"], res["duplicates"],
                "" if res["g"] is None else res["g"],
                f"{res['time']:.6f}",
                res["peak_open"], res["peak_closed"], res["max_level"],
                res["termination"], res["solvable"],
            ])
            n += 1
    return n

def main(argv=None):
    ap = argparse.ArgumentParser(description="8-puzzle best-first search experiment runner")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="min_moves")
    ap.add_argument("--depths", type=int, nargs="+", default=[4, 8, 12, 16])
    ap.add_argument("--per_depth", type=int, default=10)
    ap.add_argument("--seed", type=int, default=0, help="First scramble seed")
    ap.add_argument("--max_level", type=int, default=UNLIMITED, help="Depth cutoff, -1 = unlimited")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also run the parity-flipped variant of every instance")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    insts = make_instances(args.depths, args.per_depth, args.seed,
                           include_unsolvable=args.include_unsolvable)
    n = write_results(
        (run_instance(inst, args.heuristic, max_level=args.max_level) for inst in insts),
        args.out,
    )
    print(f"Wrote {args.out} ({n} runs)")

if __name__ == "__main__":
    main()
