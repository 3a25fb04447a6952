#!/usr/bin/env python3
import argparse, logging, os
from pathlib import Path
from typing import List

import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.domains.puzzle8 import GOAL, decode, format_state, scramble
from eightpuzzle.heuristics import HEURISTICS, get_heuristic
from eightpuzzle.search.a_star import AStar

def draw_board(state: int, out_path: Path):
    grid = decode(state)
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, 3); ax.set_ylim(0, 3)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(4):
        ax.plot([0,3],[i,i], linewidth=1)
        ax.plot([i,i],[0,3], linewidth=1)
    # tiles
    for (r, c), t in zip(((r, c) for r in range(3) for c in range(3)), grid.ravel()):
        if t == 0: continue
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_path(path: List[int], outdir: Path) -> List[Path]:
    out = []
    for i, s in enumerate(path):
        p = outdir / f"step_{i:03d}_{format_state(s)}.png"
        draw_board(s, p)
        out.append(p)
    return out

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--heuristic", choices=sorted(HEURISTICS), default="min_moves")
    p.add_argument("--initial", type=int, default=None, help="Compact start state (overrides --depth/--seed)")
    p.add_argument("--final", type=int, default=GOAL)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max_level", type=int, default=-1)
    p.add_argument("--outdir", default="results/figs/example_path")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    start = args.initial if args.initial is not None else scramble(args.depth, args.seed, args.final)
    solver = AStar(start, args.final, get_heuristic(args.heuristic), args.max_level)
    if not solver.solve():
        print("No path (exhausted or beyond max_level). Try a smaller depth.")
        return

    path = solver.get_solution().path()
    save_path(path, Path(args.outdir))
    print(" -> ".join(format_state(s) for s in path))
    print(f"Saved {len(path)} frames to {args.outdir}")

if __name__ == "__main__":
    main()
