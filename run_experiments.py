#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    for heur in ("misplaced", "min_moves", "linear_conflict"):
        run(f"{sys.executable} -m eightpuzzle.experiments.runner --depths 4 8 12 16 --per_depth 10 --heuristic {heur} --out results/{heur}.csv")
    run(f"{sys.executable} -m eightpuzzle.experiments.summarize results/misplaced.csv results/min_moves.csv results/linear_conflict.csv --out results/summary.csv")
    run(f"{sys.executable} -m eightpuzzle.experiments.plot results/misplaced.csv results/min_moves.csv results/linear_conflict.csv --save results/plots")

if __name__ == "__main__":
    main()
