#!/usr/bin/env python3
import argparse, os
from pathlib import Path
from typing import Iterable

import pandas as pd

METRICS = ("expanded", "generated", "time_sec")

def load_results(paths: Iterable) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = os.path.basename(str(p))
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)

    # Keep clean rows only
    term = df["termination"] if "termination" in df.columns else pd.Series("ok", index=df.index)
    df = df[term.fillna("ok") == "ok"].copy()

    for c in ("depth", "seed", "g") + METRICS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """mean/std/count of each metric per (heuristic, depth)."""
    if df.empty:
        return pd.DataFrame()
    g = df.groupby(["heuristic", "depth"])[list(METRICS)].agg(["mean", "std", "count"])
    g.columns = [f"{m}_{stat}" for m, stat in g.columns]
    return g.reset_index().fillna({f"{m}_std": 0.0 for m in METRICS})

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize runner CSVs per heuristic and depth.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args(argv)

    table = summarize(load_results(args.csv))
    if table.empty:
        print("No solved rows to summarize. Are your CSVs empty?")
        return
    print(table.to_string(index=False))
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
