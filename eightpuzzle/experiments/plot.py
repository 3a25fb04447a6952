#!/usr/bin/env python3
import os, argparse
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from eightpuzzle.experiments.summarize import METRICS, load_results, summarize

def plot_metric(ax, table, metric):
    for heur, sub in table.groupby("heuristic"):
        sub = sub.sort_values("depth")
        ax.errorbar(sub["depth"], sub[f"{metric}_mean"], yerr=sub[f"{metric}_std"],
                    marker="o", capsize=3, label=heur)
    ax.set_xlabel("Depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs Depth (mean ± std)")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot results CSVs and save PNGs.")
    ap.add_argument("csv", nargs="+", help="One or more CSV result files")
    ap.add_argument("--save", default="results/plots", help="Directory to save plots")
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    table = summarize(load_results(args.csv))
    if table.empty:
        print("No rows to plot. Are your CSVs empty?")
        return

    outdir = Path(args.save)
    base = "combo" if len(args.csv) > 1 else Path(args.csv[0]).stem
    for metric in METRICS:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, table, metric)
        plt.tight_layout()
        save_fig(fig, outdir, f"{base}_{metric}")
        if not args.show:
            plt.close(fig)

    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
