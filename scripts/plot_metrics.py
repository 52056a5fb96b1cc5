#!/usr/bin/env python3
"""Render binary search benchmark charts from CSV metrics into SVG."""

from __future__ import annotations

import argparse
import csv
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]

PALETTE = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "grid": "#2b2b2b",
    "text": "#e6e2d8",
    "muted": "#bdb8ad",
    "iterative": "#4a7fb5",
    "recursive": "#b54a4a",
    "bound": "#c6a25a",
}

DARK_THEME = {
    "axes.facecolor": PALETTE["panel"],
    "axes.edgecolor": PALETTE["grid"],
    "axes.labelcolor": PALETTE["text"],
    "axes.titlecolor": PALETTE["text"],
    "figure.facecolor": PALETTE["bg"],
    "grid.color": PALETTE["grid"],
    "text.color": PALETTE["text"],
    "xtick.color": PALETTE["muted"],
    "ytick.color": PALETTE["muted"],
}

VARIANTS = ("iterative", "recursive")


def load_rows(path: Path) -> list[dict[str, str]]:
    with path.open(encoding="utf-8", newline="") as handle:
        rows = list(csv.DictReader(handle))
    return sorted(rows, key=lambda row: int(row["size"]))


def _column(rows: list[dict[str, str]], name: str) -> list[float]:
    return [float(row[name]) for row in rows]


def _plot_times(ax, sizes: list[int], rows: list[dict[str, str]]) -> None:
    for variant in VARIANTS:
        mean = _column(rows, f"{variant}_time_avg")
        spread = _column(rows, f"{variant}_time_stddev")
        color = PALETTE[variant]
        ax.plot(sizes, mean, marker="o", linewidth=2.5, color=color, label=variant)
        ax.fill_between(
            sizes,
            [m - s for m, s in zip(mean, spread)],
            [m + s for m, s in zip(mean, spread)],
            color=color,
            alpha=0.2,
        )
    ax.set_title("Mean Time per Search")
    ax.set_ylabel("Microseconds")


def _plot_comparisons(ax, sizes: list[int], rows: list[dict[str, str]]) -> None:
    for variant, style in zip(VARIANTS, ("-", "--")):
        ax.plot(
            sizes,
            _column(rows, f"{variant}_comparisons"),
            marker="o",
            linestyle=style,
            linewidth=2.0,
            color=PALETTE[variant],
            label=variant,
        )
    ax.step(sizes, _column(rows, "theoretical_comparisons"), where="post", color=PALETTE["bound"], label="ceil(log2 n)")
    ax.set_title("Comparisons per Search")
    ax.set_ylabel("Comparisons")


def plot(rows: list[dict[str, str]], output: Path) -> None:
    sizes = [int(row["size"]) for row in rows]

    with plt.rc_context(DARK_THEME):
        fig, (time_ax, comp_ax) = plt.subplots(1, 2, figsize=(16, 6), dpi=150)
        fig.suptitle("Iterative vs Recursive Binary Search", fontsize=18, fontweight="bold")

        _plot_times(time_ax, sizes, rows)
        _plot_comparisons(comp_ax, sizes, rows)

        for ax in (time_ax, comp_ax):
            ax.set_xscale("log")
            ax.set_xlabel("Array size")
            ax.grid(True, alpha=0.6)
            ax.legend(frameon=False)

        output.parent.mkdir(parents=True, exist_ok=True)
        fig.tight_layout(rect=(0, 0, 1, 0.95))
        fig.savefig(output, format="svg")
        plt.close(fig)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Chart iterative vs recursive search timings")
    parser.add_argument(
        "--input",
        default=str(ROOT / "docs" / "metrics" / "performance_metrics.csv"),
        help="CSV written by scripts/bench.py",
    )
    parser.add_argument(
        "--output",
        default=str(ROOT / "docs" / "visuals" / "performance-charts.svg"),
        help="Output SVG path",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    output = Path(args.output)
    plot(load_rows(Path(args.input)), output)
    print(f"wrote {output}")


if __name__ == "__main__":
    main()
