#!/usr/bin/env python3
"""Generate benchmark CSVs comparing iterative and recursive binary search."""

from __future__ import annotations

import argparse
import csv
import logging
from dataclasses import asdict, fields
from pathlib import Path
import sys

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from bsearch.constants import DEFAULT_BATCHES, DEFAULT_RUNS_PER_BATCH
from bsearch.performance import PerformanceData, run_performance_tests


DEFAULT_SIZES = [10, 100, 1_000, 10_000, 100_000, 1_000_000]

FIELDNAMES = [field.name for field in fields(PerformanceData)]


def _write_csv(path: Path, fieldnames: list[str], rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)


def run_performance_bench(sizes: list[int], batches: int, runs_per_batch: int) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = []
    for data in run_performance_tests(sizes, batches=batches, runs_per_batch=runs_per_batch):
        row = asdict(data)
        for key, value in row.items():
            if isinstance(value, float):
                row[key] = round(value, 6)
        rows.append(row)
    return rows


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate binary search benchmark CSV files")
    parser.add_argument(
        "--metrics-dir",
        default=str(ROOT / "docs" / "metrics"),
        help="Output directory for CSV metrics",
    )
    parser.add_argument("--sizes", type=int, nargs="+", default=DEFAULT_SIZES, help="Array sizes to measure")
    parser.add_argument("--batches", type=int, default=DEFAULT_BATCHES, help="Timed batches per size")
    parser.add_argument("--runs", type=int, default=DEFAULT_RUNS_PER_BATCH, help="Searches per batch")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    rows = run_performance_bench(args.sizes, batches=args.batches, runs_per_batch=args.runs)

    path = Path(args.metrics_dir) / "performance_metrics.csv"
    _write_csv(path, fieldnames=FIELDNAMES, rows=rows)
    print(f"wrote {path}")


if __name__ == "__main__":
    main()
