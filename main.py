"""Command-line utilities for the binary search service."""

from __future__ import annotations

import argparse
import logging

from bsearch.arrays import generate_sorted_array
from bsearch.constants import API_HOST, API_PORT, DEFAULT_BATCHES, DEFAULT_RUNS_PER_BATCH
from bsearch.performance import PerformanceData, run_performance_tests
from bsearch.search import SearchResult, binary_search_iterative, binary_search_recursive


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Binary search utilities")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=False)

    search_parser = subparsers.add_parser("search", help="Run a traced search")
    search_parser.add_argument("variant", choices=["iterative", "recursive"], help="Search variant")
    search_parser.add_argument("target", type=int, help="Value to look for")
    source = search_parser.add_mutually_exclusive_group()
    source.add_argument("--size", type=int, default=16, help="Search in [1..size]")
    source.add_argument("--array", type=int, nargs="+", help="Explicit sorted array")

    generate_parser = subparsers.add_parser("generate", help="Print a sorted array")
    generate_parser.add_argument("size", type=int, help="Number of elements")

    perf_parser = subparsers.add_parser("perf", help="Compare iterative and recursive timings")
    perf_parser.add_argument("sizes", type=int, nargs="+", help="Array sizes to measure")
    perf_parser.add_argument("--batches", type=int, default=DEFAULT_BATCHES, help="Timed batches per size")
    perf_parser.add_argument("--runs", type=int, default=DEFAULT_RUNS_PER_BATCH, help="Searches per batch")

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=API_HOST, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=API_PORT, help="Bind port")

    return parser


def _print_search(result: SearchResult) -> None:
    for step in result.steps:
        depth = "" if step.depth is None else f" depth {step.depth}"
        print(f"left {step.left} right {step.right} mid {step.mid} comparing {step.comparing}{depth}")
    print(f"found {str(result.found).lower()} index {result.index} comparisons {result.comparisons}")
    if result.max_depth is not None:
        print(f"max_depth {result.max_depth}")
    print(f"elapsed_ns {result.execution_time_ns:.0f}")


def _print_performance(data: PerformanceData) -> None:
    print(
        f"size {data.size} "
        f"iterative {data.iterative_time_avg:.4f}us (sd {data.iterative_time_stddev:.4f}) "
        f"recursive {data.recursive_time_avg:.4f}us (sd {data.recursive_time_stddev:.4f}) "
        f"comparisons {data.iterative_comparisons:.1f}/{data.recursive_comparisons:.1f} "
        f"theoretical {data.theoretical_comparisons} memory {data.memory_estimate}"
    )


def run(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.command == "search":
        array = args.array if args.array is not None else generate_sorted_array(args.size)
        search = binary_search_iterative if args.variant == "iterative" else binary_search_recursive
        _print_search(search(array, args.target))
        return

    if args.command == "generate":
        print(" ".join(str(value) for value in generate_sorted_array(args.size)))
        return

    if args.command == "perf":
        run_performance_tests(args.sizes, batches=args.batches, runs_per_batch=args.runs, on_size=_print_performance)
        return

    if args.command == "serve":
        import uvicorn

        uvicorn.run("api.server:app", host=args.host, port=args.port, log_level="info")
        return

    parser.print_help()


if __name__ == "__main__":
    run()
