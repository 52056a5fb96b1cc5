"""Batched timing comparison of the iterative and recursive searches."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from time import perf_counter_ns
from typing import Callable, Iterable, Sequence

from .arrays import generate_sorted_array
from .constants import (
    BYTES_PER_ELEMENT,
    DEFAULT_BATCHES,
    DEFAULT_RUNS_PER_BATCH,
    KIB,
    MIB,
    WARMUP_RUNS,
)
from .search import binary_search_iterative_fast, binary_search_recursive_fast
from .stats import calculate_stats

logger = logging.getLogger(__name__)

FastSearch = Callable[[Sequence[int], int], int]


@dataclass(slots=True)
class PerformanceData:
    size: int
    iterative_time_avg: float
    recursive_time_avg: float
    iterative_comparisons: float
    recursive_comparisons: float
    iterative_time_stddev: float
    recursive_time_stddev: float
    iterative_min_time: float
    iterative_max_time: float
    recursive_min_time: float
    recursive_max_time: float
    theoretical_comparisons: int
    memory_estimate: str


def theoretical_comparisons(size: int) -> int:
    """Return ceil(log2(size)).

    This under-counts the exact worst case, ceil(log2(size + 1)), by one when
    size is a power of two. Existing clients chart against this value.
    """
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    return math.ceil(math.log2(size))


def memory_estimate(size: int) -> str:
    total_bytes = size * BYTES_PER_ELEMENT
    if total_bytes >= MIB:
        return f"{total_bytes / MIB:.2f} MB"
    return f"{total_bytes / KIB:.2f} KB"


def _time_batch(search: FastSearch, array: Sequence[int], target: int, runs: int) -> tuple[float, float]:
    """Run one batch and return (microseconds per call, comparisons per call)."""
    comparisons = 0
    start = perf_counter_ns()
    for _ in range(runs):
        comparisons += search(array, target)
    elapsed_ns = perf_counter_ns() - start
    return elapsed_ns / runs / 1000.0, comparisons / runs


def measure_size(size: int, batches: int = DEFAULT_BATCHES, runs_per_batch: int = DEFAULT_RUNS_PER_BATCH) -> PerformanceData:
    if size < 1:
        raise ValueError(f"size must be >= 1, got {size}")
    if batches < 1:
        raise ValueError(f"batches must be >= 1, got {batches}")
    if runs_per_batch < 1:
        raise ValueError(f"runs_per_batch must be >= 1, got {runs_per_batch}")

    array = generate_sorted_array(size)
    target = array[size // 2]

    for _ in range(WARMUP_RUNS):
        binary_search_iterative_fast(array, target)
        binary_search_recursive_fast(array, target)

    iterative_times: list[float] = []
    recursive_times: list[float] = []
    iterative_comps: list[float] = []
    recursive_comps: list[float] = []

    for _ in range(batches):
        per_call, comps = _time_batch(binary_search_iterative_fast, array, target, runs_per_batch)
        iterative_times.append(per_call)
        iterative_comps.append(comps)

        per_call, comps = _time_batch(binary_search_recursive_fast, array, target, runs_per_batch)
        recursive_times.append(per_call)
        recursive_comps.append(comps)

    iterative = calculate_stats(iterative_times)
    recursive = calculate_stats(recursive_times)

    return PerformanceData(
        size=size,
        iterative_time_avg=iterative.mean,
        recursive_time_avg=recursive.mean,
        iterative_comparisons=sum(iterative_comps) / batches,
        recursive_comparisons=sum(recursive_comps) / batches,
        iterative_time_stddev=iterative.stddev,
        recursive_time_stddev=recursive.stddev,
        iterative_min_time=iterative.min,
        iterative_max_time=iterative.max,
        recursive_min_time=recursive.min,
        recursive_max_time=recursive.max,
        theoretical_comparisons=theoretical_comparisons(size),
        memory_estimate=memory_estimate(size),
    )


def run_performance_tests(
    sizes: Iterable[int],
    batches: int = DEFAULT_BATCHES,
    runs_per_batch: int = DEFAULT_RUNS_PER_BATCH,
    on_size: Callable[[PerformanceData], None] | None = None,
) -> list[PerformanceData]:
    results: list[PerformanceData] = []
    for size in sizes:
        data = measure_size(size, batches=batches, runs_per_batch=runs_per_batch)
        results.append(data)
        logger.info("Completed performance test for size: %d", size)
        if on_size is not None:
            on_size(data)
    return results
