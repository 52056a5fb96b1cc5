"""Instrumented and fast binary search variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter_ns
from typing import Sequence

from .constants import NOT_FOUND


@dataclass(slots=True)
class SearchStep:
    left: int
    right: int
    mid: int
    comparing: int
    depth: int | None = None


@dataclass(slots=True)
class SearchResult:
    found: bool
    index: int
    comparisons: int
    steps: list[SearchStep] = field(default_factory=list)
    execution_time_ns: float = 0.0
    max_depth: int | None = None


def binary_search_iterative(array: Sequence[int], target: int) -> SearchResult:
    steps: list[SearchStep] = []
    comparisons = 0
    left = 0
    right = len(array) - 1

    start = perf_counter_ns()

    while left <= right:
        mid = left + (right - left) // 2
        comparisons += 1
        value = array[mid]
        steps.append(SearchStep(left=left, right=right, mid=mid, comparing=value))

        if value == target:
            return SearchResult(
                found=True,
                index=mid,
                comparisons=comparisons,
                steps=steps,
                execution_time_ns=float(perf_counter_ns() - start),
            )

        if value < target:
            left = mid + 1
        else:
            right = mid - 1

    return SearchResult(
        found=False,
        index=NOT_FOUND,
        comparisons=comparisons,
        steps=steps,
        execution_time_ns=float(perf_counter_ns() - start),
    )


class _RecursiveSearch:
    def __init__(self, array: Sequence[int], target: int) -> None:
        self.array = array
        self.target = target
        self.comparisons = 0
        self.max_depth = 0
        self.steps: list[SearchStep] = []

    def run(self) -> SearchResult:
        start = perf_counter_ns()
        index = self._search(0, len(self.array) - 1, 0)
        elapsed = float(perf_counter_ns() - start)
        return SearchResult(
            found=index != NOT_FOUND,
            index=index,
            comparisons=self.comparisons,
            steps=self.steps,
            execution_time_ns=elapsed,
            max_depth=self.max_depth,
        )

    def _search(self, left: int, right: int, depth: int) -> int:
        # Depth counts every call, including the one that sees an empty range.
        if depth > self.max_depth:
            self.max_depth = depth

        if left > right:
            return NOT_FOUND

        mid = left + (right - left) // 2
        self.comparisons += 1
        value = self.array[mid]
        self.steps.append(SearchStep(left=left, right=right, mid=mid, comparing=value, depth=depth))

        if value == self.target:
            return mid
        if value < self.target:
            return self._search(mid + 1, right, depth + 1)
        return self._search(left, mid - 1, depth + 1)


def binary_search_recursive(array: Sequence[int], target: int) -> SearchResult:
    return _RecursiveSearch(array, target).run()


def binary_search_iterative_fast(array: Sequence[int], target: int) -> int:
    """Untraced iterative search used for timing. Returns the comparison count."""
    comparisons = 0
    left = 0
    right = len(array) - 1

    while left <= right:
        mid = left + (right - left) // 2
        comparisons += 1
        value = array[mid]
        if value == target:
            return comparisons
        if value < target:
            left = mid + 1
        else:
            right = mid - 1
    return comparisons


def binary_search_recursive_fast(array: Sequence[int], target: int) -> int:
    """Untraced recursive search used for timing. Returns the comparison count."""
    return _count_recursive(array, target, 0, len(array) - 1, 0)


def _count_recursive(array: Sequence[int], target: int, left: int, right: int, comparisons: int) -> int:
    if left > right:
        return comparisons

    mid = left + (right - left) // 2
    value = array[mid]
    if value == target:
        return comparisons + 1
    if value < target:
        return _count_recursive(array, target, mid + 1, right, comparisons + 1)
    return _count_recursive(array, target, left, mid - 1, comparisons + 1)
