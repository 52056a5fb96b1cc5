import pytest

from bsearch.arrays import generate_sorted_array
from bsearch.search import (
    binary_search_iterative,
    binary_search_iterative_fast,
    binary_search_recursive,
    binary_search_recursive_fast,
)


SEARCHES = [binary_search_iterative, binary_search_recursive]


@pytest.mark.parametrize("search", SEARCHES)
def test_every_present_target_is_found_within_bound(search) -> None:
    for size in range(1, 70):
        array = generate_sorted_array(size)
        bound = size.bit_length()  # ceil(log2(size + 1))
        for target in array:
            result = search(array, target)
            assert result.found
            assert 0 <= result.index < size
            assert array[result.index] == target
            assert 1 <= result.comparisons <= bound
            assert len(result.steps) == result.comparisons


@pytest.mark.parametrize("search", SEARCHES)
def test_absent_targets_report_minus_one(search) -> None:
    array = [2, 4, 6, 8, 10]
    for target in (0, 1, 3, 5, 7, 9, 11, 100):
        result = search(array, target)
        assert not result.found
        assert result.index == -1
        assert result.comparisons >= 1


@pytest.mark.parametrize("search", SEARCHES)
def test_empty_array_makes_no_comparisons(search) -> None:
    result = search([], 5)
    assert not result.found
    assert result.index == -1
    assert result.comparisons == 0
    assert result.steps == []


def test_iterative_trace_matches_probes() -> None:
    result = binary_search_iterative([1, 2, 3, 4, 5], 4)

    assert [(s.left, s.right, s.mid, s.comparing) for s in result.steps] == [(0, 4, 2, 3), (3, 4, 3, 4)]
    assert all(step.depth is None for step in result.steps)
    assert result.max_depth is None
    assert result.execution_time_ns >= 0


def test_recursive_trace_records_depth() -> None:
    result = binary_search_recursive([1, 2, 3, 4, 5], 4)

    assert [(s.left, s.right, s.mid, s.comparing, s.depth) for s in result.steps] == [
        (0, 4, 2, 3, 0),
        (3, 4, 3, 4, 1),
    ]
    assert result.index == 3


def test_recursive_max_depth_on_hit_is_depth_of_match() -> None:
    array = generate_sorted_array(100)
    for target in (1, 37, 50, 100):
        result = binary_search_recursive(array, target)
        assert result.max_depth == result.steps[-1].depth
        assert result.max_depth == result.comparisons - 1


def test_recursive_max_depth_on_miss_counts_empty_range_call() -> None:
    array = generate_sorted_array(100)
    for target in (0, 101):
        result = binary_search_recursive(array, target)
        assert not result.found
        assert result.max_depth == result.comparisons

    assert binary_search_recursive([], 1).max_depth == 0


def test_variants_agree_with_duplicates() -> None:
    array = [1, 3, 3, 3, 3, 7, 9]
    iterative = binary_search_iterative(array, 3)
    recursive = binary_search_recursive(array, 3)

    assert iterative.found == recursive.found
    assert array[iterative.index] == 3
    assert array[recursive.index] == 3


def test_fast_variants_count_the_same_comparisons() -> None:
    array = generate_sorted_array(257)
    for target in (-5, 1, 64, 129, 200, 257, 999):
        expected = binary_search_iterative(array, target).comparisons
        assert binary_search_iterative_fast(array, target) == expected
        assert binary_search_recursive_fast(array, target) == expected

    assert binary_search_iterative_fast([], 1) == 0
    assert binary_search_recursive_fast([], 1) == 0
