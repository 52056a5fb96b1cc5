import logging

import pytest

from bsearch.performance import measure_size, memory_estimate, run_performance_tests, theoretical_comparisons


def test_theoretical_comparisons_is_ceil_log2_of_size() -> None:
    assert theoretical_comparisons(1) == 0
    assert theoretical_comparisons(10) == 4
    assert theoretical_comparisons(100) == 7
    # Exact powers of two stay one below ceil(log2(n + 1)).
    assert theoretical_comparisons(1024) == 10


def test_memory_estimate_switches_units_at_one_megabyte() -> None:
    assert memory_estimate(10) == "0.08 KB"
    assert memory_estimate(131_071) == "1023.99 KB"
    assert memory_estimate(131_072) == "1.00 MB"
    assert memory_estimate(1_000_000) == "7.63 MB"


def test_run_performance_tests_keeps_input_order() -> None:
    results = run_performance_tests([100, 10], batches=3, runs_per_batch=5)

    assert [data.size for data in results] == [100, 10]
    for data in results:
        assert data.theoretical_comparisons == theoretical_comparisons(data.size)
        assert data.memory_estimate.endswith("KB")
        assert data.iterative_min_time <= data.iterative_time_avg <= data.iterative_max_time
        assert data.recursive_min_time <= data.recursive_time_avg <= data.recursive_max_time
        assert data.iterative_time_stddev >= 0
        assert data.recursive_time_stddev >= 0


def test_comparisons_are_deterministic_for_middle_target() -> None:
    data = measure_size(10, batches=2, runs_per_batch=4)

    # Target 6 in [1..10] is probed at indices 4, 7, 5.
    assert data.iterative_comparisons == 3
    assert data.recursive_comparisons == 3


def test_on_size_callback_and_log_line(caplog) -> None:
    seen: list[int] = []
    with caplog.at_level(logging.INFO, logger="bsearch.performance"):
        run_performance_tests([8, 16], batches=1, runs_per_batch=2, on_size=lambda data: seen.append(data.size))

    assert seen == [8, 16]
    assert "Completed performance test for size: 8" in caplog.text
    assert "Completed performance test for size: 16" in caplog.text


def test_single_batch_reports_zero_spread() -> None:
    data = measure_size(32, batches=1, runs_per_batch=3)
    assert data.iterative_time_stddev == 0.0
    assert data.iterative_min_time == data.iterative_max_time


@pytest.mark.parametrize(
    "kwargs",
    [
        {"size": 0},
        {"size": 10, "batches": 0},
        {"size": 10, "runs_per_batch": 0},
    ],
)
def test_measure_size_rejects_invalid_arguments(kwargs) -> None:
    with pytest.raises(ValueError):
        measure_size(**kwargs)
