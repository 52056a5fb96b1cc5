"""Binary search algorithms and performance harness."""

from .arrays import generate_sorted_array
from .performance import PerformanceData, run_performance_tests
from .search import SearchResult, SearchStep, binary_search_iterative, binary_search_recursive
from .stats import SampleStats, calculate_stats

__all__ = [
    "PerformanceData",
    "SampleStats",
    "SearchResult",
    "SearchStep",
    "binary_search_iterative",
    "binary_search_recursive",
    "calculate_stats",
    "generate_sorted_array",
    "run_performance_tests",
]
