"""Sorted input generation."""

from __future__ import annotations


def generate_sorted_array(size: int) -> list[int]:
    if size < 0:
        raise ValueError(f"Array size must be >= 0, got {size}")
    return list(range(1, size + 1))
