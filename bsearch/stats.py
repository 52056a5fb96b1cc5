"""Summary statistics over timing samples."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass(slots=True)
class SampleStats:
    mean: float
    min: float
    max: float
    stddev: float


def calculate_stats(values: Sequence[float]) -> SampleStats:
    """Return mean, min, max and the Bessel-corrected standard deviation.

    Empty input yields all zeros. A single sample has no spread, so its
    standard deviation is reported as zero.
    """
    count = len(values)
    if count == 0:
        return SampleStats(mean=0.0, min=0.0, max=0.0, stddev=0.0)

    total = 0.0
    low = values[0]
    high = values[0]
    for value in values:
        total += value
        if value < low:
            low = value
        if value > high:
            high = value

    mean = total / count

    if count == 1:
        return SampleStats(mean=mean, min=float(low), max=float(high), stddev=0.0)

    squared = 0.0
    for value in values:
        squared += (value - mean) ** 2
    stddev = math.sqrt(squared / (count - 1))

    return SampleStats(mean=mean, min=float(low), max=float(high), stddev=stddev)
