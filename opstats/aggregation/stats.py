"""Order-statistic helpers over lists of elapsed times."""

from __future__ import annotations

import math
from typing import List, Sequence


def higher_index(fraction: float, n: int) -> int:
    """Index selected by the "higher" quantile rule for *n* sorted values."""
    if n <= 0:
        raise ValueError("higher_index() needs at least one value")
    idx = int(math.ceil(fraction * (n - 1)))
    return min(max(idx, 0), n - 1)


def higher_quantiles(sorted_values: Sequence[float], fractions: Sequence[float]) -> List[float]:
    """Pick one existing value per fraction from already sorted values."""
    n = len(sorted_values)
    return [sorted_values[higher_index(f, n)] for f in fractions]


def argmin(values: Sequence[float]) -> int:
    """Index of the first occurrence of the smallest value."""
    best = 0
    for i in range(1, len(values)):
        if values[i] < values[best]:
            best = i
    return best


def argmax(values: Sequence[float]) -> int:
    """Index of the first occurrence of the largest value."""
    best = 0
    for i in range(1, len(values)):
        if values[i] > values[best]:
            best = i
    return best
