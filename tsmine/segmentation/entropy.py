"""Approximate entropy of a time series."""

from __future__ import annotations

import math
from typing import Sequence


def _mean_match_rate(data: Sequence[float], m: int, r: float) -> float:
    count = len(data) - m + 1
    windows = [data[k:k + m] for k in range(count)]
    total = 0.0
    for reference in windows:
        matches = sum(
            1
            for window in windows
            if all(abs(a - b) <= r for a, b in zip(window, reference))
        )
        total += matches / count
    return total / count


def approx_entropy(data: Sequence[float], dim: int, r: float) -> float:
    """Return the log ratio of pattern match rates at dimensions ``dim`` and ``dim + 1``.

    ``r`` is the tolerance under which two samples are considered similar.
    """
    data = list(data)
    if dim < 0 or len(data) <= dim:
        raise ValueError("series too short for the embedding dimension")
    return math.log(_mean_match_rate(data, dim, r) / _mean_match_rate(data, dim + 1, r))