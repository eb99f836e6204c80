"""
Aggregation formulas over a 1D sample.

Functions with a _sorted suffix expect data already sorted ascending and
do not check it. Empty samples give 0.0 where a value is still defined
by convention (mean, median, mode).
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.validation import check_1d, check_array, check_min_samples


def _as_sample(data: ArrayLike | None, name: str = "data") -> NDArray[np.floating[Any]]:
    if data is None:
        return np.zeros(0, dtype=np.float64)
    arr = check_array(data, name)
    check_1d(arr, name)
    return arr


def total(data: ArrayLike) -> float:
    """Sum of the sample (0.0 when empty)."""
    return math.fsum(_as_sample(data))


def mean(data: ArrayLike) -> float:
    """Arithmetic mean; 0.0 for an empty sample."""
    x = _as_sample(data)
    if x.size == 0:
        return 0.0
    return total(x) / x.size


def median_sorted(sorted_data: ArrayLike) -> float:
    """
    Median of ascending data.

    Odd length: the middle element. Even length: mean of the two middle
    elements. Empty: 0.0.
    """
    x = _as_sample(sorted_data, "sorted_data")
    n = x.size
    if n == 0:
        return 0.0
    mid = n // 2
    if n % 2:
        return float(x[mid])
    return float((x[mid - 1] + x[mid]) / 2)


def mode_sorted(sorted_data: ArrayLike) -> float:
    """
    Most frequent value of ascending data.

    Ties go to the smallest value (the first longest run). Empty: 0.0.
    """
    x = _as_sample(sorted_data, "sorted_data")
    if x.size == 0:
        return 0.0
    # Start index of each run of equal values
    starts = np.flatnonzero(np.concatenate(([True], x[1:] != x[:-1])))
    lengths = np.diff(np.append(starts, x.size))
    return float(x[starts[np.argmax(lengths)]])


def _sum_squared_deviations(x: NDArray[np.floating[Any]], center: float) -> float:
    deviations = x - center
    return math.fsum(deviations * deviations)


def variance(data: ArrayLike) -> float:
    """
    Population variance, sum((x - mean)^2) / n.

    Raises:
        ValidationError: If the sample is empty
    """
    x = _as_sample(data)
    check_min_samples(x, 1, "data")
    return _sum_squared_deviations(x, mean(x)) / x.size


def std_dev_population(data: ArrayLike) -> float:
    """Population standard deviation, sqrt(variance(data))."""
    return math.sqrt(variance(data))


def std_dev_sample(data: ArrayLike) -> float:
    """
    Sample standard deviation with Bessel's correction (n - 1).

    Raises:
        ValidationError: If fewer than 2 samples
    """
    x = _as_sample(data)
    check_min_samples(x, 2, "data")
    return math.sqrt(_sum_squared_deviations(x, mean(x)) / (x.size - 1))


def bias_indicator(data: ArrayLike) -> float:
    """
    sqrt(n) * mean / std_dev_sample: the one-sample t statistic for a
    zero mean. Large magnitudes indicate a systematic offset in a sample
    of errors.

    Raises:
        ValidationError: If fewer than 2 samples
    """
    x = _as_sample(data)
    check_min_samples(x, 2, "data")
    return math.sqrt(x.size) * mean(x) / std_dev_sample(x)
