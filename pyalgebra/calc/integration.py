"""
Newton-Cotes quadrature.

Closed rules on a single interval (trapezoidal, Simpson's, Simpson's 3/8)
are weighted averages of equally spaced samples times the interval width.
The composite rules split [a, b] into equal sub-intervals.

Integrals are oriented: swapping a and b negates the result.
"""

from __future__ import annotations

import numbers

import numpy as np

from pyalgebra.core.exceptions import ValidationError
from pyalgebra.core.protocols import FunctionLike, as_callable
from pyalgebra.core.validation import check_array, check_finite


def _check_intervals(intervals: int, minimum: int, name: str = "intervals") -> int:
    if isinstance(intervals, bool) or not isinstance(intervals, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer, got {type(intervals).__name__}")
    if intervals < minimum:
        raise ValidationError(f"{name}: must be >= {minimum}, got {intervals}")
    return int(intervals)


def weighted_average(f: FunctionLike, a: float, b: float, *weights: float) -> float:
    """
    Weighted average of f over equally spaced points of [a, b].

    With k weights the sample points are a + i (b - a) / (k - 1) for
    i = 0..k-1. Bounds are swapped if a > b. Fewer than two weights gives
    the plain average of the endpoint values.

    Args:
        f: Function or callable
        a: One end of the interval
        b: Other end of the interval
        *weights: Sample weights, in order from the lower bound

    Returns:
        sum(w_i f(x_i)) / sum(w_i)
    """
    check_finite([a, b], "bounds")
    f = as_callable(f)
    if a > b:
        a, b = b, a
    if len(weights) <= 1:
        return (f(a) + f(b)) / 2

    w = check_array(weights, "weights")
    points = np.linspace(a, b, w.size)
    values = np.array([f(x) for x in points])
    return float(np.dot(w, values) / w.sum())


def _weighted_area(f: FunctionLike, a: float, b: float, *weights: float) -> float:
    return weighted_average(f, a, b, *weights) * (b - a)


def trapezoidal_rule(f: FunctionLike, a: float, b: float) -> float:
    """Trapezoidal rule (b - a) (f(a) + f(b)) / 2."""
    return _weighted_area(f, a, b, 1, 1)


def simpsons_rule(f: FunctionLike, a: float, b: float) -> float:
    """Simpson's 1/3 rule with weights 1, 4, 1."""
    return _weighted_area(f, a, b, 1, 4, 1)


def simpsons_3_8_rule(f: FunctionLike, a: float, b: float) -> float:
    """Simpson's 3/8 rule with weights 1, 3, 3, 1."""
    return _weighted_area(f, a, b, 1, 3, 3, 1)


def composite_trapezoidal_rule(
    f: FunctionLike,
    a: float,
    b: float,
    intervals: int,
) -> float:
    """
    Composite trapezoidal rule.

    Parameters
    ----------
    f : Function or callable
    a, b : float
        Integration bounds.
    intervals : int
        Number of equal sub-intervals (>= 1).

    Returns
    -------
    float
        h/2 [f(x_0) + 2 f(x_1) + ... + 2 f(x_{n-1}) + f(x_n)]
    """
    check_finite([a, b], "bounds")
    n = _check_intervals(intervals, 1)
    f = as_callable(f)
    h = (b - a) / n
    total = f(a) + f(b)
    for i in range(1, n):
        total += 2 * f(a + i * h)
    return total * h / 2


def composite_simpsons_rule(
    f: FunctionLike,
    a: float,
    b: float,
    intervals: int,
) -> float:
    """
    Composite Simpson's 1/3 rule.

    Parameters
    ----------
    f : Function or callable
    a, b : float
        Integration bounds.
    intervals : int
        Number of equal sub-intervals; must be even and >= 2.

    Returns
    -------
    float
        h/3 [f(x_0) + 4 f(x_1) + 2 f(x_2) + ... + 4 f(x_{n-1}) + f(x_n)]
    """
    check_finite([a, b], "bounds")
    n = _check_intervals(intervals, 2)
    if n % 2:
        raise ValidationError(f"intervals: must be even, got {n}")
    f = as_callable(f)
    h = (b - a) / n
    total = f(a) + f(b)
    for i in range(1, n):
        total += (4 if i % 2 else 2) * f(a + i * h)
    return total * h / 3
