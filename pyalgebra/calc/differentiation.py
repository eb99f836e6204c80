"""
Finite-difference derivative approximations.

All functions take the function, the point x and a positive step h.
"""

from pyalgebra.core.protocols import FunctionLike, as_callable
from pyalgebra.core.validation import check_positive


def centred_difference(f: FunctionLike, x: float, h: float) -> float:
    """First derivative, (f(x+h) - f(x-h)) / 2h. Error O(h^2)."""
    check_positive(h, "h")
    f = as_callable(f)
    return (f(x + h) - f(x - h)) / (2 * h)


def backward_difference(f: FunctionLike, x: float, h: float) -> float:
    """First derivative, (f(x) - f(x-h)) / h. Error O(h)."""
    check_positive(h, "h")
    f = as_callable(f)
    return (f(x) - f(x - h)) / h


def backward_difference_2step(f: FunctionLike, x: float, h: float) -> float:
    """First derivative, (3f(x) - 4f(x-h) + f(x-2h)) / 2h. Error O(h^2)."""
    check_positive(h, "h")
    f = as_callable(f)
    return (3 * f(x) - 4 * f(x - h) + f(x - 2 * h)) / (2 * h)


def centred_second_difference(f: FunctionLike, x: float, h: float) -> float:
    """Second derivative, (f(x+h) - 2f(x) + f(x-h)) / h^2. Error O(h^2)."""
    check_positive(h, "h")
    f = as_callable(f)
    return (f(x + h) - 2 * f(x) + f(x - h)) / (h * h)


def backward_second_difference(f: FunctionLike, x: float, h: float) -> float:
    """Second derivative, (f(x) - 2f(x-h) + f(x-2h)) / h^2. Error O(h)."""
    check_positive(h, "h")
    f = as_callable(f)
    return (f(x) - 2 * f(x - h) + f(x - 2 * h)) / (h * h)
