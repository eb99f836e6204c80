"""
Numerical precision constants and tolerance comparisons.

Provides the absolute and relative error helpers that every equality
check in pyalgebra goes through (matrices, vectors, polynomials and the
iterative root finders).
"""

import numpy as np

from pyalgebra.core.tolerances import MATRIX_EQUALITY


# Machine epsilon for float64
EPSILON_64: float = float(np.finfo(np.float64).eps)  # ~2.22e-16

# Default absolute tolerance for matrix and polynomial equality
DEFAULT_EPSILON: float = MATRIX_EQUALITY.atol


def abs_error(a: float, b: float) -> float:
    """
    Absolute error between two values.

    Args:
        a: First value
        b: Second value

    Returns:
        |a - b|
    """
    return abs(a - b)


def rel_error(a: float, b: float) -> float:
    """
    Relative error of a with respect to b.

    Args:
        a: Value being compared
        b: Reference value

    Returns:
        |(a - b) / b|. Infinite when b is zero and a is not,
        NaN when both are zero.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.abs((np.float64(a) - b) / np.float64(b)))


def equals_abs(a: float, b: float, epsilon: float) -> bool:
    """
    Check equality up to an absolute tolerance.

    Args:
        a: First value
        b: Second value
        epsilon: Largest acceptable absolute error

    Returns:
        True if a == b exactly or |a - b| <= epsilon
    """
    if a == b:
        return True
    return abs_error(a, b) <= epsilon


def equals_rel(a: float, b: float, epsilon: float) -> bool:
    """
    Check equality up to a relative tolerance.

    The relative error is tried in both directions so that a reference
    value close to zero does not bias the comparison.

    Args:
        a: First value
        b: Second value
        epsilon: Largest acceptable relative error

    Returns:
        True if a == b exactly, or either relative error is <= epsilon
    """
    if a == b:
        return True
    return rel_error(a, b) <= epsilon or rel_error(b, a) <= epsilon


def machine_epsilon(dtype: np.dtype | type = np.float64) -> float:
    """
    Get machine epsilon for a given dtype.

    Args:
        dtype: NumPy dtype or type

    Returns:
        Machine epsilon for the dtype
    """
    return float(np.finfo(dtype).eps)
