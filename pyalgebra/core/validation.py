"""
Argument checks shared by the matrix, polynomial and calculus code.

Every check raises straight away with the offending parameter name and
value in the message. Nothing is clipped, wrapped around or silently
repaired: a negative row index is an error, not a count from the end.
"""

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import (
    DimensionError,
    IndexOutOfRangeError,
    ValidationError,
)


def check_array(array: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Copy numeric input into a new float64 array.

    Args:
        array: Sequence, nested sequence or ndarray of real numbers
        name: Parameter name for error messages

    Returns:
        Fresh float64 ndarray; the caller owns it outright

    Raises:
        ValidationError: For ragged nesting, strings, objects or complex
            values
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )
    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )
    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64, copy=False)


def check_finite(array: ArrayLike, name: str) -> None:
    """Reject NaN and Inf anywhere in a scalar or array."""
    values = np.asarray(array, dtype=np.float64)
    if not np.all(np.isfinite(values)):
        n_nan = int(np.sum(np.isnan(values)))
        n_inf = int(np.sum(np.isinf(values)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """Raise DimensionError unless array.ndim == ndim."""
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Matrix rows, vector values and samples must be flat."""
    check_ndim(array, 1, name)


def check_min_samples(array: NDArray[np.floating[Any]], min_samples: int, name: str) -> None:
    """Raise ValidationError if the sample has fewer than min_samples values."""
    if array.shape[0] < min_samples:
        raise ValidationError(
            f"{name}: requires at least {min_samples} samples, got {array.shape[0]}"
        )


def check_index(index: int, size: int, name: str) -> int:
    """
    Verify a row, column or element index lies in [0, size).

    Args:
        index: Index to check; any Integral except bool
        size: Number of valid positions
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        IndexOutOfRangeError: If index is not an integer in range
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, numbers.Integral):
        raise IndexOutOfRangeError(
            f"{name}: expected an integer index, got {type(index).__name__}",
            index=index,
            size=size,
        )
    if not 0 <= index < size:
        raise IndexOutOfRangeError(
            f"{name}: index {index} out of range for size {size}",
            index=int(index),
            size=size,
        )
    return int(index)


def check_positive(value: float, name: str) -> None:
    """Step sizes and tolerances must be finite and strictly positive."""
    check_finite(value, name)
    if value <= 0:
        raise ValidationError(f"{name}: must be positive, got {value}")
