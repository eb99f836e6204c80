"""
Vector: single-column matrix specialization.

A vector is a Matrix with exactly one column. Column-oriented operations
are identities for column 0 and illegal for any other column index.
"""

from __future__ import annotations

import math
import numbers
from abc import abstractmethod
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import DimensionError, IncompatibleDimensionError
from pyalgebra.core.validation import check_array, check_index
from pyalgebra.linalg.matrix import Matrix
from pyalgebra.linalg.matrix_nxm import MatrixNxM


class Vector(Matrix):
    """
    Abstract column vector.

    Adds dot product and magnitude to the Matrix contract. Elements are
    addressed by a single row index: v.get(i) or v[i].
    """

    @abstractmethod
    def dot(self, other: Vector) -> float:
        """Sum of element-wise products. Lengths must match."""
        ...

    @abstractmethod
    def mag2(self) -> float:
        """Squared Euclidean norm."""
        ...

    def mag(self) -> float:
        """Euclidean norm, sqrt(mag2())."""
        return math.sqrt(self.mag2())

    def is_diagonal(self) -> bool:
        return self.rows == 1

    def get_col(self, col: int) -> Vector:
        check_index(col, 1, "col")
        return self

    def swap_cols(self, col1: int, col2: int) -> None:
        check_index(col1, 1, "col1")
        check_index(col2, 1, "col2")

    def remove_col(self, col: int) -> None:
        check_index(col, 1, "col")
        return None

    def __getitem__(self, key):
        if isinstance(key, tuple):
            return super().__getitem__(key)
        return self.get(key)

    def __len__(self) -> int:
        return self.rows


class VectorN(Vector):
    """
    Column vector of arbitrary length n >= 1.

    Construction:
        VectorN(n)                    zero vector, length clamped to >= 1
        VectorN.from_values(values)   copy of a 1D (or n x 1) array-like
    """

    def __init__(self, n: int = 1):
        self._values = np.zeros(max(1, int(n)), dtype=np.float64)

    @classmethod
    def _wrap(cls, values: NDArray[np.floating[Any]]) -> VectorN:
        vector = cls.__new__(cls)
        vector._values = values
        return vector

    @classmethod
    def from_values(cls, values: ArrayLike | None) -> VectorN:
        """
        Build a vector from a sequence of numbers.

        Args:
            values: 1D array-like, or a 2D array-like with a single column.
                None or empty input gives a length-1 zero vector.

        Returns:
            VectorN owning a fresh copy of the data

        Raises:
            DimensionError: If values is not 1D or a single column
        """
        if values is None:
            return cls._wrap(np.zeros(1, dtype=np.float64))
        arr = check_array(values, "values")
        if arr.ndim == 2 and arr.shape[1] == 1:
            arr = arr[:, 0].copy()
        elif arr.ndim != 1:
            raise DimensionError(
                f"values: expected 1D array or single column, got shape {arr.shape}"
            )
        if arr.size == 0:
            arr = np.zeros(1, dtype=np.float64)
        return cls._wrap(arr)

    def _check_same_length(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise IncompatibleDimensionError(self.shape, other.shape)

    # --- Accessors ---

    @property
    def shape(self) -> tuple[int, int]:
        return int(self._values.size), 1

    def get(self, row: int, col: int = 0) -> float:
        row = check_index(row, self.rows, "row")
        check_index(col, 1, "col")
        return float(self._values[row])

    def get_row(self, row: int) -> VectorN:
        row = check_index(row, self.rows, "row")
        return VectorN._wrap(self._values[row:row + 1].copy())

    def to_array(self) -> NDArray[np.floating[Any]]:
        return self._values.reshape(-1, 1).copy()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the elements as a 1D array."""
        return self._values.copy()

    def copy(self) -> VectorN:
        return VectorN._wrap(self._values.copy())

    # --- Properties ---

    def is_ref(self) -> bool:
        return not np.any(self._values[1:] != 0)

    def rank(self) -> int:
        return 1 if np.any(self._values != 0) else 0

    # --- Mutators ---

    def swap_rows(self, row1: int, row2: int) -> None:
        row1 = check_index(row1, self.rows, "row1")
        row2 = check_index(row2, self.rows, "row2")
        self._values[[row1, row2]] = self._values[[row2, row1]]

    # --- Algebra ---

    def add(self, other: Matrix) -> VectorN:
        self._check_same_length(other)
        return VectorN._wrap(self._values + other.to_array()[:, 0])

    def sub(self, other: Matrix) -> VectorN:
        self._check_same_length(other)
        return VectorN._wrap(self._values - other.to_array()[:, 0])

    def multiply(self, other: float | Matrix) -> Matrix:
        """
        Scalar scaling, or the (n x 1) @ (1 x m) matrix product.

        Raises:
            IncompatibleDimensionError: If other is a Matrix with more
                than one row
        """
        if isinstance(other, Matrix):
            if other.rows != 1:
                raise IncompatibleDimensionError(self.shape, other.shape)
            return MatrixNxM._wrap(self.to_array() @ other.to_array())
        if isinstance(other, bool) or not isinstance(other, numbers.Real):
            raise TypeError(
                f"can only multiply by a real scalar or a Matrix, got {type(other).__name__}"
            )
        return VectorN._wrap(self._values * float(other))

    def transpose(self) -> MatrixNxM:
        return MatrixNxM._wrap(self._values.reshape(1, -1).copy())

    def outer(self, other: Vector) -> MatrixNxM:
        """Outer product self @ other.T, an n x m matrix."""
        return MatrixNxM._wrap(np.outer(self._values, other.to_array()[:, 0]))

    def dot(self, other: Vector) -> float:
        self._check_same_length(other)
        return float(np.dot(self._values, other.to_array()[:, 0]))

    def mag2(self) -> float:
        # Sequential sum over ascending values
        total = 0.0
        for value in np.sort(self._values):
            total += float(value) * float(value)
        return total

    # --- Structure ---

    def remove_row(self, row: int) -> VectorN | None:
        row = check_index(row, self.rows, "row")
        if self.rows == 1:
            return None
        return VectorN._wrap(np.delete(self._values, row))
