"""
MatrixNxM: dense rectangular matrix.

Backed by a (rows, cols) float64 numpy array owned exclusively by the
instance. Provides the full arithmetic, transpose, row/column swap and
removal, row echelon reduction and rank.
"""

from __future__ import annotations

import numbers
import warnings
from typing import Any, Iterable, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyalgebra.core.exceptions import IncompatibleDimensionError
from pyalgebra.core.validation import check_1d, check_array, check_index
from pyalgebra.linalg.matrix import Matrix

if TYPE_CHECKING:
    from pyalgebra.linalg.vector import VectorN


RowsLike = Iterable[ArrayLike | None]


def _convert_rows(rows: RowsLike | None) -> list[NDArray[np.floating[Any]]]:
    """Validate each row as a 1D numeric array; None rows become empty."""
    if rows is None:
        return []
    converted = []
    for i, row in enumerate(rows):
        if row is None:
            converted.append(np.zeros(0))
            continue
        arr = check_array(row, f"rows[{i}]")
        check_1d(arr, f"rows[{i}]")
        converted.append(arr)
    return converted


def _fill(
    rows: list[NDArray[np.floating[Any]]],
    n_rows: int,
    n_cols: int,
) -> NDArray[np.floating[Any]]:
    """Copy rows into a zero (n_rows, n_cols) array, truncating or padding."""
    elements = np.zeros((n_rows, n_cols), dtype=np.float64)
    for i, row in enumerate(rows[:n_rows]):
        width = min(n_cols, row.size)
        elements[i, :width] = row[:width]
    return elements


class MatrixNxM(Matrix):
    """
    Dense n x m matrix.

    Construction:
        MatrixNxM(n, m)             zero matrix, dimensions clamped to >= 1
        MatrixNxM(n)                n x n zero matrix
        MatrixNxM.from_rows(rows)   copy of a (possibly jagged) 2D array
        matrix.copy()               deep copy

    Jagged input is zero-padded to the widest row, never truncated.
    """

    def __init__(self, n: int = 1, m: int | None = None):
        if m is None:
            m = n
        self._elements = np.zeros((max(1, int(n)), max(1, int(m))), dtype=np.float64)

    @classmethod
    def _wrap(cls, elements: NDArray[np.floating[Any]]) -> MatrixNxM:
        """Adopt an already-normalized array as the backing store (no copy)."""
        matrix = cls.__new__(cls)
        matrix._elements = elements
        return matrix

    @classmethod
    def from_rows(cls, rows: RowsLike | None) -> MatrixNxM:
        """
        Build a matrix from a sequence of rows.

        Parameters
        ----------
        rows : iterable of array-like or None
            Row data. Rows may have different lengths; each is copied and
            zero-extended to the longest. None rows are all zero. None or
            empty input gives a 1x1 zero matrix.

        Returns
        -------
        MatrixNxM owning a fresh copy of the data.
        """
        converted = _convert_rows(rows)
        if not converted:
            return cls._wrap(np.zeros((1, 1), dtype=np.float64))
        width = max(1, max(row.size for row in converted))
        return cls._wrap(_fill(converted, len(converted), width))

    def _like(self, elements: NDArray[np.floating[Any]]) -> MatrixNxM:
        """Wrap a same-shaped result in the receiver's concrete type."""
        return type(self)._wrap(elements)

    def _product_type(self, other: Matrix) -> type[MatrixNxM]:
        """Concrete type of self @ other."""
        return MatrixNxM

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise IncompatibleDimensionError(self.shape, other.shape)

    # --- Accessors ---

    @property
    def shape(self) -> tuple[int, int]:
        rows, cols = self._elements.shape
        return int(rows), int(cols)

    def get(self, row: int, col: int) -> float:
        row = check_index(row, self.rows, "row")
        col = check_index(col, self.cols, "col")
        return float(self._elements[row, col])

    def get_row(self, row: int) -> VectorN:
        from pyalgebra.linalg.vector import VectorN

        row = check_index(row, self.rows, "row")
        return VectorN.from_values(self._elements[row])

    def get_col(self, col: int) -> VectorN:
        from pyalgebra.linalg.vector import VectorN

        col = check_index(col, self.cols, "col")
        return VectorN.from_values(self._elements[:, col])

    def to_array(self) -> NDArray[np.floating[Any]]:
        return self._elements.copy()

    def copy(self) -> MatrixNxM:
        return self._like(self._elements.copy())

    # --- Properties ---

    def is_diagonal(self) -> bool:
        if not self.is_square():
            return False
        off_diagonal = self._elements[~np.eye(self.rows, dtype=bool)]
        return not np.any(off_diagonal != 0)

    def is_ref(self) -> bool:
        """
        Check row echelon form.

        The column of each row's first non-zero entry must strictly
        increase down the matrix. An all-zero row counts as column
        `cols`, so it is only allowed as the last row.
        """
        leading = -1
        for row in self._elements:
            nonzero = np.flatnonzero(row != 0)
            first = int(nonzero[0]) if nonzero.size else self.cols
            if first <= leading:
                return False
            leading = first
        return True

    def rank(self) -> int:
        reduced = self if self.is_ref() else self.ref()
        elements = reduced._elements
        for i in range(reduced.rows):
            # The rank is the index of the first zero row
            if not np.any(elements[i, i:] != 0):
                return i
        return reduced.rows

    # --- Mutators ---

    def swap_rows(self, row1: int, row2: int) -> None:
        row1 = check_index(row1, self.rows, "row1")
        row2 = check_index(row2, self.rows, "row2")
        self._elements[[row1, row2]] = self._elements[[row2, row1]]

    def swap_cols(self, col1: int, col2: int) -> None:
        col1 = check_index(col1, self.cols, "col1")
        col2 = check_index(col2, self.cols, "col2")
        self._elements[:, [col1, col2]] = self._elements[:, [col2, col1]]

    # --- Algebra ---

    def add(self, other: Matrix) -> MatrixNxM:
        self._check_same_shape(other)
        return self._like(self._elements + other.to_array())

    def sub(self, other: Matrix) -> MatrixNxM:
        self._check_same_shape(other)
        return self._like(self._elements - other.to_array())

    def multiply(self, other: float | Matrix) -> MatrixNxM:
        """
        Scalar scaling or matrix product.

        Parameters
        ----------
        other : real number or Matrix
            A scalar scales every element. A Matrix must have as many
            rows as this matrix has columns.

        Returns
        -------
        MatrixNxM
            Same shape as self for a scalar; (self.rows, other.cols) for a
            product.

        Raises
        ------
        IncompatibleDimensionError
            If self.cols != other.rows.
        """
        if isinstance(other, Matrix):
            if self.cols != other.rows:
                raise IncompatibleDimensionError(self.shape, other.shape)
            product = self._elements @ other.to_array()
            return self._product_type(other)._wrap(product)
        if isinstance(other, bool) or not isinstance(other, numbers.Real):
            raise TypeError(
                f"can only multiply by a real scalar or a Matrix, got {type(other).__name__}"
            )
        return self._like(self._elements * float(other))

    def transpose(self) -> MatrixNxM:
        return self._like(self._elements.T.copy())

    # --- Structure ---

    def remove_row(self, row: int) -> MatrixNxM | None:
        row = check_index(row, self.rows, "row")
        if self.rows == 1:
            return None
        return MatrixNxM._wrap(np.delete(self._elements, row, axis=0))

    def remove_col(self, col: int) -> MatrixNxM | None:
        col = check_index(col, self.cols, "col")
        if self.cols == 1:
            return None
        return MatrixNxM._wrap(np.delete(self._elements, col, axis=1))

    # --- Row reduction ---

    def ref(self) -> MatrixNxM:
        """
        Row echelon form by Gaussian elimination with partial pivoting.

        Works on a copy; this matrix is unchanged. For each pivot column
        the row with the largest magnitude entry (earliest on ties) is
        swapped into place and the rows below are eliminated.

        A pivot that is still zero after the swaps is divided by anyway:
        the affected rows fill with NaN/Inf and a RuntimeWarning is
        issued.

        Returns
        -------
        Matrix of the same concrete type in row echelon form.
        """
        reduced = self._elements.copy()
        n_rows, n_cols = reduced.shape

        for i in range(min(n_rows, n_cols)):
            for j in range(i + 1, n_rows):
                if abs(reduced[j, i]) > abs(reduced[i, i]):
                    reduced[[i, j]] = reduced[[j, i]]

            if reduced[i, i] == 0 and i + 1 < n_rows:
                warnings.warn(
                    f"Zero pivot in column {i} during row reduction; "
                    f"rows below it will contain non-finite values.",
                    RuntimeWarning,
                    stacklevel=2,
                )

            with np.errstate(divide='ignore', invalid='ignore'):
                for j in range(i + 1, n_rows):
                    ratio = reduced[j, i] / reduced[i, i]
                    reduced[j, i + 1:] -= reduced[i, i + 1:] * ratio
                    reduced[j, i] = 0.0

        return self._like(reduced)
