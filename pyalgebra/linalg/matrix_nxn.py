"""
MatrixNxN: square matrix with determinant and minor extraction.
"""

from __future__ import annotations

import warnings

import numpy as np

from pyalgebra.core.validation import check_index
from pyalgebra.linalg.matrix import Matrix
from pyalgebra.linalg.matrix_nxm import MatrixNxM, RowsLike, _convert_rows, _fill


# Orders above this make cofactor expansion noticeably slow (n! terms)
COFACTOR_WARN_ORDER = 10


class MatrixNxN(MatrixNxM):
    """
    Dense n x n matrix.

    Sums, differences, scalar multiples, transposes and products with
    another square matrix stay MatrixNxN. Removing a single row or column
    produces a rectangular MatrixNxM; removing both (a minor) stays square.
    """

    def __init__(self, n: int = 1):
        super().__init__(n, n)

    @classmethod
    def from_rows(cls, rows: RowsLike | None) -> MatrixNxN:
        """
        Build a square matrix from a sequence of rows.

        The order is the number of rows. Each row is truncated or
        zero-extended to that order. None or empty input gives 1x1 zero.
        """
        converted = _convert_rows(rows)
        order = max(1, len(converted))
        return cls._wrap(_fill(converted, order, order))

    def _product_type(self, other: Matrix) -> type[MatrixNxM]:
        if isinstance(other, MatrixNxN):
            return type(self)
        return MatrixNxM

    def remove(self, row: int, col: int) -> MatrixNxN | None:
        """
        Minor at (row, col): this matrix without the given row and column.

        Returns:
            MatrixNxN of order n-1, or None for a 1x1 matrix
        """
        row = check_index(row, self.rows, "row")
        col = check_index(col, self.cols, "col")
        if self.rows == 1:
            return None
        minor = np.delete(np.delete(self._elements, row, axis=0), col, axis=1)
        return MatrixNxN._wrap(minor)

    def determinant(self) -> float:
        """
        Determinant by cofactor expansion along the first row.

        Cost grows factorially with the order; a RuntimeWarning is issued
        above COFACTOR_WARN_ORDER.

        Returns:
            The determinant as a float
        """
        if self.rows > COFACTOR_WARN_ORDER:
            warnings.warn(
                f"Cofactor expansion of a {self.rows}x{self.rows} matrix "
                f"evaluates {self.rows}! terms.",
                RuntimeWarning,
                stacklevel=2,
            )
        return self._cofactor_determinant()

    def _cofactor_determinant(self) -> float:
        if self.rows == 1:
            return float(self._elements[0, 0])
        det = 0.0
        for i in range(self.cols):
            sign = -1.0 if i % 2 else 1.0
            minor = self.remove(0, i)
            det += sign * float(self._elements[0, i]) * minor._cofactor_determinant()
        return det
