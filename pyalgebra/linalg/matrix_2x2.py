"""
Matrix2x2: fixed 2x2 matrix with closed-form overrides.
"""

from __future__ import annotations

import numpy as np

from pyalgebra.linalg.matrix_nxm import RowsLike, _convert_rows, _fill
from pyalgebra.linalg.matrix_nxn import MatrixNxN


class Matrix2x2(MatrixNxN):
    """
    2x2 matrix [[a, b], [c, d]].

    Determinant, transpose and the structural predicates are computed
    directly from the four entries.
    """

    def __init__(self):
        super().__init__(2)

    @classmethod
    def from_rows(cls, rows: RowsLike | None) -> Matrix2x2:
        """Take the leading 2x2 block of rows; missing entries are zero."""
        return cls._wrap(_fill(_convert_rows(rows), 2, 2))

    def _entries(self) -> tuple[float, float, float, float]:
        (a, b), (c, d) = self._elements
        return float(a), float(b), float(c), float(d)

    def determinant(self) -> float:
        a, b, c, d = self._entries()
        return a * d - b * c

    def is_ref(self) -> bool:
        a, _, c, d = self._entries()
        if a != 0:
            return c == 0
        return c == 0 and d == 0

    def is_diagonal(self) -> bool:
        _, b, c, _ = self._entries()
        return b == 0 and c == 0

    def transpose(self) -> Matrix2x2:
        a, b, c, d = self._entries()
        return Matrix2x2._wrap(np.array([[a, c], [b, d]], dtype=np.float64))
