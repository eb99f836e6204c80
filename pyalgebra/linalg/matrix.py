"""
Matrix: abstract base for every matrix and vector layout.

Fixes the dimension contract (rows >= 1, cols >= 1), the algebraic
contract shared by all shapes (add, sub, multiply, transpose), the
structural contract (row/column swap and removal) and the shared
predicates. Concrete layouts:

    MatrixNxM  - dense rectangular
    MatrixNxN  - square, adds determinant
    Matrix2x2  - closed-form 2x2
    VectorN    - single column

Mutation:
    Only swap_rows and swap_cols modify the receiver. Every other
    operation returns a freshly allocated result and leaves its operands
    untouched.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pyalgebra.core.precision import DEFAULT_EPSILON, equals_abs
from pyalgebra.core.validation import check_index

if TYPE_CHECKING:
    from pyalgebra.linalg.vector import Vector


class Matrix(ABC):
    """
    Abstract n x m matrix of float64 values.

    Python operators map onto the named operations:
        a + b   -> a.add(b)
        a - b   -> a.sub(b)
        k * a   -> a.multiply(k)     (scalar)
        a @ b   -> a.multiply(b)     (matrix product)
        a == b  -> a.equals(b)       (default epsilon)
        a[r, c] -> a.get(r, c)

    Matrices are mutable through swap_rows/swap_cols and therefore
    unhashable.
    """

    __hash__ = None

    # Make numpy scalars defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    # --- Dimensions ---

    @property
    @abstractmethod
    def shape(self) -> tuple[int, int]:
        """(rows, cols)."""
        ...

    @property
    def rows(self) -> int:
        """Number of rows (always >= 1)."""
        return self.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns (always >= 1)."""
        return self.shape[1]

    def is_square(self) -> bool:
        """Whether rows == cols."""
        return self.rows == self.cols

    # --- Accessors ---

    @abstractmethod
    def get(self, row: int, col: int) -> float:
        """Element at (row, col)."""
        ...

    @abstractmethod
    def get_row(self, row: int) -> Vector:
        """Row as a new vector."""
        ...

    @abstractmethod
    def get_col(self, col: int) -> Vector:
        """Column as a vector."""
        ...

    @abstractmethod
    def to_array(self) -> NDArray[np.floating[Any]]:
        """Copy of the elements as a 2D (rows, cols) float64 array."""
        ...

    @abstractmethod
    def copy(self) -> Matrix:
        """Deep copy with the same concrete type."""
        ...

    # --- Properties ---

    @abstractmethod
    def is_diagonal(self) -> bool:
        """Square, with every off-diagonal element exactly zero."""
        ...

    @abstractmethod
    def is_ref(self) -> bool:
        """Whether the matrix is in row echelon form."""
        ...

    @abstractmethod
    def rank(self) -> int:
        """Number of non-zero rows in row echelon form."""
        ...

    # --- Mutators (in place) ---

    @abstractmethod
    def swap_rows(self, row1: int, row2: int) -> None:
        """Swap two rows in place."""
        ...

    @abstractmethod
    def swap_cols(self, col1: int, col2: int) -> None:
        """Swap two columns in place."""
        ...

    # --- Algebra ---

    @abstractmethod
    def add(self, other: Matrix) -> Matrix:
        """Element-wise sum. Raises IncompatibleDimensionError on shape mismatch."""
        ...

    @abstractmethod
    def sub(self, other: Matrix) -> Matrix:
        """Element-wise difference. Raises IncompatibleDimensionError on shape mismatch."""
        ...

    def subtract(self, other: Matrix) -> Matrix:
        """Alias of sub."""
        return self.sub(other)

    @abstractmethod
    def multiply(self, other: float | Matrix) -> Matrix:
        """Scalar scaling, or matrix product when other is a Matrix."""
        ...

    @abstractmethod
    def transpose(self) -> Matrix:
        """New matrix with rows and columns exchanged."""
        ...

    # --- Structure ---

    @abstractmethod
    def remove_row(self, row: int) -> Matrix | None:
        """Copy without the given row, or None if no rows would remain."""
        ...

    @abstractmethod
    def remove_col(self, col: int) -> Matrix | None:
        """Copy without the given column, or None if no columns would remain."""
        ...

    def remove(self, row: int, col: int) -> Matrix | None:
        """
        Copy without the given row and column (the minor at row, col).

        Returns None when either removal would leave an empty dimension.
        """
        check_index(col, self.cols, "col")
        no_row = self.remove_row(row)
        if no_row is None:
            return None
        return no_row.remove_col(col)

    # --- Equality ---

    def equals(self, other: Matrix, epsilon: float = DEFAULT_EPSILON) -> bool:
        """
        Element-wise equality up to an absolute tolerance.

        Args:
            other: Matrix to compare against
            epsilon: Largest acceptable absolute difference per element

        Returns:
            False on any dimension mismatch, otherwise True iff every
            element pair is within epsilon.
        """
        if self.shape != other.shape:
            return False
        mine = self.to_array()
        theirs = other.to_array()
        return all(
            equals_abs(a, b, epsilon)
            for a, b in zip(mine.flat, theirs.flat)
        )

    # --- Python protocol ---

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, col = key
        return self.get(row, col)

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, bool) or not isinstance(other, numbers.Real):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __neg__(self):
        return self.multiply(-1.0)

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        elements = self.to_array()
        body = ",".join(
            "[" + ",".join(repr(float(v)) for v in row) + "]"
            for row in elements
        )
        return f"{{{self.rows}x{self.cols}}}[{body}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, cols={self.cols})"
