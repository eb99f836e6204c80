"""
Matrix and vector linear algebra.

Public API:
    Matrix     - abstract base for every layout
    MatrixNxM  - dense rectangular matrix
    MatrixNxN  - square matrix (determinant, minors)
    Matrix2x2  - closed-form 2x2 matrix
    Vector     - abstract column vector
    VectorN    - column vector of any length
"""

from pyalgebra.linalg.matrix import Matrix
from pyalgebra.linalg.matrix_nxm import MatrixNxM
from pyalgebra.linalg.matrix_nxn import COFACTOR_WARN_ORDER, MatrixNxN
from pyalgebra.linalg.matrix_2x2 import Matrix2x2
from pyalgebra.linalg.vector import Vector, VectorN

__all__ = [
    "Matrix",
    "MatrixNxM",
    "MatrixNxN",
    "Matrix2x2",
    "Vector",
    "VectorN",
    "COFACTOR_WARN_ORDER",
]
