"""
PyAlgebra: small numerical algebra toolkit for Python.

Matrix/vector linear algebra and polynomial algebra as value types, with
the numerical helpers built on them.

Submodules:
    linalg: Matrices and vectors (REF, rank, determinant, products)
    calc: Polynomials, symbolic expressions, root finding, quadrature
    stats: Simple sample statistics
    core: Exceptions, tolerances and shared protocols
"""

__version__ = "0.1.0"

from pyalgebra import core
from pyalgebra import linalg
from pyalgebra import calc
from pyalgebra import stats

__all__ = [
    "__version__",
    "core",
    "linalg",
    "calc",
    "stats",
]
