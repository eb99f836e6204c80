"""
Core infrastructure for pyalgebra.

This module provides shared abstractions and utilities used by the
domain subpackages (linalg, calc, stats).

Key components:
    protocols: Function, LinearObject protocols
    precision: Absolute/relative tolerance comparisons
    tolerances: Named tolerance tiers
    result: Generic Result[P] envelope
    timing: Solver timing
    exceptions: Exception hierarchy
    validation: Input validators
"""

from pyalgebra.core.protocols import Function, LinearObject, as_callable
from pyalgebra.core.result import Result
from pyalgebra.core.timing import Timer, timed
from pyalgebra.core.precision import (
    DEFAULT_EPSILON,
    abs_error,
    rel_error,
    equals_abs,
    equals_rel,
)
from pyalgebra.core.tolerances import ToleranceTier, select_tolerance
from pyalgebra.core.exceptions import (
    PyAlgebraError,
    ValidationError,
    DimensionError,
    IncompatibleDimensionError,
    IndexOutOfRangeError,
    NumericalError,
    DivisionByZeroError,
    UndefinedVariableError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Function",
    "LinearObject",
    "as_callable",
    # Result
    "Result",
    "Timer",
    "timed",
    # Precision
    "DEFAULT_EPSILON",
    "abs_error",
    "rel_error",
    "equals_abs",
    "equals_rel",
    "ToleranceTier",
    "select_tolerance",
    # Exceptions
    "PyAlgebraError",
    "ValidationError",
    "DimensionError",
    "IncompatibleDimensionError",
    "IndexOutOfRangeError",
    "NumericalError",
    "DivisionByZeroError",
    "UndefinedVariableError",
    "ConvergenceError",
]
