"""
Exception hierarchy for pyalgebra.

Catch PyAlgebraError for anything the library raises. Bad arguments are
ValidationError subclasses. Errors keep their diagnostics (operand
shapes, offending index, iteration count) as attributes.
"""


class PyAlgebraError(Exception):
    """Base exception for all pyalgebra errors."""
    pass


class ValidationError(PyAlgebraError):
    """An argument is malformed: wrong type, shape, range or value."""
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions.
    """
    pass


class IncompatibleDimensionError(DimensionError):
    """
    Two operands have dimensions that the operation cannot combine.

    Raised by matrix sums, differences, products and vector dot products.
    The message names both shapes as ``Matrix 1: {RxC}, Matrix 2: {RxC}``.

    Attributes:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        left_shape: tuple[int, int],
        right_shape: tuple[int, int],
        message: str | None = None,
    ):
        if message is None:
            message = (
                f"Matrix 1: {{{left_shape[0]}x{left_shape[1]}}}, "
                f"Matrix 2: {{{right_shape[0]}x{right_shape[1]}}}"
            )
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row, column or element index outside the valid range.

    Also an IndexError so that generic Python index handling still applies.

    Attributes:
        index: The offending index
        size: Number of valid positions (valid indices are 0..size-1)
    """

    def __init__(self, message: str, index: int, size: int):
        super().__init__(message)
        self.index = index
        self.size = size


class NumericalError(PyAlgebraError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DivisionByZeroError(NumericalError, ZeroDivisionError):
    """Division by an exactly-zero divisor (e.g. the zero polynomial)."""
    pass


class UndefinedVariableError(PyAlgebraError):
    """
    A symbolic variable was evaluated before being bound to a value.

    Attributes:
        name: Name of the unbound variable
    """

    def __init__(self, name: str):
        super().__init__(f"Variable {name!r} has no value")
        self.name = name


class ConvergenceError(PyAlgebraError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative method (Newton, false position, fixed point)
    fails to meet its convergence criterion within the maximum number of
    iterations, or cannot continue at all.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final change between successive approximations
        reason: Why convergence failed (e.g., 'max_iterations', 'zero_derivative')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
