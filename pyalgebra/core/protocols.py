"""
Core protocols for pyalgebra.

These define structural interfaces shared by the matrix engine and the
calculus helpers. We use Protocol (structural typing) rather than ABC
(nominal typing) so that plain user classes satisfy them without
inheriting from anything in this package.

Design Principles:
    - Minimal contracts: prescribe only what's truly universal
    - Type-safe: use generics to preserve the concrete type through results
"""

from typing import Callable, Protocol, TypeVar, Union, runtime_checkable

T = TypeVar('T')  # Concrete linear object type


@runtime_checkable
class Function(Protocol):
    """
    A real function of one real variable.

    Root finders, quadrature rules and finite-difference helpers consume
    this protocol; Polynomial and every symbolic expression implement it.
    """

    def evaluate(self, x: float) -> float:
        """Evaluate the function at x."""
        ...


@runtime_checkable
class LinearObject(Protocol[T]):
    """
    Element of a vector space: closed under addition and scalar scaling.

    Matrices, vectors and polynomials implement it. Each operation returns
    a new object; operands are never modified.
    """

    def add(self, other: T) -> T:
        """Sum of this object and other."""
        ...

    def sub(self, other: T) -> T:
        """Difference of this object and other."""
        ...

    def multiply(self, scalar: float) -> T:
        """This object scaled by scalar."""
        ...


FunctionLike = Union[Function, Callable[[float], float]]


def as_callable(f: FunctionLike) -> Callable[[float], float]:
    """
    Normalize a Function or plain callable to a callable.

    Args:
        f: Object with an evaluate(x) method, or any callable of one float

    Returns:
        Callable returning float(f(x))

    Raises:
        TypeError: If f is neither
    """
    if isinstance(f, Function):
        evaluate = f.evaluate
    elif callable(f):
        evaluate = f
    else:
        raise TypeError(
            f"expected a Function or callable, got {type(f).__name__}"
        )
    return lambda x: float(evaluate(x))
