"""
Polynomial: real polynomial with float64 coefficients.

Coefficients are stored in ascending degree order (c0 + c1 x + c2 x^2 ...)
with trailing zeros trimmed, so the stored length is always degree + 1.
Arithmetic is delegated to numpy.polynomial.polynomial.
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
import numpy.polynomial.polynomial as P
from numpy.typing import NDArray

from pyalgebra.core.exceptions import DivisionByZeroError, ValidationError
from pyalgebra.core.precision import equals_abs
from pyalgebra.core.tolerances import POLYNOMIAL_EQUALITY
from pyalgebra.core.validation import check_1d, check_array


def _trim(coefficients: NDArray[np.floating[Any]]) -> NDArray[np.floating[Any]]:
    """Drop trailing zero coefficients, keeping at least one entry."""
    nonzero = np.flatnonzero(coefficients != 0)
    if nonzero.size == 0:
        return np.zeros(1, dtype=np.float64)
    return coefficients[:nonzero[-1] + 1].copy()


class Polynomial:
    """
    Real polynomial in one variable.

    Construction:
        Polynomial(1, 2, 3)     1 + 2x + 3x^2
        Polynomial()            the zero polynomial

    Polynomials are immutable values. They implement the Function
    protocol (evaluate, __call__) and the LinearObject protocol (add,
    sub, multiply), so they can be handed to the root finders and
    quadrature rules directly.

    Operators:
        p + q, p - q, -p, k * p, p * q, p ** n, p // q, divmod(p, q), p == q
    """

    __slots__ = ('_coefficients',)
    __hash__ = None

    ZERO: Polynomial
    ONE: Polynomial

    def __init__(self, *coefficients: float):
        if len(coefficients) == 1 and isinstance(coefficients[0], (list, tuple, np.ndarray)):
            coefficients = tuple(coefficients[0])
        arr = check_array(list(coefficients), "coefficients")
        check_1d(arr, "coefficients")
        self._coefficients = _trim(arr) if arr.size else np.zeros(1, dtype=np.float64)

    @classmethod
    def _wrap(cls, coefficients: NDArray[np.floating[Any]]) -> Polynomial:
        poly = cls.__new__(cls)
        poly._coefficients = _trim(np.asarray(coefficients, dtype=np.float64))
        return poly

    # --- Accessors ---

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Copy of the coefficients, lowest degree first."""
        return self._coefficients.copy()

    def degree(self) -> int:
        """Degree; the zero polynomial reports 0."""
        return self._coefficients.size - 1

    def is_zero(self) -> bool:
        return self._coefficients.size == 1 and self._coefficients[0] == 0

    def can_evaluate(self) -> bool:
        return True

    def evaluate(self, x: float) -> float:
        """Value at x by Horner's rule."""
        result = 0.0
        for c in self._coefficients[::-1]:
            result = result * x + float(c)
        return result

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    # --- Linear object operations ---

    def add(self, other: Polynomial) -> Polynomial:
        return Polynomial._wrap(P.polyadd(self._coefficients, other._coefficients))

    def sub(self, other: Polynomial) -> Polynomial:
        return Polynomial._wrap(P.polysub(self._coefficients, other._coefficients))

    def multiply(self, other: float | Polynomial) -> Polynomial:
        """
        Scale by a real number, or multiply by another polynomial.

        Parameters
        ----------
        other : float or Polynomial

        Returns
        -------
        Polynomial
        """
        if isinstance(other, Polynomial):
            return Polynomial._wrap(P.polymul(self._coefficients, other._coefficients))
        if isinstance(other, bool) or not isinstance(other, numbers.Real):
            raise TypeError(
                f"can only multiply by a real scalar or a Polynomial, got {type(other).__name__}"
            )
        return Polynomial._wrap(self._coefficients * float(other))

    # --- Polynomial operations ---

    def pow(self, exponent: int) -> Polynomial:
        """
        Raise to a non-negative integer power by repeated squaring.

        Raises
        ------
        ValidationError
            If exponent is negative or not an integer, or for 0 ** 0.
        """
        if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
            raise ValidationError(
                f"exponent: expected an integer, got {type(exponent).__name__}"
            )
        if exponent < 0:
            raise ValidationError(f"exponent: must be non-negative, got {exponent}")
        if exponent == 0:
            if self.is_zero():
                raise ValidationError("exponent: 0 ** 0 is undefined for the zero polynomial")
            return Polynomial.ONE

        result = Polynomial.ONE
        base = self
        n = int(exponent)
        while n:
            if n & 1:
                result = result.multiply(base)
            n >>= 1
            if n:
                base = base.multiply(base)
        return result

    def divmod(self, divisor: Polynomial) -> tuple[Polynomial, Polynomial]:
        """
        Polynomial long division.

        Returns
        -------
        (quotient, remainder) with deg(remainder) < deg(divisor)

        Raises
        ------
        DivisionByZeroError
            If divisor is the zero polynomial.
        """
        if divisor.is_zero():
            raise DivisionByZeroError("Division by the zero polynomial")
        quotient, remainder = P.polydiv(self._coefficients, divisor._coefficients)
        return Polynomial._wrap(quotient), Polynomial._wrap(remainder)

    def divide_by(self, divisor: Polynomial) -> Polynomial:
        """Quotient of the long division; the remainder is discarded."""
        return self.divmod(divisor)[0]

    def differentiate(self) -> Polynomial:
        return Polynomial._wrap(P.polyder(self._coefficients))

    def antidifferentiate(self) -> Polynomial:
        """Antiderivative with a zero constant of integration."""
        if self.is_zero():
            return Polynomial.ZERO
        return Polynomial._wrap(P.polyint(self._coefficients))

    def integrate(self, a: float, b: float) -> float:
        """Definite integral over [a, b]."""
        antiderivative = self.antidifferentiate()
        return antiderivative.evaluate(b) - antiderivative.evaluate(a)

    def equals(self, other: Polynomial, epsilon: float = POLYNOMIAL_EQUALITY.atol) -> bool:
        """Same degree and every coefficient pair within epsilon."""
        if self.degree() != other.degree():
            return False
        return all(
            equals_abs(float(a), float(b), epsilon)
            for a, b in zip(self._coefficients, other._coefficients)
        )

    # --- Python protocol ---

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if isinstance(other, Polynomial) or (
            isinstance(other, numbers.Real) and not isinstance(other, bool)
        ):
            return self.multiply(other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self):
        return self.multiply(-1.0)

    def __pow__(self, exponent):
        return self.pow(exponent)

    def __floordiv__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide_by(other)

    def __divmod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divmod(other)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.equals(other)

    def __str__(self) -> str:
        if self.is_zero():
            return "0"
        return " + ".join(
            f"{float(c)!r} x^({i})"
            for i, c in enumerate(self._coefficients)
            if c != 0
        )

    def __repr__(self) -> str:
        coefficients = ", ".join(repr(float(c)) for c in self._coefficients)
        return f"Polynomial({coefficients})"


Polynomial.ZERO = Polynomial()
Polynomial.ONE = Polynomial(1.0)
