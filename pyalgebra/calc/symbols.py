"""
Symbolic expression nodes.

Small expression trees over real numbers. Every node implements the
Function protocol, so an expression can be passed anywhere a function of
one variable is expected:

    >>> a = Variable("a", 3.0)
    >>> expr = Constant(2.0) * a + Constant(1.0)
    >>> expr.evaluate(0.0)
    7.0

A Variable is a named parameter, not the argument: it evaluates to its
bound value regardless of x.
"""

from __future__ import annotations

import math
import numbers
from abc import ABC, abstractmethod

import numpy as np

from pyalgebra.core.exceptions import UndefinedVariableError, ValidationError


def _as_expression(value) -> Expression:
    if isinstance(value, Expression):
        return value
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return Constant(float(value))
    raise TypeError(f"cannot use {type(value).__name__} in an expression")


class Expression(ABC):
    """Base class for expression nodes."""

    @abstractmethod
    def evaluate(self, x: float) -> float:
        ...

    @abstractmethod
    def can_evaluate(self) -> bool:
        """Whether evaluate() would succeed (every variable is bound)."""
        ...

    def __call__(self, x: float) -> float:
        return self.evaluate(x)

    def add(self, other) -> Sum:
        return Sum(self, _as_expression(other))

    def sub(self, other) -> Difference:
        return Difference(self, _as_expression(other))

    def multiply(self, other) -> Product:
        return Product(self, _as_expression(other))

    def divide(self, other) -> Quotient:
        return Quotient(self, _as_expression(other))

    def __add__(self, other):
        return self.add(other)

    def __radd__(self, other):
        return Sum(_as_expression(other), self)

    def __sub__(self, other):
        return self.sub(other)

    def __rsub__(self, other):
        return Difference(_as_expression(other), self)

    def __mul__(self, other):
        return self.multiply(other)

    def __rmul__(self, other):
        return Product(_as_expression(other), self)

    def __truediv__(self, other):
        return self.divide(other)

    def __rtruediv__(self, other):
        return Quotient(_as_expression(other), self)

    def __neg__(self):
        return Product(Constant(-1.0), self)


class Constant(Expression):
    """A fixed real number."""

    def __init__(self, value: float):
        self.value = float(value)

    def evaluate(self, x: float) -> float:
        return self.value

    def can_evaluate(self) -> bool:
        return True

    def is_zero(self) -> bool:
        return self.value == 0

    def __eq__(self, other):
        if not isinstance(other, Constant):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Constant({self.value!r})"


class Variable(Expression):
    """
    Named parameter with an optional bound value.

    An unbound variable holds NaN; evaluating it raises
    UndefinedVariableError.
    """

    def __init__(self, name: str, value: float = math.nan):
        if not name:
            raise ValidationError("name: a variable needs a non-empty name")
        self.name = name
        self.value = float(value)

    def bind(self, value: float) -> None:
        self.value = float(value)

    def can_evaluate(self) -> bool:
        return not math.isnan(self.value)

    def evaluate(self, x: float) -> float:
        if not self.can_evaluate():
            raise UndefinedVariableError(self.name)
        return self.value

    def __repr__(self) -> str:
        return f"Variable({self.name!r}, {self.value!r})"


class Operation(Expression):
    """Node with one or more operand expressions."""

    symbol = '?'

    def __init__(self, *operands):
        if not operands:
            raise ValidationError(f"{type(self).__name__}: needs at least one operand")
        self.operands = tuple(_as_expression(op) for op in operands)

    def can_evaluate(self) -> bool:
        return all(op.can_evaluate() for op in self.operands)

    def __repr__(self) -> str:
        return "(" + f" {self.symbol} ".join(repr(op) for op in self.operands) + ")"


class Sum(Operation):
    symbol = '+'

    def evaluate(self, x: float) -> float:
        return math.fsum(op.evaluate(x) for op in self.operands)


class Product(Operation):
    symbol = '*'

    def evaluate(self, x: float) -> float:
        result = 1.0
        for op in self.operands:
            result *= op.evaluate(x)
        return result


class Difference(Operation):
    symbol = '-'

    def __init__(self, minuend, subtrahend):
        super().__init__(minuend, subtrahend)

    def evaluate(self, x: float) -> float:
        minuend, subtrahend = self.operands
        return minuend.evaluate(x) - subtrahend.evaluate(x)


class Quotient(Operation):
    """
    Ratio of two expressions.

    Follows IEEE float division: a zero denominator yields inf or nan
    rather than raising.
    """

    symbol = '/'

    def __init__(self, numerator, denominator):
        super().__init__(numerator, denominator)

    def evaluate(self, x: float) -> float:
        numerator, denominator = self.operands
        with np.errstate(divide='ignore', invalid='ignore'):
            return float(np.float64(numerator.evaluate(x)) / denominator.evaluate(x))
