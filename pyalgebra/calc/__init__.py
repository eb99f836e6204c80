"""
Calculus helpers: polynomials, symbolic expressions, root finding,
quadrature and finite differences.

Every routine that takes a function accepts either an object with an
evaluate(x) method (Polynomial, symbolic expressions) or a plain callable.
"""

from pyalgebra.calc.polynomial import Polynomial
from pyalgebra.calc.symbols import (
    Expression,
    Constant,
    Variable,
    Sum,
    Difference,
    Product,
    Quotient,
)
from pyalgebra.calc.roots import RootFinder, RootParams, RootSolution, DEFAULT_ROOT_FINDER
from pyalgebra.calc.integration import (
    weighted_average,
    trapezoidal_rule,
    composite_trapezoidal_rule,
    simpsons_rule,
    composite_simpsons_rule,
    simpsons_3_8_rule,
)
from pyalgebra.calc.differentiation import (
    centred_difference,
    backward_difference,
    backward_difference_2step,
    centred_second_difference,
    backward_second_difference,
)

__all__ = [
    "Polynomial",
    "Expression",
    "Constant",
    "Variable",
    "Sum",
    "Difference",
    "Product",
    "Quotient",
    "RootFinder",
    "RootParams",
    "RootSolution",
    "DEFAULT_ROOT_FINDER",
    "weighted_average",
    "trapezoidal_rule",
    "composite_trapezoidal_rule",
    "simpsons_rule",
    "composite_simpsons_rule",
    "simpsons_3_8_rule",
    "centred_difference",
    "backward_difference",
    "backward_difference_2step",
    "centred_second_difference",
    "backward_second_difference",
]
