"""
Tolerance tiers for numerical comparison.

Defines the precision expectations used across pyalgebra:
- exact: bitwise float equality
- matrix equality: absolute 1e-10, the default for Matrix.equals
- polynomial equality: same as matrix equality
- root finding: absolute 1e-14 between successive approximations

Used by the linear algebra types, the root finders and the test suite.
"""

from dataclasses import dataclass

from pyalgebra.core.exceptions import ValidationError


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bitwise float equality',
)

MATRIX_EQUALITY = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='matrix_equality',
    description='Element-wise absolute tolerance for matrices and vectors',
)

POLYNOMIAL_EQUALITY = ToleranceTier(
    rtol=0.0,
    atol=1e-10,
    name='polynomial_equality',
    description='Coefficient-wise absolute tolerance for polynomials',
)

ROOT_FINDING = ToleranceTier(
    rtol=0.0,
    atol=1e-14,
    name='root_finding',
    description='Change between successive root approximations',
)

# Iteration cap shared by all iterative root finders
DEFAULT_MAX_ITERATIONS = 200

_TIERS = {
    tier.name: tier
    for tier in (EXACT, MATRIX_EQUALITY, POLYNOMIAL_EQUALITY, ROOT_FINDING)
}


def select_tolerance(name: str) -> ToleranceTier:
    """Look up a tolerance tier by name."""
    try:
        return _TIERS[name]
    except KeyError:
        raise ValidationError(
            f"Unknown tolerance tier {name!r}, expected one of {sorted(_TIERS)}"
        ) from None
