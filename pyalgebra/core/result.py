"""
Result envelope for the iterative solvers.

A solver returns its numbers (params) together with how it got there:
the iteration count and final step in info, wall-clock timing, and the
name of the method. Solution classes such as RootSolution wrap a Result
and expose its fields as properties.
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for iterative computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (root, residual, etc.)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        method: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=RootParams(root=31.6385, residual=0.0),
        ...     info={'converged': True, 'iterations': 6},
        ...     timing={'total_seconds': 1e-5},
        ...     method='newton'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
