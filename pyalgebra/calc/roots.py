"""
Iterative root finding for real functions of one variable.

RootFinder bundles the stopping configuration (epsilon, max_iterations)
and exposes four classic methods. Each returns a RootSolution wrapping
Result[RootParams]; failure to converge raises ConvergenceError instead
of returning NaN.

    >>> finder = RootFinder()
    >>> sol = finder.newton(lambda x: x * x - 2, lambda x: 2 * x, 1.0)
    >>> round(sol.root, 12)
    1.414213562373
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from pyalgebra.core.exceptions import ConvergenceError, ValidationError
from pyalgebra.core.precision import equals_abs
from pyalgebra.core.protocols import FunctionLike, as_callable
from pyalgebra.core.result import Result
from pyalgebra.core.timing import timed
from pyalgebra.core.tolerances import DEFAULT_MAX_ITERATIONS, ROOT_FINDING
from pyalgebra.core.validation import check_finite, check_positive


@dataclass(frozen=True)
class RootParams:
    """
    Parameter payload for root finding.

    Attributes:
        root: Final approximation of the root
        residual: f(root), or root - g(root) for fixed-point iteration
    """
    root: float
    residual: float


@dataclass
class RootSolution:
    """User-facing root finding result. Wraps Result[RootParams]."""
    _result: Result[RootParams]

    @property
    def root(self) -> float:
        return self._result.params.root

    @property
    def residual(self) -> float:
        return self._result.params.residual

    @property
    def iterations(self) -> int:
        return self._result.info['iterations']

    @property
    def converged(self) -> bool:
        return self._result.info['converged']

    @property
    def method(self) -> str:
        return self._result.method

    @property
    def info(self) -> dict:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __float__(self) -> float:
        return self.root

    def __repr__(self) -> str:
        return (
            f"RootSolution(root={self.root!r}, iterations={self.iterations}, "
            f"method={self.method!r})"
        )


def _sign(value: float) -> float:
    return math.copysign(1.0, value) if value != 0 else 0.0


class RootFinder:
    """
    Root finder configuration.

    Parameters
    ----------
    epsilon : float
        Absolute tolerance between successive approximations (or bracket
        ends). Defaults to the ROOT_FINDING tier, 1e-14.
    max_iterations : int
        Iteration cap; exceeding it raises ConvergenceError.

    The finder keeps no per-call state, so one instance may be shared.
    """

    def __init__(
        self,
        epsilon: float = ROOT_FINDING.atol,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ):
        check_positive(epsilon, "epsilon")
        if max_iterations < 1:
            raise ValidationError(
                f"max_iterations: must be >= 1, got {max_iterations}"
            )
        self.epsilon = float(epsilon)
        self.max_iterations = int(max_iterations)

    def __repr__(self) -> str:
        return f"RootFinder(epsilon={self.epsilon!r}, max_iterations={self.max_iterations})"

    def _solution(
        self,
        method: str,
        root: float,
        residual: float,
        iterations: int,
        final_change: float,
        timing: dict[str, float] | None,
    ) -> RootSolution:
        info = {
            'converged': True,
            'iterations': iterations,
            'final_change': final_change,
            'epsilon': self.epsilon,
        }
        return RootSolution(_result=Result(
            params=RootParams(root=root, residual=residual),
            info=info,
            timing=timing,
            method=method,
        ))

    def _not_converged(self, method: str, final_change: float) -> ConvergenceError:
        return ConvergenceError(
            f"{method} did not converge within {self.max_iterations} iterations "
            f"(last change {final_change:.3g}, epsilon {self.epsilon:.3g})",
            iterations=self.max_iterations,
            final_change=final_change,
            reason='max_iterations',
            threshold=self.epsilon,
        )

    # --- Open methods ---

    def newton(self, f: FunctionLike, df: FunctionLike, x0: float) -> RootSolution:
        """
        Newton's method: x <- x - f(x) / f'(x).

        Parameters
        ----------
        f : Function or callable
            Function whose root is sought.
        df : Function or callable
            Derivative of f.
        x0 : float
            Starting approximation.

        Returns
        -------
        RootSolution

        Raises
        ------
        ConvergenceError
            On a zero derivative, a non-finite iterate, or when
            max_iterations is exhausted.
        """
        check_finite(x0, "x0")
        f, df = as_callable(f), as_callable(df)
        x = float(x0)
        change = math.inf

        with timed() as timer:
            for i in range(1, self.max_iterations + 1):
                slope = df(x)
                if slope == 0:
                    raise ConvergenceError(
                        f"newton: zero derivative at x={x!r}",
                        iterations=i - 1,
                        final_change=change,
                        reason='zero_derivative',
                        threshold=self.epsilon,
                    )
                previous = x
                x = x - f(x) / slope
                if not math.isfinite(x):
                    raise ConvergenceError(
                        f"newton: iterate became non-finite after {i} iterations",
                        iterations=i,
                        final_change=change,
                        reason='diverged',
                        threshold=self.epsilon,
                    )
                change = abs(x - previous)
                if equals_abs(previous, x, self.epsilon):
                    break
            else:
                raise self._not_converged('newton', change)

        return self._solution('newton', x, f(x), i, change, timer.result())

    def fixed_point(self, g: FunctionLike, x0: float) -> RootSolution:
        """
        Fixed-point iteration: x <- g(x) until successive values agree.

        The returned root is a fixed point of g (a root of x - g(x)).

        Raises
        ------
        ConvergenceError
            When max_iterations is exhausted or an iterate is non-finite.
        """
        check_finite(x0, "x0")
        g = as_callable(g)
        x = float(x0)
        change = math.inf

        with timed() as timer:
            for i in range(1, self.max_iterations + 1):
                previous = x
                x = g(x)
                if not math.isfinite(x):
                    raise ConvergenceError(
                        f"fixed_point: iterate became non-finite after {i} iterations",
                        iterations=i,
                        final_change=change,
                        reason='diverged',
                        threshold=self.epsilon,
                    )
                change = abs(x - previous)
                if equals_abs(previous, x, self.epsilon):
                    break
            else:
                raise self._not_converged('fixed_point', change)

        return self._solution('fixed_point', x, x - g(x), i, change, timer.result())

    # --- Bracketing methods ---

    def _check_bracket(self, f, left: float, right: float) -> tuple[float, float]:
        check_finite([left, right], "bracket")
        f_left, f_right = f(left), f(right)
        if _sign(f_left) == _sign(f_right):
            raise ValidationError(
                f"bracket: f({left!r}) = {f_left!r} and f({right!r}) = {f_right!r} "
                f"have the same sign"
            )
        return f_left, f_right

    def bisection(self, f: FunctionLike, left: float, right: float) -> RootSolution:
        """
        Bisection on a bracket [left, right] with a sign change.

        Halves the bracket until its ends are within epsilon, or until the
        midpoint can no longer separate them in floating point.

        Raises
        ------
        ValidationError
            If f(left) and f(right) have the same sign.
        ConvergenceError
            When max_iterations is exhausted.
        """
        f = as_callable(f)
        left, right = float(left), float(right)
        f_left, _ = self._check_bracket(f, left, right)
        sign_left = _sign(f_left)
        mid = (left + right) / 2
        iterations = 0

        with timed() as timer:
            while not equals_abs(left, right, self.epsilon):
                if iterations == self.max_iterations:
                    raise self._not_converged('bisection', abs(right - left))
                iterations += 1
                mid = (left + right) / 2
                if mid == left or mid == right:
                    break
                sign_mid = _sign(f(mid))
                if sign_mid == 0:
                    left = right = mid
                elif sign_mid == sign_left:
                    left = mid
                else:
                    right = mid

        return self._solution(
            'bisection', mid, f(mid), iterations, abs(right - left), timer.result()
        )

    def false_position(self, f: FunctionLike, left: float, right: float) -> RootSolution:
        """
        Regula falsi: replace a bracket end with the root of the secant
        through (left, f(left)) and (right, f(right)).

        Converges when the bracket end replaced in an iteration moves by
        no more than epsilon.

        Raises
        ------
        ValidationError
            If f(left) and f(right) have the same sign.
        ConvergenceError
            When max_iterations is exhausted.
        """
        f = as_callable(f)
        left, right = float(left), float(right)
        f_left, f_right = self._check_bracket(f, left, right)
        sign_left = _sign(f_left)
        change = math.inf

        with timed() as timer:
            for i in range(1, self.max_iterations + 1):
                mid = f_left * (left - right) / (f_right - f_left) + left
                f_mid = f(mid)
                if f_mid == 0:
                    change = 0.0
                    break
                if _sign(f_mid) == sign_left:
                    previous, left, f_left = left, mid, f_mid
                else:
                    previous, right, f_right = right, mid, f_mid
                change = abs(mid - previous)
                if equals_abs(previous, mid, self.epsilon):
                    break
            else:
                raise self._not_converged('false_position', change)

        return self._solution('false_position', mid, f_mid, i, change, timer.result())


DEFAULT_ROOT_FINDER = RootFinder()
