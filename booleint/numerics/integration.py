"""Adaptive Boole's rule integration.

The driver starts from the breakpoints (a, b), doubles their density on
every pass and re-sums Boole's rule over all finite panels. It stops when
two successive estimates differ by less than the tolerance, or when two
successive estimates are both infinite with the same sign, in which case
the integral is reported as divergent in that direction.

Half-infinite and doubly-infinite intervals are supported; see
booleint.numerics.breakpoints for how infinite ends are approached.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from booleint.numerics.boole import boole_panel
from booleint.numerics.breakpoints import active_panels, refine_breakpoints

logger = logging.getLogger(__name__)

# Integrand evaluations per panel of Boole's rule.
EVALUATIONS_PER_PANEL = 5


class IntegrationStatus(Enum):
    """How an adaptive integration run ended."""

    CONVERGED = "converged"
    DIVERGENT_POSITIVE = "divergent_positive"
    DIVERGENT_NEGATIVE = "divergent_negative"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class IterationRecord:
    """One refinement pass.

    Attributes:
        iteration: 1-based pass number.
        breakpoints: Number of breakpoints after refinement.
        estimate: Sum of Boole's rule over the active panels.
        change: Absolute difference from the previous estimate.
    """

    iteration: int
    breakpoints: int
    estimate: float
    change: float


@dataclass
class IntegrationResult:
    """Result of adaptive integration.

    Attributes:
        value: The final estimate; +inf or -inf when divergent.
        status: How the run ended.
        iterations: Number of refinement passes performed.
        function_calls: Number of integrand evaluations.
        history: Per-pass records, in order.
    """

    value: float
    status: IntegrationStatus
    iterations: int
    function_calls: int
    history: list[IterationRecord] = field(default_factory=list)

    @property
    def converged(self) -> bool:
        return self.status is IntegrationStatus.CONVERGED

    @property
    def divergent(self) -> bool:
        return self.status in (
            IntegrationStatus.DIVERGENT_POSITIVE,
            IntegrationStatus.DIVERGENT_NEGATIVE,
        )


def _validate(a: float, b: float, tolerance: float) -> None:
    if math.isnan(a) or math.isnan(b):
        raise ValueError(f"bounds must not be NaN, got a={a}, b={b}")
    if a == math.inf:
        raise ValueError("lower bound must not be +inf")
    if b == -math.inf:
        raise ValueError("upper bound must not be -inf")
    if a > b:
        raise ValueError(f"lower bound must be <= upper bound, got a={a}, b={b}")
    if not tolerance > 0:
        raise ValueError(f"tolerance must be > 0, got {tolerance}")


def integrate_boole(
    f: Callable[[float], float],
    a: float,
    b: float,
    tolerance: float,
    max_iterations: int | None = None,
) -> IntegrationResult:
    """Integrate f over [a, b] by repeated breakpoint doubling.

    Each pass sums Boole's rule over every finite panel of the refined
    breakpoints and compares the sum to the previous pass. Intervals with
    an infinite end start from a +inf estimate instead of a direct panel.

    Without max_iterations the loop only ends on convergence or divergence,
    so an integrand that does neither keeps it running. With a budget the
    run stops after that many passes with status EXHAUSTED and the last
    estimate as its value.

    Args:
        f: Integrand, defined on the open interval (a, b).
        a: Lower bound, may be -inf.
        b: Upper bound, may be +inf.
        tolerance: Absolute difference between successive estimates at
            which the run is considered converged.
        max_iterations: Optional cap on refinement passes.

    Returns:
        IntegrationResult with the estimate and run details.

    Raises:
        ValueError: If the bounds, tolerance or max_iterations are invalid.
    """
    _validate(a, b, tolerance)
    if max_iterations is not None and max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

    if a == b:
        return IntegrationResult(
            value=0.0, status=IntegrationStatus.CONVERGED, iterations=0, function_calls=0
        )

    function_calls = 0
    if math.isinf(a) or math.isinf(b):
        ret = math.inf
    else:
        ret = boole_panel(f, a, b)
        function_calls += EVALUATIONS_PER_PANEL

    points: tuple[float, ...] = (a, b)
    history: list[IterationRecord] = []
    iteration = 0

    while True:
        iteration += 1
        points = refine_breakpoints(points)

        refined = 0.0
        for left, right in active_panels(points):
            refined += boole_panel(f, left, right)
            function_calls += EVALUATIONS_PER_PANEL

        change = abs(ret - refined)
        history.append(IterationRecord(iteration, len(points), refined, change))
        logger.debug(
            "pass %d: %d breakpoints, estimate=%r, change=%r",
            iteration, len(points), refined, change,
        )

        if ret == math.inf and refined == math.inf:
            logger.info("integral over [%r, %r] diverges to +inf after %d passes", a, b, iteration)
            return IntegrationResult(
                math.inf, IntegrationStatus.DIVERGENT_POSITIVE, iteration, function_calls, history
            )
        if ret == -math.inf and refined == -math.inf:
            logger.info("integral over [%r, %r] diverges to -inf after %d passes", a, b, iteration)
            return IntegrationResult(
                -math.inf, IntegrationStatus.DIVERGENT_NEGATIVE, iteration, function_calls, history
            )

        done = change < tolerance
        ret = refined

        if done:
            logger.info(
                "integral over [%r, %r] converged to %r after %d passes (%d evaluations)",
                a, b, ret, iteration, function_calls,
            )
            return IntegrationResult(
                ret, IntegrationStatus.CONVERGED, iteration, function_calls, history
            )

        if max_iterations is not None and iteration >= max_iterations:
            logger.warning(
                "integral over [%r, %r] not converged after %d passes, last change %r",
                a, b, iteration, change,
            )
            return IntegrationResult(
                ret, IntegrationStatus.EXHAUSTED, iteration, function_calls, history
            )


def integrate(
    f: Callable[[float], float], a: float, b: float, tolerance: float
) -> float:
    """Integrate f over [a, b] to within tolerance between successive passes.

    Returns +inf or -inf when the integral is judged divergent. There is no
    iteration cap; use integrate_boole with max_iterations for a bounded run.

    Example:
        >>> round(integrate(lambda x: x * x, 0.0, 3.0, 1e-9), 9)
        9.0
    """
    return integrate_boole(f, a, b, tolerance).value
