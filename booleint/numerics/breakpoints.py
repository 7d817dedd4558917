"""Breakpoint refinement for the adaptive Boole driver.

A breakpoint sequence is a strictly increasing tuple whose first and last
elements are the integration bounds. Refinement inserts one point into
every gap, so a sequence of n points becomes 2n - 1 points.

Gaps touching an infinite bound have no midpoint. Instead a synthetic
finite boundary is placed next to the infinite end, twice as far from the
origin as its neighbour, so the finite region grows geometrically toward
the infinite end while every interior panel stays finite. The panel
between an infinite bound and its synthetic boundary is never integrated.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence


def _is_neg_inf(x: float) -> bool:
    return math.isinf(x) and x < 0


def _is_pos_inf(x: float) -> bool:
    return math.isinf(x) and x > 0


def _left_boundary(neighbour: float) -> float:
    """Synthetic boundary between -inf and neighbour."""
    if neighbour < 0:
        return 2.0 * neighbour
    # Only the seeded origin of (-inf, +inf) gets here.
    return -1.0


def _right_boundary(neighbour: float) -> float:
    """Synthetic boundary between neighbour and +inf."""
    if neighbour > 0:
        return 2.0 * neighbour
    return 1.0


def refine_breakpoints(points: Sequence[float]) -> tuple[float, ...]:
    """Return a new sequence with one point inserted into every gap.

    Finite gaps receive their midpoint: (0, 2, 4) -> (0, 1, 2, 3, 4).

    On the first refinement of a two point sequence the first finite
    boundary is seeded near the origin: 0 for (-inf, +inf), -1 for
    (-inf, b] with b >= 0, and 1 for [a, +inf) with a <= 0. Otherwise the
    boundary next to an infinite end is twice its finite neighbour.

    Args:
        points: Current strictly increasing breakpoints, at least two.

    Returns:
        The refined breakpoints as a tuple. The input is not modified.

    Raises:
        ValueError: If fewer than two points are given.
    """
    n = len(points)
    if n < 2:
        raise ValueError(f"need at least 2 breakpoints, got {n}")

    first, last = points[0], points[-1]
    left_inf = _is_neg_inf(first)
    right_inf = _is_pos_inf(last)

    if n == 2:
        if left_inf and right_inf:
            return (first, 0.0, last)
        if left_inf and last >= 0:
            return (first, -1.0, last)
        if right_inf and first <= 0:
            return (first, 1.0, last)

    refined = [first]
    for i in range(n - 1):
        lo, hi = points[i], points[i + 1]
        if i == 0 and left_inf:
            refined.append(_left_boundary(hi))
        elif i == n - 2 and right_inf:
            refined.append(_right_boundary(lo))
        else:
            refined.append((lo + hi) / 2.0)
        refined.append(hi)

    return tuple(refined)


def active_panels(points: Sequence[float]) -> Iterator[tuple[float, float]]:
    """Yield the adjacent (left, right) pairs that are integrated.

    The first gap is skipped when it starts at -inf and the last gap is
    skipped when it ends at +inf.
    """
    start = 1 if _is_neg_inf(points[0]) else 0
    stop = len(points) - 1
    if _is_pos_inf(points[-1]):
        stop -= 1
    for i in range(start, stop):
        yield points[i], points[i + 1]
