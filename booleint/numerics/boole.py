"""Closed Newton-Cotes panel rules.

Provides Boole's rule (5 points, exact up to degree 5) and Simpson's rule
(3 points) over a single finite panel, plus fixed-step composites that
walk a generated point sequence.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator

# Geometric spacing used by step_points for infinite ends.
GROWTH_FACTOR = 1.1
LARGE = 1e50


def boole_panel(f: Callable[[float], float], left: float, right: float) -> float:
    """Boole's rule over [left, right].

    Both bounds must be finite. Evaluates f at five equally spaced points.
    """
    h = (right - left) / 4.0
    f0 = f(left)
    f1 = f(left + h)
    f2 = f(left + 2 * h)
    f3 = f(left + 3 * h)
    f4 = f(right)
    return 2 * h * (7 * f0 + 32 * f1 + 12 * f2 + 32 * f3 + 7 * f4) / 45.0


def simpson_panel(f: Callable[[float], float], left: float, right: float) -> float:
    """Simpson's rule over [left, right]: (R-L)/6 * (f(L) + 4f(M) + f(R))."""
    return (right - left) / 6.0 * (f(left) + 4.0 * f((left + right) / 2.0) + f(right))


def step_points(a: float, b: float, step: float) -> Iterator[float]:
    """Yield increasing points spanning [a, b] with a nominal spacing of step.

    Finite intervals yield a, a+step, ... and always finish on b, so the last
    gap may be shorter than step.

    An infinite end is approached geometrically: offsets step, step*1.1,
    step*1.1^2, ... from the finite end, stopping once the point would pass
    1e50 in magnitude. A doubly infinite interval yields the left sequence
    ending at 0 followed by the right sequence starting at step.

    Raises:
        ValueError: If step is not positive.
    """
    if not step > 0:
        raise ValueError(f"step must be > 0, got {step}")

    left_inf = math.isinf(a) and a < 0
    right_inf = math.isinf(b) and b > 0

    if not left_inf and not right_inf:
        x = a
        while x < b:
            yield x
            x += step
        yield b
    elif left_inf and right_inf:
        yield from _left_tail(0.0, step)
        yield from _right_tail(0.0, step, include_origin=False)
    elif left_inf:
        yield from _left_tail(b, step)
    else:
        yield from _right_tail(a, step, include_origin=True)


def _left_tail(b: float, step: float) -> Iterator[float]:
    offsets = []
    x = step
    while b - x > -LARGE:
        offsets.append(x)
        x *= GROWTH_FACTOR
    for offset in reversed(offsets):
        yield b - offset
    yield b


def _right_tail(a: float, step: float, include_origin: bool) -> Iterator[float]:
    if include_origin:
        yield a
    x = step
    while a + x < LARGE:
        yield a + x
        x *= GROWTH_FACTOR


def composite_simpson(
    f: Callable[[float], float], a: float, b: float, step: float
) -> float:
    """Simpson's rule summed over the panels produced by step_points."""
    points = step_points(a, b, step)
    left = next(points)
    f_left = f(left)
    result = 0.0
    for right in points:
        f_right = f(right)
        result += (right - left) / 6.0 * (f_left + 4.0 * f((left + right) / 2.0) + f_right)
        left, f_left = right, f_right
    return result


def composite_boole(
    f: Callable[[float], float], a: float, b: float, step: float
) -> float:
    """Boole's rule summed over the panels produced by step_points.

    The shared endpoint between neighbouring panels is evaluated once.
    """
    points = step_points(a, b, step)
    left = next(points)
    f_left = f(left)
    result = 0.0
    for right in points:
        w = (right - left) / 4.0
        f2 = f(left + w)
        f3 = f(left + 2 * w)
        f4 = f(left + 3 * w)
        f_right = f(right)
        result += 2 * w / 45.0 * (7 * f_left + 32 * f2 + 12 * f3 + 32 * f4 + 7 * f_right)
        left, f_left = right, f_right
    return result
