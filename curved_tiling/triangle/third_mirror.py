"""Root finding for the circular third mirror of a hyperbolic triangle.

With mirror 1 on the x-axis and mirror 2 the diameter at angle ``alpha``,
the third mirror is a circle orthogonal to the unit disk that crosses the
x-axis at ``t`` in ``(0, 1)`` with angle ``beta``:

    cx = (1 + t^2) / (2t),  dx = t - cx,  cy = |dx| / tan(beta),  r = hypot(dx, cy)

so ``cx^2 + cy^2 - r^2 = 1`` holds for every ``t``. The remaining scalar is
fixed by requiring the angle with mirror 2 to equal ``gamma``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional, Tuple
from typing import Literal

from ..config import DEFAULT_THIRD_MIRROR_CONFIG, ThirdMirrorConfig
from ..numeric import clamp
from ..types import Vec2

logger = logging.getLogger(__name__)

Bracket = Tuple[float, float, float, float]


@dataclass(frozen=True)
class ThirdMirrorCircle:
    cx: float
    cy: float
    dx: float
    r: float


@dataclass(frozen=True)
class ThirdMirrorSolution:
    center: Vec2
    radius: float
    parameter: float
    method: Literal["bisection", "secant"]
    residual: float


def unit_direction(alpha: float) -> Vec2:
    return math.cos(alpha), math.sin(alpha)


def circle_from_parameter(t: float, beta: float) -> ThirdMirrorCircle:
    cx = (1.0 + t * t) / (2.0 * t)
    dx = t - cx
    cy = abs(dx) / math.tan(beta)
    return ThirdMirrorCircle(cx, cy, dx, math.hypot(dx, cy))


def angle_at_second_mirror(t: float, alpha: float, beta: float) -> float:
    """Angle between the circle for ``t`` and the diameter at ``alpha``."""

    circle = circle_from_parameter(t, beta)
    ux, uy = unit_direction(alpha)
    cdotu = circle.cx * ux + circle.cy * uy
    # orthogonality makes |c|^2 - r^2 = 1, so the discriminant is cdotu^2 - 1
    s = cdotu - math.sqrt(max(0.0, cdotu * cdotu - 1.0))
    nx = (s * ux - circle.cx) / circle.r
    ny = (s * uy - circle.cy) / circle.r
    return math.asin(clamp(abs(nx * ux + ny * uy), 0.0, 1.0))


def find_sign_change(
    fn: Callable[[float], float],
    config: ThirdMirrorConfig = DEFAULT_THIRD_MIRROR_CONFIG,
    *,
    interval: Optional[Tuple[float, float]] = None,
    subdivisions: Optional[int] = None,
) -> Optional[Bracket]:
    """Scan ``interval`` (``config.interval`` by default) for a sign change of ``fn``.

    Endpoints are tried first, then ``subdivisions`` uniform steps.
    """

    a, b = config.interval if interval is None else interval
    fa = fn(a)
    fb = fn(b)
    if fa * fb <= 0.0:
        return a, b, fa, fb

    prev_t, prev_f = a, fa
    steps = max(1, config.subdivisions if subdivisions is None else subdivisions)
    for i in range(1, steps + 1):
        t = a + (b - a) * i / steps
        ft = fn(t)
        if prev_f * ft <= 0.0:
            return prev_t, t, prev_f, ft
        prev_t, prev_f = t, ft
    return None


def bisect(
    fn: Callable[[float], float],
    bracket: Bracket,
    config: ThirdMirrorConfig = DEFAULT_THIRD_MIRROR_CONFIG,
) -> float:
    a, b, fa, fb = bracket
    for _ in range(config.max_bisection_iter):
        m = 0.5 * (a + b)
        fm = fn(m)
        if abs(fm) < config.residual_tol or abs(b - a) < config.interval_tol:
            return m
        if fb * fm <= 0.0 and fa * fm > 0.0:
            a, fa = m, fm
        else:
            b, fb = m, fm
    return 0.5 * (a + b)


def secant_refine(
    fn: Callable[[float], float], config: ThirdMirrorConfig = DEFAULT_THIRD_MIRROR_CONFIG
) -> float:
    lo, hi = config.secant_clamp
    t0, t1 = config.secant_seeds
    f0 = fn(t0)
    f1 = fn(t1)
    for _ in range(config.secant_iterations):
        delta = f1 - f0
        if abs(delta) < config.secant_min_denominator:
            delta = math.copysign(config.secant_min_denominator, delta)
        candidate = clamp(t1 - f1 * (t1 - t0) / delta, lo, hi)
        t0, f0 = t1, f1
        t1 = candidate
        f1 = fn(t1)
    return t1


def solve_third_mirror(
    alpha: float,
    beta: float,
    gamma: float,
    config: ThirdMirrorConfig = DEFAULT_THIRD_MIRROR_CONFIG,
) -> ThirdMirrorSolution:
    """Solve ``angle_at_second_mirror(t) = gamma`` for the third mirror circle."""

    def fn(t: float) -> float:
        return angle_at_second_mirror(t, alpha, beta) - gamma

    bracket = find_sign_change(fn, config)
    if bracket is None and config.fallback_interval is not None:
        logger.debug(
            "No sign change in %s; rescanning %s", config.interval, config.fallback_interval
        )
        bracket = find_sign_change(
            fn,
            config,
            interval=config.fallback_interval,
            subdivisions=config.fallback_subdivisions,
        )
    if bracket is not None:
        parameter = bisect(fn, bracket, config)
        method = "bisection"
    else:
        logger.info(
            "No sign change for alpha=%.6g beta=%.6g gamma=%.6g; falling back to secant",
            alpha,
            beta,
            gamma,
        )
        parameter = secant_refine(fn, config)
        method = "secant"

    circle = circle_from_parameter(parameter, beta)
    residual = fn(parameter)
    logger.debug(
        "Third mirror t=%.9g method=%s residual=%.3g center=(%.6g, %.6g) r=%.6g",
        parameter,
        method,
        residual,
        circle.cx,
        circle.cy,
        circle.r,
    )
    return ThirdMirrorSolution((circle.cx, circle.cy), circle.r, parameter, method, residual)


__all__ = [
    "ThirdMirrorCircle",
    "ThirdMirrorSolution",
    "angle_at_second_mirror",
    "bisect",
    "circle_from_parameter",
    "find_sign_change",
    "secant_refine",
    "solve_third_mirror",
    "unit_direction",
]
