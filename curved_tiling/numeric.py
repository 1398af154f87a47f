"""Scalar and 2D vector helpers shared by every geometry module."""

from __future__ import annotations

import math

from .config import DEFAULT_TOLERANCE, Tolerance
from .types import Vec2

TAU = 2.0 * math.pi


def tol_value(scale: float, tol: Tolerance = DEFAULT_TOLERANCE) -> float:
    return tol.value(scale)


def eq_tol(a: float, b: float, scale: float, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    return tol.eq(a, b, scale)


def safe_sqrt(x: float, eps: float = 1e-15) -> float:
    """Square root that maps tiny negatives to 0 and larger negatives to NaN."""

    if x < 0.0:
        return 0.0 if x >= -abs(eps) else math.nan
    return math.sqrt(x)


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


def normalize_angle_0_to_tau(theta: float) -> float:
    """Map ``theta`` into ``[0, 2pi)``."""

    t = math.fmod(theta, TAU)
    if t < 0.0:
        t += TAU
    if t >= TAU:
        t -= TAU
    return t


def normalize_angle_minus_pi_to_pi(theta: float) -> float:
    """Map ``theta`` into ``(-pi, pi]``."""

    t = math.fmod(theta + math.pi, TAU) - math.pi
    if t <= -math.pi:
        t += TAU
    if t > math.pi:
        t -= TAU
    return t


def is_finite2(v: Vec2) -> bool:
    return math.isfinite(v[0]) and math.isfinite(v[1])


def add2(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def sub2(a: Vec2, b: Vec2) -> Vec2:
    return a[0] - b[0], a[1] - b[1]


def scale2(v: Vec2, k: float) -> Vec2:
    return v[0] * k, v[1] * k


def dot2(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross2(a: Vec2, b: Vec2) -> float:
    return a[0] * b[1] - a[1] * b[0]


def norm2(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vec2, b: Vec2) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def perp90(v: Vec2) -> Vec2:
    """Rotate by +90 degrees: ``(x, y) -> (-y, x)``."""

    return -v[1], v[0]


def rotate90_cw(v: Vec2) -> Vec2:
    return v[1], -v[0]


def unit2(v: Vec2, fallback: Vec2 = (1.0, 0.0)) -> Vec2:
    """Return ``v`` scaled to unit length, or ``fallback`` for zero/non-finite input."""

    n = math.hypot(v[0], v[1])
    if not (n > 0.0) or not math.isfinite(n):
        return fallback
    return v[0] / n, v[1] / n


def midpoint3(a: Vec2, b: Vec2, c: Vec2) -> Vec2:
    return (a[0] + b[0] + c[0]) / 3.0, (a[1] + b[1] + c[1]) / 3.0


__all__ = [
    "TAU",
    "add2",
    "clamp",
    "cross2",
    "distance",
    "dot2",
    "eq_tol",
    "is_finite2",
    "midpoint3",
    "norm2",
    "normalize_angle_0_to_tau",
    "normalize_angle_minus_pi_to_pi",
    "perp90",
    "rotate90_cw",
    "safe_sqrt",
    "scale2",
    "sub2",
    "tol_value",
    "unit2",
]
