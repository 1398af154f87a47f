"""Unit-circle parameterisation and N-way angle snapping."""

from __future__ import annotations

import math

from ..config import DEFAULT_TOLERANCE, Tolerance
from ..numeric import TAU, normalize_angle_0_to_tau, normalize_angle_minus_pi_to_pi
from ..types import Vec2


def angle_to_boundary_point(theta: float) -> Vec2:
    t = normalize_angle_minus_pi_to_pi(theta)
    return math.cos(t), math.sin(t)


def boundary_point_to_angle(point: Vec2) -> float:
    """Polar angle of ``point`` in ``(-pi, pi]``; tolerates slightly off-circle input."""

    x = point[0] if math.isfinite(point[0]) else 1.0
    y = point[1] if math.isfinite(point[1]) else 0.0
    m = math.hypot(x, y)
    if not m > 0.0:
        return 0.0
    return normalize_angle_minus_pi_to_pi(math.atan2(y / m, x / m))


def is_on_unit_circle(point: Vec2, tol: Tolerance = DEFAULT_TOLERANCE) -> bool:
    r = math.hypot(point[0], point[1])
    if not math.isfinite(r):
        return False
    return abs(r - 1.0) <= tol.value(1.0)


def normalize_on_unit_circle(point: Vec2) -> Vec2:
    r = math.hypot(point[0], point[1])
    if not math.isfinite(r) or not r > 0.0:
        return 1.0, 0.0
    return point[0] / r, point[1] / r


def snap_angle(theta: float, n: float) -> float:
    """Round ``theta`` to the nearest multiple of ``2pi/n``, ties to the upper side.

    The result is normalised into ``(-pi, pi]``.
    """

    if not math.isfinite(theta):
        return 0.0
    divisions = max(1, int(math.floor(abs(n))) if math.isfinite(n) else 1)
    step = TAU / divisions
    t0 = normalize_angle_0_to_tau(theta)
    k = math.floor((t0 + step / 2.0) / step)
    return normalize_angle_minus_pi_to_pi(k * step)


def snap_boundary_point(point: Vec2, n: float) -> Vec2:
    return angle_to_boundary_point(snap_angle(boundary_point_to_angle(point), n))


__all__ = [
    "angle_to_boundary_point",
    "boundary_point_to_angle",
    "is_on_unit_circle",
    "normalize_on_unit_circle",
    "snap_angle",
    "snap_boundary_point",
]
