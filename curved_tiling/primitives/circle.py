"""Circle-circle intersection with tolerant classification."""

from __future__ import annotations

import math
from typing import List, Optional

from ..config import DEFAULT_TOLERANCE, Tolerance
from ..numeric import distance, perp90, safe_sqrt
from ..types import Circle, IntersectResult, Vec2


def _normalize_circle(circle: Circle) -> Optional[Circle]:
    x, y = circle.center
    r = abs(circle.radius)
    if not (math.isfinite(x) and math.isfinite(y) and math.isfinite(r)):
        return None
    if not r > 0.0:
        return None
    return Circle((float(x), float(y)), float(r))


def _sort_points(points: List[Vec2]) -> tuple:
    return tuple(sorted(points, key=lambda p: (p[0], p[1])))


def circle_circle_intersection(
    a: Circle, b: Circle, tol: Tolerance = DEFAULT_TOLERANCE
) -> IntersectResult:
    """Intersect two circles.

    With ``d = |B - A|`` and ``u = (B - A) / d`` the chord foot lies at
    ``aLen = (r1^2 - r2^2 + d^2) / (2d)`` along ``u`` and the half-chord is
    ``h = sqrt(r1^2 - aLen^2)``. Classification runs in the order
    same-centre, separated/contained, tangent, two; tolerances scale with
    ``r1 + r2``.
    """

    ca = _normalize_circle(a)
    cb = _normalize_circle(b)
    if ca is None or cb is None:
        return IntersectResult("none")

    dx = cb.center[0] - ca.center[0]
    dy = cb.center[1] - ca.center[1]
    d = distance(ca.center, cb.center)

    scale = ca.radius + cb.radius
    if tol.eq(d, 0.0, scale):
        if ca.radius == cb.radius:
            return IntersectResult("coincident")
        return IntersectResult("concentric")

    eps = tol.value(scale)
    rdiff = abs(ca.radius - cb.radius)
    if d > scale + eps or d < rdiff - eps:
        return IntersectResult("none")

    a_len = (ca.radius * ca.radius - cb.radius * cb.radius + d * d) / (2.0 * d)
    h = safe_sqrt(ca.radius * ca.radius - a_len * a_len)
    if math.isnan(h):
        return IntersectResult("none")

    ux = dx / d
    uy = dy / d
    px = ca.center[0] + a_len * ux
    py = ca.center[1] + a_len * uy

    if h == 0.0:
        return IntersectResult("tangent", ((px, py),))

    nx, ny = perp90((ux, uy))
    p1 = (px + nx * h, py + ny * h)
    p2 = (px - nx * h, py - ny * h)
    return IntersectResult("two", _sort_points([p1, p2]))


__all__ = ["circle_circle_intersection"]
