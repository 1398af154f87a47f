"""Euclidean (p, q, r) triangle with half-plane mirrors."""

from __future__ import annotations

import logging
import math

from ..numeric import midpoint3
from ..primitives.half_plane import evaluate_half_plane, flip_half_plane, normalize_half_plane
from ..types import (
    DegenerateGeometryError,
    EuclideanTriangle,
    HalfPlane,
    TriangleConstructionError,
    TrianglePrimitiveSet,
    Vec2,
)

logger = logging.getLogger(__name__)

ANGLE_SUM_TOL = 1e-6


def _mirror(a: Vec2, b: Vec2, interior: Vec2) -> HalfPlane:
    # the interior evaluates negative
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    try:
        plane = normalize_half_plane(HalfPlane(a, (dy, -dx)))
    except DegenerateGeometryError as exc:
        raise TriangleConstructionError("Degenerate Euclidean triangle edge") from exc
    if evaluate_half_plane(plane, interior) < 0.0:
        return plane
    return flip_half_plane(plane)


def build_euclidean_triangle(p: float, q: float, r: float) -> EuclideanTriangle:
    """Triangle with angles ``(pi/p, pi/q, pi/r)`` summing to ``pi``.

    Edge ``v0 v1`` has unit length along the x-axis and the remaining side
    follows from the law of sines. Mirror ``i`` is the edge opposite vertex
    ``i`` and every mirror has the barycentre on its negative side.
    """

    for name, value in (("p", p), ("q", q), ("r", r)):
        if not value > 1:
            raise TriangleConstructionError(
                f"{name}={value!r}: (p, q, r) must all exceed 1 for Euclidean mode"
            )

    alpha = math.pi / p
    beta = math.pi / q
    gamma = math.pi / r
    if abs(alpha + beta + gamma - math.pi) > ANGLE_SUM_TOL:
        raise TriangleConstructionError(
            f"Angles of ({p}, {q}, {r}) do not form a Euclidean triangle (sum must be pi)"
        )

    sin_gamma = math.sin(gamma)
    if not sin_gamma > 0.0:
        raise TriangleConstructionError(f"Invalid ({p}, {q}, {r}): degenerate Euclidean triangle")
    side_b = math.sin(beta) / sin_gamma

    v0: Vec2 = (0.0, 0.0)
    v1: Vec2 = (1.0, 0.0)
    v2: Vec2 = (side_b * math.cos(alpha), side_b * math.sin(alpha))
    center = midpoint3(v0, v1, v2)

    mirrors = (_mirror(v1, v2, center), _mirror(v0, v2, center), _mirror(v0, v1, center))
    logger.debug("Built Euclidean triangle (%s, %s, %s) with side b=%.9g", p, q, r, side_b)
    return TrianglePrimitiveSet(
        kind="euclidean",
        mirrors=mirrors,
        vertices=(v0, v1, v2),
        angles=(alpha, beta, gamma),
    )


__all__ = ["ANGLE_SUM_TOL", "build_euclidean_triangle"]
