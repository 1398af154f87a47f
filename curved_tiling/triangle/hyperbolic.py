"""Canonical (p, q, r) triangle on the Poincare disk."""

from __future__ import annotations

import logging
import math
import numbers
from typing import List, Optional, Tuple

from ..config import DEFAULT_THIRD_MIRROR_CONFIG, DEFAULT_TOLERANCE, ThirdMirrorConfig, Tolerance
from ..logging_utils import apply_debug_logging
from ..numeric import dot2, midpoint3
from ..primitives.geodesic import geodesic_from_boundary, orient_geodesic_toward
from ..types import (
    CircleGeodesic,
    Geodesic,
    HalfPlane,
    HyperbolicTriangle,
    OrientedGeodesic,
    TriangleConstructionError,
    TrianglePrimitiveSet,
    Vec2,
)
from .third_mirror import solve_third_mirror, unit_direction

logger = logging.getLogger(__name__)

_X_ROOT_CLAMP = (1e-6, 0.999)


def _check_parameters(p: float, q: float, r: float) -> None:
    for name, value in (("p", p), ("q", q), ("r", r)):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TriangleConstructionError(f"{name} must be a real number, got {value!r}")
        if not math.isfinite(value) or not value > 1:
            raise TriangleConstructionError(f"{name} must be a finite value > 1, got {value!r}")


def hyperbolic_sum(p: float, q: float, r: float) -> float:
    return 1.0 / p + 1.0 / q + 1.0 / r


def _x_axis_vertex(center: Vec2, radius: float) -> Vec2:
    cx, cy = center
    half_chord = math.sqrt(max(0.0, radius * radius - cy * cy))
    near = cx - half_chord
    far = cx + half_chord
    if 0.0 < near < 1.0:
        x = near
    elif 0.0 < far < 1.0:
        x = far
    else:
        x = min(max(near, _X_ROOT_CLAMP[0]), _X_ROOT_CLAMP[1])
    return x, 0.0


def _diameter_vertex(direction: Vec2, center: Vec2, radius: float) -> Vec2:
    cdotu = dot2(center, direction)
    disc = cdotu * cdotu - (dot2(center, center) - radius * radius)
    s = cdotu - math.sqrt(max(0.0, disc))
    return s * direction[0], s * direction[1]


def _diameter_half_plane(boundary: OrientedGeodesic) -> Optional[HalfPlane]:
    if boundary.kind != "line":
        return None
    return HalfPlane(boundary.anchor, boundary.normal)


def build_hyperbolic_triangle(
    p: float,
    q: float,
    r: float,
    *,
    config: ThirdMirrorConfig = DEFAULT_THIRD_MIRROR_CONFIG,
    tol: Tolerance = DEFAULT_TOLERANCE,
) -> HyperbolicTriangle:
    """Build the canonical hyperbolic triangle with angles ``(pi/p, pi/q, pi/r)``.

    Mirror 1 is the x-axis diameter, mirror 2 the diameter at ``pi/p`` and
    mirror 3 the orthogonal circle found by :func:`solve_third_mirror`.
    Vertex 0 sits at the origin, vertex 1 on the x-axis and vertex 2 on
    mirror 2.

    When ``1/p + 1/q + 1/r >= 1`` the construction still runs and the result
    carries a warning instead of raising.
    """

    _check_parameters(p, q, r)
    warnings: List[str] = []
    total = hyperbolic_sum(p, q, r)
    if total >= 1.0:
        message = (
            f"(p, q, r)=({p}, {q}, {r}) violates the hyperbolic constraint "
            f"1/p + 1/q + 1/r = {total:.6g} >= 1; mirrors are best-effort"
        )
        logger.warning(message)
        warnings.append(message)

    alpha = math.pi / p
    beta = math.pi / q
    gamma = math.pi / r

    g1 = geodesic_from_boundary((1.0, 0.0), (-1.0, 0.0), tol)
    u = unit_direction(alpha)
    g2 = geodesic_from_boundary(u, (-u[0], -u[1]), tol)

    solution = solve_third_mirror(alpha, beta, gamma, config)
    if solution.method == "secant":
        warnings.append(
            f"third mirror solved by secant fallback (residual {solution.residual:.3g})"
        )
    g3 = CircleGeodesic(solution.center, solution.radius)

    v0: Vec2 = (0.0, 0.0)
    v1 = _x_axis_vertex(solution.center, solution.radius)
    v2 = _diameter_vertex(u, solution.center, solution.radius)

    mirrors: Tuple[Geodesic, Geodesic, Geodesic] = (g1, g2, g3)
    interior = midpoint3(v0, v1, v2)
    boundaries = tuple(orient_geodesic_toward(mirror, interior) for mirror in mirrors)

    logger.info(
        "Built hyperbolic triangle (%s, %s, %s) with third mirror via %s", p, q, r, solution.method
    )
    return TrianglePrimitiveSet(
        kind="hyperbolic",
        mirrors=mirrors,
        vertices=(v0, v1, v2),
        angles=(alpha, beta, gamma),
        boundaries=boundaries,
        half_planes=tuple(_diameter_half_plane(boundary) for boundary in boundaries),
        warnings=tuple(warnings),
    )


apply_debug_logging(globals(), logger=logger)


__all__ = ["build_hyperbolic_triangle", "hyperbolic_sum"]
