"""Regular hyperbolic n-gons with interior angle ``2*pi/q``."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from scipy.optimize import brentq

from .numeric import TAU, norm2
from .primitives.geodesic import geodesic_through_points, orient_geodesic_toward
from .types import GeometryError, OrientedGeodesic, TriangleConstructionError, Vec2

logger = logging.getLogger(__name__)

MIN_RHO = 1e-9
MAX_RHO = 1.0 - 1e-9


@dataclass(frozen=True)
class HyperbolicRegularNgon:
    n: int
    q: int
    rho: float
    alpha: float
    edge_length: float
    vertices: Tuple[Vec2, ...]
    geodesics: Tuple[OrientedGeodesic, ...]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_hyperbolic_ngon_feasible(n: int, q: int) -> bool:
    return _is_int(n) and _is_int(q) and n >= 3 and q >= 3 and (n - 2) * (q - 2) > 4


def edge_length_from_alpha(n: int, alpha: float) -> float:
    sin_half = math.sin(alpha / 2.0)
    if not 0.0 < sin_half < 1.0:
        raise GeometryError(f"alpha={alpha!r} produces an invalid sine term")
    ratio = math.cos(math.pi / n) / sin_half
    if not ratio > 1.0:
        raise GeometryError("cos(pi/n) / sin(alpha/2) must exceed 1 for a hyperbolic polygon")
    return 2.0 * math.acosh(ratio)


def edge_length_from_rho(n: int, rho: float) -> float:
    """Hyperbolic side length of the n-gon with Euclidean vertex radius ``rho``."""

    if not 0.0 < rho < 1.0:
        raise GeometryError(f"rho must lie in (0, 1), got {rho!r}")
    sin_term = math.sin(math.pi / n)
    # disk distance between adjacent vertices at radius rho
    arg = 1.0 + 8.0 * rho * rho * sin_term * sin_term / (1.0 - rho * rho) ** 2
    return math.acosh(arg)


def solve_hyperbolic_vertex_radius(
    n: int, alpha: float, *, tolerance: float = 1e-12, max_iterations: int = 128
) -> float:
    """Euclidean radius of the vertices of a regular n-gon with interior angle ``alpha``."""

    if not _is_int(n) or n < 3:
        raise GeometryError("n must be an integer >= 3")
    if not 0.0 < alpha < math.pi:
        raise GeometryError("alpha must be within (0, pi)")
    target = edge_length_from_alpha(n, alpha)
    # edge length grows monotonically with rho
    return brentq(
        lambda rho: edge_length_from_rho(n, rho) - target,
        MIN_RHO,
        MAX_RHO,
        xtol=tolerance,
        maxiter=max_iterations,
    )


def regular_vertices(n: int, rho: float, rotation: float = 0.0) -> Tuple[Vec2, ...]:
    return tuple(
        (rho * math.cos(rotation + TAU * k / n), rho * math.sin(rotation + TAU * k / n))
        for k in range(n)
    )


def _interior_point(vertices: Sequence[Vec2]) -> Vec2:
    if not vertices:
        return 0.0, 0.0
    inv = 1.0 / len(vertices)
    center = (sum(v[0] for v in vertices) * inv, sum(v[1] for v in vertices) * inv)
    if norm2(center) > 1e-6:
        return center
    return vertices[0][0] * 0.5, vertices[0][1] * 0.5


def build_hyperbolic_regular_ngon(n: int, q: int, *, rotation: float = 0.0) -> HyperbolicRegularNgon:
    """Regular n-gon centred at the origin, ``q`` of which meet at each vertex.

    Each edge is returned as an oriented geodesic whose positive side holds
    the polygon.
    """

    if not is_hyperbolic_ngon_feasible(n, q):
        raise TriangleConstructionError(
            f"(n, q)=({n}, {q}) does not satisfy the hyperbolic condition (n-2)(q-2) > 4"
        )
    alpha = TAU / q
    rho = solve_hyperbolic_vertex_radius(n, alpha)
    vertices = regular_vertices(n, rho, rotation)
    interior = _interior_point(vertices)

    edges: List[OrientedGeodesic] = []
    for index, current in enumerate(vertices):
        following = vertices[(index + 1) % n]
        edges.append(orient_geodesic_toward(geodesic_through_points(current, following), interior))

    logger.debug("Regular {%d,%d} n-gon: rho=%.12g", n, q, rho)
    return HyperbolicRegularNgon(
        n=n,
        q=q,
        rho=rho,
        alpha=alpha,
        edge_length=edge_length_from_rho(n, rho),
        vertices=vertices,
        geodesics=tuple(edges),
    )


__all__ = [
    "HyperbolicRegularNgon",
    "build_hyperbolic_regular_ngon",
    "edge_length_from_alpha",
    "edge_length_from_rho",
    "is_hyperbolic_ngon_feasible",
    "regular_vertices",
    "solve_hyperbolic_vertex_radius",
]
