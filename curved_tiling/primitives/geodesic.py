"""Poincare-disk geodesics and their oriented boundary form."""

from __future__ import annotations

import math

from ..config import DEFAULT_TOLERANCE, Tolerance
from ..numeric import cross2, distance, dot2, is_finite2, norm2, rotate90_cw, unit2
from ..types import (
    CircleGeodesic,
    DegenerateGeometryError,
    DiameterGeodesic,
    Geodesic,
    GeometryError,
    OrientedCircle,
    OrientedGeodesic,
    OrientedLine,
    Vec2,
)


def _solve_center(a: Vec2, b: Vec2, rhs_a: float, rhs_b: float, tol: Tolerance) -> Vec2:
    # a.c = rhs_a, b.c = rhs_b
    det = cross2(a, b)
    if abs(det) <= tol.value(1.0):
        raise DegenerateGeometryError("Degenerate boundary pair: nearly equal or opposite")
    cx = (rhs_a * b[1] - rhs_b * a[1]) / det
    cy = (rhs_b * a[0] - rhs_a * b[0]) / det
    return cx, cy


def geodesic_from_boundary(a: Vec2, b: Vec2, tol: Tolerance = DEFAULT_TOLERANCE) -> Geodesic:
    """Geodesic joining two ideal points ``a`` and ``b`` on the unit circle.

    Opposite points give a diameter; otherwise the circle orthogonal to the
    unit circle through both points, whose centre satisfies
    ``a.c = b.c = 1`` and ``|c|^2 = 1 + r^2``.
    """

    if not (is_finite2(a) and is_finite2(b)):
        raise DegenerateGeometryError("Non-finite boundary point")
    eps = tol.value(1.0)
    if distance(a, b) <= eps:
        raise DegenerateGeometryError("Degenerate boundary pair: identical points")
    if math.hypot(a[0] + b[0], a[1] + b[1]) <= eps:
        return DiameterGeodesic(unit2(a))
    center = _solve_center(a, b, 1.0, 1.0, tol)
    return CircleGeodesic(center, distance(a, center))


def geodesic_through_points(p: Vec2, q: Vec2, tol: Tolerance = DEFAULT_TOLERANCE) -> Geodesic:
    """Geodesic through two interior points of the disk."""

    if not (is_finite2(p) and is_finite2(q)):
        raise DegenerateGeometryError("Non-finite geodesic point")
    if distance(p, q) <= tol.value(1.0):
        raise DegenerateGeometryError("Geodesic points must be distinct")
    if abs(cross2(p, q)) <= tol.value(1.0):
        direction = q if norm2(q) >= norm2(p) else p
        return DiameterGeodesic(unit2(direction))
    rhs_p = 0.5 * (1.0 + dot2(p, p))
    rhs_q = 0.5 * (1.0 + dot2(q, q))
    center = _solve_center(p, q, rhs_p, rhs_q, tol)
    radius = math.sqrt(max(0.0, dot2(center, center) - 1.0))
    return CircleGeodesic(center, radius)


def normalize_oriented_geodesic(boundary: OrientedGeodesic) -> OrientedGeodesic:
    if boundary.kind == "circle":
        orientation = 1 if boundary.orientation >= 0 else -1
        return OrientedCircle(
            (float(boundary.center[0]), float(boundary.center[1])),
            max(float(boundary.radius), 0.0),
            orientation,
        )
    if boundary.kind == "line":
        length = math.hypot(boundary.normal[0], boundary.normal[1]) or 1.0
        inv = 1.0 / length
        return OrientedLine(
            (float(boundary.anchor[0]), float(boundary.anchor[1])),
            (boundary.normal[0] * inv, boundary.normal[1] * inv),
        )
    raise GeometryError(f"unknown oriented geodesic kind {boundary.kind!r}")


def oriented_geodesic_signed_distance(boundary: OrientedGeodesic, point: Vec2) -> float:
    unit = normalize_oriented_geodesic(boundary)
    if unit.kind == "circle":
        return unit.orientation * (distance(point, unit.center) - unit.radius)
    dx = point[0] - unit.anchor[0]
    dy = point[1] - unit.anchor[1]
    return unit.normal[0] * dx + unit.normal[1] * dy


def oriented_geodesic_to_geodesic(boundary: OrientedGeodesic) -> Geodesic:
    unit = normalize_oriented_geodesic(boundary)
    if unit.kind == "circle":
        return CircleGeodesic(unit.center, unit.radius)
    return DiameterGeodesic(rotate90_cw(unit.normal))


def orient_geodesic_toward(geodesic: Geodesic, interior: Vec2) -> OrientedGeodesic:
    """Oriented boundary of ``geodesic`` whose positive side contains ``interior``."""

    if geodesic.kind == "circle":
        inside = distance(interior, geodesic.center) <= geodesic.radius
        return OrientedCircle(geodesic.center, geodesic.radius, -1 if inside else 1)
    if geodesic.kind == "diameter":
        normal = unit2((-geodesic.dir[1], geodesic.dir[0]))
        if dot2(normal, interior) < 0.0:
            normal = (-normal[0], -normal[1])
        return OrientedLine((0.0, 0.0), normal)
    if geodesic.kind == "halfPlane":
        normal = unit2(geodesic.normal)
        anchor = (-geodesic.offset * normal[0], -geodesic.offset * normal[1])
        if dot2(normal, (interior[0] - anchor[0], interior[1] - anchor[1])) < 0.0:
            normal = (-normal[0], -normal[1])
        return OrientedLine(anchor, normal)
    raise GeometryError(f"unknown geodesic kind {geodesic.kind!r}")


__all__ = [
    "geodesic_from_boundary",
    "geodesic_through_points",
    "normalize_oriented_geodesic",
    "orient_geodesic_toward",
    "oriented_geodesic_signed_distance",
    "oriented_geodesic_to_geodesic",
]
