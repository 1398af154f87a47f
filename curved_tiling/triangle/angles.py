"""Euclidean angle between two Poincare-disk geodesics."""

from __future__ import annotations

import math
from typing import Optional

from ..numeric import clamp, dot2, unit2
from ..types import CircleGeodesic, Geodesic, GeometryError, Vec2


def _near_intersection(direction: Vec2, circle: CircleGeodesic) -> Vec2:
    # point s*u on the diameter closest to the origin with |s*u - c| = r
    u = direction
    cdotu = dot2(circle.center, u)
    cc = dot2(circle.center, circle.center)
    disc = cdotu * cdotu - (cc - circle.radius * circle.radius)
    s = cdotu - math.sqrt(max(0.0, disc))
    return s * u[0], s * u[1]


def _direction_at(geodesic: Geodesic, point: Vec2) -> Vec2:
    if geodesic.kind == "diameter":
        return geodesic.dir
    # tangent of the circle: radius vector rotated clockwise
    return point[1] - geodesic.center[1], -(point[0] - geodesic.center[0])


def angle_between_directions(u: Vec2, v: Vec2) -> float:
    """Unsigned angle in ``[0, pi/2]`` between two undirected lines."""

    return math.acos(clamp(abs(dot2(unit2(u), unit2(v))), 0.0, 1.0))


def angle_between_geodesics_at(a: Geodesic, b: Geodesic, at: Optional[Vec2] = None) -> float:
    """Angle between ``a`` and ``b`` measured at ``at``.

    Without ``at`` the evaluation point is the origin for two diameters, the
    intersection nearest the origin for a diameter and a circle, and the
    midpoint of the centres for two circles.
    """

    if a.kind == "halfPlane" or b.kind == "halfPlane":
        raise GeometryError("Half-plane geodesics are not supported in hyperbolic angle evaluation")
    if at is not None:
        point = at
    elif a.kind == "diameter" and b.kind == "diameter":
        point = (0.0, 0.0)
    elif a.kind == "diameter" and b.kind == "circle":
        point = _near_intersection(a.dir, b)
    elif a.kind == "circle" and b.kind == "diameter":
        point = _near_intersection(b.dir, a)
    elif a.kind == "circle" and b.kind == "circle":
        point = (0.5 * (a.center[0] + b.center[0]), 0.5 * (a.center[1] + b.center[1]))
    else:
        raise GeometryError(f"unsupported geodesic pair {a.kind!r}/{b.kind!r}")
    return angle_between_directions(_direction_at(a, point), _direction_at(b, point))


__all__ = ["angle_between_directions", "angle_between_geodesics_at"]
