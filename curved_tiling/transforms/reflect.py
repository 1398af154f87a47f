"""Reflection across any kind of geodesic mirror."""

from __future__ import annotations

from ..numeric import unit2
from ..primitives.half_plane import half_plane_from_normal_and_offset, reflect_across_half_plane
from ..types import Circle, Geodesic, GeometryError, Transform2D, Vec2
from .inversion import invert_in_circle


def reflect_across_diameter(direction: Vec2) -> Transform2D:
    ux, uy = unit2(direction)

    def reflect(point: Vec2) -> Vec2:
        # (2 u u^T - I) p
        d = ux * point[0] + uy * point[1]
        return 2.0 * d * ux - point[0], 2.0 * d * uy - point[1]

    return reflect


def reflect_across_geodesic(geodesic: Geodesic) -> Transform2D:
    if geodesic.kind == "diameter":
        return reflect_across_diameter(geodesic.dir)
    if geodesic.kind == "halfPlane":
        return reflect_across_half_plane(
            half_plane_from_normal_and_offset(geodesic.normal, geodesic.offset)
        )
    if geodesic.kind == "circle":
        circle = Circle(geodesic.center, geodesic.radius)
        return lambda point: invert_in_circle(point, circle)
    raise GeometryError(f"unknown geodesic kind {geodesic.kind!r}")


__all__ = ["reflect_across_diameter", "reflect_across_geodesic"]
