"""Half-plane primitives in anchor + outward-normal form."""

from __future__ import annotations

import math

from ..numeric import dot2
from ..types import DegenerateGeometryError, HalfPlane, HalfPlaneGeodesic, Transform2D, Vec2

_EPS = 1e-12


def normalize_half_plane(plane: HalfPlane) -> HalfPlane:
    """Return ``plane`` with a unit normal.

    Raises :class:`DegenerateGeometryError` for a (near) zero normal.
    """

    nx, ny = plane.normal
    length = math.hypot(nx, ny)
    if not length > _EPS:
        raise DegenerateGeometryError("Half-plane normal must be non-zero")
    anchor = (float(plane.anchor[0]), float(plane.anchor[1]))
    if abs(length - 1.0) <= _EPS:
        return HalfPlane(anchor, (float(nx), float(ny)))
    inv = 1.0 / length
    return HalfPlane(anchor, (nx * inv, ny * inv))


def half_plane_offset(plane: HalfPlane) -> float:
    """Signed offset ``-normal . anchor`` of the normalised plane."""

    unit = normalize_half_plane(plane)
    return -dot2(unit.normal, unit.anchor)


def half_plane_from_normal_and_offset(normal: Vec2, offset: float) -> HalfPlane:
    length = math.hypot(normal[0], normal[1])
    if not length > _EPS:
        raise DegenerateGeometryError("Half-plane normal must be non-zero")
    inv = 1.0 / length
    unit = (normal[0] * inv, normal[1] * inv)
    return HalfPlane((-offset * unit[0], -offset * unit[1]), unit)


def evaluate_half_plane(plane: HalfPlane, point: Vec2) -> float:
    """Signed distance of ``point``; zero on the boundary, positive outward."""

    unit = normalize_half_plane(plane)
    dx = point[0] - unit.anchor[0]
    dy = point[1] - unit.anchor[1]
    return unit.normal[0] * dx + unit.normal[1] * dy


def reflect_across_half_plane(plane: HalfPlane) -> Transform2D:
    unit = normalize_half_plane(plane)
    nx, ny = unit.normal
    ax, ay = unit.anchor

    def reflect(point: Vec2) -> Vec2:
        scale = 2.0 * (nx * (point[0] - ax) + ny * (point[1] - ay))
        return point[0] - scale * nx, point[1] - scale * ny

    return reflect


def half_plane_to_geodesic(plane: HalfPlane) -> HalfPlaneGeodesic:
    unit = normalize_half_plane(plane)
    return HalfPlaneGeodesic(unit.normal, -dot2(unit.normal, unit.anchor))


def flip_half_plane(plane: HalfPlane) -> HalfPlane:
    unit = normalize_half_plane(plane)
    return HalfPlane(unit.anchor, (-unit.normal[0], -unit.normal[1]))


def orient_half_plane_toward_point(plane: HalfPlane, point: Vec2) -> HalfPlane:
    """Flip the normal if needed so that ``point`` evaluates non-negative."""

    unit = normalize_half_plane(plane)
    if evaluate_half_plane(unit, point) >= 0.0:
        return unit
    return flip_half_plane(unit)


def orient_half_plane_toward_origin(plane: HalfPlane) -> HalfPlane:
    return orient_half_plane_toward_point(plane, (0.0, 0.0))


__all__ = [
    "evaluate_half_plane",
    "flip_half_plane",
    "half_plane_from_normal_and_offset",
    "half_plane_offset",
    "half_plane_to_geodesic",
    "normalize_half_plane",
    "orient_half_plane_toward_origin",
    "orient_half_plane_toward_point",
    "reflect_across_half_plane",
]
