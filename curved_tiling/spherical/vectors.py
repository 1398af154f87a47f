"""Unit-sphere vectors and spherical triangles."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..types import Vec3

_DEFAULT_AXIS: Vec3 = (1.0, 0.0, 0.0)


@dataclass(frozen=True)
class SphericalTriangle:
    """Three unit vectors ordered so that ``cross(v0, v1) . v2 >= 0``."""

    vertices: Tuple[Vec3, Vec3, Vec3]


def normalize_vec3(v: Sequence[float]) -> Vec3:
    x, y, z = (float(c) for c in v)
    length = math.sqrt(x * x + y * y + z * z)
    if not (length > 0.0) or not math.isfinite(length):
        return _DEFAULT_AXIS
    return x / length, y / length, z / length


def dot_vec3(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross_vec3(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def is_unit_vec3(v: Vec3, tolerance: float = 1e-12) -> bool:
    return abs(math.sqrt(dot_vec3(v, v)) - 1.0) <= tolerance


def is_right_handed_triangle(triangle: SphericalTriangle, tolerance: float = 1e-12) -> bool:
    v0, v1, v2 = triangle.vertices
    return dot_vec3(normalize_vec3(cross_vec3(v0, v1)), v2) >= -tolerance


def make_spherical_triangle(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> SphericalTriangle:
    """Normalise the vertices and swap the last two if needed for right-handedness."""

    triangle = SphericalTriangle((normalize_vec3(a), normalize_vec3(b), normalize_vec3(c)))
    if is_right_handed_triangle(triangle):
        return triangle
    first, second, third = triangle.vertices
    return SphericalTriangle((first, third, second))


__all__ = [
    "SphericalTriangle",
    "cross_vec3",
    "dot_vec3",
    "is_right_handed_triangle",
    "is_unit_vec3",
    "make_spherical_triangle",
    "normalize_vec3",
]
