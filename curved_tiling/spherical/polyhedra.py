"""Fundamental spherical triangles of the regular polyhedra."""

from __future__ import annotations

import logging
import math
from typing import Tuple

import numpy as np

from ..types import Vec3
from .vectors import SphericalTriangle, make_spherical_triangle

logger = logging.getLogger(__name__)

PHI = (1.0 + math.sqrt(5.0)) / 2.0


def _unit_rows(rows) -> np.ndarray:
    table = np.asarray(rows, dtype=float)
    return table / np.linalg.norm(table, axis=1, keepdims=True)


TETRAHEDRON_VERTICES = _unit_rows(
    [
        (1.0, 1.0, 1.0),
        (1.0, -1.0, -1.0),
        (-1.0, 1.0, -1.0),
        (-1.0, -1.0, 1.0),
    ]
)
TETRAHEDRON_FACES = ((0, 1, 2), (0, 3, 1), (0, 2, 3), (1, 3, 2))

OCTAHEDRON_VERTICES = _unit_rows(
    [
        (1.0, 0.0, 0.0),
        (-1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0),
        (0.0, -1.0, 0.0),
        (0.0, 0.0, 1.0),
        (0.0, 0.0, -1.0),
    ]
)
OCTAHEDRON_FACES = (
    (0, 2, 4),
    (2, 1, 4),
    (1, 3, 4),
    (3, 0, 4),
    (0, 5, 2),
    (2, 5, 1),
    (1, 5, 3),
    (3, 5, 0),
)

ICOSAHEDRON_VERTICES = _unit_rows(
    [
        (-1.0, PHI, 0.0),
        (1.0, PHI, 0.0),
        (-1.0, -PHI, 0.0),
        (1.0, -PHI, 0.0),
        (0.0, -1.0, PHI),
        (0.0, 1.0, PHI),
        (0.0, -1.0, -PHI),
        (0.0, 1.0, -PHI),
        (PHI, 0.0, -1.0),
        (PHI, 0.0, 1.0),
        (-PHI, 0.0, -1.0),
        (-PHI, 0.0, 1.0),
    ]
)
ICOSAHEDRON_FACES = (
    (0, 11, 5),
    (0, 5, 1),
    (0, 1, 7),
    (0, 7, 10),
    (0, 10, 11),
    (1, 5, 9),
    (5, 11, 4),
    (11, 10, 2),
    (10, 7, 6),
    (7, 1, 8),
    (3, 9, 4),
    (3, 4, 2),
    (3, 2, 6),
    (3, 6, 8),
    (3, 8, 9),
    (4, 9, 5),
    (2, 4, 11),
    (6, 2, 10),
    (8, 6, 7),
    (9, 8, 1),
)


def _face_triangle(vertices: np.ndarray, faces, face: int, name: str) -> SphericalTriangle:
    if not isinstance(face, int) or not 0 <= face < len(faces):
        logger.debug("%s face %r out of range; using face 0", name, face)
        face = 0
    a, b, c = (vertices[index] for index in faces[face])
    return make_spherical_triangle(a, b, c)


def regular_tetrahedron_vertices() -> Tuple[Vec3, Vec3, Vec3, Vec3]:
    return tuple(tuple(float(c) for c in row) for row in TETRAHEDRON_VERTICES)


def regular_tetrahedron_triangle(face: int = 0) -> SphericalTriangle:
    return _face_triangle(TETRAHEDRON_VERTICES, TETRAHEDRON_FACES, face, "tetrahedron")


def regular_tetrahedron_triangles() -> Tuple[SphericalTriangle, ...]:
    return tuple(regular_tetrahedron_triangle(face) for face in range(len(TETRAHEDRON_FACES)))


def regular_octahedron_triangle(face: int = 0) -> SphericalTriangle:
    return _face_triangle(OCTAHEDRON_VERTICES, OCTAHEDRON_FACES, face, "octahedron")


def regular_icosahedron_triangle(face: int = 0) -> SphericalTriangle:
    return _face_triangle(ICOSAHEDRON_VERTICES, ICOSAHEDRON_FACES, face, "icosahedron")


def right_dihedral_triangle(n: float) -> SphericalTriangle:
    """Triangle with vertices at the north pole, ``x`` and longitude ``pi/n``.

    ``n`` is floored and clamped to at least 2.
    """

    order = max(2, int(math.floor(n))) if math.isfinite(n) else 2
    longitude = math.pi / order
    return make_spherical_triangle(
        (0.0, 0.0, 1.0),
        (1.0, 0.0, 0.0),
        (math.cos(longitude), math.sin(longitude), 0.0),
    )


__all__ = [
    "ICOSAHEDRON_FACES",
    "ICOSAHEDRON_VERTICES",
    "OCTAHEDRON_FACES",
    "OCTAHEDRON_VERTICES",
    "PHI",
    "TETRAHEDRON_FACES",
    "TETRAHEDRON_VERTICES",
    "regular_icosahedron_triangle",
    "regular_octahedron_triangle",
    "regular_tetrahedron_triangle",
    "regular_tetrahedron_triangles",
    "regular_tetrahedron_vertices",
    "right_dihedral_triangle",
]
