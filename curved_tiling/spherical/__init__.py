"""Spherical primitives: unit vectors and polyhedral fundamental triangles."""

from .polyhedra import (
    regular_icosahedron_triangle,
    regular_octahedron_triangle,
    regular_tetrahedron_triangle,
    regular_tetrahedron_triangles,
    regular_tetrahedron_vertices,
    right_dihedral_triangle,
)
from .vectors import (
    SphericalTriangle,
    cross_vec3,
    dot_vec3,
    is_right_handed_triangle,
    is_unit_vec3,
    make_spherical_triangle,
    normalize_vec3,
)

__all__ = [
    "SphericalTriangle",
    "cross_vec3",
    "dot_vec3",
    "is_right_handed_triangle",
    "is_unit_vec3",
    "make_spherical_triangle",
    "normalize_vec3",
    "regular_icosahedron_triangle",
    "regular_octahedron_triangle",
    "regular_tetrahedron_triangle",
    "regular_tetrahedron_triangles",
    "regular_tetrahedron_vertices",
    "right_dihedral_triangle",
]
