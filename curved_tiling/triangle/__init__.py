"""Fundamental triangles, parameter snapping and reflection-group tilings."""

from .angles import angle_between_directions, angle_between_geodesics_at
from .euclidean import build_euclidean_triangle
from .group import (
    Aabb,
    TilingResult,
    TilingStats,
    TriangleFace,
    barycenter_key,
    expand_euclidean_triangle_group,
    expand_hyperbolic_triangle_group,
    expand_triangle_group,
    faces_as_array,
)
from .hyperbolic import build_hyperbolic_triangle, hyperbolic_sum
from .params import ParamsValidation, normalize_depth, validate_triangle_params
from .snap import (
    HYPERBOLIC_THRESHOLD,
    TriangleParams,
    snap_parameter_to_pi_over_n,
    snap_triangle_params,
)
from .third_mirror import (
    ThirdMirrorCircle,
    ThirdMirrorSolution,
    angle_at_second_mirror,
    circle_from_parameter,
    solve_third_mirror,
)
from .tiling import build_tiling

__all__ = [
    "Aabb",
    "HYPERBOLIC_THRESHOLD",
    "ParamsValidation",
    "ThirdMirrorCircle",
    "ThirdMirrorSolution",
    "TilingResult",
    "TilingStats",
    "TriangleFace",
    "TriangleParams",
    "angle_at_second_mirror",
    "angle_between_directions",
    "angle_between_geodesics_at",
    "barycenter_key",
    "build_euclidean_triangle",
    "build_hyperbolic_triangle",
    "build_tiling",
    "circle_from_parameter",
    "expand_euclidean_triangle_group",
    "expand_hyperbolic_triangle_group",
    "expand_triangle_group",
    "faces_as_array",
    "hyperbolic_sum",
    "normalize_depth",
    "snap_parameter_to_pi_over_n",
    "snap_triangle_params",
    "solve_third_mirror",
    "validate_triangle_params",
]
