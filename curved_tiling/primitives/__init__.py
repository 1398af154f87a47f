"""Boundary primitives: circles, half-planes, geodesics and the unit disk."""

from .circle import circle_circle_intersection
from .controls import (
    ControlPoint,
    ControlPointAssignment,
    control_point_table,
    control_points_from_half_planes,
    half_plane_from_points,
    half_planes_from_controls,
    points_from_half_plane,
)
from .geodesic import (
    geodesic_from_boundary,
    geodesic_through_points,
    normalize_oriented_geodesic,
    orient_geodesic_toward,
    oriented_geodesic_signed_distance,
    oriented_geodesic_to_geodesic,
)
from .half_plane import (
    evaluate_half_plane,
    flip_half_plane,
    half_plane_from_normal_and_offset,
    half_plane_offset,
    half_plane_to_geodesic,
    normalize_half_plane,
    orient_half_plane_toward_origin,
    orient_half_plane_toward_point,
    reflect_across_half_plane,
)
from .regular_polygon import regular_polygon_half_planes
from .unit_disk import (
    angle_to_boundary_point,
    boundary_point_to_angle,
    is_on_unit_circle,
    normalize_on_unit_circle,
    snap_angle,
    snap_boundary_point,
)

__all__ = [
    "ControlPoint",
    "ControlPointAssignment",
    "angle_to_boundary_point",
    "boundary_point_to_angle",
    "circle_circle_intersection",
    "control_point_table",
    "control_points_from_half_planes",
    "evaluate_half_plane",
    "flip_half_plane",
    "geodesic_from_boundary",
    "geodesic_through_points",
    "half_plane_from_normal_and_offset",
    "half_plane_from_points",
    "half_plane_offset",
    "half_plane_to_geodesic",
    "half_planes_from_controls",
    "is_on_unit_circle",
    "normalize_half_plane",
    "normalize_on_unit_circle",
    "normalize_oriented_geodesic",
    "orient_geodesic_toward",
    "orient_half_plane_toward_origin",
    "orient_half_plane_toward_point",
    "oriented_geodesic_signed_distance",
    "oriented_geodesic_to_geodesic",
    "points_from_half_plane",
    "reflect_across_half_plane",
    "regular_polygon_half_planes",
    "snap_angle",
    "snap_boundary_point",
]
