from .config import (
    DEFAULT_SNAP_CONFIG,
    DEFAULT_THIRD_MIRROR_CONFIG,
    DEFAULT_TILING_OPTIONS,
    DEFAULT_TOLERANCE,
    SnapConfig,
    ThirdMirrorConfig,
    TilingOptions,
    Tolerance,
)
from .types import (
    Circle,
    CircleGeodesic,
    DegenerateGeometryError,
    DiameterGeodesic,
    EuclideanTriangle,
    Geodesic,
    GeometryError,
    HalfPlane,
    HalfPlaneGeodesic,
    HyperbolicTriangle,
    IntersectResult,
    OrientedCircle,
    OrientedGeodesic,
    OrientedLine,
    TriangleConstructionError,
    TrianglePrimitiveSet,
)
from .primitives import (
    circle_circle_intersection,
    evaluate_half_plane,
    geodesic_from_boundary,
    geodesic_through_points,
    half_plane_from_points,
    normalize_half_plane,
    orient_geodesic_toward,
    oriented_geodesic_signed_distance,
    points_from_half_plane,
    reflect_across_half_plane,
    snap_angle,
)
from .transforms import invert_in_circle, invert_line_in_circle, invert_unit, reflect_across_geodesic
from .triangle import (
    TilingResult,
    TriangleFace,
    TriangleParams,
    build_euclidean_triangle,
    build_hyperbolic_triangle,
    build_tiling,
    expand_euclidean_triangle_group,
    expand_hyperbolic_triangle_group,
    expand_triangle_group,
    faces_as_array,
    normalize_depth,
    snap_parameter_to_pi_over_n,
    snap_triangle_params,
    solve_third_mirror,
    validate_triangle_params,
)
from .polygon import HyperbolicRegularNgon, build_hyperbolic_regular_ngon, is_hyperbolic_ngon_feasible
from .spherical import (
    SphericalTriangle,
    is_right_handed_triangle,
    regular_icosahedron_triangle,
    regular_octahedron_triangle,
    regular_tetrahedron_triangle,
    right_dihedral_triangle,
)

__all__ = [
    'DEFAULT_SNAP_CONFIG',
    'DEFAULT_THIRD_MIRROR_CONFIG',
    'DEFAULT_TILING_OPTIONS',
    'DEFAULT_TOLERANCE',
    'SnapConfig',
    'ThirdMirrorConfig',
    'TilingOptions',
    'Tolerance',
    'Circle',
    'CircleGeodesic',
    'DegenerateGeometryError',
    'DiameterGeodesic',
    'EuclideanTriangle',
    'Geodesic',
    'GeometryError',
    'HalfPlane',
    'HalfPlaneGeodesic',
    'HyperbolicTriangle',
    'IntersectResult',
    'OrientedCircle',
    'OrientedGeodesic',
    'OrientedLine',
    'TriangleConstructionError',
    'TrianglePrimitiveSet',
    'circle_circle_intersection',
    'evaluate_half_plane',
    'geodesic_from_boundary',
    'geodesic_through_points',
    'half_plane_from_points',
    'normalize_half_plane',
    'orient_geodesic_toward',
    'oriented_geodesic_signed_distance',
    'points_from_half_plane',
    'reflect_across_half_plane',
    'snap_angle',
    'invert_in_circle',
    'invert_line_in_circle',
    'invert_unit',
    'reflect_across_geodesic',
    'TilingResult',
    'TriangleFace',
    'TriangleParams',
    'build_euclidean_triangle',
    'build_hyperbolic_triangle',
    'build_tiling',
    'expand_euclidean_triangle_group',
    'expand_hyperbolic_triangle_group',
    'expand_triangle_group',
    'faces_as_array',
    'normalize_depth',
    'snap_parameter_to_pi_over_n',
    'snap_triangle_params',
    'solve_third_mirror',
    'validate_triangle_params',
    'HyperbolicRegularNgon',
    'build_hyperbolic_regular_ngon',
    'is_hyperbolic_ngon_feasible',
    'SphericalTriangle',
    'is_right_handed_triangle',
    'regular_icosahedron_triangle',
    'regular_octahedron_triangle',
    'regular_tetrahedron_triangle',
    'right_dihedral_triangle',
]
