"""Example pipeline: snap slider values, then tile Euclidean and spherical cases."""

from curved_tiling import (
    build_euclidean_triangle,
    build_hyperbolic_regular_ngon,
    expand_euclidean_triangle_group,
    regular_icosahedron_triangle,
    snap_triangle_params,
    validate_triangle_params,
)

SLIDER_VALUES = (2.3, 2.9, 5.6)


def main() -> None:
    params = snap_triangle_params(SLIDER_VALUES)
    print(f"Snapped {SLIDER_VALUES} -> {tuple(params)}")
    print(f"  valid: {validate_triangle_params(params._asdict()).ok}")

    tri = build_euclidean_triangle(2, 3, 6)
    tiling = expand_euclidean_triangle_group(tri, 4)
    print(f"Euclidean (2,3,6): {tiling.stats.total} faces to depth {tiling.stats.depth}")

    ngon = build_hyperbolic_regular_ngon(4, 5)
    print(f"{{4,5}} square: rho={ngon.rho:.9f} edge={ngon.edge_length:.9f}")

    face = regular_icosahedron_triangle(0)
    print("Icosahedron face 0:")
    for x, y, z in face.vertices:
        print(f"  ({x:+.6f}, {y:+.6f}, {z:+.6f})")


if __name__ == "__main__":
    main()
