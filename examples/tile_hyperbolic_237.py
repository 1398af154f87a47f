"""Example pipeline: build the (2, 3, 7) triangle and tile the Poincare disk."""

from curved_tiling import build_hyperbolic_triangle, expand_hyperbolic_triangle_group, faces_as_array


def main() -> None:
    base = build_hyperbolic_triangle(2, 3, 7)
    print("Mirrors:")
    for i, mirror in enumerate(base.mirrors):
        print(f"  [{i}] {mirror}")
    print("Vertices:")
    for i, (x, y) in enumerate(base.vertices):
        print(f"  v{i}: ({x:.6f}, {y:.6f})")
    if base.warnings:
        print(f"Warnings: {list(base.warnings)}")

    result = expand_hyperbolic_triangle_group(base, 5, max_faces=2000)
    print(f"Faces: {result.stats.total} (duplicates rejected: {result.stats.duplicates})")
    verts = faces_as_array(result.faces)
    radii = (verts ** 2).sum(axis=-1) ** 0.5
    print(f"Outermost vertex radius: {radii.max():.6f}")
    for face in result.faces[:8]:
        print(f"  {face.word or '(root)'}: {face.id}")


if __name__ == "__main__":
    main()
