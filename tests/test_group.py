import math

import numpy as np
import pytest

from curved_tiling import (
    GeometryError,
    build_euclidean_triangle,
    build_hyperbolic_triangle,
    build_tiling,
    expand_euclidean_triangle_group,
    expand_hyperbolic_triangle_group,
    expand_triangle_group,
    faces_as_array,
)
from curved_tiling.primitives import reflect_across_half_plane
from curved_tiling.triangle import barycenter_key


def _ids(result):
    return [face.id for face in result.faces]


@pytest.fixture(scope="module")
def hyperbolic_237():
    return build_hyperbolic_triangle(2, 3, 7)


def test_depth_zero_returns_only_the_base(hyperbolic_237):
    result = expand_hyperbolic_triangle_group(hyperbolic_237, 0)
    assert result.stats.total == 1
    (face,) = result.faces
    assert face.word == ""
    assert face.verts == tuple(hyperbolic_237.vertices)
    assert face.id == "|" + barycenter_key(face.verts)


def test_depth_one_adds_one_face_per_mirror(hyperbolic_237):
    result = expand_hyperbolic_triangle_group(hyperbolic_237, 1)
    assert [face.word for face in result.faces] == ["", "1", "2", "3"]
    assert result.stats.duplicates == 0


def test_expansion_is_deterministic(hyperbolic_237):
    first = expand_hyperbolic_triangle_group(hyperbolic_237, 2)
    second = expand_hyperbolic_triangle_group(hyperbolic_237, 2)
    assert _ids(first) == _ids(second)
    assert len(set(_ids(first))) == len(first.faces)


def test_faces_are_sorted_by_word_length_then_word(hyperbolic_237):
    result = expand_hyperbolic_triangle_group(hyperbolic_237, 3)
    keys = [(len(face.word), face.word, face.id) for face in result.faces]
    assert keys == sorted(keys)
    assert set("".join(face.word for face in result.faces)) <= {"1", "2", "3"}


def test_face_count_is_non_decreasing_in_depth(hyperbolic_237):
    counts = [expand_hyperbolic_triangle_group(hyperbolic_237, depth).stats.total for depth in range(5)]
    assert counts == sorted(counts)
    assert counts[-1] > counts[1]


def test_reflecting_back_is_counted_as_a_duplicate(hyperbolic_237):
    result = expand_hyperbolic_triangle_group(hyperbolic_237, 2)
    assert result.stats.duplicates >= 3
    assert result.stats.depth == 2


def test_hyperbolic_faces_stay_inside_the_disk(hyperbolic_237):
    result = expand_hyperbolic_triangle_group(hyperbolic_237, 4)
    verts = faces_as_array(result.faces)
    assert verts.shape == (result.stats.total, 3, 2)
    assert np.all(np.hypot(verts[..., 0], verts[..., 1]) < 1.0)


def test_aabb_bounds_vertices(hyperbolic_237):
    for face in expand_hyperbolic_triangle_group(hyperbolic_237, 2).faces:
        xs = [v[0] for v in face.verts]
        ys = [v[1] for v in face.verts]
        assert face.aabb.min == (min(xs), min(ys))
        assert face.aabb.max == (max(xs), max(ys))


def test_max_faces_stops_expansion(hyperbolic_237):
    result = expand_hyperbolic_triangle_group(hyperbolic_237, 6, max_faces=5)
    assert result.stats.total == 5
    assert len(result.faces) == 5


def test_invalid_arguments_raise(hyperbolic_237):
    with pytest.raises(GeometryError, match="non-negative"):
        expand_hyperbolic_triangle_group(hyperbolic_237, -1)
    with pytest.raises(GeometryError):
        expand_hyperbolic_triangle_group(hyperbolic_237, 1, max_faces=0)


def test_euclidean_expansion_tiles_without_overlap():
    base = build_euclidean_triangle(3, 3, 3)
    result = expand_euclidean_triangle_group(base, 3)
    assert result.faces[0].word == ""
    centers = {tuple(np.round(np.mean(face.verts, axis=0), 9)) for face in result.faces}
    assert len(centers) == result.stats.total
    area = 0.5 * math.sqrt(3) / 2
    for face in result.faces:
        (ax, ay), (bx, by), (cx, cy) = face.verts
        assert abs((bx - ax) * (cy - ay) - (by - ay) * (cx - ax)) / 2 == pytest.approx(area)


def test_generic_expansion_accepts_custom_reflector():
    base = build_euclidean_triangle(2, 4, 4)
    generic = expand_triangle_group(base, 2, reflect_across_half_plane)
    wrapped = expand_euclidean_triangle_group(base, 2)
    assert _ids(generic) == _ids(wrapped)


def test_quantised_key_rounds_half_up():
    verts = ((2.5, -2.5), (2.5, -2.5), (2.5, -2.5))
    assert barycenter_key(verts, quantum=1.0) == "3:-2"


def test_build_tiling_returns_base_and_faces():
    base, result = build_tiling(2, 3, 7, 2)
    assert base.angles[2] == pytest.approx(math.pi / 7)
    assert result.stats.total == len(result.faces)
    assert result.faces[0].verts == tuple(base.vertices)
