import math

import numpy as np
import pytest

from curved_tiling import DegenerateGeometryError, HalfPlane
from curved_tiling.primitives import (
    ControlPointAssignment,
    control_point_table,
    control_points_from_half_planes,
    evaluate_half_plane,
    flip_half_plane,
    half_plane_from_normal_and_offset,
    half_plane_from_points,
    half_plane_offset,
    half_plane_to_geodesic,
    half_planes_from_controls,
    normalize_half_plane,
    orient_half_plane_toward_origin,
    points_from_half_plane,
    reflect_across_half_plane,
    regular_polygon_half_planes,
)
from curved_tiling.types import GeometryError


def _random_planes(count, seed=7):
    rng = np.random.default_rng(seed)
    planes = []
    for _ in range(count):
        angle = rng.uniform(0.0, 2.0 * math.pi)
        anchor = tuple(float(v) for v in rng.uniform(-3.0, 3.0, size=2))
        planes.append(HalfPlane(anchor, (math.cos(angle), math.sin(angle))))
    return planes


def test_normalize_rejects_zero_normal():
    with pytest.raises(DegenerateGeometryError):
        normalize_half_plane(HalfPlane((0.0, 0.0), (0.0, 1e-13)))


def test_normalize_scales_normal():
    plane = normalize_half_plane(HalfPlane((1.0, 2.0), (3.0, 4.0)))
    assert plane.normal == pytest.approx((0.6, 0.8))
    assert plane.anchor == (1.0, 2.0)


def test_offset_and_geodesic_form():
    plane = HalfPlane((0.0, 2.0), (0.0, 1.0))
    assert half_plane_offset(plane) == pytest.approx(-2.0)
    geodesic = half_plane_to_geodesic(plane)
    assert geodesic.kind == "halfPlane"
    assert geodesic.offset == pytest.approx(-2.0)
    rebuilt = half_plane_from_normal_and_offset(geodesic.normal, geodesic.offset)
    assert rebuilt.anchor == pytest.approx((0.0, 2.0))


def test_reflection_is_an_involution():
    rng = np.random.default_rng(11)
    for plane in _random_planes(20):
        reflect = reflect_across_half_plane(plane)
        for point in rng.uniform(-5.0, 5.0, size=(5, 2)):
            p = (float(point[0]), float(point[1]))
            assert reflect(reflect(p)) == pytest.approx(p, abs=1e-9)
            assert evaluate_half_plane(plane, reflect(p)) == pytest.approx(
                -evaluate_half_plane(plane, p), abs=1e-9
            )


def test_flipped_plane_reflects_identically():
    for plane in _random_planes(10, seed=3):
        a = reflect_across_half_plane(plane)
        b = reflect_across_half_plane(flip_half_plane(plane))
        assert a((0.4, -1.3)) == pytest.approx(b((0.4, -1.3)), abs=1e-12)


def test_orient_toward_origin():
    plane = orient_half_plane_toward_origin(HalfPlane((0.0, 1.0), (0.0, 1.0)))
    assert plane.normal == pytest.approx((0.0, -1.0))
    assert evaluate_half_plane(plane, (0.0, 0.0)) > 0.0


def test_half_plane_from_points_normal_points_right():
    plane = half_plane_from_points((0.0, 0.0), (1.0, 0.0))
    assert plane.normal == pytest.approx((0.0, -1.0))
    with pytest.raises(DegenerateGeometryError):
        half_plane_from_points((1.0, 1.0), (1.0, 1.0))


def test_control_points_round_trip():
    for plane in _random_planes(25, seed=19):
        a, b = points_from_half_plane(plane, 2.5)
        assert math.dist(a, b) == pytest.approx(2.5, abs=1e-12)
        assert evaluate_half_plane(plane, a) == pytest.approx(0.0, abs=1e-12)
        assert evaluate_half_plane(plane, b) == pytest.approx(0.0, abs=1e-12)
        rebuilt = half_plane_from_points(a, b)
        assert rebuilt.normal == pytest.approx(normalize_half_plane(plane).normal, abs=1e-12)
        assert half_plane_offset(rebuilt) == pytest.approx(half_plane_offset(plane), abs=1e-12)


def test_points_from_half_plane_rejects_zero_spacing():
    with pytest.raises(DegenerateGeometryError):
        points_from_half_plane(HalfPlane((0.0, 0.0), (1.0, 0.0)), 0.0)


def test_control_points_share_assigned_ids():
    planes = [HalfPlane((0.0, 1.0), (0.0, 1.0)), HalfPlane((1.0, 0.0), (1.0, 0.0))]
    assignments = [
        ControlPointAssignment(0, 1, "shared", fixed=True),
        ControlPointAssignment(1, 0, "shared"),
    ]
    controls = control_points_from_half_planes(planes, 1.0, assignments)
    assert controls[0][0].id == "cp-0-0"
    assert controls[1][1].id == "cp-1-1"
    assert controls[0][1] is controls[1][0]
    shared = controls[0][1]
    assert shared.fixed is True
    assert shared.point == pytest.approx((1.0, 0.0))
    assert set(control_point_table(controls)) == {"cp-0-0", "shared", "cp-1-1"}


def test_half_planes_from_controls_reproduce_planes():
    planes = _random_planes(4, seed=23)
    controls = control_points_from_half_planes(planes, 1.5)
    for original, rebuilt in zip(planes, half_planes_from_controls(controls)):
        assert rebuilt.normal == pytest.approx(normalize_half_plane(original).normal, abs=1e-12)


def test_regular_polygon_planes_face_inward():
    planes = regular_polygon_half_planes(4, radius=2.0)
    assert len(planes) == 4
    assert planes[0].anchor == pytest.approx((2.0, 0.0))
    assert planes[0].normal == pytest.approx((-1.0, 0.0))
    for plane in planes:
        assert evaluate_half_plane(plane, (0.0, 0.0)) == pytest.approx(2.0)


@pytest.mark.parametrize("sides", [2, 3.5, True])
def test_regular_polygon_rejects_bad_sides(sides):
    with pytest.raises(GeometryError):
        regular_polygon_half_planes(sides)
