import math

import pytest

from curved_tiling import Circle, circle_circle_intersection


def test_two_points_sorted_by_x_then_y():
    result = circle_circle_intersection(Circle((0.0, 0.0), 1.0), Circle((1.0, 0.0), 1.0))
    assert result.kind == "two"
    (x1, y1), (x2, y2) = result.points
    assert (x1, x2) == pytest.approx((0.5, 0.5))
    assert y1 == pytest.approx(-math.sqrt(0.75))
    assert y2 == pytest.approx(math.sqrt(0.75))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Circle((0.0, 0.0), 1.0), Circle((2.0, 0.0), 1.0), (1.0, 0.0)),
        (Circle((0.0, 0.0), 2.0), Circle((1.0, 0.0), 1.0), (2.0, 0.0)),
    ],
)
def test_external_and_internal_tangency(a, b, expected):
    result = circle_circle_intersection(a, b)
    assert result.kind == "tangent"
    assert result.points[0] == pytest.approx(expected)


@pytest.mark.parametrize(
    "a, b, kind",
    [
        (Circle((0.0, 0.0), 1.0), Circle((3.0, 0.0), 1.0), "none"),
        (Circle((0.0, 0.0), 3.0), Circle((0.5, 0.0), 1.0), "none"),
        (Circle((1.0, 1.0), 1.0), Circle((1.0, 1.0), 2.0), "concentric"),
        (Circle((1.0, 1.0), 2.0), Circle((1.0, 1.0), 2.0), "coincident"),
        (Circle((0.0, 0.0), 0.0), Circle((1.0, 0.0), 1.0), "none"),
        (Circle((math.nan, 0.0), 1.0), Circle((1.0, 0.0), 1.0), "none"),
        (Circle((0.0, 0.0), math.inf), Circle((1.0, 0.0), 1.0), "none"),
    ],
)
def test_classification(a, b, kind):
    result = circle_circle_intersection(a, b)
    assert result.kind == kind
    assert result.points == ()


def test_negative_radius_uses_magnitude():
    result = circle_circle_intersection(Circle((0.0, 0.0), -1.0), Circle((1.0, 0.0), 1.0))
    assert result.kind == "two"


def test_points_lie_on_both_circles():
    a = Circle((0.3, -0.2), 1.7)
    b = Circle((1.9, 0.8), 1.1)
    result = circle_circle_intersection(a, b)
    assert result.kind == "two"
    for point in result.points:
        assert math.dist(point, a.center) == pytest.approx(a.radius, abs=1e-12)
        assert math.dist(point, b.center) == pytest.approx(b.radius, abs=1e-12)
