import math

import pytest

from curved_tiling import SnapConfig, TriangleParams, snap_parameter_to_pi_over_n, snap_triangle_params
from curved_tiling.triangle import HYPERBOLIC_THRESHOLD, normalize_depth, validate_triangle_params


def _sum(params):
    return 1.0 / params.p + 1.0 / params.q + 1.0 / params.r


@pytest.mark.parametrize(
    "value, expected",
    [
        (7.0, 7),
        (7.4, 7),
        (7.6, 8),
        (2.4, 2),
        (1.0, 2),
        (0.0, 2),
        (-3.0, 2),
        (math.nan, 2),
        (math.inf, 2),
        (1000.0, 200),
    ],
)
def test_snap_parameter(value, expected):
    assert snap_parameter_to_pi_over_n(value) == expected


def test_snap_parameter_matches_exhaustive_scan():
    config = SnapConfig(n_min=3, n_max=40)
    for step in range(1, 400):
        value = 2.0 + step * 0.1
        snapped = snap_parameter_to_pi_over_n(value, config)
        clamped = min(max(value, 3), 40)
        best = min(abs(math.pi / n - math.pi / clamped) for n in range(3, 41))
        assert abs(math.pi / snapped - math.pi / clamped) <= best + 1e-12


def test_snap_triangle_params_grows_r_first():
    assert snap_triangle_params((2, 3, 6)) == TriangleParams(2, 3, 7)
    assert snap_triangle_params((3, 3, 3)) == TriangleParams(3, 3, 4)
    assert snap_triangle_params({"p": 2.2, "q": 3.1, "r": 6.9}) == TriangleParams(2, 3, 7)


def test_snap_triangle_params_moves_past_saturated_r():
    assert snap_triangle_params((2, 2, 2)) == TriangleParams(3, 2, 200)


def test_locked_r_adjusts_smallest_free_value():
    assert snap_triangle_params((2, 3, 6), locked={"r": True}) == TriangleParams(3, 3, 6)
    assert snap_triangle_params((2, 3, 6), locked={"p": True, "q": True}) == TriangleParams(2, 3, 7)


def test_fully_locked_triple_is_returned_as_snapped():
    assert snap_triangle_params((2, 3, 6), locked={"p": True, "q": True, "r": True}) == (2, 3, 6)


@pytest.mark.parametrize("locked_key", ["p", "q", "r"])
def test_any_free_parameter_reaches_hyperbolic(locked_key):
    for p in range(2, 7):
        for q in range(2, 7):
            for r in range(2, 7):
                snapped = snap_triangle_params((p, q, r), locked={locked_key: True})
                assert _sum(snapped) < HYPERBOLIC_THRESHOLD


def test_validate_triangle_params():
    assert validate_triangle_params({"p": 2, "q": 3, "r": 7}).ok
    result = validate_triangle_params((2, 3, 6))
    assert not result.ok
    assert result.errors == ("1/p + 1/q + 1/r must be < 1",)
    result = validate_triangle_params({"p": 1, "q": 3.5, "r": 7.0})
    assert result.errors == ("p must be an integer >= 2", "q must be an integer >= 2")
    assert not validate_triangle_params({"p": 2, "q": 3}).ok


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (2.4, 2), (-3.0, 0), (12.0, 10), (math.nan, 0), (math.inf, 0)],
)
def test_normalize_depth(value, expected):
    assert normalize_depth(value) == expected
