import math

import pytest

from curved_tiling.config import Tolerance
from curved_tiling.numeric import (
    TAU,
    clamp,
    eq_tol,
    normalize_angle_0_to_tau,
    normalize_angle_minus_pi_to_pi,
    perp90,
    rotate90_cw,
    safe_sqrt,
    tol_value,
    unit2,
)


def test_tolerance_scales_with_magnitude():
    assert tol_value(0.5) == pytest.approx(2e-12)
    assert tol_value(10.0) == pytest.approx(1e-12 + 1e-11)
    assert eq_tol(1.0, 1.0 + 5e-13, 1.0)
    assert not eq_tol(1.0, 1.0 + 1e-9, 1.0)
    loose = Tolerance(abs=1e-6, rel=0.0)
    assert loose.eq(3.0, 3.0 + 5e-7, 1e6)


def test_safe_sqrt_handles_tiny_negatives():
    assert safe_sqrt(4.0) == 2.0
    assert safe_sqrt(-1e-16) == 0.0
    assert math.isnan(safe_sqrt(-1e-3))
    assert safe_sqrt(-1e-8, eps=1e-6) == 0.0


@pytest.mark.parametrize("theta", [-7.0, -math.pi, -1e-9, 0.0, 1.0, math.pi, TAU, 25.0])
def test_angle_normalisation_ranges(theta):
    wrapped = normalize_angle_0_to_tau(theta)
    assert 0.0 <= wrapped < TAU
    assert math.cos(wrapped) == pytest.approx(math.cos(theta), abs=1e-12)
    centred = normalize_angle_minus_pi_to_pi(theta)
    assert -math.pi < centred <= math.pi
    assert math.sin(centred) == pytest.approx(math.sin(theta), abs=1e-12)


def test_minus_pi_maps_to_pi():
    assert normalize_angle_minus_pi_to_pi(-math.pi) == pytest.approx(math.pi)
    assert normalize_angle_0_to_tau(-math.pi / 2) == pytest.approx(1.5 * math.pi)


def test_vector_helpers():
    assert perp90((1.0, 2.0)) == (-2.0, 1.0)
    assert rotate90_cw((1.0, 2.0)) == (2.0, -1.0)
    assert unit2((3.0, 4.0)) == pytest.approx((0.6, 0.8))
    assert unit2((0.0, 0.0)) == (1.0, 0.0)
    assert unit2((math.nan, 1.0)) == (1.0, 0.0)
    assert clamp(5.0, 0.0, 1.0) == 1.0
    assert clamp(-5.0, 0.0, 1.0) == 0.0
