import math

import numpy as np
import pytest

from models.transformations import (
    ab_to_alpha_beta,
    abc_to_alpha_beta,
    abc_to_dq,
    alpha_beta_to_ab,
    alpha_beta_to_abc,
    alpha_beta_to_dq,
    dq_to_abc,
    dq_to_alpha_beta,
    is_balanced,
    zero_sequence,
)


def test_clarke_balanced_fixture():
    i_alpha, i_beta = abc_to_alpha_beta(1.0, -0.5, -0.5)
    assert i_alpha == pytest.approx(1.0, abs=1e-6)
    assert i_beta == pytest.approx(0.0, abs=1e-6)


def test_clarke_park_inverse_consistency():
    i_alpha, i_beta = abc_to_alpha_beta(1.0, -0.5, -0.5)
    i_a, i_b, i_c = alpha_beta_to_abc(i_alpha, i_beta)
    assert pytest.approx(1.0, rel=1e-6) == i_a
    assert pytest.approx(-0.5, rel=1e-6) == i_b
    assert pytest.approx(-0.5, rel=1e-6) == i_c


def test_park_at_zero_angle_is_identity():
    i_d, i_q = alpha_beta_to_dq(1.0, 0.0, sin_theta=0.0, cos_theta=1.0)
    assert i_d == pytest.approx(1.0)
    assert i_q == pytest.approx(0.0)


def test_park_at_quarter_turn():
    i_d, i_q = alpha_beta_to_dq(1.0, 0.0, sin_theta=1.0, cos_theta=0.0)
    assert i_d == pytest.approx(0.0)
    assert i_q == pytest.approx(-1.0)


def test_reduced_and_full_clarke_agree_when_balanced():
    rng = np.random.default_rng(1)
    for a, b in rng.uniform(-10.0, 10.0, size=(50, 2)):
        c = -(a + b)
        full = abc_to_alpha_beta(a, b, c)
        reduced = ab_to_alpha_beta(a, b)
        assert np.allclose(full, reduced, rtol=1e-5, atol=1e-5)


def test_transform_round_trip():
    i_abc = (2.0, -1.0, -1.0)
    theta = 0.7
    s, c = math.sin(theta), math.cos(theta)
    i_d, i_q = abc_to_dq(*i_abc, s, c)
    v_abc = dq_to_abc(i_d, i_q, s, c)
    assert np.allclose(i_abc, v_abc, atol=1e-5)


def test_park_round_trip_over_angles():
    rng = np.random.default_rng(2)
    alpha = rng.uniform(-100.0, 100.0, size=200).astype(np.float32)
    beta = rng.uniform(-100.0, 100.0, size=200).astype(np.float32)
    theta = rng.uniform(-2.0 * math.pi, 2.0 * math.pi, size=200)
    s, c = np.sin(theta), np.cos(theta)

    d, q = alpha_beta_to_dq(alpha, beta, s, c)
    alpha_back, beta_back = dq_to_alpha_beta(d, q, s, c)

    assert np.allclose(alpha_back, alpha, rtol=1e-5, atol=1e-4)
    assert np.allclose(beta_back, beta, rtol=1e-5, atol=1e-4)


def test_reduced_clarke_round_trip():
    rng = np.random.default_rng(3)
    a = rng.uniform(-50.0, 50.0, size=100)
    b = rng.uniform(-50.0, 50.0, size=100)

    alpha, beta = ab_to_alpha_beta(a, b)
    a_back, b_back = alpha_beta_to_ab(alpha, beta)

    assert np.allclose(a_back, a, rtol=1e-5, atol=1e-4)
    assert np.allclose(b_back, b, rtol=1e-5, atol=1e-4)


def test_full_clarke_round_trip_returns_balanced_projection():
    a, b, c = 3.0, 1.0, -1.0  # a + b + c = 3, not balanced
    alpha, beta = abc_to_alpha_beta(a, b, c)
    a_back, b_back, c_back = alpha_beta_to_abc(alpha, beta)

    z = zero_sequence(a, b, c)
    assert z == pytest.approx(1.0)
    # the zero-sequence part is lost, not the original set
    assert (a_back, b_back, c_back) != pytest.approx((a, b, c))
    assert a_back == pytest.approx(a - z, abs=1e-5)
    assert b_back == pytest.approx(b - z, abs=1e-5)
    assert c_back == pytest.approx(c - z, abs=1e-5)
    assert a_back + b_back + c_back == pytest.approx(0.0, abs=1e-5)


def test_inverse_full_clarke_is_balanced_by_construction():
    rng = np.random.default_rng(4)
    alpha = rng.uniform(-10.0, 10.0, size=100)
    beta = rng.uniform(-10.0, 10.0, size=100)
    a, b, c = alpha_beta_to_abc(alpha, beta)
    assert np.allclose(a + b + c, 0.0, atol=1e-5)


def test_inverse_reduced_matches_inverse_full():
    a_full, b_full, _ = alpha_beta_to_abc(0.4, -1.3)
    a_red, b_red = alpha_beta_to_ab(0.4, -1.3)
    assert a_red == pytest.approx(a_full)
    assert b_red == pytest.approx(b_full)


@pytest.mark.parametrize(
    "fn, args",
    [
        (abc_to_alpha_beta, (0.0, 0.0, 0.0)),
        (ab_to_alpha_beta, (0.0, 0.0)),
        (alpha_beta_to_abc, (0.0, 0.0)),
        (alpha_beta_to_ab, (0.0, 0.0)),
        (alpha_beta_to_dq, (0.0, 0.0, 0.5, 0.8)),
        (dq_to_alpha_beta, (0.0, 0.0, 0.5, 0.8)),
    ],
)
def test_zero_in_zero_out(fn, args):
    out = fn(*args)
    assert all(value == 0.0 for value in out)


def test_outputs_are_single_precision():
    alpha, beta = abc_to_alpha_beta(1.0, 2.0, 3.0)
    assert isinstance(alpha, np.float32)
    assert isinstance(beta, np.float32)

    d, q = alpha_beta_to_dq(np.ones(4), np.zeros(4), np.zeros(4), np.ones(4))
    assert d.dtype == np.float32
    assert q.dtype == np.float32


def test_non_finite_values_propagate():
    alpha, beta = abc_to_alpha_beta(float("nan"), 0.5, -0.5)
    assert math.isnan(alpha)
    assert math.isfinite(beta)

    alpha, beta = abc_to_alpha_beta(0.0, float("inf"), 0.0)
    assert alpha == -math.inf
    assert beta == math.inf

    d, q = alpha_beta_to_dq(float("nan"), 1.0, 0.0, 1.0)
    assert math.isnan(d)
    assert math.isnan(q)


def test_is_balanced():
    assert is_balanced(1.0, -0.5, -0.5)
    assert is_balanced(100.0, -50.0, -50.0 + 1e-3)
    assert not is_balanced(1.0, 1.0, 1.0)
    assert not is_balanced(0.1, 0.0, 0.0, tol=1e-3)
