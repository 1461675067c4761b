import numpy as np
import pytest

from specfunpy import (
    ParameterExceedsMaximumIntegerValue,
    ParameterNotPositive,
    legendre_p_zeros,
    legendre_stieltjes,
    legendre_stieltjes_norm_sq,
    legendre_stieltjes_prime,
    legendre_stieltjes_zeros,
)


def test_second_order():
    # E_2 = P_2 - 2/5 P_0
    assert legendre_stieltjes(2, 0.5) == pytest.approx(-0.525, rel=1e-14)
    assert legendre_stieltjes_prime(2, 0.5) == pytest.approx(1.5, rel=1e-14)
    assert legendre_stieltjes_norm_sq(2) == pytest.approx(0.72, rel=1e-14)
    np.testing.assert_allclose(
        legendre_stieltjes_zeros(2), [0.7745966692414834], rtol=1e-14
    )


def test_first_and_third_order():
    assert legendre_stieltjes(1, 0.3) == pytest.approx(0.3, rel=1e-14)
    assert legendre_stieltjes_norm_sq(1) == pytest.approx(2.0 / 3.0, rel=1e-14)
    np.testing.assert_array_equal(legendre_stieltjes_zeros(1), [0.0])
    zeros = legendre_stieltjes_zeros(3)
    np.testing.assert_allclose(zeros, [0.0, 0.9258200997725514], rtol=1e-14)
    assert legendre_stieltjes_norm_sq(3) == pytest.approx(
        0.5612244897959184, rel=1e-13
    )


@pytest.mark.parametrize("m", [4, 5, 10, 21])
def test_zeros(m):
    zeros = legendre_stieltjes_zeros(m)
    assert zeros.shape == ((m + 1) // 2,)
    assert np.all(np.diff(zeros) > 0)
    assert np.all(zeros >= 0) and np.all(zeros < 1)
    for x in zeros:
        assert abs(legendre_stieltjes(m, x)) < 1e-12
    # Kronrod nodes interlace with the Gauss nodes of degree m - 1
    gauss = legendre_p_zeros(m - 1)
    gauss = gauss[gauss >= 0]
    nodes = np.sort(np.concatenate([zeros, gauss]))
    assert np.all(np.diff(nodes) > 0)


@pytest.mark.parametrize("m", [2, 5, 8])
def test_parity(m):
    sign = 1 if m % 2 == 0 else -1
    assert legendre_stieltjes(m, -0.4) == pytest.approx(
        sign * legendre_stieltjes(m, 0.4), rel=1e-13
    )


def test_derivative_matches_difference_quotient():
    h = 1e-6
    slope = (legendre_stieltjes(6, 0.3 + h) - legendre_stieltjes(6, 0.3 - h)) / (2 * h)
    assert legendre_stieltjes_prime(6, 0.3) == pytest.approx(slope, rel=1e-6)


def test_order_must_be_positive():
    for function in (legendre_stieltjes_norm_sq, legendre_stieltjes_zeros):
        with pytest.raises(ParameterNotPositive) as info:
            function(0)
        assert info.value.name == "m"
    with pytest.raises(ParameterNotPositive):
        legendre_stieltjes(-2, 0.5)
    with pytest.raises(ParameterExceedsMaximumIntegerValue):
        legendre_stieltjes_prime(2**32, 0.5)
