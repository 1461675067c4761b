import math

import numpy as np
import pytest

from specfunpy import (
    InvalidCombination,
    ParameterNotFinite,
    ParameterNotPositive,
    ParameterOutOfRange,
    PoleAtNonPositiveInteger,
    assoc_laguerre,
    cbrt,
    chebyshev_t,
    chebyshev_u,
    expm1,
    gamma,
    laguerre,
    log1p,
    log_gamma,
    powm1,
)


def test_gamma():
    assert gamma(5.0) == pytest.approx(24.0, rel=1e-14)
    assert gamma(-0.5) == pytest.approx(-3.5449077018110318, rel=1e-14)
    assert log_gamma(0.5) == pytest.approx(0.5723649429247001, rel=1e-14)
    assert isinstance(gamma(np.float32(5.0)), np.float32)


@pytest.mark.parametrize("function", [gamma, log_gamma])
def test_gamma_poles(function):
    with pytest.raises(PoleAtNonPositiveInteger):
        function(-3.0)
    with pytest.raises(ParameterNotFinite):
        function(np.nan)


def test_expm1_log1p():
    assert expm1(1e-10) == pytest.approx(1.00000000005e-10, rel=1e-14)
    assert log1p(1e-10) == pytest.approx(9.9999999995e-11, rel=1e-14)
    assert log1p(-0.5) == pytest.approx(math.log(0.5), rel=1e-14)
    with pytest.raises(ParameterOutOfRange) as info:
        log1p(-1.0)
    assert info.value == ParameterOutOfRange(
        "x", float(np.nextafter(-1.0, np.inf)), math.inf
    )


def test_powm1():
    assert powm1(2.0, 3.0) == pytest.approx(7.0, rel=1e-14)
    assert powm1(-2.0, 3.0) == pytest.approx(-9.0, rel=1e-14)
    assert powm1(1.0 + 1e-12, 2.0) == pytest.approx(2e-12, rel=1e-6)
    with pytest.raises(InvalidCombination):
        powm1(-2.0, 0.5)
    with pytest.raises(ParameterNotFinite) as info:
        powm1(2.0, np.inf)
    assert info.value.name == "y"


def test_cbrt():
    assert cbrt(-27.0) == pytest.approx(-3.0, rel=1e-15)
    assert cbrt(np.float32(8.0)) == np.float32(2.0)


def test_chebyshev():
    assert chebyshev_t(3, 0.5) == pytest.approx(-1.0, rel=1e-14)
    assert chebyshev_u(2, 0.5) == pytest.approx(0.0, abs=1e-15)
    assert chebyshev_t(5, math.cos(0.3)) == pytest.approx(math.cos(1.5), rel=1e-13)
    with pytest.raises(ParameterNotPositive):
        chebyshev_u(-1, 0.5)


def test_laguerre():
    assert laguerre(2, 1.0) == pytest.approx(-0.5, rel=1e-14)
    assert assoc_laguerre(1, 2, 1.0) == pytest.approx(2.0, rel=1e-14)
    assert assoc_laguerre(3, 0, 0.7) == pytest.approx(laguerre(3, 0.7), rel=1e-14)
    with pytest.raises(ParameterNotPositive) as info:
        assoc_laguerre(1, -1, 1.0)
    assert info.value.name == "m"
