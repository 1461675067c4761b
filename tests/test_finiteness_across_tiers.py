import numpy as np
import pytest

import specfunpy as sf
from specfunpy.precision import LONGDOUBLE_IS_DOUBLE, LONGDOUBLE_IS_X87

LONGDOUBLE_SUPPORTED = LONGDOUBLE_IS_X87 or LONGDOUBLE_IS_DOUBLE

SCALARS = [
    pytest.param(np.float32, id="reduced"),
    pytest.param(np.float64, id="standard"),
    pytest.param(
        np.longdouble,
        id="extended",
        marks=pytest.mark.skipif(
            not LONGDOUBLE_SUPPORTED, reason="unsupported long double layout"
        ),
    ),
]

# (function, arguments, position of the point under test, its name)
CALLS = [
    (sf.airy_ai, (0.5,), 0, "x"),
    (sf.airy_bi_prime, (0.5,), 0, "x"),
    (sf.digamma, (0.5,), 0, "x"),
    (sf.polygamma, (2, 0.5), 1, "x"),
    (sf.riemann_zeta, (0.5,), 0, "x"),
    (sf.gamma, (0.5,), 0, "x"),
    (sf.lambert_w0, (0.5,), 0, "x"),
    (sf.lambert_wm1, (-0.2,), 0, "x"),
    (sf.legendre_p, (3, 0.5), 1, "x"),
    (sf.associated_legendre_p, (3, 1, 0.5), 2, "x"),
    (sf.gegenbauer, (3, 0.5, 0.5), 1, "lam"),
    (sf.gegenbauer_prime, (3, 0.5, 0.5), 2, "x"),
    (sf.hermite, (3, 0.5), 1, "x"),
    (sf.hermite_next, (3, 0.5, 1.0, 1.0), 3, "hnm1"),
    (sf.cardinal_b_spline, (3, 0.5), 1, "x"),
    (sf.legendre_stieltjes, (3, 0.5), 1, "x"),
    (sf.spherical_harmonic, (2, 1, 0.5, 0.5), 3, "phi"),
    (sf.log1p, (0.5,), 0, "x"),
    (sf.powm1, (0.5, 0.5), 1, "y"),
]


@pytest.mark.parametrize("scalar", SCALARS)
@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf], ids=["nan", "inf", "-inf"])
@pytest.mark.parametrize(
    "function,args,position,name", CALLS, ids=[call[0].name for call in CALLS]
)
def test_non_finite_reported_in_every_tier(function, args, position, name, scalar, bad):
    arguments = [a if isinstance(a, int) else scalar(a) for a in args]
    arguments[position] = scalar(bad)
    with pytest.raises(sf.ParameterNotFinite) as info:
        function(*arguments)
    assert info.value.name == name
    if np.isnan(bad):
        assert np.isnan(info.value.value)
    else:
        assert info.value.value == bad


@pytest.mark.parametrize("scalar", SCALARS)
def test_non_finite_through_native_entries(scalar):
    tier = sf.tier_of(scalar(0))
    for function in (sf.digamma, sf.lambert_w0, sf.gamma):
        if tier not in function.tiers:
            continue
        with pytest.raises(sf.ParameterNotFinite):
            function.native(tier)(scalar(np.nan))
