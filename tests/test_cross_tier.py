import threading

import mpmath
import numpy as np
import pytest

import specfunpy as sf
from specfunpy.functions import extended
from specfunpy.precision import EXTENDED_AVAILABLE, PrecisionTier

pytestmark = pytest.mark.skipif(
    not EXTENDED_AVAILABLE, reason="platform has no 80-bit long double"
)

LD = np.longdouble

POINTWISE = [
    (sf.airy_ai, (0.7,)),
    (sf.airy_bi_prime, (-1.3,)),
    (sf.digamma, (2.5,)),
    (sf.trigamma, (0.3,)),
    (sf.polygamma, (3, 1.7)),
    (sf.riemann_zeta, (3.0,)),
    (sf.lambert_w0, (2.0,)),
    (sf.lambert_wm1, (-0.2,)),
    (sf.gamma, (4.5,)),
    (sf.log_gamma, (12.25,)),
    (sf.expm1, (0.125,)),
    (sf.log1p, (-0.375,)),
    (sf.cbrt, (-5.0,)),
    (sf.powm1, (1.5, 2.5)),
    (sf.legendre_p, (6, 0.3)),
    (sf.legendre_p_prime, (6, 0.3)),
    (sf.associated_legendre_p, (5, -2, 0.3)),
    (sf.gegenbauer, (4, 0.75, -0.2)),
    (sf.gegenbauer_derivative, (5, 1.25, 0.4, 2)),
    (sf.hermite, (7, 0.6)),
    (sf.chebyshev_t, (9, 0.45)),
    (sf.assoc_laguerre, (4, 2, 1.5)),
    (sf.cardinal_b_spline, (5, 0.3)),
    (sf.cardinal_b_spline_prime, (5, 0.3)),
    (sf.cardinal_b_spline_double_prime, (5, 0.3)),
    (sf.legendre_stieltjes, (7, 0.6)),
    (sf.legendre_stieltjes_prime, (7, 0.6)),
]


def _extended_args(args):
    return tuple(a if isinstance(a, int) else LD(a) for a in args)


@pytest.mark.parametrize(
    "function,args", POINTWISE, ids=lambda v: getattr(v, "name", None)
)
def test_extended_agrees_with_standard(function, args):
    standard = function(*args)
    value = function(*_extended_args(args))
    assert isinstance(value, np.longdouble)
    assert PrecisionTier.EXTENDED in function.tiers
    np.testing.assert_allclose(float(value), standard, rtol=1e-13, atol=1e-15)


def test_extended_is_more_accurate_than_double():
    ctx = mpmath.MPContext()
    ctx.prec = 200
    x = LD(1) / LD(3)
    num, den = x.as_integer_ratio()
    exact = ctx.lambertw(ctx.mpf(num) / den)
    value = sf.lambert_w0(x)
    vnum, vden = value.as_integer_ratio()
    error = abs(ctx.mpf(vnum) / vden - exact)
    # within one ulp of the long double result
    assert error <= ctx.ldexp(abs(exact), -62)


def test_mp_conversion_round_trips():
    ctx = extended.mp_context()
    for value in (LD(1) / LD(3), -LD(2) ** -70, LD(123456789.125), LD(0)):
        assert extended.from_mp(ctx, extended.to_mp(ctx, value)) == value
    assert np.isnan(extended.from_mp(ctx, ctx.nan))
    assert extended.from_mp(ctx, -ctx.inf) == -np.inf


def test_mp_context_is_per_thread():
    contexts = []
    thread = threading.Thread(target=lambda: contexts.append(extended.mp_context()))
    thread.start()
    thread.join()
    assert contexts[0] is not extended.mp_context()
    assert contexts[0].prec == extended.mp_context().prec


def test_extended_sequences():
    zeros = sf.legendre_p_zeros(7, precision="extended")
    assert zeros.dtype == np.longdouble
    assert zeros[3] == 0
    for x in zeros:
        assert abs(sf.legendre_p(7, x)) < 8 * np.finfo(LD).eps
    kronrod = sf.legendre_stieltjes_zeros(3, precision=PrecisionTier.EXTENDED)
    np.testing.assert_allclose(
        kronrod.astype(float), [0.0, 0.9258200997725514], rtol=1e-15
    )
    airy = sf.airy_ai_zeros(0, 3, precision="extended")
    assert airy.dtype == np.longdouble
    np.testing.assert_allclose(
        airy.astype(float),
        [-2.338107410459767, -4.087949444130970, -5.520559828095551],
        rtol=1e-15,
    )


def test_spherical_harmonic_extended():
    value = sf.spherical_harmonic(2, -1, LD(0.7), LD(0.3))
    assert isinstance(value, np.clongdouble)
    standard = sf.spherical_harmonic(2, -1, 0.7, 0.3)
    np.testing.assert_allclose(complex(value), standard, rtol=1e-14)


def test_extended_validation_uses_extended_bounds():
    # the branch point rounded in long double is inside the domain
    x = -np.exp(LD(-1))
    assert np.isfinite(sf.lambert_w0(x))
    with pytest.raises(sf.ParameterOutOfRange):
        sf.lambert_w0(np.nextafter(x, LD(-np.inf)))
