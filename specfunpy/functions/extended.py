"""Extended-tier (80-bit ``long double``) kernels.

Transcendental functions are evaluated with :mod:`mpmath` at the long double
mantissa width plus guard bits and rounded once on the way back. Polynomial
families run the un-jitted Numba recurrences (``kernel.py_func``) directly in
:class:`numpy.longdouble`.

Every thread gets its own :class:`mpmath.MPContext`, so precision settings are
never shared between threads.
"""

import threading

import mpmath
import numpy as np

from specfunpy.env import MP_GUARD_BITS, parse_int_env
from specfunpy.functions import cpu_numba
from specfunpy.functions import scipy_kernels
from specfunpy.functions.misc import legendre_roots

LONGDOUBLE = np.longdouble
_MANTISSA_BITS = np.finfo(LONGDOUBLE).nmant + 1
_SPLIT = 2**32

_local = threading.local()


def mp_context() -> mpmath.MPContext:
    """Return this thread's mpmath context."""
    ctx = getattr(_local, "ctx", None)
    if ctx is None:
        ctx = mpmath.MPContext()
        ctx.prec = _MANTISSA_BITS + parse_int_env(MP_GUARD_BITS, default=16, minimum=0)
        _local.ctx = ctx
    return ctx


def to_mp(ctx, x):
    """Exact conversion of a long double to an mpf."""
    num, den = LONGDOUBLE(x).as_integer_ratio()
    return ctx.mpf(num) / den


def from_mp(ctx, value) -> np.longdouble:
    """Round an mpf to the nearest long double."""
    value = ctx.re(value)
    if ctx.isnan(value):
        return LONGDOUBLE(np.nan)
    if ctx.isinf(value):
        return LONGDOUBLE(np.inf) if value > 0 else LONGDOUBLE(-np.inf)
    negative = value < 0
    with ctx.workprec(_MANTISSA_BITS):
        rounded = +abs(value)
    if not rounded:
        return LONGDOUBLE(-0.0) if negative else LONGDOUBLE(0)
    mantissa, exponent = ctx.frexp(rounded)
    # integer mantissa fits 64 bits; assemble it from two exact halves
    hi, lo = divmod(int(ctx.ldexp(mantissa, _MANTISSA_BITS)), _SPLIT)
    result = LONGDOUBLE(hi) * LONGDOUBLE(_SPLIT) + LONGDOUBLE(lo)
    result = np.ldexp(result, int(exponent) - _MANTISSA_BITS)
    return -result if negative else result


def _mp_unary(name, *fixed, **options):
    def kernel(x):
        ctx = mp_context()
        return from_mp(ctx, getattr(ctx, name)(*fixed, to_mp(ctx, x), **options))

    kernel.__name__ = name
    return kernel


# Airy

airy_ai = _mp_unary("airyai")
airy_bi = _mp_unary("airybi")
airy_ai_prime = _mp_unary("airyai", derivative=1)
airy_bi_prime = _mp_unary("airybi", derivative=1)


def airy_ai_zero(index):
    ctx = mp_context()
    return from_mp(ctx, ctx.airyaizero(index + 1))


def airy_bi_zero(index):
    ctx = mp_context()
    return from_mp(ctx, ctx.airybizero(index + 1))


def airy_ai_zeros(start_index, out):
    ctx = mp_context()
    for i in range(out.shape[0]):
        out[i] = from_mp(ctx, ctx.airyaizero(int(start_index) + i + 1))


def airy_bi_zeros(start_index, out):
    ctx = mp_context()
    for i in range(out.shape[0]):
        out[i] = from_mp(ctx, ctx.airybizero(int(start_index) + i + 1))


# Cardinal B-splines


def cardinal_b_spline(n, x):
    return scipy_kernels.cardinal_b_spline(n, x, cpu_numba.b_spline_levels.py_func)


def cardinal_b_spline_prime(n, x):
    return scipy_kernels.cardinal_b_spline_prime(
        n, x, cpu_numba.b_spline_levels.py_func
    )


def cardinal_b_spline_double_prime(n, x):
    return scipy_kernels.cardinal_b_spline_double_prime(
        n, x, cpu_numba.b_spline_levels.py_func
    )


# Digamma, polygamma, zeta

digamma = _mp_unary("digamma")
trigamma = _mp_unary("psi", 1)
riemann_zeta = _mp_unary("zeta")


def polygamma(n, x):
    ctx = mp_context()
    return from_mp(ctx, ctx.psi(n, to_mp(ctx, x)))


# Gegenbauer


def gegenbauer(n, lam, x):
    return cpu_numba.gegenbauer.py_func(n, lam, x)


def gegenbauer_derivative(n, lam, x, k):
    if k > n:
        return LONGDOUBLE(0)
    scale = LONGDOUBLE(1)
    for j in range(k):
        scale *= 2 * (lam + j)
    return scale * cpu_numba.gegenbauer.py_func(n - k, lam + k, x)


def gegenbauer_prime(n, lam, x):
    return gegenbauer_derivative(n, lam, x, 1)


# Hermite


def hermite(n, x):
    return cpu_numba.hermite.py_func(n, x)


# Lambert W

lambert_w0 = _mp_unary("lambertw")
lambert_wm1 = _mp_unary("lambertw", k=-1)


# Legendre


def legendre_p(n, x):
    return cpu_numba.legendre_p_and_prime.py_func(n, x)[0]


def legendre_p_prime(n, x):
    return cpu_numba.legendre_p_and_prime.py_func(n, x)[1]


def _factorial_ratio(n, mu):
    """``(n - mu)! / (n + mu)!`` in long double."""
    ratio = LONGDOUBLE(1)
    for k in range(n - mu + 1, n + mu + 1):
        ratio /= k
    return ratio


def associated_legendre_p(n, m, x):
    if m >= 0:
        return cpu_numba.associated_legendre.py_func(n, m, x)
    mu = -m
    value = _factorial_ratio(n, mu) * cpu_numba.associated_legendre.py_func(n, mu, x)
    return -value if mu & 1 else value


def refined_legendre_roots(degree):
    """Zeros of ``P_degree`` ascending, polished by Newton in long double."""
    roots = legendre_roots(degree).astype(LONGDOUBLE)
    step = cpu_numba.legendre_p_and_prime.py_func
    for i in range(roots.shape[0]):
        if roots[i] == 0:
            continue
        x = roots[i]
        for _ in range(3):
            p, dp = step(degree, x)
            x = x - p / dp
        roots[i] = x
    return roots


def legendre_p_zeros(degree, out):
    if out is not None:
        out[:] = refined_legendre_roots(degree)
    return degree


# Legendre-Stieltjes


def _stieltjes(m):
    return scipy_kernels.stieltjes_coefficients(
        m, LONGDOUBLE, cpu_numba.stieltjes_coefficients.py_func
    )


def legendre_stieltjes(m, x):
    return cpu_numba.stieltjes_eval.py_func(m, _stieltjes(m), x)[0]


def legendre_stieltjes_prime(m, x):
    return cpu_numba.stieltjes_eval.py_func(m, _stieltjes(m), x)[1]


def legendre_stieltjes_norm_sq(m):
    return cpu_numba.stieltjes_norm_sq.py_func(m, _stieltjes(m))


def legendre_stieltjes_zeros(m, out):
    if out is None:
        return scipy_kernels.stieltjes_zero_count(m)
    a = _stieltjes(m)
    roots = refined_legendre_roots(m - 1)
    brackets = roots[(m - 1) // 2 :]
    scipy_kernels.fill_stieltjes_zeros(
        m, brackets, lambda x: cpu_numba.stieltjes_eval.py_func(m, a, x), out
    )
    return out.shape[0]


# Spherical harmonics


def spherical_harmonic(n, m, theta, phi):
    if abs(m) > n:
        return np.clongdouble(0)
    mu = abs(m)
    pi = np.arccos(LONGDOUBLE(-1))
    norm = np.sqrt((2 * n + 1) / (4 * pi) * _factorial_ratio(n, mu))
    amplitude = norm * cpu_numba.associated_legendre.py_func(n, mu, np.cos(theta))
    angle = mu * phi
    value = np.zeros((), dtype=np.clongdouble)
    value.real = amplitude * np.cos(angle)
    value.imag = amplitude * np.sin(angle)
    if m < 0:
        value = np.conj(value)
        if mu & 1:
            value = -value
    return value[()]


def spherical_harmonic_r(n, m, theta, phi):
    return np.real(spherical_harmonic(n, m, theta, phi))


def spherical_harmonic_i(n, m, theta, phi):
    return np.imag(spherical_harmonic(n, m, theta, phi))


# Gamma and elementary helpers

gamma = _mp_unary("gamma")
expm1 = _mp_unary("expm1")
log1p = _mp_unary("log1p")


def cbrt(x):
    # mpmath returns the principal (complex) root for negative x
    ctx = mp_context()
    value = from_mp(ctx, ctx.cbrt(to_mp(ctx, abs(x))))
    return -value if x < 0 else value


def log_gamma(x):
    ctx = mp_context()
    return from_mp(ctx, ctx.re(ctx.loggamma(to_mp(ctx, x))))


def powm1(x, y):
    ctx = mp_context()
    return from_mp(ctx, ctx.powm1(to_mp(ctx, x), to_mp(ctx, y)))


# Chebyshev and Laguerre


def chebyshev_t(n, x):
    return cpu_numba.chebyshev.py_func(n, x, False)


def chebyshev_u(n, x):
    return cpu_numba.chebyshev.py_func(n, x, True)


def laguerre(n, x):
    return cpu_numba.laguerre.py_func(n, 0, x)


def assoc_laguerre(n, m, x):
    return cpu_numba.laguerre.py_func(n, m, x)
