"""Standard (float64) and reduced (float32) kernels.

Most kernels are thin adapters over :mod:`scipy.special`. Families SciPy does
not cover (Legendre derivative, Gegenbauer derivatives, Legendre-Stieltjes)
use the recurrences in :mod:`specfunpy.functions.cpu_numba`.

Sequence kernels follow the buffer protocol of :mod:`specfunpy.sequences`.
"""

import numpy as np
from scipy import special

from specfunpy.functions import cpu_numba
from specfunpy.functions.misc import (
    bracketed_newton,
    legendre_nonnegative_roots,
    legendre_roots,
)

# Airy


def airy_ai(x):
    return special.airy(x)[0]


def airy_ai_prime(x):
    return special.airy(x)[1]


def airy_bi(x):
    return special.airy(x)[2]


def airy_bi_prime(x):
    return special.airy(x)[3]


# Ranks up to this bound come from SciPy's table; beyond it the asymptotic
# series (DLMF 9.9.6, 9.9.7, 9.9.18) is accurate to double precision.
_TABULATED_RANKS = 64


def _asymptotic_zero(t):
    t2 = t**-2.0
    series = 5 / 48 + t2 * (-5 / 36 + t2 * (77125 / 82944 - t2 * 108056875 / 6967296))
    return -(t ** (2 / 3)) * (1 + t2 * series)


def _airy_zeros(table, offset, start_index, out):
    """Fill ``out`` with the zeros of rank ``start_index + 1, ...``.

    Only the requested ranks are evaluated, so memory follows ``len(out)``
    rather than the rank.
    """
    start = int(start_index)
    count = out.shape[0]
    tabulated = min(max(_TABULATED_RANKS - start, 0), count)
    if tabulated:
        out[:tabulated] = table(start + tabulated)[0][start:]
    ranks = np.arange(start + tabulated + 1, start + count + 1, dtype=np.float64)
    out[tabulated:] = _asymptotic_zero(3 * np.pi / 8 * (4 * ranks - offset))


def airy_ai_zeros(start_index, out):
    _airy_zeros(special.ai_zeros, 1, start_index, out)


def airy_bi_zeros(start_index, out):
    _airy_zeros(special.bi_zeros, 3, start_index, out)


def airy_ai_zero(index):
    out = np.empty(1)
    airy_ai_zeros(index, out)
    return out[0]


def airy_bi_zero(index):
    out = np.empty(1)
    airy_bi_zeros(index, out)
    return out[0]


# Cardinal B-splines


def _b_spline_level(levels, n, x, level, dtype):
    b = np.zeros(n + 1, dtype=dtype)
    t = x + dtype.type(n + 1) / 2
    levels(n, t, level, b)
    return b


def cardinal_b_spline(n, x, levels=cpu_numba.b_spline_levels):
    dtype = np.asarray(x).dtype
    if n == 0:
        ax = abs(x)
        if ax < dtype.type(0.5):
            return dtype.type(1)
        if ax == dtype.type(0.5):
            return dtype.type(0.5)
        return dtype.type(0)
    return _b_spline_level(levels, n, x, n, dtype)[0]


def cardinal_b_spline_prime(n, x, levels=cpu_numba.b_spline_levels):
    dtype = np.asarray(x).dtype
    b = _b_spline_level(levels, n, x, n - 1, dtype)
    return b[0] - b[1]


def cardinal_b_spline_double_prime(n, x, levels=cpu_numba.b_spline_levels):
    dtype = np.asarray(x).dtype
    b = _b_spline_level(levels, n, x, n - 2, dtype)
    return b[0] - 2 * b[1] + b[2]


# Digamma, polygamma, zeta


def digamma(x):
    return special.psi(x)


def trigamma(x):
    return special.polygamma(1, x)


def polygamma(n, x):
    return special.polygamma(n, x)


def riemann_zeta(x):
    return special.zeta(x)


# Gegenbauer


def gegenbauer(n, lam, x):
    return cpu_numba.gegenbauer(n, lam, x)


def gegenbauer_derivative(n, lam, x, k):
    if k > n:
        return 0.0
    if k == 0:
        return cpu_numba.gegenbauer(n, lam, x)
    scale = np.ldexp(special.poch(lam, k), k)
    return scale * cpu_numba.gegenbauer(n - k, lam + k, x)


def gegenbauer_prime(n, lam, x):
    return gegenbauer_derivative(n, lam, x, 1)


# Hermite


def hermite(n, x):
    return special.eval_hermite(n, x)


def hermite_next(n, x, hn, hnm1):
    return 2 * x * hn - 2 * n * hnm1


# Lambert W


_BRANCH_POINT = -np.exp(-1.0)


def lambert_w0(x):
    # a tier-rounded branch point stands for -1/e itself, where W = -1
    if x <= _BRANCH_POINT:
        return -1.0
    return special.lambertw(x, 0).real


def lambert_wm1(x):
    if x <= _BRANCH_POINT:
        return -1.0
    return special.lambertw(x, -1).real


# Legendre


def legendre_p(n, x):
    return special.eval_legendre(n, x)


def legendre_p_prime(n, x):
    return cpu_numba.legendre_p_and_prime(n, x)[1]


def associated_legendre_p(n, m, x):
    if m >= 0:
        return special.lpmv(m, n, x)
    mu = -m
    scale = np.exp(special.gammaln(n - mu + 1) - special.gammaln(n + mu + 1))
    if mu & 1:
        scale = -scale
    return scale * special.lpmv(mu, n, x)


def legendre_p_zeros(degree, out):
    if out is not None:
        out[:] = legendre_roots(degree)
    return degree


# Legendre-Stieltjes


def stieltjes_coefficients(m, dtype=np.float64, fill=cpu_numba.stieltjes_coefficients):
    a = np.zeros(cpu_numba.stieltjes_size(m), dtype=dtype)
    fill(m, a)
    return a


def fill_stieltjes_zeros(m, legendre_zeros, f, out):
    """Fill ``out`` with the non-negative zeros of ``E_m`` ascending.

    The zeros of ``E_m`` interlace with those of ``P_{m-1}``; each bracket
    runs from one non-negative Legendre zero to the next (or to 1).
    """
    one = out.dtype.type(1)
    odd = m & 1
    if odd:
        out[0] = 0
    for k in range(odd, out.shape[0]):
        j = k - 1 if odd else k
        lo = legendre_zeros[j]
        hi = legendre_zeros[j + 1] if j + 1 < len(legendre_zeros) else one
        out[k] = bracketed_newton(f, lo, hi)


def stieltjes_zero_count(m):
    return (m + 1) // 2


def legendre_stieltjes(m, x):
    return cpu_numba.stieltjes_eval(m, stieltjes_coefficients(m), x)[0]


def legendre_stieltjes_prime(m, x):
    return cpu_numba.stieltjes_eval(m, stieltjes_coefficients(m), x)[1]


def legendre_stieltjes_norm_sq(m):
    return cpu_numba.stieltjes_norm_sq(m, stieltjes_coefficients(m))


def legendre_stieltjes_zeros(m, out):
    if out is None:
        return stieltjes_zero_count(m)
    a = stieltjes_coefficients(m)
    brackets = legendre_nonnegative_roots(m - 1)
    fill_stieltjes_zeros(
        m, brackets, lambda x: cpu_numba.stieltjes_eval(m, a, x), out
    )
    return out.shape[0]


# Spherical harmonics


def spherical_harmonic(n, m, theta, phi):
    if abs(m) > n:
        return 0j
    return special.sph_harm_y(n, m, theta, phi)


def spherical_harmonic_r(n, m, theta, phi):
    return np.real(spherical_harmonic(n, m, theta, phi))


def spherical_harmonic_i(n, m, theta, phi):
    return np.imag(spherical_harmonic(n, m, theta, phi))


# Gamma and elementary helpers


def gamma(x):
    return special.gamma(x)


def log_gamma(x):
    return special.gammaln(x)


def expm1(x):
    return special.expm1(x)


def log1p(x):
    return special.log1p(x)


def powm1(x, y):
    return special.powm1(x, y)


def cbrt(x):
    return special.cbrt(x)


# Chebyshev and Laguerre


def chebyshev_t(n, x):
    return special.eval_chebyt(n, x)


def chebyshev_u(n, x):
    return special.eval_chebyu(n, x)


def laguerre(n, x):
    return special.eval_laguerre(n, x)


def assoc_laguerre(n, m, x):
    return special.eval_genlaguerre(n, m, x)
