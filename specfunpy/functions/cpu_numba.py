"""Numba kernels for polynomial families and cardinal B-splines.

All kernels are pure arithmetic on their inputs, so the un-jitted
``kernel.py_func`` evaluates the same recurrence in whatever scalar type it is
given. The extended tier relies on this to run them in ``numpy.longdouble``.
Kernels therefore never call each other; composition happens in the Python
wrappers of :mod:`specfunpy.functions.scipy_kernels` and
:mod:`specfunpy.functions.extended`.
"""

import numpy as np
from numba import jit


@jit(nopython=True, cache=True)
def b_spline_levels(n: int, t, level: int, b: np.ndarray):
    """Run the uniform-knot Cox-de Boor recursion up to ``level``.

    Parameters
    ----------
    n : int
        Degree of the target spline; ``b`` must hold ``n + 1`` entries.
    t
        Uncentered abscissa ``x + (n + 1) / 2``.
    level : int
        Degree reached by the recursion, ``0 <= level <= n``.
    b : np.ndarray
        Work buffer. On return ``b[j]`` holds ``N_level(t - j)`` for
        ``j = 0, ..., n - level``.
    """
    for j in range(n + 1):
        s = t - j
        if s >= 0 and s < 1:
            b[j] = 1
        else:
            b[j] = 0
    for k in range(1, level + 1):
        for j in range(n - k + 1):
            s = t - j
            b[j] = (s * b[j] + (k + 1 - s) * b[j + 1]) / k


@jit(nopython=True, cache=True)
def legendre_p_and_prime(n: int, x):
    """Return ``(P_n(x), P_n'(x))`` by the three-term recurrence.

    The derivative uses ``P'_{k+1} = P'_{k-1} + (2k + 1) P_k`` which stays
    finite at ``x = +-1``.
    """
    one = x - x + 1
    p0 = one
    p1 = x
    d0 = one - one
    d1 = one
    if n == 0:
        return p0, d0
    for k in range(1, n):
        p2 = ((2 * k + 1) * x * p1 - k * p0) / (k + 1)
        d2 = d0 + (2 * k + 1) * p1
        p0 = p1
        p1 = p2
        d0 = d1
        d1 = d2
    return p1, d1


@jit(nopython=True, cache=True)
def associated_legendre(n: int, m: int, x):
    """``P_n^m(x)`` for ``0 <= m <= n``, Condon-Shortley phase included."""
    one = x - x + 1
    pmm = one
    if m > 0:
        root = np.sqrt((one - x) * (one + x))
        fact = one
        for _ in range(m):
            pmm = -pmm * fact * root
            fact = fact + 2
    if n == m:
        return pmm
    pmmp1 = x * (2 * m + 1) * pmm
    if n == m + 1:
        return pmmp1
    pll = pmmp1
    for ll in range(m + 2, n + 1):
        pll = (x * (2 * ll - 1) * pmmp1 - (ll + m - 1) * pmm) / (ll - m)
        pmm = pmmp1
        pmmp1 = pll
    return pll


@jit(nopython=True, cache=True)
def gegenbauer(n: int, lam, x):
    """``C_n^(lam)(x)`` by the upward recurrence."""
    one = x - x + lam - lam + 1
    if n == 0:
        return one
    y0 = one
    y1 = 2 * lam * x
    for k in range(1, n):
        y2 = (2 * x * (k + lam) * y1 - (k + 2 * lam - 1) * y0) / (k + 1)
        y0 = y1
        y1 = y2
    return y1


@jit(nopython=True, cache=True)
def hermite(n: int, x):
    """Physicists' Hermite polynomial ``H_n(x)``."""
    one = x - x + 1
    if n == 0:
        return one
    h0 = one
    h1 = 2 * x
    for k in range(1, n):
        h2 = 2 * x * h1 - 2 * k * h0
        h0 = h1
        h1 = h2
    return h1


@jit(nopython=True, cache=True)
def chebyshev(n: int, x, second_kind: bool):
    one = x - x + 1
    if n == 0:
        return one
    t0 = one
    t1 = 2 * x if second_kind else x
    for _ in range(1, n):
        t2 = 2 * x * t1 - t0
        t0 = t1
        t1 = t2
    return t1


@jit(nopython=True, cache=True)
def laguerre(n: int, m: int, x):
    """Associated Laguerre ``L_n^m(x)``; ``m = 0`` gives ``L_n``."""
    one = x - x + 1
    if n == 0:
        return one
    l0 = one
    l1 = m + 1 - x
    for k in range(1, n):
        l2 = ((2 * k + m + 1 - x) * l1 - (k + m) * l0) / (k + 1)
        l0 = l1
        l1 = l2
    return l1


@jit(nopython=True, cache=True)
def stieltjes_coefficients(m: int, a: np.ndarray):
    """Fill the Legendre expansion coefficients of ``E_m``.

    ``a`` has ``stieltjes_size(m)`` entries; ``a[0]`` is unused. For odd ``m``
    the coefficient ``a[i]`` multiplies ``P_{2i-1}``, for even ``m`` it
    multiplies ``P_{2i-2}`` (Patterson's recurrence, eq. 12).
    """
    n = m - 1
    if n & 1:
        q = 1
        r = (n - 1) // 2 + 2
    else:
        q = 0
        r = n // 2 + 1
    a[0] = 0
    a[r] = 1
    for k in range(1, r):
        ratio = a[r]
        a[r - k] = 0
        for i in range(r + 1 - k, r + 1):
            num = (
                (n - q + 2 * (i + k - 1))
                * (n + q + 2 * (k - i + 1))
                * (n - 1 - q + 2 * (i - k))
                * (2 * (k + i - 1) - 1 - q - n)
            )
            den = (
                (n - q + 2 * (i - k))
                * (2 * (k + i - 1) - q - n)
                * (n + 1 + q + 2 * (k - i))
                * (n - 1 - q + 2 * (i + k))
            )
            ratio = ratio * num / den
            a[r - k] -= ratio * a[i]


def stieltjes_size(m: int) -> int:
    n = m - 1
    if n & 1:
        return (n - 1) // 2 + 3
    return n // 2 + 2


@jit(nopython=True, cache=True)
def stieltjes_eval(m: int, a: np.ndarray, x):
    """Return ``(E_m(x), E_m'(x))`` from the expansion coefficients."""
    odd = m & 1
    one = x - x + 1
    p0 = one
    p1 = x
    d0 = one - one
    d1 = one
    if odd:
        e = a[1] * p1
        de = a[1] * d1
    else:
        e = a[1] * p0
        de = a[1] * d0
    degree = 1
    for i in range(2, a.shape[0]):
        # two Legendre steps per coefficient
        for step in range(2):
            p2 = ((2 * degree + 1) * x * p1 - degree * p0) / (degree + 1)
            d2 = d0 + (2 * degree + 1) * p1
            p0 = p1
            p1 = p2
            d0 = d1
            d1 = d2
            degree += 1
            if (step == 0) != bool(odd):
                e += a[i] * p1
                de += a[i] * d1
    return e, de


@jit(nopython=True, cache=True)
def stieltjes_norm_sq(m: int, a: np.ndarray):
    total = a[0] - a[0]
    odd = m & 1
    for i in range(1, a.shape[0]):
        if odd:
            total += 2 * a[i] * a[i] / (4 * i - 1)
        else:
            total += 2 * a[i] * a[i] / (4 * i - 3)
    return total
