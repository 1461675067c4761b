"""Root-finding helpers shared by the zero-sequence kernels."""

from typing import Callable

import numpy as np
from scipy.special import roots_legendre


def legendre_roots(degree: int) -> np.ndarray:
    """All ``degree`` zeros of ``P_degree`` in ascending order (float64).

    The middle zero of odd degrees is set to exactly ``0``.
    """
    if degree <= 0:
        return np.empty(0)
    x, _ = roots_legendre(degree)
    x = np.sort(x)
    if degree & 1:
        x[degree // 2] = 0.0
    return x


def legendre_nonnegative_roots(degree: int) -> np.ndarray:
    """Non-negative zeros of ``P_degree`` in ascending order (float64)."""
    x = legendre_roots(degree)
    return x[degree // 2 :]


def bracketed_newton(
    f: Callable,
    lo,
    hi,
    *,
    bisections: int = 8,
    max_iterations: int = 100,
):
    """Find the root of ``f`` inside ``[lo, hi]``.

    ``f(x)`` returns ``(value, derivative)``. A few bisection steps tighten the
    bracket before Newton's method takes over; any Newton step leaving the
    bracket is replaced by a bisection step. Arithmetic follows the type of
    ``lo``/``hi`` so the same routine serves float64 and long double.

    Returns
    -------
        The root, in the type of ``lo``.
    """
    flo, _ = f(lo)
    if flo == 0:
        return lo
    fhi, _ = f(hi)
    if fhi == 0:
        return hi
    if (flo > 0) == (fhi > 0):
        raise ValueError(f"Root is not bracketed by [{lo}, {hi}]")
    for _ in range(bisections):
        mid = lo + (hi - lo) / 2
        fmid, _ = f(mid)
        if fmid == 0:
            return mid
        if (fmid > 0) == (flo > 0):
            lo, flo = mid, fmid
        else:
            hi = mid

    eps = np.finfo(type(lo)).eps
    x = lo + (hi - lo) / 2
    for _ in range(max_iterations):
        fx, dfx = f(x)
        if fx == 0:
            return x
        if (fx > 0) == (flo > 0):
            lo, flo = x, fx
        else:
            hi = x
        step = fx / dfx if dfx != 0 else hi - lo
        candidate = x - step
        if not (lo < candidate < hi):
            candidate = lo + (hi - lo) / 2
        if abs(candidate - x) <= 2 * eps * abs(candidate) or hi - lo <= eps * abs(x):
            return candidate
        x = candidate
    return x
