"""Physicists' Hermite polynomials."""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import finite, fits_uint32, non_negative, positive

hermite = SpecialFunction(
    "hermite",
    (Parameter("n", Role.DEGREE), Parameter("x", Role.POINT)),
    [non_negative("n"), fits_uint32("n"), *finite("x")],
    KernelTable(sk.hermite, extended=extended.hermite),
    doc="""Hermite polynomial ``H_n(x)``.

    Raises
    ------
    ParameterNotPositive
        If ``n < 0``.
    ParameterExceedsMaximumIntegerValue
        If ``n`` does not fit an unsigned 32-bit integer.
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    """,
)

# pure arithmetic, so every tier runs it natively
hermite_next = SpecialFunction(
    "hermite_next",
    (
        Parameter("n", Role.DEGREE),
        Parameter("x", Role.POINT),
        Parameter("hn", Role.PARAMETER),
        Parameter("hnm1", Role.PARAMETER),
    ),
    [positive("n"), fits_uint32("n"), *finite("x", "hn", "hnm1")],
    KernelTable(sk.hermite_next, reduced=sk.hermite_next, extended=sk.hermite_next),
    doc="""``H_{n+1}(x)`` from ``hn = H_n(x)`` and ``hnm1 = H_{n-1}(x)``.

    Raises
    ------
    ParameterNotPositive
        If ``n < 1``.
    ParameterExceedsMaximumIntegerValue
        If ``n`` does not fit an unsigned 32-bit integer.
    ParameterNotFinite
        For NaN or infinite ``x``, ``hn`` or ``hnm1`` (in that order).
    """,
)
