"""Legendre polynomials, associated Legendre functions and Legendre zeros."""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.sequences import SelfSizedSequence
from specfunpy.validation import (
    finite,
    fits_int32,
    non_negative,
    order_within_degree,
)

_NX = (Parameter("n", Role.DEGREE), Parameter("x", Role.POINT))

legendre_p = SpecialFunction(
    "legendre_p",
    _NX,
    [non_negative("n"), fits_int32("n"), *finite("x")],
    KernelTable(sk.legendre_p, extended=extended.legendre_p),
    doc="""Legendre polynomial ``P_n(x)``.

    Raises
    ------
    ParameterNotPositive
        If ``n < 0``.
    ParameterExceedsMaximumIntegerValue
        If ``n`` does not fit a signed 32-bit integer.
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    """,
)

legendre_p_prime = SpecialFunction(
    "legendre_p_prime",
    _NX,
    [non_negative("n"), fits_int32("n"), *finite("x")],
    KernelTable(sk.legendre_p_prime, extended=extended.legendre_p_prime),
    doc="Derivative ``P_n'(x)``; errors as for :data:`legendre_p`.",
)

associated_legendre_p = SpecialFunction(
    "associated_legendre_p",
    (
        Parameter("n", Role.DEGREE),
        Parameter("m", Role.ORDER),
        Parameter("x", Role.POINT),
    ),
    [
        non_negative("n"),
        fits_int32("n"),
        *finite("x"),
        order_within_degree("n", "m"),
    ],
    KernelTable(sk.associated_legendre_p, extended=extended.associated_legendre_p),
    doc="""Associated Legendre function ``P_n^m(x)`` with Condon-Shortley phase.

    Negative orders follow ``P_n^-m = (-1)^m (n-m)!/(n+m)! P_n^m``.

    Raises
    ------
    ParameterNotPositive
        If ``n < 0``.
    ParameterExceedsMaximumIntegerValue
        If ``n`` does not fit a signed 32-bit integer.
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    ParameterOutOfRange
        If ``|m| > n`` (name ``"m"``, bounds ``-n`` and ``n``).
    """,
)

legendre_p_zeros = SelfSizedSequence(
    "legendre_p_zeros",
    (Parameter("degree", Role.DEGREE),),
    [fits_int32("degree")],
    KernelTable(sk.legendre_p_zeros, extended=extended.legendre_p_zeros),
    empty_when=lambda args: args["degree"] <= 0,
    doc="""All ``degree`` zeros of ``P_degree`` in ascending order.

    A degree of zero or below yields an empty array.

    Raises
    ------
    ParameterExceedsMaximumIntegerValue
        If ``degree`` does not fit a signed 32-bit integer.
    """,
)
