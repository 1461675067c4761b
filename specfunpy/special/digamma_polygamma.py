"""Digamma, trigamma, polygamma and the Riemann zeta function."""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import combination, finite, fits_int32, non_negative, not_pole

_X = (Parameter("x", Role.POINT),)
_POLE_RULES = [*finite("x"), not_pole("x")]

digamma = SpecialFunction(
    "digamma",
    _X,
    _POLE_RULES,
    KernelTable(sk.digamma, reduced=sk.digamma, extended=extended.digamma),
    doc="""Digamma function psi(x).

    Raises
    ------
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    PoleAtNonPositiveInteger
        If ``x`` is ``0, -1, -2, ...``.
    """,
)

trigamma = SpecialFunction(
    "trigamma",
    _X,
    _POLE_RULES,
    KernelTable(sk.trigamma, extended=extended.trigamma),
    doc="Trigamma function psi'(x); errors as for :data:`digamma`.",
)

polygamma = SpecialFunction(
    "polygamma",
    (Parameter("order", Role.ORDER), Parameter("x", Role.POINT)),
    [non_negative("order"), fits_int32("order"), *_POLE_RULES],
    KernelTable(sk.polygamma, extended=extended.polygamma),
    doc="""Polygamma function of the given ``order``.

    Raises
    ------
    ParameterNotPositive
        If ``order < 0``.
    ParameterExceedsMaximumIntegerValue
        If ``order`` does not fit a signed 32-bit integer.
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    PoleAtNonPositiveInteger
        If ``x`` is ``0, -1, -2, ...``.
    """,
)

riemann_zeta = SpecialFunction(
    "riemann_zeta",
    _X,
    [
        *finite("x"),
        combination(lambda args: args["x"] != 1, "riemann_zeta has a pole at x = 1"),
    ],
    KernelTable(sk.riemann_zeta, extended=extended.riemann_zeta),
    doc="""Riemann zeta function.

    Raises
    ------
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    InvalidCombination
        At the pole ``x = 1``.
    """,
)
