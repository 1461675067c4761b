"""Gegenbauer (ultraspherical) polynomials and their derivatives."""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import at_least, finite, fits_uint32, non_negative

_PARAMETERS = (
    Parameter("n", Role.DEGREE),
    Parameter("lam", Role.PARAMETER),
    Parameter("x", Role.POINT),
)
_CONTINUOUS_RULES = [*finite("lam", "x"), at_least("lam", -0.5, inclusive=False)]

gegenbauer = SpecialFunction(
    "gegenbauer",
    _PARAMETERS,
    [non_negative("n"), fits_uint32("n"), *_CONTINUOUS_RULES],
    KernelTable(sk.gegenbauer, extended=extended.gegenbauer),
    doc="""Gegenbauer polynomial ``C_n^(lam)(x)``.

    Raises
    ------
    ParameterNotPositive
        If ``n < 0``.
    ParameterExceedsMaximumIntegerValue
        If ``n`` does not fit an unsigned 32-bit integer.
    ParameterNotFinite
        If ``lam`` or ``x`` is NaN or infinite (``lam`` is checked first).
    ParameterOutOfRange
        If ``lam <= -1/2``.
    """,
)

gegenbauer_prime = SpecialFunction(
    "gegenbauer_prime",
    _PARAMETERS,
    [non_negative("n"), fits_uint32("n"), *_CONTINUOUS_RULES],
    KernelTable(sk.gegenbauer_prime, extended=extended.gegenbauer_prime),
    doc="First derivative in ``x``; errors as for :data:`gegenbauer`.",
)

gegenbauer_derivative = SpecialFunction(
    "gegenbauer_derivative",
    (*_PARAMETERS, Parameter("k", Role.ORDER)),
    [
        non_negative("n"),
        non_negative("k"),
        fits_uint32("n"),
        fits_uint32("k"),
        *_CONTINUOUS_RULES,
    ],
    KernelTable(sk.gegenbauer_derivative, extended=extended.gegenbauer_derivative),
    doc="""``k``-th derivative in ``x``: ``2^k (lam)_k C_{n-k}^(lam+k)(x)``.

    Zero for ``k > n``. Errors as for :data:`gegenbauer`, with ``k`` checked
    like ``n``.
    """,
)
