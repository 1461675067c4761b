"""Legendre-Stieltjes polynomials ``E_m``.

``E_m`` is the polynomial whose zeros, together with the Legendre zeros of
degree ``m - 1``, form a Gauss-Kronrod rule. The order must be strictly
positive; unlike :data:`specfunpy.special.legendre.legendre_p_zeros`, a
non-positive order is an error here.
"""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.sequences import SelfSizedSequence
from specfunpy.validation import finite, fits_uint32, positive

_M = Parameter("m", Role.ORDER)
_ORDER_RULES = [positive("m"), fits_uint32("m")]

legendre_stieltjes = SpecialFunction(
    "legendre_stieltjes",
    (_M, Parameter("x", Role.POINT)),
    [*_ORDER_RULES, *finite("x")],
    KernelTable(sk.legendre_stieltjes, extended=extended.legendre_stieltjes),
    doc="""``E_m(x)``.

    Raises
    ------
    ParameterNotPositive
        If ``m <= 0``.
    ParameterExceedsMaximumIntegerValue
        If ``m`` does not fit an unsigned 32-bit integer.
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    """,
)

legendre_stieltjes_prime = SpecialFunction(
    "legendre_stieltjes_prime",
    (_M, Parameter("x", Role.POINT)),
    [*_ORDER_RULES, *finite("x")],
    KernelTable(
        sk.legendre_stieltjes_prime, extended=extended.legendre_stieltjes_prime
    ),
    doc="``E_m'(x)``; errors as for :data:`legendre_stieltjes`.",
)

legendre_stieltjes_norm_sq = SpecialFunction(
    "legendre_stieltjes_norm_sq",
    (_M,),
    _ORDER_RULES,
    KernelTable(
        sk.legendre_stieltjes_norm_sq, extended=extended.legendre_stieltjes_norm_sq
    ),
    doc="Squared L2 norm of ``E_m`` on ``[-1, 1]``.",
)

legendre_stieltjes_zeros = SelfSizedSequence(
    "legendre_stieltjes_zeros",
    (_M,),
    _ORDER_RULES,
    KernelTable(
        sk.legendre_stieltjes_zeros, extended=extended.legendre_stieltjes_zeros
    ),
    doc="""Non-negative zeros of ``E_m`` in ascending order.

    ``E_m`` has parity ``(-1)^m``, so the negative zeros are the mirror
    images. For odd ``m`` the first entry is ``0``.
    """,
)
