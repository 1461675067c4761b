"""Airy functions Ai, Bi, their derivatives and their zeros.

Zero indices are zero-based: index ``0`` selects the first (largest,
closest to the origin) zero. All zeros of Ai and Bi are negative and are
returned in rank order, i.e. with increasing magnitude.
"""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.sequences import ExplicitCountSequence
from specfunpy.validation import finite, fits_int32, non_negative

_X = (Parameter("x", Role.POINT),)
_INDEX = (Parameter("index", Role.INDEX),)
_INDEX_RULES = [non_negative("index"), fits_int32("index")]


def _pointwise(name, kernel, extended_kernel, doc):
    return SpecialFunction(
        name,
        _X,
        finite("x"),
        KernelTable(kernel, reduced=kernel, extended=extended_kernel),
        doc=doc,
    )


airy_ai = _pointwise(
    "airy_ai",
    sk.airy_ai,
    extended.airy_ai,
    "Airy function Ai(x). Raises ParameterNotFinite for NaN or infinite x.",
)
airy_bi = _pointwise(
    "airy_bi",
    sk.airy_bi,
    extended.airy_bi,
    "Airy function Bi(x). Raises ParameterNotFinite for NaN or infinite x.",
)
airy_ai_prime = _pointwise(
    "airy_ai_prime",
    sk.airy_ai_prime,
    extended.airy_ai_prime,
    "Derivative Ai'(x). Raises ParameterNotFinite for NaN or infinite x.",
)
airy_bi_prime = _pointwise(
    "airy_bi_prime",
    sk.airy_bi_prime,
    extended.airy_bi_prime,
    "Derivative Bi'(x). Raises ParameterNotFinite for NaN or infinite x.",
)

airy_ai_zero = SpecialFunction(
    "airy_ai_zero",
    _INDEX,
    _INDEX_RULES,
    KernelTable(sk.airy_ai_zero, extended=extended.airy_ai_zero),
    doc="""Zero of Ai with zero-based ``index``.

    Raises
    ------
    ParameterNotPositive
        If ``index < 0``.
    ParameterExceedsMaximumIntegerValue
        If ``index`` does not fit a signed 32-bit integer.
    """,
)
airy_bi_zero = SpecialFunction(
    "airy_bi_zero",
    _INDEX,
    _INDEX_RULES,
    KernelTable(sk.airy_bi_zero, extended=extended.airy_bi_zero),
    doc="Zero of Bi with zero-based ``index``; errors as for :data:`airy_ai_zero`.",
)

airy_ai_zeros = ExplicitCountSequence(
    "airy_ai_zeros",
    KernelTable(sk.airy_ai_zeros, extended=extended.airy_ai_zeros),
    doc="""``count`` consecutive zeros of Ai starting at zero-based ``start_index``.

    Raises
    ------
    ParameterNotPositive
        If ``start_index`` or ``count`` is negative.
    ParameterExceedsMaximumIntegerValue
        If ``start_index`` exceeds the int32 range or ``count`` the uint32
        range.
    """,
)
airy_bi_zeros = ExplicitCountSequence(
    "airy_bi_zeros",
    KernelTable(sk.airy_bi_zeros, extended=extended.airy_bi_zeros),
    doc="``count`` consecutive zeros of Bi; errors as for :data:`airy_ai_zeros`.",
)
