"""Numerically careful elementary helpers."""

import numpy as np

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import at_least, combination, finite

_X = (Parameter("x", Role.POINT),)

expm1 = SpecialFunction(
    "expm1",
    _X,
    finite("x"),
    KernelTable(sk.expm1, reduced=sk.expm1, extended=extended.expm1),
    doc="``exp(x) - 1`` without cancellation near zero.",
)

log1p = SpecialFunction(
    "log1p",
    _X,
    [*finite("x"), at_least("x", -1.0, inclusive=False)],
    KernelTable(sk.log1p, reduced=sk.log1p, extended=extended.log1p),
    doc="""``log(1 + x)`` without cancellation near zero.

    Raises
    ------
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    ParameterOutOfRange
        If ``x <= -1``; the reported minimum is the next value above ``-1``.
    """,
)


def _real_power(args) -> bool:
    x, y = args["x"], args["y"]
    return not (x < 0 and y != np.floor(y))


powm1 = SpecialFunction(
    "powm1",
    (Parameter("x", Role.POINT), Parameter("y", Role.PARAMETER)),
    [
        *finite("x", "y"),
        combination(
            _real_power,
            "powm1 is undefined for negative base with non-integer exponent in the reals",
        ),
    ],
    KernelTable(sk.powm1, extended=extended.powm1),
    doc="""``x**y - 1`` without cancellation.

    Raises
    ------
    ParameterNotFinite
        If ``x`` or ``y`` is NaN or infinite.
    InvalidCombination
        If ``x < 0`` and ``y`` is not an integer.
    """,
)

cbrt = SpecialFunction(
    "cbrt",
    _X,
    finite("x"),
    KernelTable(sk.cbrt, reduced=sk.cbrt, extended=extended.cbrt),
    doc="Real cube root.",
)
