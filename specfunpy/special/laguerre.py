"""Laguerre and associated Laguerre polynomials."""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import finite, fits_uint32, non_negative

laguerre = SpecialFunction(
    "laguerre",
    (Parameter("n", Role.DEGREE), Parameter("x", Role.POINT)),
    [non_negative("n"), fits_uint32("n"), *finite("x")],
    KernelTable(sk.laguerre, extended=extended.laguerre),
    doc="Laguerre polynomial ``L_n(x)``.",
)

assoc_laguerre = SpecialFunction(
    "assoc_laguerre",
    (
        Parameter("n", Role.DEGREE),
        Parameter("m", Role.ORDER),
        Parameter("x", Role.POINT),
    ),
    [
        non_negative("n"),
        non_negative("m"),
        fits_uint32("n"),
        fits_uint32("m"),
        *finite("x"),
    ],
    KernelTable(sk.assoc_laguerre, extended=extended.assoc_laguerre),
    doc="""Associated Laguerre polynomial ``L_n^m(x)``.

    Raises
    ------
    ParameterNotPositive
        If ``n < 0`` or ``m < 0``.
    ParameterExceedsMaximumIntegerValue
        If ``n`` or ``m`` does not fit an unsigned 32-bit integer.
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    """,
)
