"""Chebyshev polynomials of the first and second kind."""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import finite, fits_uint32, non_negative

_NX = (Parameter("n", Role.DEGREE), Parameter("x", Role.POINT))
_RULES = [non_negative("n"), fits_uint32("n"), *finite("x")]

chebyshev_t = SpecialFunction(
    "chebyshev_t",
    _NX,
    _RULES,
    KernelTable(sk.chebyshev_t, extended=extended.chebyshev_t),
    doc="Chebyshev polynomial of the first kind ``T_n(x)``.",
)

chebyshev_u = SpecialFunction(
    "chebyshev_u",
    _NX,
    _RULES,
    KernelTable(sk.chebyshev_u, extended=extended.chebyshev_u),
    doc="Chebyshev polynomial of the second kind ``U_n(x)``.",
)
