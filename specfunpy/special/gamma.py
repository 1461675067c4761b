"""Gamma and log-gamma."""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import finite, not_pole

_X = (Parameter("x", Role.POINT),)

gamma = SpecialFunction(
    "gamma",
    _X,
    [*finite("x"), not_pole("x")],
    KernelTable(sk.gamma, reduced=sk.gamma, extended=extended.gamma),
    doc="""Gamma function.

    Raises
    ------
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    PoleAtNonPositiveInteger
        If ``x`` is ``0, -1, -2, ...``.
    """,
)

log_gamma = SpecialFunction(
    "log_gamma",
    _X,
    [*finite("x"), not_pole("x")],
    KernelTable(sk.log_gamma, reduced=sk.log_gamma, extended=extended.log_gamma),
    doc="``log|Gamma(x)|``; errors as for :data:`gamma`.",
)
