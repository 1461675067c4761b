"""Real branches of the Lambert W function."""

import numpy as np

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import at_least, finite, half_open_range


def branch_point(dtype: np.dtype):
    """``-1/e`` rounded in ``dtype``."""
    return -np.exp(dtype.type(-1))


_X = (Parameter("x", Role.POINT),)

lambert_w0 = SpecialFunction(
    "lambert_w0",
    _X,
    [*finite("x"), at_least("x", branch_point)],
    # reduced kernel so the float32 branch point is validated in float32
    KernelTable(sk.lambert_w0, reduced=sk.lambert_w0, extended=extended.lambert_w0),
    doc="""Principal branch ``W0(x)``.

    Raises
    ------
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    ParameterOutOfRange
        If ``x < -1/e``.
    """,
)

lambert_wm1 = SpecialFunction(
    "lambert_wm1",
    _X,
    [*finite("x"), half_open_range("x", branch_point, 0.0)],
    KernelTable(
        sk.lambert_wm1, reduced=sk.lambert_wm1, extended=extended.lambert_wm1
    ),
    doc="""Lower branch ``W-1(x)``.

    Raises
    ------
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    ParameterOutOfRange
        Unless ``-1/e <= x < 0``.
    """,
)
