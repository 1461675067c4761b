"""Centered cardinal B-splines of order 0 to 20 on ``[-1, 1]``."""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import (
    closed_range,
    finite,
    integer_at_least,
    integer_at_most,
    non_negative,
)

MAX_ORDER = 20

_PARAMETERS = (Parameter("n", Role.DEGREE), Parameter("x", Role.POINT))
_DOMAIN = [*finite("x"), closed_range("x", -1.0, 1.0)]

cardinal_b_spline = SpecialFunction(
    "cardinal_b_spline",
    _PARAMETERS,
    [non_negative("n"), integer_at_most("n", MAX_ORDER), *_DOMAIN],
    KernelTable(sk.cardinal_b_spline, extended=extended.cardinal_b_spline),
    doc="""Cardinal B-spline ``B_n(x)``.

    Raises
    ------
    ParameterNotPositive
        If ``n < 0``.
    ParameterOutOfRange
        If ``n > 20`` (name ``"n"``) or ``x`` lies outside ``[-1, 1]``
        (name ``"x"``).
    ParameterNotFinite
        If ``x`` is NaN or infinite.
    """,
)

_DERIVATIVE_RULES = [
    non_negative("n"),
    integer_at_least("n", 3),
    integer_at_most("n", MAX_ORDER),
    *_DOMAIN,
]

cardinal_b_spline_prime = SpecialFunction(
    "cardinal_b_spline_prime",
    _PARAMETERS,
    _DERIVATIVE_RULES,
    KernelTable(sk.cardinal_b_spline_prime, extended=extended.cardinal_b_spline_prime),
    doc="First derivative of :data:`cardinal_b_spline`; requires ``3 <= n <= 20``.",
)

cardinal_b_spline_double_prime = SpecialFunction(
    "cardinal_b_spline_double_prime",
    _PARAMETERS,
    _DERIVATIVE_RULES,
    KernelTable(
        sk.cardinal_b_spline_double_prime,
        extended=extended.cardinal_b_spline_double_prime,
    ),
    doc="Second derivative of :data:`cardinal_b_spline`; requires ``3 <= n <= 20``.",
)
