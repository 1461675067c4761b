"""Spherical harmonics ``Y_n^m(theta, phi)``.

``theta`` is the polar angle and ``phi`` the azimuth. Orders with
``|m| > n`` evaluate to zero.
"""

from specfunpy.dispatch import KernelTable, Parameter, Role, SpecialFunction
from specfunpy.functions import extended
from specfunpy.functions import scipy_kernels as sk
from specfunpy.validation import finite, fits_uint32, non_negative

_PARAMETERS = (
    Parameter("n", Role.DEGREE),
    Parameter("m", Role.ORDER),
    Parameter("theta", Role.ANGLE),
    Parameter("phi", Role.ANGLE),
)
_RULES = [non_negative("n"), fits_uint32("n"), *finite("theta", "phi")]

spherical_harmonic = SpecialFunction(
    "spherical_harmonic",
    _PARAMETERS,
    _RULES,
    KernelTable(sk.spherical_harmonic, extended=extended.spherical_harmonic),
    doc="""Complex spherical harmonic.

    Raises
    ------
    ParameterNotPositive
        If ``n < 0``.
    ParameterExceedsMaximumIntegerValue
        If ``n`` does not fit an unsigned 32-bit integer.
    ParameterNotFinite
        If ``theta`` or ``phi`` is NaN or infinite.
    """,
)

spherical_harmonic_r = SpecialFunction(
    "spherical_harmonic_r",
    _PARAMETERS,
    _RULES,
    KernelTable(sk.spherical_harmonic_r, extended=extended.spherical_harmonic_r),
    doc="Real part of :data:`spherical_harmonic`.",
)

spherical_harmonic_i = SpecialFunction(
    "spherical_harmonic_i",
    _PARAMETERS,
    _RULES,
    KernelTable(sk.spherical_harmonic_i, extended=extended.spherical_harmonic_i),
    doc="Imaginary part of :data:`spherical_harmonic`.",
)
