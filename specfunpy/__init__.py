from .errors import (
    InvalidCombination,
    ParameterExceedsMaximumIntegerValue,
    ParameterNotFinite,
    ParameterNotPositive,
    ParameterOutOfRange,
    PoleAtNonPositiveInteger,
    SpecialFunctionError,
)
from .precision import EXTENDED_AVAILABLE, PrecisionTier, available_tiers, tier_of
from .special import (
    airy_ai,
    airy_ai_prime,
    airy_ai_zero,
    airy_ai_zeros,
    airy_bi,
    airy_bi_prime,
    airy_bi_zero,
    airy_bi_zeros,
    assoc_laguerre,
    associated_legendre_p,
    cardinal_b_spline,
    cardinal_b_spline_double_prime,
    cardinal_b_spline_prime,
    cbrt,
    chebyshev_t,
    chebyshev_u,
    digamma,
    expm1,
    gamma,
    gegenbauer,
    gegenbauer_derivative,
    gegenbauer_prime,
    hermite,
    hermite_next,
    laguerre,
    lambert_w0,
    lambert_wm1,
    legendre_p,
    legendre_p_prime,
    legendre_p_zeros,
    legendre_stieltjes,
    legendre_stieltjes_norm_sq,
    legendre_stieltjes_prime,
    legendre_stieltjes_zeros,
    log1p,
    log_gamma,
    polygamma,
    powm1,
    riemann_zeta,
    spherical_harmonic,
    spherical_harmonic_i,
    spherical_harmonic_r,
    trigamma,
)

__version__ = "0.1.0"
