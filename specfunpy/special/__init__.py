"""Public special-function families."""

from .airy import (
    airy_ai,
    airy_ai_prime,
    airy_ai_zero,
    airy_ai_zeros,
    airy_bi,
    airy_bi_prime,
    airy_bi_zero,
    airy_bi_zeros,
)
from .cardinal_b_splines import (
    cardinal_b_spline,
    cardinal_b_spline_double_prime,
    cardinal_b_spline_prime,
)
from .chebyshev import chebyshev_t, chebyshev_u
from .common import cbrt, expm1, log1p, powm1
from .digamma_polygamma import digamma, polygamma, riemann_zeta, trigamma
from .gamma import gamma, log_gamma
from .gegenbauer import gegenbauer, gegenbauer_derivative, gegenbauer_prime
from .hermite import hermite, hermite_next
from .laguerre import assoc_laguerre, laguerre
from .lambert_w import lambert_w0, lambert_wm1
from .legendre import (
    associated_legendre_p,
    legendre_p,
    legendre_p_prime,
    legendre_p_zeros,
)
from .legendre_stieltjes import (
    legendre_stieltjes,
    legendre_stieltjes_norm_sq,
    legendre_stieltjes_prime,
    legendre_stieltjes_zeros,
)
from .spherical_harmonics import (
    spherical_harmonic,
    spherical_harmonic_i,
    spherical_harmonic_r,
)
