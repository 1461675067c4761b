"""
Numerical kernels behind the public functions.

``scipy_kernels`` serves the standard and reduced tiers, ``extended`` the
80-bit long double tier, ``cpu_numba`` holds the shared recurrences.
"""
