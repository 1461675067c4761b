"""Mixed-precision promotion for multi-argument calls."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

import numpy as np

from specfunpy.precision import PrecisionTier, tier_of


def resolve_tier(
    values: Iterable[Any], *, default: PrecisionTier = PrecisionTier.STANDARD
) -> PrecisionTier:
    """Return the highest tier among the continuous arguments.

    ``default`` is returned when no argument is given, e.g. for functions whose
    only parameters are integer orders.
    """
    tiers = [tier_of(value) for value in values]
    if not tiers:
        return default
    return max(tiers, key=lambda tier: tier.rank)


def promote(values: Sequence[Any], tier: PrecisionTier) -> tuple:
    """Convert every continuous argument to ``tier``.

    Widening is exact; narrowing rounds to nearest. A finite value beyond the
    range of ``tier`` becomes infinite without a warning; callers detect it
    with :func:`overflowed`.
    """
    with np.errstate(over="ignore"):
        return tuple(tier.cast(value) for value in values)


def overflowed(original: Any, promoted: Any) -> bool:
    """Whether a finite ``original`` left the range of its promoted type."""
    return bool(np.isfinite(original) and not np.isfinite(promoted))


def promote_mixed(values: Sequence[Any]) -> tuple[PrecisionTier, tuple]:
    """Resolve the evaluation tier and promote all arguments to it."""
    tier = resolve_tier(values)
    return tier, promote(values, tier)
