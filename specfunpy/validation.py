"""Domain validation for special-function arguments.

The ``check_*`` functions are pure: they either return the (possibly
converted) argument or raise one of the :mod:`specfunpy.errors` classes.

Functions declare their constraints as :class:`Rule` objects. :func:`validate`
runs them in phase order so the reported error is deterministic when several
constraints are violated at once:

1. ``STRUCTURAL`` -- integer sign and fixed-width bounds,
2. ``FINITENESS`` -- NaN / infinity checks,
3. ``DOMAIN``     -- ranges, poles and joint constraints.

Within a phase, rules run in declaration order.
"""

from __future__ import annotations

import enum
import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

import numpy as np

from specfunpy.errors import (
    INT32_MAX,
    UINT32_MAX,
    InvalidCombination,
    ParameterExceedsMaximumIntegerValue,
    ParameterNotFinite,
    ParameterNotPositive,
    ParameterOutOfRange,
    PoleAtNonPositiveInteger,
)
from specfunpy.precision import PrecisionTier


class Phase(enum.IntEnum):
    STRUCTURAL = 0
    FINITENESS = 1
    DOMAIN = 2


def as_integer(name: str, value: Any) -> int:
    """Return ``value`` as a Python ``int``.

    Raises
    ------
    TypeError
        If ``value`` is not an integral type. Integral floats (``3.0``) are
        rejected as well: integer roles are part of the call signature.
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError(f"parameter '{name}' must be an integer, got bool")
    if isinstance(value, numbers.Integral):
        return int(value)
    raise TypeError(
        f"parameter '{name}' must be an integer, got {type(value).__name__}"
    )


def check_finite(name: str, x):
    if not np.isfinite(x):
        raise ParameterNotFinite(name, float(x))
    return x


def _bound(value) -> float:
    return float(value)


def check_closed_range(name: str, x, lo, hi):
    """``lo <= x <= hi``."""
    if not (lo <= x <= hi):
        raise ParameterOutOfRange(name, _bound(lo), _bound(hi))
    return x


def check_half_open_range(name: str, x, lo, hi):
    """``lo <= x < hi``."""
    if not (lo <= x < hi):
        raise ParameterOutOfRange(name, _bound(lo), _bound(hi))
    return x


def check_lower_bound(name: str, x, lo, *, inclusive: bool = True):
    """``x >= lo`` (or ``x > lo``); the reported upper bound is ``inf``."""
    ok = x >= lo if inclusive else x > lo
    if not ok:
        reported = lo if inclusive else np.nextafter(lo, type(lo)(math.inf))
        raise ParameterOutOfRange(name, _bound(reported), math.inf)
    return x


def check_non_negative_integer(name: str, n) -> int:
    n = as_integer(name, n)
    if n < 0:
        raise ParameterNotPositive(name)
    return n


def check_positive_integer(name: str, n) -> int:
    n = as_integer(name, n)
    if n <= 0:
        raise ParameterNotPositive(name)
    return n


def check_bounded_index(name: str, n, maximum: int = INT32_MAX):
    """Fit ``n`` into the fixed-width integer type the backend expects.

    Returns a :class:`numpy.int32` for ``maximum == INT32_MAX`` and a
    :class:`numpy.uint32` for ``maximum == UINT32_MAX``; other maxima return a
    plain ``int``.
    """
    n = as_integer(name, n)
    if n > maximum:
        raise ParameterExceedsMaximumIntegerValue(name, maximum)
    if maximum == INT32_MAX and n >= -INT32_MAX - 1:
        return np.int32(n)
    if maximum == UINT32_MAX and n >= 0:
        return np.uint32(n)
    return n


def is_pole(x) -> bool:
    return bool(np.isfinite(x) and x <= 0 and x == np.floor(x))


def check_not_pole(name: str, x):
    """Reject ``x`` in ``{0, -1, -2, ...}``."""
    if is_pole(x):
        raise PoleAtNonPositiveInteger(name)
    return x


def check_order_magnitude(n: int, m: int, name: str = "m") -> int:
    """``|m| <= n`` for associated functions of degree ``n``."""
    if abs(m) > n:
        raise ParameterOutOfRange(name, float(-n), float(n))
    return m


def check_representable(name: str, x, tier: PrecisionTier):
    """Reject a value that overflowed on conversion to ``tier``."""
    if not np.isfinite(x):
        largest = float(np.finfo(tier.dtype).max)
        raise ParameterOutOfRange(name, -largest, largest)
    return x


def check_combination(condition: bool, message: str) -> None:
    if not condition:
        raise InvalidCombination(message)


Bound = Callable[[np.dtype], Any] | float


def _resolve_bound(bound: Bound, tier: PrecisionTier):
    if callable(bound):
        return bound(tier.dtype)
    return tier.cast(bound)


@dataclass(frozen=True)
class Rule:
    """One declarative constraint on named arguments."""

    phase: Phase
    check: Callable[[Mapping[str, Any], PrecisionTier], None]
    label: str = field(default="")

    def __call__(self, arguments: Mapping[str, Any], tier: PrecisionTier) -> None:
        self.check(arguments, tier)


def non_negative(name: str) -> Rule:
    return Rule(
        Phase.STRUCTURAL,
        lambda args, tier: check_non_negative_integer(name, args[name]),
        f"{name} >= 0",
    )


def positive(name: str) -> Rule:
    return Rule(
        Phase.STRUCTURAL,
        lambda args, tier: check_positive_integer(name, args[name]),
        f"{name} > 0",
    )


def fits_int32(name: str) -> Rule:
    return Rule(
        Phase.STRUCTURAL,
        lambda args, tier: check_bounded_index(name, args[name], INT32_MAX),
        f"{name} <= {INT32_MAX}",
    )


def fits_uint32(name: str) -> Rule:
    return Rule(
        Phase.STRUCTURAL,
        lambda args, tier: check_bounded_index(name, args[name], UINT32_MAX),
        f"{name} <= {UINT32_MAX}",
    )


def integer_at_most(name: str, maximum: int, minimum: int = 0) -> Rule:
    """Structural upper bound reported as a range, e.g. supported orders."""

    def check(args, tier):
        n = as_integer(name, args[name])
        if n > maximum:
            raise ParameterOutOfRange(name, float(minimum), float(maximum))

    return Rule(Phase.STRUCTURAL, check, f"{name} <= {maximum}")


def integer_at_least(name: str, minimum: int) -> Rule:
    """Structural lower bound reported as ``[minimum, inf)``."""

    def check(args, tier):
        n = as_integer(name, args[name])
        if n < minimum:
            raise ParameterOutOfRange(name, float(minimum), math.inf)

    return Rule(Phase.STRUCTURAL, check, f"{name} >= {minimum}")


def finite(*names: str) -> list[Rule]:
    return [
        Rule(
            Phase.FINITENESS,
            lambda args, tier, name=name: check_finite(name, args[name]),
            f"{name} finite",
        )
        for name in names
    ]


def representable(name: str) -> Rule:
    return Rule(
        Phase.FINITENESS,
        lambda args, tier: check_representable(name, args[name], tier),
        f"{name} representable",
    )


def closed_range(name: str, lo: Bound, hi: Bound) -> Rule:
    return Rule(
        Phase.DOMAIN,
        lambda args, tier: check_closed_range(
            name, args[name], _resolve_bound(lo, tier), _resolve_bound(hi, tier)
        ),
        f"{name} in [lo, hi]",
    )


def half_open_range(name: str, lo: Bound, hi: Bound) -> Rule:
    return Rule(
        Phase.DOMAIN,
        lambda args, tier: check_half_open_range(
            name, args[name], _resolve_bound(lo, tier), _resolve_bound(hi, tier)
        ),
        f"{name} in [lo, hi)",
    )


def at_least(name: str, lo: Bound, *, inclusive: bool = True) -> Rule:
    return Rule(
        Phase.DOMAIN,
        lambda args, tier: check_lower_bound(
            name, args[name], _resolve_bound(lo, tier), inclusive=inclusive
        ),
        f"{name} >= lo",
    )


def not_pole(name: str) -> Rule:
    return Rule(
        Phase.DOMAIN,
        lambda args, tier: check_not_pole(name, args[name]),
        f"{name} not a pole",
    )


def order_within_degree(n: str, m: str) -> Rule:
    return Rule(
        Phase.DOMAIN,
        lambda args, tier: check_order_magnitude(int(args[n]), int(args[m]), m),
        f"|{m}| <= {n}",
    )


def combination(
    predicate: Callable[[Mapping[str, Any]], bool], message: str
) -> Rule:
    return Rule(
        Phase.DOMAIN,
        lambda args, tier: check_combination(predicate(args), message),
        message,
    )


def validate(
    rules: Sequence[Rule], arguments: Mapping[str, Any], tier: PrecisionTier
) -> None:
    """Run ``rules`` against ``arguments`` in phase order.

    ``sorted`` is stable, so rules of one phase keep their declaration order.
    """
    for rule in sorted(rules, key=lambda rule: rule.phase):
        rule(arguments, tier)
