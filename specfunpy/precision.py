"""Floating-point precision tiers.

Three tiers are supported:

* ``REDUCED``  -- IEEE binary32 (:class:`numpy.float32`)
* ``STANDARD`` -- IEEE binary64 (:class:`numpy.float64`)
* ``EXTENDED`` -- x87 80-bit extended (:class:`numpy.longdouble` on x86 builds)

The extended tier is gated once at import time. ``LONGDOUBLE_IS_X87`` reports
whether the platform ``long double`` has the 64-bit mantissa layout, and
``EXTENDED_AVAILABLE`` additionally honours ``SPECFUNPY_DISABLE_EXTENDED``.
"""

from __future__ import annotations

import enum
import numbers
from typing import Any

import numpy as np

from specfunpy.env import DISABLE_EXTENDED, parse_bool_env
from specfunpy.log import specfun_logger

log = specfun_logger(__name__)

_LONGDOUBLE_INFO = np.finfo(np.longdouble)
LONGDOUBLE_IS_X87 = _LONGDOUBLE_INFO.nmant == 63
LONGDOUBLE_IS_DOUBLE = _LONGDOUBLE_INFO.nmant == 52
EXTENDED_AVAILABLE = LONGDOUBLE_IS_X87 and not parse_bool_env(
    DISABLE_EXTENDED, default=False
)

if EXTENDED_AVAILABLE:
    log.info("Extended tier enabled (long double mantissa: 64 bits)")
elif LONGDOUBLE_IS_X87:
    log.info("Extended tier disabled through %s", DISABLE_EXTENDED)
else:
    log.info(
        "Extended tier unavailable (long double mantissa: %d bits)",
        _LONGDOUBLE_INFO.nmant + 1,
    )


class PrecisionTier(enum.Enum):
    REDUCED = "reduced"
    STANDARD = "standard"
    EXTENDED = "extended"

    @property
    def rank(self) -> int:
        return _RANK[self]

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(_REAL[self])

    @property
    def complex_dtype(self) -> np.dtype:
        return np.dtype(_COMPLEX[self])

    @property
    def mantissa_bits(self) -> int:
        return np.finfo(self.dtype).nmant + 1

    @property
    def eps(self):
        return np.finfo(self.dtype).eps

    @property
    def available(self) -> bool:
        return self is not PrecisionTier.EXTENDED or EXTENDED_AVAILABLE

    def __lt__(self, other: "PrecisionTier") -> bool:
        if not isinstance(other, PrecisionTier):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "PrecisionTier") -> bool:
        if not isinstance(other, PrecisionTier):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: "PrecisionTier") -> bool:
        if not isinstance(other, PrecisionTier):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: "PrecisionTier") -> bool:
        if not isinstance(other, PrecisionTier):
            return NotImplemented
        return self.rank >= other.rank

    def cast(self, value: Any):
        """Convert a scalar to this tier's real scalar type."""
        return self.dtype.type(value)

    def cast_complex(self, value: Any):
        return self.complex_dtype.type(value)

    def convert_result(self, value: Any):
        """Convert a kernel result (scalar or array) to this tier.

        Complex scalars and arrays keep their complex kind; everything else is
        cast to the real dtype.
        """
        if isinstance(value, np.ndarray) and value.ndim > 0:
            if np.iscomplexobj(value):
                return value.astype(self.complex_dtype, copy=False)
            return value.astype(self.dtype, copy=False)
        if isinstance(value, np.ndarray):
            value = value[()]
        if np.iscomplexobj(value):
            return self.cast_complex(value)
        return self.cast(value)

    @classmethod
    def parse(cls, value: "PrecisionTier | str") -> "PrecisionTier":
        """Accept a tier or its (case-insensitive) name."""
        if isinstance(value, PrecisionTier):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown precision tier {value!r}; expected one of "
                f"{[t.value for t in cls]}"
            ) from None


_RANK = {
    PrecisionTier.REDUCED: 0,
    PrecisionTier.STANDARD: 1,
    PrecisionTier.EXTENDED: 2,
}
_REAL = {
    PrecisionTier.REDUCED: np.float32,
    PrecisionTier.STANDARD: np.float64,
    PrecisionTier.EXTENDED: np.longdouble,
}
_COMPLEX = {
    PrecisionTier.REDUCED: np.complex64,
    PrecisionTier.STANDARD: np.complex128,
    PrecisionTier.EXTENDED: np.clongdouble,
}


def available_tiers() -> list[PrecisionTier]:
    return [tier for tier in PrecisionTier if tier.available]


def tier_of(value: Any) -> PrecisionTier:
    """Return the precision tier a continuous argument arrives in.

    Parameters
    ----------
    value:
        A real scalar. Python ``float``/``int`` and :class:`numpy.float64`
        map to ``STANDARD``, :class:`numpy.float32` to ``REDUCED`` and
        :class:`numpy.longdouble` to ``EXTENDED`` (or ``STANDARD`` where the
        platform ``long double`` is the same as ``double``).

    Raises
    ------
    TypeError
        For other floating formats (half precision, IEEE quad, double-double)
        and for non-numeric values.
    """
    if isinstance(value, np.generic):
        if isinstance(value, np.float32):
            return PrecisionTier.REDUCED
        if isinstance(value, np.float64):
            return PrecisionTier.STANDARD
        if isinstance(value, np.longdouble):
            if LONGDOUBLE_IS_X87:
                return PrecisionTier.EXTENDED
            if LONGDOUBLE_IS_DOUBLE:
                return PrecisionTier.STANDARD
            raise TypeError(
                f"Unsupported long double layout ({_LONGDOUBLE_INFO.nmant + 1}-bit mantissa)"
            )
        if isinstance(value, np.integer):
            return PrecisionTier.STANDARD
        raise TypeError(f"Unsupported floating format {value.dtype}")
    if isinstance(value, bool):
        raise TypeError("Boolean values are not valid real arguments")
    if isinstance(value, numbers.Real):
        return PrecisionTier.STANDARD
    raise TypeError(f"Expected a real scalar, got {type(value).__name__}")
