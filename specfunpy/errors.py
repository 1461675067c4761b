"""Validation failures raised by every special-function entry point.

The taxonomy is closed: each public function documents the subset of the
classes below it can raise. All of them derive from
:class:`SpecialFunctionError`, itself a :class:`ValueError`, so callers that
only care about "bad input" can catch one type.

Errors compare structurally (same class, same fields) so tests and batch
reports can match on them directly.
"""

from __future__ import annotations

import math
from typing import Any

INT32_MAX = 2**31 - 1
UINT32_MAX = 2**32 - 1


def _same(a: Any, b: Any) -> bool:
    try:
        if math.isnan(a) and math.isnan(b):
            return True
    except TypeError:
        pass
    return a == b


class SpecialFunctionError(ValueError):
    """Base class of all domain validation failures."""

    _fields: tuple[str, ...] = ()

    def __init__(self, *args: Any) -> None:
        if len(args) != len(self._fields):
            raise TypeError(
                f"{type(self).__name__} expects {len(self._fields)} arguments, got {len(args)}"
            )
        for field, value in zip(self._fields, args):
            object.__setattr__(self, field, value)
        super().__init__(self._message())

    def __setattr__(self, key: str, value: Any) -> None:
        if key in self._fields:
            raise AttributeError(f"{type(self).__name__}.{key} is read-only")
        super().__setattr__(key, value)

    def _message(self) -> str:
        return type(self).__name__

    @property
    def fields(self) -> dict[str, Any]:
        return {field: getattr(self, field) for field in self._fields}

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return all(
            _same(getattr(self, field), getattr(other, field))
            for field in self._fields
        )

    def __hash__(self) -> int:
        # NaN hashes differ between objects, so hash NaN as a fixed token.
        values = tuple(
            "nan" if _same(v, math.nan) else v
            for v in (getattr(self, field) for field in self._fields)
        )
        return hash((type(self).__name__, values))

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self.fields.items())
        return f"{type(self).__name__}({inner})"

    def __reduce__(self):
        return type(self), tuple(getattr(self, field) for field in self._fields)


class ParameterNotPositive(SpecialFunctionError):
    """An integer parameter violates its ``>= 0`` or ``> 0`` bound."""

    _fields = ("name",)

    def _message(self) -> str:
        return f"parameter '{self.name}' must be positive"


class ParameterOutOfRange(SpecialFunctionError):
    """A parameter lies outside the interval its real branch requires.

    ``min``/``max`` carry the violated bounds; an unbounded side is reported as
    ``-inf``/``inf``.
    """

    _fields = ("name", "min", "max")

    def _message(self) -> str:
        return f"parameter '{self.name}' must lie in [{self.min}, {self.max}]"


class ParameterNotFinite(SpecialFunctionError):
    """NaN or infinite input."""

    _fields = ("name", "value")

    def _message(self) -> str:
        return f"parameter '{self.name}' must be finite, got {self.value}"


class PoleAtNonPositiveInteger(SpecialFunctionError):
    """The evaluation point sits on a pole at ``0, -1, -2, ...``."""

    _fields = ("name",)

    def _message(self) -> str:
        return f"parameter '{self.name}' is a pole (non-positive integer)"


class InvalidCombination(SpecialFunctionError):
    """Individually valid parameters that are jointly invalid."""

    _fields = ("message",)

    def _message(self) -> str:
        return self.message


class ParameterExceedsMaximumIntegerValue(SpecialFunctionError):
    """An integer parameter does not fit the backend's fixed-width type."""

    _fields = ("name", "max")

    def _message(self) -> str:
        return f"parameter '{self.name}' exceeds the maximum integer value {self.max}"


__all__ = [
    "INT32_MAX",
    "UINT32_MAX",
    "SpecialFunctionError",
    "ParameterNotPositive",
    "ParameterOutOfRange",
    "ParameterNotFinite",
    "PoleAtNonPositiveInteger",
    "InvalidCombination",
    "ParameterExceedsMaximumIntegerValue",
]
