"""Bulk retrieval of zero sequences.

Two families exist:

* :class:`ExplicitCountSequence` -- the caller chooses a zero-based start
  index and a count (Airy zeros). Kernels have the signature
  ``kernel(start_index, out)`` and fill ``out`` with the zeros of rank
  ``start_index + 1, ..., start_index + len(out)``.
* :class:`SelfSizedSequence` -- the length follows from the degree or order
  (Legendre, Legendre-Stieltjes). Kernels have the signature
  ``kernel(*args, out)``; called with ``out=None`` they return the number of
  zeros, called with a buffer they fill it.

Every call allocates a fresh buffer; nothing is cached.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

import numpy as np

from specfunpy.dispatch import KernelTable, Parameter, Role, bind_arguments
from specfunpy.errors import SpecialFunctionError
from specfunpy.log import specfun_logger
from specfunpy.precision import PrecisionTier
from specfunpy.validation import (
    Rule,
    as_integer,
    fits_int32,
    fits_uint32,
    non_negative,
    validate,
)

log = specfun_logger(__name__)


class _Sequence:
    def __init__(
        self,
        name: str,
        parameters: Sequence[Parameter],
        rules: Sequence[Rule],
        kernels: KernelTable,
        *,
        doc: str | None = None,
    ):
        self.name = name
        self.parameters = tuple(parameters)
        self.rules = tuple(rules)
        self.kernels = kernels
        self.__doc__ = doc

    def __repr__(self) -> str:
        signature = ", ".join(p.name for p in self.parameters)
        return f"<{type(self).__name__} {self.name}({signature})>"

    @property
    def tiers(self) -> tuple[PrecisionTier, ...]:
        return self.kernels.tiers

    def _prepare(self, args, kwargs, precision) -> tuple[dict, PrecisionTier]:
        bound = bind_arguments(self.name, self.parameters, args, kwargs)
        tier = PrecisionTier.parse(precision)
        arguments = {}
        for p in self.parameters:
            value = bound[p.name]
            arguments[p.name] = (
                tier.cast(value) if p.role.continuous else as_integer(p.name, value)
            )
        try:
            validate(self.rules, arguments, tier)
        except SpecialFunctionError as exc:
            log.debug("%s rejected %s: %r", self.name, arguments, exc)
            raise
        return arguments, tier

    def _kernel_for(self, tier: PrecisionTier) -> tuple[Callable, PrecisionTier]:
        kernel = self.kernels.get(tier)
        if kernel is None:
            log.debug("%s: generic path for %s caller", self.name, tier.value)
            return self.kernels.standard, PrecisionTier.STANDARD
        return kernel, tier


class ExplicitCountSequence(_Sequence):
    """Zeros selected by a zero-based start index and a count.

    ``start_index`` must be ``>= 0`` and fit a signed 32-bit integer; ``count``
    must be ``>= 0`` and fit an unsigned 32-bit integer. A count of zero
    returns an empty array without touching the kernel.
    """

    def __init__(
        self,
        name: str,
        kernels: KernelTable,
        rules: Sequence[Rule] = (),
        *,
        doc: str | None = None,
    ):
        parameters = (
            Parameter("start_index", Role.INDEX),
            Parameter("count", Role.COUNT),
        )
        base_rules = [
            non_negative("start_index"),
            non_negative("count"),
            fits_int32("start_index"),
            fits_uint32("count"),
        ]
        super().__init__(name, parameters, [*base_rules, *rules], kernels, doc=doc)

    def __call__(
        self,
        start_index: int,
        count: int,
        *,
        precision: PrecisionTier | str = PrecisionTier.STANDARD,
    ) -> np.ndarray:
        arguments, tier = self._prepare((start_index, count), {}, precision)
        count = arguments["count"]
        if count == 0:
            return np.empty(0, dtype=tier.dtype)
        kernel, kernel_tier = self._kernel_for(tier)
        out = np.empty(count, dtype=kernel_tier.dtype)
        kernel(arguments["start_index"], out)
        return out.astype(tier.dtype, copy=False)


class SelfSizedSequence(_Sequence):
    """Zeros whose number is determined by the function's own arguments.

    Parameters
    ----------
    empty_when:
        Optional predicate on the validated arguments. When it holds, an empty
        array is returned without calling the kernel (Legendre degree ``<= 0``).
    """

    def __init__(
        self,
        name: str,
        parameters: Sequence[Parameter],
        rules: Sequence[Rule],
        kernels: KernelTable,
        *,
        empty_when: Callable[[dict[str, Any]], bool] | None = None,
        doc: str | None = None,
    ):
        super().__init__(name, parameters, rules, kernels, doc=doc)
        self.empty_when = empty_when

    def __call__(
        self, *args, precision: PrecisionTier | str = PrecisionTier.STANDARD, **kwargs
    ) -> np.ndarray:
        arguments, tier = self._prepare(args, kwargs, precision)
        if self.empty_when is not None and self.empty_when(arguments):
            return np.empty(0, dtype=tier.dtype)
        kernel, kernel_tier = self._kernel_for(tier)
        values = list(arguments.values())
        count = int(kernel(*values, None))
        out = np.empty(count, dtype=kernel_tier.dtype)
        if count:
            kernel(*values, out)
        return out.astype(tier.dtype, copy=False)
