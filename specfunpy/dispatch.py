"""Precision dispatch for scalar special functions.

A :class:`SpecialFunction` bundles everything needed to evaluate one named
function: its role-tagged parameters, its validation rules and a
:class:`KernelTable` with one kernel per precision tier it supports natively.

Calling a function goes through one of two paths:

* native -- arguments are converted to the caller's tier, validated in that
  representation and handed to the tier's own kernel;
* generic -- used when a tier has no kernel of its own: arguments are
  converted to ``STANDARD``, validated there, evaluated with the standard
  kernel and the result is converted back to the caller's tier.

Kernels are trusted; whatever they raise propagates unchanged.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from specfunpy.errors import SpecialFunctionError
from specfunpy.log import specfun_logger
from specfunpy.precision import EXTENDED_AVAILABLE, PrecisionTier
from specfunpy.promotion import overflowed, promote, resolve_tier
from specfunpy.validation import Rule, as_integer, representable, validate

log = specfun_logger(__name__)

Kernel = Callable[..., Any]


class Role(enum.Enum):
    DEGREE = "degree"
    ORDER = "order"
    PARAMETER = "parameter"
    POINT = "point"
    ANGLE = "angle"
    INDEX = "index"
    COUNT = "count"

    @property
    def continuous(self) -> bool:
        return self in (Role.PARAMETER, Role.POINT, Role.ANGLE)


@dataclass(frozen=True)
class Parameter:
    name: str
    role: Role


class KernelTable:
    """Kernels available per precision tier.

    ``standard`` is mandatory. The extended entry is dropped when the platform
    has no 80-bit ``long double`` (or it was disabled through the
    environment), so callers never see a kernel they cannot run.
    """

    def __init__(
        self,
        standard: Kernel,
        reduced: Kernel | None = None,
        extended: Kernel | None = None,
    ):
        self._kernels: dict[PrecisionTier, Kernel] = {PrecisionTier.STANDARD: standard}
        if reduced is not None:
            self._kernels[PrecisionTier.REDUCED] = reduced
        if extended is not None and EXTENDED_AVAILABLE:
            self._kernels[PrecisionTier.EXTENDED] = extended

    def get(self, tier: PrecisionTier) -> Kernel | None:
        return self._kernels.get(tier)

    @property
    def standard(self) -> Kernel:
        return self._kernels[PrecisionTier.STANDARD]

    @property
    def tiers(self) -> tuple[PrecisionTier, ...]:
        return tuple(sorted(self._kernels, key=lambda tier: tier.rank))


def bind_arguments(
    name: str,
    parameters: Sequence[Parameter],
    args: tuple,
    kwargs: Mapping[str, Any],
) -> dict[str, Any]:
    """Map positional and keyword arguments onto ``parameters``."""
    if len(args) > len(parameters):
        raise TypeError(
            f"{name}() takes {len(parameters)} arguments but {len(args)} were given"
        )
    bound = {p.name: value for p, value in zip(parameters, args)}
    for key, value in kwargs.items():
        if key in bound:
            raise TypeError(f"{name}() got multiple values for argument '{key}'")
        if key not in {p.name for p in parameters}:
            raise TypeError(f"{name}() got an unexpected keyword argument '{key}'")
        bound[key] = value
    missing = [p.name for p in parameters if p.name not in bound]
    if missing:
        raise TypeError(f"{name}() missing required arguments: {', '.join(missing)}")
    return {p.name: bound[p.name] for p in parameters}


class SpecialFunction:
    """A named special function evaluated through the precision dispatcher.

    Parameters
    ----------
    name:
        Catalogue name, used in diagnostics and by :mod:`specfunpy.catalogue`.
    parameters:
        Ordered, role-tagged parameters. Continuous roles (parameter, point,
        angle) take part in precision promotion; integer roles do not.
    rules:
        Validation rules, run in phase order before any kernel is called.
    kernels:
        One kernel per natively supported tier. Kernels receive the arguments
        positionally in ``parameters`` order.
    doc:
        Docstring exposed on the object.
    """

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
        return f"<SpecialFunction {self.name}({signature})>"

    @property
    def tiers(self) -> tuple[PrecisionTier, ...]:
        """Tiers with a native kernel."""
        return self.kernels.tiers

    def _continuous(self, bound: Mapping[str, Any]) -> list:
        return [bound[p.name] for p in self.parameters if p.role.continuous]

    def _caller_tier(
        self, bound: Mapping[str, Any], precision: PrecisionTier | str | None
    ) -> PrecisionTier:
        if precision is not None:
            return PrecisionTier.parse(precision)
        return resolve_tier(self._continuous(bound))

    def _convert(self, bound: Mapping[str, Any], tier: PrecisionTier) -> dict:
        promoted = iter(promote(self._continuous(bound), tier))
        converted = {}
        for p in self.parameters:
            if p.role.continuous:
                converted[p.name] = next(promoted)
            else:
                converted[p.name] = as_integer(p.name, bound[p.name])
        return converted

    def _evaluate(self, kernel: Kernel, bound: Mapping[str, Any], tier: PrecisionTier):
        arguments = self._convert(bound, tier)
        # finite inputs that overflowed the tier fail before the finiteness checks
        rules = [
            representable(p.name)
            for p in self.parameters
            if p.role.continuous and overflowed(bound[p.name], arguments[p.name])
        ]
        rules.extend(self.rules)
        try:
            validate(rules, arguments, tier)
        except SpecialFunctionError as exc:
            log.debug("%s rejected %s: %r", self.name, arguments, exc)
            raise
        return tier.convert_result(kernel(*arguments.values()))

    def __call__(self, *args, precision: PrecisionTier | str | None = None, **kwargs):
        bound = bind_arguments(self.name, self.parameters, args, kwargs)
        tier = self._caller_tier(bound, precision)
        kernel = self.kernels.get(tier)
        if kernel is None:
            return self._generic(bound, tier)
        log.debug("%s: native %s kernel", self.name, tier.value)
        return self._evaluate(kernel, bound, tier)

    def _generic(self, bound: Mapping[str, Any], caller: PrecisionTier):
        log.debug("%s: generic path for %s caller", self.name, caller.value)
        result = self._evaluate(self.kernels.standard, bound, PrecisionTier.STANDARD)
        return caller.convert_result(result)

    def generic(self, *args, precision: PrecisionTier | str | None = None, **kwargs):
        """Evaluate through the standard kernel regardless of native support.

        Inputs are widened to ``STANDARD``, validated there, and the result is
        converted to the caller's tier.
        """
        bound = bind_arguments(self.name, self.parameters, args, kwargs)
        return self._generic(bound, self._caller_tier(bound, precision))

    def native(self, tier: PrecisionTier | str) -> Callable[..., Any]:
        """Return the precision-specific entry point for ``tier``.

        Raises
        ------
        NotImplementedError
            If ``tier`` has no native kernel for this function on this
            platform.
        """
        tier = PrecisionTier.parse(tier)
        kernel = self.kernels.get(tier)
        if kernel is None:
            raise NotImplementedError(
                f"{self.name} has no native {tier.value} kernel on this platform"
            )

        def entry(*args, **kwargs):
            bound = bind_arguments(self.name, self.parameters, args, kwargs)
            return self._evaluate(kernel, bound, tier)

        entry.__name__ = f"{self.name}_{tier.value}"
        entry.__doc__ = self.__doc__
        return entry
