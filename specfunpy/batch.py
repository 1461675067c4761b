"""Evaluate a batch file of special-function calls."""

import numpy as np

from specfunpy import __version__
from specfunpy.catalogue import get_function
from specfunpy.config import BatchConfig, CallSpec
from specfunpy.errors import SpecialFunctionError
from specfunpy.export import CallResult, Export
from specfunpy.log import specfun_logger
from specfunpy.precision import PrecisionTier


def _plain(value) -> float | list[float]:
    if isinstance(value, np.ndarray) and value.ndim > 0:
        return [float(v) for v in value]
    return float(value)


class SpecFun:
    """Batch evaluator driven by a YAML/JSON file.

    Parameters
    ----------
    path_config:
        Path to the batch file.
    precision:
        Optional tier name overriding the file's default precision.
    """

    def __init__(self, path_config: str, precision: str = ""):
        self.path_config = path_config
        self.config = BatchConfig.from_file(path_config)
        if precision:
            self.config.precision = PrecisionTier.parse(precision).value
        self.log = specfun_logger(__name__)
        self.export: Export | None = None

    def evaluate(self, call: CallSpec) -> CallResult:
        tier = self.config.tier_for(call)
        result = CallResult(
            function=call.function,
            args=call.args,
            label=call.label,
            precision=tier.value,
        )
        function = get_function(call.function)
        try:
            value = function(*call.args, precision=tier)
        except SpecialFunctionError as exc:
            self.log.warning("%s%s failed: %r", call.function, tuple(call.args), exc)
            result.error = {"type": type(exc).__name__, **exc.fields}
            return result
        if np.iscomplexobj(value) and not isinstance(value, np.ndarray):
            result.value = float(np.real(value))
            result.imag = float(np.imag(value))
        else:
            result.value = _plain(value)
        return result

    def run(self) -> Export:
        self.log.info(
            "Evaluating %d calls from %s", len(self.config.calls), self.path_config
        )
        self.export = Export(
            version=__version__,
            results=[self.evaluate(call) for call in self.config.calls],
        )
        self.log.info(
            "Finished: %d ok, %d failed",
            len(self.export.results) - len(self.export.failures),
            len(self.export.failures),
        )
        return self.export
