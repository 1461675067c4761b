import math
import warnings

import numpy as np
import pytest

from specfunpy import digamma
from specfunpy.dispatch import (
    KernelTable,
    Parameter,
    Role,
    SpecialFunction,
    bind_arguments,
)
from specfunpy.errors import (
    ParameterNotFinite,
    ParameterNotPositive,
    ParameterOutOfRange,
)
from specfunpy.precision import EXTENDED_AVAILABLE, PrecisionTier
from specfunpy.validation import finite, non_negative


class Spy:
    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        if self.result is not None:
            return self.result
        return sum(a for a in args if not isinstance(a, int))


def _function(standard, reduced=None, extended=None):
    return SpecialFunction(
        "spy",
        (Parameter("n", Role.DEGREE), Parameter("x", Role.POINT)),
        [non_negative("n"), *finite("x")],
        KernelTable(standard, reduced=reduced, extended=extended),
    )


def test_native_reduced_kernel_receives_float32():
    standard, reduced = Spy(), Spy()
    result = _function(standard, reduced=reduced)(1, np.float32(0.5))
    assert reduced.calls and not standard.calls
    n, x = reduced.calls[0]
    assert n == 1 and isinstance(x, np.float32)
    assert isinstance(result, np.float32)


def test_generic_path_widens_and_narrows():
    standard = Spy()
    result = _function(standard)(2, np.float32(0.25))
    _, x = standard.calls[0]
    assert isinstance(x, np.float64)
    assert isinstance(result, np.float32)
    assert result == np.float32(0.25)


def test_explicit_generic_entry_skips_native_kernel():
    standard, reduced = Spy(), Spy()
    _function(standard, reduced=reduced).generic(0, np.float32(1))
    assert standard.calls and not reduced.calls


def test_precision_keyword_overrides_inferred_tier():
    standard = Spy()
    result = _function(standard)(0, 0.5, precision="reduced")
    assert isinstance(result, np.float32)


def test_validation_failure_never_reaches_kernel():
    standard = Spy()
    function = _function(standard)
    with pytest.raises(ParameterNotPositive):
        function(-1, 0.5)
    with pytest.raises(ParameterNotFinite) as info:
        function(1, math.nan)
    assert info.value.name == "x"
    assert standard.calls == []


def test_native_entry_for_missing_tier():
    function = _function(Spy())
    with pytest.raises(NotImplementedError):
        function.native(PrecisionTier.REDUCED)
    native = function.native("standard")
    assert native(1, 2.0) == 2.0


def test_extended_entry_follows_platform():
    extended = Spy()
    function = _function(Spy(), extended=extended)
    assert (PrecisionTier.EXTENDED in function.tiers) == EXTENDED_AVAILABLE
    if EXTENDED_AVAILABLE:
        result = function(1, np.longdouble(0.5))
        assert isinstance(result, np.longdouble)
        assert extended.calls
    else:
        with pytest.raises(NotImplementedError):
            function.native(PrecisionTier.EXTENDED)


def test_kernel_errors_propagate_unchanged():
    def broken(n, x):
        raise ZeroDivisionError("kernel failure")

    with pytest.raises(ZeroDivisionError):
        _function(broken)(1, 0.5)


def test_mixed_precision_result_tier():
    spy = Spy()
    function = SpecialFunction(
        "mixed",
        (Parameter("a", Role.PARAMETER), Parameter("b", Role.POINT)),
        [],
        KernelTable(spy, reduced=spy),
    )
    result = function(np.float32(0.1), 0.2)
    assert isinstance(result, np.float64)
    assert result == function(np.float64(np.float32(0.1)), np.float64(0.2))
    a, b = spy.calls[0]
    assert isinstance(a, np.float64) and isinstance(b, np.float64)


def test_integer_role_rejects_float():
    with pytest.raises(TypeError):
        _function(Spy())(1.0, 0.5)


def test_complex_results_keep_complex_kind():
    function = SpecialFunction(
        "complex",
        (Parameter("x", Role.ANGLE),),
        [],
        KernelTable(lambda x: complex(x, x)),
    )
    value = function(np.float32(1.0))
    assert isinstance(value, np.complex64)
    assert value == np.complex64(1 + 1j)


def test_bind_arguments():
    parameters = (Parameter("n", Role.DEGREE), Parameter("x", Role.POINT))
    assert bind_arguments("f", parameters, (1,), {"x": 2.0}) == {"n": 1, "x": 2.0}
    with pytest.raises(TypeError):
        bind_arguments("f", parameters, (1, 2.0, 3.0), {})
    with pytest.raises(TypeError):
        bind_arguments("f", parameters, (1,), {})
    with pytest.raises(TypeError):
        bind_arguments("f", parameters, (1,), {"y": 2.0})
    with pytest.raises(TypeError):
        bind_arguments("f", parameters, (1, 2.0), {"x": 2.0})


def test_finite_input_beyond_tier_range():
    largest = float(np.finfo(np.float32).max)
    standard = Spy()
    function = _function(standard)
    with warnings.catch_warnings():
        warnings.simplefilter("error", RuntimeWarning)
        with pytest.raises(ParameterOutOfRange) as info:
            function(1, 1e300, precision="reduced")
    assert info.value == ParameterOutOfRange("x", -largest, largest)
    # structural checks still come first
    with pytest.raises(ParameterNotPositive):
        function(-1, -1e300, precision="reduced")
    # genuine infinities keep their own error
    with pytest.raises(ParameterNotFinite):
        function(1, math.inf, precision="reduced")
    assert standard.calls == []


def test_overflow_rejected_by_public_function():
    with pytest.raises(ParameterOutOfRange) as info:
        digamma(1e300, precision="reduced")
    assert info.value.name == "x"
