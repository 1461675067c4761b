import numpy as np
import pytest

from specfunpy import (
    ParameterExceedsMaximumIntegerValue,
    ParameterNotFinite,
    ParameterNotPositive,
    hermite,
    hermite_next,
)


@pytest.mark.parametrize(
    "n,x,expected",
    [(0, 0.7, 1.0), (1, 0.7, 1.4), (2, 0.5, -1.0), (3, 0.5, -5.0), (4, 0.0, 12.0)],
)
def test_values(n, x, expected):
    assert hermite(n, x) == pytest.approx(expected, rel=1e-14)


def test_recurrence_matches_direct_evaluation():
    x = 0.3
    h0, h1 = hermite(0, x), hermite(1, x)
    for n in range(1, 10):
        h0, h1 = h1, hermite_next(n, x, h1, h0)
        assert h1 == pytest.approx(hermite(n + 1, x), rel=1e-12)


def test_next_runs_natively_in_every_tier():
    value = hermite_next(1, np.float32(0.5), np.float32(1.0), np.float32(1.0))
    assert isinstance(value, np.float32)
    assert value == np.float32(-1.0)
    assert hermite_next.native("reduced")(1, 0.5, 1.0, 1.0) == np.float32(-1.0)


def test_next_mixed_precision():
    value = hermite_next(1, np.float32(0.5), 1.0, np.float32(1.0))
    assert isinstance(value, np.float64)


def test_errors():
    with pytest.raises(ParameterNotPositive):
        hermite(-1, 0.0)
    with pytest.raises(ParameterExceedsMaximumIntegerValue) as info:
        hermite(2**32, 0.0)
    assert info.value.max == 2**32 - 1
    with pytest.raises(ParameterNotPositive):
        hermite_next(0, 0.5, 1.0, 0.0)
    with pytest.raises(ParameterNotFinite) as info:
        hermite_next(1, 0.5, np.inf, np.nan)
    assert info.value.name == "hn"
