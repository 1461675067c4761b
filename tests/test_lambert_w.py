import math

import numpy as np
import pytest

from specfunpy import ParameterNotFinite, ParameterOutOfRange, lambert_w0, lambert_wm1
from specfunpy.special.lambert_w import branch_point


def test_principal_branch():
    assert lambert_w0(0.0) == 0.0
    assert lambert_w0(1.0) == pytest.approx(0.5671432904097838, rel=1e-14)
    assert lambert_w0(math.e) == pytest.approx(1.0, rel=1e-14)
    w = lambert_w0(10.0)
    assert w * math.exp(w) == pytest.approx(10.0, rel=1e-14)


def test_branch_point_is_accepted():
    x = branch_point(np.dtype(np.float64))
    assert lambert_w0(x) == -1.0
    assert lambert_wm1(x) == -1.0


def test_lower_branch():
    assert lambert_wm1(-0.1) == pytest.approx(-3.577152063957297, rel=1e-13)
    w = lambert_wm1(-1e-5)
    assert w * math.exp(w) == pytest.approx(-1e-5, rel=1e-12)


def test_domain():
    x = np.nextafter(branch_point(np.dtype(np.float64)), -np.inf)
    with pytest.raises(ParameterOutOfRange) as info:
        lambert_w0(x)
    assert info.value.max == math.inf
    with pytest.raises(ParameterOutOfRange) as info:
        lambert_wm1(0.0)
    assert info.value.max == 0.0
    with pytest.raises(ParameterOutOfRange):
        lambert_wm1(0.5)
    with pytest.raises(ParameterNotFinite):
        lambert_w0(np.inf)


def test_branch_point_follows_tier():
    reduced = branch_point(np.dtype(np.float32))
    assert isinstance(reduced, np.float32)
    assert lambert_w0(reduced) == np.float32(-1.0)
    assert lambert_wm1(reduced) == np.float32(-1.0)
    # just above the branch point W0 stays close to -1 + sqrt(2 (1 + e x))
    x = np.float32(-0.3678)
    expected = -1.0 + np.sqrt(2.0 * (1.0 + np.e * float(x)))
    assert lambert_w0(x) == pytest.approx(expected, abs=1e-3)
    assert lambert_w0(x) == pytest.approx(lambert_w0(float(x)), rel=1e-6)


def test_minus_one_is_below_the_branch_point():
    with pytest.raises(ParameterOutOfRange) as info:
        lambert_w0(-1.0)
    assert info.value.name == "x"
