#!filepath: tests/utils/test_math_utils.py
import math

import pytest

from online_linear.utils.math import inv_sqrt, log1p_exp, sigmoid


def test_inv_sqrt_positive():
    assert inv_sqrt(4.0) == 0.5
    assert inv_sqrt(0.36) == pytest.approx(1.0 / 0.6)


def test_inv_sqrt_zero_is_zero():
    """零点边界：定义为 0.0，不抛异常、不返回 inf"""
    assert inv_sqrt(0.0) == 0.0
    assert not math.isinf(inv_sqrt(0.0))


def test_sigmoid_symmetric_and_stable():
    assert sigmoid(0.0) == 0.5
    assert sigmoid(3.0) == pytest.approx(1.0 - sigmoid(-3.0))
    # 大负数不溢出
    assert sigmoid(-1000.0) == pytest.approx(0.0)
    assert sigmoid(1000.0) == pytest.approx(1.0)


def test_log1p_exp_large_inputs():
    assert log1p_exp(0.0) == pytest.approx(math.log(2.0))
    assert log1p_exp(1000.0) == pytest.approx(1000.0)
    assert log1p_exp(-1000.0) == pytest.approx(0.0)
