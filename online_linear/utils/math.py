#!filepath: online_linear/utils/math.py
import math


def inv_sqrt(x: float) -> float:
    """
    1 / sqrt(x)，x == 0 时定义为 0.0（不抛异常，不返回 inf）。

    AdaGrad 的累加器总是先 += g*g 再取 inv_sqrt，
    累加器为 0 只可能发生在 g == 0 时，此时步长为 0。
    """
    if x == 0.0:
        return 0.0
    return 1.0 / math.sqrt(x)


def sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


def log1p_exp(x: float) -> float:
    """
    log(1 + exp(x))，大 |x| 时不溢出
    """
    if x > 0:
        return x + math.log1p(math.exp(-x))
    return math.log1p(math.exp(x))


def is_finite(x: float) -> bool:
    return math.isfinite(x)
