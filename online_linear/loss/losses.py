# online_linear/loss/losses.py
from __future__ import annotations

from typing import Callable, Dict

from online_linear.loss.base import Loss
from online_linear.utils.errors import ConfigError
from online_linear.utils.math import log1p_exp, sigmoid


class SquaredLoss(Loss):
    """
    回归：loss = 0.5 * (y - pred)^2，pg = pred - y
    """

    name = "squared"

    def loss(self, y: float, pred: float) -> float:
        err = y - pred
        return 0.5 * err * err

    def gradient(self, y: float, pred: float) -> float:
        return pred - y


class CrossEntropyLoss(Loss):
    """
    二分类，标签 {0, 1} 或 {-1, +1}，内部统一成 ±1：

        loss = log(1 + exp(-y * pred))
        pg   = -y / (1 + exp(y * pred))
    """

    name = "cross_entropy"

    @staticmethod
    def _sign(y: float) -> float:
        return 1.0 if y > 0 else -1.0

    def loss(self, y: float, pred: float) -> float:
        return log1p_exp(-self._sign(y) * pred)

    def gradient(self, y: float, pred: float) -> float:
        y = self._sign(y)
        # -y / (1 + exp(y * pred)) == -y * sigmoid(-y * pred)
        return -y * sigmoid(-y * pred)

    def transform(self, pred: float) -> float:
        return sigmoid(pred)


_LOSS_REGISTRY: Dict[str, Callable[[], Loss]] = {
    "squared": SquaredLoss,
    "cross_entropy": CrossEntropyLoss,
}


def resolve_loss(name: str) -> Loss:
    key = name.strip().lower()
    if key not in _LOSS_REGISTRY:
        available = ", ".join(_LOSS_REGISTRY)
        raise ConfigError(f"Unknown loss {name!r}. Available: {available}")
    return _LOSS_REGISTRY[key]()
