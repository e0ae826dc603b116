# online_linear/score/updaters.py
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Callable, Dict

import numpy as np

from online_linear.config.optimizer_config import OptimizerConfig
from online_linear.core.store import ParameterStore, W, G2, N, Z
from online_linear.core.types import OptimizerVariant, SparseRow
from online_linear.utils.errors import ConfigError
from online_linear.utils.math import inv_sqrt


class Updater(ABC):
    """
    单一 optimizer 的更新规则。

    在配置阶段按 OptimizerVariant 解析一次，
    之后每个样本直接调用 apply()，不再分支。
    """

    variant: OptimizerVariant

    def __init__(self, cfg: OptimizerConfig):
        self.cfg = cfg

    @property
    def width(self) -> int:
        return self.variant.width

    @abstractmethod
    def apply(self, row: SparseRow, store: ParameterStore, pg: float) -> None:
        raise NotImplementedError


class AdaGradUpdater(Updater):
    """
    AdaGrad（block = [w, g2]）

        g   = pg * x + l2 * w
        g2 += g * g
        w  -= lr * g * inv_sqrt(g2)

    bias：g = pg（x 视为 1，不加 L2 项）。
    """

    variant = OptimizerVariant.ADAGRAD

    def __init__(self, cfg: OptimizerConfig):
        super().__init__(cfg)
        self.learning_rate = cfg.learning_rate
        self.l2 = cfg.l2_regularization

    def apply(self, row: SparseRow, store: ParameterStore, pg: float) -> None:
        lr = self.learning_rate
        l2 = self.l2

        w = store.w
        for feat_id, feat_val in row:
            idx_w = feat_id * 2 + W
            idx_g = feat_id * 2 + G2
            gradient = pg * feat_val
            gradient += l2 * w[idx_w]
            w[idx_g] += gradient * gradient
            w[idx_w] -= lr * gradient * inv_sqrt(w[idx_g])

        # bias
        b = store.b
        g = pg
        b[G2] += g * g
        b[W] -= lr * g * inv_sqrt(b[G2])


class FtrlUpdater(Updater):
    """
    FTRL-proximal（block = [w, n, z]）

        old_n  = n
        n     += g * g
        sigma  = (sqrt(n) - sqrt(old_n)) / alpha
        z     += g - sigma * w
        |z| <= lambda1 → w = 0
        否则 z 向 0 收缩 lambda1，w = -z / (lambda2 + (beta + sqrt(n)) / alpha)

    feature：g = pg * x；bias：g = -pg（符号相反，保持原样，不要“修正”）。
    """

    variant = OptimizerVariant.FTRL

    def __init__(self, cfg: OptimizerConfig):
        super().__init__(cfg)
        self.alpha = cfg.ftrl.alpha
        self.beta = cfg.ftrl.beta
        self.lambda1 = cfg.ftrl.lambda1
        self.lambda2 = cfg.ftrl.lambda2

    def apply(self, row: SparseRow, store: ParameterStore, pg: float) -> None:
        w = store.w
        for feat_id, feat_val in row:
            self._step(w, feat_id * 3, pg * feat_val)

        # bias
        self._step(store.b, 0, -1.0 * pg)

    def _step(self, buf: np.ndarray, idx: int, gradient: float) -> None:
        idx_w = idx + W
        idx_n = idx + N
        idx_z = idx + Z

        old_n = buf[idx_n]
        buf[idx_n] += gradient * gradient
        sqrt_n = math.sqrt(buf[idx_n])
        sigma = (sqrt_n - math.sqrt(old_n)) / self.alpha
        buf[idx_z] += gradient - sigma * buf[idx_w]

        z = buf[idx_z]
        if abs(z) <= self.lambda1:
            buf[idx_w] = 0.0
            return

        smooth_lr = 1.0 / (self.lambda2 + (self.beta + sqrt_n) / self.alpha)
        if z < 0.0:
            z += self.lambda1
        elif z > 0.0:
            z -= self.lambda1
        buf[idx_z] = z
        buf[idx_w] = -1.0 * smooth_lr * z


_UPDATER_REGISTRY: Dict[OptimizerVariant, Callable[[OptimizerConfig], Updater]] = {
    OptimizerVariant.ADAGRAD: lambda cfg: AdaGradUpdater(cfg),
    OptimizerVariant.FTRL: lambda cfg: FtrlUpdater(cfg),
}


def resolve_updater(cfg: OptimizerConfig) -> Updater:
    key = cfg.variant

    if key not in _UPDATER_REGISTRY:
        available = ", ".join(str(k.value) for k in _UPDATER_REGISTRY)
        raise ConfigError(
            f"No Updater for {key}. Available: {available}"
        )

    return _UPDATER_REGISTRY[key](cfg)
