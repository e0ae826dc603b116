# online_linear/score/linear_score.py
from __future__ import annotations

from online_linear.config.optimizer_config import OptimizerConfig
from online_linear.core.store import ParameterStore, W
from online_linear.core.types import SparseRow
from online_linear.score.base import Score
from online_linear.score.updaters import resolve_updater
from online_linear.utils.errors import ConfigError


class LinearScore(Score):
    """
    LinearScore（FINAL）

        y = w^T x + b

    - updater 在构造时解析一次（AdaGrad / FTRL 二选一，生命周期内不混用）
    - store 宽度必须与 variant 一致，check_store() 在建模阶段调用
    """

    def __init__(self, cfg: OptimizerConfig):
        self.cfg = cfg
        self._updater = resolve_updater(cfg)
        self.width = self._updater.width

    @property
    def variant(self):
        return self._updater.variant

    def check_store(self, store: ParameterStore) -> None:
        if store.width != self.width:
            raise ConfigError(
                f"ParameterStore width {store.width} does not match "
                f"optimizer {self.variant.value} (width {self.width})"
            )

    def compute_score(self, row: SparseRow, store: ParameterStore) -> float:
        w = store.w
        width = store.width
        score = 0.0
        for feat_id, feat_val in row:
            score += w[feat_id * width + W] * feat_val
        # bias
        score += store.b[W]
        return float(score)

    def apply_gradient(
        self,
        row: SparseRow,
        store: ParameterStore,
        pg: float,
    ) -> None:
        self._updater.apply(row, store, pg)
