# online_linear/model.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from online_linear import logs
from online_linear.config.model_config import ModelConfig
from online_linear.core.store import ParameterStore
from online_linear.core.types import SparseRow
from online_linear.score.linear_score import LinearScore
from online_linear.utils.math import sigmoid


@dataclass
class LinearModel:
    """
    LinearModel（FINAL）

    - store：唯一拥有参数 buffer 的对象
    - score：只持有 optimizer 配置，每次调用借用 store
    """

    store: ParameterStore
    score: LinearScore

    def __post_init__(self):
        self.score.check_store(self.store)

    def predict(self, row: SparseRow) -> float:
        return self.score.compute_score(row, self.store)

    def update(self, row: SparseRow, pg: float) -> None:
        self.score.apply_gradient(row, self.store, pg)


def build_model(cfg: ModelConfig) -> LinearModel:
    """
    按 variant 决定 block 宽度，分配 num_features * width 的 buffer（全 0）
    """
    score = LinearScore(cfg.optimizer)
    store = ParameterStore.for_variant(cfg.num_features, cfg.optimizer.variant)

    logs.info(
        f"[Model] built linear model: variant={score.variant.value} "
        f"num_features={store.num_features} width={store.width}"
    )
    return LinearModel(store=store, score=score)


def predict_rows(
    model: LinearModel,
    rows: Iterable[SparseRow],
    *,
    sigmoid_output: bool = False,
) -> Iterator[float]:
    for row in rows:
        pred = model.predict(row)
        yield sigmoid(pred) if sigmoid_output else pred
