# online_linear/core/store.py
from __future__ import annotations

import numpy as np

from online_linear.core.types import OptimizerVariant, SparseRow
from online_linear.utils.errors import CapacityError

# slot offsets inside one block
W = 0  # weight
G2 = 1  # adagrad: squared-gradient accumulator
N = 1  # ftrl: squared-gradient accumulator "n"
Z = 2  # ftrl: lazy-weight accumulator "z"


class ParameterStore:
    """
    ParameterStore（FINAL / FROZEN）

    布局：
    - 一块连续的 float64 buffer，按 feature 切成宽度为 width 的 block
      下标 = feature_id * width + offset
    - bias 单独一个 block，宽度相同
    - width 在构造时固定，必须和后续所有 update 的 optimizer 一致

    get() / get_bias() 返回 numpy view，写入直接落到 buffer。
    热路径不做越界检查，容量由 build 阶段保证。
    """

    def __init__(self, num_features: int, width: int, dtype=np.float64):
        if num_features < 1:
            raise CapacityError(f"num_features must be >= 1, got {num_features}")
        if width not in (2, 3):
            raise CapacityError(f"width must be 2 or 3, got {width}")

        self.num_features = int(num_features)
        self.width = int(width)
        self.w = np.zeros(self.num_features * self.width, dtype=dtype)
        self.b = np.zeros(self.width, dtype=dtype)

    @classmethod
    def for_variant(cls, num_features: int, variant: OptimizerVariant) -> "ParameterStore":
        return cls(num_features, OptimizerVariant.parse(variant).width)

    # --------------------------------------------------
    # Accessors
    # --------------------------------------------------
    def get(self, feature_id: int) -> np.ndarray:
        start = feature_id * self.width
        return self.w[start:start + self.width]

    def get_bias(self) -> np.ndarray:
        return self.b

    def weights(self) -> np.ndarray:
        """所有 feature 的 weight slot（strided view）"""
        return self.w[W::self.width]

    def nnz(self) -> int:
        return int(np.count_nonzero(self.weights()))

    def reset(self) -> None:
        self.w.fill(0.0)
        self.b.fill(0.0)

    # --------------------------------------------------
    # Cold-path validation
    # --------------------------------------------------
    def check_row(self, row: SparseRow) -> None:
        """
        冷路径校验：数据加载阶段可选调用，score / update 不调用。
        """
        for entry in row:
            if entry.feature_id < 0 or entry.feature_id >= self.num_features:
                raise CapacityError(
                    f"feature_id {entry.feature_id} out of range "
                    f"[0, {self.num_features})"
                )

    @property
    def capacity(self) -> int:
        return self.w.size

    def __repr__(self) -> str:
        return (
            f"ParameterStore(num_features={self.num_features}, "
            f"width={self.width}, nnz={self.nnz()})"
        )
