#!filepath: online_linear/score/base.py
from __future__ import annotations

from abc import ABC, abstractmethod

from online_linear.core.store import ParameterStore
from online_linear.core.types import SparseRow


class Score(ABC):
    """
    Score 抽象基类（Atomic Score Layer）：

    - 不做任何 I/O，不打日志
    - 对数据无状态，只持有 optimizer 配置
    - 每次调用只借用 store，不拥有它
    """

    @abstractmethod
    def compute_score(self, row: SparseRow, store: ParameterStore) -> float:
        """
        纯读：同样的 row + store 状态，结果确定。
        """
        raise NotImplementedError

    @abstractmethod
    def apply_gradient(
        self,
        row: SparseRow,
        store: ParameterStore,
        pg: float,
    ) -> None:
        """
        用单样本梯度信号 pg 原地更新 store。
        """
        raise NotImplementedError
