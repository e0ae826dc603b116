#!filepath: online_linear/loss/base.py
from __future__ import annotations

from abc import ABC, abstractmethod


class Loss(ABC):
    """
    Loss 只负责两件事：
    - loss(y, pred)：单样本损失，用于统计
    - gradient(y, pred)：单样本梯度信号 pg，交给 Score.apply_gradient
    """

    name: str = ""

    @abstractmethod
    def loss(self, y: float, pred: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def gradient(self, y: float, pred: float) -> float:
        raise NotImplementedError

    def transform(self, pred: float) -> float:
        """score → 最终输出（默认不变）"""
        return pred
