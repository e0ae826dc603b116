# online_linear/config/training_config.py
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class TrainingConfig(BaseModel):
    """
    TrainingConfig（ONLINE）
    """

    loss: Literal["squared", "cross_entropy"] = "cross_entropy"
    epochs: int = Field(default=1, ge=1)

    # 每 N 个样本输出一次进度，0 表示关闭
    log_every: int = Field(default=0, ge=0)

    instrumentation: bool = True
