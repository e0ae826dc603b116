# online_linear/config/optimizer_config.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from online_linear.core.types import OptimizerVariant


class FtrlConfig(BaseModel):
    """
    FTRL-proximal 内部常数。默认值即参考实现的固定值，不建议修改。
    """

    model_config = ConfigDict(frozen=True)

    alpha: float = Field(default=1e-2, gt=0)
    beta: float = Field(default=1.0, ge=0)
    lambda1: float = Field(default=1e-1, ge=0)
    lambda2: float = Field(default=0.0, ge=0)


class OptimizerConfig(BaseModel):
    """
    OptimizerConfig（FINAL / FROZEN）

    - variant 在这里一次性解析成 OptimizerVariant
    - learning_rate 必须 > 0
    - 之后的 score / update 不再做任何配置检查
    """

    model_config = ConfigDict(frozen=True)

    variant: OptimizerVariant = OptimizerVariant.ADAGRAD
    learning_rate: float = Field(default=0.2, gt=0)
    l2_regularization: float = Field(default=0.0, ge=0)
    ftrl: FtrlConfig = Field(default_factory=FtrlConfig)

    @field_validator("variant", mode="before")
    @classmethod
    def _parse_variant(cls, v):
        return OptimizerVariant.parse(v)
