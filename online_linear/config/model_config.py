#!filepath: online_linear/config/model_config.py
from pydantic import BaseModel, Field

from online_linear.config.optimizer_config import OptimizerConfig


class ModelConfig(BaseModel):
    # 特征维度（feature_id 取值 [0, num_features)）
    num_features: int = Field(ge=1)
    optimizer: OptimizerConfig = Field(default_factory=OptimizerConfig)
