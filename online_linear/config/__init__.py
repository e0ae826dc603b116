from .log_config import LogConfig
from .optimizer_config import FtrlConfig, OptimizerConfig
from .model_config import ModelConfig
from .training_config import TrainingConfig
from .app_config import AppConfig, load_optimizer_config, validate_config

__all__ = [
    "AppConfig",
    "FtrlConfig",
    "LogConfig",
    "ModelConfig",
    "OptimizerConfig",
    "TrainingConfig",
    "load_optimizer_config",
    "validate_config",
]
