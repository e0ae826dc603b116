#!filepath: online_linear/__init__.py

from .utils.logger import Logging, logs
from .utils.errors import CapacityError, ConfigError, UserInputError
from .utils.math import inv_sqrt
from .core.types import FeatureEntry, OptimizerVariant, SparseRow
from .core.store import ParameterStore
from .config import (
    AppConfig,
    FtrlConfig,
    LogConfig,
    ModelConfig,
    OptimizerConfig,
    TrainingConfig,
    load_optimizer_config,
)
from .score.linear_score import LinearScore
from .model import LinearModel, build_model, predict_rows
from .training.online_train_engine import OnlineTrainEngine
from .training.train_result import TrainResult

__all__ = [
    "logs", "Logging",
    "CapacityError", "ConfigError", "UserInputError",
    "inv_sqrt",
    "FeatureEntry", "OptimizerVariant", "SparseRow",
    "ParameterStore",
    "AppConfig", "FtrlConfig", "LogConfig", "ModelConfig",
    "OptimizerConfig", "TrainingConfig", "load_optimizer_config",
    "LinearScore",
    "LinearModel", "build_model", "predict_rows",
    "OnlineTrainEngine", "TrainResult",
]
