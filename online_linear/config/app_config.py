#!filepath: online_linear/config/app_config.py
from __future__ import annotations

import os
from typing import Any, Dict, Type, TypeVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from online_linear import logs
from online_linear.config.log_config import LogConfig
from online_linear.config.model_config import ModelConfig
from online_linear.config.optimizer_config import OptimizerConfig
from online_linear.config.training_config import TrainingConfig
from online_linear.utils.errors import ConfigError

T = TypeVar("T", bound=BaseModel)

LOG_LEVEL_ENV = "ONLINE_LINEAR_LOG_LEVEL"


def validate_config(model_cls: Type[T], raw: Dict[str, Any]) -> T:
    """
    setup 阶段唯一的校验入口：pydantic ValidationError → ConfigError
    """
    try:
        return model_cls.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"Invalid {model_cls.__name__}: {e}") from e


def load_optimizer_config(raw: Dict[str, Any]) -> OptimizerConfig:
    return validate_config(OptimizerConfig, raw)


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    model: ModelConfig
    training: TrainingConfig = Field(default_factory=TrainingConfig)

    @classmethod
    def load(cls, path: str, env_path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - .env 默认与配置文件同目录
        - ONLINE_LINEAR_LOG_LEVEL 覆盖 log.level
        """
        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 1) 先加载 .env
        if env_path is None:
            env_path = os.path.join(os.path.dirname(os.path.abspath(path)), ".env")
        load_dotenv(env_path)

        # 2) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ConfigError(
                f"Config root must be a mapping, got {type(raw).__name__}: {path}"
            )

        # 3) env 覆盖
        level = os.getenv(LOG_LEVEL_ENV)
        if level:
            log_raw = raw.get("log")
            if log_raw is None:
                log_raw = raw["log"] = {}
            if not isinstance(log_raw, dict):
                raise ConfigError(
                    f"log section must be a mapping, got {type(log_raw).__name__}: {path}"
                )
            log_raw["level"] = level

        cfg = validate_config(cls, raw)
        logs.info(
            f"[Config] loaded {path}: variant={cfg.model.optimizer.variant.value} "
            f"lr={cfg.model.optimizer.learning_rate} "
            f"num_features={cfg.model.num_features}"
        )
        return cfg

    def init_logging(self) -> None:
        logs.configure(
            log_dir=self.log.dir,
            rotation=self.log.rotation,
            retention=self.log.retention,
            level=self.log.level,
        )
