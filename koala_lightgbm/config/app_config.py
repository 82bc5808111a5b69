#!filepath: koala_lightgbm/config/app_config.py
from __future__ import annotations

import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from koala_lightgbm import logs
from koala_lightgbm.models.registry import ModelSpec, resolve_model
from koala_lightgbm.training.machine import SupervisedMachine
from koala_lightgbm.transforms.categorical import LGBMTransformerX
from .log_config import LogConfig
from .model_config import ModelConfig, TransformerConfig

ENV_LOG_LEVEL = "KOALA_LOG_LEVEL"


def package_root() -> str:
    """
    koala_lightgbm/config/app_config.py → koala_lightgbm
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    model: ModelConfig
    transformer: TransformerConfig = Field(default_factory=TransformerConfig)

    @classmethod
    def load(cls, path: str | None = None, env_path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 koala_lightgbm/config/base.yml
        - .env 默认取当前工作目录（若存在）
        - KOALA_LOG_LEVEL 覆盖 log.level
        """
        load_dotenv(env_path)

        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        level = os.getenv(ENV_LOG_LEVEL)
        if level:
            raw.setdefault("log", {})
            raw["log"]["level"] = level

        return cls(**raw)

    def apply_logging(self) -> None:
        logs.configure(
            log_dir=self.log.dir,
            rotation=self.log.rotation,
            retention=self.log.retention,
            log_level=self.log.level,
        )

    def build_machine(self, inst=None) -> SupervisedMachine:
        """
        Model + input transformer as configured; y transformer is the
        model's default.
        """
        model = resolve_model(
            spec=ModelSpec(family=self.model.family, task=self.model.task),
            params=self.model.params,
        )
        transformer_X = LGBMTransformerX(
            sorted=self.transformer.sorted,
            categorical_features=self.transformer.categorical_features,
        )
        return SupervisedMachine(model, transformer_X=transformer_X, inst=inst)
