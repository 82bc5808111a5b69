from .app_config import AppConfig
from .log_config import LogConfig
from .model_config import ModelConfig, TransformerConfig

__all__ = ["AppConfig", "LogConfig", "ModelConfig", "TransformerConfig"]
