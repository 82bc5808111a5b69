#!filepath: koala_lightgbm/config/model_config.py
from __future__ import annotations

from typing import Any, Dict, List, Literal

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """
    Which wrapper to build, plus hyperparameter overrides (LGBMParams names).
    """

    family: Literal["lightgbm"] = "lightgbm"
    task: Literal["regression", "binary"] = "regression"
    params: Dict[str, Any] = Field(default_factory=dict)


class TransformerConfig(BaseModel):
    sorted: bool = False
    categorical_features: List[str] = Field(default_factory=list)
