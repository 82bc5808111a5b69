# koala_lightgbm/models/registry.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Tuple, Type

from koala_lightgbm.models.lgbm_model import (
    LGBMBinaryClassifier,
    LGBMModel,
    LGBMRegressor,
)
from koala_lightgbm.training.engines.train_engine import TrainEngine


@dataclass(frozen=True)
class ModelSpec:
    family: Literal["lightgbm"]
    task: Literal["regression", "binary"]


_MODEL_REGISTRY: Dict[Tuple[str, str], Type[LGBMModel]] = {
    ("lightgbm", "regression"): LGBMRegressor,
    ("lightgbm", "binary"): LGBMBinaryClassifier,
}


def resolve_model(
    *,
    spec: ModelSpec,
    params: Optional[Dict[str, Any]] = None,
    engine: Optional[TrainEngine] = None,
) -> LGBMModel:
    key = (spec.family, spec.task)

    if key not in _MODEL_REGISTRY:
        available = ", ".join(str(k) for k in _MODEL_REGISTRY)
        raise ValueError(
            f"No model for {key}. Available: {available}"
        )

    return _MODEL_REGISTRY[key](engine=engine, **(params or {}))
