from typing import Callable, Dict

from koala_lightgbm.training.engines.train_engine import TrainEngine
from koala_lightgbm.training.engines.lightgbm_engine import LightGBMTrainEngine

_ENGINE_REGISTRY: Dict[str, Callable[[], TrainEngine]] = {
    "lightgbm": LightGBMTrainEngine,
}


def register_train_engine(name: str, factory: Callable[[], TrainEngine]) -> None:
    _ENGINE_REGISTRY[name] = factory


def resolve_train_engine(name: str = "lightgbm") -> TrainEngine:
    if name not in _ENGINE_REGISTRY:
        available = ", ".join(sorted(_ENGINE_REGISTRY))
        raise ValueError(
            f"No TrainEngine for {name!r}. Available: {available}"
        )

    return _ENGINE_REGISTRY[name]()
