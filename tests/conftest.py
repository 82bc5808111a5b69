# tests/conftest.py
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

import numpy as np
import pandas as pd
import pytest
from loguru import logger

from koala_lightgbm.training.engines.train_engine import EvalHistory, TrainEngine


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


class FakeTrainEngine(TrainEngine):
    """
    Records what the wrapper hands over; no native library involved.

    predict: row sums of X
    evals  : one decreasing series per configured metric, per validation set
    """

    def __init__(self, n_rounds: int = 3, fail_with: Exception | None = None):
        self.n_rounds = n_rounds
        self.fail_with = fail_with
        self.calls: List[Dict[str, Any]] = []

    def train(
        self,
        *,
        params: Mapping[str, Any],
        X: np.ndarray,
        y: np.ndarray,
        valid_sets: List[Tuple[np.ndarray, np.ndarray]],
    ) -> Tuple[Any, EvalHistory]:
        self.calls.append(
            {"params": dict(params), "X": X, "y": y, "valid_sets": list(valid_sets)}
        )
        if self.fail_with is not None:
            raise self.fail_with

        evals: EvalHistory = {}
        for i, _ in enumerate(valid_sets):
            evals[f"valid_{i}"] = {
                metric: [1.0 / (k + 1) + j for k in range(self.n_rounds)]
                for j, metric in enumerate(params["metric"])
            }
        return {"n_train": len(y)}, evals

    def predict(self, predictor: Any, X: np.ndarray) -> np.ndarray:
        return np.asarray(X, dtype=np.float64).sum(axis=1)

    @property
    def last(self) -> Dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def fake_engine() -> FakeTrainEngine:
    return FakeTrainEngine()


@pytest.fixture
def city_frame() -> pd.DataFrame:
    """
    age: float / city: str
    """
    return pd.DataFrame(
        {
            "age": [25.0, 30.0, 25.0],
            "city": ["NY", "LA", "NY"],
        }
    )


@pytest.fixture
def mixed_frame() -> pd.DataFrame:
    rng = np.random.default_rng(7)
    n = 200
    return pd.DataFrame(
        {
            "x1": rng.normal(size=n),
            "color": rng.choice(["red", "green", "blue"], size=n),
            "x2": rng.uniform(0, 10, size=n),
            "size": pd.Categorical(rng.choice(["S", "M", "L"], size=n)),
            "count": rng.integers(0, 5, size=n),
        }
    )


@pytest.fixture
def engine_factory():
    return FakeTrainEngine
