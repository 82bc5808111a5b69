# koala_lightgbm/models/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

import numpy as np

from koala_lightgbm.training.context import FitCache
from koala_lightgbm.training.engines.train_result import TrainResult


class SupervisedModel(ABC):
    """
    Generic supervised model lifecycle.

    Lifecycle (in order):
        cache  = model.setup(X, y, scheme_X, parallel, verbosity)
        result = model.fit(cache, add, parallel, verbosity)
        yhat   = model.predict(result.predictor, X, parallel, verbosity)

    A model instance only holds hyperparameters; everything learned lives in
    the returned predictor.
    """

    @abstractmethod
    def params(self) -> Dict[str, Any]:
        """Snapshot of hyperparameters (new dict on each call)."""
        raise NotImplementedError

    @abstractmethod
    def setup(self, X, y, scheme_X, parallel: bool = True, verbosity: int = 1) -> FitCache:
        raise NotImplementedError

    @abstractmethod
    def fit(self, cache: FitCache, add: bool = False, parallel: bool = True, verbosity: int = 1) -> TrainResult:
        raise NotImplementedError

    @abstractmethod
    def predict(self, predictor: Any, X, parallel: bool = True, verbosity: int = 0) -> np.ndarray:
        raise NotImplementedError

    @abstractmethod
    def default_transformer_X(self):
        raise NotImplementedError

    @abstractmethod
    def default_transformer_y(self):
        raise NotImplementedError
