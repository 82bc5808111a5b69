from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Tuple

import numpy as np

# evals[valid_name][metric_name] -> per-iteration values
EvalHistory = Dict[str, Dict[str, List[float]]]


class TrainEngine(ABC):
    """
    Abstract TrainEngine (FINAL)

    The external training / prediction backend, injected into model
    wrappers. Implementations own ALL native-library semantics; wrappers
    only hand over a flat parameter mapping and numeric arrays.
    """

    @abstractmethod
    def train(
        self,
        *,
        params: Mapping[str, Any],
        X: np.ndarray,
        y: np.ndarray,
        valid_sets: List[Tuple[np.ndarray, np.ndarray]],
    ) -> Tuple[Any, EvalHistory]:
        """
        Returns (predictor, evals). evals is ordered like valid_sets.
        """
        raise NotImplementedError

    @abstractmethod
    def predict(self, predictor: Any, X: np.ndarray) -> np.ndarray:
        raise NotImplementedError
