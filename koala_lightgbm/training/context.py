# koala_lightgbm/training/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np


@dataclass(frozen=True)
class FitCache:
    """
    Output of Model.setup, input of Model.fit.

    - X / y are owned, C-contiguous float64 arrays
    - categorical_feature_indices are 0-based columns of X
    """

    X: np.ndarray
    y: np.ndarray
    categorical_feature_indices: List[int]

    @property
    def n_samples(self) -> int:
        return int(self.X.shape[0])


@dataclass
class MachineState:
    """
    Everything a SupervisedMachine learns during fit.
    """

    scheme_X: Any = None
    scheme_y: Any = None
    predictor: Any = None
    report: Dict[str, Any] = field(default_factory=dict)
    cache: Optional[FitCache] = None
