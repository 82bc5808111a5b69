# koala_lightgbm/transforms/target.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
import pandas as pd


class RegressionTargetTransformer:
    """
    Regression target: cast to float64, no rescaling.
    """

    def fit(self, y, parallel: bool = True, verbosity: int = 1) -> None:
        return None

    def transform(self, scheme, y) -> np.ndarray:
        return np.asarray(y, dtype=np.float64)

    def inverse_transform(self, scheme, yt) -> np.ndarray:
        return np.asarray(yt, dtype=np.float64)


@dataclass(frozen=True)
class BinaryTargetScheme:
    negative: Any
    positive: Any


class BinaryTargetTransformer:
    """
    Binary target: two distinct labels → {0.0, 1.0}.

    Labels are sorted; the larger one is the positive class.
    inverse_transform maps positive-class probabilities back to labels.
    """

    def __init__(self, threshold: float = 0.5):
        self.threshold = threshold

    def fit(self, y, parallel: bool = True, verbosity: int = 1) -> BinaryTargetScheme:
        labels = sorted(pd.unique(np.asarray(y, dtype=object)))
        if len(labels) != 2:
            raise ValueError(
                f"Binary classification needs exactly 2 distinct labels, got {len(labels)}: {labels[:10]}"
            )
        return BinaryTargetScheme(negative=labels[0], positive=labels[1])

    def transform(self, scheme: BinaryTargetScheme, y) -> np.ndarray:
        y = np.asarray(y, dtype=object)
        known = (y == scheme.negative) | (y == scheme.positive)
        if not known.all():
            raise ValueError(f"Unknown labels in target: {pd.unique(y[~known])[:10]}")
        return (y == scheme.positive).astype(np.float64)

    def inverse_transform(self, scheme: BinaryTargetScheme, yt) -> np.ndarray:
        yt = np.asarray(yt, dtype=np.float64)
        return np.where(yt >= self.threshold, scheme.positive, scheme.negative)
