from __future__ import annotations

from typing import Any, List, Mapping, Tuple

import lightgbm as lgb
import numpy as np

from koala_lightgbm import logs
from koala_lightgbm.training.engines.train_engine import EvalHistory, TrainEngine


class LightGBMTrainEngine(TrainEngine):
    """
    LightGBM native-API engine (lgb.train / Booster.predict).

    Contract:
    - params["categorical_feature"] (0-based indices) is moved onto the
      training Dataset; everything else goes to lgb.train untouched
    - validation Datasets reference the training Dataset (shared bins)
    - evals keys are "valid_0", "valid_1", ... in valid_sets order
    """

    @logs.catch(msg="LightGBM training failed", log_time=False)
    def train(
        self,
        *,
        params: Mapping[str, Any],
        X: np.ndarray,
        y: np.ndarray,
        valid_sets: List[Tuple[np.ndarray, np.ndarray]],
    ) -> Tuple[lgb.Booster, EvalHistory]:
        params = dict(params)
        categorical_feature = list(params.pop("categorical_feature", []))

        train_set = lgb.Dataset(
            X,
            label=y,
            categorical_feature=categorical_feature,
            free_raw_data=False,
        )

        valid_datasets = []
        valid_names = []
        for i, (X_valid, y_valid) in enumerate(valid_sets):
            valid_datasets.append(
                lgb.Dataset(
                    X_valid,
                    label=y_valid,
                    categorical_feature=categorical_feature,
                    reference=train_set,
                    free_raw_data=False,
                )
            )
            valid_names.append(f"valid_{i}")

        evals: EvalHistory = {}
        booster = lgb.train(
            params,
            train_set,
            valid_sets=valid_datasets or None,
            valid_names=valid_names or None,
            callbacks=[lgb.record_evaluation(evals)],
        )

        return booster, evals

    def predict(self, predictor: lgb.Booster, X: np.ndarray) -> np.ndarray:
        return predictor.predict(X, verbosity=-1)
