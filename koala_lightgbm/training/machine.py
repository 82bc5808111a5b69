# koala_lightgbm/training/machine.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Union

import joblib
import numpy as np
import pandas as pd

from koala_lightgbm import logs
from koala_lightgbm.models.base import SupervisedModel
from koala_lightgbm.models.lgbm_model import LGBMBinaryClassifier
from koala_lightgbm.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from koala_lightgbm.training.context import MachineState
from koala_lightgbm.utils.errors import NotFittedError


class SupervisedMachine:
    """
    SupervisedMachine

    Binds a model to its X / y transformers and drives the full lifecycle:

        fit:     transformer fit → transform → model.setup → model.fit
        predict: transform → model.predict → inverse target transform

    Transformers default to the model's default_transformer_X / _y.
    """

    def __init__(
        self,
        model: SupervisedModel,
        transformer_X=None,
        transformer_y=None,
        inst: Optional[Instrumentation] = None,
    ):
        self.model = model
        self.transformer_X = transformer_X if transformer_X is not None else model.default_transformer_X()
        self.transformer_y = transformer_y if transformer_y is not None else model.default_transformer_y()
        self.inst: Union[Instrumentation, NoOpInstrumentation] = (
            inst if inst is not None else NoOpInstrumentation()
        )
        self.state = MachineState()

    def __repr__(self) -> str:
        return f"SupervisedMachine({self.model!r})"

    @property
    def is_fitted(self) -> bool:
        return self.state.predictor is not None

    @property
    def report(self) -> Dict[str, Any]:
        return self.state.report

    # ------------------------------------------------------------------
    # fit
    # ------------------------------------------------------------------
    def fit(
        self,
        X: pd.DataFrame,
        y,
        rows: Optional[Sequence[int]] = None,
        parallel: bool = True,
        verbosity: int = 1,
    ) -> "SupervisedMachine":
        if rows is not None:
            X = X.iloc[list(rows)]
            y = y.iloc[list(rows)] if isinstance(y, pd.Series) else np.asarray(y)[list(rows)]

        with self.inst.timer("SupervisedMachine.fit", record=False):
            with self.inst.timer("fit_transformers"):
                scheme_X = self.transformer_X.fit(X, parallel, verbosity)
                scheme_y = self.transformer_y.fit(y, parallel, verbosity)

            with self.inst.timer("transform"):
                Xt = self.transformer_X.transform(scheme_X, X)
                yt = self.transformer_y.transform(scheme_y, y)

            with self.inst.timer("setup"):
                cache = self.model.setup(Xt, yt, scheme_X, parallel, verbosity)

            with self.inst.timer("train"):
                result = self.model.fit(cache, False, parallel, verbosity)

        self.state = MachineState(
            scheme_X=scheme_X,
            scheme_y=scheme_y,
            predictor=result.predictor,
            report=result.report,
            cache=result.cache,
        )

        self.inst.metrics.record("n_train", result.cache.n_samples)
        self.inst.metrics.record("n_features", len(scheme_X.features))

        if verbosity > 0:
            logs.info(
                f"[SupervisedMachine] trained {self.model.__class__.__name__} "
                f"rows={len(X)} features={len(scheme_X.features)}"
            )
        return self

    # ------------------------------------------------------------------
    # predict
    # ------------------------------------------------------------------
    def _raw_predict(self, X: pd.DataFrame, parallel: bool) -> np.ndarray:
        if not self.is_fitted:
            raise NotFittedError("SupervisedMachine.fit must be called before predict")

        Xt = self.transformer_X.transform(self.state.scheme_X, X)
        return self.model.predict(self.state.predictor, Xt, parallel, 0)

    def predict(self, X: pd.DataFrame, parallel: bool = True) -> np.ndarray:
        yhat = self._raw_predict(X, parallel)
        return self.transformer_y.inverse_transform(self.state.scheme_y, yhat)

    def predict_proba(self, X: pd.DataFrame, parallel: bool = True) -> np.ndarray:
        if not isinstance(self.model, LGBMBinaryClassifier):
            raise TypeError(
                f"predict_proba needs a binary classifier, got {self.model.__class__.__name__}"
            )
        return self._raw_predict(X, parallel)

    # ------------------------------------------------------------------
    # persistence
    # ------------------------------------------------------------------
    def save(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        joblib.dump(self, path)
        logs.info(f"[SupervisedMachine] saved → {path}")
        return path

    @classmethod
    def load(cls, path: Union[str, Path]) -> "SupervisedMachine":
        obj = joblib.load(Path(path))
        if not isinstance(obj, cls):
            raise TypeError(f"{path} does not hold a {cls.__name__} (got {type(obj).__name__})")
        return obj
