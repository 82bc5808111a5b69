# koala_lightgbm/models/lgbm_model.py
from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional, Tuple, Type

import numpy as np

from koala_lightgbm import logs
from koala_lightgbm.models.base import SupervisedModel
from koala_lightgbm.models.params import LGBMBinaryParams, LGBMParams
from koala_lightgbm.training.context import FitCache
from koala_lightgbm.training.engines.registry import resolve_train_engine
from koala_lightgbm.training.engines.train_engine import EvalHistory, TrainEngine
from koala_lightgbm.training.engines.train_result import TrainResult
from koala_lightgbm.transforms.categorical import LGBMTransformerX
from koala_lightgbm.transforms.target import (
    BinaryTargetTransformer,
    RegressionTargetTransformer,
)
from koala_lightgbm.utils.errors import (
    CategoricalFeatureResolutionError,
    FeatureIncompatibilityError,
)
from koala_lightgbm.utils.seed import SeedSource, wall_clock_seed

# 0 == "unset" for each of these
SEED_PARAMS = ("feature_fraction_seed", "bagging_seed", "data_random_seed")

REPORT_KEY = "rms_raw_validation_errors"


class LGBMModel(SupervisedModel):
    """
    LightGBM model wrapper (shared by regressor / binary classifier).

    Responsibility:
    - hold the hyperparameter record (mutable until fit)
    - setup: own the numeric data, resolve categorical columns to indices
    - fit: validation split, seed defaulting, thread pinning, engine call,
      validation-error report
    - predict: straight delegation to the engine

    Collaborators are injected:
    - engine      : TrainEngine (LightGBM by default)
    - seed_source : () -> int, used for seeds left at 0 (wall clock by default)
    """

    objective: str = ""
    params_class: Type[LGBMParams] = LGBMParams

    def __init__(
        self,
        hyperparams: Optional[LGBMParams] = None,
        *,
        engine: Optional[TrainEngine] = None,
        seed_source: SeedSource = wall_clock_seed,
        **overrides: Any,
    ):
        if hyperparams is None:
            given: Dict[str, Any] = {}
        elif type(hyperparams) is self.params_class:
            given = hyperparams.snapshot()
        else:
            # another record kind: only explicitly set fields carry over,
            # the rest take this wrapper's defaults (e.g. binary metric)
            given = copy.deepcopy(hyperparams.model_dump(exclude_unset=True))

        # always a private record: set_params never reaches the caller's object
        self.hyperparams = self.params_class(**{**given, **overrides})
        self.engine = engine if engine is not None else resolve_train_engine("lightgbm")
        self.seed_source = seed_source

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        defaults = self.params_class().snapshot()
        changed = {
            k: v for k, v in self.params().items()
            if k != "num_threads" and defaults.get(k) != v
        }
        inner = ", ".join(f"{k}={v!r}" for k, v in changed.items())
        return f"{self.name}({inner})"

    # ------------------------------------------------------------------
    # Hyperparameters
    # ------------------------------------------------------------------
    def params(self) -> Dict[str, Any]:
        return self.hyperparams.snapshot()

    def set_params(self, **kwargs: Any) -> "LGBMModel":
        for key, value in kwargs.items():
            if key not in self.params_class.model_fields:
                raise ValueError(f"{self.name} has no hyperparameter {key!r}")
            setattr(self.hyperparams, key, value)
        return self

    # ------------------------------------------------------------------
    # Default transformers
    # ------------------------------------------------------------------
    def default_transformer_X(self) -> LGBMTransformerX:
        return LGBMTransformerX()

    def default_transformer_y(self):
        return RegressionTargetTransformer()

    # ------------------------------------------------------------------
    # setup
    # ------------------------------------------------------------------
    def setup(self, X, y, scheme_X, parallel: bool = True, verbosity: int = 1) -> FitCache:
        features = list(scheme_X.features)

        # the engine needs owned, contiguous storage; inputs may be views
        X = np.array(X, dtype=np.float64, order="C", copy=True)
        y = np.array(y, dtype=np.float64, copy=True)

        if X.ndim != 2 or X.shape[1] != len(features):
            raise FeatureIncompatibilityError(
                f"[{self.name}] X has shape {X.shape}; expected {len(features)} columns "
                f"for features {features}"
            )
        if y.ndim != 1 or y.shape[0] != X.shape[0]:
            raise ValueError(
                f"[{self.name}] y has shape {y.shape}; expected ({X.shape[0]},)"
            )

        self._check_target(y)

        index = {feature: j for j, feature in enumerate(features)}
        categorical_feature_indices: List[int] = []
        for feature in scheme_X.categorical_features:
            if feature not in index:
                raise CategoricalFeatureResolutionError(
                    f"[{self.name}] categorical feature {feature!r} is not among "
                    f"the retained features {features}"
                )
            categorical_feature_indices.append(index[feature])

        return FitCache(X=X, y=y, categorical_feature_indices=categorical_feature_indices)

    def _check_target(self, y: np.ndarray) -> None:
        pass

    # ------------------------------------------------------------------
    # fit
    # ------------------------------------------------------------------
    def fit(self, cache: FitCache, add: bool = False, parallel: bool = True, verbosity: int = 1) -> TrainResult:
        train_cache, valid = self.split_validation(cache)

        parameters = self.engine_params(
            categorical_feature_indices=train_cache.categorical_feature_indices,
            parallel=parallel,
            verbosity=verbosity,
            has_validation=valid is not None,
        )

        if verbosity > 1:
            logs.info(f"[{self.name}] engine params: {parameters}")
        else:
            logs.debug(f"[{self.name}] engine params: {parameters}")

        valid_sets = [valid] if valid is not None else []

        predictor, evals = self.engine.train(
            params=parameters,
            X=train_cache.X,
            y=train_cache.y,
            valid_sets=valid_sets,
        )

        report = self.build_report(evals)

        if verbosity > 0:
            logs.info(
                f"[{self.name}] fitted n_train={train_cache.n_samples} "
                f"n_valid={0 if valid is None else len(valid[1])}"
            )

        return TrainResult(predictor=predictor, report=report, cache=train_cache)

    def split_validation(
        self, cache: FitCache
    ) -> Tuple[FitCache, Optional[Tuple[np.ndarray, np.ndarray]]]:
        """
        Order-preserving split: first round(n * (1 - f)) rows train, the
        rest validate. f == 0 → no split.
        """
        fraction = self.hyperparams.validation_fraction
        if fraction == 0.0:
            return cache, None

        n = cache.n_samples
        n_train = int(round(n * (1.0 - fraction)))

        if n_train == 0:
            raise ValueError(
                f"[{self.name}] validation_fraction={fraction} leaves no training rows (n={n})"
            )
        if n_train == n:
            logs.warning(
                f"[{self.name}] validation_fraction={fraction} leaves no validation rows "
                f"(n={n}); training without validation"
            )
            return cache, None

        train_cache = FitCache(
            X=cache.X[:n_train].copy(),
            y=cache.y[:n_train].copy(),
            categorical_feature_indices=list(cache.categorical_feature_indices),
        )
        valid = (cache.X[n_train:].copy(), cache.y[n_train:].copy())
        return train_cache, valid

    def engine_params(
        self,
        *,
        categorical_feature_indices: List[int],
        parallel: bool,
        verbosity: int,
        has_validation: bool,
    ) -> Dict[str, Any]:
        """
        Hyperparameter snapshot → engine parameter mapping.
        The hyperparameter record itself is never modified.
        """
        parameters = self.params()
        parameters.pop("validation_fraction")

        # empty lists / strings would reach the native parser as "key="
        for key in [k for k, v in parameters.items() if v == [] or v == ""]:
            parameters.pop(key)

        unset = [key for key in SEED_PARAMS if parameters[key] == 0]
        if unset:
            seed = int(self.seed_source())
            for key in unset:
                parameters[key] = seed

        if not parallel:
            parameters["num_threads"] = 1

        if not has_validation:
            # LightGBM cannot early-stop without a validation set
            parameters.pop("early_stopping_round")

        parameters["categorical_feature"] = list(categorical_feature_indices)
        parameters["objective"] = self.objective
        parameters["verbosity"] = max(-1, min(verbosity, 2) - 1)
        return parameters

    @staticmethod
    def build_report(evals: EvalHistory) -> Dict[str, Any]:
        report: Dict[str, Any] = {}
        if not evals:
            return report

        first_valid = next(iter(evals.values()))
        if not first_valid:
            return report

        metric, series = next(iter(first_valid.items()))
        report[REPORT_KEY] = [float(v) for v in series]
        report["validation_metric"] = metric
        report["validation_errors"] = {
            name: [float(v) for v in values] for name, values in first_valid.items()
        }
        return report

    # ------------------------------------------------------------------
    # predict
    # ------------------------------------------------------------------
    def predict(self, predictor: Any, X, parallel: bool = True, verbosity: int = 0) -> np.ndarray:
        return self.engine.predict(predictor, np.asarray(X, dtype=np.float64))


class LGBMRegressor(LGBMModel):
    objective = "regression"
    params_class = LGBMParams


class LGBMBinaryClassifier(LGBMModel):
    """
    Binary classifier: targets must be 0 / 1; predict returns P(y == 1).
    """

    objective = "binary"
    params_class = LGBMBinaryParams

    def default_transformer_y(self) -> BinaryTargetTransformer:
        return BinaryTargetTransformer()

    def _check_target(self, y: np.ndarray) -> None:
        bad = ~np.isin(y, (0.0, 1.0))
        if bad.any():
            raise ValueError(
                f"[{self.name}] targets must be 0 or 1; got {np.unique(y[bad])[:10]}"
            )
