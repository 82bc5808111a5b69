"""
Train Engines (FINAL)

An engine is the ONLY place that talks to a native training library.

Engine Responsibilities
-----------------------

A TrainEngine decides:
- How the flat parameter mapping becomes native objects (Dataset, Booster)
- How validation sets are attached and their metric history recorded
- How a trained predictor produces predictions

A TrainEngine MUST NOT:
- Split data, default seeds, or touch thread counts
  (those are wrapper semantics, see koala_lightgbm.models)
- Swallow native errors: failures propagate unchanged


Engine Guarantees
-----------------

train(...) returns:

predictor
    Opaque trained handle, only ever passed back to predict(...).

evals
    {valid_name: {metric_name: [value per iteration]}},
    ordered like the validation sets given.
"""
from koala_lightgbm.training.engines.train_engine import EvalHistory, TrainEngine
from koala_lightgbm.training.engines.train_result import TrainResult
from koala_lightgbm.training.engines.registry import (
    register_train_engine,
    resolve_train_engine,
)

__all__ = [
    "EvalHistory",
    "TrainEngine",
    "TrainResult",
    "register_train_engine",
    "resolve_train_engine",
]
