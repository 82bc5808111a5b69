#!filepath: tests/models/test_model_registry.py
from __future__ import annotations

import pytest

from koala_lightgbm.models.lgbm_model import LGBMBinaryClassifier, LGBMRegressor
from koala_lightgbm.models.registry import ModelSpec, resolve_model
from koala_lightgbm.training.engines.lightgbm_engine import LightGBMTrainEngine
from koala_lightgbm.training.engines.registry import register_train_engine, resolve_train_engine


def test_resolve_regressor_with_params(fake_engine):
    model = resolve_model(
        spec=ModelSpec(family="lightgbm", task="regression"),
        params={"num_leaves": 31},
        engine=fake_engine,
    )
    assert isinstance(model, LGBMRegressor)
    assert model.params()["num_leaves"] == 31
    assert model.engine is fake_engine


def test_resolve_binary():
    model = resolve_model(spec=ModelSpec(family="lightgbm", task="binary"))
    assert isinstance(model, LGBMBinaryClassifier)
    assert isinstance(model.engine, LightGBMTrainEngine)


def test_unknown_model_raises():
    with pytest.raises(ValueError, match="Available"):
        resolve_model(spec=ModelSpec(family="xgboost", task="regression"))


def test_unknown_engine_raises():
    with pytest.raises(ValueError, match="lightgbm"):
        resolve_train_engine("catboost")


def test_register_custom_engine(monkeypatch, engine_factory):
    from koala_lightgbm.training.engines import registry

    monkeypatch.setattr(registry, "_ENGINE_REGISTRY", dict(registry._ENGINE_REGISTRY))
    register_train_engine("fake", engine_factory)

    engine = resolve_train_engine("fake")
    assert isinstance(engine, engine_factory)
    assert isinstance(resolve_train_engine(), LightGBMTrainEngine)
