#!filepath: tests/models/test_lgbm_setup.py
from __future__ import annotations

import numpy as np
import pytest

from koala_lightgbm.models.lgbm_model import LGBMBinaryClassifier, LGBMRegressor
from koala_lightgbm.transforms.categorical import LGBMSchemeX, LGBMTransformerX
from koala_lightgbm.transforms.to_int import ToIntTransformer
from koala_lightgbm.utils.errors import (
    CategoricalFeatureResolutionError,
    FeatureIncompatibilityError,
)


def _scheme(features, categorical):
    # schemes are not consulted by setup; only names matter
    return LGBMSchemeX(
        features=tuple(features),
        categorical_features=tuple(categorical),
        schemes=tuple(object() for _ in categorical),
        to_int_transformer=ToIntTransformer(),
    )


def test_setup_resolves_categorical_indices(fake_engine, mixed_frame):
    t = LGBMTransformerX()
    scheme = t.fit(mixed_frame)
    X = t.transform(scheme, mixed_frame)

    cache = LGBMRegressor(engine=fake_engine).setup(X, np.zeros(len(X)), scheme)

    # color → column 1, size → column 3
    assert cache.categorical_feature_indices == [1, 3]


def test_setup_copies_inputs(fake_engine):
    base = np.arange(12, dtype=np.float64).reshape(6, 2)
    view = base[::2]  # non-contiguous view
    y = np.arange(3, dtype=np.float64)

    cache = LGBMRegressor(engine=fake_engine).setup(view, y, _scheme(["a", "b"], []))

    assert cache.X.flags["C_CONTIGUOUS"]
    assert not np.shares_memory(cache.X, base)
    assert not np.shares_memory(cache.y, y)
    np.testing.assert_array_equal(cache.X, view)


def test_setup_fails_fast_on_unresolvable_categorical(fake_engine):
    # bypass LGBMSchemeX invariants to mimic a hand-built scheme
    class LooseScheme:
        features = ("a", "b")
        categorical_features = ("c",)

    with pytest.raises(CategoricalFeatureResolutionError):
        LGBMRegressor(engine=fake_engine).setup(np.zeros((2, 2)), np.zeros(2), LooseScheme())


def test_setup_rejects_column_mismatch(fake_engine):
    with pytest.raises(FeatureIncompatibilityError):
        LGBMRegressor(engine=fake_engine).setup(
            np.zeros((4, 3)), np.zeros(4), _scheme(["a", "b"], [])
        )


def test_setup_rejects_length_mismatch(fake_engine):
    with pytest.raises(ValueError):
        LGBMRegressor(engine=fake_engine).setup(
            np.zeros((4, 2)), np.zeros(3), _scheme(["a", "b"], [])
        )


def test_classifier_setup_requires_zero_one_targets(fake_engine):
    model = LGBMBinaryClassifier(engine=fake_engine)
    scheme = _scheme(["a"], [])

    model.setup(np.zeros((3, 1)), np.array([0.0, 1.0, 1.0]), scheme)
    with pytest.raises(ValueError):
        model.setup(np.zeros((3, 1)), np.array([0.0, 2.0, 1.0]), scheme)
