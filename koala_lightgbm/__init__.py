#!filepath: koala_lightgbm/__init__.py

from .utils.logger import Logging, logs
from .utils.errors import (
    UserInputError,
    FeatureIncompatibilityError,
    CategoricalFeatureResolutionError,
    NotFittedError,
)
from .utils.seed import FixedSeedSource, wall_clock_seed
from .transforms.to_int import ToIntScheme, ToIntTransformer
from .transforms.categorical import LGBMSchemeX, LGBMTransformerX, is_non_real_column
from .transforms.target import BinaryTargetTransformer, RegressionTargetTransformer
from .models.params import LGBMParams, LGBMBinaryParams
from .models.lgbm_model import LGBMModel, LGBMRegressor, LGBMBinaryClassifier
from .models.registry import ModelSpec, resolve_model
from .training.machine import SupervisedMachine
from .config.app_config import AppConfig

__all__ = [
    "logs", "Logging",
    "UserInputError", "FeatureIncompatibilityError",
    "CategoricalFeatureResolutionError", "NotFittedError",
    "FixedSeedSource", "wall_clock_seed",
    "ToIntScheme", "ToIntTransformer",
    "LGBMSchemeX", "LGBMTransformerX", "is_non_real_column",
    "BinaryTargetTransformer", "RegressionTargetTransformer",
    "LGBMParams", "LGBMBinaryParams",
    "LGBMModel", "LGBMRegressor", "LGBMBinaryClassifier",
    "ModelSpec", "resolve_model",
    "SupervisedMachine",
    "AppConfig",
]
