# koala_lightgbm/transforms/categorical.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Hashable, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from koala_lightgbm import logs
from koala_lightgbm.transforms.to_int import ToIntScheme, ToIntTransformer
from koala_lightgbm.utils.errors import FeatureIncompatibilityError, UserInputError

CategoricalPredicate = Callable[[pd.Series], bool]


def is_non_real_column(column: pd.Series) -> bool:
    """
    Default categorical rule: a column is categorical unless its dtype is a
    real numeric dtype (float / int / bool all count as real).
    """
    return not pd.api.types.is_numeric_dtype(column.dtype)


@dataclass(frozen=True)
class LGBMSchemeX:
    """
    Fitted input scheme (FROZEN)

    Invariants:
    - categorical_features ⊆ features
    - schemes[i] encodes categorical_features[i]
    """

    features: Tuple[Hashable, ...]
    categorical_features: Tuple[Hashable, ...]
    schemes: Tuple[ToIntScheme, ...]
    to_int_transformer: ToIntTransformer

    def __post_init__(self):
        missing = [c for c in self.categorical_features if c not in self.features]
        if missing:
            raise ValueError(f"Categorical features not among features: {missing}")
        if len(self.schemes) != len(self.categorical_features):
            raise ValueError(
                f"Got {len(self.schemes)} encoding schemes for "
                f"{len(self.categorical_features)} categorical features"
            )


class LGBMTransformerX:
    """
    Turns a DataFrame into the float matrix LightGBM trains on.

    Every categorical feature is integer-encoded (one ToIntScheme per column),
    then the frame is converted to float64. With categorical_features empty,
    the categorical set is inferred column by column with `is_categorical`.
    """

    def __init__(
        self,
        sorted: bool = False,
        categorical_features: Optional[Sequence[Hashable]] = None,
        is_categorical: CategoricalPredicate = is_non_real_column,
    ):
        self.sorted = sorted
        self.categorical_features: List[Hashable] = list(categorical_features or [])
        self.is_categorical = is_categorical

    def fit(self, X: pd.DataFrame, parallel: bool = True, verbosity: int = 1) -> LGBMSchemeX:
        to_int_transformer = ToIntTransformer(sorted=self.sorted, map_unseen_to_minus_one=True)
        features = list(X.columns)

        if self.categorical_features:
            unknown = [c for c in self.categorical_features if c not in X.columns]
            if unknown:
                raise UserInputError(f"Categorical features not in table: {unknown}")
            categorical_features = list(self.categorical_features)
        else:
            categorical_features = [f for f in features if self.is_categorical(X[f])]

        schemes = [
            to_int_transformer.fit(X[feature], parallel, verbosity)
            for feature in categorical_features
        ]

        if verbosity > 1:
            logs.info(
                f"[LGBMTransformerX] features={len(features)} "
                f"categorical={categorical_features}"
            )

        return LGBMSchemeX(
            features=tuple(features),
            categorical_features=tuple(categorical_features),
            schemes=tuple(schemes),
            to_int_transformer=to_int_transformer,
        )

    def transform(self, scheme_X: LGBMSchemeX, X: pd.DataFrame) -> np.ndarray:
        if not set(scheme_X.features).issubset(set(X.columns)):
            missing = [f for f in scheme_X.features if f not in X.columns]
            raise FeatureIncompatibilityError(
                f"DataFrame feature incompatibility encountered; missing={missing}"
            )

        Xt = X[list(scheme_X.features)].copy()

        for feature, scheme in zip(scheme_X.categorical_features, scheme_X.schemes):
            Xt[feature] = scheme_X.to_int_transformer.transform(scheme, Xt[feature])

        return Xt.to_numpy(dtype=np.float64)
