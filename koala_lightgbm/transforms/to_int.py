# koala_lightgbm/transforms/to_int.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Optional, Tuple

import numpy as np
import pandas as pd
from sklearn.preprocessing import OrdinalEncoder

from koala_lightgbm.utils.errors import UserInputError


@dataclass(frozen=True)
class ToIntScheme:
    """
    Fitted integer encoding of one column (FROZEN).

    - categories[i] ↔ code i
    - missing values (None / NaN / NA) share one code, stored as None in
      categories at position missing_code
    - unseen values → -1, or raise, per map_unseen_to_minus_one
    """

    feature: Hashable
    categories: Tuple[Any, ...]
    map_unseen_to_minus_one: bool
    missing_code: Optional[int]
    encoder: Optional[OrdinalEncoder]

    @property
    def mapping(self) -> Dict[Any, int]:
        return {value: code for code, value in enumerate(self.categories)}

    @property
    def n_categories(self) -> int:
        return len(self.categories)

    @property
    def value_codes(self) -> np.ndarray:
        # encoder output j → final code of the j-th non-missing category
        return np.array(
            [code for code in range(self.n_categories) if code != self.missing_code],
            dtype=np.int64,
        )


class ToIntTransformer:
    """
    Maps the distinct values of a column to 0..k-1.

    Parameters
    ----------
    sorted : bool
        True  → codes follow sorted order of the values (missing last)
        False → codes follow first-seen order (missing included)
    map_unseen_to_minus_one : bool
        True  → values not seen at fit time encode as -1
        False → such values raise ValueError at transform time

    Missing markers (None / NaN / pd.NA / NaT) are one value: if the fit
    column holds any, they get a code like every other value.
    Python equality applies, so True and 1 are the same value.
    """

    def __init__(self, sorted: bool = False, map_unseen_to_minus_one: bool = True):
        self.sorted = sorted
        self.map_unseen_to_minus_one = map_unseen_to_minus_one

    def fit(self, values: pd.Series, parallel: bool = True, verbosity: int = 1) -> ToIntScheme:
        column = np.asarray(values, dtype=object)
        if column.shape[0] == 0:
            raise ValueError(f"Cannot fit integer encoding for column {values.name!r}: no values")

        is_missing = pd.isna(column)
        seen = pd.unique(column[~is_missing])
        uniques = list(seen)

        if self.sorted:
            try:
                uniques = sorted(uniques)
            except TypeError as e:
                raise UserInputError(
                    f"Column {values.name!r} mixes value types that cannot be sorted: {e}"
                ) from e

        missing_code: Optional[int] = None
        categories = list(uniques)
        if is_missing.any():
            if self.sorted:
                missing_code = len(categories)
            else:
                # first-seen position: count distinct values before the first missing row
                first_missing = int(np.argmax(is_missing))
                before = column[:first_missing]
                missing_code = len(pd.unique(before[~pd.isna(before)]))
            categories.insert(missing_code, None)

        encoder = self._fit_encoder(values.name, uniques) if uniques else None

        return ToIntScheme(
            feature=values.name,
            categories=tuple(categories),
            map_unseen_to_minus_one=self.map_unseen_to_minus_one,
            missing_code=missing_code,
            encoder=encoder,
        )

    def _fit_encoder(self, name: Hashable, uniques) -> OrdinalEncoder:
        if self.map_unseen_to_minus_one:
            encoder = OrdinalEncoder(
                categories=[uniques],
                dtype=np.float64,
                handle_unknown="use_encoded_value",
                unknown_value=-1,
            )
        else:
            encoder = OrdinalEncoder(categories=[uniques], dtype=np.float64)

        try:
            encoder.fit(np.asarray(uniques, dtype=object).reshape(-1, 1))
        except TypeError as e:
            raise UserInputError(
                f"Column {name!r} mixes value types (e.g. str and int); "
                f"categorical columns must be uniformly strings or numbers: {e}"
            ) from e
        return encoder

    def transform(self, scheme: ToIntScheme, values: pd.Series) -> np.ndarray:
        column = np.asarray(values, dtype=object)
        codes = np.full(column.shape[0], -1, dtype=np.int64)
        if column.shape[0] == 0:
            return codes

        is_missing = pd.isna(column)

        if is_missing.any():
            if scheme.missing_code is not None:
                codes[is_missing] = scheme.missing_code
            elif not scheme.map_unseen_to_minus_one:
                raise ValueError(
                    f"Column {scheme.feature!r} has missing values, unseen during fit"
                )

        present = column[~is_missing]
        if present.shape[0] == 0:
            return codes

        if scheme.encoder is None:
            if not scheme.map_unseen_to_minus_one:
                raise ValueError(f"Column {scheme.feature!r} has values unseen during fit")
            return codes

        try:
            encoded = scheme.encoder.transform(present.reshape(-1, 1)).ravel().astype(np.int64)
        except TypeError as e:
            raise UserInputError(
                f"Column {scheme.feature!r} mixes value types unlike its fitted categories: {e}"
            ) from e

        codes[~is_missing] = np.where(
            encoded >= 0, scheme.value_codes[np.maximum(encoded, 0)], -1
        )
        return codes

    def inverse_transform(self, scheme: ToIntScheme, codes) -> np.ndarray:
        codes = np.asarray(codes, dtype=np.int64)
        out = np.empty(codes.shape[0], dtype=object)
        for i, code in enumerate(codes):
            out[i] = scheme.categories[code] if 0 <= code < scheme.n_categories else None
        return out
