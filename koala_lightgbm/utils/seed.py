# koala_lightgbm/utils/seed.py
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

# LightGBM seeds are C int32
_INT32_MAX = 2**31 - 1

SeedSource = Callable[[], int]


def wall_clock_seed() -> int:
    """
    Current wall-clock time in whole seconds, folded into a nonzero int32.
    """
    seed = int(round(time.time())) % _INT32_MAX
    return seed or 1


@dataclass(frozen=True)
class FixedSeedSource:
    """
    Deterministic seed source (tests / reproducible runs).
    """

    seed: int

    def __post_init__(self):
        if self.seed == 0:
            raise ValueError("FixedSeedSource seed must be nonzero (0 means 'unset')")

    def __call__(self) -> int:
        return self.seed
