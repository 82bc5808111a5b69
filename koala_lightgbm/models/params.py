# koala_lightgbm/models/params.py
from __future__ import annotations

import copy
import os
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


def _default_num_threads() -> int:
    return os.cpu_count() or 1


class LGBMParams(BaseModel):
    """
    LGBMParams（hyperparameter record）

    Semantics:
    - Field names are LightGBM parameter names (or accepted aliases),
      so a snapshot can be handed to the engine as-is
    - Seeds left at 0 mean "unset"; they are filled in at fit time on the
      snapshot, never written back here
    - validation_fraction is wrapper-only and never reaches the engine

    Tuning notes:
    https://lightgbm.readthedocs.io/en/latest/Parameters-Tuning.html
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    num_iterations: int = Field(10, ge=0)
    learning_rate: float = Field(0.1, gt=0)
    num_leaves: int = Field(127, gt=1)
    max_depth: int = -1
    tree_learner: str = "serial"
    num_threads: int = Field(default_factory=_default_num_threads)
    histogram_pool_size: float = -1.0
    min_data_in_leaf: int = Field(100, ge=0)  # aka min_patterns_split
    min_sum_hessian_in_leaf: float = Field(10.0, ge=0)
    feature_fraction: float = Field(1.0, gt=0, le=1)
    feature_fraction_seed: int = 0
    bagging_fraction: float = Field(1.0, gt=0, le=1)
    bagging_freq: int = Field(1, ge=0)
    bagging_seed: int = 0
    early_stopping_round: int = 4
    max_bin: int = Field(255, gt=1)
    data_random_seed: int = 0
    save_binary: bool = False
    is_unbalance: bool = False
    metric: List[str] = Field(default_factory=lambda: ["l2"])
    metric_freq: int = Field(1, gt=0)
    is_training_metric: bool = False
    ndcg_at: List[int] = Field(default_factory=list)
    num_machines: int = Field(1, gt=0)
    local_listen_port: int = 12400
    time_out: int = 120
    machine_list_file: str = ""

    # 0 → no validation split, no validation errors reported
    validation_fraction: float = Field(0.0, ge=0.0, lt=1.0)

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self.model_dump())


class LGBMBinaryParams(LGBMParams):
    metric: List[str] = Field(default_factory=lambda: ["binary_logloss"])
