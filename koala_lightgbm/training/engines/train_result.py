from dataclasses import dataclass
from typing import Any, Dict

from koala_lightgbm.training.context import FitCache


@dataclass(frozen=True)
class TrainResult:
    """
    TrainResult（FINAL / FROZEN）

    语义：
    - 一次 Model.fit 的纯内存态结果
    - cache 为切分后的训练数据（供后续增量训练）
    """
    predictor: Any
    report: Dict[str, Any]
    cache: FitCache
