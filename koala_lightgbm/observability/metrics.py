#!filepath: koala_lightgbm/observability/metrics.py
from dataclasses import dataclass, field
from typing import Any, Dict

from koala_lightgbm import logs


@dataclass
class MetricRecorder:
    """
    Fit-level scalars (n_train, n_features, ...)

    同名指标后写覆盖先写；仅 debug 级日志，不干扰 verbosity=0 的训练。
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.debug(f"[Metric] {name} = {value}")
