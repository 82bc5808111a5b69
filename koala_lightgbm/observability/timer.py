#!filepath: koala_lightgbm/observability/timer.py
import time
from typing import Dict


class Timer:
    """
    Stage stopwatch for SupervisedMachine.fit

    按阶段名计时（fit_transformers / transform / setup / train）：
    - start(stage)
    - end(stage) → 该阶段耗时秒数；未 start 的阶段返回 0.0
    - 同名阶段重新 start 会覆盖上一次起点
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._started: Dict[str, float] = {}

    def start(self, stage: str):
        if not self.enabled:
            return
        self._started[stage] = time.perf_counter()

    def end(self, stage: str) -> float:
        if not self.enabled:
            return 0.0
        started = self._started.pop(stage, None)
        if started is None:
            return 0.0
        return time.perf_counter() - started
