#!filepath: koala_lightgbm/observability/timeline_reporter.py
from typing import Dict

from koala_lightgbm import logs


class TimelineReporter:
    """
    训练阶段耗时报告（一次 fit 一份）

    每行：stage、秒数、占总耗时的百分比；label 通常是模型类名。
    """

    def __init__(self, timeline: Dict[str, float], label: str):
        self.timeline = timeline
        self.label = label

    def print(self):
        total = sum(self.timeline.values())

        logs.info(f"[Timeline] ===== Timeline for {self.label} =====")
        for stage, sec in self.timeline.items():
            share = 100.0 * sec / total if total > 0 else 0.0
            logs.info(f"[Timeline] {str(stage):<24} {sec:>8.3f}s {share:>5.1f}%")

        logs.info(f"[Timeline] Total{'':<19} {total:>8.3f}s")
        logs.info("[Timeline] ===========================================")
