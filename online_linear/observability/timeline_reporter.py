#!filepath: online_linear/observability/timeline_reporter.py
from typing import Dict
from online_linear import logs


class TimelineReporter:
    """
    训练 Timeline 报告：
    - 阶段 → 耗时秒数
    """

    def __init__(self, timeline: Dict[str, float], title: str):
        self.timeline = timeline
        self.title = title

    def total(self) -> float:
        return sum(self.timeline.values())

    def print(self):
        logs.info(f"[Timeline] ===== Timeline for {self.title} =====")

        for name, sec in self.timeline.items():
            logs.info(f"[Timeline] {str(name):<30} {sec:>8.3f}s")

        logs.info(f"[Timeline] Total{'':<27} {self.total():>8.3f}s")
        logs.info("[Timeline] ===========================================")
