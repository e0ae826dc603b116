#!filepath: online_linear/observability/instrumentation.py
from __future__ import annotations

import time
from dataclasses import dataclass
from contextlib import contextmanager
from collections import OrderedDict
from typing import Dict

from online_linear.observability.progress import ProgressReporter
from online_linear.observability.metrics import MetricRecorder
from online_linear.observability.timeline_reporter import TimelineReporter


@dataclass
class TrainState:
    """
    训练过程中的位置：
    - epoch：当前 epoch（从 0 开始）
    - examples_seen：累计已训练样本数（跨 epoch）
    """

    epoch: int = 0
    examples_seen: int = 0


@dataclass
class Instrumentation:
    """
    Instrumentation（Leaf-only accounting + Parent scope）。

    设计铁律：
    1. Timeline 只记录【叶子节点】（record=True），即每个 epoch
    2. 父级 timer 仅作为时间语义边界（record=False）
    3. Instrumentation 只包裹 epoch 级别，不进入 score / update 热路径
    """

    enabled: bool = True

    def __post_init__(self):
        self.progress = ProgressReporter(enabled=self.enabled)
        self.metrics = MetricRecorder(enabled=self.enabled)
        self.state = TrainState()

        # timeline: OrderedDict[leaf_name, elapsed_seconds]
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        """
        Context-manager timer.

        Parameters
        ----------
        name : str
            计时名称
        record : bool
            - True  : 叶子节点，记录到 timeline
            - False : 父级 scope，不产生副作用
        """
        inst = self

        @contextmanager
        def _ctx():
            if not inst.enabled:
                yield
                return

            start = time.perf_counter()
            try:
                yield
            finally:
                if record:
                    inst.timeline[name] = time.perf_counter() - start

        return _ctx()

    def elapsed(self, name: str) -> float:
        return self.timeline.get(name, 0.0)

    def generate_timeline_report(self, title: str):
        TimelineReporter(self.timeline, title).print()


# -------------------------------------------------------------
# No-op Instrumentation（禁用 observability）
# -------------------------------------------------------------
class NoOpInstrumentation:
    """Instrumentation disabled 时使用。"""

    enabled = False

    def __init__(self):
        self.progress = ProgressReporter(enabled=False)
        self.metrics = MetricRecorder(enabled=False)
        self.state = TrainState()
        self.timeline: Dict[str, float] = OrderedDict()

    def timer(self, name: str, *, record: bool = True):
        return _NoOpTimer()

    def elapsed(self, name: str) -> float:
        return 0.0

    def generate_timeline_report(self, title: str):
        pass


class _NoOpTimer:
    def __enter__(self):
        pass

    def __exit__(self, exc_type, exc, tb):
        pass
