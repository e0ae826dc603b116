#!filepath: online_linear/observability/metrics.py
from dataclasses import dataclass, field
from typing import Any, Dict, List

from online_linear import logs


@dataclass
class MetricRecorder:
    """
    训练指标：
    - metrics：每个 name 的最新值
    - history：每个 name 按 epoch 追加的序列（loss 曲线 / nnz 变化）
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)
    history: Dict[str, List[Any]] = field(default_factory=dict)

    def record(self, name: str, value: Any, *, log: bool = True):
        if not self.enabled:
            return
        self.metrics[name] = value
        self.history.setdefault(name, []).append(value)
        if log:
            logs.info(f"[Metric] {name} = {value}")

    def series(self, name: str) -> List[Any]:
        return list(self.history.get(name, []))

    def best(self, name: str) -> Any:
        """最小值（loss 类指标），没有记录时返回 None"""
        values = self.history.get(name)
        return min(values) if values else None
