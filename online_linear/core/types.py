# online_linear/core/types.py
from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Mapping, NamedTuple, Tuple


class FeatureEntry(NamedTuple):
    """
    (feature_id, feature_value)，不可变。
    feature_id 已由外部映射到从 0 开始的稠密整数空间，这里不做 hash。
    """

    feature_id: int
    feature_value: float


class SparseRow:
    """
    SparseRow（FINAL）

    语义：
    - 一个样本的非零特征，按插入顺序迭代
    - 可重复迭代（restartable）
    - 重复的 feature_id 不去重，每次出现独立参与 score / gradient
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[FeatureEntry] = ()):
        self._entries: List[FeatureEntry] = [
            e if isinstance(e, FeatureEntry) else FeatureEntry(int(e[0]), float(e[1]))
            for e in entries
        ]

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, float]]) -> "SparseRow":
        return cls(FeatureEntry(int(fid), float(val)) for fid, val in pairs)

    @classmethod
    def from_dict(cls, mapping: Mapping[int, float]) -> "SparseRow":
        return cls.from_pairs(mapping.items())

    def append(self, feature_id: int, feature_value: float) -> None:
        self._entries.append(FeatureEntry(int(feature_id), float(feature_value)))

    def max_feature_id(self) -> int:
        """空行返回 -1"""
        return max((e.feature_id for e in self._entries), default=-1)

    def __iter__(self) -> Iterator[FeatureEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SparseRow):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"SparseRow({self._entries!r})"


class OptimizerVariant(str, Enum):
    """
    封闭枚举：配置校验阶段解析一次，之后只传 tag，不再比较字符串。
    """

    ADAGRAD = "adagrad"
    FTRL = "ftrl"

    @property
    def width(self) -> int:
        # adagrad: [w, g2]; ftrl: [w, n, z]
        return _WIDTH[self]

    @classmethod
    def parse(cls, value: "str | OptimizerVariant") -> "OptimizerVariant":
        if isinstance(value, cls):
            return value
        name = str(value).strip().lower()
        for variant in cls:
            if variant.value == name:
                return variant
        available = ", ".join(v.value for v in cls)
        raise ValueError(f"Unknown optimizer variant: {value!r}. Available: {available}")


_WIDTH = {
    OptimizerVariant.ADAGRAD: 2,
    OptimizerVariant.FTRL: 3,
}
