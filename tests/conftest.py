# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from online_linear import (
    LinearScore,
    OptimizerConfig,
    ParameterStore,
    SparseRow,
)


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture
def make_adagrad():
    """
    Factory fixture: (LinearScore, ParameterStore) for AdaGrad.

    Usage:
        score, store = make_adagrad(num_features=8, learning_rate=0.1)
    """

    def _make(num_features: int = 8, learning_rate: float = 0.1, l2: float = 0.0):
        cfg = OptimizerConfig(
            variant="adagrad",
            learning_rate=learning_rate,
            l2_regularization=l2,
        )
        return LinearScore(cfg), ParameterStore(num_features, 2)

    return _make


@pytest.fixture
def make_ftrl():
    def _make(num_features: int = 8):
        cfg = OptimizerConfig(variant="ftrl", learning_rate=0.1)
        return LinearScore(cfg), ParameterStore(num_features, 3)

    return _make


@pytest.fixture
def row_3() -> SparseRow:
    return SparseRow.from_pairs([(3, 2.0)])
