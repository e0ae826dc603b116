#!filepath: tests/score/test_adagrad_update.py
import math

import pytest

from online_linear import SparseRow


def test_concrete_scenario(make_adagrad, row_3):
    """
    feature 3 = [w=0.5, g2=0.0], bias = [0.1, 0.0]
    score = 0.1 + 0.5 * 2.0 = 1.1
    pg=0.3, lr=0.1, l2=0:
        g  = 0.6
        g2 = 0.36
        w  = 0.5 - 0.1 * 0.6 / 0.6 = 0.4
    """
    score, store = make_adagrad(num_features=8, learning_rate=0.1, l2=0.0)
    store.get(3)[:] = [0.5, 0.0]
    store.get_bias()[:] = [0.1, 0.0]

    assert score.compute_score(row_3, store) == pytest.approx(1.1)

    score.apply_gradient(row_3, store, 0.3)

    assert store.get(3)[1] == pytest.approx(0.36)
    assert store.get(3)[0] == pytest.approx(0.4, abs=1e-12)

    # bias：g = pg = 0.3, g2 = 0.09, w = 0.1 - 0.1 * 0.3 / 0.3 = 0.0
    assert store.get_bias()[1] == pytest.approx(0.09)
    assert store.get_bias()[0] == pytest.approx(0.0, abs=1e-12)


def test_zero_signal_zero_l2_is_noop(make_adagrad):
    score, store = make_adagrad(learning_rate=0.5, l2=0.0)
    store.get(0)[:] = [0.7, 0.0]   # 首次 touch，累加器为 0
    store.get(1)[:] = [-0.2, 0.25]
    store.get_bias()[:] = [0.3, 0.0]

    row = SparseRow.from_pairs([(0, 1.0), (1, 3.0)])
    score.apply_gradient(row, store, 0.0)

    # g == 0 且 g2 == 0：inv_sqrt(0) == 0，步长为 0，不产生 nan
    assert store.get(0)[0] == 0.7
    assert store.get(0)[1] == 0.0
    assert store.get(1)[0] == -0.2
    assert store.get(1)[1] == 0.25
    assert store.get_bias()[0] == 0.3
    assert store.get_bias()[1] == 0.0
    assert not any(math.isnan(v) for v in store.w)


def test_l2_term_enters_feature_gradient(make_adagrad):
    score, store = make_adagrad(learning_rate=0.1, l2=0.5)
    store.get(0)[:] = [1.0, 0.0]

    score.apply_gradient(SparseRow.from_pairs([(0, 1.0)]), store, 0.0)

    # g = 0 * 1 + 0.5 * 1.0 = 0.5 → g2 = 0.25 → w = 1.0 - 0.1 * 0.5 / 0.5
    assert store.get(0)[1] == pytest.approx(0.25)
    assert store.get(0)[0] == pytest.approx(0.9)


def test_bias_has_no_l2_term(make_adagrad):
    score, store = make_adagrad(learning_rate=0.1, l2=0.5)
    store.get_bias()[:] = [1.0, 0.0]

    score.apply_gradient(SparseRow(), store, 0.0)

    assert store.get_bias()[0] == 1.0
    assert store.get_bias()[1] == 0.0


def test_untouched_features_unchanged(make_adagrad):
    score, store = make_adagrad(num_features=4)
    score.apply_gradient(SparseRow.from_pairs([(1, 1.0)]), store, 1.0)

    assert not store.get(0).any()
    assert not store.get(2).any()
    assert not store.get(3).any()
    assert store.get(1)[0] == pytest.approx(-0.1)
    assert store.get(1)[1] == pytest.approx(1.0)


def test_duplicate_entries_update_twice(make_adagrad):
    score, store = make_adagrad(learning_rate=0.1)

    score.apply_gradient(SparseRow.from_pairs([(0, 1.0), (0, 1.0)]), store, 1.0)

    # 第一次：g2 = 1, w = -0.1；第二次：g2 = 2, w = -0.1 - 0.1 / sqrt(2)
    assert store.get(0)[1] == pytest.approx(2.0)
    assert store.get(0)[0] == pytest.approx(-0.1 - 0.1 / math.sqrt(2.0))
