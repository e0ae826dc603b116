#!filepath: tests/test_model.py
import pytest

from online_linear import (
    ConfigError,
    LinearModel,
    LinearScore,
    ModelConfig,
    OptimizerConfig,
    ParameterStore,
    SparseRow,
    build_model,
    predict_rows,
)


@pytest.mark.parametrize("variant, width", [("adagrad", 2), ("ftrl", 3)])
def test_build_model_sizes_store_from_variant(variant, width):
    model = build_model(ModelConfig(num_features=10, optimizer={"variant": variant}))

    assert model.store.width == width
    assert model.store.capacity == 10 * width
    assert model.store.get_bias().shape == (width,)
    assert not model.store.w.any()


def test_model_rejects_mismatched_store():
    with pytest.raises(ConfigError):
        LinearModel(
            store=ParameterStore(4, 3),
            score=LinearScore(OptimizerConfig(variant="adagrad")),
        )


def test_predict_and_update_delegate_to_score():
    model = build_model(
        ModelConfig(num_features=8, optimizer={"variant": "adagrad", "learning_rate": 0.1})
    )
    model.store.get(3)[:] = [0.5, 0.0]
    model.store.get_bias()[:] = [0.1, 0.0]
    row = SparseRow.from_pairs([(3, 2.0)])

    assert model.predict(row) == pytest.approx(1.1)
    model.update(row, 0.3)
    assert model.store.get(3)[0] == pytest.approx(0.4)


def test_predict_rows_with_sigmoid():
    model = build_model(ModelConfig(num_features=2))
    rows = [SparseRow(), SparseRow.from_pairs([(1, 1.0)])]

    assert list(predict_rows(model, rows)) == [0.0, 0.0]
    assert list(predict_rows(model, rows, sigmoid_output=True)) == [0.5, 0.5]
