# online_linear/training/online_train_engine.py
from __future__ import annotations

from typing import Iterable, List, Tuple

from online_linear import logs
from online_linear.config.training_config import TrainingConfig
from online_linear.core.types import SparseRow
from online_linear.loss.losses import resolve_loss
from online_linear.utils.math import is_finite
from online_linear.model import LinearModel
from online_linear.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)
from online_linear.training.train_result import TrainResult

Example = Tuple[SparseRow, float]


class OnlineTrainEngine:
    """
    OnlineTrainEngine（单线程 / 同步）

    每个样本：
        pred = score(row)
        pg   = loss.gradient(y, pred)
        update(row, pg)

    并发由调用方负责（按 feature 划分，或接受 Hogwild 式近似）。
    """

    def __init__(self, cfg: TrainingConfig, inst: Instrumentation | None = None):
        self.cfg = cfg
        self.loss = resolve_loss(cfg.loss)
        if inst is None:
            inst = Instrumentation(enabled=True) if cfg.instrumentation else NoOpInstrumentation()
        self.inst = inst

    def train_epoch(self, model: LinearModel, examples: Iterable[Example]) -> Tuple[float, int]:
        """
        返回 (平均 loss, 样本数)
        """
        loss_fn = self.loss
        log_every = self.cfg.log_every

        total_loss = 0.0
        count = 0
        for row, y in examples:
            pred = model.predict(row)
            total_loss += loss_fn.loss(y, pred)
            model.update(row, loss_fn.gradient(y, pred))
            count += 1

            if log_every and count % log_every == 0:
                logs.debug(f"[Train] {count} examples, avg_loss={total_loss / count:.6f}")

        avg = total_loss / count if count else 0.0
        return avg, count

    @logs.catch(msg="online training failed")
    def train(self, model: LinearModel, examples: Iterable[Example]) -> TrainResult:
        """
        多 epoch 需要重复迭代：一次性 iterator / generator 先物化成 list。

        metrics:
        - examples：每个 epoch 的样本数
        - examples_seen：所有 epoch 累计训练的样本数
        """
        if self.cfg.epochs > 1 and iter(examples) is examples:
            examples = list(examples)
            logs.debug(f"[Train] materialized one-shot stream: {len(examples)} examples")

        epoch_losses: List[float] = []
        n_examples = 0
        state = self.inst.state
        state.examples_seen = 0

        self.inst.progress.start(self.cfg.epochs)
        with self.inst.timer("train", record=False):
            for epoch in range(self.cfg.epochs):
                state.epoch = epoch
                name = f"epoch_{epoch}"
                with self.inst.timer(name):
                    avg_loss, n_examples = self.train_epoch(model, examples)
                state.examples_seen += n_examples

                if not is_finite(avg_loss):
                    logs.warning(f"[Train] epoch={epoch} loss is not finite: {avg_loss}")

                epoch_losses.append(avg_loss)
                self.inst.metrics.record("epoch_loss", avg_loss, log=False)
                self.inst.metrics.record("nnz", model.store.nnz(), log=False)
                self.inst.progress.epoch_done(
                    epoch, n_examples, avg_loss, self.inst.elapsed(name)
                )
        self.inst.progress.done(state.examples_seen)

        metrics = {
            "loss": epoch_losses[-1] if epoch_losses else 0.0,
            "epoch_losses": epoch_losses,
            "examples": n_examples,
            "examples_seen": state.examples_seen,
            "nnz": model.store.nnz(),
        }
        self.inst.generate_timeline_report("train")

        return TrainResult(model=model, metrics=metrics)

    def evaluate(self, model: LinearModel, examples: Iterable[Example]) -> float:
        """只读：平均 loss，不更新参数"""
        total = 0.0
        count = 0
        for row, y in examples:
            total += self.loss.loss(y, model.predict(row))
            count += 1
        return total / count if count else 0.0
