#!filepath: online_linear/observability/progress.py
from online_linear import logs


class ProgressReporter:
    """
    epoch 级进度（不依赖 Rich/TQDM）：
    每个 epoch 结束时输出 loss / 样本数 / 吞吐
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self.total_epochs = 0

    def start(self, total_epochs: int):
        if not self.enabled:
            return
        self.total_epochs = total_epochs
        logs.info(f"[Progress] train started epochs={total_epochs}")

    def epoch_done(self, epoch: int, examples: int, loss: float, elapsed: float):
        if not self.enabled:
            return
        rate = examples / elapsed if elapsed > 0 else 0.0
        logs.info(
            f"[Progress] epoch {epoch + 1}/{self.total_epochs} "
            f"examples={examples} loss={loss:.6f} {rate:.0f} ex/s"
        )

    def done(self, examples_seen: int):
        if not self.enabled:
            return
        logs.info(f"[Progress] train done examples_seen={examples_seen}")
