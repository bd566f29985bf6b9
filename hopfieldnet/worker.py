"""Runs training and recognition on a background thread."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Optional

from hopfieldnet.network import NeuronNet, State

TrainedCallback = Callable[[], None]
RecognizedCallback = Callable[[list[State], int], None]
ErrorCallback = Callable[[str], None]


def _ignore(*_args) -> None:
    return None


class NeuralWorker:
    """Owns a network and reports results of queued jobs through callbacks.

    Jobs run one at a time, in submission order, on a single worker thread.
    """

    def __init__(
        self,
        on_trained: Optional[TrainedCallback] = None,
        on_recognized: Optional[RecognizedCallback] = None,
        on_error: Optional[ErrorCallback] = None,
    ) -> None:
        self.network = NeuronNet(0)
        self._on_trained = on_trained or _ignore
        self._on_recognized = on_recognized or _ignore
        self._on_error = on_error or _ignore
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="neural-worker"
        )

    def train_network(self, patterns: Iterable[Sequence[int]]) -> Future:
        """Queue training; the future yields True on success."""
        snapshot = [list(pattern) for pattern in patterns]
        return self._executor.submit(self._train, snapshot)

    def recognize_pattern(self, pattern: Sequence[int]) -> Future:
        """Queue recognition; the future yields (pattern, steps) or None."""
        return self._executor.submit(self._recognize, list(pattern))

    def close(self) -> None:
        """Finish queued jobs and stop the worker thread."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "NeuralWorker":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _train(self, patterns: list[list[int]]) -> bool:
        try:
            self.network.learn(patterns)
        except Exception as exc:
            self._on_error(f"Training failed:\n{exc}")
            return False
        self._on_trained()
        return True

    def _recognize(self, pattern: list[int]) -> Optional[tuple[list[State], int]]:
        try:
            result, steps = self.network.recognize(pattern)
        except Exception as exc:
            self._on_error(f"Recognition failed:\n{exc}")
            return None
        self._on_recognized(result, steps)
        return result, steps