"""Hopfield associative memory over bipolar neuron states."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Sequence

import numpy as np

MAX_STEPS = 1000


class State(enum.IntEnum):
    """Bipolar state of a single neuron."""

    LOWER = -1
    UPPER = 1


_GREY_LEVELS = {State.UPPER: 0, State.LOWER: 255}


class NeuronNet:
    """A fully connected Hopfield network trained with the Hebbian rule."""

    def __init__(self, neuron_count: int) -> None:
        self.neuron_count = neuron_count
        self._synapses = np.zeros((neuron_count, neuron_count), dtype=np.float64)
        self._rng = np.random.default_rng()

    def learn(self, patterns: Iterable[Sequence[int]]) -> None:
        """Store the given patterns in the synapse matrix."""
        rows = [[int(state) for state in pattern] for pattern in patterns]
        count = len(rows[0]) if rows else 0
        if count == 0:
            raise ValueError("Pattern list cannot be empty")
        if any(len(row) != count for row in rows):
            raise ValueError("All pattern must be same size")

        matrix = np.array(rows, dtype=np.float64)
        synapses = (matrix.T @ matrix) * (1.0 / count)
        np.fill_diagonal(synapses, 0.0)
        self.neuron_count = count
        self._synapses = synapses

    def recognize(self, pattern: Sequence[int]) -> tuple[list[State], int]:
        """Relax the pattern towards a stored memory.

        Returns the settled pattern and the number of sweeps that changed it.
        """
        state = np.array([int(value) for value in pattern], dtype=np.float64)
        if state.size != self.neuron_count:
            raise ValueError("Input pattern size mismatch")

        steps = 0
        while self._update(state):
            steps += 1
            if steps >= MAX_STEPS:
                break
        return [State(int(value)) for value in state], steps

    def _update(self, state: np.ndarray) -> bool:
        changed = False
        for idx in self._rng.permutation(self.neuron_count):
            activation = float(self._synapses[idx] @ state)
            new_state = 1.0 if activation > 0 else -1.0
            if new_state != state[idx]:
                state[idx] = new_state
                changed = True
        return changed

    @staticmethod
    def read(value: int) -> State:
        """Map a grey level to a neuron state: black is UPPER."""
        return State.UPPER if value == 0 else State.LOWER

    @staticmethod
    def write(state: int) -> int:
        """Map a neuron state to a grey level: UPPER is black, LOWER white."""
        neuron = State(int(state))
        return _GREY_LEVELS[neuron]