"""A single sigmoid neuron with mutable weights and bias."""
from __future__ import annotations

import random
from typing import List, Sequence

from ..exceptions import InvalidArgumentError
from .activation import sigmoid


class Neuron:
    """Weighted sum of its inputs plus a bias, squashed by :func:`sigmoid`.

    Weights and bias start as independent uniform draws in ``[-1.0, 1.0)``
    taken from ``rng``. The number of weights is fixed for the lifetime of
    the neuron.
    """

    def __init__(self, input_count: int, rng: random.Random):
        if input_count < 1:
            raise InvalidArgumentError("input_count must be positive")
        self._weights: List[float] = [self._random_weight(rng) for _ in range(input_count)]
        self._bias = self._random_weight(rng)
        self._last_output = 0.0

    @staticmethod
    def _random_weight(rng: random.Random) -> float:
        return rng.random() * 2.0 - 1.0

    @property
    def input_count(self) -> int:
        return len(self._weights)

    @property
    def weights(self) -> list[float]:
        return list(self._weights)

    @property
    def last_output(self) -> float:
        """Activation produced by the most recent :meth:`compute` call."""

        return self._last_output

    @property
    def bias(self) -> float:
        return self._bias

    @bias.setter
    def bias(self, value: float) -> None:
        self._bias = float(value)

    def compute(self, inputs: Sequence[float]) -> float:
        """Return ``sigmoid(sum(inputs[i] * weights[i]) + bias)`` and cache it."""

        if len(inputs) != len(self._weights):
            raise InvalidArgumentError(
                f"expected {len(self._weights)} inputs, received {len(inputs)}"
            )
        total = 0.0
        for value, weight in zip(inputs, self._weights):
            total += value * weight
        total += self._bias
        self._last_output = sigmoid(total)
        return self._last_output

    def get_weight(self, index: int) -> float:
        return self._weights[index]

    def set_weight(self, index: int, value: float) -> None:
        self._weights[index] = float(value)

    def adjust_weight(self, index: int, delta: float) -> None:
        self._weights[index] += delta

    def adjust_bias(self, delta: float) -> None:
        self._bias += delta

    def __repr__(self) -> str:
        return f"Neuron(weights={self._weights!r}, bias={self._bias!r})"


__all__ = ["Neuron"]
