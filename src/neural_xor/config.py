"""Configuration dataclasses for the XOR network and its training loop."""
from __future__ import annotations

from dataclasses import dataclass
import math

from .exceptions import InvalidArgumentError


@dataclass(slots=True)
class NetworkConfig:
    """Configuration controlling the network topology.

    Parameters
    ----------
    input_count:
        Number of values fed to every hidden neuron. The XOR gate uses two.
    hidden_count:
        Number of neurons in the single hidden layer. Two is the smallest
        layer able to represent XOR.
    seed:
        Optional seed for the random generator that draws the initial
        weights and biases. Setting it makes initialisation reproducible,
        which simplifies testing and experimentation.
    """

    input_count: int = 2
    hidden_count: int = 2
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.input_count < 1:
            raise InvalidArgumentError("input_count must be positive")
        if self.hidden_count < 1:
            raise InvalidArgumentError("hidden_count must be positive")


@dataclass(slots=True)
class TrainingConfig:
    """Hyper-parameters for :meth:`NeuralNetwork.train`.

    Parameters
    ----------
    max_epochs:
        Upper bound on the number of passes over the training samples.
        Training usually stops earlier once every sample is classified with
        the requested confidence.
    learning_rate:
        Step size applied to every weight and bias update. Must be finite and
        strictly positive.
    confidence_threshold:
        Minimum output required for samples expecting ``1`` (and maximum
        distance from zero for samples expecting ``0``) before training is
        considered converged. Must lie in ``(0, 1]``.
    """

    max_epochs: int = 200_000
    learning_rate: float = 0.1
    confidence_threshold: float = 0.95

    def __post_init__(self) -> None:
        if self.max_epochs < 1:
            raise InvalidArgumentError("max_epochs must be at least 1")
        if not math.isfinite(self.learning_rate) or self.learning_rate <= 0.0:
            raise InvalidArgumentError("learning_rate must be finite and positive")
        if not 0.0 < self.confidence_threshold <= 1.0:
            raise InvalidArgumentError("confidence_threshold must lie in (0, 1]")


__all__ = ["NetworkConfig", "TrainingConfig"]
