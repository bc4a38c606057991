"""Feedforward network with one hidden layer trained by online backpropagation."""
from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import Callable, List, Optional, Sequence, Tuple

from ..config import NetworkConfig, TrainingConfig
from ..data import TrainingSample
from ..exceptions import InvalidArgumentError
from .neuron import Neuron
from .parameters import ModelParameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForwardResult:
    """Intermediate values of a single forward pass."""

    inputs: Tuple[float, ...]
    hidden_outputs: Tuple[float, ...]
    output: float


@dataclass(frozen=True)
class TrainingOutcome:
    """Summary returned by :meth:`NeuralNetwork.train`."""

    epochs_run: int
    final_error: float
    converged: bool
    error_history: Tuple[float, ...]
    cancelled: bool = False


@dataclass
class TrainingCallbacks:
    """Optional hooks invoked synchronously from the training loop.

    ``on_progress`` receives ``(epoch, total_error)`` after every epoch,
    ``on_converged`` receives ``(confidence_threshold, epoch)`` when training
    stops early, and ``on_history`` receives the per-epoch errors once
    training ends. ``should_stop`` is polled before each epoch and ends
    training when it returns ``True``.
    """

    on_progress: Optional[Callable[[int, float], None]] = None
    on_converged: Optional[Callable[[float, int], None]] = None
    on_history: Optional[Callable[[List[float]], None]] = None
    should_stop: Optional[Callable[[], bool]] = None


class NeuralNetwork:
    """Sigmoid network with ``input_count`` inputs, one hidden layer and one output.

    The topology is fixed at construction. Initial weights are drawn from
    ``rng`` when given, otherwise from a private :class:`random.Random`
    seeded with ``seed``.
    """

    def __init__(
        self,
        input_count: int,
        hidden_count: int,
        *,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if input_count < 1:
            raise InvalidArgumentError("input_count must be positive")
        if hidden_count < 1:
            raise InvalidArgumentError("hidden_count must be positive")
        self.rng = rng if rng is not None else random.Random(seed)
        self._input_count = input_count
        self._hidden_layer: Tuple[Neuron, ...] = tuple(
            Neuron(input_count, self.rng) for _ in range(hidden_count)
        )
        self._output_neuron = Neuron(hidden_count, self.rng)

    @classmethod
    def from_config(cls, config: NetworkConfig) -> "NeuralNetwork":
        return cls(config.input_count, config.hidden_count, seed=config.seed)

    @property
    def input_count(self) -> int:
        return self._input_count

    @property
    def hidden_count(self) -> int:
        return len(self._hidden_layer)

    @property
    def hidden_layer(self) -> Tuple[Neuron, ...]:
        return self._hidden_layer

    @property
    def output_neuron(self) -> Neuron:
        return self._output_neuron

    def _check_inputs(self, inputs: Sequence[float]) -> None:
        if len(inputs) != self._input_count:
            raise InvalidArgumentError(
                f"expected {self._input_count} inputs, received {len(inputs)}"
            )

    def compute(self, inputs: Sequence[float]) -> float:
        """Return the network output for ``inputs``."""

        return self.forward_with_internals(inputs).output

    def forward_with_internals(self, inputs: Sequence[float]) -> ForwardResult:
        """Run a forward pass and keep the values backpropagation needs."""

        self._check_inputs(inputs)
        values = tuple(float(value) for value in inputs)
        hidden_outputs = tuple(neuron.compute(values) for neuron in self._hidden_layer)
        output = self._output_neuron.compute(hidden_outputs)
        return ForwardResult(inputs=values, hidden_outputs=hidden_outputs, output=output)

    def _backpropagate(self, result: ForwardResult, expected: float, learning_rate: float) -> float:
        output = result.output
        output_error = expected - output
        output_delta = output_error * output * (1.0 - output)

        output_neuron = self._output_neuron
        for i, hidden_output in enumerate(result.hidden_outputs):
            output_neuron.adjust_weight(i, learning_rate * output_delta * hidden_output)
        output_neuron.adjust_bias(learning_rate * output_delta)

        # Hidden deltas read the output weights updated just above.
        for i, neuron in enumerate(self._hidden_layer):
            hidden_output = result.hidden_outputs[i]
            hidden_delta = (
                output_delta * output_neuron.get_weight(i) * hidden_output * (1.0 - hidden_output)
            )
            for j, value in enumerate(result.inputs):
                neuron.adjust_weight(j, learning_rate * hidden_delta * value)
            neuron.adjust_bias(learning_rate * hidden_delta)

        return output_error * output_error

    def _check_samples(self, samples: Sequence[TrainingSample]) -> None:
        for sample in samples:
            if not sample.expected:
                raise InvalidArgumentError("every sample needs at least one expected value")
            self._check_inputs(sample.inputs)

    def has_learned_all(self, samples: Sequence[TrainingSample], confidence_threshold: float) -> bool:
        """Check every sample against ``confidence_threshold`` with a fresh inference."""

        self._check_samples(samples)
        for sample in samples:
            predicted = self.compute(sample.inputs)
            expected = sample.expected[0]
            if expected == 1.0 and predicted < confidence_threshold:
                return False
            if expected == 0.0 and predicted > 1.0 - confidence_threshold:
                return False
        return True

    def train(
        self,
        samples: Sequence[TrainingSample],
        *,
        max_epochs: int,
        learning_rate: float,
        confidence_threshold: float,
        callbacks: Optional[TrainingCallbacks] = None,
    ) -> TrainingOutcome:
        """Train on ``samples`` until they are all learned or ``max_epochs`` is reached.

        Samples are visited in the given order and every sample updates the
        parameters immediately. After each epoch the summed squared error is
        reported through ``callbacks.on_progress`` and the convergence check
        runs; on success ``callbacks.on_converged`` fires and training stops.
        ``callbacks.on_history`` always receives the collected errors at the
        end.
        """

        config = TrainingConfig(
            max_epochs=max_epochs,
            learning_rate=learning_rate,
            confidence_threshold=confidence_threshold,
        )
        if not samples:
            raise InvalidArgumentError("samples must not be empty")
        self._check_samples(samples)
        callbacks = callbacks or TrainingCallbacks()

        logger.debug(
            "Training on %d samples for at most %d epochs (lr=%s, threshold=%s)",
            len(samples),
            config.max_epochs,
            config.learning_rate,
            config.confidence_threshold,
        )
        errors: List[float] = []
        converged = False
        cancelled = False
        for epoch in range(1, config.max_epochs + 1):
            if callbacks.should_stop is not None and callbacks.should_stop():
                cancelled = True
                logger.info("Training cancelled before epoch %d", epoch)
                break

            total_error = 0.0
            for sample in samples:
                result = self.forward_with_internals(sample.inputs)
                total_error += self._backpropagate(result, sample.expected[0], config.learning_rate)

            errors.append(total_error)
            if callbacks.on_progress is not None:
                callbacks.on_progress(epoch, total_error)

            if self.has_learned_all(samples, config.confidence_threshold):
                converged = True
                logger.info(
                    "Converged at epoch %d with confidence %s", epoch, config.confidence_threshold
                )
                if callbacks.on_converged is not None:
                    callbacks.on_converged(config.confidence_threshold, epoch)
                break

        if not converged and not cancelled:
            logger.info("Stopped after %d epochs without converging", len(errors))
        if callbacks.on_history is not None:
            callbacks.on_history(list(errors))

        return TrainingOutcome(
            epochs_run=len(errors),
            final_error=errors[-1] if errors else float("nan"),
            converged=converged,
            error_history=tuple(errors),
            cancelled=cancelled,
        )

    def export_model(self) -> ModelParameters:
        """Snapshot every weight and bias."""

        return ModelParameters(
            hidden_weights=[neuron.weights for neuron in self._hidden_layer],
            hidden_biases=[neuron.bias for neuron in self._hidden_layer],
            output_weights=self._output_neuron.weights,
            output_bias=self._output_neuron.bias,
        )

    def import_model(self, params: ModelParameters) -> None:
        """Overwrite every weight and bias from ``params``.

        Shapes are validated before anything is written, so a mismatched
        snapshot leaves the network untouched.
        """

        params.validate(self._input_count, self.hidden_count)
        for neuron, row, bias in zip(self._hidden_layer, params.hidden_weights, params.hidden_biases):
            for j, weight in enumerate(row):
                neuron.set_weight(j, weight)
            neuron.bias = bias
        for i, weight in enumerate(params.output_weights):
            self._output_neuron.set_weight(i, weight)
        self._output_neuron.bias = params.output_bias


__all__ = ["ForwardResult", "NeuralNetwork", "TrainingCallbacks", "TrainingOutcome"]
