"""Flattened snapshot of every weight and bias of a :class:`NeuralNetwork`."""
from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import Any, Dict, List, Mapping

from ..exceptions import InvalidArgumentError

# Stable field names of the persisted model document.
FIELD_NAMES = {
    "hidden_weights": "hiddenWeights",
    "hidden_biases": "hiddenBiases",
    "output_weights": "outputWeights",
    "output_bias": "outputBias",
}


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise InvalidArgumentError(f"{name} must be finite")
    return result


def _as_vector(value: Any, name: str) -> List[float]:
    if not isinstance(value, (list, tuple)):
        raise InvalidArgumentError(f"{name} must be a list of numbers")
    return [_as_float(item, f"{name}[{index}]") for index, item in enumerate(value)]


@dataclass
class ModelParameters:
    """Weights and biases shaped after the network topology.

    ``hidden_weights`` is indexed ``[hidden][input]``; ``hidden_biases`` and
    ``output_weights`` hold one entry per hidden neuron.
    """

    hidden_weights: List[List[float]] = field(default_factory=list)
    hidden_biases: List[float] = field(default_factory=list)
    output_weights: List[float] = field(default_factory=list)
    output_bias: float = 0.0

    @property
    def hidden_count(self) -> int:
        return len(self.hidden_weights)

    @property
    def input_count(self) -> int:
        return len(self.hidden_weights[0]) if self.hidden_weights else 0

    def validate(self, input_count: int, hidden_count: int) -> None:
        """Raise :class:`InvalidArgumentError` unless shapes match the topology."""

        if len(self.hidden_weights) != hidden_count:
            raise InvalidArgumentError(
                f"hidden_weights has {len(self.hidden_weights)} rows, expected {hidden_count}"
            )
        for index, row in enumerate(self.hidden_weights):
            if len(row) != input_count:
                raise InvalidArgumentError(
                    f"hidden_weights[{index}] has {len(row)} entries, expected {input_count}"
                )
        if len(self.hidden_biases) != hidden_count:
            raise InvalidArgumentError(
                f"hidden_biases has {len(self.hidden_biases)} entries, expected {hidden_count}"
            )
        if len(self.output_weights) != hidden_count:
            raise InvalidArgumentError(
                f"output_weights has {len(self.output_weights)} entries, expected {hidden_count}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            FIELD_NAMES["hidden_weights"]: [list(row) for row in self.hidden_weights],
            FIELD_NAMES["hidden_biases"]: list(self.hidden_biases),
            FIELD_NAMES["output_weights"]: list(self.output_weights),
            FIELD_NAMES["output_bias"]: self.output_bias,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "ModelParameters":
        missing = [key for key in FIELD_NAMES.values() if key not in payload]
        if missing:
            raise InvalidArgumentError(f"model document is missing fields: {', '.join(missing)}")
        rows = payload[FIELD_NAMES["hidden_weights"]]
        if not isinstance(rows, (list, tuple)):
            raise InvalidArgumentError("hiddenWeights must be a list of rows")
        return cls(
            hidden_weights=[_as_vector(row, f"hiddenWeights[{i}]") for i, row in enumerate(rows)],
            hidden_biases=_as_vector(payload[FIELD_NAMES["hidden_biases"]], "hiddenBiases"),
            output_weights=_as_vector(payload[FIELD_NAMES["output_weights"]], "outputWeights"),
            output_bias=_as_float(payload[FIELD_NAMES["output_bias"]], "outputBias"),
        )


__all__ = ["ModelParameters", "FIELD_NAMES"]
