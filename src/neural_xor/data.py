"""Training samples and the XOR truth table."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

# (input A, input B, expected output)
XOR_TRUTH_TABLE: Tuple[Tuple[int, int, int], ...] = (
    (0, 0, 0),
    (0, 1, 1),
    (1, 0, 1),
    (1, 1, 0),
)


@dataclass(frozen=True)
class TrainingSample:
    """Input vector paired with the expected network output."""

    inputs: Tuple[float, ...]
    expected: Tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "inputs", tuple(float(value) for value in self.inputs))
        object.__setattr__(self, "expected", tuple(float(value) for value in self.expected))


def xor_training_set() -> List[TrainingSample]:
    """Return the four XOR rows in truth-table order."""

    return [TrainingSample((a, b), (out,)) for a, b, out in XOR_TRUTH_TABLE]


__all__ = ["TrainingSample", "XOR_TRUTH_TABLE", "xor_training_set"]
