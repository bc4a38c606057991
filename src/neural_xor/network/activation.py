"""Sigmoid activation and its derivative."""
from __future__ import annotations

import math


def sigmoid(x: float) -> float:
    """Squash ``x`` into the open interval ``(0, 1)``."""

    try:
        return 1.0 / (1.0 + math.exp(-x))
    except OverflowError:
        # exp(-x) overflows only for very negative x, where the limit is zero
        return 0.0


def sigmoid_derivative(x: float) -> float:
    """Derivative of :func:`sigmoid` evaluated at ``x``."""

    value = sigmoid(x)
    return value * (1.0 - value)


__all__ = ["sigmoid", "sigmoid_derivative"]
