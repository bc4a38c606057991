"""Neuron, activation and network building blocks."""

from .activation import sigmoid, sigmoid_derivative
from .network import ForwardResult, NeuralNetwork, TrainingCallbacks, TrainingOutcome
from .neuron import Neuron
from .parameters import ModelParameters

__all__ = [
    "sigmoid",
    "sigmoid_derivative",
    "ForwardResult",
    "NeuralNetwork",
    "TrainingCallbacks",
    "TrainingOutcome",
    "Neuron",
    "ModelParameters",
]
