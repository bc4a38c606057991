"""Two-input XOR network trained with backpropagation.

The package exposes a small sigmoid network with one hidden layer, the XOR
training set, JSON persistence of the learned parameters and an interactive
console for querying a trained model.
"""

from .config import NetworkConfig, TrainingConfig
from .data import TrainingSample, xor_training_set
from .exceptions import InvalidArgumentError
from .network import (
    ForwardResult,
    ModelParameters,
    NeuralNetwork,
    Neuron,
    TrainingCallbacks,
    TrainingOutcome,
)
from .persistence import load_model, save_model

__version__ = "0.1.0"

__all__ = [
    "NetworkConfig",
    "TrainingConfig",
    "TrainingSample",
    "xor_training_set",
    "InvalidArgumentError",
    "ForwardResult",
    "ModelParameters",
    "NeuralNetwork",
    "Neuron",
    "TrainingCallbacks",
    "TrainingOutcome",
    "load_model",
    "save_model",
]
