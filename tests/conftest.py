import pytest

from neural_xor.network import ModelParameters, NeuralNetwork


def xor_basin_parameters() -> ModelParameters:
    """Weights shaped like OR / AND hidden units, not yet confident enough."""

    return ModelParameters(
        hidden_weights=[[4.0, 4.0], [4.0, 4.0]],
        hidden_biases=[-2.0, -6.0],
        output_weights=[4.0, -4.0],
        output_bias=-1.0,
    )


@pytest.fixture
def basin_network() -> NeuralNetwork:
    network = NeuralNetwork(2, 2, seed=0)
    network.import_model(xor_basin_parameters())
    return network
