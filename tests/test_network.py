import math
import random

import pytest

from conftest import xor_basin_parameters
from neural_xor import InvalidArgumentError, NetworkConfig
from neural_xor.network import ForwardResult, ModelParameters, NeuralNetwork

XOR_INPUTS = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]


def test_topology_is_fixed_at_construction():
    network = NeuralNetwork(3, 4, seed=1)
    assert network.input_count == 3
    assert network.hidden_count == 4
    assert all(neuron.input_count == 3 for neuron in network.hidden_layer)
    assert network.output_neuron.input_count == 4


def test_invalid_sizes_are_rejected():
    with pytest.raises(InvalidArgumentError):
        NeuralNetwork(0, 2)
    with pytest.raises(InvalidArgumentError):
        NeuralNetwork(2, 0)
    with pytest.raises(InvalidArgumentError):
        NetworkConfig(hidden_count=-1)


def test_seed_makes_initialisation_reproducible():
    first = NeuralNetwork(2, 2, seed=42).export_model()
    second = NeuralNetwork(2, 2, seed=42).export_model()
    other = NeuralNetwork(2, 2, seed=43).export_model()
    assert first == second
    assert first != other


def test_borrowed_generator_is_used():
    rng = random.Random(7)
    network = NeuralNetwork(2, 2, rng=rng)
    assert network.rng is rng
    expected = random.Random(7)
    first_weight = expected.random() * 2.0 - 1.0
    assert network.hidden_layer[0].get_weight(0) == first_weight


def test_from_config_matches_constructor():
    config = NetworkConfig(input_count=2, hidden_count=3, seed=5)
    network = NeuralNetwork.from_config(config)
    assert network.hidden_count == 3
    assert network.export_model() == NeuralNetwork(2, 3, seed=5).export_model()


def test_compute_is_deterministic_and_in_sigmoid_range():
    network = NeuralNetwork(2, 2, seed=3)
    for inputs in XOR_INPUTS:
        first = network.compute(inputs)
        second = network.compute(inputs)
        assert first == second
        assert 0.0 < first < 1.0


def test_forward_with_internals_matches_manual_computation():
    network = NeuralNetwork(2, 2, seed=0)
    network.import_model(xor_basin_parameters())
    result = network.forward_with_internals([1, 0])

    def sig(x: float) -> float:
        return 1.0 / (1.0 + math.exp(-x))

    h0 = sig(4.0 - 2.0)
    h1 = sig(4.0 - 6.0)
    output = sig(4.0 * h0 - 4.0 * h1 - 1.0)
    assert isinstance(result, ForwardResult)
    assert result.inputs == (1.0, 0.0)
    assert result.hidden_outputs == pytest.approx((h0, h1))
    assert result.output == pytest.approx(output)
    assert network.compute([1, 0]) == result.output


def test_mismatched_input_raises_without_mutation():
    network = NeuralNetwork(2, 2, seed=11)
    network.compute([1.0, 0.0])
    snapshot = network.export_model()
    cached = [neuron.last_output for neuron in network.hidden_layer]
    cached_output = network.output_neuron.last_output

    with pytest.raises(InvalidArgumentError):
        network.compute([1.0])
    with pytest.raises(InvalidArgumentError):
        network.forward_with_internals([1.0, 0.0, 1.0])

    assert network.export_model() == snapshot
    assert [neuron.last_output for neuron in network.hidden_layer] == cached
    assert network.output_neuron.last_output == cached_output


def test_export_shapes_follow_topology():
    params = NeuralNetwork(3, 4, seed=2).export_model()
    assert len(params.hidden_weights) == 4
    assert all(len(row) == 3 for row in params.hidden_weights)
    assert len(params.hidden_biases) == 4
    assert len(params.output_weights) == 4
    assert isinstance(params.output_bias, float)


def test_export_is_a_snapshot():
    network = NeuralNetwork(2, 2, seed=2)
    params = network.export_model()
    params.hidden_weights[0][0] = 99.0
    params.output_weights[1] = 99.0
    assert network.hidden_layer[0].get_weight(0) != 99.0
    assert network.output_neuron.get_weight(1) != 99.0


def test_export_import_round_trip_reproduces_outputs():
    source = NeuralNetwork(2, 3, seed=21)
    target = NeuralNetwork(2, 3, seed=22)
    target.import_model(source.export_model())
    for inputs in XOR_INPUTS:
        assert target.compute(inputs) == source.compute(inputs)


def test_import_with_wrong_shape_leaves_network_untouched():
    network = NeuralNetwork(2, 2, seed=4)
    before = network.export_model()
    wrong_hidden = NeuralNetwork(2, 3, seed=4).export_model()
    wrong_inputs = NeuralNetwork(3, 2, seed=4).export_model()
    short_biases = ModelParameters(
        hidden_weights=[[0.1, 0.2], [0.3, 0.4]],
        hidden_biases=[0.5],
        output_weights=[0.6, 0.7],
        output_bias=0.8,
    )
    for params in (wrong_hidden, wrong_inputs, short_biases):
        with pytest.raises(InvalidArgumentError):
            network.import_model(params)
    assert network.export_model() == before


def test_query_many_times_after_import():
    network = NeuralNetwork(2, 2)
    network.import_model(xor_basin_parameters())
    outputs = [network.compute(inputs) for _ in range(100) for inputs in XOR_INPUTS]
    assert outputs[:4] * 100 == outputs
