import json

import pytest

from conftest import xor_basin_parameters
from neural_xor import InvalidArgumentError, load_model, save_model
from neural_xor.network import ModelParameters, NeuralNetwork


def test_saved_document_has_the_four_stable_fields(tmp_path):
    path = save_model(xor_basin_parameters(), tmp_path / "model.json")
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert set(payload) == {"hiddenWeights", "hiddenBiases", "outputWeights", "outputBias"}
    assert payload["hiddenWeights"] == [[4.0, 4.0], [4.0, 4.0]]
    assert payload["hiddenBiases"] == [-2.0, -6.0]
    assert payload["outputWeights"] == [4.0, -4.0]
    assert payload["outputBias"] == -1.0


def test_save_creates_parent_directories(tmp_path):
    target = tmp_path / "nested" / "dir" / "model.json"
    save_model(xor_basin_parameters(), target)
    assert target.exists()


def test_round_trip_through_file_reproduces_outputs(tmp_path):
    source = NeuralNetwork(2, 2, seed=12)
    path = save_model(source.export_model(), tmp_path / "model.json")

    restored = NeuralNetwork(2, 2, seed=99)
    restored.import_model(load_model(path))
    assert restored.export_model() == source.export_model()
    for inputs in ([0, 0], [0, 1], [1, 0], [1, 1]):
        assert restored.compute(inputs) == source.compute(inputs)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_model(tmp_path / "absent.json")


def test_load_rejects_invalid_json(tmp_path):
    path = tmp_path / "model.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        load_model(path)


def test_load_rejects_non_utf8_bytes(tmp_path):
    path = tmp_path / "model.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    with pytest.raises(InvalidArgumentError):
        load_model(path)


def test_load_rejects_missing_fields(tmp_path):
    path = tmp_path / "model.json"
    document = xor_basin_parameters().to_dict()
    del document["outputBias"]
    path.write_text(json.dumps(document), encoding="utf-8")
    with pytest.raises(InvalidArgumentError, match="outputBias"):
        load_model(path)


@pytest.mark.parametrize(
    "field, value",
    [
        ("hiddenWeights", [[1.0, "a"], [0.0, 0.0]]),
        ("hiddenWeights", 3.0),
        ("hiddenBiases", [True, 0.0]),
        ("outputWeights", None),
        ("outputBias", "0.5"),
    ],
)
def test_load_rejects_non_numeric_values(tmp_path, field, value):
    document = xor_basin_parameters().to_dict()
    document[field] = value
    path = tmp_path / "model.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        load_model(path)


def test_load_rejects_non_object_document(tmp_path):
    path = tmp_path / "model.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(InvalidArgumentError):
        load_model(path)


def test_from_dict_accepts_integers():
    params = ModelParameters.from_dict(
        {"hiddenWeights": [[1, 0]], "hiddenBiases": [0], "outputWeights": [2], "outputBias": -1}
    )
    assert params.hidden_weights == [[1.0, 0.0]]
    assert params.input_count == 2
    assert params.hidden_count == 1
    assert isinstance(params.output_bias, float)
