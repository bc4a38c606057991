"""Read and write model parameters as JSON documents."""
from __future__ import annotations

import json
import logging
from pathlib import Path

from .exceptions import InvalidArgumentError
from .network.parameters import ModelParameters

logger = logging.getLogger(__name__)

DEFAULT_MODEL_PATH = Path("model.json")


def save_model(params: ModelParameters, path: str | Path = DEFAULT_MODEL_PATH) -> Path:
    """Write ``params`` to ``path`` and return the resolved location."""

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(params.to_dict(), indent=2), encoding="utf-8")
    logger.info("Saved model to %s", target)
    return target


def load_model(path: str | Path = DEFAULT_MODEL_PATH) -> ModelParameters:
    """Load parameters previously written by :func:`save_model`.

    Raises :class:`FileNotFoundError` when ``path`` does not exist and
    :class:`InvalidArgumentError` when the document is not a valid model.
    """

    source = Path(path)
    try:
        payload = json.loads(source.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidArgumentError(f"{source} is not a valid JSON document: {exc}") from exc
    if not isinstance(payload, dict):
        raise InvalidArgumentError(f"{source} must contain a JSON object")
    params = ModelParameters.from_dict(payload)
    logger.info("Loaded model from %s", source)
    return params


__all__ = ["DEFAULT_MODEL_PATH", "load_model", "save_model"]
