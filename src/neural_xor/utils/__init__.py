"""Rendering helpers for training diagnostics."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import-time hinting only
    from .ascii_graph import render_error_graph
    from .visualization import plot_error_history

__all__ = [
    "plot_error_history",
    "render_error_graph",
]


def __getattr__(name: str):  # pragma: no cover - small wrapper
    if name == "plot_error_history":
        return getattr(import_module("neural_xor.utils.visualization"), name)
    if name == "render_error_graph":
        return getattr(import_module("neural_xor.utils.ascii_graph"), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
