"""Plotting utilities for training error curves."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib.pyplot as plt


def plot_error_history(errors: Sequence[float], path: str | Path) -> Path:
    """Plot total error across epochs and save the figure to ``path``."""

    plt.figure()
    plt.plot(range(1, len(errors) + 1), errors)
    plt.xlabel("Epoch")
    plt.ylabel("Total squared error")
    plt.title("Training Error")
    plt.tight_layout()
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    try:
        plt.savefig(target)
    finally:
        plt.close()
    return target
