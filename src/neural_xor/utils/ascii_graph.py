"""Text rendering of the per-epoch error curve."""
from __future__ import annotations

from typing import List, Sequence

import numpy as np

from ..exceptions import InvalidArgumentError

FILLED = "█"
BASELINE = "─"


def render_error_graph(errors: Sequence[float], *, height: int = 10, width: int = 50) -> List[str]:
    """Render ``errors`` as ``height`` rows of ``width`` characters plus a baseline.

    Each column samples the history at ``x * len(errors) // width`` and is
    filled on every row whose threshold it reaches. Thresholds are spaced
    evenly between the smallest and the largest error.
    """

    if height < 2:
        raise InvalidArgumentError("height must be at least 2")
    if width < 1:
        raise InvalidArgumentError("width must be positive")

    values = np.asarray(errors, dtype=np.float64)
    baseline = BASELINE * width
    if values.size == 0:
        return [baseline]

    low = float(values.min())
    span = float(values.max()) - low
    sampled = values[(np.arange(width) * values.size) // width]

    lines = []
    for y in range(height - 1, -1, -1):
        threshold = low + (span * y / (height - 1))
        lines.append("".join(FILLED if value >= threshold else " " for value in sampled))
    lines.append(baseline)
    return lines


__all__ = ["render_error_graph"]
