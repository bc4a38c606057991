#!/usr/bin/env python3
"""Interactive XOR console: train or load a model, then query it."""
from __future__ import annotations

from neural_xor.console import main


if __name__ == "__main__":
    raise SystemExit(main())
