"""Exception types raised by the XOR network package."""
from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a caller violates a size, shape or value contract."""


__all__ = ["InvalidArgumentError"]
