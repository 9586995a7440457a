"""Exceptions raised by the percolation model."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised for a non-positive grid size or coordinates off the grid."""


__all__ = ["InvalidArgumentError"]
