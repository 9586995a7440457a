"""Core percolation data structures."""

from .errors import InvalidArgumentError
from .grid_utils import (
    is_out_of_bounds,
    neighbors,
    to_index,
    validate_coordinates,
    validate_size,
)
from .percolation import Percolation
from .union_find import WeightedQuickUnionUF

__all__ = [
    "InvalidArgumentError",
    "Percolation",
    "WeightedQuickUnionUF",
    "is_out_of_bounds",
    "neighbors",
    "to_index",
    "validate_coordinates",
    "validate_size",
]
