"""Site percolation on an ``n``-by-``n`` grid backed by union-find."""

from __future__ import annotations

import numpy as np

from percolation.src.utils.logger import get_logger

from .grid_utils import neighbors, to_index, validate_coordinates, validate_size
from .union_find import WeightedQuickUnionUF

logger = get_logger(__name__)


class Percolation:
    """Grid of sites that are opened one at a time.

    Sites are addressed with 1-indexed ``(row, col)`` pairs. Two extra
    union-find elements stand in for the whole top row and the whole bottom
    row, so ``percolates`` is a single connectivity check instead of a scan
    over every pair of top and bottom sites.

    Note that the virtual bottom lets a percolating system mark bottom-row
    sites as full even when their only route to the top goes back up through
    another bottom-row site. ``full_sites_by_scan`` in
    :mod:`percolation.src.analysis.clusters` gives the exact answer.
    """

    def __init__(self, n: int) -> None:
        validate_size(n)
        n = int(n)
        self._n = n
        self._open = np.zeros(n * n, dtype=bool)
        self._open_count = 0
        self._uf = WeightedQuickUnionUF(n * n + 2)
        self.virtual_top = n * n
        self.virtual_bottom = n * n + 1
        self._percolated = False
        logger.debug("created %dx%d percolation grid", n, n)

    @property
    def size(self) -> int:
        """Side length of the grid."""
        return self._n

    def open(self, row: int, col: int) -> None:
        """Open site ``(row, col)`` and join it to its open neighbours."""
        validate_coordinates(row, col, self._n)
        index = to_index(row, col, self._n)
        if self._open[index]:
            return

        self._open[index] = True
        self._open_count += 1

        for r, c in neighbors(row, col, self._n):
            neighbour = to_index(r, c, self._n)
            if self._open[neighbour]:
                self._uf.union(index, neighbour)
        if row == 1:
            self._uf.union(index, self.virtual_top)
        if row == self._n:
            self._uf.union(index, self.virtual_bottom)

        if not self._percolated and self.percolates():
            self._percolated = True
            logger.debug(
                "grid percolates after opening (%d, %d) with %d open sites",
                row,
                col,
                self._open_count,
            )

    def is_open(self, row: int, col: int) -> bool:
        """Return ``True`` if site ``(row, col)`` has been opened."""
        validate_coordinates(row, col, self._n)
        return bool(self._open[to_index(row, col, self._n)])

    def is_full(self, row: int, col: int) -> bool:
        """Return ``True`` if ``(row, col)`` is connected to the top row.

        Only the virtual top is consulted. A site linked to the bottom row
        alone is not full.
        """
        validate_coordinates(row, col, self._n)
        return self._uf.connected(to_index(row, col, self._n), self.virtual_top)

    def number_of_open_sites(self) -> int:
        return self._open_count

    def percolates(self) -> bool:
        """Return ``True`` if the top row is connected to the bottom row."""
        return self._uf.connected(self.virtual_top, self.virtual_bottom)

    # Read-only views ----------------------------------------------------

    def open_fraction(self) -> float:
        """Return the fraction of sites that are open."""
        return self._open_count / (self._n * self._n)

    def open_mask(self) -> np.ndarray:
        """Return a 0-indexed ``n x n`` boolean copy of the open state."""
        return self._open.reshape(self._n, self._n).copy()

    def full_mask(self) -> np.ndarray:
        """Return a 0-indexed ``n x n`` boolean mask of full sites."""
        n = self._n
        mask = np.zeros((n, n), dtype=bool)
        for index in np.flatnonzero(self._open):
            if self._uf.connected(int(index), self.virtual_top):
                mask[index // n, index % n] = True
        return mask

    def visualize(self) -> None:
        """Pretty-print the grid state."""
        from percolation.src.debug.visualizer import render_text

        print(render_text(self))

    def __repr__(self) -> str:
        return (
            f"Percolation(n={self._n}, open={self._open_count}, "
            f"percolates={self.percolates()})"
        )


__all__ = ["Percolation"]
