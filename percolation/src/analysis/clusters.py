"""Scan-based cluster analysis of open-site masks.

These helpers label the open sites of a mask directly instead of relying on
union-find state, which makes them a useful independent check of
:class:`~percolation.src.core.percolation.Percolation`.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
from skimage.measure import label


def _as_mask(mask: np.ndarray) -> np.ndarray:
    arr = np.asarray(mask, dtype=bool)
    if arr.ndim != 2:
        raise ValueError("mask must be two dimensional")
    return arr


def label_open_clusters(mask: np.ndarray) -> Tuple[np.ndarray, int]:
    """Label edge-connected clusters of open sites.

    Blocked sites receive label ``0``; clusters are numbered from ``1``.
    """
    arr = _as_mask(mask)
    labels, count = label(arr, background=0, return_num=True, connectivity=1)
    return labels, int(count)


def percolates_by_scan(mask: np.ndarray) -> bool:
    """Return ``True`` if a single cluster touches both the first and last rows."""
    labels, _ = label_open_clusters(mask)
    top = set(labels[0][labels[0] > 0].tolist())
    bottom = set(labels[-1][labels[-1] > 0].tolist())
    return bool(top & bottom)


def full_sites_by_scan(mask: np.ndarray) -> np.ndarray:
    """Return a mask of open sites whose cluster reaches the first row."""
    labels, _ = label_open_clusters(mask)
    top = labels[0][labels[0] > 0]
    if top.size == 0:
        return np.zeros(labels.shape, dtype=bool)
    return np.isin(labels, top)


def cluster_sizes(mask: np.ndarray) -> List[int]:
    """Return cluster sizes, largest first."""
    labels, count = label_open_clusters(mask)
    if count == 0:
        return []
    sizes = np.bincount(labels.ravel())[1:]
    return sorted((int(s) for s in sizes), reverse=True)


__all__ = [
    "label_open_clusters",
    "percolates_by_scan",
    "full_sites_by_scan",
    "cluster_sizes",
]
