import numpy as np
import pytest

from percolation.src.analysis import (
    cluster_sizes,
    full_sites_by_scan,
    label_open_clusters,
    percolates_by_scan,
)


def test_label_open_clusters_uses_edge_adjacency():
    mask = np.array(
        [
            [1, 0, 1],
            [0, 1, 0],
            [1, 0, 1],
        ],
        dtype=bool,
    )
    labels, count = label_open_clusters(mask)
    assert count == 5
    assert labels[0, 1] == 0


def test_percolates_by_scan():
    column = np.zeros((3, 3), dtype=bool)
    column[:, 1] = True
    assert percolates_by_scan(column)
    diagonal = np.eye(3, dtype=bool)
    assert not percolates_by_scan(diagonal)
    assert not percolates_by_scan(np.zeros((4, 4), dtype=bool))


def test_full_sites_by_scan():
    mask = np.array(
        [
            [1, 0, 0],
            [1, 0, 1],
            [0, 0, 1],
        ],
        dtype=bool,
    )
    full = full_sites_by_scan(mask)
    assert full.tolist() == [
        [True, False, False],
        [True, False, False],
        [False, False, False],
    ]


def test_cluster_sizes_sorted():
    mask = np.array(
        [
            [1, 1, 0, 1],
            [0, 1, 0, 0],
            [0, 0, 0, 1],
        ],
        dtype=bool,
    )
    assert cluster_sizes(mask) == [3, 1, 1]
    assert cluster_sizes(np.zeros((2, 2), dtype=bool)) == []


def test_rejects_non_2d_mask():
    with pytest.raises(ValueError):
        label_open_clusters(np.zeros(4, dtype=bool))
