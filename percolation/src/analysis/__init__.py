from .clusters import (
    cluster_sizes,
    full_sites_by_scan,
    label_open_clusters,
    percolates_by_scan,
)

__all__ = [
    "cluster_sizes",
    "full_sites_by_scan",
    "label_open_clusters",
    "percolates_by_scan",
]
