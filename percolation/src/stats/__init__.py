"""Percolation threshold experiments."""

from .percolation_stats import PercolationStats, open_until_percolates, run_trial

__all__ = ["PercolationStats", "open_until_percolates", "run_trial"]
