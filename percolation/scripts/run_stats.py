from __future__ import annotations

"""Estimate the percolation threshold from the command line.

Usage::

    percolation_stats 200 100 --seed 7

Prints the sample mean, standard deviation and confidence interval of the
open-site fraction at which random ``n x n`` grids first percolate.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from percolation.src.analysis.clusters import cluster_sizes, percolates_by_scan
from percolation.src.core.errors import InvalidArgumentError
from percolation.src.stats.percolation_stats import PercolationStats, open_until_percolates
from percolation.src.utils import config_loader
from percolation.src.utils.logger import get_logger, set_log_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Monte Carlo percolation threshold estimate")
    parser.add_argument("n", type=int, nargs="?", default=None, help="grid side length")
    parser.add_argument("trials", type=int, nargs="?", default=None, help="number of experiments")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--config", type=str, default=None, help="YAML or JSON config file")
    parser.add_argument("--log-file", type=str, default=None, help="also log to this file")
    parser.add_argument("--plot", type=str, default=None, help="save one percolated grid as PNG")
    parser.add_argument("--verbose", action="store_true", help="log every trial")
    return parser


def plot_sample(n: int, rng: np.random.Generator, path: str) -> Path:
    """Open random sites of one grid until it percolates and save the image."""
    from percolation.src.debug.visualizer import save_percolation_png

    perc = open_until_percolates(n, rng)
    mask = perc.open_mask()
    sizes = cluster_sizes(mask)
    print(f"sample grid: {perc.number_of_open_sites()} open sites, "
          f"{len(sizes)} clusters, largest {sizes[0] if sizes else 0}, "
          f"scan agrees: {percolates_by_scan(mask) == perc.percolates()}")
    return save_percolation_png(perc, path)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config:
        try:
            config_loader.apply_config(config_loader.load_config(args.config))
        except (OSError, ValueError) as exc:
            parser.error(f"could not load config {args.config}: {exc}")
    if args.log_file:
        config_loader.set_log_file(args.log_file)

    level = logging.DEBUG if args.verbose else getattr(logging, config_loader.LOG_LEVEL, logging.INFO)
    logger = get_logger("percolation.run_stats", file_path=config_loader.LOG_FILE, level=level)
    set_log_level(level)

    n = args.n if args.n is not None else config_loader.DEFAULT_GRID_SIZE
    trials = args.trials if args.trials is not None else config_loader.DEFAULT_TRIALS
    seed = args.seed if args.seed is not None else config_loader.DEFAULT_SEED

    rng = np.random.default_rng(seed)
    logger.info("running %d trials on a %dx%d grid (seed=%s)", trials, n, n, seed)
    try:
        stats = PercolationStats(n, trials, rng=rng)
    except InvalidArgumentError as exc:
        parser.error(str(exc))

    print(f"mean                    = {stats.mean()}")
    print(f"stddev                  = {stats.stddev()}")
    print(f"95% confidence interval = [{stats.confidence_lo()}, {stats.confidence_hi()}]")

    if args.plot:
        out = plot_sample(n, rng, args.plot)
        logger.info("sample grid written to %s", out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
