"""Monte Carlo estimate of the site percolation threshold."""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import numpy as np

from percolation.src.core.errors import InvalidArgumentError
from percolation.src.core.grid_utils import validate_size
from percolation.src.core.percolation import Percolation
from percolation.src.utils import config_loader
from percolation.src.utils.logger import get_logger

logger = get_logger(__name__)


def open_until_percolates(n: int, rng: np.random.Generator) -> Percolation:
    """Open sites of a fresh ``n x n`` grid in random order until it percolates."""
    perc = Percolation(n)
    for index in rng.permutation(n * n):
        row, col = divmod(int(index), n)
        perc.open(row + 1, col + 1)
        if perc.percolates():
            break
    return perc


def run_trial(n: int, rng: np.random.Generator) -> float:
    """Return the open-site fraction at which a random ``n x n`` grid percolates."""
    return open_until_percolates(n, rng).open_fraction()


class PercolationStats:
    """Repeat :func:`run_trial` ``trials`` times and summarise the thresholds."""

    def __init__(
        self,
        n: int,
        trials: int,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        validate_size(n)
        if isinstance(trials, bool) or not isinstance(trials, int) or trials < 1:
            raise InvalidArgumentError(f"trials must be a positive integer, got {trials!r}")

        self.n = n
        self.trials = trials
        if rng is None:
            rng = np.random.default_rng(seed)

        thresholds = np.empty(trials, dtype=float)
        for t in range(trials):
            thresholds[t] = run_trial(n, rng)
            logger.debug("trial %d/%d: threshold %.6f", t + 1, trials, thresholds[t])
        self.thresholds = thresholds
        logger.info(
            "n=%d trials=%d mean=%.6f stddev=%.6f",
            n,
            trials,
            self.mean(),
            self.stddev(),
        )

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return float(np.mean(self.thresholds))

    def stddev(self) -> float:
        """Sample standard deviation; ``nan`` for a single trial."""
        if self.trials == 1:
            return float("nan")
        return float(np.std(self.thresholds, ddof=1))

    def _half_width(self) -> float:
        return config_loader.CONFIDENCE_Z * self.stddev() / math.sqrt(self.trials)

    def confidence_lo(self) -> float:
        """Low endpoint of the confidence interval."""
        return self.mean() - self._half_width()

    def confidence_hi(self) -> float:
        """High endpoint of the confidence interval."""
        return self.mean() + self._half_width()

    def summary(self) -> Dict[str, Any]:
        return {
            "n": self.n,
            "trials": self.trials,
            "mean": self.mean(),
            "stddev": self.stddev(),
            "confidence_lo": self.confidence_lo(),
            "confidence_hi": self.confidence_hi(),
        }


__all__ = ["PercolationStats", "open_until_percolates", "run_trial"]
