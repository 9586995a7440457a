from __future__ import annotations

"""Text and image renderings of a percolation grid."""

from pathlib import Path
from typing import List, Optional

import matplotlib

matplotlib.use("Agg")  # headless
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from percolation.src.core.percolation import Percolation

BLOCKED = "#"
OPEN = "."
FULL = "~"

# blocked, open, full
_CMAP = ListedColormap(["black", "white", "#3c78d8"])


def _state_matrix(perc: Percolation) -> np.ndarray:
    """Return ``0`` for blocked, ``1`` for open and ``2`` for full sites."""
    state = perc.open_mask().astype(int)
    state[perc.full_mask()] = 2
    return state


def render_text(perc: Percolation) -> str:
    """Return one line per row using ``#`` blocked, ``.`` open and ``~`` full."""
    symbols = (BLOCKED, OPEN, FULL)
    lines: List[str] = []
    for row in _state_matrix(perc):
        lines.append("".join(symbols[v] for v in row))
    return "\n".join(lines)


def plot_percolation(perc: Percolation, ax: Optional[plt.Axes] = None) -> plt.Figure:
    """Draw ``perc`` as an image and return the owning figure."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(5, 5))
    else:
        fig = ax.figure
    ax.imshow(_state_matrix(perc), cmap=_CMAP, vmin=0, vmax=2, interpolation="nearest")
    ax.set_xticks([])
    ax.set_yticks([])
    status = "percolates" if perc.percolates() else "does not percolate"
    ax.set_title(f"{perc.number_of_open_sites()} open sites, {status}")
    return fig


def save_percolation_png(perc: Percolation, path: str | Path) -> Path:
    """Render ``perc`` to ``path`` and return the written path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    fig = plot_percolation(perc)
    fig.tight_layout()
    fig.savefig(out)
    plt.close(fig)
    return out


__all__ = ["render_text", "plot_percolation", "save_percolation_png"]
