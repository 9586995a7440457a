"""Debugging and inspection helpers."""

from .visualizer import plot_percolation, render_text, save_percolation_png

__all__ = ["plot_percolation", "render_text", "save_percolation_png"]
