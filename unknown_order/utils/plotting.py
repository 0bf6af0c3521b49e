"""Thin matplotlib helpers (install with ``unknown-order[reports]``)."""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.axes import Axes  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402


def save(fig: Figure, path) -> Path:
    """Save the figure to *path* (parent directories created automatically)."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(str(target), bbox_inches="tight")
    plt.close(fig)
    return target


def wide_grid(rows: int, cols: int) -> Tuple[Figure, object]:
    """Create a grid of subplots suitable for dashboard-style layouts."""
    fig, axes = plt.subplots(rows, cols, figsize=(cols * 5.5, rows * 3.5), squeeze=False)
    return fig, axes


def nice_axes(
    ax: Axes,
    title: str,
    xlabel: Optional[str] = None,
    ylabel: Optional[str] = None,
) -> Axes:
    """Apply consistent styling to a matplotlib Axes object."""
    ax.set_title(title)
    if xlabel:
        ax.set_xlabel(xlabel)
    if ylabel:
        ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3)
    return ax


def bar_panel(ax: Axes, labels: Sequence[str], values: Sequence[float], *, title: str, ylabel: str) -> Axes:
    """Labelled bar chart with the value printed above each bar."""
    nice_axes(ax, title, ylabel=ylabel)
    bars = ax.bar(list(labels), list(values), color="#3b82f6")
    for bar, val in zip(bars, values):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(), f"{val:.3g}", ha="center", va="bottom")
    return ax


__all__ = [
    "bar_panel",
    "save",
    "wide_grid",
    "nice_axes",
]
