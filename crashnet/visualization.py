"""Drawing the node degree histogram."""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Mapping

from matplotlib.figure import Figure

_WIDTH_PX = 800
_HEIGHT_PX = 600
_DPI = 100


def _degree_frequencies(degree_map: Mapping[int, int]) -> list[tuple[int, int]]:
    """Pairs of (degree, number of nodes with that degree), by ascending degree."""
    return sorted(Counter(degree_map.values()).items())


def plot_degree_histogram(
    degree_map: Mapping[int, int], output_path: str | os.PathLike[str]
) -> None:
    """Save a PNG histogram of node degrees to ``output_path``.

    Nothing is written when ``degree_map`` is empty. Errors while saving propagate.
    """
    if not degree_map:
        return

    frequencies = _degree_frequencies(degree_map)
    x_max = max(deg for deg, _ in frequencies)
    y_max = max(count for _, count in frequencies)

    fig = Figure(figsize=(_WIDTH_PX / _DPI, _HEIGHT_PX / _DPI), dpi=_DPI)
    fig.patch.set_facecolor("white")
    ax = fig.add_subplot()
    ax.set_title("Node Degree Distribution", fontsize=16)
    ax.set_xlabel("Node Degree")
    ax.set_ylabel("Count")
    ax.grid(False)

    for deg, count in frequencies:
        left = max(deg - 1, 0)
        ax.bar(left, count, width=(deg + 1) - left, align="edge", color="blue")

    ax.set_xlim(0, x_max + 1)
    ax.set_ylim(0, y_max + 5)

    fig.savefig(output_path, format="png", dpi=_DPI)
    print(f"Histogram saved to {os.fspath(output_path)}")