from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt

LETTERING = "ABCDEFGHIJKLMNOPQRSTUVWX"


def plot_pair_heatmap(matrix: Sequence[Sequence[float]], *, ax=None, title: str | None = None):
    """Heatmap of a 24x24 letter-pair frequency matrix (rows: first letter)."""
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111)

    im = ax.imshow(matrix, cmap="viridis", origin="upper")
    plt.colorbar(im, ax=ax, shrink=0.8)

    ticks = range(len(matrix))
    labels = [LETTERING[i] if i < len(LETTERING) else str(i) for i in ticks]
    ax.set_xticks(list(ticks))
    ax.set_xticklabels(labels)
    ax.set_yticks(list(ticks))
    ax.set_yticklabels(labels)
    ax.set_xlabel("second target")
    ax.set_ylabel("first target")
    ax.set_title(title or "Letter pair frequencies")
    return ax
