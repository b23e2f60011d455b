from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from twisty_engine.viz.plot import LETTERING, plot_pair_heatmap  # noqa: E402


def test_plot_pair_heatmap_labels_letters():
    matrix = [[(a * 24 + b) / 576 for b in range(24)] for a in range(24)]
    ax = plot_pair_heatmap(matrix, title="pairs")
    assert ax.get_title() == "pairs"
    assert [t.get_text() for t in ax.get_xticklabels()] == list(LETTERING)
    plt.close(ax.figure)


def test_plot_pair_heatmap_on_existing_axes():
    fig, ax = plt.subplots()
    assert plot_pair_heatmap([[0.5, 0.5], [0.0, 0.0]], ax=ax) is ax
    assert ax.get_title() == "Letter pair frequencies"
    plt.close(fig)
