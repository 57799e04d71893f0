import string

import matplotlib.pyplot as plt
import numpy as np

from .errors import InvalidArgument
from .theme import element_text, theme


def demo_data(n=10):
    """x = y = 1..n, labelled A, B, C, ..."""
    if not 1 <= n <= len(string.ascii_uppercase):
        raise InvalidArgument(f"n must be in [1, 26], got {n}")
    x = np.arange(1, n + 1)
    return x, x.copy(), list(string.ascii_uppercase[:n])


def text_plot(x, y, labels, *, ax=None, family=None, size=None, registry=None, **kwargs):
    """
    Draw one text label per data point, like `geom_text(aes(x, y, label))`.

    Parameters:
        x, y : array-like, shape (N,)
            Label positions in data coordinates.
        labels : sequence of str, length N
        ax : matplotlib.axes.Axes, optional
            Axis to plot on. If None, a new figure is created.
        family : str, optional
            Font family or registered alias for the labels only.
        size : float, optional
            Label size in points.
        registry : FontRegistry, optional
            Where `family` aliases are looked up (default: session registry).
        **kwargs : passed to `ax.text()`

    Returns:
        fig : matplotlib.figure.Figure
        ax : matplotlib.axes.Axes
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    labels = [str(s) for s in labels]
    if x.ndim != 1 or x.shape != y.shape or len(labels) != len(x):
        raise InvalidArgument("x, y and labels must be 1D with the same length")

    if ax is None:
        fig, ax = plt.subplots()
    fig = ax.figure

    kwargs.setdefault("ha", "center")
    kwargs.setdefault("va", "center")
    for xi, yi, s in zip(x, y, labels):
        ax.text(xi, yi, s, **kwargs)

    # Text artists do not update the data limits
    if len(x):
        ax.update_datalim(np.column_stack([x, y]))
        ax.autoscale_view()
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    if family is not None or size is not None:
        theme(ax, geom_text=element_text(family=family, size=size), registry=registry)

    return fig, ax
