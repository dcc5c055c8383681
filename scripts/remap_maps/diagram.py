"""Sampling diagram: where in the source each output pixel reads from."""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from ._common import SAMPLE_CMAP, STYLE, save, setup_axes
from .maps import NON_FINITE
from .projections import MODE_LABELS

# Upper bound on plotted samples per axis
MAX_SAMPLES = 64


def save_diagram(map_x, map_y, config, path):
    """Scatter the sampled source coordinates over the source extent."""
    rows, cols = map_x.shape
    step_r = max(1, rows // MAX_SAMPLES)
    step_c = max(1, cols // MAX_SAMPLES)
    xs = map_x[::step_r, ::step_c]
    ys = map_y[::step_r, ::step_c]
    col_index = np.broadcast_to(np.arange(0, cols, step_c), xs.shape)
    sampled = (xs != NON_FINITE) & (ys != NON_FINITE)

    w, h = config.width, config.height
    pad = 0.25 * max(w, h)

    fig = plt.figure(figsize=(7, 7), facecolor=STYLE["bg"])
    ax = fig.add_subplot(111)
    # Image rows grow downward
    setup_axes(ax, xlim=(-pad, w + pad), ylim=(h + pad, -pad))

    ax.add_patch(
        Rectangle(
            (0, 0),
            w,
            h,
            fill=False,
            edgecolor=STYLE["accent1"],
            lw=1.5,
            ls="--",
        )
    )
    ax.text(
        0,
        -pad * 0.3,
        f"source {w}x{h}",
        color=STYLE["accent1"],
        fontsize=10,
    )

    ax.scatter(
        xs[sampled],
        ys[sampled],
        c=col_index[sampled],
        cmap=SAMPLE_CMAP,
        s=4,
        alpha=0.8,
        zorder=3,
    )

    ax.set_title(
        f"{MODE_LABELS.get(config.mode, config.mode)}: {cols}x{rows} output samples",
        color=STYLE["text"],
        fontsize=14,
        fontweight="bold",
        pad=12,
    )
    ax.set_xlabel("source x", color=STYLE["axis"], fontsize=10)
    ax.set_ylabel("source y", color=STYLE["axis"], fontsize=10)

    fig.tight_layout()
    save(fig, path)
