"""Shared plot style for remap_maps diagrams."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.colors import LinearSegmentedColormap  # noqa: E402

DPI = 200

# ---------------------------------------------------------------------------
# Dark theme style
# ---------------------------------------------------------------------------

STYLE = {
    "bg": "#1a1a2e",  # Dark blue-gray background
    "grid": "#2a2a4a",  # Subtle grid lines
    "axis": "#8888aa",  # Axis lines and labels
    "text": "#e0e0f0",  # Primary text
    "text_dim": "#8888aa",  # Secondary/dim text
    "accent1": "#4fc3f7",  # Cyan, source extent
    "accent2": "#ff7043",  # Orange
    "warn": "#ffd54f",  # Yellow
}

# Output column -> colour for sample scatter plots
SAMPLE_CMAP = LinearSegmentedColormap.from_list(
    "samples",
    [STYLE["accent1"], STYLE["accent2"], STYLE["warn"]],
)


def setup_axes(ax, xlim=None, ylim=None, grid=True, aspect="equal"):
    """Apply the dark styling to axes."""
    ax.set_facecolor(STYLE["bg"])
    if xlim:
        ax.set_xlim(xlim)
    if ylim:
        ax.set_ylim(ylim)
    if aspect:
        ax.set_aspect(aspect)
    ax.tick_params(colors=STYLE["axis"], labelsize=9)
    for spine in ax.spines.values():
        spine.set_color(STYLE["grid"])
        spine.set_linewidth(0.5)
    if grid:
        ax.grid(True, color=STYLE["grid"], linewidth=0.5, alpha=0.5)
    ax.set_axisbelow(True)


def save(fig, path):
    """Save a figure to ``path`` and close it."""
    fig.savefig(
        path,
        dpi=DPI,
        bbox_inches="tight",
        facecolor=STYLE["bg"],
        pad_inches=0.2,
    )
    plt.close(fig)
    print(f"  {path}")
