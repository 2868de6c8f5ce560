"""Dark chart theme and GrandBudapest2 palette shared by every panel."""

import matplotlib.pyplot as plt
from matplotlib.colors import LinearSegmentedColormap, to_hex

GRAND_BUDAPEST_2 = ["#E6A0C4", "#C6CDF7", "#D8A499", "#7294D4"]

BACKGROUND = "#212121"
FOREGROUND = "#dbdbdb"
LINE = "#939393"
GRID = "#565656"

BASE_FONT_SIZE = 10

THEME_RC = {
    "figure.facecolor": BACKGROUND,
    "figure.edgecolor": BACKGROUND,
    "savefig.facecolor": BACKGROUND,
    "axes.facecolor": BACKGROUND,
    "axes.edgecolor": BACKGROUND,
    "axes.labelcolor": FOREGROUND,
    "axes.titlecolor": FOREGROUND,
    "axes.labelsize": BASE_FONT_SIZE,
    "axes.labelpad": 8,
    "axes.grid": False,
    "axes.axisbelow": True,
    "axes.spines.left": False,
    "axes.spines.right": False,
    "axes.spines.top": False,
    "axes.spines.bottom": False,
    "text.color": FOREGROUND,
    "lines.color": LINE,
    "grid.color": GRID,
    "xtick.color": FOREGROUND,
    "ytick.color": FOREGROUND,
    "xtick.labelsize": BASE_FONT_SIZE * 1.1,
    "ytick.labelsize": BASE_FONT_SIZE * 1.1,
    "xtick.major.size": 0,
    "ytick.major.size": 0,
    "xtick.minor.size": 0,
    "ytick.minor.size": 0,
    "font.family": "sans-serif",
    "font.sans-serif": ["Lato", "DejaVu Sans"],
    "legend.facecolor": BACKGROUND,
    "legend.edgecolor": BACKGROUND,
    "legend.labelcolor": FOREGROUND,
    "legend.frameon": False,
}


def palette(n: int = 14) -> list:
    """GrandBudapest2 stretched to `n` evenly spaced colors."""
    cmap = LinearSegmentedColormap.from_list("grand_budapest_2", GRAND_BUDAPEST_2)
    if n == 1:
        return [to_hex(cmap(0.0))]
    return [to_hex(cmap(i / (n - 1))) for i in range(n)]


def theme_context():
    """Scope the dark rcParams to a `with` block instead of setting them globally."""
    return plt.rc_context(THEME_RC)


def style_axes(ax, title: str, subtitle: str = "", y_grid: bool = True):
    ax.set_facecolor(BACKGROUND)
    for spine in ax.spines.values():
        spine.set_visible(False)
    ax.tick_params(length=0, colors=FOREGROUND)

    ax.grid(False, axis="x")
    if y_grid:
        ax.yaxis.grid(True, which="both", color=GRID)
    else:
        ax.grid(False, axis="y")

    ax.set_title(title, loc="center", fontsize=BASE_FONT_SIZE * 1.6, color=FOREGROUND, pad=22 if subtitle else 8)
    if subtitle:
        ax.text(0.5, 1.02, subtitle, transform=ax.transAxes, ha="center", va="bottom",
                fontsize=BASE_FONT_SIZE * 0.8, color=FOREGROUND)
    return ax
