"""
Troponin charts
---------------
Four panels, each drawn onto an Axes handed in by the caller, and the 2x2
figure that holds them.
"""

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
import seaborn as sns
from matplotlib.cbook import boxplot_stats
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.ticker import PercentFormatter

from .data import AGE_LEVELS, SEX_LEVELS
from .theme import BASE_FONT_SIZE, FOREGROUND, LINE, palette, style_axes, theme_context

PAL = palette(14)
AGE_COLORS = PAL[8:14]
SEX_COLORS = {"Male": "#475d87", "Female": PAL[2]}
MISSING_COLOR = LINE
BP_LOW_COLOR = "#1e2c47"

BP_BINS = 30
WHIS = 1.5
JITTER = 0.05   # log units
SEED = 42

FIGSIZE = (12, 10)
CAPTION = "Data courtesy Xiao, Wenkai, et. al. (2017) doi.org/10.5061/dryad.bq0rm"


def age_proportions(df: pd.DataFrame) -> pd.Series:
    """Share of all rows falling in each age bin, in bin order."""
    counts = df["Age"].value_counts(sort=False).reindex(list(AGE_LEVELS), fill_value=0)
    if len(df) == 0:
        return counts.astype(float)
    return counts / len(df)


def map_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Five-number summary of MAP per age bin, whiskers at 1.5 x IQR."""
    rows = []
    for level in AGE_LEVELS:
        values = df.loc[df["Age"] == level, "MAP"].dropna().to_numpy()
        if len(values) == 0:
            continue
        stats = boxplot_stats(values, whis=WHIS)[0]
        rows.append({
            "Age": level,
            "n": len(values),
            "low": stats["whislo"],
            "q1": stats["q1"],
            "median": stats["med"],
            "q3": stats["q3"],
            "high": stats["whishi"],
            "outliers": list(stats["fliers"]),
        })
    return pd.DataFrame(rows, columns=["Age", "n", "low", "q1", "median", "q3", "high", "outliers"])


def troponin_log_points(df: pd.DataFrame, jitter: float = JITTER, seed: int = SEED) -> pd.DataFrame:
    """log(baseline) vs log(follow-up) for rows where both troponins are positive.

    Rows with a non-positive or missing value are left out here only; the
    table they came from is untouched.
    """
    keep = (df["B_hsTNT"] > 0) & (df["F_hsTnT"] > 0)
    sub = df.loc[keep]
    pts = pd.DataFrame({
        "x": np.log(sub["B_hsTNT"].to_numpy(dtype=float)),
        "y": np.log(sub["F_hsTnT"].to_numpy(dtype=float)),
        "Sex": sub["Sex"].to_numpy(),
    }, index=sub.index)
    if jitter:
        rng = np.random.default_rng(seed)
        pts["x"] += rng.uniform(-jitter, jitter, len(pts))
        pts["y"] += rng.uniform(-jitter, jitter, len(pts))
    return pts


def plot_age(df: pd.DataFrame, ax):
    props = age_proportions(df)
    ax.bar(list(props.index), props.to_numpy(), color=AGE_COLORS, width=0.9)
    ax.yaxis.set_major_formatter(PercentFormatter(xmax=1.0, decimals=0))
    ax.set_xlabel("")
    ax.set_ylabel("")
    return style_axes(ax, "Age", "By ten-year categories")


def plot_blood_pressure(df: pd.DataFrame, ax):
    pairs = df[["DBP", "SBP"]].dropna()
    if not pairs.empty:
        cmap = LinearSegmentedColormap.from_list("bp_density", [BP_LOW_COLOR, PAL[2]])
        # cmin=1 leaves empty cells undrawn
        ax.hist2d(pairs["DBP"], pairs["SBP"], bins=BP_BINS, cmap=cmap, cmin=1)
    ax.set_xlabel("Diastolic")
    ax.set_ylabel("Systolic")
    return style_axes(ax, "Blood Pressure", "Brighter cells indicate more common values", y_grid=False)


def plot_map_by_age(df: pd.DataFrame, ax):
    data = df[["Age", "MAP"]].dropna()
    if not data.empty:
        sns.boxplot(
            data=data,
            x="Age",
            y="MAP",
            hue="Age",
            order=list(AGE_LEVELS),
            hue_order=list(AGE_LEVELS),
            palette=dict(zip(AGE_LEVELS, AGE_COLORS)),
            whis=WHIS,
            linecolor=FOREGROUND,
            flierprops={"markerfacecolor": FOREGROUND, "markeredgecolor": FOREGROUND},
            legend=False,
            ax=ax,
        )
    ax.set_xlabel("")
    ax.set_ylabel("MAP")
    return style_axes(ax, "Mean Arterial Blood Pressure", "Sorted by age group")


def plot_troponin(df: pd.DataFrame, ax, jitter: float = JITTER, seed: int = SEED):
    pts = troponin_log_points(df, jitter=jitter, seed=seed)

    groups = [(label, pts[pts["Sex"] == label], SEX_COLORS[label]) for label in SEX_LEVELS]
    groups.append(("NA", pts[pts["Sex"].isna()], MISSING_COLOR))
    for label, sub, color in groups:
        if sub.empty:
            continue
        ax.scatter(sub["x"], sub["y"], s=14, color=color, edgecolors="none", label=label)

    if len(pts):
        legend = ax.legend(title="Sex", loc="upper center", bbox_to_anchor=(0.5, 0.98),
                           ncol=len(ax.get_legend_handles_labels()[1]))
        legend.get_title().set_color(FOREGROUND)
    ax.set_xlabel("Baseline hs-cTnT")
    ax.set_ylabel("Follow-Up hs-cTnT")
    return style_axes(ax, "High Sensitivity Troponin", "Baseline vs. Follow-Up levels (log scale)", y_grid=False)


def build_figure(df: pd.DataFrame):
    """Lay the four panels out as Age | Troponin over Blood Pressure | MAP."""
    with theme_context():
        fig, axes = plt.subplots(2, 2, figsize=FIGSIZE)
        plot_age(df, axes[0, 0])
        plot_troponin(df, axes[0, 1])
        plot_blood_pressure(df, axes[1, 0])
        plot_map_by_age(df, axes[1, 1])

        fig.tight_layout(rect=(0, 0.03, 1, 1), h_pad=3.0, w_pad=3.0)
        fig.text(0.99, 0.01, CAPTION, ha="right", va="bottom", fontsize=BASE_FONT_SIZE * 0.85, color=FOREGROUND)
    return fig
