"""Matplotlib diagrams of the animation and its shading stages."""

import os

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import numpy as np  # noqa: E402

from .dither import BANDS, dither_buffer  # noqa: E402
from .raster import light_curve  # noqa: E402

DPI = 150

# Dark figure colours.  The lit and backlit entries trace the two branches
# of the light curve; band marks the dither thresholds.
PALETTE = {
    "background": "#101018",
    "rule": "#2c2c40",
    "label": "#9a9ab4",
    "title": "#ececf4",
    "lit": "#f0c24a",
    "backlit": "#5aa0f0",
    "band": "#e86a5c",
    "legend": "#1c1c2a",
}


def style_axes(ax, ticks=True):
    """Paint `ax` in the palette.  Image panels pass ticks=False."""
    ax.set_facecolor(PALETTE["background"])
    for spine in ax.spines.values():
        spine.set_color(PALETTE["rule"])
        spine.set_visible(ticks)
    if ticks:
        ax.tick_params(colors=PALETTE["label"], labelsize=9)
    else:
        ax.set_xticks([])
        ax.set_yticks([])


def save_figure(fig, out_dir, name):
    """Write `fig` as out_dir/name, close it and return the path."""
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, name)
    fig.savefig(path, dpi=DPI, facecolor=fig.get_facecolor())
    plt.close(fig)
    print(f"  {name}")
    return path


# ---------------------------------------------------------------------------
# frames.png
# ---------------------------------------------------------------------------


def diagram_contact_sheet(frames, out_dir, columns=16):
    """Every dithered frame side by side, in animation order."""
    frames = list(frames)
    rows = max(1, -(-len(frames) // columns))
    cols = min(columns, max(1, len(frames)))
    fig, axes = plt.subplots(
        rows, cols, figsize=(cols * 0.8, rows * 2.8), facecolor=PALETTE["background"], squeeze=False
    )

    for ax in axes.flat:
        style_axes(ax, ticks=False)
        ax.set_visible(False)

    for ax, frame in zip(axes.flat, frames):
        ax.set_visible(True)
        ax.imshow(frame.pixels, cmap="gray", vmin=0, vmax=1, interpolation="nearest")
        ax.set_title(str(frame.index), color=PALETTE["label"], fontsize=7, pad=3)

    fig.suptitle(
        f"{len(frames)} Frames",
        color=PALETTE["title"],
        fontsize=14,
        fontweight="bold",
    )
    fig.tight_layout()
    return save_figure(fig, out_dir, "frames.png")


# ---------------------------------------------------------------------------
# light_curve.png
# ---------------------------------------------------------------------------


def diagram_light_curve(out_dir):
    """Brightness as a function of light/normal alignment."""
    fig = plt.figure(figsize=(8, 5), facecolor=PALETTE["background"])
    ax = fig.add_subplot(111)
    style_axes(ax)
    ax.set_xlim(-1.05, 1.05)
    ax.set_ylim(-0.02, 1.05)
    ax.grid(True, color=PALETTE["rule"], linewidth=0.5, alpha=0.5)
    ax.set_axisbelow(True)

    lit = np.linspace(0, 1, 200)
    back = np.linspace(-1, 0, 200)
    ax.plot(lit, light_curve(lit), color=PALETTE["lit"], lw=2.5, label="0.3 + 0.7 cos")
    ax.plot(back, light_curve(back), color=PALETTE["backlit"], lw=2.5, label="0.1 - 0.4 cos")

    for bound, _ in BANDS[1:]:
        ax.axhline(bound, color=PALETTE["band"], lw=0.6, ls="--", alpha=0.4)

    ax.set_xlabel("dot(light, normal)", color=PALETTE["label"], fontsize=11)
    ax.set_ylabel("Brightness", color=PALETTE["label"], fontsize=11)
    ax.set_title(
        "Light Curve with Dither Band Boundaries",
        color=PALETTE["title"],
        fontsize=14,
        fontweight="bold",
        pad=12,
    )
    ax.legend(
        fontsize=10,
        facecolor=PALETTE["legend"],
        edgecolor=PALETTE["rule"],
        labelcolor=PALETTE["title"],
        loc="upper center",
    )

    fig.tight_layout()
    return save_figure(fig, out_dir, "light_curve.png")


# ---------------------------------------------------------------------------
# dither_bands.png
# ---------------------------------------------------------------------------


def diagram_dither_bands(out_dir, size=12):
    """One swatch per dither band, filled at the band's upper bound."""
    levels = [bound for bound, _ in BANDS] + [1.0]
    fig, axes = plt.subplots(1, len(levels), figsize=(len(levels) * 1.2, 1.8), facecolor=PALETTE["background"])

    for ax, level in zip(axes, levels):
        style_axes(ax, ticks=False)
        swatch = dither_buffer(np.full((size, size), level))
        ax.imshow(swatch, cmap="gray", vmin=0, vmax=1, interpolation="nearest")
        ax.set_title(f"<= {level:g}", color=PALETTE["title"], fontsize=9, pad=4)

    fig.suptitle(
        "Ordered Dither Bands",
        color=PALETTE["title"],
        fontsize=12,
        fontweight="bold",
        y=1.05,
    )
    fig.tight_layout()
    return save_figure(fig, out_dir, "dither_bands.png")
