"""Matplotlib figures for the report exporter."""

from __future__ import annotations

import functools
import io
import logging
from pathlib import Path
from typing import Any, Callable

import matplotlib
import numpy as np
from matplotlib import pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.ticker import AutoMinorLocator

from dftspectra._types import SpectralConfig

logger = logging.getLogger(__name__)

matplotlib.rcParams["font.family"] = "serif"
matplotlib.rcParams["font.serif"] = ["Times New Roman", "Times", "DejaVu Serif"]
matplotlib.rcParams["mathtext.fontset"] = "stix"

SAVEFIG_DEFAULTS: dict[str, int | str] = {
    "dpi": 150,
    "bbox_inches": "tight",
    "facecolor": "white",
    "edgecolor": "none",
}


def configure_axes(ax: Axes) -> None:
    """Apply the shared tick/grid style."""
    ax.xaxis.set_minor_locator(AutoMinorLocator())
    ax.yaxis.set_minor_locator(AutoMinorLocator())
    ax.tick_params(which="minor", length=3, color="gray", direction="in")
    ax.tick_params(which="major", length=6, direction="in")
    ax.tick_params(top=True, right=True, which="both")


def save_figure_if_changed(fig: Figure, path: Path) -> bool:
    """Render *fig* once as PNG and write it unless *path* already holds the same pixels.

    Returns True if the file was written, False if it was left untouched.
    """
    buf = io.BytesIO()
    fig.savefig(buf, format="png", **SAVEFIG_DEFAULTS)
    png = buf.getvalue()
    if path.exists():
        rendered = plt.imread(io.BytesIO(png))
        on_disk = plt.imread(path)
        if rendered.shape == on_disk.shape and bool(np.array_equal(rendered, on_disk)):
            return False

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(png)
    return True


def report_figure(func: Callable[..., Figure]) -> Callable[..., bool]:
    """Turn a figure builder into a saver.

    The wrapped function takes an extra keyword-only *path*; the built figure
    is written there through :func:`save_figure_if_changed` and then closed.
    The wrapper returns whether the file was (re)written.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, path: Path, **kwargs: Any) -> bool:
        fig = func(*args, **kwargs)
        try:
            written = save_figure_if_changed(fig, path)
        finally:
            plt.close(fig)
        if not written:
            logger.debug("Figure unchanged: %s", path)
        return written

    return wrapper


@report_figure
def signal_figure(
    name: str,
    clean: np.ndarray,
    noisy: np.ndarray,
    clean_spectrum: np.ndarray,
    noisy_spectrum: np.ndarray,
    *,
    config: SpectralConfig,
    threshold: float,
) -> Figure:
    """Two-panel figure: waveforms on top, magnitude spectra up to Nyquist below."""
    fig, (ax_time, ax_freq) = plt.subplots(2, 1, figsize=(8, 7))
    fig.subplots_adjust(left=0.1, right=0.95, bottom=0.08, top=0.93, hspace=0.3)
    fig.suptitle(name)

    t_ms = config.time_axis()[: len(clean)] * 1000.0
    ax_time.plot(t_ms, noisy, color="0.6", linewidth=0.8, label="Noisy")
    ax_time.plot(t_ms, clean, color="k", linewidth=1.2, label="Clean")
    ax_time.set_xlabel("Time (ms)")
    ax_time.set_ylabel("Amplitude")
    ax_time.legend(loc="upper right", frameon=False)
    configure_axes(ax_time)

    n_half = len(clean_spectrum) // 2 + 1
    freqs = np.arange(n_half) * config.bin_width
    ax_freq.plot(freqs, noisy_spectrum[:n_half], color="0.6", linewidth=0.8, label="Noisy")
    ax_freq.plot(freqs, clean_spectrum[:n_half], color="k", linewidth=1.2, label="Clean")
    ax_freq.axhline(threshold, color="k", linestyle="--", linewidth=0.8, label=f"Threshold ({threshold:g})")
    ax_freq.set_xlabel("Frequency (Hz)")
    ax_freq.set_ylabel("Magnitude")
    ax_freq.legend(loc="upper right", frameon=False)
    configure_axes(ax_freq)
    return fig
