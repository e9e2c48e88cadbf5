"""Spectral peak extraction."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from dftspectra._arrays import as_samples, require_samples
from dftspectra._constants import MAX_PEAKS, PEAK_THRESHOLD
from dftspectra._types import DEFAULT_CONFIG, Peak, SpectralConfig
from dftspectra.errors import EmptySequenceError


def peak_frequencies(
    spectrum: npt.ArrayLike,
    threshold: float = PEAK_THRESHOLD,
    *,
    config: SpectralConfig = DEFAULT_CONFIG,
    max_peaks: int = MAX_PEAKS,
) -> list[Peak]:
    """List the bins whose magnitude reaches *threshold*, in bin order.

    Bins are scanned from ``1`` upward; bin 0 (DC) is never reported.  A bin
    is dropped when ``magnitude < threshold``, so ``threshold <= 0`` reports
    every non-DC bin.  Scanning stops after *max_peaks* survivors: the result
    is the first *max_peaks* bins above threshold, **not** the strongest
    ones.  Strong bins late in the scan, such as the mirror images near
    ``window_size``, can therefore be dropped.

    Parameters
    ----------
    spectrum:
        Magnitude spectrum from :func:`dftspectra.dft.dft`.
    threshold:
        Minimum magnitude.
    config:
        Sampling parameters used to convert bin indices to Hz.
    max_peaks:
        Maximum number of peaks returned.

    Returns
    -------
    list[Peak]
        At most *max_peaks* peaks in ascending bin order.
    """
    mags = as_samples(spectrum)
    peaks: list[Peak] = []
    for k in range(1, len(mags)):
        if len(peaks) >= max_peaks:
            break
        magnitude = float(mags[k])
        if magnitude < threshold:
            continue
        peaks.append(Peak(index=k, frequency_hz=config.bin_frequency(k), magnitude=magnitude))
    return peaks


def dominant_peak(
    spectrum: npt.ArrayLike,
    *,
    config: SpectralConfig = DEFAULT_CONFIG,
) -> Peak:
    """Strongest non-DC bin up to and including Nyquist.

    Ties resolve to the lowest bin.

    Raises
    ------
    EmptySequenceError
        If *spectrum* has no bins, or only the DC bin.
    """
    mags = require_samples(spectrum, "the dominant peak")
    if len(mags) < 2:
        raise EmptySequenceError("spectrum has no non-DC bins")
    half = mags[1 : len(mags) // 2 + 1]
    k = int(np.argmax(half)) + 1
    return Peak(index=k, frequency_hz=config.bin_frequency(k), magnitude=float(mags[k]))
