"""Descriptive statistics of sample sequences."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from dftspectra._arrays import require_samples
from dftspectra._types import SummaryStats


def analyze_signal(signal: npt.ArrayLike) -> SummaryStats:
    """Max, min and mean of *signal*.

    Raises
    ------
    EmptySequenceError
        If *signal* has no samples.
    """
    x = require_samples(signal, "statistics")
    # Clamp: the float mean of a constant array can land one ulp outside [min, max].
    lo = float(np.min(x))
    hi = float(np.max(x))
    average = min(max(float(np.mean(x)), lo), hi)
    return SummaryStats(max_amplitude=hi, min_amplitude=lo, average=average)
