"""Helpers for the read-only float arrays passed between stages."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from dftspectra.errors import EmptySequenceError


def as_samples(signal: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Coerce *signal* to a flat float64 array (no copy when already one)."""
    return np.asarray(signal, dtype=np.float64).ravel()


def require_samples(signal: npt.ArrayLike, what: str) -> npt.NDArray[np.float64]:
    """Like :func:`as_samples`, but reject empty and NaN-containing input."""
    samples = as_samples(signal)
    if len(samples) == 0:
        raise EmptySequenceError(f"cannot compute {what} of an empty sequence")
    if np.any(np.isnan(samples)):
        raise ValueError("signal contains NaN values; caller must handle missing samples before analysis")
    return samples


def frozen(array: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Clear the write flag so downstream stages cannot mutate *array*."""
    array.setflags(write=False)
    return array
