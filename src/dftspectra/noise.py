"""Additive uniform noise."""

from __future__ import annotations

import math

import numpy as np
import numpy.typing as npt

from dftspectra._arrays import as_samples, frozen
from dftspectra._constants import NOISE_LEVEL
from dftspectra.errors import InvalidConfigurationError

RngLike = np.random.Generator | int | None


def add_white_noise(
    signal: npt.ArrayLike,
    level: float = NOISE_LEVEL,
    *,
    rng: RngLike = None,
) -> npt.NDArray[np.float64]:
    """Return a copy of *signal* with uniform noise in ``[-level, +level]`` added.

    *level* is an additive offset in signal units, not a noise power.

    Parameters
    ----------
    signal:
        Clean samples. Not modified.
    level:
        Half-width of the uniform distribution.
    rng:
        A ``numpy.random.Generator``, an integer seed, or ``None`` for a fresh
        OS-seeded generator.  Pass a generator or seed for reproducible draws.
    """
    if not math.isfinite(level) or level < 0:
        raise InvalidConfigurationError(f"noise level must be finite and >= 0, got {level}")
    samples = as_samples(signal)
    generator = np.random.default_rng(rng)
    return frozen(samples + generator.uniform(-level, level, size=len(samples)))
