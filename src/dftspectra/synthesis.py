"""Time-domain synthesis of harmonic test signals."""

from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from dftspectra._arrays import frozen
from dftspectra._types import DEFAULT_CONFIG, SignalSpec, SpectralConfig
from dftspectra.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


def generate_signal(
    frequencies: Sequence[float],
    amplitudes: Sequence[float],
    *,
    config: SpectralConfig = DEFAULT_CONFIG,
) -> NDArray[np.float64]:
    r"""Sum cosine harmonics over one analysis window.

    .. math::

        x_i = \sum_j A_j \cos(2 \pi f_j t_i), \qquad t_i = i / f_s

    for ``i`` in ``[0, window_size)``.

    Parameters
    ----------
    frequencies:
        Harmonic frequencies in Hz.
    amplitudes:
        Harmonic amplitudes, same length as *frequencies*.
    config:
        Sampling parameters.

    Returns
    -------
    NDArray[np.float64]
        Read-only array of length ``config.window_size``.

    Raises
    ------
    InvalidConfigurationError
        If the two sequences differ in length or are empty,
        or contain NaN or inf.
    """
    freqs = np.asarray(frequencies, dtype=np.float64).ravel()
    amps = np.asarray(amplitudes, dtype=np.float64).ravel()
    if len(freqs) != len(amps):
        raise InvalidConfigurationError(f"{len(freqs)} frequencies but {len(amps)} amplitudes")
    if len(freqs) == 0:
        raise InvalidConfigurationError("at least one harmonic is required")
    if not (np.all(np.isfinite(freqs)) and np.all(np.isfinite(amps))):
        raise InvalidConfigurationError("frequencies and amplitudes must be finite")

    # Above Nyquist the tone folds back to a lower apparent frequency; allowed.
    for f in freqs[freqs > config.nyquist]:
        logger.warning(
            "%.1f Hz exceeds Nyquist (%.1f Hz); it will alias to %.1f Hz",
            f,
            config.nyquist,
            _alias_of(float(f), config.sample_rate),
        )

    t = config.time_axis()
    harmonics = amps[:, np.newaxis] * np.cos(2.0 * np.pi * freqs[:, np.newaxis] * t)
    return frozen(harmonics.sum(axis=0))


def synthesize(spec: SignalSpec, *, config: SpectralConfig = DEFAULT_CONFIG) -> NDArray[np.float64]:
    """Generate the clean samples described by *spec*."""
    logger.debug("Synthesizing %s: %d harmonic(s)", spec.name, len(spec.frequencies))
    return generate_signal(spec.frequencies, spec.amplitudes, config=config)


def _alias_of(frequency: float, sample_rate: float) -> float:
    folded = math.fmod(frequency, sample_rate)
    return min(folded, sample_rate - folded)
