r"""Discrete Fourier Transform magnitude spectra.

:func:`dft` evaluates the transform directly from its definition,

.. math::

    X_k = \frac{1}{n} \left| \sum_{m=0}^{n-1} x_m\, e^{-2 \pi i k m / n} \right|

costing ``n**2`` cosine and ``n**2`` sine evaluations.  It is the reference
implementation every other result is checked against.  :func:`dft_fast` gives
the same normalised magnitudes through ``numpy.fft`` and is only a performance
variant.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from dftspectra._arrays import frozen, require_samples

BLOCK_ELEMENTS = 1 << 22  # phase-matrix entries per block (32 MiB of float64)


def dft(signal: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Normalised magnitude spectrum via the direct O(n^2) DFT.

    For each bin ``k``::

        real = sum_m x[m] * cos(2 pi k m / n)
        imag = -sum_m x[m] * sin(2 pi k m / n)
        spectrum[k] = sqrt(real**2 + imag**2) / n

    Parameters
    ----------
    signal:
        Real-valued samples.

    Returns
    -------
    npt.NDArray[np.float64]
        Read-only array with ``len(signal)`` non-negative magnitudes.  For real
        input ``spectrum[k] == spectrum[n - k]`` up to rounding.

    Raises
    ------
    EmptySequenceError
        If *signal* has no samples.
    ValueError
        If *signal* contains NaN.
    """
    x = require_samples(signal, "the DFT")
    n = len(x)
    idx = np.arange(n, dtype=np.int64)

    real = np.empty(n, dtype=np.float64)
    imag = np.empty(n, dtype=np.float64)
    # Rows of the phase matrix in blocks of at most BLOCK_ELEMENTS entries.
    rows = max(1, BLOCK_ELEMENTS // n)
    for start in range(0, n, rows):
        k = idx[start : start + rows]
        # k*m is periodic in n; reducing it first keeps the angle small and exact.
        phase = 2.0 * np.pi * (np.outer(k, idx) % n) / n
        real[start : start + rows] = np.cos(phase) @ x
        imag[start : start + rows] = -(np.sin(phase) @ x)
    return frozen(np.sqrt(real**2 + imag**2) / n)


def dft_fast(signal: npt.ArrayLike) -> npt.NDArray[np.float64]:
    """Same normalised magnitudes as :func:`dft`, computed with an FFT."""
    x = require_samples(signal, "the DFT")
    return frozen(np.abs(np.fft.fft(x)) / len(x))
