"""Shared fixtures for dftspectra tests."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import numpy as np  # noqa: E402
import numpy.typing as npt  # noqa: E402
import pytest  # noqa: E402

from dftspectra import SignalSpec, SpectralConfig, generate_signal  # noqa: E402


@pytest.fixture()
def small_config() -> SpectralConfig:
    """A short window that keeps the O(n^2) transform cheap."""
    return SpectralConfig(sample_rate=1000.0, window_size=128, noise_level=0.3)


@pytest.fixture()
def single_tone() -> npt.NDArray[np.float64]:
    """100 Hz, amplitude 1.0, default sampling."""
    return generate_signal([100.0], [1.0])


@pytest.fixture()
def three_harmonics() -> npt.NDArray[np.float64]:
    """100/300/700 Hz with amplitudes 3/2/1, default sampling."""
    return generate_signal([100.0, 300.0, 700.0], [3.0, 2.0, 1.0])


@pytest.fixture()
def small_specs() -> list[SignalSpec]:
    """Two configurations whose tones sit below the small config's Nyquist."""
    return [
        SignalSpec("low", (50.0,), (1.0,)),
        SignalSpec("pair", (50.0, 200.0), (1.0, 0.5)),
    ]
