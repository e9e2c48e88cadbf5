"""Tests for dftspectra.synthesis."""

from __future__ import annotations

import logging
import math

import numpy as np
import numpy.typing as npt
import pytest

from dftspectra import SignalSpec, SpectralConfig, generate_signal, synthesize
from dftspectra.errors import InvalidConfigurationError


def test_length_is_window_size(single_tone: npt.NDArray[np.float64]) -> None:
    """Output always has window_size samples."""
    assert len(single_tone) == 1024
    cfg = SpectralConfig(window_size=300)
    assert len(generate_signal([100.0], [1.0], config=cfg)) == 300


def test_matches_cosine_sum() -> None:
    """Each sample is sum_j A_j cos(2 pi f_j i / fs)."""
    cfg = SpectralConfig(sample_rate=1000.0, window_size=16)
    signal = generate_signal([50.0, 120.0], [2.0, 0.5], config=cfg)
    for i in range(16):
        t = i / 1000.0
        expected = 2.0 * math.cos(2 * math.pi * 50.0 * t) + 0.5 * math.cos(2 * math.pi * 120.0 * t)
        assert signal[i] == pytest.approx(expected, abs=1e-12)


def test_first_sample_is_amplitude_sum(three_harmonics: npt.NDArray[np.float64]) -> None:
    """At t=0 every cosine is 1."""
    assert three_harmonics[0] == pytest.approx(6.0)


def test_output_is_read_only(single_tone: npt.NDArray[np.float64]) -> None:
    """Produced samples cannot be modified in place."""
    with pytest.raises(ValueError):
        single_tone[0] = 0.0


def test_length_mismatch() -> None:
    """Mismatched inputs are rejected before synthesis."""
    with pytest.raises(InvalidConfigurationError):
        generate_signal([100.0, 200.0], [1.0])


def test_empty_harmonics() -> None:
    """At least one harmonic is required."""
    with pytest.raises(InvalidConfigurationError):
        generate_signal([], [])


def test_above_nyquist_warns(caplog: pytest.LogCaptureFixture) -> None:
    """Aliasing is allowed but logged."""
    with caplog.at_level(logging.WARNING, logger="dftspectra.synthesis"):
        signal = generate_signal([6000.0], [1.0])
    assert len(signal) == 1024
    assert "alias to 4000.0 Hz" in caplog.text


def test_below_nyquist_is_silent(caplog: pytest.LogCaptureFixture) -> None:
    """Ordinary tones produce no warning."""
    with caplog.at_level(logging.WARNING, logger="dftspectra.synthesis"):
        generate_signal([100.0], [1.0])
    assert not caplog.records


def test_synthesize_uses_spec() -> None:
    """synthesize() is generate_signal() over a SignalSpec."""
    spec = SignalSpec("s", (100.0, 300.0), (1.0, 0.5))
    np.testing.assert_array_equal(synthesize(spec), generate_signal([100.0, 300.0], [1.0, 0.5]))


def test_non_finite_harmonics() -> None:
    """NaN or inf harmonics are rejected before any samples are produced."""
    with pytest.raises(InvalidConfigurationError, match="finite"):
        generate_signal([float("nan")], [1.0])
    with pytest.raises(InvalidConfigurationError, match="finite"):
        generate_signal([100.0], [float("inf")])
