"""Tests for dftspectra.stats."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt
import pytest

from dftspectra import SummaryStats, analyze_signal
from dftspectra.errors import EmptySequenceError


def test_known_values() -> None:
    """Max, min and mean of a small sequence."""
    stats = analyze_signal([1.0, -2.0, 4.0, 1.0])
    assert stats == SummaryStats(max_amplitude=4.0, min_amplitude=-2.0, average=1.0)


def test_three_harmonics(three_harmonics: npt.NDArray[np.float64]) -> None:
    """Peak equals the amplitude sum at t=0; mean is near zero."""
    stats = analyze_signal(three_harmonics)
    assert stats.max_amplitude == pytest.approx(6.0)
    assert stats.min_amplitude < 0
    assert abs(stats.average) < 0.1


@pytest.mark.parametrize("seed", range(10))
def test_average_between_extremes(seed: int) -> None:
    """min <= average <= max for arbitrary input."""
    rng = np.random.default_rng(seed)
    signal = rng.normal(0.0, 10.0 ** rng.uniform(-3, 3), size=int(rng.integers(1, 500)))
    stats = analyze_signal(signal)
    assert stats.min_amplitude <= stats.average <= stats.max_amplitude


def test_constant_signal() -> None:
    """Constant input collapses all three statistics."""
    stats = analyze_signal(np.full(1000, 0.1))
    assert stats.min_amplitude == stats.average == stats.max_amplitude == pytest.approx(0.1)


def test_single_sample() -> None:
    """One sample is its own max, min and mean."""
    assert analyze_signal([3.5]) == SummaryStats(3.5, 3.5, 3.5)


def test_empty_raises() -> None:
    """Empty input is an explicit error, not NaN."""
    with pytest.raises(EmptySequenceError):
        analyze_signal([])


def test_nan_raises() -> None:
    """NaN samples are rejected."""
    with pytest.raises(ValueError, match="NaN"):
        analyze_signal([1.0, float("nan")])
