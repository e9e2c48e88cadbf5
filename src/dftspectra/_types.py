"""Shared data types for dftspectra."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

import numpy as np
import numpy.typing as npt

from dftspectra._constants import NOISE_LEVEL, SAMPLE_RATE, WINDOW_SIZE
from dftspectra.errors import InvalidConfigurationError


@dataclass(frozen=True, slots=True)
class SpectralConfig:
    """Sampling parameters shared by every pipeline stage.

    Attributes
    ----------
    sample_rate : float
        Samples per second (Hz).
    window_size : int
        Number of samples in one analysis window, and therefore the number of
        DFT bins.
    noise_level : float
        Half-width of the uniform noise band added by the noise stage.
    """

    sample_rate: float = SAMPLE_RATE
    window_size: int = WINDOW_SIZE
    noise_level: float = NOISE_LEVEL

    def __post_init__(self) -> None:
        if not math.isfinite(self.sample_rate) or self.sample_rate <= 0:
            raise InvalidConfigurationError(f"sample_rate must be positive and finite, got {self.sample_rate}")
        if self.window_size < 1:
            raise InvalidConfigurationError(f"window_size must be >= 1, got {self.window_size}")
        if not math.isfinite(self.noise_level) or self.noise_level < 0:
            raise InvalidConfigurationError(f"noise_level must be finite and >= 0, got {self.noise_level}")

    @property
    def bin_width(self) -> float:
        """Frequency spacing between adjacent DFT bins (Hz)."""
        return self.sample_rate / self.window_size

    @property
    def nyquist(self) -> float:
        return self.sample_rate / 2.0

    def bin_frequency(self, k: int) -> float:
        """Physical frequency of bin *k*."""
        return k * self.sample_rate / self.window_size

    def bin_of(self, frequency: float) -> int:
        """Nearest bin for *frequency*."""
        return int(round(frequency * self.window_size / self.sample_rate))

    def time_axis(self) -> npt.NDArray[np.float64]:
        """Sample instants ``t_i = i / sample_rate`` for one window."""
        return np.arange(self.window_size, dtype=np.float64) / self.sample_rate


DEFAULT_CONFIG = SpectralConfig()


@dataclass(frozen=True, slots=True)
class SignalSpec:
    """A named sum of cosine harmonics.

    Attributes
    ----------
    name : str
        Label used in reports.
    frequencies : tuple[float, ...]
        Harmonic frequencies in Hz, all positive.
    amplitudes : tuple[float, ...]
        Harmonic amplitudes, one per frequency.
    """

    name: str
    frequencies: tuple[float, ...]
    amplitudes: tuple[float, ...]

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "frequencies", tuple(float(f) for f in self.frequencies))
        object.__setattr__(self, "amplitudes", tuple(float(a) for a in self.amplitudes))
        if not self.frequencies:
            raise InvalidConfigurationError(f"{self.name!r}: at least one harmonic is required")
        if len(self.frequencies) != len(self.amplitudes):
            raise InvalidConfigurationError(
                f"{self.name!r}: {len(self.frequencies)} frequencies but {len(self.amplitudes)} amplitudes"
            )
        if not all(math.isfinite(v) for v in self.frequencies + self.amplitudes):
            raise InvalidConfigurationError(f"{self.name!r}: frequencies and amplitudes must be finite")
        if any(f <= 0 for f in self.frequencies):
            raise InvalidConfigurationError(f"{self.name!r}: frequencies must be positive")

    @classmethod
    def from_pairs(cls, name: str, pairs: Iterable[tuple[float, float]]) -> SignalSpec:
        """Build a spec from ``(frequency, amplitude)`` pairs."""
        pairs = list(pairs)
        return cls(name, tuple(f for f, _ in pairs), tuple(a for _, a in pairs))


@dataclass(frozen=True, slots=True)
class Peak:
    """A spectral bin above the extraction threshold.

    Only meaningful for the ``(sample_rate, window_size)`` it was computed with.
    """

    index: int
    frequency_hz: float
    magnitude: float


@dataclass(frozen=True, slots=True)
class SummaryStats:
    """Descriptive statistics of a sample sequence."""

    max_amplitude: float
    min_amplitude: float
    average: float


DEFAULT_SIGNALS: tuple[SignalSpec, ...] = (
    SignalSpec("single_tone", (100.0,), (1.0,)),
    SignalSpec("two_tones", (100.0, 500.0), (1.0, 0.5)),
    SignalSpec("three_harmonics", (100.0, 300.0, 700.0), (3.0, 2.0, 1.0)),
    SignalSpec("comb", (50.0, 150.0, 250.0, 350.0, 450.0), (1.0, 0.8, 0.6, 0.4, 0.2)),
)
