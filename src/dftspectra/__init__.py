"""dftspectra -- harmonic signal synthesis and direct-DFT spectral analysis."""

__version__ = "0.1.0"

from dftspectra._constants import NOISE_LEVEL, SAMPLE_RATE, WINDOW_SIZE
from dftspectra._types import DEFAULT_CONFIG, DEFAULT_SIGNALS, Peak, SignalSpec, SpectralConfig, SummaryStats
from dftspectra.dft import dft, dft_fast
from dftspectra.errors import DFTSpectraError, EmptySequenceError, InvalidConfigurationError
from dftspectra.noise import add_white_noise
from dftspectra.peaks import dominant_peak, peak_frequencies
from dftspectra.pipeline import SignalAnalysis, analyze_spec, run_pipeline
from dftspectra.stats import analyze_signal
from dftspectra.synthesis import generate_signal, synthesize

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_SIGNALS",
    "DFTSpectraError",
    "EmptySequenceError",
    "InvalidConfigurationError",
    "NOISE_LEVEL",
    "Peak",
    "SAMPLE_RATE",
    "SignalAnalysis",
    "SignalSpec",
    "SpectralConfig",
    "SummaryStats",
    "WINDOW_SIZE",
    "add_white_noise",
    "analyze_signal",
    "analyze_spec",
    "dft",
    "dft_fast",
    "dominant_peak",
    "generate_signal",
    "peak_frequencies",
    "run_pipeline",
    "synthesize",
]
