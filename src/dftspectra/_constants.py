"""Shared constants for dftspectra."""

from __future__ import annotations

# Sampling

SAMPLE_RATE = 10_000  # Hz
WINDOW_SIZE = 1024  # samples per analysis window

# Noise and peak extraction defaults

NOISE_LEVEL = 0.3  # fraction of unit amplitude, additive
PEAK_THRESHOLD = 0.1
MAX_PEAKS = 10

# Reproducibility

DEFAULT_SEED = 2026_10_18

# Report output

OUTPUT_DIR = "/tmp/dftspectra"
