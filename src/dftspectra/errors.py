"""Exception hierarchy for dftspectra."""

from __future__ import annotations


class DFTSpectraError(Exception):
    """Base class for all dftspectra errors."""


class InvalidConfigurationError(DFTSpectraError, ValueError):
    """Raised for malformed signal or pipeline configuration.

    Examples are a frequency/amplitude length mismatch, an empty harmonic
    list, or a negative noise level.
    """


class EmptySequenceError(DFTSpectraError, ValueError):
    """Raised when a statistic or transform is requested on zero samples."""
