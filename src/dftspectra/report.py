"""Export pipeline results to a report directory.

Layout of *output_dir* after :func:`export_report`::

    summary.json        configuration, statistics and peaks per signal
    waveforms.parquet   signal, index, time_s, clean, noisy
    spectra.parquet     signal, bin, frequency_hz, clean, noisy
    peaks.csv           signal, variant, bin, frequency_hz, magnitude
    <signal>.png        waveform and spectrum figure (optional)
"""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Sequence

import numpy as np
import pyarrow as pa
import pyarrow.parquet as pq

from dftspectra._constants import PEAK_THRESHOLD
from dftspectra._plotting import signal_figure
from dftspectra._types import DEFAULT_CONFIG, SpectralConfig
from dftspectra.errors import EmptySequenceError
from dftspectra.peaks import dominant_peak
from dftspectra.pipeline import SignalAnalysis

logger = logging.getLogger(__name__)

PEAK_FIELDS = ["signal", "variant", "bin", "frequency_hz", "magnitude"]


def waveform_table(results: Sequence[SignalAnalysis], config: SpectralConfig = DEFAULT_CONFIG) -> pa.Table:
    """Long-format table of clean and noisy samples for every signal."""
    t = config.time_axis()
    return pa.table(
        {
            "signal": pa.array([r.name for r in results for _ in r.clean], type=pa.string()),
            "index": pa.array(np.concatenate([np.arange(len(r.clean)) for r in results]), type=pa.int32()),
            "time_s": pa.array(np.concatenate([t[: len(r.clean)] for r in results])),
            "clean": pa.array(np.concatenate([r.clean for r in results])),
            "noisy": pa.array(np.concatenate([r.noisy for r in results])),
        }
    )


def spectrum_table(results: Sequence[SignalAnalysis], config: SpectralConfig = DEFAULT_CONFIG) -> pa.Table:
    """Long-format table of clean and noisy magnitudes for every signal."""
    bins = [np.arange(len(r.clean_spectrum)) for r in results]
    return pa.table(
        {
            "signal": pa.array([r.name for r in results for _ in r.clean_spectrum], type=pa.string()),
            "bin": pa.array(np.concatenate(bins), type=pa.int32()),
            "frequency_hz": pa.array(np.concatenate(bins) * config.bin_width),
            "clean": pa.array(np.concatenate([r.clean_spectrum for r in results])),
            "noisy": pa.array(np.concatenate([r.noisy_spectrum for r in results])),
        }
    )


def peak_rows(results: Sequence[SignalAnalysis]) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    for r in results:
        for variant, peaks in (("clean", r.clean_peaks), ("noisy", r.noisy_peaks)):
            for p in peaks:
                rows.append(
                    {
                        "signal": r.name,
                        "variant": variant,
                        "bin": p.index,
                        "frequency_hz": p.frequency_hz,
                        "magnitude": round(p.magnitude, 6),
                    }
                )
    return rows


def summary_dict(
    results: Sequence[SignalAnalysis],
    *,
    config: SpectralConfig = DEFAULT_CONFIG,
    threshold: float = PEAK_THRESHOLD,
    seed: int | None = None,
) -> dict[str, Any]:
    """JSON-serialisable summary of a pipeline run."""
    signals: list[dict[str, Any]] = []
    for r in results:
        signals.append(
            {
                "name": r.name,
                "frequencies": list(r.spec.frequencies),
                "amplitudes": list(r.spec.amplitudes),
                "clean": {
                    "stats": asdict(r.clean_stats),
                    "dominant": asdict(dominant_peak(r.clean_spectrum, config=config)),
                    "peaks": [asdict(p) for p in r.clean_peaks],
                },
                "noisy": {
                    "stats": asdict(r.noisy_stats),
                    "dominant": asdict(dominant_peak(r.noisy_spectrum, config=config)),
                    "peaks": [asdict(p) for p in r.noisy_peaks],
                },
            }
        )
    return {
        "config": {
            "sample_rate": config.sample_rate,
            "window_size": config.window_size,
            "noise_level": config.noise_level,
            "bin_width": config.bin_width,
            "threshold": threshold,
            "seed": seed,
        },
        "signals": signals,
    }


def export_report(
    results: Sequence[SignalAnalysis],
    output_dir: str | Path,
    *,
    config: SpectralConfig = DEFAULT_CONFIG,
    threshold: float = PEAK_THRESHOLD,
    seed: int | None = None,
    plots: bool = True,
) -> list[Path]:
    """Write the report files for *results* into *output_dir*.

    Parameters
    ----------
    results:
        Output of :func:`dftspectra.pipeline.run_pipeline`.
    output_dir:
        Target directory, created if missing.
    config, threshold, seed:
        Recorded in ``summary.json``; *config* also sets the time and
        frequency axes.
    plots:
        Also write one PNG per signal.  Unchanged figures are not rewritten.

    Returns
    -------
    list[Path]
        Paths written (or left unchanged, for figures) in this call.
    """
    if not results:
        raise EmptySequenceError("no results to export")
    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []

    summary_path = out / "summary.json"
    with open(summary_path, "w", encoding="utf-8") as f:
        json.dump(summary_dict(results, config=config, threshold=threshold, seed=seed), f, indent=2)
    written.append(summary_path)

    waveforms_path = out / "waveforms.parquet"
    pq.write_table(waveform_table(results, config), waveforms_path)
    written.append(waveforms_path)

    spectra_path = out / "spectra.parquet"
    pq.write_table(spectrum_table(results, config), spectra_path)
    written.append(spectra_path)

    peaks_path = out / "peaks.csv"
    with open(peaks_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=PEAK_FIELDS)
        writer.writeheader()
        writer.writerows(peak_rows(results))
    written.append(peaks_path)

    if plots:
        for r in results:
            path = out / f"{r.name}.png"
            signal_figure(
                r.name,
                r.clean,
                r.noisy,
                r.clean_spectrum,
                r.noisy_spectrum,
                config=config,
                threshold=threshold,
                path=path,
            )
            written.append(path)

    logger.info("Report written to %s (%d file(s))", out, len(written))
    return written
