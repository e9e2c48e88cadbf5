"""Click CLI group entry point for dftspectra."""

from __future__ import annotations

import logging
import sys
import time
from typing import Any, Callable, TypeVar

import click
from rich.table import Table

from dftspectra._console import console, err_console
from dftspectra._constants import (
    DEFAULT_SEED,
    NOISE_LEVEL,
    OUTPUT_DIR,
    PEAK_THRESHOLD,
    SAMPLE_RATE,
    WINDOW_SIZE,
)
from dftspectra._types import DEFAULT_SIGNALS, Peak, SignalSpec, SpectralConfig, SummaryStats
from dftspectra.errors import DFTSpectraError
from dftspectra.peaks import dominant_peak
from dftspectra.pipeline import SignalAnalysis, analyze_spec, run_pipeline
from dftspectra.report import export_report

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

F = TypeVar("F", bound=Callable[..., Any])


_SAMPLING_OPTIONS = [
    click.option("--window-size", default=WINDOW_SIZE, show_default=True, help="Samples per window."),
    click.option("--sample-rate", default=float(SAMPLE_RATE), show_default=True, help="Sample rate in Hz."),
    click.option("--noise-level", default=NOISE_LEVEL, show_default=True, help="Half-width of the noise band."),
    click.option("--threshold", default=PEAK_THRESHOLD, show_default=True, help="Peak magnitude threshold."),
    click.option("--seed", default=DEFAULT_SEED, show_default=True, type=int, help="Noise generator seed."),
    click.option("--fast", is_flag=True, help="Use the FFT instead of the direct DFT."),
]


def _sampling_options(func: F) -> F:
    for option in reversed(_SAMPLING_OPTIONS):
        func = option(func)
    return func


def _config(sample_rate: float, window_size: int, noise_level: float) -> SpectralConfig:
    try:
        return SpectralConfig(sample_rate=sample_rate, window_size=window_size, noise_level=noise_level)
    except DFTSpectraError as exc:
        err_console.print(f"ERROR: {exc}")
        sys.exit(1)


def _stats_table(title: str, rows: list[tuple[str, SummaryStats]]) -> Table:
    table = Table(title=title)
    table.add_column("Variant")
    table.add_column("Max", justify="right")
    table.add_column("Min", justify="right")
    table.add_column("Mean", justify="right")
    for label, stats in rows:
        table.add_row(
            label,
            f"{stats.max_amplitude:.4f}",
            f"{stats.min_amplitude:.4f}",
            f"{stats.average:.4f}",
        )
    return table


def _peaks_table(title: str, peaks: list[Peak]) -> Table:
    table = Table(title=title)
    table.add_column("Bin", justify="right")
    table.add_column("Frequency (Hz)", justify="right")
    table.add_column("Magnitude", justify="right")
    for p in peaks:
        table.add_row(str(p.index), f"{p.frequency_hz:.2f}", f"{p.magnitude:.4f}")
    return table


def _dominant_table(results: list[SignalAnalysis], config: SpectralConfig) -> Table:
    table = Table(title="Dominant components")
    table.add_column("Signal")
    table.add_column("Clean (Hz)", justify="right")
    table.add_column("Clean mag", justify="right")
    table.add_column("Noisy (Hz)", justify="right")
    table.add_column("Noisy mag", justify="right")
    table.add_column("Peaks (clean/noisy)", justify="right")
    for r in results:
        clean = dominant_peak(r.clean_spectrum, config=config)
        noisy = dominant_peak(r.noisy_spectrum, config=config)
        table.add_row(
            r.name,
            f"{clean.frequency_hz:.2f}",
            f"{clean.magnitude:.4f}",
            f"{noisy.frequency_hz:.2f}",
            f"{noisy.magnitude:.4f}",
            f"{len(r.clean_peaks)}/{len(r.noisy_peaks)}",
        )
    return table


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """Harmonic signal synthesis and direct-DFT spectral analysis."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


@main.command()
@click.option("--output-dir", default=OUTPUT_DIR, show_default=True, type=click.Path(file_okay=False))
@click.option("--no-plots", is_flag=True, help="Skip PNG figures.")
@_sampling_options
def run(
    output_dir: str,
    no_plots: bool,
    window_size: int,
    sample_rate: float,
    noise_level: float,
    threshold: float,
    seed: int,
    fast: bool,
) -> None:
    """Analyse the default signal set and export a report."""
    config = _config(sample_rate, window_size, noise_level)

    try:
        console.print("Step 1: Analyse signals", style="bold cyan")
        t0 = time.perf_counter()
        results = run_pipeline(DEFAULT_SIGNALS, config=config, seed=seed, threshold=threshold, fast=fast)
        console.print(f"  {len(results)} signal(s) in {time.perf_counter() - t0:.2f}s", style="green")
        console.print(_dominant_table(results, config))

        console.print("\nStep 2: Export report", style="bold cyan")
        paths = export_report(results, output_dir, config=config, threshold=threshold, seed=seed, plots=not no_plots)
    except DFTSpectraError as exc:
        err_console.print(f"ERROR: {exc}")
        sys.exit(1)
    for path in paths:
        console.print(f"  [blue]{path}[/blue]")
    console.print("Done.", style="bold green")


@main.command()
@click.option("-f", "--frequency", "frequencies", multiple=True, type=float, required=True, help="Harmonic in Hz.")
@click.option("-a", "--amplitude", "amplitudes", multiple=True, type=float, required=True, help="Harmonic amplitude.")
@click.option("--name", default="custom", show_default=True)
@_sampling_options
def analyze(
    frequencies: tuple[float, ...],
    amplitudes: tuple[float, ...],
    name: str,
    window_size: int,
    sample_rate: float,
    noise_level: float,
    threshold: float,
    seed: int,
    fast: bool,
) -> None:
    """Analyse a single signal given as repeated -f/-a pairs."""
    config = _config(sample_rate, window_size, noise_level)
    try:
        spec = SignalSpec(name, frequencies, amplitudes)
        result = analyze_spec(spec, config=config, rng=seed, threshold=threshold, fast=fast)
    except DFTSpectraError as exc:
        err_console.print(f"ERROR: {exc}")
        sys.exit(1)

    console.print(
        _stats_table(name, [("clean", result.clean_stats), ("noisy", result.noisy_stats)]),
    )
    console.print(_peaks_table("Clean peaks", result.clean_peaks))
    console.print(_peaks_table("Noisy peaks", result.noisy_peaks))


@main.command()
def signals() -> None:
    """List the default signal configurations."""
    table = Table(title="Default signals")
    table.add_column("Name")
    table.add_column("Frequencies (Hz)")
    table.add_column("Amplitudes")
    for spec in DEFAULT_SIGNALS:
        table.add_row(
            spec.name,
            ", ".join(f"{f:g}" for f in spec.frequencies),
            ", ".join(f"{a:g}" for a in spec.amplitudes),
        )
    console.print(table)
