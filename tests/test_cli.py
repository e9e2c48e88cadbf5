"""Tests for the dftspectra CLI using Click testing."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from dftspectra.cli import main


def test_cli_help() -> None:
    """``dftspectra --help`` should succeed and list commands."""
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    for cmd in ["run", "analyze", "signals"]:
        assert cmd in result.output, f"Missing command: {cmd}"


def test_run_help() -> None:
    """``dftspectra run --help`` lists the sampling options."""
    runner = CliRunner()
    result = runner.invoke(main, ["run", "--help"])
    assert result.exit_code == 0
    for opt in ["--output-dir", "--seed", "--noise-level", "--window-size", "--fast", "--no-plots"]:
        assert opt in result.output


def test_signals_lists_defaults() -> None:
    """``dftspectra signals`` prints the default configurations."""
    runner = CliRunner()
    result = runner.invoke(main, ["signals"])
    assert result.exit_code == 0, result.output
    assert "single_tone" in result.output
    assert "three_harmonics" in result.output


def test_analyze_single_tone() -> None:
    """Ad-hoc analysis prints statistics and peak tables."""
    runner = CliRunner()
    result = runner.invoke(main, ["analyze", "-f", "100", "-a", "1.0", "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "Clean peaks" in result.output
    assert "Noisy peaks" in result.output
    assert "97.66" in result.output


def test_analyze_mismatch_fails() -> None:
    """Unequal -f/-a counts exit non-zero."""
    runner = CliRunner()
    result = runner.invoke(main, ["analyze", "-f", "100", "-f", "200", "-a", "1.0"])
    assert result.exit_code == 1


def test_analyze_bad_config_fails() -> None:
    """An invalid sampling configuration exits non-zero."""
    runner = CliRunner()
    result = runner.invoke(main, ["analyze", "-f", "100", "-a", "1.0", "--noise-level", "-1"])
    assert result.exit_code == 1


def test_run_exports_report(tmp_path: Path) -> None:
    """``dftspectra run`` writes the report into --output-dir."""
    runner = CliRunner()
    out = tmp_path / "report"
    result = runner.invoke(
        main,
        ["run", "--output-dir", str(out), "--window-size", "256", "--seed", "3", "--no-plots", "--fast"],
    )
    assert result.exit_code == 0, result.output
    assert "Done." in result.output
    with open(out / "summary.json", encoding="utf-8") as f:
        summary = json.load(f)
    assert summary["config"]["window_size"] == 256
    assert summary["config"]["seed"] == 3
    assert len(summary["signals"]) == 4
    assert not list(out.glob("*.png"))


def test_run_single_sample_window_fails_cleanly(tmp_path: Path) -> None:
    """A window with only the DC bin exits 1 instead of raising."""
    runner = CliRunner()
    result = runner.invoke(main, ["run", "--output-dir", str(tmp_path), "--window-size", "1", "--no-plots"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_analyze_non_finite_inputs_fail_cleanly() -> None:
    """NaN harmonics and NaN noise levels are reported, not raised."""
    runner = CliRunner()
    for args in (
        ["analyze", "-f", "nan", "-a", "1.0"],
        ["analyze", "-f", "100", "-a", "inf"],
        ["analyze", "-f", "100", "-a", "1.0", "--noise-level", "nan"],
        ["analyze", "-f", "100", "-a", "1.0", "--sample-rate", "inf"],
    ):
        result = runner.invoke(main, args)
        assert result.exit_code == 1, args
        assert isinstance(result.exception, SystemExit), args
