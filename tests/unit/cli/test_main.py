"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import main


def test_cli_demo_prints_report(capsys: pytest.CaptureFixture[str]) -> None:
    """CLI demo should print the demonstration lines."""
    exit_code = main(["demo"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "Found record: uid=ABCDEFG, data=Test record 1" in output


def test_cli_bench_prints_results(capsys: pytest.CaptureFixture[str]) -> None:
    """CLI bench should honor sizing flags and report counts."""
    args = ["bench", "--records", "2000", "--lookups", "100", "--hit-ratio", "0.5", "--seed", "3"]

    exit_code = main(args)
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "records in store: 2 000" in output
    assert "records found: 50" in output


def test_cli_bench_logs_to_stderr(capsys: pytest.CaptureFixture[str]) -> None:
    """Structured progress events should go to stderr as JSON."""
    main(["bench", "--records", "20", "--lookups", "5", "--progress-interval", "10", "--seed", "1"])
    captured = capsys.readouterr()

    events = [json.loads(line)["event"] for line in captured.err.splitlines() if line.strip()]
    assert "benchmark_insert_progress" in events
    assert "benchmark_insert_progress" not in captured.out


def test_cli_run_executes_demo_and_bench(capsys: pytest.CaptureFixture[str]) -> None:
    """CLI run should print both reports."""
    exit_code = main(["run", "--records", "100", "--lookups", "10", "--seed", "2"])
    output = capsys.readouterr().out

    assert exit_code == 0
    assert "=== DEMONSTRATION ===" in output
    assert "=== BENCHMARK RESULTS ===" in output


def test_cli_invalid_options_return_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Invalid benchmark options should exit 1 with an error line."""
    exit_code = main(["bench", "--records", "0"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.err.startswith("error=")


def test_cli_invalid_env_returns_error(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Invalid environment config should exit 1 instead of raising."""
    monkeypatch.setenv("UIDINDEX_RANDOM_SEED", "abc")

    exit_code = main(["demo"])

    assert exit_code == 1
    assert "UIDINDEX_RANDOM_SEED" in capsys.readouterr().err
