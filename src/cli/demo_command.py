"""Demonstration command wiring for the uid-index CLI."""

from __future__ import annotations

from typing import Any

from bench.demo import run_demonstration
from bench.report import render_demonstration
from store.duplicate_policy import DuplicatePolicy
from store.record_store import RecordStore


def add_demo_command(subparsers: Any) -> None:
    """Register demo subcommand."""
    subparsers.add_parser("demo", help="Run the three-record lookup demonstration")


def run_demo_command(duplicate_policy: DuplicatePolicy) -> int:
    """Run the demonstration and print its report lines."""
    result = run_demonstration(RecordStore(duplicate_policy))
    for line in render_demonstration(result):
        print(line)
    return 0 if result.found is not None and not result.missing_found else 1
