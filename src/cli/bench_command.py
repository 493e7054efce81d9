"""Benchmark command wiring for the uid-index CLI."""

from __future__ import annotations

import argparse
from typing import Any

from bench.benchmark import run_benchmark
from bench.identifier_generator import IdentifierGenerator
from bench.report import render_benchmark_report
from core.config import UidIndexConfig
from core.constants import DEFAULT_LINEAR_SAMPLE_SIZE
from core.types import BenchmarkOptions
from store.duplicate_policy import DuplicatePolicy
from store.record_store import RecordStore


def add_bench_arguments(parser: argparse.ArgumentParser) -> None:
    """Attach benchmark sizing flags; unset flags fall back to config."""
    parser.add_argument("--records", type=int, help="Number of records to insert")
    parser.add_argument("--lookups", type=int, help="Number of timed lookups")
    parser.add_argument(
        "--hit-ratio",
        type=float,
        help="Fraction of lookups targeting inserted identifiers, in [0, 1]",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible runs")
    parser.add_argument(
        "--progress-interval",
        type=int,
        help="Inserted records between progress log events",
    )
    parser.add_argument(
        "--linear-sample",
        type=int,
        default=DEFAULT_LINEAR_SAMPLE_SIZE,
        help="Lookups to repeat as a linear scan for comparison",
    )


def add_bench_command(subparsers: Any) -> None:
    """Register bench subcommand."""
    parser = subparsers.add_parser(
        "bench",
        help="Benchmark indexed lookups over randomly keyed records",
    )
    add_bench_arguments(parser)


def build_benchmark_options(config: UidIndexConfig, args: argparse.Namespace) -> BenchmarkOptions:
    """Merge CLI flags over config defaults.

    Args:
        config: Environment-derived configuration.
        args: Parsed CLI args.

    Returns:
        Benchmark options.
    """
    return BenchmarkOptions(
        total_records=_pick(args.records, config.total_records),
        lookup_count=_pick(args.lookups, config.lookup_count),
        hit_ratio=_pick(args.hit_ratio, config.hit_ratio),
        progress_interval=_pick(args.progress_interval, config.progress_interval),
        linear_sample_size=args.linear_sample,
    )


def run_bench_command(
    config: UidIndexConfig,
    args: argparse.Namespace,
    duplicate_policy: DuplicatePolicy,
) -> int:
    """Execute a benchmark run and print its report lines."""
    options = build_benchmark_options(config, args)
    generator = IdentifierGenerator.from_seed(_pick(args.seed, config.random_seed))
    result = run_benchmark(options, generator, RecordStore(duplicate_policy))
    for line in render_benchmark_report(result):
        print(line)
    return 0


def _pick(flag_value: Any, config_value: Any) -> Any:
    """Prefer an explicit CLI flag over the configured value."""
    return config_value if flag_value is None else flag_value
