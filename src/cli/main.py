"""uid-index CLI entry points.

This module exposes the demonstration and benchmark commands.
It maps argparse commands onto the bench drivers.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Any, Sequence

from cli.bench_command import add_bench_arguments, add_bench_command, run_bench_command
from cli.demo_command import add_demo_command, run_demo_command
from core.config import UidIndexConfig
from core.constants import SUPPORTED_DUPLICATE_POLICIES
from core.errors import UidIndexError
from core.logging_config import configure_logging
from store.duplicate_policy import DuplicatePolicy


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="uidindex",
        description="Hash-indexed record lookup by 7-byte identifier",
    )
    parser.add_argument("--log-level", help="Override UIDINDEX_LOG_LEVEL for this command")
    parser.add_argument(
        "--duplicate-policy",
        choices=SUPPORTED_DUPLICATE_POLICIES,
        help="Override UIDINDEX_DUPLICATE_POLICY for this command",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    add_demo_command(subparsers)
    add_bench_command(subparsers)
    _add_run_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the uid-index CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = _build_config(args)
        configure_logging(config.log_level)
        duplicate_policy = DuplicatePolicy.from_name(config.duplicate_policy)
        if args.command == "demo":
            return run_demo_command(duplicate_policy)
        if args.command == "bench":
            return run_bench_command(config, args, duplicate_policy)
        if args.command == "run":
            return _run_all_command(config, args, duplicate_policy)
    except UidIndexError as error:
        print(f"error={error}", file=sys.stderr)
        return 1
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_config(args: argparse.Namespace) -> UidIndexConfig:
    """Build config from env with optional CLI overrides."""
    config = UidIndexConfig.from_env()
    if args.log_level:
        config = replace(config, log_level=args.log_level)
    if args.duplicate_policy:
        config = replace(config, duplicate_policy=args.duplicate_policy)
    return config


def _run_all_command(
    config: UidIndexConfig,
    args: argparse.Namespace,
    duplicate_policy: DuplicatePolicy,
) -> int:
    """Run the demonstration followed by the benchmark."""
    demo_exit_code = run_demo_command(duplicate_policy)
    print()
    bench_exit_code = run_bench_command(config, args, duplicate_policy)
    return max(demo_exit_code, bench_exit_code)


def _add_run_command(subparsers: Any) -> None:
    """Register run subcommand."""
    parser = subparsers.add_parser("run", help="Run the demonstration, then the benchmark")
    add_bench_arguments(parser)
