"""Public SDK surface for uid-index.

This module provides a stable import path for library users.
It re-exports the store, the identifier model, and the drivers.
"""

from __future__ import annotations

from bench.benchmark import run_benchmark
from bench.demo import run_demonstration
from bench.identifier_generator import IdentifierGenerator
from core.config import UidIndexConfig
from core.errors import (
    BenchmarkOptionsError,
    DuplicateIdentifierError,
    InvalidKeyLength,
    UidIndexError,
)
from core.types import (
    BenchmarkOptions,
    BenchmarkResult,
    Identifier,
    Record,
    make_identifier,
    make_record,
)
from store.duplicate_policy import DuplicatePolicy
from store.record_store import RecordStore

__all__ = [
    "BenchmarkOptions",
    "BenchmarkOptionsError",
    "BenchmarkResult",
    "DuplicateIdentifierError",
    "DuplicatePolicy",
    "Identifier",
    "IdentifierGenerator",
    "InvalidKeyLength",
    "Record",
    "RecordStore",
    "UidIndexConfig",
    "UidIndexError",
    "make_identifier",
    "make_record",
    "run_benchmark",
    "run_demonstration",
]
