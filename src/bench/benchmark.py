"""Insert and lookup benchmark driver.

This module fills a store with uniquely keyed records, then times a
shuffled mix of hit and miss lookups against the hash index. An optional
sample of the same lookups is re-run as a linear scan for contrast.
"""

from __future__ import annotations

import time

from bench.identifier_generator import IdentifierGenerator
from core.constants import (
    LINEAR_COMPARISON_SECONDS,
    LOOKUP_PROGRESS_MIN_COUNT,
    LOOKUP_PROGRESS_STEPS,
    RECORD_PAYLOAD_TEMPLATE,
)
from core.errors import BenchmarkOptionsError
from core.logging_config import get_logger
from core.types import BenchmarkOptions, BenchmarkResult, Identifier, LinearScanSample, Record
from store.record_store import RecordStore

_LOGGER = get_logger(__name__)
_MIN_ELAPSED_SECONDS = 1e-9


def run_benchmark(
    options: BenchmarkOptions,
    generator: IdentifierGenerator,
    store: RecordStore | None = None,
) -> BenchmarkResult:
    """Run one insert-then-lookup benchmark.

    Args:
        options: Benchmark sizes and lookup mix.
        generator: Seedable identifier source, also used for sampling and shuffling.
        store: Optional target store; a fresh last-write-wins store if omitted.

    Returns:
        Timing and hit statistics.

    Raises:
        BenchmarkOptionsError: If options are out of range.
    """
    validate_benchmark_options(options)
    target = store if store is not None else RecordStore()
    _LOGGER.info(
        "benchmark_started",
        total_records=options.total_records,
        lookup_count=options.lookup_count,
        hit_ratio=options.hit_ratio,
    )
    inserted, insert_seconds = _populate_store(target, generator, options)
    lookup_keys = build_lookup_keys(inserted, generator, options.lookup_count, options.hit_ratio)
    found_count, lookup_seconds = _time_lookups(target, lookup_keys)
    linear_sample = None
    if options.linear_sample_size > 0:
        linear_sample = _measure_linear_sample(
            target, lookup_keys[: options.linear_sample_size]
        )
    elapsed = max(lookup_seconds, _MIN_ELAPSED_SECONDS)
    result = BenchmarkResult(
        record_count=target.count(),
        lookup_count=options.lookup_count,
        found_count=found_count,
        not_found_count=options.lookup_count - found_count,
        insert_seconds=insert_seconds,
        lookup_seconds=lookup_seconds,
        average_lookup_microseconds=elapsed * 1_000_000 / options.lookup_count,
        lookups_per_second=options.lookup_count / elapsed,
        estimated_linear_speedup=estimate_linear_speedup(
            options.total_records, options.lookup_count, lookup_seconds
        ),
        linear_sample=linear_sample,
    )
    _LOGGER.info(
        "benchmark_completed",
        record_count=result.record_count,
        found=result.found_count,
        not_found=result.not_found_count,
        lookup_seconds=round(result.lookup_seconds, 6),
    )
    return result


def validate_benchmark_options(options: BenchmarkOptions) -> None:
    """Reject benchmark options that cannot produce a meaningful run.

    Raises:
        BenchmarkOptionsError: If any option is out of range.
    """
    if options.total_records <= 0:
        raise BenchmarkOptionsError(
            f"total_records must be positive, got {options.total_records}"
        )
    if options.lookup_count <= 0:
        raise BenchmarkOptionsError(f"lookup_count must be positive, got {options.lookup_count}")
    if not 0.0 <= options.hit_ratio <= 1.0:
        raise BenchmarkOptionsError(f"hit_ratio must be in [0, 1], got {options.hit_ratio}")
    if options.progress_interval <= 0:
        raise BenchmarkOptionsError(
            f"progress_interval must be positive, got {options.progress_interval}"
        )
    if options.linear_sample_size < 0:
        raise BenchmarkOptionsError(
            f"linear_sample_size must be non-negative, got {options.linear_sample_size}"
        )


def build_lookup_keys(
    inserted: list[Identifier],
    generator: IdentifierGenerator,
    lookup_count: int,
    hit_ratio: float,
) -> list[Identifier]:
    """Build a shuffled mix of known and fresh lookup keys.

    Args:
        inserted: Identifiers present in the store.
        generator: Source for fresh keys, sampling, and shuffling.
        lookup_count: Total number of keys to return.
        hit_ratio: Fraction of keys sampled, with replacement, from inserted.

    Returns:
        Shuffled lookup keys.
    """
    hit_count = round(lookup_count * hit_ratio) if inserted else 0
    rng = generator.rng
    keys = [rng.choice(inserted) for _ in range(hit_count)]
    keys.extend(generator.generate() for _ in range(lookup_count - hit_count))
    rng.shuffle(keys)
    return keys


def estimate_linear_speedup(total_records: int, lookup_count: int, lookup_seconds: float) -> float:
    """Estimate how much faster indexed lookup is than a linear scan.

    A linear scan is modeled as touching half the records per lookup
    at a fixed per-comparison cost.
    """
    linear_seconds = (total_records / 2.0) * lookup_count * LINEAR_COMPARISON_SECONDS
    return linear_seconds / max(lookup_seconds, _MIN_ELAPSED_SECONDS)


def _populate_store(
    store: RecordStore,
    generator: IdentifierGenerator,
    options: BenchmarkOptions,
) -> tuple[list[Identifier], float]:
    """Insert uniquely keyed records and return their identifiers and elapsed time."""
    issued: set[Identifier] = set()
    inserted: list[Identifier] = []
    started_at = time.perf_counter()
    for index in range(options.total_records):
        identifier = generator.generate_unique(issued)
        payload = RECORD_PAYLOAD_TEMPLATE.format(index=index + 1)
        store.insert(Record(identifier=identifier, payload=payload))
        inserted.append(identifier)
        if (index + 1) % options.progress_interval == 0:
            _LOGGER.info(
                "benchmark_insert_progress",
                inserted=index + 1,
                total_records=options.total_records,
            )
    insert_seconds = time.perf_counter() - started_at
    _LOGGER.info(
        "benchmark_insert_completed",
        inserted=len(inserted),
        insert_seconds=round(insert_seconds, 6),
    )
    return inserted, insert_seconds


def _time_lookups(store: RecordStore, keys: list[Identifier]) -> tuple[int, float]:
    """Time indexed lookups and return the hit count and elapsed seconds."""
    total = len(keys)
    report_every = _lookup_progress_step(total)
    found_count = 0
    started_at = time.perf_counter()
    for position, identifier in enumerate(keys, start=1):
        if store.lookup(identifier) is not None:
            found_count += 1
        if report_every and position % report_every == 0:
            _LOGGER.debug("benchmark_lookup_progress", completed=position, total=total)
    elapsed = time.perf_counter() - started_at
    _LOGGER.info(
        "benchmark_lookup_completed",
        lookups=total,
        found=found_count,
        lookup_seconds=round(elapsed, 6),
    )
    return found_count, elapsed


def _lookup_progress_step(total: int) -> int:
    """Return the lookup interval between progress events, 0 for none."""
    if total <= LOOKUP_PROGRESS_MIN_COUNT:
        return 0
    return max(1, total // LOOKUP_PROGRESS_STEPS)


def _measure_linear_sample(store: RecordStore, keys: list[Identifier]) -> LinearScanSample:
    """Time the same lookups as a newest-first linear scan."""
    started_at = time.perf_counter()
    for identifier in keys:
        store.linear_scan(identifier)
    elapsed = time.perf_counter() - started_at
    sample_size = len(keys)
    average = elapsed * 1_000_000 / sample_size if sample_size else 0.0
    _LOGGER.info(
        "benchmark_linear_sample_completed",
        lookups=sample_size,
        elapsed_seconds=round(elapsed, 6),
    )
    return LinearScanSample(
        lookups=sample_size,
        elapsed_seconds=elapsed,
        average_microseconds=average,
    )
