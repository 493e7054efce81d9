"""Unit tests for the benchmark driver."""

from __future__ import annotations

import pytest

from bench.benchmark import build_lookup_keys, estimate_linear_speedup, run_benchmark
from bench.identifier_generator import IdentifierGenerator
from core.errors import BenchmarkOptionsError
from core.types import BenchmarkOptions
from store.record_store import RecordStore


def test_run_benchmark_counts_hits_and_misses() -> None:
    """A 70% hit mix should find exactly the sampled known keys."""
    options = BenchmarkOptions(total_records=1000, lookup_count=200, hit_ratio=0.7)

    result = run_benchmark(options, IdentifierGenerator.from_seed(11))

    assert result.record_count == 1000
    assert result.found_count == 140
    assert result.not_found_count == 60
    assert result.lookups_per_second > 0


def test_run_benchmark_fills_supplied_store() -> None:
    """Records should land in the caller's store with numbered payloads."""
    store = RecordStore()
    options = BenchmarkOptions(total_records=10, lookup_count=5, progress_interval=5)

    run_benchmark(options, IdentifierGenerator.from_seed(2), store)

    payloads = [record.payload for record in store]
    assert payloads[0] == "Record data 1"
    assert payloads[-1] == "Record data 10"
    assert store.indexed_count() == 10


def test_run_benchmark_is_reproducible_with_seed() -> None:
    """Equal seeds should yield equal hit counts."""
    options = BenchmarkOptions(total_records=500, lookup_count=300, hit_ratio=0.4)

    first = run_benchmark(options, IdentifierGenerator.from_seed(9))
    second = run_benchmark(options, IdentifierGenerator.from_seed(9))

    assert first.found_count == second.found_count == 120


def test_run_benchmark_measures_linear_sample() -> None:
    """A positive linear sample size should produce a scan measurement."""
    options = BenchmarkOptions(total_records=200, lookup_count=50, linear_sample_size=10)

    result = run_benchmark(options, IdentifierGenerator.from_seed(4))

    assert result.linear_sample is not None
    assert result.linear_sample.lookups == 10


@pytest.mark.parametrize(
    "options",
    [
        BenchmarkOptions(total_records=0),
        BenchmarkOptions(lookup_count=-1),
        BenchmarkOptions(hit_ratio=1.2),
        BenchmarkOptions(progress_interval=0),
        BenchmarkOptions(linear_sample_size=-5),
    ],
)
def test_run_benchmark_rejects_invalid_options(options: BenchmarkOptions) -> None:
    """Out-of-range options should fail before any work is done."""
    store = RecordStore()

    with pytest.raises(BenchmarkOptionsError):
        run_benchmark(options, IdentifierGenerator.from_seed(1), store)

    assert store.count() == 0


def test_build_lookup_keys_mixes_known_and_fresh() -> None:
    """Lookup keys should contain the requested share of known keys."""
    generator = IdentifierGenerator.from_seed(8)
    inserted = generator.generate_batch(100)

    keys = build_lookup_keys(inserted, generator, 40, 0.25)

    known = set(inserted)
    assert len(keys) == 40
    assert sum(1 for key in keys if key in known) == 10


def test_build_lookup_keys_all_misses_without_inserted() -> None:
    """An empty insert set should yield only fresh keys."""
    keys = build_lookup_keys([], IdentifierGenerator.from_seed(8), 5, 1.0)

    assert len(keys) == 5


def test_estimate_linear_speedup_scales_with_store_size() -> None:
    """Estimated speedup should grow with the number of records."""
    small = estimate_linear_speedup(1000, 100, 0.01)
    large = estimate_linear_speedup(100_000, 100, 0.01)

    assert large == pytest.approx(small * 100)
