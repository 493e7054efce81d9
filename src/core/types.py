"""Shared typed models.

This module defines immutable data models used by the store, the
benchmark driver, and the CLI to keep interfaces explicit and stable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from core.constants import (
    DEFAULT_HIT_RATIO,
    DEFAULT_LINEAR_SAMPLE_SIZE,
    DEFAULT_LOOKUP_COUNT,
    DEFAULT_PROGRESS_INTERVAL,
    DEFAULT_TOTAL_RECORDS,
    IDENTIFIER_LENGTH,
)
from core.errors import InvalidKeyLength

Payload = Union[bytes, str]


@dataclass(frozen=True)
class Identifier:
    """Fixed-width opaque record key.

    Equality and hashing are byte-exact. Any byte value is allowed,
    including zero; the value is not required to be valid text.

    Attributes:
        value: Exactly seven raw bytes.
    """

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            raise TypeError(f"Identifier value must be bytes, got {type(self.value).__name__}")
        if len(self.value) != IDENTIFIER_LENGTH:
            raise InvalidKeyLength(len(self.value), IDENTIFIER_LENGTH)

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> "Identifier":
        """Build an identifier from raw bytes.

        Args:
            data: Candidate key bytes.

        Returns:
            Validated identifier holding an immutable copy of the bytes.

        Raises:
            InvalidKeyLength: If data is not exactly seven bytes long.
            TypeError: If data is not a bytes-like object.
        """
        if isinstance(data, (bytearray, memoryview)):
            data = bytes(data)
        return cls(data)

    @classmethod
    def from_text(cls, text: str) -> "Identifier":
        """Build an identifier from the UTF-8 encoding of text.

        Raises:
            InvalidKeyLength: If the encoded text is not seven bytes long.
        """
        return cls(text.encode("utf-8"))

    def hex(self) -> str:
        """Render the key as lowercase hex for logs and reports."""
        return self.value.hex()

    def __bytes__(self) -> bytes:
        return self.value

    def __str__(self) -> str:
        return self.hex()


@dataclass(frozen=True)
class Record:
    """Immutable identifier and payload pair.

    Attributes:
        identifier: Record key, fixed for the life of the record.
        payload: Arbitrary text or byte blob, stored as given.
    """

    identifier: Identifier
    payload: Payload

    def __post_init__(self) -> None:
        if not isinstance(self.identifier, Identifier):
            raise TypeError(
                f"Record identifier must be an Identifier, got {type(self.identifier).__name__}"
            )


def make_identifier(data: bytes | bytearray | memoryview) -> Identifier:
    """Validate raw bytes into an identifier.

    Args:
        data: Candidate key bytes.

    Returns:
        Validated identifier.

    Raises:
        InvalidKeyLength: If data is not exactly seven bytes long.
    """
    return Identifier.from_bytes(data)


def make_record(identifier: Identifier, payload: Payload) -> Record:
    """Build a record from a validated identifier and payload."""
    return Record(identifier=identifier, payload=payload)


@dataclass(frozen=True)
class BenchmarkOptions:
    """Benchmark driver options.

    Attributes:
        total_records: Number of distinct records to insert.
        lookup_count: Number of lookups to time.
        hit_ratio: Fraction of lookups drawn from inserted identifiers.
        progress_interval: Insert count between progress events.
        linear_sample_size: Lookups re-run through a linear scan for contrast.
    """

    total_records: int = DEFAULT_TOTAL_RECORDS
    lookup_count: int = DEFAULT_LOOKUP_COUNT
    hit_ratio: float = DEFAULT_HIT_RATIO
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    linear_sample_size: int = DEFAULT_LINEAR_SAMPLE_SIZE


@dataclass(frozen=True)
class LinearScanSample:
    """Measured linear-scan timings over a lookup sample.

    Attributes:
        lookups: Number of sampled lookups.
        elapsed_seconds: Total scan time for the sample.
        average_microseconds: Mean scan time per lookup.
    """

    lookups: int
    elapsed_seconds: float
    average_microseconds: float


@dataclass(frozen=True)
class BenchmarkResult:
    """Benchmark statistics.

    Attributes:
        record_count: Records physically held after inserts.
        lookup_count: Number of timed lookups.
        found_count: Lookups that returned a record.
        not_found_count: Lookups that returned nothing.
        insert_seconds: Wall-clock time for generation and inserts.
        lookup_seconds: Wall-clock time for the timed lookups.
        average_lookup_microseconds: Mean indexed lookup time.
        lookups_per_second: Indexed lookup throughput.
        estimated_linear_speedup: Estimated speedup over a linear scan.
        linear_sample: Optional measured linear-scan sample.
    """

    record_count: int
    lookup_count: int
    found_count: int
    not_found_count: int
    insert_seconds: float
    lookup_seconds: float
    average_lookup_microseconds: float
    lookups_per_second: float
    estimated_linear_speedup: float
    linear_sample: LinearScanSample | None = None


@dataclass(frozen=True)
class DemonstrationResult:
    """Outcome of the three-record demonstration scenario.

    Attributes:
        found: Record returned for the first demo key, if any.
        missing_key: Key looked up that was never inserted.
        missing_found: Whether the missing key unexpectedly resolved.
        record_count: Records held by the demo store.
    """

    found: Record | None
    missing_key: Identifier
    missing_found: bool
    record_count: int
