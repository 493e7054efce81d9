"""In-memory indexed record store.

This module keeps records in insertion order and maintains a hash
index from identifier to slot position for constant-time lookup.
Positions are list indices, so collection growth never invalidates
index entries.
"""

from __future__ import annotations

from typing import Iterator

from core.types import Identifier, Record
from store.duplicate_policy import DuplicatePolicy


class RecordStore:
    """Ordered record collection with an exact-match identifier index."""

    def __init__(self, duplicate_policy: DuplicatePolicy = DuplicatePolicy.LAST_WRITE_WINS) -> None:
        """Create an empty store.

        Args:
            duplicate_policy: Placement behavior for already indexed identifiers.
        """
        self._duplicate_policy = duplicate_policy
        self._place = duplicate_policy.placement()
        self._slots: list[Record] = []
        self._index: dict[Identifier, int] = {}

    @property
    def duplicate_policy(self) -> DuplicatePolicy:
        """Active duplicate-key policy."""
        return self._duplicate_policy

    def insert(self, record: Record) -> None:
        """Insert one record according to the duplicate policy.

        Args:
            record: Record to store.

        Raises:
            DuplicateIdentifierError: Only under the reject policy.
        """
        if not isinstance(record, Record):
            raise TypeError(f"Expected Record, got {type(record).__name__}")
        self._place(self._slots, self._index, record)

    def lookup(self, identifier: Identifier) -> Record | None:
        """Return the indexed record for an identifier.

        Args:
            identifier: Exact key to resolve.

        Returns:
            Currently indexed record, or None when the key is absent.
        """
        position = self._index.get(identifier)
        if position is None:
            return None
        return self._slots[position]

    def count(self) -> int:
        """Return records physically held, including shadowed duplicates."""
        return len(self._slots)

    def indexed_count(self) -> int:
        """Return the number of distinct indexed identifiers."""
        return len(self._index)

    def clear(self) -> None:
        """Drop every record and index entry."""
        self._slots = []
        self._index = {}

    def records(self) -> tuple[Record, ...]:
        """Return a snapshot of all records in insertion order."""
        return tuple(self._slots)

    def linear_scan(self, identifier: Identifier) -> Record | None:
        """Resolve an identifier by scanning slots newest first.

        This is the O(n) baseline the index replaces. It returns the
        same record as lookup under the last-write-wins policy.
        """
        for record in reversed(self._slots):
            if record.identifier == identifier:
                return record
        return None

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[Record]:
        return iter(tuple(self._slots))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._index
