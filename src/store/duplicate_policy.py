"""Duplicate-identifier placement policies.

This module decides where a record lands when its identifier is
already indexed. The store delegates every insert to one policy.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from core.errors import DuplicateIdentifierError, UidIndexConfigError
from core.types import Identifier, Record

PlacementFn = Callable[[list[Record], dict[Identifier, int], Record], int]


class DuplicatePolicy(str, Enum):
    """Named duplicate-key behaviors."""

    LAST_WRITE_WINS = "last-write-wins"
    REJECT_DUPLICATE = "reject"
    UPDATE_IN_PLACE = "update-in-place"

    @classmethod
    def from_name(cls, name: str) -> "DuplicatePolicy":
        """Resolve a policy from its configuration name.

        Raises:
            UidIndexConfigError: If the name is not a known policy.
        """
        try:
            return cls(name.strip().lower())
        except ValueError as error:
            supported = ", ".join(policy.value for policy in cls)
            raise UidIndexConfigError(
                f"Unknown duplicate policy '{name}'. Expected one of: {supported}."
            ) from error

    def placement(self) -> PlacementFn:
        """Return the slot placement function for this policy."""
        return _PLACEMENTS[self]


def place_last_write_wins(
    slots: list[Record],
    index: dict[Identifier, int],
    record: Record,
) -> int:
    """Append the record and repoint its index entry.

    A previously indexed record with the same identifier stays in the
    collection as an orphan: still iterable, no longer indexed.

    Returns:
        Slot position of the inserted record.
    """
    slots.append(record)
    position = len(slots) - 1
    index[record.identifier] = position
    return position


def place_reject_duplicate(
    slots: list[Record],
    index: dict[Identifier, int],
    record: Record,
) -> int:
    """Append the record unless its identifier is already indexed.

    Raises:
        DuplicateIdentifierError: If the identifier is already indexed.
    """
    if record.identifier in index:
        raise DuplicateIdentifierError(record.identifier)
    return place_last_write_wins(slots, index, record)


def place_update_in_place(
    slots: list[Record],
    index: dict[Identifier, int],
    record: Record,
) -> int:
    """Overwrite the indexed slot for a known identifier, else append."""
    position = index.get(record.identifier)
    if position is None:
        return place_last_write_wins(slots, index, record)
    slots[position] = record
    return position


_PLACEMENTS: dict[DuplicatePolicy, PlacementFn] = {
    DuplicatePolicy.LAST_WRITE_WINS: place_last_write_wins,
    DuplicatePolicy.REJECT_DUPLICATE: place_reject_duplicate,
    DuplicatePolicy.UPDATE_IN_PLACE: place_update_in_place,
}
