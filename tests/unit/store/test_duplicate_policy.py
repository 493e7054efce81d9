"""Unit tests for duplicate-identifier policies."""

from __future__ import annotations

import pytest

from core.errors import DuplicateIdentifierError, UidIndexConfigError
from core.types import Identifier, Record
from store.duplicate_policy import DuplicatePolicy
from store.record_store import RecordStore


def _record(payload: str) -> Record:
    return Record(identifier=Identifier.from_text("ABCDEFG"), payload=payload)


def test_default_policy_is_last_write_wins() -> None:
    """A store built without arguments should shadow duplicates."""
    assert RecordStore().duplicate_policy is DuplicatePolicy.LAST_WRITE_WINS


def test_reject_policy_raises_and_keeps_store_unchanged() -> None:
    """Reject policy should refuse duplicates without mutating state."""
    store = RecordStore(DuplicatePolicy.REJECT_DUPLICATE)
    first = _record("first")
    store.insert(first)

    with pytest.raises(DuplicateIdentifierError) as error_info:
        store.insert(_record("second"))

    assert error_info.value.identifier == first.identifier
    assert store.count() == 1
    assert store.lookup(first.identifier) is first


def test_update_in_place_replaces_slot() -> None:
    """Update-in-place should overwrite without growing the collection."""
    store = RecordStore(DuplicatePolicy.UPDATE_IN_PLACE)
    store.insert(_record("first"))
    store.insert(Record(Identifier.from_text("HIJKLMN"), "other"))
    replacement = _record("second")

    store.insert(replacement)

    assert store.count() == 2
    assert store.lookup(replacement.identifier) is replacement
    assert [record.payload for record in store] == ["second", "other"]


@pytest.mark.parametrize(
    ("name", "policy"),
    [
        ("last-write-wins", DuplicatePolicy.LAST_WRITE_WINS),
        ("reject", DuplicatePolicy.REJECT_DUPLICATE),
        (" Update-In-Place ", DuplicatePolicy.UPDATE_IN_PLACE),
    ],
)
def test_from_name_resolves_policies(name: str, policy: DuplicatePolicy) -> None:
    """Policy names should resolve case- and whitespace-insensitively."""
    assert DuplicatePolicy.from_name(name) is policy


def test_from_name_rejects_unknown_policy() -> None:
    """Unknown policy names should fail as configuration errors."""
    with pytest.raises(UidIndexConfigError):
        DuplicatePolicy.from_name("merge")
