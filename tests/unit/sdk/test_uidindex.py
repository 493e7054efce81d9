"""Unit tests for the public SDK surface."""

from __future__ import annotations

import pytest

import uidindex


def test_sdk_exposes_core_operations() -> None:
    """The SDK module should support the full insert and lookup cycle."""
    store = uidindex.RecordStore()
    identifier = uidindex.Identifier.from_bytes(b"ABCDEFG")

    store.insert(uidindex.make_record(identifier, b"payload"))

    record = store.lookup(identifier)
    assert record is not None and record.payload == b"payload"
    assert store.count() == 1
    store.clear()
    assert store.count() == 0


def test_sdk_reexports_error_types() -> None:
    """Key validation failures should be importable from the SDK."""
    with pytest.raises(uidindex.InvalidKeyLength):
        uidindex.make_identifier(b"12345678")
