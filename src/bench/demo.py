"""Three-record demonstration scenario."""

from __future__ import annotations

from core.constants import DEMO_MISSING_KEY, DEMO_RECORDS
from core.logging_config import get_logger
from core.types import DemonstrationResult, Identifier, Record
from store.record_store import RecordStore

_LOGGER = get_logger(__name__)


def run_demonstration(store: RecordStore | None = None) -> DemonstrationResult:
    """Insert the demo records, then resolve one known and one unknown key.

    Args:
        store: Optional target store; a fresh store if omitted.

    Returns:
        Demonstration outcome.
    """
    target = store if store is not None else RecordStore()
    for key_text, payload in DEMO_RECORDS:
        target.insert(Record(identifier=Identifier.from_text(key_text), payload=payload))
    first_key = Identifier.from_text(DEMO_RECORDS[0][0])
    missing_key = Identifier.from_text(DEMO_MISSING_KEY)
    found = target.lookup(first_key)
    missing_found = target.lookup(missing_key) is not None
    _LOGGER.info(
        "demonstration_completed",
        found=found is not None,
        missing_found=missing_found,
        record_count=target.count(),
    )
    return DemonstrationResult(
        found=found,
        missing_key=missing_key,
        missing_found=missing_found,
        record_count=target.count(),
    )
