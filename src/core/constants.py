"""Core constants used across uid-index modules.

This module centralizes key width and benchmark defaults.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

IDENTIFIER_LENGTH = 7
BYTE_VALUE_LIMIT = 256
DEFAULT_TOTAL_RECORDS = 100_000
DEFAULT_LOOKUP_COUNT = 10_000
DEFAULT_HIT_RATIO = 0.7
DEFAULT_PROGRESS_INTERVAL = 10_000
DEFAULT_LINEAR_SAMPLE_SIZE = 0
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_DUPLICATE_POLICY = "last-write-wins"
LOOKUP_PROGRESS_STEPS = 10
LOOKUP_PROGRESS_MIN_COUNT = 1000
LINEAR_COMPARISON_SECONDS = 0.0001
RECORD_PAYLOAD_TEMPLATE = "Record data {index}"
DEMO_RECORDS = (
    ("ABCDEFG", "Test record 1"),
    ("HIJKLMN", "Test record 2"),
    ("OPQRSTU", "Test record 3"),
)
DEMO_MISSING_KEY = "XXXXXXX"
SUPPORTED_DUPLICATE_POLICIES = ("last-write-wins", "reject", "update-in-place")
