"""uid-index exception hierarchy.

This module defines the errors raised by key validation, the store,
configuration parsing, and the benchmark driver.
"""

from __future__ import annotations


class UidIndexError(Exception):
    """Base exception for all uid-index failures."""


class UidIndexConfigError(UidIndexError):
    """Raised for invalid runtime configuration."""


class InvalidKeyLength(UidIndexError, ValueError):
    """Raised when identifier bytes do not have the fixed key width.

    Attributes:
        length: Observed byte length.
        expected: Required byte length.
    """

    def __init__(self, length: int, expected: int) -> None:
        super().__init__(f"Identifier must be exactly {expected} bytes, got {length}")
        self.length = length
        self.expected = expected


class UidIndexStoreError(UidIndexError):
    """Raised for indexed store failures."""


class DuplicateIdentifierError(UidIndexStoreError):
    """Raised when a duplicate identifier is rejected by store policy."""

    def __init__(self, identifier: object) -> None:
        super().__init__(f"Identifier already indexed: {identifier}")
        self.identifier = identifier


class BenchmarkOptionsError(UidIndexError):
    """Raised for invalid benchmark parameters."""
