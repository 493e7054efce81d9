"""Runtime configuration model for uid-index.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os

from core.constants import (
    DEFAULT_DUPLICATE_POLICY,
    DEFAULT_HIT_RATIO,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOOKUP_COUNT,
    DEFAULT_PROGRESS_INTERVAL,
    DEFAULT_TOTAL_RECORDS,
    SUPPORTED_DUPLICATE_POLICIES,
)
from core.errors import UidIndexConfigError


@dataclass(frozen=True)
class UidIndexConfig:
    """Validated runtime configuration.

    Attributes:
        random_seed: Seed for identifier generation, None for OS entropy.
        total_records: Default benchmark insert count.
        lookup_count: Default benchmark lookup count.
        hit_ratio: Default fraction of lookups targeting inserted keys.
        progress_interval: Insert count between progress events.
        duplicate_policy: Store duplicate-key policy name.
        log_level: Minimum structured log level.
    """

    random_seed: int | None
    total_records: int
    lookup_count: int
    hit_ratio: float
    progress_interval: int
    duplicate_policy: str
    log_level: str

    @classmethod
    def from_env(cls) -> "UidIndexConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            UidIndexConfigError: If environment values are invalid.
        """
        seed_value = os.getenv("UIDINDEX_RANDOM_SEED", "").strip()
        return cls(
            random_seed=_parse_int("UIDINDEX_RANDOM_SEED", seed_value) if seed_value else None,
            total_records=_parse_int(
                "UIDINDEX_TOTAL_RECORDS",
                os.getenv("UIDINDEX_TOTAL_RECORDS", str(DEFAULT_TOTAL_RECORDS)),
            ),
            lookup_count=_parse_int(
                "UIDINDEX_LOOKUP_COUNT",
                os.getenv("UIDINDEX_LOOKUP_COUNT", str(DEFAULT_LOOKUP_COUNT)),
            ),
            hit_ratio=_parse_ratio(os.getenv("UIDINDEX_HIT_RATIO", str(DEFAULT_HIT_RATIO))),
            progress_interval=_parse_int(
                "UIDINDEX_PROGRESS_INTERVAL",
                os.getenv("UIDINDEX_PROGRESS_INTERVAL", str(DEFAULT_PROGRESS_INTERVAL)),
            ),
            duplicate_policy=_parse_duplicate_policy(
                os.getenv("UIDINDEX_DUPLICATE_POLICY", DEFAULT_DUPLICATE_POLICY)
            ),
            log_level=os.getenv("UIDINDEX_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )


def _parse_int(variable: str, raw_value: str) -> int:
    """Parse an integer environment value.

    Args:
        variable: Environment variable name, used in the error message.
        raw_value: Raw string from environment.

    Returns:
        Parsed integer.

    Raises:
        UidIndexConfigError: If value cannot be parsed into int.
    """
    try:
        return int(raw_value)
    except ValueError as error:
        raise UidIndexConfigError(
            f"Invalid {variable} value: "
            f"expected integer, got '{raw_value}'. "
            f"Set {variable} to a numeric value."
        ) from error


def _parse_ratio(raw_value: str) -> float:
    """Parse the hit ratio environment value into [0, 1]."""
    try:
        ratio = float(raw_value)
    except ValueError as error:
        raise UidIndexConfigError(
            f"Invalid UIDINDEX_HIT_RATIO value: expected number, got '{raw_value}'."
        ) from error
    if not 0.0 <= ratio <= 1.0:
        raise UidIndexConfigError(
            f"Invalid UIDINDEX_HIT_RATIO value: expected a value in [0, 1], got {ratio}."
        )
    return ratio


def _parse_duplicate_policy(raw_value: str) -> str:
    """Validate the duplicate policy name."""
    policy = raw_value.strip().lower()
    if policy not in SUPPORTED_DUPLICATE_POLICIES:
        supported = ", ".join(SUPPORTED_DUPLICATE_POLICIES)
        raise UidIndexConfigError(
            f"Invalid UIDINDEX_DUPLICATE_POLICY value: '{raw_value}'. Expected one of: {supported}."
        )
    return policy
