"""Random identifier generation.

This module produces uniformly random fixed-width identifiers from an
owned, seedable random source so benchmark scenarios can be replayed.
"""

from __future__ import annotations

import random

from core.constants import IDENTIFIER_LENGTH
from core.types import Identifier


class IdentifierGenerator:
    """Draw random identifiers from an explicit random source."""

    def __init__(self, rng: random.Random) -> None:
        """Create a generator.

        Args:
            rng: Random source owned by the caller.
        """
        self._rng = rng

    @classmethod
    def from_seed(cls, seed: int | None) -> "IdentifierGenerator":
        """Create a generator with a fresh random source.

        Args:
            seed: Deterministic seed, or None to seed from OS entropy.
        """
        return cls(random.Random(seed))

    @property
    def rng(self) -> random.Random:
        """Underlying random source, shared with shuffling and sampling."""
        return self._rng

    def generate(self) -> Identifier:
        """Return one uniformly random identifier."""
        return Identifier(self._rng.randbytes(IDENTIFIER_LENGTH))

    def generate_unique(self, issued: set[Identifier]) -> Identifier:
        """Return an identifier absent from issued and record it there.

        Args:
            issued: Identifiers already handed out; updated in place.
        """
        identifier = self.generate()
        while identifier in issued:
            identifier = self.generate()
        issued.add(identifier)
        return identifier

    def generate_batch(self, count: int) -> list[Identifier]:
        """Return count distinct identifiers in generation order."""
        issued: set[Identifier] = set()
        return [self.generate_unique(issued) for _ in range(count)]
