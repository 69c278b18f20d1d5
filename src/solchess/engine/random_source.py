"""Injectable randomness for puzzle generation."""

from __future__ import annotations

import random
from typing import Protocol


class RandomRange(Protocol):
    """Narrow randomness capability used by the generator."""

    def gen_range(self, low: int, high: int) -> int:
        """Return an integer in ``[low, high)``."""
        ...


class StdRandomRange(RandomRange):
    """:class:`RandomRange` backed by a :class:`random.Random` instance."""

    __slots__ = ("_rng",)

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.SystemRandom()

    @classmethod
    def seeded(cls, seed: int) -> StdRandomRange:
        """Deterministic source for reproducible puzzles."""
        return cls(random.Random(seed))

    def gen_range(self, low: int, high: int) -> int:
        if high <= low:
            raise ValueError(f"Empty range [{low}, {high})")
        return self._rng.randrange(low, high)
