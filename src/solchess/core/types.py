"""Board geometry and the :class:`Location` coordinate.

Layout (rank is stored top-down, notation counts bottom-up)::

    a4=(0,0)  b4=(1,0)  c4=(2,0)  d4=(3,0)
    a3=(0,1)  b3=(1,1)  c3=(2,1)  d3=(3,1)
    a2=(0,2)  b2=(1,2)  c2=(2,2)  d2=(3,2)
    a1=(0,3)  b1=(1,3)  c1=(2,3)  d1=(3,3)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final

from solchess.core.errors import InvalidNotationError

BOARD_SIZE: Final = 4
FILE_CHARS: Final = "abcd"


@dataclass(frozen=True, slots=True, order=True)
class Location:
    """Immutable (file, rank) coordinate on the board."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not 0 <= self.file < BOARD_SIZE:
            raise ValueError(f"file should be between 0-{BOARD_SIZE - 1}: {self.file}")
        if not 0 <= self.rank < BOARD_SIZE:
            raise ValueError(f"rank should be between 0-{BOARD_SIZE - 1}: {self.rank}")

    # ── Notation ─────────────────────────────────────────────────────────

    @property
    def file_notation(self) -> str:
        return FILE_CHARS[self.file]

    @property
    def rank_notation(self) -> str:
        return str(BOARD_SIZE - self.rank)

    @property
    def notation(self) -> str:
        """Human-readable name, e.g. (0, 3) → 'a1'."""
        return self.file_notation + self.rank_notation

    def __str__(self) -> str:
        return self.notation

    @classmethod
    def parse(cls, name: str) -> Location:
        """Parse a square name, e.g. 'b3' → Location(1, 1)."""
        if len(name) != 2:
            raise InvalidNotationError(f"Location notation is 2 chars: {name!r}")
        file_char, rank_char = name
        file = FILE_CHARS.find(file_char)
        if file < 0:
            raise InvalidNotationError(
                f"file should be between a-{FILE_CHARS[-1]}: {name!r}"
            )
        if rank_char not in "0123456789":
            raise InvalidNotationError(f"rank was not a digit: {name!r}")
        rank = int(rank_char)
        if not 1 <= rank <= BOARD_SIZE:
            raise InvalidNotationError(
                f"rank should be between 1-{BOARD_SIZE}: {name!r}"
            )
        return cls(file, BOARD_SIZE - rank)

    @staticmethod
    def all() -> Iterator[Location]:
        """Every square, file ascending outer, rank ascending inner."""
        for file in range(BOARD_SIZE):
            for rank in range(BOARD_SIZE):
                yield Location(file, rank)
