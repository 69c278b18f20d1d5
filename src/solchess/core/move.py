"""Occupied-square snapshots and the capture :class:`Move` value object."""

from __future__ import annotations

from dataclasses import dataclass

from solchess.core.errors import InvalidNotationError
from solchess.core.piece import Piece
from solchess.core.types import Location


@dataclass(frozen=True, slots=True)
class OccupiedSquare:
    """A piece standing on a location, captured at a point in time."""

    location: Location
    piece: Piece

    @property
    def notation(self) -> str:
        """Piece letter plus square name, e.g. 'Ka1'."""
        return f"{self.piece}{self.location}"

    def __str__(self) -> str:
        return self.notation

    @classmethod
    def parse(cls, text: str) -> OccupiedSquare:
        """Parse e.g. 'Nc2'. Empty squares ('.') are not representable."""
        if not text:
            raise InvalidNotationError("Empty square notation")
        if text[0] == ".":
            raise InvalidNotationError(f"Square is not occupied: {text!r}")
        return cls(Location.parse(text[1:]), Piece.from_char(text[0]))


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable capture of ``to_sq`` by the piece on ``from_sq``.

    A move describes one specific board state; replaying it against a
    different board is the caller's responsibility.
    """

    from_sq: OccupiedSquare
    to_sq: OccupiedSquare

    def __post_init__(self) -> None:
        if self.from_sq.location == self.to_sq.location:
            raise ValueError(
                f"from/to location must not be the same: {self.from_sq.location}"
            )

    # ── Geometry ─────────────────────────────────────────────────────────

    @property
    def dx(self) -> int:
        """Signed file delta (positive towards the d-file)."""
        return self.to_sq.location.file - self.from_sq.location.file

    @property
    def dy(self) -> int:
        """Signed rank delta (negative towards the top row)."""
        return self.to_sq.location.rank - self.from_sq.location.rank

    @property
    def piece(self) -> Piece:
        return self.from_sq.piece

    @property
    def captured(self) -> Piece:
        return self.to_sq.piece

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def notation(self) -> str:
        """Capture notation; pawns are qualified by their origin file, e.g. 'bxa4'."""
        if self.from_sq.piece == Piece.PAWN:
            qualifier = self.from_sq.location.file_notation
        else:
            qualifier = self.from_sq.piece.notation
        return f"{qualifier}x{self.to_sq.location}"

    def __str__(self) -> str:
        return self.notation

    @classmethod
    def parse(cls, from_text: str, to_text: str) -> Move:
        """Build a move from two occupied squares, e.g. ``Move.parse("Ka2", "Pa1")``."""
        return cls(OccupiedSquare.parse(from_text), OccupiedSquare.parse(to_text))
