"""Piece kinds.

Each member's integer value is the 3-bit code used by :meth:`Board.id`.
"""

from __future__ import annotations

from enum import IntEnum

from solchess.core.errors import InvalidNotationError


class Piece(IntEnum):
    """The six piece kinds of the capture-only variant."""

    KING = 1
    QUEEN = 2
    ROOK = 3
    BISHOP = 4
    KNIGHT = 5
    PAWN = 6

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        return _NOTATION[self]

    @property
    def notation(self) -> str:
        """Single-letter notation, e.g. 'N'."""
        return _NOTATION[self]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♘."""
        return _UNICODE[self]

    @classmethod
    def from_char(cls, text: str) -> Piece:
        """Parse a piece letter ('N') or its English name ('Knight')."""
        try:
            return _CHAR_MAP[text]
        except KeyError:
            raise InvalidNotationError(f"Invalid piece: {text!r}") from None


_NOTATION: dict[Piece, str] = {
    Piece.KING: "K",
    Piece.QUEEN: "Q",
    Piece.ROOK: "R",
    Piece.BISHOP: "B",
    Piece.KNIGHT: "N",
    Piece.PAWN: "P",
}

_UNICODE: dict[Piece, str] = {
    Piece.KING: "♔",
    Piece.QUEEN: "♕",
    Piece.ROOK: "♖",
    Piece.BISHOP: "♗",
    Piece.KNIGHT: "♘",
    Piece.PAWN: "♙",
}

_CHAR_MAP: dict[str, Piece] = {
    **{letter: piece for piece, letter in _NOTATION.items()},
    **{piece.name.capitalize(): piece for piece in Piece},
}
