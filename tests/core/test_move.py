"""Tests for OccupiedSquare and Move."""

import pytest

from solchess.core.errors import InvalidNotationError
from solchess.core.move import Move, OccupiedSquare
from solchess.core.piece import Piece
from solchess.core.types import Location


class TestOccupiedSquare:
    def test_parse(self) -> None:
        square = OccupiedSquare.parse("Nc2")
        assert square.piece == Piece.KNIGHT
        assert square.location == Location(2, 2)
        assert square.notation == "Nc2"

    @pytest.mark.parametrize("text", ["", ".a1", "Xa1", "Ke1", "K"])
    def test_parse_invalid(self, text: str) -> None:
        with pytest.raises(InvalidNotationError):
            OccupiedSquare.parse(text)


class TestMove:
    def test_same_location_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be the same"):
            Move.parse("Ka1", "Ka1")

    def test_same_location_different_piece_rejected(self) -> None:
        with pytest.raises(ValueError):
            Move.parse("Ka1", "Pa1")

    def test_deltas(self) -> None:
        move = Move.parse("Pa1", "Rb2")
        assert move.dx == 1
        assert move.dy == -1

    def test_piece_accessors(self) -> None:
        move = Move.parse("Qa4", "Pc4")
        assert move.piece == Piece.QUEEN
        assert move.captured == Piece.PAWN

    def test_notation(self) -> None:
        assert Move.parse("Ka2", "Pa1").notation == "Kxa1"
        assert str(Move.parse("Nd1", "Kc3")) == "Nxc3"

    def test_pawn_notation_uses_origin_file(self) -> None:
        assert Move.parse("Pb3", "Qa4").notation == "bxa4"

    def test_equality_includes_pieces(self) -> None:
        assert Move.parse("Ka2", "Pa1") == Move.parse("Ka2", "Pa1")
        assert Move.parse("Ka2", "Pa1") != Move.parse("Ka2", "Ra1")
        assert len({Move.parse("Ka2", "Pa1"), Move.parse("Ka2", "Pa1")}) == 1
