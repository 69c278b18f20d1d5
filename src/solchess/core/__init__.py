"""Core domain layer — pure puzzle logic with zero external dependencies.

Quick start::

    from solchess.core import Board

    board = Board.from_string("Q.P..PK.KR.BP.BN")
    for move in board.legal_moves():
        print(move)
"""

from solchess.core.board import Board
from solchess.core.enums import BoardState
from solchess.core.errors import InvalidBoardError, InvalidNotationError
from solchess.core.move import Move, OccupiedSquare
from solchess.core.piece import Piece
from solchess.core.types import BOARD_SIZE, FILE_CHARS, Location

__all__ = [
    # Enums / errors
    "BoardState",
    "InvalidBoardError",
    "InvalidNotationError",
    # Geometry
    "BOARD_SIZE",
    "FILE_CHARS",
    "Location",
    # Domain objects
    "Board",
    "Move",
    "OccupiedSquare",
    "Piece",
]
