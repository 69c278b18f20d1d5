"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from solchess.core.board import Board
from solchess.core.move import OccupiedSquare

# Q . P .
# . P K .
# K R . B
# P . B N
FIXTURE_A = ("Qa4", "Ka2", "Pa1", "Pb3", "Rb2", "Pc4", "Kc3", "Bc1", "Bd2", "Nd1")

# . R . .
# R . . P
# B . B N
# P . N .
SOLVABLE = ("Pa1", "Ba2", "Ra3", "Rb4", "Nc1", "Bc2", "Nd2", "Pd3")


def _place(board: Board, *squares: str) -> Board:
    """Set each occupied-square notation (e.g. 'Ka1') on *board*."""
    for text in squares:
        square = OccupiedSquare.parse(text)
        board.set(square.location, square.piece)
    return board


@pytest.fixture
def fixture_a_board() -> Board:
    return _place(Board(), *FIXTURE_A)


@pytest.fixture
def solvable_board() -> Board:
    return _place(Board(), *SOLVABLE)


@pytest.fixture
def unsolvable_board() -> Board:
    return _place(Board(), *(sq for sq in SOLVABLE if sq != "Pd3"))
