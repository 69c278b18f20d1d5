"""Exhaustive solver: every capture sequence that leaves a single piece."""

from __future__ import annotations

from solchess.core.board import Board
from solchess.core.enums import BoardState
from solchess.core.move import Move

Solution = list[Move]


class Solver:
    """Depth-first enumeration of all winning move sequences.

    Each branch works on its own copy of the board, so the caller's board is
    never mutated.  Positions reached through different move orders are not
    merged; every ordering counts as a separate solution.
    """

    __slots__ = ("_nodes",)

    def __init__(self) -> None:
        self._nodes = 0

    @property
    def nodes(self) -> int:
        """Positions visited by the most recent :meth:`solve` call."""
        return self._nodes

    def solve(self, board: Board) -> list[Solution]:
        self._nodes = 0
        return self._solve(board, [])

    def _solve(self, board: Board, moves: Solution) -> list[Solution]:
        self._nodes += 1
        state = board.game_state
        if state == BoardState.WON:
            return [moves]
        if state != BoardState.IN_PROGRESS:
            return []

        solutions: list[Solution] = []
        for move in board.legal_moves():
            child = board.copy()
            child.make_move(move)
            solutions.extend(self._solve(child, [*moves, move]))
        return solutions


def solve(board: Board) -> list[Solution]:
    """Shortcut for ``Solver().solve(board)``."""
    return Solver().solve(board)
