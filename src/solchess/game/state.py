"""Puzzle state — the working board, its starting point and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from solchess.core.board import Board
from solchess.core.enums import BoardState
from solchess.core.move import Move
from solchess.core.types import Location


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    move: Move
    notation: str
    board_id_after: int


@dataclass
class PuzzleState:
    """Tracks one puzzle: the original board (for reset) and the board in play.

    This is a pure data/logic class — no UI, no randomness.
    """

    original_board: Board = field(default_factory=Board, init=False)
    board: Board = field(default_factory=Board, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board) -> None:
        """Start (or restart) play on a copy of *board*."""
        self.original_board = board.copy()
        self.board = board.copy()
        self.move_history.clear()

    def reset(self) -> None:
        """Return to the original board."""
        self.board = self.original_board.copy()
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, move: Move) -> MoveRecord | None:
        """Apply *move*; returns ``None`` if the board rejected it."""
        if not self.board.make_move(move):
            return None
        record = MoveRecord(
            move=move,
            notation=move.notation,
            board_id_after=self.board.id(),
        )
        self.move_history.append(record)
        return record

    def undo_last_move(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self.move_history:
            return None

        record = self.move_history.pop()
        if self.move_history:
            self.board = Board.from_id(self.move_history[-1].board_id_after)
        else:
            self.board = self.original_board.copy()
        return record.move

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def board_state(self) -> BoardState:
        return self.board.game_state

    @property
    def is_game_over(self) -> bool:
        return self.board.game_state.is_over

    @property
    def move_count(self) -> int:
        return len(self.move_history)

    def legal_moves(self) -> frozenset[Move]:
        return self.board.legal_moves()

    def targets_from(self, location: Location) -> dict[Location, Move]:
        """Legal captures for the piece on *location*, keyed by target square."""
        return {
            move.to_sq.location: move
            for move in self.board.legal_moves()
            if move.from_sq.location == location
        }
