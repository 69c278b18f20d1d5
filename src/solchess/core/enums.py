"""Core enumerations for the puzzle domain."""

from __future__ import annotations

from enum import IntEnum


class BoardState(IntEnum):
    """Outcome classification derived from piece count and legal moves."""

    NOT_STARTED = 0
    IN_PROGRESS = 1
    LOST = 2
    WON = 3

    @property
    def is_over(self) -> bool:
        return self in (BoardState.LOST, BoardState.WON)

    def __str__(self) -> str:
        return _STATE_LABELS[self]


_STATE_LABELS: dict[BoardState, str] = {
    BoardState.NOT_STARTED: "Not Started",
    BoardState.IN_PROGRESS: "In Progress",
    BoardState.LOST: "Lost",
    BoardState.WON: "Won",
}
