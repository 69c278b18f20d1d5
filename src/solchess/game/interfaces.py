"""Shared types for the puzzle session layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

# ── Session phase FSM states ─────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a puzzle session."""

    NOT_STARTED = auto()
    SELECT_SOURCE = auto()
    SELECT_TARGET = auto()
    GAME_OVER = auto()


# ── Settings ─────────────────────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class PuzzleSettings:
    """Difficulty used when the session generates its next puzzle."""

    num_pieces: int = 6
    num_solutions: int = 100
