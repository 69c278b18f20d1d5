"""Puzzle session layer — state, selection state machine, events.

Quick start::

    from solchess.core import Location
    from solchess.game import PuzzleController

    ctrl = PuzzleController()
    ctrl.next_puzzle()
    ctrl.select(Location.parse("a1"))
"""

from solchess.game.controller import PuzzleController, PuzzleEvents
from solchess.game.interfaces import GamePhase, PuzzleSettings
from solchess.game.state import MoveRecord, PuzzleState

__all__ = [
    "GamePhase",
    "MoveRecord",
    "PuzzleController",
    "PuzzleEvents",
    "PuzzleSettings",
    "PuzzleState",
]
