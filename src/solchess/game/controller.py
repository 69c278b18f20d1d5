"""PuzzleController — drives one puzzle session without any rendering.

Coordinates: PuzzleState, Solver, PuzzleGenerator.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from solchess.core.board import Board
from solchess.core.enums import BoardState
from solchess.core.move import Move
from solchess.core.types import Location
from solchess.engine.generator import PuzzleGenerator
from solchess.engine.random_source import RandomRange, StdRandomRange
from solchess.engine.solver import Solver
from solchess.game.interfaces import GamePhase, PuzzleSettings
from solchess.game.state import MoveRecord, PuzzleState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, PuzzleState], None]
GameOverCallback = Callable[[BoardState], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class PuzzleEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class PuzzleController:
    """Turns square selections into moves, tracks game over, resets and
    fetches new puzzles.

    A move is made in two clicks: first the capturing piece, then the piece
    to capture.
    """

    __slots__ = (
        "_state",
        "_phase",
        "_selected",
        "_targets",
        "_last_target",
        "_settings",
        "_generator",
        "_rng",
        "events",
    )

    def __init__(
        self,
        settings: PuzzleSettings | None = None,
        generator: PuzzleGenerator | None = None,
        rng: RandomRange | None = None,
    ) -> None:
        self._state = PuzzleState()
        self._phase = GamePhase.NOT_STARTED
        self._selected: Location | None = None
        self._targets: dict[Location, Move] = {}
        self._last_target: Location | None = None
        self._settings = settings or PuzzleSettings()
        self._generator = generator or PuzzleGenerator()
        self._rng = rng or StdRandomRange()
        self.events = PuzzleEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> PuzzleState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def selected(self) -> Location | None:
        """Square of the piece chosen to capture, if any."""
        return self._selected

    @property
    def targets(self) -> frozenset[Location]:
        """Squares the selected piece may capture."""
        return frozenset(self._targets)

    @property
    def last_target(self) -> Location | None:
        """Square where the previous capture landed."""
        return self._last_target

    # ── Session lifecycle ────────────────────────────────────────────────

    def load(self, board: Board) -> None:
        """Start playing *board*."""
        _LOGGER.debug("Loading puzzle %s", board.to_string())
        self._state.setup(board)
        self._start_play()

    def next_puzzle(self) -> bool:
        """Generate and load a new puzzle; ``False`` if generation gave up."""
        stats = self._generator.generate(
            self._settings.num_pieces,
            self._settings.num_solutions,
            self._rng,
        )
        if stats.board is None:
            return False
        self.load(stats.board)
        return True

    def reset(self) -> None:
        """Restart the current puzzle from its original board."""
        if self._phase == GamePhase.NOT_STARTED:
            return
        self._state.reset()
        self._start_play()

    def undo(self) -> bool:
        if self._phase == GamePhase.NOT_STARTED:
            return False
        if self._state.undo_last_move() is None:
            return False
        self._clear_selection()
        self._last_target = None
        self._set_phase(GamePhase.SELECT_SOURCE)
        return True

    # ── Input handling ───────────────────────────────────────────────────

    def select(self, location: Location) -> bool:
        """Handle a click on *location*. Returns ``True`` if a move was made."""
        if self._phase == GamePhase.SELECT_SOURCE:
            self._select_source(location)
            return False
        if self._phase == GamePhase.SELECT_TARGET:
            return self._select_target(location)
        return False

    def solution(self) -> list[Move] | None:
        """First solution from the current board, or ``None`` if it is lost."""
        solutions = Solver().solve(self._state.board)
        return solutions[0] if solutions else None

    # ── Internal helpers ─────────────────────────────────────────────────

    def _start_play(self) -> None:
        self._clear_selection()
        self._last_target = None
        if self._state.is_game_over:
            self._set_phase(GamePhase.GAME_OVER)
        else:
            self._set_phase(GamePhase.SELECT_SOURCE)

    def _select_source(self, location: Location) -> None:
        if self._state.board.is_empty(location):
            return
        self._selected = location
        self._targets = self._state.targets_from(location)
        self._set_phase(GamePhase.SELECT_TARGET)

    def _select_target(self, location: Location) -> bool:
        if location == self._selected or self._state.board.is_empty(location):
            return False

        move = self._targets.get(location)
        self._clear_selection()
        if move is None:
            self._set_phase(GamePhase.SELECT_SOURCE)
            return False

        record = self._state.apply_move(move)
        if record is None:
            self._set_phase(GamePhase.SELECT_SOURCE)
            return False

        self._last_target = location
        for cb in self.events.on_move:
            cb(record, self._state)

        if self._state.is_game_over:
            self._set_phase(GamePhase.GAME_OVER)
            for game_over_cb in self.events.on_game_over:
                game_over_cb(self._state.board_state)
        else:
            self._set_phase(GamePhase.SELECT_SOURCE)
        return True

    def _clear_selection(self) -> None:
        self._selected = None
        self._targets = {}

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        _LOGGER.debug("Phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)
