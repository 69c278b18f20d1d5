"""Randomized constructive puzzle generator validated by the solver."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter

from solchess.core.board import Board
from solchess.core.piece import Piece
from solchess.engine.random_source import RandomRange, StdRandomRange
from solchess.engine.solver import Solver

_LOGGER = logging.getLogger(__name__)

DEFAULT_CANDIDATE_PIECES: tuple[Piece, ...] = (
    (Piece.PAWN,) * 4
    + (Piece.BISHOP,) * 4
    + (Piece.KNIGHT,) * 3
    + (Piece.QUEEN,)
    + (Piece.ROOK,) * 2
)


@dataclass(slots=True, frozen=True)
class GeneratorLimits:
    """Retry budgets and the piece pool for one :meth:`PuzzleGenerator.generate` call."""

    attempts: int = 1000
    piece_attempts: int = 15
    candidate_pieces: tuple[Piece, ...] = DEFAULT_CANDIDATE_PIECES


@dataclass(slots=True)
class GenerateStats:
    """Counters accumulated over all attempts, plus the accepted board if any."""

    attempts: int = 0
    piece_total: int = 0
    piece_success: int = 0
    elapsed_seconds: float = 0.0
    board: Board | None = field(default=None, compare=False)

    def summary(self) -> str:
        lines = [
            _stat_line("Total attempts", self.attempts),
            _stat_line("Total pieces placed", self.piece_total),
            _stat_line("Success pieces placed", self.piece_success),
            _stat_line("Total time (ms)", round(self.elapsed_seconds * 1000)),
        ]
        return "\n".join(lines)


def _stat_line(name: str, value: object) -> str:
    return f"{name:>30}:{value!s:>6}"


class PuzzleGenerator:
    """Places pieces one at a time, keeping only placements that stay solvable.

    A failed placement reverts only that square; exhausting the per-piece
    budget abandons the whole attempt and starts again from an empty board.
    """

    __slots__ = ("_limits", "_solver")

    def __init__(self, limits: GeneratorLimits | None = None) -> None:
        self._limits = limits or GeneratorLimits()
        self._solver = Solver()

    @property
    def limits(self) -> GeneratorLimits:
        return self._limits

    def generate(
        self,
        num_pieces: int,
        num_solutions: int,
        rng: RandomRange | None = None,
    ) -> GenerateStats:
        """Build a board of *num_pieces* with between 1 and *num_solutions* solutions.

        Returns the stats with ``board=None`` when every attempt failed.
        """
        pool_size = len(self._limits.candidate_pieces)
        if not 1 <= num_pieces <= pool_size:
            raise ValueError(
                f"Number of pieces to place on the board should be 1-{pool_size}: "
                f"{num_pieces}"
            )
        if num_solutions < 1:
            raise ValueError(f"Number of solutions should be >= 1: {num_solutions}")

        source = rng if rng is not None else StdRandomRange()
        stats = GenerateStats()
        started = perf_counter()
        for _ in range(self._limits.attempts):
            stats.attempts += 1
            board = self._try_generate(num_pieces, num_solutions, source, stats)
            stats.elapsed_seconds = perf_counter() - started
            _LOGGER.debug(
                "Generating puzzle.. attempt %d, elapsed %.3fs",
                stats.attempts,
                stats.elapsed_seconds,
            )
            if board is not None:
                stats.board = board
                _LOGGER.info(
                    "Generated a puzzle with %d pieces after %d attempts",
                    num_pieces,
                    stats.attempts,
                )
                return stats

        _LOGGER.info(
            "Failed to generate a puzzle with %d pieces after %d attempts",
            num_pieces,
            stats.attempts,
        )
        return stats

    def _try_generate(
        self,
        num_pieces: int,
        num_solutions: int,
        rng: RandomRange,
        stats: GenerateStats,
    ) -> Board | None:
        board = Board()
        candidates = list(self._limits.candidate_pieces)
        for _ in range(num_pieces):
            if not self._place_piece(board, candidates, rng, stats):
                return None

        solutions = self._solver.solve(board)
        if len(solutions) > num_solutions:
            return None
        return board

    def _place_piece(
        self,
        board: Board,
        candidates: list[Piece],
        rng: RandomRange,
        stats: GenerateStats,
    ) -> bool:
        empty = board.empty_locations()
        for _ in range(self._limits.piece_attempts):
            stats.piece_total += 1
            index = rng.gen_range(0, len(candidates))
            location = empty[rng.gen_range(0, len(empty))]
            board.set(location, candidates[index])
            if self._solver.solve(board):
                stats.piece_success += 1
                del candidates[index]
                return True
            board.set(location, None)
        return False


def generate(
    num_pieces: int,
    num_solutions: int,
    rng: RandomRange | None = None,
    limits: GeneratorLimits | None = None,
) -> GenerateStats:
    """Shortcut for ``PuzzleGenerator(limits).generate(...)``."""
    return PuzzleGenerator(limits).generate(num_pieces, num_solutions, rng)
