"""Command-line entry point: generate and solve puzzles."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from solchess.core.board import Board
from solchess.engine.generator import PuzzleGenerator
from solchess.engine.random_source import StdRandomRange
from solchess.engine.solver import Solver

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solchess",
        description="Solitaire Chess puzzle generator and solver",
    )
    parser.add_argument(
        "-g", "--generate", action="store_true", help="generate a puzzle"
    )
    parser.add_argument(
        "-n",
        "--num-pieces",
        type=int,
        default=5,
        help="number of pieces to place on the board while generating a puzzle",
    )
    parser.add_argument(
        "-k",
        "--num-solutions",
        type=int,
        default=5,
        help="maximum number of solutions a generated puzzle may have",
    )
    parser.add_argument("--seed", type=int, help="seed for reproducible puzzles")
    parser.add_argument(
        "--print",
        dest="print_solution",
        action="store_true",
        help="print the solution. When solving a puzzle, this is always set",
    )
    parser.add_argument(
        "--stats", action="store_true", help="print generation statistics"
    )
    parser.add_argument("-s", "--solve", metavar="BOARD", help="the board to solve")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def _solve_puzzle(board: Board) -> None:
    solutions = Solver().solve(board)
    if not solutions:
        print("No solutions found")
        return
    print(f"Found {len(solutions)} solutions")
    for idx, move in enumerate(solutions[0], start=1):
        print(f"{idx}. {move.notation}")


def _generate_puzzle(args: argparse.Namespace) -> Board | None:
    rng = StdRandomRange.seeded(args.seed) if args.seed is not None else None
    stats = PuzzleGenerator().generate(args.num_pieces, args.num_solutions, rng)
    elapsed_ms = round(stats.elapsed_seconds * 1000)
    if args.stats:
        print(stats.summary())

    if stats.board is None:
        print(
            f"Failed to generate a puzzle with {args.num_pieces} pieces "
            f"after {elapsed_ms} ms, Try again"
        )
        return None

    print(f"Generated a puzzle with {args.num_pieces} pieces after {elapsed_ms} ms")
    return stats.board


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI; returns the process exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.generate:
        try:
            board = _generate_puzzle(args)
        except ValueError as exc:
            parser.error(str(exc))
        if board is None:
            return 1
        print(board.render(), end="")
        print(board.to_string())
        if args.print_solution:
            _solve_puzzle(board)
        return 0

    if args.solve is not None:
        try:
            board = Board.from_string(args.solve)
        except ValueError as exc:
            _LOGGER.debug("Rejected board string: %s", exc)
            print("Invalid board string")
            return 1
        print(board.render(), end="")
        _solve_puzzle(board)
        return 0

    print("Use --help to see available options")
    return 0


if __name__ == "__main__":
    sys.exit(main())
