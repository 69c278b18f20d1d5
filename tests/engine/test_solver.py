"""Tests for the exhaustive solver."""

from solchess.core.board import Board
from solchess.core.enums import BoardState
from solchess.core.move import Move
from solchess.engine import Solver, solve


def _replay(board: Board, solution: list[Move]) -> Board:
    board = board.copy()
    for move in solution:
        assert board.make_move(move), f"{move} should be legal"
    return board


class TestSolverFixtures:
    def test_solvable_board(self, solvable_board: Board) -> None:
        solutions = Solver().solve(solvable_board)
        assert len(solutions) == 10
        for solution in solutions:
            assert len(solution) == solvable_board.pieces_remaining() - 1
            assert _replay(solvable_board, solution).game_state == BoardState.WON

    def test_solutions_are_distinct(self, solvable_board: Board) -> None:
        solutions = solve(solvable_board)
        assert len({tuple(s) for s in solutions}) == len(solutions)

    def test_unsolvable_board(self, unsolvable_board: Board) -> None:
        assert Solver().solve(unsolvable_board) == []

    def test_input_board_untouched(self, solvable_board: Board) -> None:
        before = solvable_board.id()
        solve(solvable_board)
        assert solvable_board.id() == before
        assert solvable_board.pieces_remaining() == 8


class TestSolverTerminalStates:
    def test_already_won(self) -> None:
        board = Board.from_string("...............K")
        assert solve(board) == [[]]

    def test_empty_board(self) -> None:
        assert solve(Board()) == []

    def test_lost_board(self) -> None:
        board = Board.from_string("P..............P")
        assert board.game_state == BoardState.LOST
        assert solve(board) == []


class TestSolverCounting:
    def test_move_orders_counted_separately(self) -> None:
        # P . . .
        # R . . .
        # R . . .
        # . . . .
        board = Board.from_string("P...R...R.......")
        solutions = solve(board)
        assert len(solutions) == 4
        assert sorted(" ".join(m.notation for m in s) for s in solutions) == [
            "Rxa2 Rxa4",
            "Rxa3 Rxa4",
            "Rxa4 Rxa2",
            "Rxa4 Rxa4",
        ]

    def test_node_counter(self) -> None:
        solver = Solver()
        assert solver.nodes == 0
        solver.solve(Board.from_string("P...R..........."))
        assert solver.nodes == 2
        solver.solve(Board.from_string("...............K"))
        assert solver.nodes == 1
