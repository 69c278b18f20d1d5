"""Board - sparse piece placement on the 4x4 board with cached legal moves."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Final

from solchess.core.enums import BoardState
from solchess.core.errors import InvalidBoardError
from solchess.core.move import Move, OccupiedSquare
from solchess.core.piece import Piece
from solchess.core.types import BOARD_SIZE, Location

_LOGGER = logging.getLogger(__name__)

_BITS_PER_SQUARE: Final = 3
_SQUARE_MASK: Final = 0b111
_ID_BITS: Final = BOARD_SIZE * BOARD_SIZE * _BITS_PER_SQUARE
_EMPTY_CHAR: Final = "."
_PRETTY_WIDTH: Final = 40


class Board:
    """Mutable position of the capture-only variant.

    Only occupied squares are stored.  Legal moves and the game state are
    recomputed inside every mutator, so queries never observe a stale value.
    """

    __slots__ = ("_squares", "_legal_moves", "_state")

    def __init__(self) -> None:
        self._squares: dict[Location, Piece] = {}
        self._legal_moves: frozenset[Move] = frozenset()
        self._state = BoardState.NOT_STARTED

    # -- Element access -----------------------------------------------------

    def __getitem__(self, location: Location) -> Piece | None:
        return self._squares.get(location)

    def is_empty(self, location: Location) -> bool:
        return location not in self._squares

    @property
    def game_state(self) -> BoardState:
        return self._state

    def pieces_remaining(self) -> int:
        return len(self._squares)

    def legal_moves(self) -> frozenset[Move]:
        """Every capture available in the current position."""
        return self._legal_moves

    def occupied_squares(self) -> list[OccupiedSquare]:
        """Snapshots of all occupied squares in board order."""
        return [
            OccupiedSquare(location, piece)
            for location, piece in sorted(self._squares.items())
        ]

    def empty_locations(self) -> list[Location]:
        """Empty squares, file ascending outer, rank ascending inner."""
        return [loc for loc in Location.all() if loc not in self._squares]

    # -- Mutation / copying -------------------------------------------------

    def set(self, location: Location, piece: Piece | None) -> Piece | None:
        """Put *piece* (or nothing) on *location*; return the previous occupant."""
        existing = self._squares.get(location)
        if piece is None:
            self._squares.pop(location, None)
        else:
            self._squares[location] = piece
        self._board_state_changed()
        return existing

    def make_move(self, move: Move) -> bool:
        """Apply *move* if it is currently legal.

        The captured piece is removed, the capturing piece takes its square and
        the origin empties.  An illegal move leaves the board untouched.
        """
        if move not in self._legal_moves:
            _LOGGER.warning(
                "Invalid move - %s; legal moves - %s",
                move.notation,
                ", ".join(sorted(m.notation for m in self._legal_moves)) or "none",
            )
            return False

        del self._squares[move.from_sq.location]
        self._squares[move.to_sq.location] = move.from_sq.piece
        self._board_state_changed()
        return True

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        b._legal_moves = self._legal_moves
        b._state = self._state
        return b

    # -- Legality -----------------------------------------------------------

    def _board_state_changed(self) -> None:
        self._legal_moves = frozenset(self._generate_moves())
        self._state = self._calc_game_state()

    def _calc_game_state(self) -> BoardState:
        remaining = len(self._squares)
        if remaining == 0:
            return BoardState.NOT_STARTED
        if remaining == 1:
            return BoardState.WON
        if not self._legal_moves:
            return BoardState.LOST
        return BoardState.IN_PROGRESS

    def _generate_moves(self) -> Iterator[Move]:
        # Cartesian product of occupied squares, filtered by the mover's rule.
        occupied = [OccupiedSquare(loc, piece) for loc, piece in self._squares.items()]
        for start in occupied:
            for end in occupied:
                if start.location == end.location:
                    continue
                move = Move(start, end)
                if self._is_legal(move):
                    yield move

    def _is_legal(self, move: Move) -> bool:
        piece = move.from_sq.piece
        adx = abs(move.dx)
        ady = abs(move.dy)
        if piece == Piece.KING:
            return adx <= 1 and ady <= 1
        if piece == Piece.QUEEN:
            return ((adx == 0) != (ady == 0) or adx == ady) and self._is_path_free(move)
        if piece == Piece.BISHOP:
            return adx == ady and self._is_path_free(move)
        if piece == Piece.KNIGHT:
            return (adx, ady) in ((1, 2), (2, 1))
        if piece == Piece.ROOK:
            return (adx == 0) != (ady == 0) and self._is_path_free(move)
        if piece == Piece.PAWN:
            return adx == 1 and move.dy == -1
        raise ValueError(f"Unknown piece: {piece!r}")

    def _is_path_free(self, move: Move) -> bool:
        dx, dy = move.dx, move.dy
        if abs(dx) != abs(dy) and dx != 0 and dy != 0:
            return False  # neither a line nor a diagonal

        step_file = (dx > 0) - (dx < 0)
        step_rank = (dy > 0) - (dy < 0)
        file = move.from_sq.location.file + step_file
        rank = move.from_sq.location.rank + step_rank
        target = move.to_sq.location
        while (file, rank) != (target.file, target.rank):
            if Location(file, rank) in self._squares:
                return False
            file += step_file
            rank += step_rank
        return True

    # -- Encoding -----------------------------------------------------------

    def id(self) -> int:
        """Reversible integer encoding, 3 bits per square."""
        res = 0
        for location in Location.all():
            piece = self._squares.get(location)
            res = (res << _BITS_PER_SQUARE) | (int(piece) if piece is not None else 0)
        return res

    @classmethod
    def from_id(cls, board_id: int) -> Board:
        """Inverse of :meth:`id`."""
        if board_id < 0 or board_id >> _ID_BITS:
            raise InvalidBoardError(f"Board id out of range: {board_id}")

        board = cls()
        working = board_id
        for file in range(BOARD_SIZE - 1, -1, -1):
            for rank in range(BOARD_SIZE - 1, -1, -1):
                code = working & _SQUARE_MASK
                working >>= _BITS_PER_SQUARE
                if code == 0:
                    continue
                try:
                    piece = Piece(code)
                except ValueError:
                    raise InvalidBoardError(
                        f"Invalid piece encoding {code:#05b} in board id {board_id}"
                    ) from None
                board._squares[Location(file, rank)] = piece
        board._board_state_changed()
        return board

    @classmethod
    def from_string(cls, text: str) -> Board:
        """Parse 16 characters, top row first, e.g. ``"Q.P..PK.KR.BP.BN"``."""
        if len(text) != BOARD_SIZE * BOARD_SIZE:
            raise InvalidBoardError(
                f"Board string must be {BOARD_SIZE * BOARD_SIZE} chars: {text!r}"
            )

        board = cls()
        for index, char in enumerate(text):
            if char == _EMPTY_CHAR:
                continue
            if char not in _PIECE_CHARS:
                raise InvalidBoardError(f"Invalid board character {char!r}: {text!r}")
            rank, file = divmod(index, BOARD_SIZE)
            board._squares[Location(file, rank)] = _PIECE_CHARS[char]
        board._board_state_changed()
        return board

    def to_string(self) -> str:
        """Inverse of :meth:`from_string`."""
        return "".join(self._rows(pretty=False))

    # -- Display ------------------------------------------------------------

    def render(self, pretty: bool = False) -> str:
        """One line per row; *pretty* uses glyphs centred for terminal display."""
        if not pretty:
            return "".join(f"{row}\n" for row in self._rows(pretty=False))
        return "".join(
            f"{row:^{_PRETTY_WIDTH}}\n" for row in self._rows(pretty=True)
        )

    def _rows(self, pretty: bool) -> list[str]:
        rows: list[str] = []
        for rank in range(BOARD_SIZE):
            cells: list[str] = []
            for file in range(BOARD_SIZE):
                piece = self._squares.get(Location(file, rank))
                if pretty:
                    cells.append(f" {piece.symbol if piece else _EMPTY_CHAR} ")
                else:
                    cells.append(str(piece) if piece else _EMPTY_CHAR)
            rows.append("".join(cells))
        return rows

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank, row in enumerate(self._rows(pretty=False)):
            rows.append(f"{BOARD_SIZE - rank} {' '.join(row)}")
        rows.append("  a b c d")
        return "\n".join(rows)


_PIECE_CHARS: dict[str, Piece] = {piece.notation: piece for piece in Piece}
