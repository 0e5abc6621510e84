"""Move legality: per-piece geometry, path clearance, occupancy, turn ownership.

The validator is a pure predicate over a board snapshot. Every illegality,
including off-board coordinates, collapses to ``False``; nothing here raises
for integer squares or mutates the board.

Quick start::

    from chessgate.core import Board, Color, is_valid_move, parse_square

    board = Board.initial()
    is_valid_move(parse_square("e2"), parse_square("e4"), board, Color.WHITE)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from chessgate.core.board import Board
from chessgate.core.enums import Color, PieceType
from chessgate.core.move import Move
from chessgate.core.piece import Piece
from chessgate.core.types import ALL_SQUARES, BOARD_SIZE, Square

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

# Indexed by [color]: forward rank step and pawn starting rank.
_PAWN_DIRECTION: tuple[int, int] = (1, -1)
_PAWN_START_RANK: tuple[int, int] = (1, BOARD_SIZE - 2)


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Switches that relax the destination gates.

    ``allow_null_moves``: a zero-length king, rook or queen move is accepted.
    ``allow_self_capture``: every piece except the pawn may land on a piece of
    its own side.
    """

    allow_null_moves: bool = False
    allow_self_capture: bool = False


STRICT = RuleSet()
# Permissive rules: null king/rook/queen moves and same-side landings pass.
LEGACY = RuleSet(allow_null_moves=True, allow_self_capture=True)


# -- Small arithmetic helpers ----------------------------------------------


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class MoveValidator:
    """Decides whether single moves are legal on a given :class:`Board`.

    The validator only reads the board; callers apply accepted moves and
    flip the side to move themselves.
    """

    __slots__ = ("_board", "_rules", "_checkers")

    def __init__(self, board: Board, rules: RuleSet = STRICT) -> None:
        self._board = board
        self._rules = rules
        self._checkers: dict[PieceType, Callable[[Piece, Square, Square], bool]] = {
            PieceType.PAWN: self._pawn_ok,
            PieceType.KNIGHT: self._knight_ok,
            PieceType.BISHOP: self._bishop_ok,
            PieceType.ROOK: self._rook_ok,
            PieceType.QUEEN: self._queen_ok,
            PieceType.KING: self._king_ok,
        }

    @property
    def rules(self) -> RuleSet:
        return self._rules

    # -- Public API ---------------------------------------------------------

    def is_valid(self, from_sq: Square, to_sq: Square, side_to_move: Color) -> bool:
        """Whether *side_to_move* may move the piece on *from_sq* to *to_sq*."""
        from_sq, to_sq = Square(*from_sq), Square(*to_sq)
        if not (from_sq.on_board and to_sq.on_board):
            return False

        piece = self._board[from_sq]
        if piece is None or piece.color != side_to_move:
            return False

        if from_sq == to_sq and not (
            self._rules.allow_null_moves
            and piece.piece_type in (PieceType.KING, PieceType.ROOK, PieceType.QUEEN)
        ):
            return False

        checker = self._checkers.get(piece.piece_type)
        if checker is None or not checker(piece, from_sq, to_sq):
            return False

        return self._destination_ok(piece, from_sq, to_sq)

    def is_valid_move(self, move: Move, side_to_move: Color) -> bool:
        return self.is_valid(move.from_sq, move.to_sq, side_to_move)

    def legal_moves(self, side: Color) -> list[Move]:
        """Every move *side* could make, ordered by origin then destination."""
        moves: list[Move] = []
        for from_sq in ALL_SQUARES:
            piece = self._board[from_sq]
            if piece is None or piece.color != side:
                continue
            for to_sq in ALL_SQUARES:
                if self.is_valid(from_sq, to_sq, side):
                    moves.append(Move(from_sq, to_sq))
        return moves

    def _path_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between the two squares is empty.

        The squares must share a rank, a file or a diagonal; off-board
        endpoints give ``False``.
        """
        if not (from_sq.on_board and to_sq.on_board):
            return False
        df = to_sq.file - from_sq.file
        dr = to_sq.rank - from_sq.rank
        step_f, step_r = _sign(df), _sign(dr)
        steps = max(abs(df), abs(dr))
        board = self._board
        for i in range(1, steps):
            sq = Square(from_sq.file + i * step_f, from_sq.rank + i * step_r)
            if board[sq] is not None:
                return False
        return True

    # -- Occupancy gate -----------------------------------------------------

    def _destination_ok(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        target = self._board[to_sq]
        if target is None or target.color != piece.color:
            return True
        if from_sq == to_sq:
            # Admitted null move: the destination holds the mover itself.
            return True
        return self._rules.allow_self_capture and piece.piece_type != PieceType.PAWN

    # -- Per-piece geometry -------------------------------------------------

    def _pawn_ok(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        color = int(piece.color)
        forward = _PAWN_DIRECTION[color]
        df = to_sq.file - from_sq.file
        dr = to_sq.rank - from_sq.rank
        board = self._board

        if df == 0 and dr == forward:
            return board[to_sq] is None

        if df == 0 and dr == 2 * forward:
            return (
                from_sq.rank == _PAWN_START_RANK[color]
                and board[from_sq.offset(0, forward)] is None
                and board[to_sq] is None
            )

        if abs(df) == 1 and dr == forward:
            target = board[to_sq]
            return target is not None and target.is_enemy_of(piece.color)

        return False

    def _knight_ok(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        delta = (to_sq.file - from_sq.file, to_sq.rank - from_sq.rank)
        return delta in KNIGHT_OFFSETS

    def _king_ok(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        return (
            abs(to_sq.file - from_sq.file) <= 1
            and abs(to_sq.rank - from_sq.rank) <= 1
        )

    def _rook_ok(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        if from_sq.file != to_sq.file and from_sq.rank != to_sq.rank:
            return False
        return self._path_clear(from_sq, to_sq)

    def _bishop_ok(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        df = abs(to_sq.file - from_sq.file)
        dr = abs(to_sq.rank - from_sq.rank)
        if df != dr or df == 0:
            return False
        return self._path_clear(from_sq, to_sq)

    def _queen_ok(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        return self._rook_ok(piece, from_sq, to_sq) or self._bishop_ok(
            piece, from_sq, to_sq
        )


def is_valid_move(
    from_sq: Square,
    to_sq: Square,
    board: Board,
    side_to_move: Color,
    rules: RuleSet = STRICT,
) -> bool:
    """Whether *side_to_move* may move from *from_sq* to *to_sq* on *board*."""
    return MoveValidator(board, rules).is_valid(from_sq, to_sq, side_to_move)
