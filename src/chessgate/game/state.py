"""Game state — the board together with the side to move."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessgate.core.board import Board
from chessgate.core.enums import Color
from chessgate.core.move import Move
from chessgate.core.notation import board_to_fen, parse_fen
from chessgate.core.piece import Piece
from chessgate.core.validator import STRICT, MoveValidator, RuleSet


@dataclass
class GameState:
    """Owns the only mutable game data: the board and whose turn it is.

    This is a pure data/logic class — no I/O.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    rules: RuleSet = STRICT

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, fen: str | None = None) -> None:
        """Reset to the starting position, or to the position in *fen*."""
        if fen is None:
            self.board = Board.initial()
            self.side_to_move = Color.WHITE
        else:
            self.board, self.side_to_move = parse_fen(fen)

    # ── Move application ─────────────────────────────────────────────────

    def is_legal(self, move: Move) -> bool:
        return MoveValidator(self.board, self.rules).is_valid_move(
            move, self.side_to_move
        )

    def apply_move(self, move: Move) -> Piece | None:
        """Apply a validated move, flip the turn and return any captured piece.

        Caller is responsible for legality check.
        """
        captured = None
        if not move.is_null:
            captured = self.board.move_piece(move.from_sq, move.to_sq)
        self.side_to_move = self.side_to_move.opposite
        return captured

    # ── Query helpers ────────────────────────────────────────────────────

    def legal_moves(self) -> list[Move]:
        """Legal moves for the side to move."""
        return MoveValidator(self.board, self.rules).legal_moves(self.side_to_move)

    def snapshot(self) -> Board:
        """Independent copy of the board."""
        return self.board.copy()

    @property
    def fen(self) -> str:
        return board_to_fen(self.board, self.side_to_move)
