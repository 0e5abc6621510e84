"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessgate.core import Board, Color, MoveValidator, parse_move_text

    board = Board.initial()
    move = parse_move_text("e2 to e4")
    MoveValidator(board).is_valid_move(move, Color.WHITE)
"""

from chessgate.core.board import Board
from chessgate.core.enums import Color, PieceType
from chessgate.core.move import Move
from chessgate.core.notation import (
    EXIT_COMMAND,
    STARTING_FEN,
    board_to_fen,
    is_exit_command,
    parse_fen,
    parse_move_text,
)
from chessgate.core.piece import Piece
from chessgate.core.types import (
    Square,
    parse_square,
    square_name,
)
from chessgate.core.validator import (
    LEGACY,
    STRICT,
    MoveValidator,
    RuleSet,
    is_valid_move,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Validation
    "LEGACY",
    "STRICT",
    "MoveValidator",
    "RuleSet",
    "is_valid_move",
    # Notation
    "EXIT_COMMAND",
    "STARTING_FEN",
    "board_to_fen",
    "is_exit_command",
    "parse_fen",
    "parse_move_text",
]
