"""Plain-text board rendering, optionally coloured with colorama."""

from __future__ import annotations

from colorama import Fore, Style

from chessgate.core.board import Board
from chessgate.core.enums import Color
from chessgate.core.piece import Piece
from chessgate.core.types import BOARD_SIZE

FILE_HEADER = "  a b c d e f g h"
EMPTY_MARKER = " "

_PIECE_COLORS: dict[Color, str] = {
    Color.WHITE: Fore.CYAN + Style.BRIGHT,
    Color.BLACK: Fore.RED + Style.BRIGHT,
}


def piece_marker(piece: Piece | None, *, use_color: bool = False) -> str:
    """One-character marker for a square, wrapped in ANSI codes if *use_color*."""
    if piece is None:
        return EMPTY_MARKER
    if not use_color:
        return str(piece)
    return f"{_PIECE_COLORS[piece.color]}{piece}{Style.RESET_ALL}"


def render_board(board: Board, *, use_color: bool = False) -> str:
    """Render *board* with White at the bottom.

    Each rank line is the 1-indexed rank label followed by one marker and one
    space per file; empty squares render as a single space.
    """
    lines = [FILE_HEADER]
    for rank in range(BOARD_SIZE - 1, -1, -1):
        cells = "".join(
            f"{piece_marker(p, use_color=use_color)} " for p in board.rank(rank)
        )
        lines.append(f"{rank + 1} {cells}")
    return "\n".join(lines)
