"""Text notation: console move commands and FEN piece placement."""

from __future__ import annotations

from chessgate.core.board import Board
from chessgate.core.enums import Color
from chessgate.core.move import Move
from chessgate.core.piece import Piece
from chessgate.core.types import BOARD_SIZE, Square, parse_square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w"

MOVE_SEPARATOR = " to "
EXIT_COMMAND = "exit"


# ── Console move text ───────────────────────────────────────────────────────


def parse_move_text(text: str) -> Move:
    """Parse console move text, e.g. ``'e2 to e4'``.

    Raises:
        ValueError: if the text is not two square names joined by ``' to '``.
    """
    parts = text.strip().split(MOVE_SEPARATOR)
    if len(parts) != 2:
        raise ValueError(f"Invalid move text: {text!r}")
    from_name, to_name = parts
    return Move(parse_square(from_name), parse_square(to_name))


def is_exit_command(text: str) -> bool:
    return text.strip() == EXIT_COMMAND


# ── FEN ──────────────────────────────────────────────────────────────────────


def parse_fen(fen: str) -> tuple[Board, Color]:
    """Parse the placement and side-to-move fields of a FEN string.

    The side field is optional and defaults to white. Castling, en-passant
    and clock fields are accepted but ignored.
    """
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    ranks = parts[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = BOARD_SIZE - 1 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= BOARD_SIZE):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= BOARD_SIZE:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[Square(file, rank)] = Piece.from_char(ch)
                file += 1
            if file > BOARD_SIZE:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != BOARD_SIZE:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    side_part = parts[1] if len(parts) > 1 else "w"
    if side_part == "w":
        side = Color.WHITE
    elif side_part == "b":
        side = Color.BLACK
    else:
        raise ValueError(f"Invalid FEN side-to-move field: {side_part!r}")

    return board, side


def board_to_fen(board: Board, side_to_move: Color = Color.WHITE) -> str:
    """Serialise placement and side to move, e.g. ``'8/8/.../8 w'``."""
    rows: list[str] = []
    for rank in range(BOARD_SIZE - 1, -1, -1):
        empty = 0
        row = ""
        for piece in board.rank(rank):
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)

    side_str = "w" if side_to_move == Color.WHITE else "b"
    return f"{'/'.join(rows)} {side_str}"
