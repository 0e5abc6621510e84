"""Tests for console move text and FEN placement."""

import pytest

from chessgate.core.board import Board
from chessgate.core.enums import Color, PieceType
from chessgate.core.move import Move
from chessgate.core.notation import (
    STARTING_FEN,
    board_to_fen,
    is_exit_command,
    parse_fen,
    parse_move_text,
)
from chessgate.core.piece import Piece
from chessgate.core.types import E2, E4, E5, G1, F3, Square


class TestMoveText:
    def test_parse(self) -> None:
        assert parse_move_text("e2 to e4") == Move(E2, E4)

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_move_text("  g1 to f3\n") == Move(G1, F3)

    @pytest.mark.parametrize(
        "text",
        [
            "e2e4",
            "e2 e4",
            "e2 to",
            "e2 to e4 to e5",
            "e2  to e4",
            "e9 to e4",
            "z2 to e4",
            "E2 to E4",
            "",
        ],
    )
    def test_malformed_rejected(self, text: str) -> None:
        with pytest.raises(ValueError):
            parse_move_text(text)

    def test_move_display(self) -> None:
        assert str(Move(E4, E5)) == "e4e5"

    def test_exit_command(self) -> None:
        assert is_exit_command("exit")
        assert is_exit_command("exit\n")
        assert not is_exit_command("quit")
        assert not is_exit_command("e2 to exit")


class TestPieceMarkers:
    def test_from_char(self) -> None:
        assert Piece.from_char("N") == Piece(Color.WHITE, PieceType.KNIGHT)
        assert Piece.from_char("q") == Piece(Color.BLACK, PieceType.QUEEN)

    def test_str(self) -> None:
        assert str(Piece(Color.BLACK, PieceType.KING)) == "k"

    def test_invalid_char(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")


class TestFen:
    def test_starting_fen_matches_initial_board(self) -> None:
        board, side = parse_fen(STARTING_FEN)
        assert board == Board.initial()
        assert side == Color.WHITE

    def test_side_optional(self) -> None:
        _, side = parse_fen("4k3/8/8/8/8/8/8/4K3")
        assert side == Color.WHITE

    def test_black_to_move_and_extra_fields_ignored(self) -> None:
        board, side = parse_fen(
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        )
        assert side == Color.BLACK
        assert board[E4] == Piece(Color.WHITE, PieceType.PAWN)
        assert board[E2] is None

    def test_to_fen(self) -> None:
        assert board_to_fen(Board.initial(), Color.WHITE) == STARTING_FEN

    def test_to_fen_black(self) -> None:
        board = Board()
        board[Square(4, 0)] = Piece(Color.WHITE, PieceType.KING)
        assert board_to_fen(board, Color.BLACK) == "8/8/8/8/8/8/8/4K3 b"

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8 w",
            "9/8/8/8/8/8/8/8 w",
            "ppppppppp/8/8/8/8/8/8/8 w",
            "7/8/8/8/8/8/8/8 w",
            "x7/8/8/8/8/8/8/8 w",
            "8/8/8/8/8/8/8/8 x",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            parse_fen(fen)
