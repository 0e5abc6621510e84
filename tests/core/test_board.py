"""Tests for Board."""

import pytest

from chessgate.core.board import Board
from chessgate.core.enums import Color, PieceType
from chessgate.core.piece import Piece
from chessgate.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
    Square,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece(Color.BLACK, PieceType.KING)

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_pawns(self) -> None:
        board = Board.initial()
        white = board.pieces(Color.WHITE, PieceType.PAWN)
        black = board.pieces(Color.BLACK, PieceType.PAWN)
        assert len(white) == 8 and all(sq.rank == 1 for sq in white)
        assert len(black) == 8 and all(sq.rank == 6 for sq in black)

    def test_exactly_32_occupied(self) -> None:
        board = Board.initial()
        assert board.occupied_count() == 32
        assert len(board.all_pieces(Color.WHITE)) == 16
        assert len(board.all_pieces(Color.BLACK)) == 16

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            assert board.rank(rank) == (None,) * 8


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board[E4] = piece
        assert board[E4] == piece
        assert board.is_empty(E2)

    def test_off_board_index_raises(self) -> None:
        board = Board()
        with pytest.raises(IndexError):
            board[Square(-1, 0)]
        with pytest.raises(IndexError):
            board[Square(0, 8)] = None

    def test_move_piece_returns_captured(self) -> None:
        board = Board()
        board[E2] = Piece(Color.WHITE, PieceType.ROOK)
        board[E4] = Piece(Color.BLACK, PieceType.KNIGHT)
        captured = board.move_piece(E2, E4)
        assert captured == Piece(Color.BLACK, PieceType.KNIGHT)
        assert board[E4] == Piece(Color.WHITE, PieceType.ROOK)
        assert board.is_empty(E2)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = None
        assert board != copy
        assert board[E1] == Piece(Color.WHITE, PieceType.KING)

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.occupied_count() == 0

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text
