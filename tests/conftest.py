"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessgate.core.board import Board
from chessgate.core.piece import Piece
from chessgate.core.types import parse_square

BoardFactory = Callable[..., Board]


def _build_board(**placement: str) -> Board:
    board = Board()
    for name, char in placement.items():
        board[parse_square(name)] = Piece.from_char(char)
    return board


@pytest.fixture
def make_board() -> BoardFactory:
    """Build a board from keyword placements, e.g. ``make_board(e1="K", e8="k")``."""
    return _build_board


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()
