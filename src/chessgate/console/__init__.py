"""Console front-end — text rendering and the line-based game loop."""

from chessgate.console.renderer import piece_marker, render_board
from chessgate.console.session import ConsoleSession

__all__ = [
    "ConsoleSession",
    "piece_marker",
    "render_board",
]
