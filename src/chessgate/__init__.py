"""chessgate — move-legality engine for standard chess piece movement."""

__version__ = "0.1.0"
