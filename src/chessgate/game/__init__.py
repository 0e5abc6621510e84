"""Game management layer — state and controller.

Quick start::

    from chessgate.core import parse_move_text
    from chessgate.game import GameController

    ctrl = GameController()
    ctrl.new_game()
    ctrl.submit_move(parse_move_text("e2 to e4"))
"""

from chessgate.game.controller import GameController, GameEvents
from chessgate.game.state import GameState

__all__ = [
    "GameController",
    "GameEvents",
    "GameState",
]
