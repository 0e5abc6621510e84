"""GameController — validates proposed moves and applies the legal ones.

Emits events via simple callbacks so the console / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessgate.core.move import Move
from chessgate.core.piece import Piece
from chessgate.core.validator import STRICT, RuleSet
from chessgate.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, Piece | None, GameState], None]  # move, captured, state
RejectedCallback = Callable[[Move, GameState], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Runs the read-validate-apply-toggle cycle for one game.

    Single-threaded: the validator never mutates state, and only
    :meth:`submit_move` applies moves.
    """

    __slots__ = ("_state", "events")

    def __init__(self, rules: RuleSet = STRICT) -> None:
        self._state = GameState(rules=rules)
        self.events = GameEvents()

    @property
    def state(self) -> GameState:
        return self._state

    def new_game(self, fen: str | None = None, rules: RuleSet | None = None) -> None:
        """Start over from the initial position or *fen*.

        Raises:
            ValueError: if *fen* cannot be parsed.
        """
        state = GameState(rules=self._state.rules if rules is None else rules)
        state.setup(fen)
        self._state = state
        _LOGGER.debug("New game: %s (%s)", state.fen, state.rules)

    def submit_move(self, move: Move) -> bool:
        """Apply *move* if it is legal for the side to move."""
        state = self._state
        if not state.is_legal(move):
            _LOGGER.debug("Rejected %s for %s", move, state.side_to_move)
            self._emit_rejected(move)
            return False

        mover = state.side_to_move
        captured = state.apply_move(move)
        if captured is not None:
            _LOGGER.debug("%s plays %s capturing %s", mover, move, captured)
        else:
            _LOGGER.debug("%s plays %s", mover, move)
        self._emit_move(move, captured)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, move: Move, captured: Piece | None) -> None:
        for cb in self.events.on_move:
            cb(move, captured, self._state)

    def _emit_rejected(self, move: Move) -> None:
        for cb in self.events.on_rejected:
            cb(move, self._state)
