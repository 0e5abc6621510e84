"""Line-based console session: show board, read move, validate, apply."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from chessgate.console.renderer import render_board
from chessgate.core.notation import EXIT_COMMAND, is_exit_command, parse_move_text
from chessgate.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

PROMPT = "Enter move for {side} (e.g., 'e2 to e4') or '{exit}' to quit: "
FORMAT_ERROR = "Invalid move format. Please use 'e2 to e4' format."
ILLEGAL_MOVE = "Invalid move."


class ConsoleSession:
    """Drives one game from a text stream until ``exit`` or end of input."""

    __slots__ = ("_controller", "_input", "_output", "_use_color")

    def __init__(
        self,
        controller: GameController,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
        *,
        use_color: bool = False,
    ) -> None:
        self._controller = controller
        self._input = sys.stdin if input_stream is None else input_stream
        self._output = sys.stdout if output_stream is None else output_stream
        self._use_color = use_color

    @property
    def controller(self) -> GameController:
        return self._controller

    def run(self) -> int:
        """Play until the user quits. Returns a process exit status."""
        _LOGGER.info("Console session started")
        moves_played = 0
        while True:
            state = self._controller.state
            self._write(render_board(state.board, use_color=self._use_color))
            self._write(
                PROMPT.format(side=state.side_to_move.display_name, exit=EXIT_COMMAND)
            )

            line = self._input.readline()
            if not line:
                _LOGGER.info("End of input")
                break
            if is_exit_command(line):
                break

            try:
                move = parse_move_text(line)
            except ValueError as exc:
                _LOGGER.debug("Unparseable input: %s", exc)
                self._write(FORMAT_ERROR)
                continue

            if not self._controller.submit_move(move):
                self._write(ILLEGAL_MOVE)
                continue
            moves_played += 1

        _LOGGER.info("Console session finished after %d move(s)", moves_played)
        return 0

    def _write(self, text: str) -> None:
        print(text, file=self._output)
