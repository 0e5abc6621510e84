"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from chessgate import __version__
from chessgate.console.session import ConsoleSession
from chessgate.core.validator import LEGACY, STRICT
from chessgate.game.controller import GameController

_LOGGER = logging.getLogger(__name__)
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    """Command-line options for the console game."""
    parser = argparse.ArgumentParser(
        prog="chessgate",
        description="Two-player console chess with move-legality checking",
    )
    parser.add_argument(
        "--fen", type=str, help="Starting position (piece placement and side to move)"
    )
    parser.add_argument(
        "--legacy",
        action="store_true",
        help="Accept null moves and same-side captures",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Colour piece markers with ANSI codes (default: off)",
    )
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging level for diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=__version__)
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def run_application(
    argv: list[str] | None = None,
    input_stream: TextIO | None = None,
    output_stream: TextIO | None = None,
) -> int:
    """Parse *argv*, set up a game and run the console session."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    rules = LEGACY if args.legacy else STRICT
    controller = GameController(rules)
    try:
        controller.new_game(fen=args.fen)
    except ValueError as exc:
        parser.error(str(exc))

    if args.color:
        import colorama

        colorama.just_fix_windows_console()

    _LOGGER.info("Starting game with %s rules", "legacy" if args.legacy else "strict")
    session = ConsoleSession(
        controller, input_stream, output_stream, use_color=args.color
    )
    return session.run()


def main() -> None:
    """Launch the console game."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
