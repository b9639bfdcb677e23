"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from stoneboard.console.controller import AppState
from stoneboard.i18n import LANGUAGES, set_language
from stoneboard.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="stoneboard", description="Play Gomoku or Go in the terminal."
    )
    parser.add_argument("--lang", choices=LANGUAGES, default="English")
    parser.add_argument(
        "--size", type=int, default=15, help="board size used when start omits one"
    )
    parser.add_argument("--ascii", action="store_true", help="draw stones as X/O")
    parser.add_argument(
        "--no-clear", action="store_true", help="do not clear the screen between turns"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Launch the Stoneboard console."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = AppSettings(
            language=args.lang,
            default_size=args.size,
            ascii_board=args.ascii,
            clear_screen=not args.no_clear,
        )
    except ValueError as exc:
        _LOGGER.error("Invalid settings: %s", exc)
        return 2

    set_language(settings.language)
    return AppState(settings).run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
