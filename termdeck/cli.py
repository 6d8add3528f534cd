from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .presenter import Presenter
from .services import terminal_service


def _setup_logging() -> None:
    # The terminal shows the slides; log lines only go to a file when asked for.
    path = config.log_file()
    if path is None:
        logging.getLogger("termdeck").addHandler(logging.NullHandler())
        logging.getLogger("termdeck").propagate = False
        return
    logging.basicConfig(
        filename=str(path),
        level=config.log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="termdeck",
        description="Present a deck file full-screen in the terminal. Keys: space/n/l/k/PgDn next, "
        "b/p/h/j/PgUp previous, ^ first, $ last, q quit.",
    )
    parser.add_argument("deck", type=Path, help="deck file (Python) declaring the slides")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _setup_logging()

    presenter = Presenter(args.deck, char_delay=config.char_delay())
    try:
        return presenter.run()
    except KeyboardInterrupt:
        return 0
    finally:
        # Leave a clean screen behind, also when the deck or a collaborator failed.
        terminal_service.clear_screen(sys.stdout)
