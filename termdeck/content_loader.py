from __future__ import annotations

import logging
import runpy
from pathlib import Path

from .slides import Deck, DeckBuilder, DeckError

logger = logging.getLogger("termdeck.content_loader")


def source_mtime(source: Path) -> float:
    # Raises FileNotFoundError for a missing deck; that is fatal on purpose.
    return source.stat().st_mtime


def rebuild_deck(source: Path) -> Deck:
    """
    Run the deck file and collect the slides it declares.

    The deck file is plain Python. It runs in a fresh namespace holding the
    slide functions of a new DeckBuilder, so nothing from a previous run leaks
    into the rebuilt deck. Errors raised by the deck code propagate.
    """
    source = Path(source).resolve()
    mtime = source_mtime(source)
    builder = DeckBuilder()
    runpy.run_path(str(source), init_globals=builder.namespace(), run_name="__deck__")
    if not builder.slides:
        raise DeckError(f"{source}: deck defines no slides")

    logger.info("loaded %d slides from %s", len(builder.slides), source)
    return Deck(source=source, slides=tuple(builder.slides), mtime=mtime)


def ensure_fresh(deck: Deck | None, source: Path) -> tuple[Deck, bool]:
    """
    Returns (deck, reloaded). The deck is rebuilt only when there is none yet
    or the source modification time moved; otherwise the same object comes back.
    """
    if deck is not None and source_mtime(Path(source).resolve()) == deck.mtime:
        return deck, False
    return rebuild_deck(source), True
