from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .content_loader import ensure_fresh
from .services import background_service, terminal_service
from .services.render_service import render
from .services.terminal_service import PAGE_DOWN, PAGE_UP
from .state import PresentationState

logger = logging.getLogger("termdeck.presenter")

ADVANCE = frozenset({" ", "n", "l", "k", PAGE_DOWN})
RETREAT = frozenset({"b", "p", "h", "j", PAGE_UP})
FIRST = "^"
LAST = "$"
QUIT = frozenset({"q", ""})  # "" is end of input


class Presenter:
    """
    Shows a deck file slide by slide.

    Each step clears the screen, reloads the deck if its file changed, types
    out the current slide and then waits for one key.
    """

    def __init__(
        self,
        source: str | Path,
        *,
        out: TextIO | None = None,
        stdin: TextIO | None = None,
        char_delay: float = 0.0,
    ) -> None:
        self.source = Path(source)
        self.out = out or sys.stdout
        self.stdin = stdin or sys.stdin
        self.char_delay = char_delay
        self.state = PresentationState()

    def _clear(self, had_image: bool) -> None:
        if had_image:
            background_service.set_background_image(None)
        terminal_service.clear_screen(self.out)

    def refresh(self) -> bool:
        """Reload the deck if needed and clamp the index; True if it was rebuilt."""
        self.state.deck, reloaded = ensure_fresh(self.state.deck, self.source)
        self.state.clamp()
        return reloaded

    def apply(self, token: str) -> bool:
        """Apply one key to the state. Returns False for quit."""
        st = self.state
        if token in QUIT:
            return False
        if token in ADVANCE:
            st.n += 1
        elif token in RETREAT:
            st.n -= 1
        elif token == FIRST:
            st.n = 0
        elif token == LAST:
            st.n = len(st.deck) - 1 if st.deck is not None else 0
        else:
            logger.debug("ignoring key %r", token)
        st.clamp()
        return True

    def step(self) -> bool:
        st = self.state
        self._clear(st.previous is not None and st.previous.is_image)

        self.refresh()
        assert st.deck is not None
        slide = st.deck.slides[st.n]

        stream = render(slide, terminal_service.viewport(), base_dir=st.deck.source.parent)
        if stream is not None:
            terminal_service.type_out(stream, self.out, self.char_delay)

        token = terminal_service.read_command(self.stdin)
        if not self.apply(token):
            logger.info("quit on slide %d/%d", st.n + 1, len(st.deck))
            self._clear(slide.is_image)
            return False

        st.previous = slide
        return True

    def run(self) -> int:
        # First load outside the loop: a missing or broken deck fails before
        # the screen is touched.
        self.refresh()
        while self.step():
            pass
        return 0
