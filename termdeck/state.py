from __future__ import annotations

from dataclasses import dataclass

from .slides import Deck, Slide


@dataclass(frozen=True)
class Viewport:
    rows: int
    cols: int


@dataclass
class PresentationState:
    """
    Run state of one presentation.
    - n: index of the slide to show, clamped after every change.
    - previous: the slide rendered in the last iteration (decides whether an
      image background has to be cleared).
    """

    n: int = 0
    deck: Deck | None = None
    previous: Slide | None = None

    def clamp(self) -> int:
        last = len(self.deck) - 1 if self.deck is not None else 0
        self.n = max(0, min(self.n, last))
        return self.n
