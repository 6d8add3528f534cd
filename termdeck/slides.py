from __future__ import annotations

import textwrap
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable


class DeckError(ValueError):
    pass


class SlideFormat(str, Enum):
    CENTER = "center"
    BLOCK = "block"
    CODE = "code"
    IMAGE = "image"
    SECTION = "section"


# Style sequences understood by services.geometry.visible_length.
BOLD_ON = "\x1b[1m"
BOLD_OFF = "\x1b[22m"
ITALIC_ON = "\x1b[3m"
ITALIC_OFF = "\x1b[23m"


def strip_indent(text: str) -> str:
    """
    Remove the leading whitespace shared by all non-blank lines.

    A triple-quoted string usually opens with a newline right after the quotes;
    that single newline is dropped too, so

        center('''
            hi
            there
            ''')

    stores "hi\\nthere\\n".
    """
    out = textwrap.dedent(text)
    if out.startswith("\n"):
        out = out[1:]
    return out


@dataclass(frozen=True)
class Slide:
    content: str
    format: SlideFormat
    args: tuple[str, ...] = ()

    @property
    def is_image(self) -> bool:
        return self.format is SlideFormat.IMAGE


@dataclass(frozen=True)
class Deck:
    source: Path
    slides: tuple[Slide, ...]
    mtime: float

    def __len__(self) -> int:
        return len(self.slides)


@dataclass
class DeckBuilder:
    """
    Collects slides while a deck file runs.

    The deck file sees the bound methods of one fresh builder as plain
    functions (`center`, `block`, `code`, `image`, `section`, `bold`,
    `italic`), see `namespace()`.
    """

    slides: list[Slide] = field(default_factory=list)

    def _add(self, content: str, fmt: SlideFormat, *args: str) -> Slide:
        slide = Slide(content=content, format=fmt, args=tuple(args))
        self.slides.append(slide)
        return slide

    def center(self, text: str) -> Slide:
        return self._add(strip_indent(text), SlideFormat.CENTER)

    def block(self, text: str) -> Slide:
        return self._add(strip_indent(text), SlideFormat.BLOCK)

    def code(self, text: str, language: str) -> Slide:
        lang = (language or "").strip()
        if not lang:
            raise DeckError("code(...) requires a language, e.g. code(src, 'python')")
        return self._add(strip_indent(text), SlideFormat.CODE, lang)

    def image(self, path: str | Path) -> Slide:
        return self._add(str(path), SlideFormat.IMAGE)

    def section(self, title: str) -> Slide:
        return self._add(strip_indent(title), SlideFormat.SECTION)

    @staticmethod
    def bold(text: str) -> str:
        return f"{BOLD_ON}{text}{BOLD_OFF}"

    @staticmethod
    def italic(text: str) -> str:
        return f"{ITALIC_ON}{text}{ITALIC_OFF}"

    def namespace(self) -> dict[str, Callable[..., Any]]:
        return {
            "center": self.center,
            "block": self.block,
            "code": self.code,
            "image": self.image,
            "section": self.section,
            "bold": self.bold,
            "italic": self.italic,
        }
