from __future__ import annotations

from pathlib import Path
from typing import Callable

from ..slides import Slide, SlideFormat
from ..state import Viewport
from . import background_service, highlight_service
from .geometry import center_offset, content_width, line_count, split_lines, visible_length

RULE_CHAR = "─"
# Must stay 5 cells wide, section_banner sizes the rule around it.
ORNAMENT = "┤ ┼ ├"


def move_to(row: int, col: int) -> str:
    return f"\x1b[{row};{col}H"


def render_center(content: str, viewport: Viewport) -> str:
    """Center every line on its own; the lines as a whole are centered vertically."""
    row = center_offset(viewport.rows, line_count(content))
    out: list[str] = []
    for line in split_lines(content):
        col = center_offset(viewport.cols, visible_length(line))
        out.append(move_to(row, col) + line)
        row += 1
    return "".join(out)


def render_block(content: str, viewport: Viewport) -> str:
    """Center the content as one rectangle, keeping its inner alignment."""
    row = center_offset(viewport.rows, line_count(content))
    col = center_offset(viewport.cols, content_width(content))
    return "".join(move_to(row + i, col) + line for i, line in enumerate(split_lines(content)))


def section_rule(width: int) -> str:
    rfil = max(1, (width - len(ORNAMENT)) // 2)
    lfil = max(1, width - len(ORNAMENT) - rfil)
    return RULE_CHAR * lfil + ORNAMENT + RULE_CHAR * rfil


def section_banner(title: str) -> str:
    rule = section_rule(content_width(title))
    return "\n".join([rule, "", title.rstrip("\n"), "", rule]) + "\n"


def render_section(content: str, viewport: Viewport) -> str:
    return render_center(section_banner(content), viewport)


def render_code(slide: Slide, viewport: Viewport) -> str:
    colored = highlight_service.highlight_code(slide.content, slide.args[0])
    return render_block(colored, viewport)


def resolve_image(content: str, base_dir: Path | None = None) -> Path:
    p = Path(content).expanduser()
    if not p.is_absolute() and base_dir is not None:
        p = base_dir / p
    return p.resolve()


def render_image(slide: Slide, base_dir: Path | None = None) -> None:
    # The terminal draws the background; nothing to type out.
    background_service.set_background_image(resolve_image(slide.content, base_dir))
    return None


_RENDERERS: dict[SlideFormat, Callable[[Slide, Viewport, Path | None], str | None]] = {
    SlideFormat.CENTER: lambda s, v, _d: render_center(s.content, v),
    SlideFormat.BLOCK: lambda s, v, _d: render_block(s.content, v),
    SlideFormat.SECTION: lambda s, v, _d: render_section(s.content, v),
    SlideFormat.CODE: lambda s, v, _d: render_code(s, v),
    SlideFormat.IMAGE: lambda s, _v, d: render_image(s, d),
}

_missing = set(SlideFormat) - set(_RENDERERS)
if _missing:
    raise RuntimeError(f"No renderer for slide formats: {sorted(f.value for f in _missing)}")


def render(slide: Slide, viewport: Viewport, *, base_dir: Path | None = None) -> str | None:
    """
    Positioned text for `slide` (cursor moves + text), or None for image
    slides, which only switch the terminal background.
    Relative image paths resolve against `base_dir` (the deck's folder).
    """
    return _RENDERERS[slide.format](slide, viewport, base_dir)
