from __future__ import annotations

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import get_lexer_by_name

# Monochrome style: bold/italic only, so code slides stay readable on any
# background image.
STYLE = "bw"


def highlight_code(text: str, language: str) -> str:
    """
    Color `text` for a 256-color terminal.
    An unknown language raises pygments.util.ClassNotFound.
    """
    lexer = get_lexer_by_name(language, stripnl=False)
    formatter = Terminal256Formatter(style=STYLE)
    return highlight(text, lexer, formatter)
