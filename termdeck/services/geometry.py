from __future__ import annotations

import re

# Sequences that take no room on screen:
# - ESC[2J            clear screen
# - ESC[H, ESC[r;cH   cursor home / move
# - ESC[m ESC[0m ESC[00m ESC[1m ESC[01m ESC[3m ESC[03m ESC[22m ESC[23m
#                     reset, bold and italic on/off
# Anything else (colors included) is counted as text.
_CONTROL_RE = re.compile(r"\x1b\[(?:2J|(?:\d+;\d+)?H|(?:0?[013]|2[23])?m)")


def visible_length(line: str) -> int:
    return len(_CONTROL_RE.sub("", line))


def split_lines(content: str) -> list[str]:
    # A final newline does not open another line.
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def line_count(content: str) -> int:
    return len(split_lines(content))


def content_width(content: str) -> int:
    return max((visible_length(ln) for ln in split_lines(content)), default=0)


def center_offset(axis_size: int, content_size: int) -> int:
    """1-based start position centering content_size cells in axis_size cells."""
    return max(1, 1 + (axis_size - content_size) // 2)
