from __future__ import annotations

import shutil
import sys
import termios
import time
import tty
from contextlib import contextmanager
from typing import Iterator, TextIO

from ..state import Viewport

ESC = "\x1b"
CLEAR_SCREEN = "\x1b[2J\x1b[H"

PAGE_UP = "\x1b[5~"
PAGE_DOWN = "\x1b[6~"


@contextmanager
def raw_mode(stream: TextIO) -> Iterator[None]:
    """
    Unbuffered, unechoed input for the duration of the block.
    The previous terminal settings come back on every way out of the block.
    Streams that are not a terminal are left alone.
    """
    if not stream.isatty():
        yield
        return

    fd = stream.fileno()
    old = termios.tcgetattr(fd)
    try:
        # TCSANOW keeps keys typed ahead (during a reveal or reload) queued.
        tty.setraw(fd, termios.TCSANOW)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


def read_command(stream: TextIO | None = None) -> str:
    """
    Read one key. An ESC is always taken as the start of a 4 byte sequence
    (Page Up / Page Down are ESC [ 5 ~ and ESC [ 6 ~), so any other escape
    sequence comes back as a token that matches no command.
    Returns "" at end of input.
    """
    stream = stream or sys.stdin
    with raw_mode(stream):
        token = stream.read(1)
        if token == ESC:
            token += stream.read(3)
    return token


def viewport() -> Viewport:
    size = shutil.get_terminal_size()
    return Viewport(rows=size.lines, cols=size.columns)


def clear_screen(out: TextIO) -> None:
    out.write(CLEAR_SCREEN)
    out.flush()


def type_out(text: str, out: TextIO, delay: float = 0.0) -> None:
    """Write `text` one character at a time, pausing `delay` seconds between them."""
    for ch in text:
        out.write(ch)
        out.flush()
        if delay > 0:
            time.sleep(delay)
