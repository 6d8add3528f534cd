from __future__ import annotations

import os
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from termdeck.services import background_service


@pytest.fixture
def write_deck(tmp_path: Path) -> Callable[..., Path]:
    """Write a deck file; pass mtime= to pin its modification time."""
    path = tmp_path / "deck.py"

    def _write(body: str, mtime: float | None = None) -> Path:
        path.write_text(textwrap.dedent(body), encoding="utf-8")
        if mtime is not None:
            os.utime(path, (mtime, mtime))
        return path

    return _write


@pytest.fixture
def backgrounds(monkeypatch: pytest.MonkeyPatch) -> list:
    """Record background image changes instead of calling osascript."""
    calls: list = []
    monkeypatch.setattr(background_service, "set_background_image", calls.append)
    return calls


@pytest.fixture
def pty_stdin():
    """(master_fd, slave text stream) of a fresh pseudo terminal."""
    pty = pytest.importorskip("pty")
    master, slave = pty.openpty()
    stream = os.fdopen(slave, "r", closefd=False)
    try:
        yield master, stream
    finally:
        stream.close()
        os.close(master)
        os.close(slave)
