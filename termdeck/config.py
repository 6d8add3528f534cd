from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CHAR_DELAY = 0.002


def char_delay(fallback: float = DEFAULT_CHAR_DELAY) -> float:
    """
    Seconds to wait between characters while typing a slide out.
    TERMDECK_CHAR_DELAY=0 turns the typewriter effect off.
    """
    raw = (os.environ.get("TERMDECK_CHAR_DELAY") or "").strip()
    if not raw:
        return fallback
    try:
        value = float(raw)
    except ValueError:
        return fallback
    return max(0.0, value)


def log_file() -> Path | None:
    raw = (os.environ.get("TERMDECK_LOG_FILE") or "").strip()
    return Path(raw).expanduser() if raw else None


def log_level() -> str:
    return (os.environ.get("TERMDECK_LOG_LEVEL") or "INFO").strip().upper()


def iterm_app() -> str:
    # AppleScript application name used for background images.
    return (os.environ.get("TERMDECK_ITERM_APP") or "iTerm").strip()
