from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from PIL import Image

from ..config import iterm_app

logger = logging.getLogger("termdeck.background_service")


def _applescript(image_path: str) -> str:
    # AppleScript string literal: escape backslashes and quotes.
    quoted = image_path.replace("\\", "\\\\").replace('"', '\\"')
    return (
        f'tell application "{iterm_app()}"\n'
        "  tell current session of current window\n"
        f'    set background image to "{quoted}"\n'
        "  end tell\n"
        "end tell"
    )


def check_image(path: Path) -> None:
    """
    Fail early on a missing or unreadable image (FileNotFoundError /
    PIL.UnidentifiedImageError) instead of letting the terminal ignore it.
    """
    with Image.open(path) as img:
        img.verify()


def set_background_image(path: str | Path | None) -> None:
    """
    Show `path` as the terminal background image; None clears it.

    Only works inside iTerm2 on macOS. Anywhere else osascript is missing or
    fails, and that error propagates.
    """
    if path is None:
        target = ""
    else:
        p = Path(path).resolve()
        check_image(p)
        target = str(p)

    logger.info("background image -> %s", target or "<none>")
    subprocess.run(["osascript", "-e", _applescript(target)], check=True, stdout=subprocess.DEVNULL)
