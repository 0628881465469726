"""Saving a game transcript to a text file."""

from __future__ import annotations

import logging
import re
from pathlib import Path

_LOGGER = logging.getLogger(__name__)

SAVE_SUFFIX = ".txt"
_FORBIDDEN = re.compile(r'[<>:"/\\|?*\x00-\x1f]')


def sanitize_filename(name: str, directory: Path | None = None) -> Path | None:
    """Turn user input into a ``.txt`` path, or ``None`` if it is unusable.

    Only bare file names are accepted: path separators, reserved
    characters and the ``.``/``..`` names are rejected.
    """
    cleaned = name.strip()
    if not cleaned or cleaned in (".", "..") or _FORBIDDEN.search(cleaned):
        _LOGGER.warning("Rejected save file name: %r", name)
        return None

    if not cleaned.lower().endswith(SAVE_SUFFIX):
        cleaned += SAVE_SUFFIX

    path = Path(cleaned)
    if directory is not None:
        path = directory / path
    return path


def save_game(text: str, path: Path) -> bool:
    """Write *text* to a new file at *path*.

    Returns ``False`` if the file already exists or cannot be written;
    in either case no partial file is left behind.
    """
    try:
        handle = path.open("x", encoding="utf-8", newline="")
    except OSError as exc:
        _LOGGER.warning("Cannot create %s: %s", path, exc)
        return False

    try:
        with handle:
            handle.write(text)
    except OSError as exc:
        _LOGGER.warning("Failed writing %s: %s", path, exc)
        path.unlink(missing_ok=True)
        return False

    _LOGGER.info("Game saved to %s", path)
    return True
