"""Filesystem helpers that map OSError onto cssrefactor's error types."""

from __future__ import annotations

import logging
from pathlib import Path

from cssrefactor.errors import InputReadError, OutputWriteError

logger = logging.getLogger(__name__)


def read_css(path: str | Path) -> str:
    """Read a whole CSS file as UTF-8 text."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(path, str(exc)) from exc
    logger.debug("read %s (%d chars)", path, len(text))
    return text


def ensure_dir(path: str | Path) -> Path:
    path = Path(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputWriteError(path, str(exc)) from exc
    return path


def write_text(path: str | Path, text: str) -> Path:
    """Write *text* to *path* in one blocking write."""
    path = Path(path)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputWriteError(path, str(exc)) from exc
    logger.info("wrote %s (%d chars)", path, len(text))
    return path
