"""Game log discovery: one subdirectory per session holding the transcript."""

import logging
from pathlib import Path

from wolfreplay.models import GameSummary
from wolfreplay.summary import summarize_game

from .config import get_config
from .core import is_plain_name, logs_available, logs_dir

logger = logging.getLogger(__name__)


def _log_filename() -> str | None:
    filename = get_config()["log_filename"]
    if not is_plain_name(filename):
        logger.warning(f"Ignoring unsafe log_filename setting: {filename!r}")
        return None
    return filename


def _log_path(game_id: str, filename: str) -> Path:
    return logs_dir() / game_id / filename


def list_game_ids() -> list[str]:
    """Session ids that have a transcript, newest first (ids are timestamps)."""
    filename = _log_filename()
    if filename is None or not logs_available():
        return []
    ids = [
        entry.name
        for entry in logs_dir().iterdir()
        if entry.is_dir() and (entry / filename).is_file()
    ]
    return sorted(ids, reverse=True)


def get_game_content(game_id: str) -> str | None:
    """Raw markdown for a session, or None if missing."""
    if not is_plain_name(game_id) or not logs_available():
        return None
    filename = _log_filename()
    if filename is None:
        return None
    path = _log_path(game_id, filename)
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Cannot read game log {path}: {e}")
        return None


def list_games() -> list[GameSummary]:
    games = []
    for game_id in list_game_ids():
        content = get_game_content(game_id)
        if content is None:
            continue
        games.append(summarize_game(game_id, content))
    return games
