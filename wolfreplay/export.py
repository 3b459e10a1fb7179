"""Static JSON artifacts for hosting the replay without the API.

Output layout (under out_dir):
  games.json        {"games": [{"id", "winner"?, "rounds"?}, ...]}  newest first
  <game-id>.json    {"id", "content"}
"""

import json
import logging
from pathlib import Path

from wolfreplay import storage
from wolfreplay.models import GameSummary
from wolfreplay.summary import summarize_game

logger = logging.getLogger(__name__)


def default_export_dir() -> Path:
    """Configured export dir; relative paths are resolved against the data dir."""
    out_dir = Path(storage.get_config()["export"]["out_dir"])
    if not out_dir.is_absolute():
        out_dir = storage.data_dir() / out_dir
    return out_dir


def export_static(out_dir: Path) -> list[GameSummary]:
    """Write one JSON file per game plus the games.json manifest."""
    out_dir.mkdir(parents=True, exist_ok=True)
    games: list[GameSummary] = []

    for game_id in storage.list_game_ids():
        content = storage.get_game_content(game_id)
        if content is None:
            continue
        games.append(summarize_game(game_id, content))
        (out_dir / f"{game_id}.json").write_text(
            json.dumps({"id": game_id, "content": content}, ensure_ascii=False)
        )

    manifest = {"games": [g.model_dump(exclude_none=True) for g in games]}
    (out_dir / "games.json").write_text(json.dumps(manifest, ensure_ascii=False))
    logger.info(f"Generated static data for {len(games)} games in {out_dir}")
    return games
