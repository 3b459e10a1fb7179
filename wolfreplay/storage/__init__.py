"""File-based storage for game logs and app settings.

Data layout:
  data/
    config.json              App settings (log filename, playback, export)
    logs/                    Default logs directory (LOGS_DIR overrides it)
      <game-id>/             One directory per game session, id is a timestamp
        full_log.md          Markdown transcript written by the game

The logs directory is read-only from the app's point of view and is never
created here. A missing directory is not an error: listings come back empty
and callers report "Logs directory not found" to the user.

Config: get_config() returns defaults merged with stored values.
update_config() applies partial updates: log_filename overwritten, the
playback and export groups merged key-by-key (unknown keys ignored).
"""

# Re-export all public symbols so `from wolfreplay import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    init_storage,
    is_plain_name,
    logs_available,
    logs_dir,
    resolve_logs_dir,
)

from .games import (  # noqa: F401
    get_game_content,
    list_game_ids,
    list_games,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)
