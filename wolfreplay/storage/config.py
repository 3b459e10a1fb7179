"""App settings (log discovery, playback defaults, static export)."""

import json
from pathlib import Path
from typing import Any

from .core import data_dir, is_plain_name

_CONFIG_DEFAULTS: dict[str, Any] = {
    "log_filename": "full_log.md",
    "playback": {
        "speed": 1.0,
        "min_delay_ms": 200,
        "default_delay_ms": 400,
        "autoplay": True,
    },
    "export": {
        "out_dir": "public/data",
    },
}

_GROUPS = ("playback", "export")


def _config_path() -> Path:
    return data_dir() / "config.json"


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config: dict[str, Any] = json.loads(json.dumps(_CONFIG_DEFAULTS))
    path = _config_path()
    if path.is_file():
        stored = json.loads(path.read_text())
        if "log_filename" in stored:
            config["log_filename"] = stored["log_filename"]
        for group in _GROUPS:
            vals = stored.get(group)
            if isinstance(vals, dict):
                config[group].update(
                    {k: v for k, v in vals.items() if k in config[group]}
                )
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into config and persist. Returns full config.

    Raises ValueError if log_filename is not a single path component.
    """
    config = get_config()
    if "log_filename" in fields:
        if not is_plain_name(fields["log_filename"]):
            raise ValueError(f"log_filename must be a plain file name, got {fields['log_filename']!r}")
        config["log_filename"] = fields["log_filename"]
    for group in _GROUPS:
        vals = fields.get(group)
        if isinstance(vals, dict):
            config[group].update(
                {k: v for k, v in vals.items() if k in config[group]}
            )
    _config_path().write_text(json.dumps(config, indent=2))
    return config
