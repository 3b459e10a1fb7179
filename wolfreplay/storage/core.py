"""Storage initialization and path helpers."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

_data_dir: Path | None = None
_logs_dir: Path | None = None


def init_storage(data_dir: Path, logs_dir: Path | None = None) -> None:
    """Point storage at a data dir. The logs dir defaults to data_dir/logs and is never created."""
    global _data_dir, _logs_dir
    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    _logs_dir = logs_dir if logs_dir is not None else data_dir / "logs"
    if not _logs_dir.is_dir():
        logger.warning(f"Logs directory not found: {_logs_dir}")


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def logs_dir() -> Path:
    assert _logs_dir is not None, "Call init_storage() before using storage"
    return _logs_dir


def logs_available() -> bool:
    return logs_dir().is_dir()


def resolve_logs_dir(candidates: list[Path]) -> Path | None:
    """Return the first candidate that exists as a directory."""
    for path in candidates:
        if path.is_dir():
            return path
    return None


def is_plain_name(name: str) -> bool:
    """True for a single path component (no separators, not `.` or `..`)."""
    return bool(name) and name not in (".", "..") and Path(name).name == name
