import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from wolfreplay.export import default_export_dir
from wolfreplay.routes import router
from wolfreplay import storage

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def _default_logs_dir(data_dir: Path) -> Path | None:
    if os.getenv("LOGS_DIR"):
        return Path(os.environ["LOGS_DIR"])
    # Game writes logs/ next to the project; fall back to the data dir layout
    return storage.resolve_logs_dir([
        Path.cwd().parent / "logs",
        Path.cwd() / "logs",
        data_dir / "logs",
    ])


def create_app(data_dir: Path | None = None, logs_dir: Path | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage.init_storage(resolved, logs_dir or _default_logs_dir(resolved))

    app = FastAPI(title="Werewolf Replay")
    app.include_router(router, prefix="/api")

    # Serve pre-generated static artifacts (games.json, <id>.json) if exported
    export_dir = default_export_dir()
    if export_dir.is_dir():
        app.mount("/data", StaticFiles(directory=export_dir), name="data")

    return app


# Default app instance for uvicorn (uses DATA_DIR / LOGS_DIR env vars or defaults)
app = create_app()
