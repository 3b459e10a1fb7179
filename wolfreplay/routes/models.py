"""Pydantic request models for API endpoints."""

from pydantic import BaseModel, Field


class PlaybackSettings(BaseModel):
    speed: float | None = Field(default=None, gt=0)
    min_delay_ms: int | None = Field(default=None, ge=0)
    default_delay_ms: int | None = Field(default=None, ge=0)
    autoplay: bool | None = None


class ExportSettings(BaseModel):
    out_dir: str | None = None


class UpdateSettings(BaseModel):
    log_filename: str | None = None
    playback: PlaybackSettings | None = None
    export: ExportSettings | None = None
