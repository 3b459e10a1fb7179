"""Core domain models.

The parser emits Event records; the storage and export layers describe
sessions with GameSummary. Pydantic is used for validation and
serialisation at every data boundary.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

EventKind = Literal[
    "title",
    "info",  # reserved, never emitted by the parser
    "round",
    "phase",
    "message",
    "system",
    "result",
    "winner",
]

Side = Literal["werewolf", "villager"]


class Event(BaseModel):
    """A single replay step produced from one log paragraph."""

    kind: EventKind
    text: str
    reveal_delay: int = Field(ge=0)  # milliseconds, used by playback only
    speaker: str | None = None  # message events only
    role: str | None = None  # message events only
    is_action_result: bool | None = None  # result events from game actions

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


class GameSummary(BaseModel):
    """List-view metadata for one game session."""

    id: str
    winner: Side | None = None
    rounds: int | None = None
