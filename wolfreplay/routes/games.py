"""Game list, raw transcript, and parsed replay events."""

from fastapi import APIRouter, HTTPException, Query

from wolfreplay import storage
from wolfreplay.parser import ParseSession, parse_log

router = APIRouter()


@router.get("/games")
async def list_games():
    """List game sessions with winner and round count, newest first."""
    if not storage.logs_available():
        return {"games": [], "error": "Logs directory not found"}
    return {"games": [g.model_dump(exclude_none=True) for g in storage.list_games()]}


@router.get("/games/{game_id}")
async def get_game(game_id: str):
    """Get the raw markdown transcript of one game."""
    content = storage.get_game_content(game_id)
    if content is None:
        raise HTTPException(404, "Game not found")
    return {"id": game_id, "content": content}


@router.get("/games/{game_id}/events")
async def get_game_events(game_id: str, upto: int | None = Query(default=None, ge=0)):
    """Parse a game log into replay events; `upto` returns only the first k."""
    content = storage.get_game_content(game_id)
    if content is None:
        raise HTTPException(404, "Game not found")
    session = ParseSession()
    events = parse_log(content, session)
    visible = events if upto is None else events[:upto]
    return {
        "id": game_id,
        "events": [e.to_dict() for e in visible],
        "total": len(events),
        "unmatched": session.unmatched,
    }
