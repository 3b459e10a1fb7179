"""Tests for wolfreplay.models."""

import pytest
from pydantic import ValidationError

from wolfreplay.models import Event, GameSummary


class TestEvent:
    def test_required_fields(self) -> None:
        e = Event(kind="round", text="第 1 回合", reveal_delay=400)
        assert e.kind == "round"
        assert e.speaker is None
        assert e.role is None
        assert e.is_action_result is None

    def test_all_kinds_accepted(self) -> None:
        for kind in ["title", "info", "round", "phase", "message", "system", "result", "winner"]:
            assert Event(kind=kind, text="x", reveal_delay=0).kind == kind

    def test_invalid_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Event(kind="gossip", text="x", reveal_delay=0)

    def test_negative_delay_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Event(kind="round", text="x", reveal_delay=-1)

    def test_to_dict_excludes_none(self) -> None:
        e = Event(kind="result", text="x", reveal_delay=500, is_action_result=True)
        assert e.to_dict() == {"kind": "result", "text": "x", "reveal_delay": 500, "is_action_result": True}

    def test_serialise_roundtrip(self) -> None:
        e = Event(kind="message", text="hi", reveal_delay=400, speaker="Player1", role="seer")
        assert Event.model_validate(e.model_dump()) == e


class TestGameSummary:
    def test_optional_fields(self) -> None:
        s = GameSummary(id="20250101_120000")
        assert s.winner is None
        assert s.rounds is None

    def test_invalid_winner_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GameSummary(id="x", winner="nobody")
