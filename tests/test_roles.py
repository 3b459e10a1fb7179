"""Tests for role metadata lookups."""

from wolfreplay.roles import GLYPH_ROLES, PLAYER_GLYPHS, ROLES, role_color, role_icon, role_info


def test_canonical_and_localized_share_metadata():
    assert ROLES["werewolf"] == ROLES["狼人"]
    assert ROLES["seer"] == ROLES["预言家"]
    assert ROLES["witch"]["icon"] == "🧙‍♀️"


def test_role_info_defaults_to_villager():
    assert role_info(None) == ROLES["villager"]
    assert role_info("unknown") == ROLES["villager"]
    assert role_info("moderator")["name"] == "主持人"


def test_role_info_returns_copy():
    info = role_info("hunter")
    info["color"] = "#000000"
    assert ROLES["hunter"]["color"] == "#f59e0b"


def test_role_color():
    assert role_color("werewolf") == "#dc2626"
    assert role_color("WEREWOLF") == "#dc2626"
    assert role_color("村民") == "#22c55e"
    assert role_color(None) == "#ededed"
    assert role_color("moderator") == "#ededed"


def test_role_icon():
    assert role_icon("seer") == "🔮"
    assert role_icon("猎人") == "🎯"
    assert role_icon("") == "👤"
    assert role_icon("ghost") == "👤"


def test_player_glyphs_exclude_moderator():
    assert "🎭" in GLYPH_ROLES
    assert "🎭" not in PLAYER_GLYPHS
    assert len(PLAYER_GLYPHS) == 5
