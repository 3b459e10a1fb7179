"""Role display metadata and glyph lookups.

Roles are keyed both by canonical id (werewolf, seer, ...) and by the
localized label the game logs use in assignment tables (狼人, 预言家, ...).
Each maps to {"name": label, "icon": glyph, "color": hex colour}.

GLYPH_ROLES maps the speaker glyph in front of a chat line to the canonical
role id. Unknown roles render as a villager avatar; colour and icon lookups
fall back to a neutral grey and a generic silhouette.
"""

from types import MappingProxyType

DEFAULT_ROLE = "villager"
MODERATOR_ROLE = "moderator"
MODERATOR_NAME = "主持人"

UNKNOWN_COLOR = "#ededed"
UNKNOWN_ICON = "👤"

_WEREWOLF = {"name": "狼人", "icon": "🐺", "color": "#dc2626"}
_VILLAGER = {"name": "村民", "icon": "👨‍🌾", "color": "#22c55e"}
_SEER = {"name": "预言家", "icon": "🔮", "color": "#a855f7"}
_WITCH = {"name": "女巫", "icon": "🧙‍♀️", "color": "#06b6d4"}
_HUNTER = {"name": "猎人", "icon": "🎯", "color": "#f59e0b"}
_MODERATOR = {"name": MODERATOR_NAME, "icon": "🎭", "color": "#6b7280"}

ROLES = MappingProxyType({
    "werewolf": _WEREWOLF,
    "villager": _VILLAGER,
    "seer": _SEER,
    "witch": _WITCH,
    "hunter": _HUNTER,
    "狼人": _WEREWOLF,
    "村民": _VILLAGER,
    "预言家": _SEER,
    "女巫": _WITCH,
    "猎人": _HUNTER,
    MODERATOR_ROLE: _MODERATOR,
})

GLYPH_ROLES = MappingProxyType({
    "🐺": "werewolf",
    "🔮": "seer",
    "🧙‍♀️": "witch",
    "🎯": "hunter",
    "👨‍🌾": "villager",
    "🎭": MODERATOR_ROLE,
})

# Player glyphs only (the moderator glyph never prefixes a bold player name)
PLAYER_GLYPHS = tuple(g for g, r in GLYPH_ROLES.items() if r != MODERATOR_ROLE)


def role_info(role: str | None) -> dict[str, str]:
    """Return display metadata for a role, defaulting to the villager entry."""
    return dict(ROLES.get(role or "", ROLES[DEFAULT_ROLE]))


def role_color(role: str | None) -> str:
    if not role:
        return UNKNOWN_COLOR
    if role == MODERATOR_ROLE:
        return UNKNOWN_COLOR
    info = ROLES.get(role.lower()) or ROLES.get(role)
    return info["color"] if info else UNKNOWN_COLOR


def role_icon(role: str | None) -> str:
    if not role:
        return UNKNOWN_ICON
    if role == MODERATOR_ROLE:
        return UNKNOWN_ICON
    info = ROLES.get(role.lower()) or ROLES.get(role)
    return info["icon"] if info else UNKNOWN_ICON
