"""Ordered paragraph classifier rules.

Each rule takes a trimmed paragraph and the ParseSession and returns None
when it does not apply, or a (possibly empty) list of events when it claims
the paragraph. RULES is evaluated first-match-wins; the order is part of the
grammar because several cues are prefixes of one another (a monologue line
is also a valid glyph chat line, a last-words line also starts with `**`).

Reveal delays (ms):
  round 400, phase 300, moderator 300, monologue/reflection 500,
  chat 400, vote 200, action result 500, last words 500, winner 800,
  night resolution 300 per line, generic system 200
"""

import re
from collections.abc import Callable

from wolfreplay.models import Event
from wolfreplay.roles import GLYPH_ROLES, MODERATOR_NAME, MODERATOR_ROLE, PLAYER_GLYPHS

from .session import ParseSession

Rule = Callable[[str, ParseSession], list[Event] | None]

MONOLOGUE_MARK = "💭"
LAST_WORDS_MARK = "💀"
VICTORY_GLYPH = "🏆"
VICTORY_KEYWORD = "获胜"
NIGHT_RESOLUTION_KEYWORD = "夜晚结算"
ROUND_PREFIXES = ("## 🔄", "## 第")

ACTION_KEYWORDS = (
    "决定击杀",
    "查验",
    "投票结果",
    "使用解药",
    "使用毒药",
    "射杀",
)

# Catch-all system lines must not swallow prompt, reflection or last-words blocks
_SYSTEM_EXCLUDES = ("提示词", "反思", "遗言")

_NAME = r"[A-Za-z0-9_]+"
_GLYPH = "|".join(re.escape(g) for g in GLYPH_ROLES)
_PLAYER_GLYPH = "|".join(re.escape(g) for g in PLAYER_GLYPHS)

RX_MODERATOR = re.compile(rf"🎭\s*\*\*{MODERATOR_NAME}\*\*:\s*(?P<text>.+)")
RX_MONOLOGUE = re.compile(
    rf"^(?P<glyph>{_GLYPH})\s*\*\*(?P<player>{_NAME})\*\*:\s*{MONOLOGUE_MARK}\s*(?P<text>.+)$"
)
RX_GLYPH_CHAT = re.compile(rf"^(?P<glyph>{_GLYPH})\s*\*\*(?P<player>{_NAME})\*\*:\s*(?P<text>.+)$")
RX_BRACKET_CHAT = re.compile(rf"\*\*\[(?P<player>{_NAME})\]\*\*(?:\s*\(第\d+轮\))?:\s*(?P<text>.+)")
RX_BOLD_GLYPH_CHAT = re.compile(rf"\*\*(?:{_PLAYER_GLYPH})\s*(?P<player>{_NAME})\*\*:\s*(?P<text>.+)")
RX_VOTE = re.compile(
    rf"^-\s*\*?\*?(?P<voter>{_NAME})\*?\*?\s*(?:→|投票[:：])\s*(?P<target>{_NAME})"
)
RX_LAST_WORDS = re.compile(rf"\*\*\[(?P<player>{_NAME})\s*遗言\]\*\*:\s*(?P<text>.+)")
RX_REFLECTION = re.compile(rf"\*?\*?\[(?P<player>{_NAME})\s*反思\]\*?\*?[:：]\s*(?P<text>.*)")

RX_VISIBLE_TO = re.compile(rf"\[仅{_NAME}可见\]\s*")
RX_REFLECTION_LABEL = re.compile(r"^反思[:：]\s*")
RX_QUOTES = re.compile(r'^["“]|["”]$')
RX_BULLET = re.compile(r"^-\s*")


def is_round_heading(paragraph: str) -> bool:
    return paragraph.startswith(ROUND_PREFIXES)


def _strip_emphasis(text: str) -> str:
    return text.replace("**", "")


def _chat(session: ParseSession, player: str, text: str, role: str) -> list[Event]:
    """Emit a deduplicated chat message."""
    if session.is_duplicate(player, text):
        return []
    return [Event(kind="message", text=text, reveal_delay=400, speaker=player, role=role)]


# ── Structure ──────────────────────────────────────────────


def round_heading(p: str, session: ParseSession) -> list[Event] | None:
    if not is_round_heading(p):
        return None
    return [Event(kind="round", text=p.replace("## ", "", 1), reveal_delay=400)]


def phase_heading(p: str, session: ParseSession) -> list[Event] | None:
    if not p.startswith("### "):
        return None
    return [Event(kind="phase", text=p.replace("### ", "", 1), reveal_delay=300)]


# ── Speech ─────────────────────────────────────────────────


def moderator_line(p: str, session: ParseSession) -> list[Event] | None:
    """Moderator lines are never deduplicated; phrasing legitimately repeats."""
    m = RX_MODERATOR.search(p)
    if not m:
        return None
    return [Event(
        kind="message",
        text=m.group("text"),
        reveal_delay=300,
        speaker=MODERATOR_NAME,
        role=MODERATOR_ROLE,
    )]


def monologue_line(p: str, session: ParseSession) -> list[Event] | None:
    m = RX_MONOLOGUE.match(p)
    if not m:
        return None
    player = m.group("player")
    text = RX_VISIBLE_TO.sub("", m.group("text"), count=1).strip()
    if not text:
        return []
    return [Event(
        kind="message",
        text=f"{MONOLOGUE_MARK} {text}",
        reveal_delay=500,
        speaker=player,
        role=session.resolve_role(player, m.group("glyph")),
    )]


def glyph_chat_line(p: str, session: ParseSession) -> list[Event] | None:
    m = RX_GLYPH_CHAT.match(p)
    if not m:
        return None
    player = m.group("player")
    text = RX_QUOTES.sub("", m.group("text"))
    return _chat(session, player, text, session.resolve_role(player, m.group("glyph")))


def bracket_chat_line(p: str, session: ParseSession) -> list[Event] | None:
    """`**[Player1]**: text`, optionally with a `(第N轮)` annotation."""
    m = RX_BRACKET_CHAT.search(p)
    if not m:
        return None
    player = m.group("player")
    return _chat(session, player, m.group("text"), session.resolve_role(player))


def bold_glyph_chat_line(p: str, session: ParseSession) -> list[Event] | None:
    """`**🐺 Player1**: text`. The glyph is decorative here; only the registry decides the role."""
    m = RX_BOLD_GLYPH_CHAT.search(p)
    if not m:
        return None
    player = m.group("player")
    return _chat(session, player, m.group("text"), session.resolve_role(player))


# ── Outcomes ───────────────────────────────────────────────


def vote_line(p: str, session: ParseSession) -> list[Event] | None:
    m = RX_VOTE.match(p)
    if not m:
        return None
    return [Event(
        kind="system",
        text=f"{m.group('voter')} 投票给 {m.group('target')}",
        reveal_delay=200,
    )]


def _is_night_resolution_block(p: str) -> bool:
    return NIGHT_RESOLUTION_KEYWORD in p.split("\n", 1)[0]


def action_result(p: str, session: ParseSession) -> list[Event] | None:
    if _is_night_resolution_block(p):
        return None
    if not any(k in p for k in ACTION_KEYWORDS):
        return None
    return [Event(kind="result", text=_strip_emphasis(p), reveal_delay=500, is_action_result=True)]


def last_words_line(p: str, session: ParseSession) -> list[Event] | None:
    m = RX_LAST_WORDS.search(p)
    if not m:
        return None
    player = m.group("player")
    return [Event(
        kind="message",
        text=f"{LAST_WORDS_MARK} 遗言: {m.group('text')}",
        reveal_delay=500,
        speaker=player,
        role=session.resolve_role(player),
    )]


def reflection_line(p: str, session: ParseSession) -> list[Event] | None:
    """Legacy `**[Player1 反思]**: ...` monologue shape."""
    m = RX_REFLECTION.search(p)
    if not m:
        return None
    text = RX_VISIBLE_TO.sub("", m.group("text"), count=1)
    text = RX_REFLECTION_LABEL.sub("", text).strip()
    if not text:
        return []
    player = m.group("player")
    return [Event(
        kind="message",
        text=f"{MONOLOGUE_MARK} {text}",
        reveal_delay=500,
        speaker=player,
        role=session.resolve_role(player),
    )]


def winner_line(p: str, session: ParseSession) -> list[Event] | None:
    if VICTORY_GLYPH not in p and VICTORY_KEYWORD not in p:
        return None
    return [Event(kind="winner", text=re.sub(r"[#*]", "", p).strip(), reveal_delay=800)]


def night_resolution(p: str, session: ParseSession) -> list[Event] | None:
    """One result per non-blank line; the bare block heading itself is not an event."""
    if NIGHT_RESOLUTION_KEYWORD not in p:
        return None
    events = []
    for line in p.split("\n"):
        text = _strip_emphasis(RX_BULLET.sub("", line.strip())).strip()
        if not text or text.rstrip(":：").strip() == NIGHT_RESOLUTION_KEYWORD:
            continue
        events.append(Event(kind="result", text=text, reveal_delay=300))
    return events


def system_line(p: str, session: ParseSession) -> list[Event] | None:
    if not p.startswith("**") or any(k in p for k in _SYSTEM_EXCLUDES):
        return None
    return [Event(kind="system", text=_strip_emphasis(p).strip(), reveal_delay=200)]


RULES: list[tuple[str, Rule]] = [
    ("round", round_heading),
    ("phase", phase_heading),
    ("moderator", moderator_line),
    ("monologue", monologue_line),
    ("glyph_chat", glyph_chat_line),
    ("bracket_chat", bracket_chat_line),
    ("bold_glyph_chat", bold_glyph_chat_line),
    ("vote", vote_line),
    ("action_result", action_result),
    ("last_words", last_words_line),
    ("reflection", reflection_line),
    ("winner", winner_line),
    ("night_resolution", night_resolution),
    ("system", system_line),
]
