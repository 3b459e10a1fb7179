"""List-view summaries (winner side + round count) for a game log.

Round counting reuses the parser's round-heading test so the list view and
the replay never disagree on what a round is. Winner detection prefers the
full log's `**胜利者**: <side>` declaration and falls back to the short
victory phrases the replay log and older English logs use.
"""

import re

from wolfreplay.models import GameSummary, Side
from wolfreplay.parser import is_round_heading, split_paragraphs

_WINNER_DECLARATION = re.compile(r"胜利者\**\s*[:：]\s*\**\s*(?P<side>狼人阵营|好人阵营)")

_SIDE_LABELS: dict[str, Side] = {
    "狼人阵营": "werewolf",
    "好人阵营": "villager",
}

# (marker, side) checked in order
_VICTORY_PHRASES: tuple[tuple[str, Side], ...] = (
    ("狼人阵营获胜", "werewolf"),
    ("Werewolves Win", "werewolf"),
    ("好人阵营获胜", "villager"),
    ("Villagers Win", "villager"),
)


def detect_winner(content: str) -> Side | None:
    m = _WINNER_DECLARATION.search(content)
    if m:
        return _SIDE_LABELS[m.group("side")]
    for marker, side in _VICTORY_PHRASES:
        if marker in content:
            return side
    return None


def count_rounds(content: str) -> int:
    return sum(1 for p in split_paragraphs(content) if is_round_heading(p))


def summarize_game(game_id: str, content: str) -> GameSummary:
    rounds = count_rounds(content)
    return GameSummary(
        id=game_id,
        winner=detect_winner(content),
        rounds=rounds or None,
    )
