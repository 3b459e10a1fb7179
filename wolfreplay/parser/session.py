"""Per-parse state: role registry, chat dedup set, and match counters.

A ParseSession is created for exactly one parse_log() call. Nothing here is
module-level, so concurrent parses never share registry or dedup state.

Role assignment tables look like:

  | 玩家 | 角色 |
  |------|------|
  | Player1 | werewolf |

Header and separator rows are skipped; data rows upsert participant → role
(last write wins). A paragraph is consumed without events only when at
least one of its lines is a header, separator or data row; other
pipe-prefixed lines leave it to the classifier.
"""

import re
from collections import Counter
from dataclasses import dataclass, field

from wolfreplay.roles import DEFAULT_ROLE, GLYPH_ROLES

DEDUP_PREFIX_LEN = 50

_TABLE_HEADER = re.compile(r"^\|\s*玩家\s*\|\s*角色\s*\|")
_TABLE_SEPARATOR = re.compile(r"^\|[\s:|-]*-[\s:|-]*$")
_TABLE_ROW = re.compile(r"^\|\s*(?P<player>[A-Za-z0-9_]+)\s*\|\s*(?P<role>[^|\s]+)\s*\|")


@dataclass
class ParseSession:
    roles: dict[str, str] = field(default_factory=dict)
    seen_messages: set[str] = field(default_factory=set)
    paragraphs: int = 0
    dropped: int = 0
    table_paragraphs: int = 0
    unmatched: int = 0
    rule_hits: Counter = field(default_factory=Counter)

    # ── Role registry ────────────────────────────────────────

    def consume_table(self, paragraph: str) -> bool:
        """Register assignment-table rows. Returns True if the paragraph was a table."""
        is_table = False
        for line in paragraph.split("\n"):
            line = line.strip()
            if _TABLE_HEADER.match(line) or _TABLE_SEPARATOR.match(line):
                is_table = True
                continue
            m = _TABLE_ROW.match(line)
            if m:
                self.roles[m.group("player")] = m.group("role")
                is_table = True
        if is_table:
            self.table_paragraphs += 1
        return is_table

    def resolve_role(self, player: str, glyph: str | None = None) -> str:
        """Explicit glyph first, then the registry, then the default role."""
        if glyph and glyph in GLYPH_ROLES:
            return GLYPH_ROLES[glyph]
        return self.roles.get(player) or DEFAULT_ROLE

    # ── Dedup ────────────────────────────────────────────────

    def is_duplicate(self, player: str, text: str) -> bool:
        """Check and record a chat message; True if it was seen before."""
        key = f"{player}:{text[:DEDUP_PREFIX_LEN]}"
        if key in self.seen_messages:
            return True
        self.seen_messages.add(key)
        return False

    def stats(self) -> dict:
        return {
            "paragraphs": self.paragraphs,
            "dropped": self.dropped,
            "tables": self.table_paragraphs,
            "unmatched": self.unmatched,
            "rules": dict(self.rule_hits),
        }
