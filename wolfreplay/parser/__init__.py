"""Werewolf game log parser.

Turns the markdown transcript written by the game into an ordered list of
typed replay events in one pass:
  1. Split into paragraphs on blank lines; drop separators, code fences,
     prompt/reply dumps and the title banner.
  2. Assignment-table paragraphs feed the role registry (participant → role)
     and emit nothing.
  3. Every other paragraph runs through the ordered rules in rules.RULES;
     the first rule that claims it emits zero or more events.
  4. Chat lines in the three plain surface syntaxes are deduplicated on
     (speaker, first 50 chars). Moderator and monologue lines are not.

Role resolution for speakers: explicit glyph → registry → "villager".

Event kinds: title, info, round, phase, message, system, result, winner.
Paragraphs that no rule claims are dropped and counted on the ParseSession.

Log shapes recognised (one paragraph each):
  ## 🔄 第 1 回合                      round
  ### 🌙 夜晚                          phase
  🎭 **主持人**: text                  moderator message
  🐺 **Player1**: 💭 text              monologue message
  🐺 **Player1**: text                 chat message
  **[Player1]** (第1轮): text          chat message
  **🐺 Player1**: text                 chat message
  - Player1 → Player2                  vote (system)
  **预言家查验**: ...                  action result
  **[Player1 遗言]**: text             last words message
  **[Player1 反思]**: text             reflection message
  ## 🏆 ... / ...获胜                  winner
  **夜晚结算**: + bullet lines         one result per line
  **anything else bold**               system
"""

from .core import classify_paragraph, parse_log  # noqa: F401
from .paragraphs import split_paragraphs  # noqa: F401
from .rules import RULES, is_round_heading  # noqa: F401
from .session import ParseSession  # noqa: F401
