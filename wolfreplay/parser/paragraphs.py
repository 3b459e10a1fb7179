"""Paragraph splitting and structural filtering.

Paragraphs are separated by one or more blank lines. Separators, code
fences, prompt/reply dumps and the title banner never reach the classifier.
"""

import re

_PARAGRAPH_BREAK = re.compile(r"\n\n+")

_DROP_PREFIXES = (
    "```",
    "---",
    "#### ",  # prompt dump sub-sections
    "[仅狼人可见]",
    "[WEREWOLVES",
    "[Previous",
    # Non-content headers
    "# 🐺",
    "**游戏ID**",
    "**开始时间**",
)

_DROP_MARKERS = (
    "**提示词**",
    "**回复**",
    "Moderator:",
    "讨论要点",
    "reach_agreement",
)


def is_structural_noise(paragraph: str) -> bool:
    """True for trimmed paragraphs that carry no replay content."""
    if not paragraph:
        return True
    if paragraph.startswith(_DROP_PREFIXES):
        return True
    return any(marker in paragraph for marker in _DROP_MARKERS)


def iter_raw_paragraphs(text: str) -> list[str]:
    """Split on blank-line runs and trim, keeping empty chunks out."""
    if not text:
        return []
    chunks = _PARAGRAPH_BREAK.split(text.replace("\r\n", "\n"))
    return [c.strip() for c in chunks if c.strip()]


def split_paragraphs(text: str) -> list[str]:
    """Return the ordered content paragraphs of a markdown log."""
    return [p for p in iter_raw_paragraphs(text) if not is_structural_noise(p)]
