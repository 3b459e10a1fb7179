"""Tests for paragraph splitting and structural filtering."""

from wolfreplay.parser import split_paragraphs
from wolfreplay.parser.paragraphs import is_structural_noise


def test_split_on_blank_lines():
    text = "first\n\nsecond\n\n\n\nthird"
    assert split_paragraphs(text) == ["first", "second", "third"]


def test_single_newline_keeps_paragraph_together():
    text = "**夜晚结算**:\n- a\n- b"
    assert split_paragraphs(text) == ["**夜晚结算**:\n- a\n- b"]


def test_paragraphs_trimmed():
    assert split_paragraphs("   hello  \n\n\t world \n") == ["hello", "world"]


def test_crlf_line_endings():
    assert split_paragraphs("a\r\n\r\nb") == ["a", "b"]


def test_empty_and_whitespace_input():
    assert split_paragraphs("") == []
    assert split_paragraphs("  \n\n  \n") == []


def test_drops_separators_and_code_fences():
    text = "---\n\n```json\n{}\n```\n\n#### 提示词详情\n\nkeep me"
    assert split_paragraphs(text) == ["keep me"]


def test_drops_prompt_and_reply_dumps():
    text = "\n\n".join([
        "**提示词**: you are a werewolf",
        "**回复**: ok",
        "[仅狼人可见] secret",
        "[WEREWOLVES ONLY] plan",
        "[Previous round] summary",
        "Moderator: night falls",
        "讨论要点 1",
        "call reach_agreement",
        "kept",
    ])
    assert split_paragraphs(text) == ["kept"]


def test_drops_title_banner_and_metadata():
    text = "# 🐺 狼人杀游戏完整日志\n\n**游戏ID**: 1\n\n**开始时间**: now\n\n## 🔄 第 1 回合"
    assert split_paragraphs(text) == ["## 🔄 第 1 回合"]


def test_is_structural_noise():
    assert is_structural_noise("")
    assert is_structural_noise("---")
    assert not is_structural_noise("🎭 **主持人**: 天亮了")
