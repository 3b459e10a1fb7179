"""Tests for game log discovery and transcript loading."""

import json
import shutil

from conftest import SAMPLE_LOG

from wolfreplay import storage


def test_list_game_ids_empty():
    assert storage.list_game_ids() == []


def test_list_game_ids_newest_first(write_game):
    write_game("20250101_120000")
    write_game("20250301_090000")
    write_game("20250201_180000")
    assert storage.list_game_ids() == [
        "20250301_090000",
        "20250201_180000",
        "20250101_120000",
    ]


def test_directories_without_transcript_ignored(write_game):
    write_game("20250101_120000")
    (storage.logs_dir() / "20250102_120000").mkdir()
    (storage.logs_dir() / "stray.md").write_text("not a game")
    assert storage.list_game_ids() == ["20250101_120000"]


def test_get_game_content(write_game):
    write_game("20250101_120000")
    assert storage.get_game_content("20250101_120000") == SAMPLE_LOG


def test_get_game_content_missing():
    assert storage.get_game_content("nope") is None


def test_get_game_content_rejects_path_traversal(write_game):
    write_game("20250101_120000")
    assert storage.get_game_content("..") is None
    assert storage.get_game_content("../logs") is None
    assert storage.get_game_content("") is None


def test_list_games_summaries(write_game):
    write_game("20250101_120000")
    write_game("20250102_120000", "## 🔄 第 1 回合\n\n## 🔄 第 2 回合\n\n狼人阵营获胜")
    games = storage.list_games()
    assert [g.id for g in games] == ["20250102_120000", "20250101_120000"]
    assert games[0].winner == "werewolf"
    assert games[0].rounds == 2
    assert games[1].winner == "villager"
    assert games[1].rounds == 1


def test_custom_log_filename(write_game):
    storage.update_config({"log_filename": "replay.md"})
    write_game("20250101_120000")
    write_game("20250102_120000", "## 第 1 回合", filename="replay.md")
    assert storage.list_game_ids() == ["20250102_120000"]


def test_missing_logs_dir_is_soft():
    shutil.rmtree(storage.logs_dir())
    assert storage.logs_available() is False
    assert storage.list_game_ids() == []
    assert storage.list_games() == []
    assert storage.get_game_content("20250101_120000") is None


def test_unsafe_stored_log_filename_reads_nothing(write_game):
    write_game("g1")
    (storage.data_dir() / "secret.txt").write_text("TOP SECRET")
    (storage.data_dir() / "config.json").write_text(
        json.dumps({"log_filename": "../../secret.txt"})
    )
    assert storage.get_game_content("g1") is None
    assert storage.list_game_ids() == []
