import shutil
from pathlib import Path

import pytest

from wolfreplay import storage

TEST_DATA_DIR = Path("data-tests")

SAMPLE_LOG = """# 🐺 狼人杀游戏完整日志

**游戏ID**: 20250101_120000

**开始时间**: 2025-01-01 12:00:00

---

## 📋 角色分配

| 玩家 | 角色 |
|------|------|
| Player1 | werewolf |
| Player2 | seer |
| Player3 | witch |
| Player4 | villager |

---

## 🔄 第 1 回合

### 🌙 夜晚阶段

🎭 **主持人**: 天黑请闭眼

### 🤝 狼人密谋

🐺 **Player1**: 我们先刀 Player2

- **Player1** 投票: Player2

**狼人决定击杀**: Player2 (一致同意)

**预言家查验**: Player1 → 狼人

**夜晚结算**:
- 狼人击杀 Player2
- 女巫毒杀 Player1

### ☀️ 白天讨论

**[Player3]** (第1轮): 昨晚我用了毒药

**[Player3]** (第1轮): 昨晚我用了毒药

🔮 **Player2**: 💭 [仅Player2可见] 我已经出局了

- Player3 → Player4

**投票结果**: Player4 被淘汰 (2票)

**[Player4 遗言]**: 我是好人

---

## 🏆 游戏结束

**胜利者**: 好人阵营

**存活玩家**: Player3
"""


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-init data-tests/ before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    (TEST_DATA_DIR / "logs").mkdir(parents=True)
    storage.init_storage(TEST_DATA_DIR)
    yield
    # leave data-tests around after tests for inspection; CI can ignore it


@pytest.fixture
def write_game():
    """Write a transcript for a game id under the test logs dir."""
    def _write(game_id: str, content: str = SAMPLE_LOG, filename: str = "full_log.md") -> Path:
        game_dir = storage.logs_dir() / game_id
        game_dir.mkdir(parents=True, exist_ok=True)
        path = game_dir / filename
        path.write_text(content, encoding="utf-8")
        return path
    return _write
