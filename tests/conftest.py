import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def isolated_dungeon_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DUNGEON_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DUNGEON_NAMES_STRICT", raising=False)
