import sys
from pathlib import Path

import pytest

# Add project root to sys.path
ROOT_DIR = Path(__file__).parents[1]
sys.path.insert(0, str(ROOT_DIR))


@pytest.fixture(autouse=True)
def _no_env_dry_run(monkeypatch):
    monkeypatch.delenv("ORGANIZE_DRY_RUN", raising=False)


@pytest.fixture
def make_files(tmp_path):
    def _make(*names):
        for name in names:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(name, encoding="utf-8")
        return tmp_path
    return _make
