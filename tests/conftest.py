from pathlib import Path

import pytest

from hyperkeys.config import clear_default_dir
from hyperkeys.storage import KeyStore


@pytest.fixture(autouse=True)
def _isolate_default_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    clear_default_dir()
    yield
    clear_default_dir()


@pytest.fixture()
def store_dir(tmp_path: Path) -> Path:
    path = tmp_path / "keys"
    path.mkdir()
    return path


@pytest.fixture()
def store(store_dir: Path) -> KeyStore:
    return KeyStore(store_dir)
