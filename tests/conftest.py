from __future__ import annotations

from pathlib import Path
import sys

import pytest
from pydantic import BaseModel, Field


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


class PluginEntry(BaseModel):
    enabled: bool = True
    priority: int = 0


class LauncherSettings(BaseModel):
    hotkey: str = "alt+space"
    max_results: int = 4
    theme: str | None = None
    plugins: dict[str, PluginEntry] = Field(default_factory=dict)


class RequiredFieldShape(BaseModel):
    name: str


class FakeHandle:
    def __init__(self, clear_cache: bool):
        self.clear_cache = clear_cache
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1


class FakeVersionGate:
    """
    Records every open() and hands out handles with a fixed clear_cache decision.
    """

    def __init__(self, clear_cache: bool = False):
        self.clear_cache = clear_cache
        self.opened: list[tuple[Path, int]] = []
        self.handles: list[FakeHandle] = []

    def open(self, file_path: Path, kind: int) -> FakeHandle:
        self.opened.append((file_path, kind))
        handle = FakeHandle(self.clear_cache)
        self.handles.append(handle)
        return handle


@pytest.fixture
def gate() -> FakeVersionGate:
    return FakeVersionGate()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "Settings" / "LauncherSettings.json"


@pytest.fixture
def make_store(store_path: Path, gate: FakeVersionGate):
    from typed_storage import JsonStorage, PydanticSerializer

    def _make(shape=LauncherSettings, version_gate=None):
        return JsonStorage(store_path, PydanticSerializer(shape), version_gate or gate)

    return _make


def backups_of(path: Path) -> list[Path]:
    return sorted(p for p in path.parent.glob(f"{path.stem}-*{path.suffix}"))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "TYPED_STORAGE_DATA_DIR",
        "TYPED_STORAGE_APP_VERSION",
        "TYPED_STORAGE_MIN_COMPATIBLE_VERSION",
        "TYPED_STORAGE_LOG_LEVEL",
        "TYPED_STORAGE_LOG_FILE",
    ):
        # setenv first so teardown also removes values load_dotenv() adds
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch
