"""Pytest configuration to make the local package importable without installation."""
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import studiodesk.assistant.engine as engine
from studiodesk.storage import MemoryStore, Repository
from studiodesk.store import Notifier, Store


@pytest.fixture(autouse=True)
def disable_ai(monkeypatch: pytest.MonkeyPatch) -> None:
    """Disable remote LLM calls during tests to avoid token usage."""

    monkeypatch.setenv("AI_ASSISTANT_DISABLED", "1")
    monkeypatch.setattr(engine, "_AI_ENV_LOADED", True)


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def repository(memory_store: MemoryStore) -> Repository:
    """Repository over an empty in-memory store, so it loads the bundled data."""

    return Repository(memory_store)


class FakeClock:
    def __init__(self) -> None:
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(repository: Repository, clock: FakeClock) -> Store:
    return Store(repository, notifier=Notifier(ttl=3.0, clock=clock))
