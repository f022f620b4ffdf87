# tests/conftest.py

import pytest

from taskboard.app import App
from taskboard.storage import TaskStorage
from taskboard.store import TaskStore

from .fakes import CountingSlot

TODAY = "19/10/2026"


def fixed_clock() -> str:
    return TODAY


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TASKBOARD_DIR", "TASKBOARD_KEY", "TASKBOARD_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture()
def slot() -> CountingSlot:
    return CountingSlot()


@pytest.fixture()
def storage(slot) -> TaskStorage:
    return TaskStorage(slot)


@pytest.fixture()
def store(storage) -> TaskStore:
    """Empty store with a pinned creation date"""
    return TaskStore(storage, clock=fixed_clock)


@pytest.fixture()
def app(storage) -> App:
    """Started app on an empty slot, so it runs with the seed tasks"""
    return App(storage, clock=fixed_clock).start()
