from __future__ import annotations

from datetime import datetime

import pytest

from src.frontdesk.frontdesk.container import build_container
from src.frontdesk.frontdesk.database.memory_store import MemoryStore
from src.frontdesk.frontdesk.main import create_app


class RecordingNotifier:
    """Captures notify() calls instead of pushing anywhere."""

    def __init__(self):
        self.calls = []

    def notify(self, kind, *snapshots):
        self.calls.append((kind, snapshots))


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 10, 0, 0)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def container(notifier):
    return build_container(notifier=notifier)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
