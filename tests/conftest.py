"""Pytest configuration and fixtures for claude-commander tests."""

import json
import threading
from pathlib import Path
from typing import Any

import pytest

from claude_commander.bridge.events import BridgeEvent


class RecordingPublisher:
    """Publisher that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[BridgeEvent] = []
        self._lock = threading.Lock()
        self._received = threading.Event()

    def publish(self, event: BridgeEvent) -> None:
        with self._lock:
            self.events.append(event)
        self._received.set()

    @property
    def event_types(self) -> list[str]:
        with self._lock:
            return [event.event_type for event in self.events]

    def wait_for_event(self, timeout: float = 5.0) -> bool:
        return self._received.wait(timeout)


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """Path to a settings.json inside a not-yet-created .claude directory."""
    return tmp_path / ".claude" / "settings.json"


@pytest.fixture
def write_settings(settings_path: Path):
    """Write a settings document (dict or raw text) to ``settings_path``."""

    def _write(document: Any) -> Path:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(document, str):
            settings_path.write_text(document, encoding="utf-8")
        else:
            settings_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return settings_path

    return _write


@pytest.fixture
def read_settings(settings_path: Path):
    """Load ``settings_path`` back as JSON."""

    def _read() -> Any:
        return json.loads(settings_path.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()
